"""HTML binding - a concrete UI toolkit for converted descriptors.

Elements are plain pydantic values that serialize to escaped HTML. Use
create_default_component_map() to get a component registry covering the
standard tags, then convert with schema_render.components.DescriptorConverter.
"""

from .boundary import aerror_boundary, error_boundary, error_element
from .defaults import (
    create_default_component_map,
    get_component_registry,
    reset_component_registry,
)
from .elements import (
    FALLBACK_STYLE,
    HTML_TAGS,
    VOID_TAGS,
    Element,
    fallback_element,
    html_component,
    is_fallback,
    render_html,
)

__all__ = [
    "Element",
    "FALLBACK_STYLE",
    "HTML_TAGS",
    "VOID_TAGS",
    "aerror_boundary",
    "create_default_component_map",
    "error_boundary",
    "error_element",
    "fallback_element",
    "get_component_registry",
    "html_component",
    "is_fallback",
    "render_html",
    "reset_component_registry",
]
