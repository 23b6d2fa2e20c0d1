"""Error taxonomy for render resolution and conversion.

Resolution failures (RendererNotFound) mean a definition cannot be rendered
at all and always reach the caller. Presentation failures
(ComponentNotRegistered) are caught by the converter and degrade to a
visible fallback node. Exceptions raised inside a renderer are not wrapped.
"""

from typing import Any


class RenderError(Exception):
    """Base class for errors raised by schema-render itself."""


class RendererNotFound(RenderError, LookupError):
    """No renderer is registered for a (category, type) pair."""

    def __init__(self, category: str, type: str):
        self.category = category
        self.type = type
        super().__init__(f"No {category} renderer found for type '{type}'")


class ComponentNotRegistered(RenderError, LookupError):
    """A descriptor names a component that the component map does not hold."""

    def __init__(self, component: Any):
        self.component = component
        super().__init__(f"Component not registered: {component}")
