"""schema-render - framework-agnostic render resolution.

Application code describes what to render through typed definitions:
- Definitions (views, groups, fields, data values, actions)
- Renderers resolved per category from independent registries
- Render descriptors, a serializable intermediate tree
- A conversion layer that binds descriptors to concrete UI elements
"""

from .builtins import register_builtin_renderers
from .components import ComponentRegistry, DescriptorConverter, RenderBridge
from .descriptors import RenderDescriptor
from .engine import RenderEngine, get_default_engine
from .errors import ComponentNotRegistered, RenderError, RendererNotFound
from .renderers import RendererCategory

__version__ = "0.1.0"

__all__ = [
    "ComponentNotRegistered",
    "ComponentRegistry",
    "DescriptorConverter",
    "RenderBridge",
    "RenderDescriptor",
    "RenderEngine",
    "RenderError",
    "RendererCategory",
    "RendererNotFound",
    "get_default_engine",
    "register_builtin_renderers",
]
