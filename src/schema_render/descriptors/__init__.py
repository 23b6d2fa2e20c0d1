"""Render descriptors - the framework-independent intermediate tree.

Renderers return descriptors; the conversion layer turns them into concrete
UI elements. A descriptor never points back at the definition or renderer
that produced it.
"""

from .schemas import DescriptorChild, RenderDescriptor, is_text_node

__all__ = ["DescriptorChild", "RenderDescriptor", "is_text_node"]
