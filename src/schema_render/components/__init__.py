"""Components - the component map and descriptor conversion.

The registry must load before the converter: the converter's default
fallback comes from the HTML binding, which builds on the registry.
"""

from .registry import ComponentFactory, ComponentRegistry
from .converter import DescriptorConverter
from .bridge import RenderBridge

__all__ = [
    "ComponentFactory",
    "ComponentRegistry",
    "DescriptorConverter",
    "RenderBridge",
]
