"""Descriptor converter - materializes descriptor trees into concrete elements.

Conversion is recursive and depth-first with pre-order key assignment:
- literal text is returned unchanged
- None converts to None (nothing to render) and never raises
- the component is resolved against the component map on every call
- a child without a key gets "{parent_key}-child-{index}", or its
  positional index when the parent has no key
- an unknown component does not abort the tree: it becomes a visible
  fallback element and an error is logged
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Optional, Union

from ..descriptors import RenderDescriptor, is_text_node
from ..errors import ComponentNotRegistered
from ..html.elements import fallback_element
from .registry import ComponentFactory, ComponentRegistry

logger = logging.getLogger(__name__)

Key = Optional[Union[str, int]]
FallbackFactory = Callable[[str, Key], Any]


class DescriptorConverter:
    """Converts RenderDescriptor trees using a component registry."""

    def __init__(
        self,
        components: Optional[ComponentRegistry] = None,
        fallback_component: Optional[FallbackFactory] = None,
    ):
        self.components = components if components is not None else ComponentRegistry()
        self.fallback_component = fallback_component or fallback_element

    def convert(
        self,
        descriptor: Union[RenderDescriptor, Mapping[str, Any], str, None],
        key: Key = None,
    ) -> Any:
        """Convert one descriptor (and its subtree).

        Args:
            descriptor: Descriptor, descriptor mapping, literal text, or None
            key: Key to use when the descriptor does not carry one
        """
        if is_text_node(descriptor):
            return descriptor
        if descriptor is None:
            return None
        if isinstance(descriptor, Mapping):
            descriptor = RenderDescriptor.model_validate(dict(descriptor))

        resolved_key = descriptor.key if descriptor.key is not None else key

        try:
            component = self._resolve(descriptor.component)
        except ComponentNotRegistered as e:
            logger.error(f"Component not registered: {e.component}")
            return self.fallback_component(str(e.component), resolved_key)

        children = [
            self.convert(child, key=_child_key(resolved_key, index))
            for index, child in enumerate(descriptor.children)
        ]
        return component(dict(descriptor.props), children, resolved_key)

    def convert_many(
        self,
        descriptors: Sequence[Union[RenderDescriptor, Mapping[str, Any], str, None]],
    ) -> list[Any]:
        """Convert a top-level sequence, preserving order and length.

        Items without a key get "batch-{index}".
        """
        return [
            self.convert(descriptor, key=f"batch-{index}")
            for index, descriptor in enumerate(descriptors)
        ]

    def _resolve(self, component: Any) -> ComponentFactory:
        if isinstance(component, str):
            return self.components.require(component)
        if callable(component):
            return component
        raise ComponentNotRegistered(component)


def _child_key(parent_key: Key, index: int) -> Union[str, int]:
    if parent_key is None:
        return index
    return f"{parent_key}-child-{index}"
