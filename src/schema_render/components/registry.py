"""Component registry - the component map consulted during conversion.

Maps a descriptor's component identifier to a component factory owned by
the UI-toolkit binding. A factory is called as
``factory(props, children, key)`` and returns a concrete element.

The map is mutable at runtime (hot registration); the converter reads it on
every call, so additions are visible on the next conversion.
"""

import logging
import threading
from collections.abc import Mapping
from typing import Any, Callable, Optional, Union

from ..errors import ComponentNotRegistered

logger = logging.getLogger(__name__)

ComponentFactory = Callable[[dict[str, Any], list[Any], Optional[Union[str, int]]], Any]


class ComponentRegistry:
    """Registry of component factories keyed by component id."""

    def __init__(self, components: Optional[Mapping[str, ComponentFactory]] = None):
        self._components: dict[str, ComponentFactory] = {}
        self._lock = threading.Lock()
        if components:
            self.register_components(components)

    def register_component(self, id: str, component: ComponentFactory) -> None:
        """Register (or replace) the factory for a component id."""
        if not callable(component):
            raise TypeError(f"Component '{id}' must be callable, got {type(component).__name__}")
        with self._lock:
            self._components[id] = component
        logger.debug(f"Registered component: {id}")

    def register_components(self, components: Mapping[str, ComponentFactory]) -> None:
        """Register several components at once."""
        for id, component in components.items():
            self.register_component(id, component)

    def get_component(self, id: str) -> Optional[ComponentFactory]:
        """Get a component factory, or None."""
        return self._components.get(id)

    def require(self, id: str) -> ComponentFactory:
        """Get a component factory, raising ComponentNotRegistered on a miss."""
        component = self._components.get(id)
        if component is None:
            raise ComponentNotRegistered(id)
        return component

    def has(self, id: str) -> bool:
        return id in self._components

    def unregister(self, id: str) -> bool:
        with self._lock:
            return self._components.pop(id, None) is not None

    def list_ids(self) -> list[str]:
        """Registered component ids, sorted."""
        return sorted(self._components)

    def count(self) -> int:
        return len(self._components)

    def clear_components(self) -> None:
        """Remove every component (test isolation)."""
        with self._lock:
            self._components.clear()

    def __contains__(self, id: str) -> bool:
        return id in self._components

    def __len__(self) -> int:
        return len(self._components)
