"""Category registry - maps renderer types to renderers for one category.

Follows the registry pattern used across the package:
- In-memory dict keyed by type
- One instance per category, created empty
- Re-registering a type replaces the previous entry (last writer wins)
- clear() resets the registry for test isolation
"""

import logging
import threading
from typing import Optional, Union

from ..config import get_settings
from .schemas import (
    LazyRenderer,
    Renderer,
    RendererCategory,
    RendererRegistration,
    RegistryEntry,
)

logger = logging.getLogger(__name__)


class CategoryRegistry:
    """Registry of renderers for a single render category."""

    def __init__(self, category: Union[RendererCategory, str]):
        self.category = RendererCategory(category)
        self._entries: dict[str, RegistryEntry] = {}
        self._registrations: dict[str, RendererRegistration] = {}
        self._lock = threading.Lock()

    def register(self, type: str, renderer: RegistryEntry) -> None:
        """Store a renderer (or lazy entry) under type, replacing any previous one."""
        if not isinstance(renderer, (Renderer, LazyRenderer)):
            raise TypeError(
                f"Cannot register {type!r}: expected a Renderer or LazyRenderer, "
                f"got {renderer.__class__.__name__}"
            )
        if renderer.category != self.category:
            raise ValueError(
                f"Cannot register {renderer.category.value} renderer '{type}' "
                f"in the {self.category.value} registry"
            )

        with self._lock:
            previous = self._entries.get(type)
            self._entries[type] = renderer
            if isinstance(renderer, Renderer):
                self._registrations[type] = RendererRegistration(renderer)
            else:
                self._registrations.pop(type, None)

        if previous is not None and previous is not renderer and get_settings().warn_on_override:
            logger.warning(
                f"{self.category.value} renderer '{type}' replaced: "
                f"{previous!r} -> {renderer!r}"
            )
        logger.debug(f"Registered {self.category.value} renderer: {type}")

    def get(self, type: str) -> Optional[RegistryEntry]:
        """Get the entry registered under type, or None."""
        return self._entries.get(type)

    def get_registration(self, type: str) -> Optional[RendererRegistration]:
        """Get the registration for a concrete (or already resolved lazy) entry."""
        registration = self._registrations.get(type)
        if registration is not None:
            return registration
        entry = self._entries.get(type)
        if isinstance(entry, LazyRenderer):
            return entry.registration
        return None

    def get_types(self) -> set[str]:
        """Registered type keys."""
        return set(self._entries)

    def has(self, type: str) -> bool:
        return type in self._entries

    def unregister(self, type: str) -> bool:
        """Remove a type. Returns False when it was not registered."""
        with self._lock:
            if type not in self._entries:
                return False
            del self._entries[type]
            self._registrations.pop(type, None)
        logger.debug(f"Unregistered {self.category.value} renderer: {type}")
        return True

    def count(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        """Reset to empty."""
        with self._lock:
            self._entries.clear()
            self._registrations.clear()

    def __contains__(self, type: str) -> bool:
        return type in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"CategoryRegistry({self.category.value!r}, types={sorted(self._entries)})"
