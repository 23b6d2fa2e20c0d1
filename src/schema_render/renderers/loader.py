"""Category loader - resolves a definition to exactly one renderer.

The loader is a lookup step over a CategoryRegistry. It adds no caching of
its own and never returns a partial result: either a renderer is found for
the definition's dispatch key or RendererNotFound is raised.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from ..definitions import BaseDefinition, RenderContext
from ..errors import RendererNotFound
from .registry import CategoryRegistry
from .schemas import LazyRenderer, Renderer, RendererRegistration, coerce_definition

logger = logging.getLogger(__name__)


class CategoryLoader:
    """Resolves definitions against one category registry."""

    def __init__(self, registry: CategoryRegistry):
        self.registry = registry

    @property
    def category(self):
        return self.registry.category

    def dispatch_key(self, definition: Union[BaseDefinition, Mapping[str, Any]]) -> str:
        """The registry key a definition resolves through (type, or layout for fields)."""
        return coerce_definition(self.category, definition).render_type

    def resolve(
        self,
        definition: Union[BaseDefinition, Mapping[str, Any]],
        context: Optional[RenderContext] = None,
    ) -> RendererRegistration:
        """Resolve synchronously to a registration."""
        key = self.dispatch_key(definition)
        entry = self.registry.get(key)
        if entry is None:
            raise RendererNotFound(self.category.value, key)
        if isinstance(entry, LazyRenderer):
            return entry.resolve()
        return self.registry.get_registration(key) or RendererRegistration(entry)

    async def aresolve(
        self,
        definition: Union[BaseDefinition, Mapping[str, Any]],
        context: Optional[RenderContext] = None,
    ) -> RendererRegistration:
        """Resolve to a registration, awaiting lazy entries with async factories."""
        key = self.dispatch_key(definition)
        entry = self.registry.get(key)
        if entry is None:
            raise RendererNotFound(self.category.value, key)
        if isinstance(entry, LazyRenderer):
            if not entry.is_resolved:
                logger.debug(f"Resolving lazy {self.category.value} renderer: {key}")
            return await entry.aresolve()
        return self.registry.get_registration(key) or RendererRegistration(entry)

    def load(
        self,
        definition: Union[BaseDefinition, Mapping[str, Any]],
        context: Optional[RenderContext] = None,
    ) -> Renderer:
        """Get the renderer for a definition. Raises RendererNotFound on a miss."""
        return self.resolve(definition, context).renderer

    async def aload(
        self,
        definition: Union[BaseDefinition, Mapping[str, Any]],
        context: Optional[RenderContext] = None,
    ) -> Renderer:
        """Async variant of load()."""
        registration = await self.aresolve(definition, context)
        return registration.renderer
