"""Render engine - the single façade over all category registries.

The engine resolves a definition to a renderer through the category's
loader, invokes it, and returns the resulting RenderDescriptor. It does not
convert descriptors to UI elements (see schema_render.components) and it
does not catch renderer exceptions: they reach the caller unmodified.
"""

import asyncio
import inspect
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Awaitable, Callable, Optional, Union

from ..config import RenderSettings, get_settings
from ..definitions import BaseDefinition, RenderContext
from ..descriptors import RenderDescriptor
from ..renderers import (
    CategoryLoader,
    CategoryRegistry,
    CategoryStats,
    LazyRenderer,
    Renderer,
    RendererCategory,
    RendererRegistration,
    RendererStats,
    coerce_definition,
)
from .schemas import RenderRequest

logger = logging.getLogger(__name__)

Definition = Union[BaseDefinition, Mapping[str, Any]]
CategoryLike = Union[RendererCategory, str]


class RenderEngine:
    """Holds one registry and loader per category and exposes the render entry points.

    Usage:
        engine = RenderEngine()
        register_builtin_renderers(engine)
        descriptor = engine.render_data({"type": "number"}, 1234.5, context)
    """

    def __init__(self, settings: Optional[RenderSettings] = None):
        self.settings = settings or get_settings()
        self._registries: dict[RendererCategory, CategoryRegistry] = {
            category: CategoryRegistry(category) for category in RendererCategory
        }
        self._loaders: dict[RendererCategory, CategoryLoader] = {
            category: CategoryLoader(registry)
            for category, registry in self._registries.items()
        }

    # -- Registries and loaders --

    def registry(self, category: CategoryLike) -> CategoryRegistry:
        """The registry for a category."""
        return self._registries[RendererCategory(category)]

    def loader(self, category: CategoryLike) -> CategoryLoader:
        """The loader for a category."""
        return self._loaders[RendererCategory(category)]

    # -- Registration --

    def register_renderer(self, renderer: Union[Renderer, LazyRenderer]) -> None:
        """Register a renderer in the registry matching its declared category."""
        if not isinstance(renderer, (Renderer, LazyRenderer)):
            raise TypeError(
                f"Expected a Renderer or LazyRenderer, got {type(renderer).__name__}"
            )
        if not renderer.type:
            raise ValueError(f"Renderer {renderer!r} does not declare a type")
        self.registry(renderer.category).register(renderer.type, renderer)

    def register_renderers(self, renderers: Iterable[Union[Renderer, LazyRenderer]]) -> None:
        """Register several renderers."""
        for renderer in renderers:
            self.register_renderer(renderer)

    def register_lazy(
        self,
        category: CategoryLike,
        type: str,
        factory: Callable[[], Union[Renderer, Awaitable[Renderer]]],
    ) -> LazyRenderer:
        """Register a renderer that is produced by factory on first use."""
        lazy = LazyRenderer(category, type, factory)
        self.register_renderer(lazy)
        return lazy

    def get_renderer(self, category: CategoryLike, type: str) -> Optional[Union[Renderer, LazyRenderer]]:
        """Get the entry registered for (category, type)."""
        return self.registry(category).get(type)

    def get_registration(self, category: CategoryLike, type: str) -> Optional[RendererRegistration]:
        """Get the registration (renderer plus native capability) for (category, type)."""
        return self.registry(category).get_registration(type)

    def has_renderer(self, category: CategoryLike, type: str) -> bool:
        return self.registry(category).has(type)

    def clear_renderers(self, category: Optional[CategoryLike] = None) -> None:
        """Clear one category, or every category when none is given."""
        if category is not None:
            self.registry(category).clear()
            return
        for registry in self._registries.values():
            registry.clear()

    # -- Rendering --

    def render(
        self,
        category: CategoryLike,
        definition: Definition,
        value: Any = None,
        context: Optional[RenderContext] = None,
    ) -> RenderDescriptor:
        """Resolve and invoke a synchronous renderer.

        In edit mode (context.mode == "edit") a renderer's render_edit is
        used in place of render when it has one.

        Raises:
            RendererNotFound: no renderer for the definition's type
            TypeError: the renderer is asynchronous (use arender)
        """
        category = RendererCategory(category)
        definition = coerce_definition(category, definition)
        registration = self._loaders[category].resolve(definition, context)
        result = registration.render_for(context)(definition, value, context)
        if inspect.isawaitable(result):
            if inspect.iscoroutine(result):
                result.close()
            raise TypeError(
                f"{category.value} renderer '{definition.render_type}' is asynchronous; "
                f"use arender_{category.value}()"
            )
        return _as_descriptor(result)

    async def arender(
        self,
        category: CategoryLike,
        definition: Definition,
        value: Any = None,
        context: Optional[RenderContext] = None,
    ) -> RenderDescriptor:
        """Resolve and invoke a renderer, awaiting lazy loading and async renders."""
        category = RendererCategory(category)
        definition = coerce_definition(category, definition)
        registration = await self._loaders[category].aresolve(definition, context)
        result = registration.render_for(context)(definition, value, context)
        if inspect.isawaitable(result):
            result = await result
        return _as_descriptor(result)

    def render_view(self, definition: Definition, data: Any = None, context: Optional[RenderContext] = None) -> RenderDescriptor:
        return self.render(RendererCategory.VIEW, definition, data, context)

    def render_group(self, definition: Definition, data: Any = None, context: Optional[RenderContext] = None) -> RenderDescriptor:
        return self.render(RendererCategory.GROUP, definition, data, context)

    def render_field(self, definition: Definition, value: Any = None, context: Optional[RenderContext] = None) -> RenderDescriptor:
        return self.render(RendererCategory.FIELD, definition, value, context)

    def render_data(self, definition: Definition, value: Any = None, context: Optional[RenderContext] = None) -> RenderDescriptor:
        return self.render(RendererCategory.DATA, definition, value, context)

    def render_action(self, definition: Definition, context: Optional[RenderContext] = None) -> RenderDescriptor:
        return self.render(RendererCategory.ACTION, definition, None, context)

    async def arender_view(self, definition: Definition, data: Any = None, context: Optional[RenderContext] = None) -> RenderDescriptor:
        return await self.arender(RendererCategory.VIEW, definition, data, context)

    async def arender_group(self, definition: Definition, data: Any = None, context: Optional[RenderContext] = None) -> RenderDescriptor:
        return await self.arender(RendererCategory.GROUP, definition, data, context)

    async def arender_field(self, definition: Definition, value: Any = None, context: Optional[RenderContext] = None) -> RenderDescriptor:
        return await self.arender(RendererCategory.FIELD, definition, value, context)

    async def arender_data(self, definition: Definition, value: Any = None, context: Optional[RenderContext] = None) -> RenderDescriptor:
        return await self.arender(RendererCategory.DATA, definition, value, context)

    async def arender_action(self, definition: Definition, context: Optional[RenderContext] = None) -> RenderDescriptor:
        return await self.arender(RendererCategory.ACTION, definition, None, context)

    async def render_many(
        self,
        items: Iterable[Union[RenderRequest, Mapping[str, Any]]],
        context: Optional[RenderContext] = None,
    ) -> list[RenderDescriptor]:
        """Render a batch concurrently. Result i corresponds to item i.

        The first failure propagates (asyncio.gather semantics).
        """
        requests = [
            item if isinstance(item, RenderRequest) else RenderRequest.model_validate(item)
            for item in items
        ]
        results = await asyncio.gather(*(
            self.arender(r.category, r.definition, r.value, r.context or context)
            for r in requests
        ))
        return list(results)

    # -- Diagnostics --

    def get_renderer_stats(self) -> RendererStats:
        """Count and types of registered renderers per category."""
        return RendererStats(
            categories={
                category.value: CategoryStats(
                    count=registry.count(),
                    types=sorted(registry.get_types()),
                )
                for category, registry in self._registries.items()
            }
        )

    def get_available_types(self, category: CategoryLike) -> set[str]:
        """Registered types for a category."""
        return self.registry(category).get_types()

    # -- Context --

    def create_context(self, **values: Any) -> RenderContext:
        """Build a RenderContext, defaulting the locale from settings."""
        values.setdefault("locale", self.settings.default_locale)
        return RenderContext(**values)


def _as_descriptor(result: Any) -> RenderDescriptor:
    if isinstance(result, Mapping):
        return RenderDescriptor.model_validate(dict(result))
    return result


# Global engine instance
_engine: Optional[RenderEngine] = None


def get_default_engine() -> RenderEngine:
    """Get the process default engine, constructing it (empty) on first use."""
    global _engine
    if _engine is None:
        _engine = RenderEngine()
        logger.info("Created default render engine")
    return _engine


def reset_default_engine() -> None:
    """Drop the process default engine."""
    global _engine
    _engine = None
