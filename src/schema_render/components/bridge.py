"""Render bridge - resolves, renders and converts in one call.

For each request the bridge resolves the renderer once, calls its native
fast path when the registration has one, and otherwise converts the
renderer's descriptor through the DescriptorConverter. Batches run
concurrently and keep input order.
"""

import asyncio
import inspect
import logging
from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union

from ..definitions import BaseDefinition, RenderContext
from ..engine import RenderEngine, RenderRequest, get_default_engine
from ..renderers import RendererCategory, RendererRegistration, coerce_definition
from .converter import DescriptorConverter

logger = logging.getLogger(__name__)

Definition = Union[BaseDefinition, Mapping[str, Any]]
Key = Optional[Union[str, int]]


class RenderBridge:
    """Binds a RenderEngine to a DescriptorConverter.

    Usage:
        bridge = RenderBridge(engine, DescriptorConverter(create_default_component_map()))
        element = await bridge.render("data", {"type": "string"}, "abc")
    """

    def __init__(
        self,
        engine: Optional[RenderEngine] = None,
        converter: Optional[DescriptorConverter] = None,
    ):
        self.engine = engine if engine is not None else get_default_engine()
        self.converter = converter if converter is not None else DescriptorConverter()

    async def render(
        self,
        category: Union[RendererCategory, str],
        definition: Definition,
        value: Any = None,
        context: Optional[RenderContext] = None,
        key: Key = None,
    ) -> Any:
        """Render one definition to a concrete element.

        Raises:
            RendererNotFound: no renderer for the definition's type
        """
        category = RendererCategory(category)
        definition = coerce_definition(category, definition)
        registration = await self.engine.loader(category).aresolve(definition, context)
        if registration.has_native:
            result = registration.native(definition, value, context)
            if inspect.isawaitable(result):
                result = await result
            return result
        descriptor = registration.render_for(context)(definition, value, context)
        if inspect.isawaitable(descriptor):
            descriptor = await descriptor
        return self.converter.convert(descriptor, key=key)

    def render_sync(
        self,
        category: Union[RendererCategory, str],
        definition: Definition,
        value: Any = None,
        context: Optional[RenderContext] = None,
        key: Key = None,
    ) -> Any:
        """Synchronous render for synchronous renderers.

        Raises:
            TypeError: the renderer, its native path or its lazy factory is asynchronous
        """
        category = RendererCategory(category)
        definition = coerce_definition(category, definition)
        registration = self.engine.loader(category).resolve(definition, context)
        if registration.has_native:
            return _reject_awaitable(
                registration.native(definition, value, context), registration
            )
        descriptor = _reject_awaitable(
            registration.render_for(context)(definition, value, context), registration
        )
        return self.converter.convert(descriptor, key=key)

    async def render_many(
        self,
        category: Union[RendererCategory, str],
        items: Iterable[Union[tuple[Definition, Any], Mapping[str, Any]]],
        context: Optional[RenderContext] = None,
    ) -> list[Any]:
        """Render many definitions of one category. Result i corresponds to item i.

        Items are (definition, value) pairs or {"definition": ..., "value": ...}
        mappings. Items without a key get "batch-{index}".
        """
        pairs = [_as_pair(item) for item in items]
        results = await asyncio.gather(*(
            self.render(category, definition, value, context, key=f"batch-{index}")
            for index, (definition, value) in enumerate(pairs)
        ))
        return list(results)

    async def render_batch(
        self,
        requests: Iterable[Union[RenderRequest, Mapping[str, Any]]],
        context: Optional[RenderContext] = None,
    ) -> list[Any]:
        """Render a mixed-category batch. Result i corresponds to request i."""
        parsed = [
            r if isinstance(r, RenderRequest) else RenderRequest.model_validate(r)
            for r in requests
        ]
        logger.debug(f"Rendering batch of {len(parsed)} requests")
        results = await asyncio.gather(*(
            self.render(r.category, r.definition, r.value, r.context or context, key=f"batch-{index}")
            for index, r in enumerate(parsed)
        ))
        return list(results)


def _as_pair(item: Any) -> tuple[Definition, Any]:
    if isinstance(item, Mapping) and "definition" in item:
        return item["definition"], item.get("value")
    if isinstance(item, tuple) and len(item) == 2:
        return item
    raise TypeError(
        f"Expected a (definition, value) pair or a mapping with 'definition', "
        f"got {type(item).__name__}"
    )


def _reject_awaitable(result: Any, registration: RendererRegistration) -> Any:
    if inspect.isawaitable(result):
        if inspect.iscoroutine(result):
            result.close()
        raise TypeError(
            f"{registration.renderer!r} renders asynchronously; use RenderBridge.render()"
        )
    return result
