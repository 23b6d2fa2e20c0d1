"""Renderer schemas - the closed set of render categories and renderer variants.

Categories are a closed enum; renderer types are open strings. A renderer is
identified by the pair (category, type). Every renderer produces a
RenderDescriptor from (definition, value, context); a renderer may also offer
a native fast path that returns a concrete UI element directly. That
capability is captured once, at registration, in a RendererRegistration.
"""

import inspect
from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import Enum
from typing import Any, Awaitable, Callable, ClassVar, Optional, Union

from pydantic import BaseModel, Field

from ..definitions import (
    ActionDefinition,
    BaseDefinition,
    DataDefinition,
    FieldDefinition,
    GroupDefinition,
    RenderContext,
    ViewDefinition,
)
from ..descriptors import RenderDescriptor


class RendererCategory(str, Enum):
    """The five render kinds, each with its own registry."""
    VIEW = "view"
    GROUP = "group"
    FIELD = "field"
    DATA = "data"
    ACTION = "action"


DEFINITION_MODELS: dict[RendererCategory, type[BaseDefinition]] = {
    RendererCategory.VIEW: ViewDefinition,
    RendererCategory.GROUP: GroupDefinition,
    RendererCategory.FIELD: FieldDefinition,
    RendererCategory.DATA: DataDefinition,
    RendererCategory.ACTION: ActionDefinition,
}


def coerce_definition(
    category: Union[RendererCategory, str],
    definition: Union[BaseDefinition, Mapping[str, Any]],
) -> BaseDefinition:
    """Return a definition model for the category.

    Models are returned as-is; mappings are validated into the category's
    model (a copy, the caller's mapping is never touched).
    """
    if isinstance(definition, BaseDefinition):
        return definition
    if isinstance(definition, Mapping):
        model = DEFINITION_MODELS[RendererCategory(category)]
        return model.model_validate(dict(definition))
    raise TypeError(
        f"Expected a definition model or mapping, got {type(definition).__name__}"
    )


RenderResult = Union[RenderDescriptor, Awaitable[RenderDescriptor]]


class Renderer(ABC):
    """Base for all renderers.

    Subclasses set ``type`` and implement ``render``. ``render`` may be a
    coroutine function; the engine's async entry points await it. Define a
    ``render_native`` method to offer a fast path that skips descriptor
    conversion. Define a ``render_edit`` method, with the same signature as
    ``render``, to be used instead of ``render`` when the context mode is
    "edit".
    """

    category: ClassVar[RendererCategory]
    type: str = ""

    render_native: Optional[Callable[..., Any]] = None
    render_edit: Optional[Callable[..., Any]] = None

    @abstractmethod
    def render(
        self,
        definition: BaseDefinition,
        value: Any,
        context: Optional[RenderContext],
    ) -> RenderResult:
        """Produce a descriptor for the definition and runtime value."""
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.category.value}:{self.type}>"


class ViewRenderer(Renderer):
    category = RendererCategory.VIEW


class GroupRenderer(Renderer):
    category = RendererCategory.GROUP


class FieldRenderer(Renderer):
    category = RendererCategory.FIELD


class DataRenderer(Renderer):
    category = RendererCategory.DATA

    def format(self, value: Any, definition: DataDefinition, context: Optional[RenderContext] = None) -> str:
        """Display text for a value. Override in concrete data renderers."""
        return "" if value is None else str(value)


class ActionRenderer(Renderer):
    category = RendererCategory.ACTION


class RendererRegistration:
    """A registered renderer plus the capabilities resolved when it was registered."""

    __slots__ = ("renderer", "native", "edit", "is_async")

    def __init__(self, renderer: Renderer):
        self.renderer = renderer
        native = getattr(renderer, "render_native", None)
        self.native: Optional[Callable[..., Any]] = native if callable(native) else None
        edit = getattr(renderer, "render_edit", None)
        self.edit: Optional[Callable[..., Any]] = edit if callable(edit) else None
        self.is_async = inspect.iscoroutinefunction(renderer.render)

    @property
    def has_native(self) -> bool:
        return self.native is not None

    @property
    def has_edit(self) -> bool:
        return self.edit is not None

    def render_for(self, context: Optional[RenderContext]) -> Callable[..., Any]:
        """The descriptor-producing callable for a context: render_edit in edit mode, else render."""
        if self.edit is not None and context is not None and context.mode == "edit":
            return self.edit
        return self.renderer.render

    def __repr__(self) -> str:
        return f"RendererRegistration({self.renderer!r}, native={self.has_native}, edit={self.has_edit})"


class LazyRenderer:
    """A registry entry whose renderer is produced on first resolution.

    The factory is a zero-argument callable returning a Renderer, or a
    coroutine function (for renderers loaded on demand). The resolved
    renderer is kept on this entry, so each factory runs at most once per
    successful resolution.
    """

    def __init__(
        self,
        category: Union[RendererCategory, str],
        type: str,
        factory: Callable[[], Union[Renderer, Awaitable[Renderer]]],
    ):
        self.category = RendererCategory(category)
        self.type = type
        self.factory = factory
        self._registration: Optional[RendererRegistration] = None

    @property
    def is_resolved(self) -> bool:
        return self._registration is not None

    @property
    def registration(self) -> Optional[RendererRegistration]:
        return self._registration

    def resolve(self) -> RendererRegistration:
        """Resolve synchronously. Raises TypeError for async factories."""
        if self._registration is not None:
            return self._registration
        if inspect.iscoroutinefunction(self.factory):
            raise TypeError(
                f"Lazy {self.category.value} renderer '{self.type}' has an async "
                f"factory; resolve it with aload()/aresolve()"
            )
        result = self.factory()
        if inspect.isawaitable(result):
            if inspect.iscoroutine(result):
                result.close()
            raise TypeError(
                f"Lazy {self.category.value} renderer '{self.type}' returned an "
                f"awaitable; resolve it with aload()/aresolve()"
            )
        return self._accept(result)

    async def aresolve(self) -> RendererRegistration:
        """Resolve, awaiting the factory when it is asynchronous."""
        if self._registration is not None:
            return self._registration
        result = self.factory()
        if inspect.isawaitable(result):
            result = await result
        return self._accept(result)

    def _accept(self, renderer: Any) -> RendererRegistration:
        if not isinstance(renderer, Renderer):
            raise TypeError(
                f"Lazy factory for '{self.type}' returned {type(renderer).__name__}, "
                f"expected a Renderer"
            )
        if renderer.category != self.category:
            raise ValueError(
                f"Lazy factory for {self.category.value}:'{self.type}' returned a "
                f"{renderer.category.value} renderer"
            )
        self._registration = RendererRegistration(renderer)
        return self._registration

    def __repr__(self) -> str:
        state = "resolved" if self.is_resolved else "pending"
        return f"<LazyRenderer {self.category.value}:{self.type} {state}>"


RegistryEntry = Union[Renderer, LazyRenderer]


class CategoryStats(BaseModel):
    """Registered renderer count and types for one category."""

    count: int = 0
    types: list[str] = Field(default_factory=list)


class RendererStats(BaseModel):
    """Diagnostic snapshot of all category registries."""

    categories: dict[str, CategoryStats] = Field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(c.count for c in self.categories.values())

    def counts(self) -> dict[str, int]:
        """Category -> count mapping."""
        return {name: stats.count for name, stats in self.categories.items()}
