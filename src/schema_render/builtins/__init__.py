"""Built-in renderers.

Nothing is registered implicitly. Call register_builtin_renderers() on an
engine to install all built-ins, or pass categories to install a subset.
"""

import logging
from collections.abc import Iterable
from typing import Optional, Union

from ..renderers import Renderer, RendererCategory
from .actions import (
    ACTION_RENDERERS,
    ButtonActionRenderer,
    DropdownActionRenderer,
    IconActionRenderer,
    LinkActionRenderer,
    ModalActionRenderer,
    SubmitActionRenderer,
)
from .data import (
    DATA_RENDERERS,
    ArrayDataRenderer,
    BooleanDataRenderer,
    DateDataRenderer,
    NumberDataRenderer,
    ObjectDataRenderer,
    StringDataRenderer,
)
from .layout import (
    FIELD_RENDERERS,
    GROUP_RENDERERS,
    VIEW_RENDERERS,
    CardGroupRenderer,
    DetailViewRenderer,
    EngineBoundRenderer,
    HorizontalFieldRenderer,
    InlineFieldRenderer,
    ListViewRenderer,
    StackGroupRenderer,
    VerticalFieldRenderer,
)

logger = logging.getLogger(__name__)

BUILTIN_RENDERERS: dict[RendererCategory, tuple[type[Renderer], ...]] = {
    RendererCategory.VIEW: VIEW_RENDERERS,
    RendererCategory.GROUP: GROUP_RENDERERS,
    RendererCategory.FIELD: FIELD_RENDERERS,
    RendererCategory.DATA: DATA_RENDERERS,
    RendererCategory.ACTION: ACTION_RENDERERS,
}


def register_builtin_renderers(
    engine,
    categories: Optional[Iterable[Union[RendererCategory, str]]] = None,
) -> int:
    """Register fresh instances of the built-in renderers on an engine.

    Field, group and view renderers are bound to the engine and render their
    nested fields, values and actions through its registries.

    Args:
        engine: RenderEngine to register on
        categories: Categories to install; all when omitted

    Returns:
        Number of renderers registered
    """
    selected = (
        [RendererCategory(c) for c in categories]
        if categories is not None
        else list(RendererCategory)
    )
    count = 0
    for category in selected:
        for renderer_cls in BUILTIN_RENDERERS[category]:
            if issubclass(renderer_cls, EngineBoundRenderer):
                engine.register_renderer(renderer_cls(engine))
            else:
                engine.register_renderer(renderer_cls())
            count += 1
    logger.info(f"Registered {count} built-in renderers ({', '.join(c.value for c in selected)})")
    return count


__all__ = [
    "ArrayDataRenderer",
    "BUILTIN_RENDERERS",
    "BooleanDataRenderer",
    "ButtonActionRenderer",
    "CardGroupRenderer",
    "DateDataRenderer",
    "DetailViewRenderer",
    "DropdownActionRenderer",
    "EngineBoundRenderer",
    "HorizontalFieldRenderer",
    "IconActionRenderer",
    "InlineFieldRenderer",
    "LinkActionRenderer",
    "ListViewRenderer",
    "ModalActionRenderer",
    "NumberDataRenderer",
    "ObjectDataRenderer",
    "StackGroupRenderer",
    "StringDataRenderer",
    "SubmitActionRenderer",
    "VerticalFieldRenderer",
    "register_builtin_renderers",
]
