"""Renderers - typed implementations that turn definitions into descriptors.

Each render category (view, group, field, data, action) has its own
registry and loader. Renderer types are open strings; categories are a
closed set.
"""

from .loader import CategoryLoader
from .registry import CategoryRegistry
from .schemas import (
    ActionRenderer,
    CategoryStats,
    DataRenderer,
    DEFINITION_MODELS,
    FieldRenderer,
    GroupRenderer,
    LazyRenderer,
    Renderer,
    RendererCategory,
    RendererRegistration,
    RendererStats,
    ViewRenderer,
    coerce_definition,
)

__all__ = [
    "ActionRenderer",
    "CategoryLoader",
    "CategoryRegistry",
    "CategoryStats",
    "DEFINITION_MODELS",
    "DataRenderer",
    "FieldRenderer",
    "GroupRenderer",
    "LazyRenderer",
    "Renderer",
    "RendererCategory",
    "RendererRegistration",
    "RendererStats",
    "ViewRenderer",
    "coerce_definition",
]
