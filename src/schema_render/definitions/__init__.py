"""Definitions - what the application asks the engine to render."""

from .schemas import (
    ActionDefinition,
    BaseDefinition,
    ColumnDefinition,
    DataDefinition,
    FieldDefinition,
    GroupDefinition,
    RenderContext,
    ViewDefinition,
)

__all__ = [
    "ActionDefinition",
    "BaseDefinition",
    "ColumnDefinition",
    "DataDefinition",
    "FieldDefinition",
    "GroupDefinition",
    "RenderContext",
    "ViewDefinition",
]
