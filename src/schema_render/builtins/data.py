"""Built-in data renderers for the primitive value types.

Each renderer turns one runtime value into a small descriptor tree whose
display text is deterministic for (definition, value, context).
"""

from collections.abc import Mapping
from typing import Any, Optional

from ..config import get_settings
from ..definitions import DataDefinition, RenderContext
from ..descriptors import RenderDescriptor
from ..renderers import DataRenderer
from .formatting import (
    INVALID_DATE,
    format_date,
    format_number,
    is_truthy,
    iso_timestamp,
    to_datetime,
    to_json,
)


def resolve_locale(context: Optional[RenderContext]) -> str:
    """Locale from the context, else the configured default."""
    if context is not None and context.locale:
        return context.locale
    return get_settings().default_locale


class StringDataRenderer(DataRenderer):
    type = "string"

    def format(self, value: Any, definition: DataDefinition, context: Optional[RenderContext] = None) -> str:
        return "" if value is None else str(value)

    def render(self, definition: DataDefinition, value: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        text = self.format(value, definition, context)
        return RenderDescriptor(
            component="span",
            props={"class": "string-data", "title": None if value is None else text},
            children=[text],
        )


class NumberDataRenderer(DataRenderer):
    type = "number"

    def format(self, value: Any, definition: DataDefinition, context: Optional[RenderContext] = None) -> str:
        return format_number(value, resolve_locale(context))

    def render(self, definition: DataDefinition, value: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        text = self.format(value, definition, context)
        return RenderDescriptor(
            component="span",
            props={"class": "number-data", "title": text},
            children=[text],
        )


class DateDataRenderer(DataRenderer):
    """Dates as a short locale date, with the full ISO timestamp as title."""

    type = "date"

    def format(self, value: Any, definition: DataDefinition, context: Optional[RenderContext] = None) -> str:
        moment = to_datetime(value)
        if moment is None:
            return INVALID_DATE
        return format_date(moment, resolve_locale(context))

    def render(self, definition: DataDefinition, value: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        moment = to_datetime(value)
        return RenderDescriptor(
            component="span",
            props={
                "class": "date-data",
                "title": iso_timestamp(moment) if moment is not None else None,
            },
            children=[self.format(value, definition, context)],
        )


class BooleanDataRenderer(DataRenderer):
    type = "boolean"

    def format(self, value: Any, definition: DataDefinition, context: Optional[RenderContext] = None) -> str:
        return "True" if is_truthy(value) else "False"

    def render(self, definition: DataDefinition, value: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        flag = is_truthy(value)
        return RenderDescriptor(
            component="span",
            props={
                "class": f"boolean-data {'true' if flag else 'false'}",
                "data-value": flag,
            },
            children=[self.format(value, definition, context)],
        )


class ArrayDataRenderer(DataRenderer):
    """One child per item, each item as compact JSON. Non-lists render empty."""

    type = "array"

    def format(self, value: Any, definition: DataDefinition, context: Optional[RenderContext] = None) -> str:
        return to_json(value if isinstance(value, (list, tuple)) else [])

    def render(self, definition: DataDefinition, value: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        items = value if isinstance(value, (list, tuple)) else []
        return RenderDescriptor(
            component="div",
            props={"class": "array-data"},
            children=[
                RenderDescriptor(
                    component="div",
                    props={"class": "array-item"},
                    children=[to_json(item)],
                    key=index,
                )
                for index, item in enumerate(items)
            ],
        )


EMPTY_OBJECT = "{}"


class ObjectDataRenderer(DataRenderer):
    """Key/value entries; None, non-mappings and empty mappings give the "{}" marker."""

    type = "object"

    def format(self, value: Any, definition: DataDefinition, context: Optional[RenderContext] = None) -> str:
        if not isinstance(value, Mapping) or not value:
            return EMPTY_OBJECT
        return to_json(dict(value))

    def render(self, definition: DataDefinition, value: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        if not isinstance(value, Mapping) or not value:
            return RenderDescriptor(
                component="span",
                props={"class": "object-data empty"},
                children=[EMPTY_OBJECT],
            )
        return RenderDescriptor(
            component="div",
            props={"class": "object-data"},
            children=[
                RenderDescriptor(
                    component="div",
                    props={"class": "object-entry"},
                    children=[
                        RenderDescriptor(component="span", props={"class": "object-key"}, children=[f"{key}: "]),
                        RenderDescriptor(component="span", props={"class": "object-value"}, children=[to_json(val)]),
                    ],
                )
                for key, val in value.items()
            ],
        )


DATA_RENDERERS = (
    StringDataRenderer,
    NumberDataRenderer,
    DateDataRenderer,
    BooleanDataRenderer,
    ArrayDataRenderer,
    ObjectDataRenderer,
)
