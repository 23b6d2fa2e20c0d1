"""Built-in field, group and view renderers.

Layout renderers compose the primitive data and action renderers: a field
wraps its value's data descriptor with a label, a group lays out fields, and
a view arranges groups of fields, columns and actions.

Nested definitions are rendered through the engine the renderer was
registered on, so overrides registered there apply inside composed trees.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Optional

from ..definitions import (
    ActionDefinition,
    ColumnDefinition,
    DataDefinition,
    FieldDefinition,
    GroupDefinition,
    RenderContext,
    ViewDefinition,
)
from ..descriptors import RenderDescriptor
from ..renderers import FieldRenderer, GroupRenderer, RendererCategory, ViewRenderer

EMPTY_LIST_TEXT = "No data"


def field_value(data: Any, name: str) -> Any:
    """Read a field from a record mapping or attribute object."""
    if isinstance(data, Mapping):
        return data.get(name)
    return getattr(data, name, None)


def label_descriptor(field: FieldDefinition, suffix: str = "") -> RenderDescriptor:
    children: list[Any] = [f"{field.label or field.name}{suffix}"]
    if field.required:
        children.append(RenderDescriptor(component="span", props={"class": "field-required"}, children=["*"]))
    return RenderDescriptor(
        component="label",
        props={"class": "field-label", "html_for": field.name or None},
        children=children,
    )


def _help_children(field: FieldDefinition) -> list[RenderDescriptor]:
    if not field.help_text:
        return []
    return [RenderDescriptor(component="p", props={"class": "field-help"}, children=[field.help_text])]


class EngineBoundRenderer:
    """Mixin for renderers that render nested definitions through their engine.

    A nested data or action type that the engine does not know falls back to
    the engine's "string" data renderer or "button" action renderer when
    those are registered; otherwise RendererNotFound propagates.
    Nested renders are synchronous.
    """

    def __init__(self, engine):
        self.engine = engine

    def value_descriptor(self, field: FieldDefinition, value: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        """Data descriptor for a field value."""
        data_type = self._registered_or(RendererCategory.DATA, field.type, "string")
        definition = DataDefinition(type=data_type, name=field.name, format=field.format)
        return self.engine.render_data(definition, value, context)

    def field_descriptor(self, field: FieldDefinition, data: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        """Render one field of a record, keyed by the field name."""
        descriptor = self.engine.render_field(field, field_value(data, field.name), context)
        return descriptor.with_key(field.name) if field.name else descriptor

    def action_descriptors(self, actions: Sequence[ActionDefinition], context: Optional[RenderContext]) -> list[RenderDescriptor]:
        descriptors = []
        for index, action in enumerate(actions):
            action_type = self._registered_or(RendererCategory.ACTION, action.type, "button")
            if action_type != action.type:
                action = action.model_copy(update={"type": action_type})
            descriptor = self.engine.render_action(action, context)
            descriptors.append(descriptor.with_key(action.id or action.name or index))
        return descriptors

    def _registered_or(self, category: RendererCategory, type: str, fallback: str) -> str:
        if not self.engine.has_renderer(category, type) and self.engine.has_renderer(category, fallback):
            return fallback
        return type


class VerticalFieldRenderer(EngineBoundRenderer, FieldRenderer):
    """Label above the value."""

    type = "vertical"

    def render(self, definition: FieldDefinition, value: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        return RenderDescriptor(
            component="div",
            props={"class": "field field-vertical", "data-field": definition.name},
            children=[
                label_descriptor(definition),
                RenderDescriptor(
                    component="div",
                    props={"class": "field-value"},
                    children=[self.value_descriptor(definition, value, context)],
                ),
                *_help_children(definition),
            ],
        )


class HorizontalFieldRenderer(EngineBoundRenderer, FieldRenderer):
    """Label column on the left, value on the right."""

    type = "horizontal"

    def render(self, definition: FieldDefinition, value: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        return RenderDescriptor(
            component="div",
            props={"class": "field field-horizontal", "data-field": definition.name},
            children=[
                RenderDescriptor(
                    component="div",
                    props={"class": "field-label-column"},
                    children=[label_descriptor(definition), *_help_children(definition)],
                ),
                RenderDescriptor(
                    component="div",
                    props={"class": "field-value"},
                    children=[self.value_descriptor(definition, value, context)],
                ),
            ],
        )


class InlineFieldRenderer(EngineBoundRenderer, FieldRenderer):
    type = "inline"

    def render(self, definition: FieldDefinition, value: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        return RenderDescriptor(
            component="span",
            props={"class": "field field-inline", "data-field": definition.name},
            children=[label_descriptor(definition, suffix=": "), self.value_descriptor(definition, value, context)],
        )



def _title(tag: str, css: str, title: Optional[str]) -> list[RenderDescriptor]:
    if not title:
        return []
    return [RenderDescriptor(component=tag, props={"class": css}, children=[title])]


class CardGroupRenderer(EngineBoundRenderer, GroupRenderer):
    """Titled card around the group's fields."""

    type = "card"

    def render(self, definition: GroupDefinition, data: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        return RenderDescriptor(
            component="div",
            props={
                "class": "group group-card",
                "data-collapsible": definition.collapsible,
                "data-columns": definition.columns,
            },
            children=[
                *_title("h3", "group-title", definition.title),
                RenderDescriptor(
                    component="div",
                    props={"class": "group-body"},
                    children=[self.field_descriptor(f, data, context) for f in definition.fields],
                ),
            ],
        )


class StackGroupRenderer(EngineBoundRenderer, GroupRenderer):
    type = "stack"

    def render(self, definition: GroupDefinition, data: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        return RenderDescriptor(
            component="div",
            props={"class": "group group-stack"},
            children=[
                *_title("h4", "group-title", definition.title),
                *(self.field_descriptor(f, data, context) for f in definition.fields),
            ],
        )


class DetailViewRenderer(EngineBoundRenderer, ViewRenderer):
    """A single record: title, one field per definition field, then actions."""

    type = "detail"

    def render(self, definition: ViewDefinition, data: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        children = [
            *_title("h2", "view-title", definition.title),
            RenderDescriptor(
                component="div",
                props={"class": "view-fields"},
                children=[self.field_descriptor(f, data, context) for f in definition.fields],
            ),
        ]
        if definition.actions:
            children.append(RenderDescriptor(
                component="div",
                props={"class": "view-actions"},
                children=self.action_descriptors(definition.actions, context),
            ))
        return RenderDescriptor(
            component="div",
            props={"class": "view view-detail"},
            children=children,
        )


class ListViewRenderer(EngineBoundRenderer, ViewRenderer):
    """A table of records.

    Columns come from the definition's columns, or from its fields when no
    columns are given. A column whose field is also a definition field
    renders with that field's data type.
    """

    type = "list"

    def render(self, definition: ViewDefinition, data: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        columns = list(definition.columns) or [
            ColumnDefinition(field=f.name, title=f.label or f.name) for f in definition.fields
        ]
        fields = {f.name: f for f in definition.fields}
        records = list(data) if isinstance(data, (list, tuple)) else []

        header = RenderDescriptor(
            component="thead",
            children=[RenderDescriptor(
                component="tr",
                children=[
                    RenderDescriptor(
                        component="th",
                        props={"class": f"align-{column.align}", "style": _width_style(column)},
                        children=[column.title or column.field],
                        key=column.field,
                    )
                    for column in columns
                ],
            )],
        )

        if records:
            rows = [
                RenderDescriptor(
                    component="tr",
                    children=[
                        RenderDescriptor(
                            component="td",
                            props={"class": f"align-{column.align}"},
                            children=[self.value_descriptor(
                                fields.get(column.field) or FieldDefinition(name=column.field),
                                field_value(record, column.field),
                                context,
                            )],
                            key=column.field,
                        )
                        for column in columns
                    ],
                    key=_row_key(record, index),
                )
                for index, record in enumerate(records)
            ]
        else:
            rows = [RenderDescriptor(
                component="tr",
                props={"class": "empty"},
                children=[RenderDescriptor(
                    component="td",
                    props={"colspan": max(len(columns), 1)},
                    children=[EMPTY_LIST_TEXT],
                )],
            )]

        children = [
            *_title("h2", "view-title", definition.title),
            RenderDescriptor(
                component="table",
                props={"class": "view-table"},
                children=[header, RenderDescriptor(component="tbody", children=rows)],
            ),
        ]
        if definition.actions:
            children.append(RenderDescriptor(
                component="div",
                props={"class": "view-actions"},
                children=self.action_descriptors(definition.actions, context),
            ))
        return RenderDescriptor(
            component="div",
            props={"class": "view view-list"},
            children=children,
        )


def _width_style(column: ColumnDefinition) -> Optional[str]:
    if column.width is None:
        return None
    width = f"{column.width}px" if isinstance(column.width, int) else column.width
    return f"width: {width}"


def _row_key(record: Any, index: int) -> Any:
    key = field_value(record, "id")
    return key if isinstance(key, (str, int)) and not isinstance(key, bool) else index


FIELD_RENDERERS = (VerticalFieldRenderer, HorizontalFieldRenderer, InlineFieldRenderer)
GROUP_RENDERERS = (CardGroupRenderer, StackGroupRenderer)
VIEW_RENDERERS = (DetailViewRenderer, ListViewRenderer)
