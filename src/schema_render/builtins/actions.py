"""Built-in action renderers.

Every action renders as a primitive control. The handler is passed through
as ``on_click``; disabled and danger flags are copied from the definition.
"""

from typing import Any, Optional

from ..definitions import ActionDefinition, RenderContext
from ..descriptors import RenderDescriptor
from ..renderers import ActionRenderer

SUBMIT_LABEL = "Submit"


def _css(prefix: str, definition: ActionDefinition, default_style: str = "default") -> str:
    classes = [prefix, definition.style or default_style]
    if definition.danger:
        classes.append("danger")
    return " ".join(classes)


def _common_props(definition: ActionDefinition) -> dict[str, Any]:
    return {
        "disabled": definition.disabled,
        "danger": definition.danger,
        "on_click": definition.handler,
        "data-action-id": definition.id,
    }


class ButtonActionRenderer(ActionRenderer):
    type = "button"

    def render(self, definition: ActionDefinition, value: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        return RenderDescriptor(
            component="button",
            props={"class": _css("action-button", definition), **_common_props(definition)},
            children=[definition.display_label],
        )


class LinkActionRenderer(ActionRenderer):
    type = "link"

    def render(self, definition: ActionDefinition, value: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        return RenderDescriptor(
            component="a",
            props={
                "class": _css("action-link", definition),
                "href": definition.url,
                "target": definition.target or "_self",
                **_common_props(definition),
            },
            children=[definition.display_label],
        )


class IconActionRenderer(ActionRenderer):
    """Icon-only control; the label becomes the title."""

    type = "icon"

    def render(self, definition: ActionDefinition, value: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        return RenderDescriptor(
            component="span",
            props={
                "class": _css("action-icon", definition),
                "title": definition.display_label,
                **_common_props(definition),
            },
            children=[
                RenderDescriptor(component="i", props={"class": definition.icon or "default-icon"}),
            ],
        )


class DropdownActionRenderer(ActionRenderer):
    """Trigger button plus a menu with one entry per item."""

    type = "dropdown"

    def render(self, definition: ActionDefinition, value: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        menu = [
            RenderDescriptor(
                component="div",
                props={
                    "class": "dropdown-item danger" if item.danger else "dropdown-item",
                    "disabled": item.disabled,
                    "on_click": item.handler,
                    "data-action-id": item.id,
                },
                children=[item.display_label],
                key=item.id or index,
            )
            for index, item in enumerate(definition.items)
        ]
        return RenderDescriptor(
            component="div",
            props={
                "class": _css("action-dropdown", definition),
                "data-action-id": definition.id,
            },
            children=[
                RenderDescriptor(
                    component="button",
                    props={
                        "class": "dropdown-trigger",
                        "disabled": definition.disabled,
                        "danger": definition.danger,
                        "on_click": definition.handler,
                    },
                    children=[definition.display_label],
                    key="trigger",
                ),
                RenderDescriptor(
                    component="div",
                    props={"class": "dropdown-menu"},
                    children=menu,
                    key="menu",
                ),
            ],
        )


class SubmitActionRenderer(ActionRenderer):
    type = "submit"

    def render(self, definition: ActionDefinition, value: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        return RenderDescriptor(
            component="button",
            props={
                "type": "submit",
                "class": _css("action-submit", definition, default_style="primary"),
                "form": definition.form,
                **_common_props(definition),
            },
            children=[definition.title or definition.label or SUBMIT_LABEL],
        )


class ModalActionRenderer(ActionRenderer):
    """Button that names the modal it opens; opening it is up to the caller."""

    type = "modal"

    def render(self, definition: ActionDefinition, value: Any, context: Optional[RenderContext]) -> RenderDescriptor:
        return RenderDescriptor(
            component="button",
            props={
                "class": _css("action-modal", definition),
                "data-modal-target": definition.modal_target,
                **_common_props(definition),
            },
            children=[definition.display_label],
        )


ACTION_RENDERERS = (
    ButtonActionRenderer,
    LinkActionRenderer,
    IconActionRenderer,
    DropdownActionRenderer,
    SubmitActionRenderer,
    ModalActionRenderer,
)
