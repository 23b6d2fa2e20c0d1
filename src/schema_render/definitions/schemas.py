"""Definition schemas - declarative input to the render engine.

Definitions are produced by the application/schema layer. The engine only
reads the dispatch key (type, or layout for fields) and hands the rest to
the renderer untouched. Unknown fields are kept as extras so themes can
carry their own options.
"""

from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class BaseDefinition(BaseModel):
    """Shared config: immutable, unknown fields pass through."""

    model_config = ConfigDict(frozen=True, extra="allow")

    @property
    def render_type(self) -> str:
        """Key used to look up the renderer in the category registry."""
        return self.type


class ColumnDefinition(BaseModel):
    """A column of a list/table view."""

    model_config = ConfigDict(frozen=True, extra="allow")

    field: str
    title: Optional[str] = None
    width: Optional[Union[int, str]] = None
    align: str = Field(default="left", description="'left', 'center', 'right'")
    sortable: bool = False


class DataDefinition(BaseDefinition):
    """A single data value to display (string, number, date, ...)."""

    type: str = Field(..., description="Data type key, e.g. 'string', 'number'")
    name: str = ""
    format: Optional[str] = None


class FieldDefinition(BaseDefinition):
    """A labelled field wrapping one data value.

    The field renderer is chosen by layout; type is the data type of the
    wrapped value.
    """

    name: str = ""
    type: str = Field(default="string", description="Data type of the field value")
    label: Optional[str] = None
    layout: Optional[str] = Field(
        default=None,
        description="Field renderer key: 'vertical' (default), 'horizontal', 'inline'",
    )
    required: bool = False
    format: Optional[str] = None
    help_text: Optional[str] = None

    @property
    def render_type(self) -> str:
        return self.layout or "vertical"


class ActionDefinition(BaseDefinition):
    """A user-invocable action rendered as a primitive control."""

    type: str = Field(
        default="button",
        description="Action renderer key: 'button', 'link', 'icon', "
        "'dropdown', 'submit', 'modal'",
    )
    name: str = ""
    title: Optional[str] = None
    label: Optional[str] = None
    id: Optional[str] = None
    style: Optional[str] = None
    disabled: bool = False
    danger: bool = False
    handler: Optional[Callable[..., Any]] = None
    url: Optional[str] = None
    target: Optional[str] = None
    icon: Optional[str] = None
    form: Optional[str] = None
    modal_target: Optional[str] = None
    items: list["ActionDefinition"] = Field(default_factory=list)

    @property
    def display_label(self) -> str:
        """Text shown on the control: title, then label, then name."""
        return self.title or self.label or self.name


class GroupDefinition(BaseDefinition):
    """A visual grouping of fields (card, stack, tabs, ...)."""

    type: str
    title: Optional[str] = None
    fields: list[FieldDefinition] = Field(default_factory=list)
    collapsible: bool = False
    columns: Optional[int] = None


class ViewDefinition(BaseDefinition):
    """A whole view (detail, list, form, ...)."""

    type: str
    title: Optional[str] = None
    fields: list[FieldDefinition] = Field(default_factory=list)
    columns: list[ColumnDefinition] = Field(default_factory=list)
    actions: list[ActionDefinition] = Field(default_factory=list)
    layout: Optional[str] = None


class RenderContext(BaseModel):
    """Caller-supplied environment forwarded unmodified to every renderer.

    The engine does not inspect it beyond routing; extra keys are allowed.
    """

    model_config = ConfigDict(frozen=True, extra="allow", arbitrary_types_allowed=True)

    theme: Optional[str] = None
    mode: str = Field(default="view", description="'view' or 'edit'")
    locale: Optional[str] = None
