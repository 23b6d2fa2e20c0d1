"""Render descriptor schema.

A RenderDescriptor names a component (an identifier resolved through the
component map, or a direct component handle), the props to pass to it,
its ordered children and an optional stable key.
"""

from typing import Any, Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class RenderDescriptor(BaseModel):
    """One node of a render descriptor tree.

    Descriptors are frozen values. Props may hold callables (event handlers),
    which keeps structural equality intact but makes the wire form lossy;
    see to_wire().
    """

    model_config = ConfigDict(frozen=True)

    component: Union[str, Callable[..., Any]] = Field(
        ...,
        description="Component identifier looked up in the component map, "
        "or a component factory used directly",
    )
    props: dict[str, Any] = Field(
        default_factory=dict,
        description="Properties passed through unchanged to the component",
    )
    children: list[Union["RenderDescriptor", str]] = Field(
        default_factory=list,
        description="Child descriptors or literal text, in rendering order",
    )
    key: Optional[Union[str, int]] = Field(
        default=None,
        description="Stable identity among siblings; synthesized when absent",
    )

    def with_key(self, key: Union[str, int]) -> "RenderDescriptor":
        """Return a copy carrying the given key."""
        return self.model_copy(update={"key": key})

    def text_content(self) -> str:
        """Concatenated text of this subtree, in order."""
        parts = []
        for child in self.children:
            if isinstance(child, str):
                parts.append(child)
            else:
                parts.append(child.text_content())
        return "".join(parts)

    def to_wire(self) -> dict[str, Any]:
        """JSON-safe dict form.

        Callable props are dropped and a callable component is replaced by
        its name, so the result only round-trips for scalar-prop trees.
        """
        if isinstance(self.component, str):
            component = self.component
        else:
            component = getattr(self.component, "__name__", repr(self.component))

        wire: dict[str, Any] = {
            "component": component,
            "props": {k: v for k, v in self.props.items() if not callable(v)},
            "children": [
                child if isinstance(child, str) else child.to_wire()
                for child in self.children
            ],
        }
        if self.key is not None:
            wire["key"] = self.key
        return wire


DescriptorChild = Union[RenderDescriptor, str]


def is_text_node(node: Any) -> bool:
    """True for literal text leaves of a descriptor tree."""
    return isinstance(node, str)
