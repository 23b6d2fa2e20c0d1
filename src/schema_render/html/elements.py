"""HTML elements - the reference concrete UI toolkit.

An Element is what a component factory produces from converted props and
children. Elements serialize to HTML with markupsafe escaping.
"""

import json
from collections.abc import Iterator
from typing import Any, Optional, Union

from markupsafe import Markup, escape
from pydantic import BaseModel, ConfigDict, Field

# Standard tags registered by create_default_component_map()
HTML_TAGS = (
    "div", "span", "p", "h1", "h2", "h3", "h4", "h5", "h6",
    "form", "input", "textarea", "select", "option", "button", "label",
    "ul", "ol", "li",
    "table", "thead", "tbody", "tr", "th", "td",
    "a", "img",
    "i",
)

VOID_TAGS = frozenset({"input", "img", "br", "hr", "meta", "link"})

FALLBACK_STYLE = "padding: 8px; color: #ef4444; font-size: 14px"

# Prop names that map to a different HTML attribute
_ATTRIBUTE_ALIASES = {
    "class_name": "class",
    "className": "class",
    "html_for": "for",
    "htmlFor": "for",
}


class Element(BaseModel):
    """A concrete element: tag, attributes, children and reconciliation key."""

    model_config = ConfigDict(frozen=True)

    tag: str
    props: dict[str, Any] = Field(default_factory=dict)
    children: list[Any] = Field(
        default_factory=list,
        description="Elements, text, or None (nothing rendered)",
    )
    key: Optional[Union[str, int]] = None

    def walk(self) -> Iterator["Element"]:
        """Yield this element and every descendant element, pre-order."""
        yield self
        for child in self.children:
            if isinstance(child, Element):
                yield from child.walk()

    def text_content(self) -> str:
        parts = []
        for child in self.children:
            if isinstance(child, Element):
                parts.append(child.text_content())
            elif child is not None:
                parts.append(str(child))
        return "".join(parts)

    def to_html(self) -> str:
        """Serialize to an HTML string. Callable and None props are skipped."""
        attrs = _render_attributes(self.props)
        open_tag = f"<{self.tag}{attrs}>"
        if self.tag in VOID_TAGS:
            return open_tag
        inner = "".join(_render_child(child) for child in self.children)
        return f"{open_tag}{inner}</{self.tag}>"


def _render_child(child: Any) -> str:
    if child is None:
        return ""
    if isinstance(child, Element):
        return child.to_html()
    return str(escape(child))


def _render_attributes(props: dict[str, Any]) -> str:
    parts = []
    for name, value in props.items():
        if name == "key" or value is None or callable(value):
            continue
        attr = _ATTRIBUTE_ALIASES.get(name, name)
        if isinstance(value, bool):
            if attr.startswith(("data-", "aria-")):
                token = "true" if value else "false"
                parts.append(Markup('{}="{}"').format(escape(attr), token))
            elif value:
                parts.append(attr)
            continue
        if attr == "style" and isinstance(value, dict):
            value = "; ".join(f"{k}: {v}" for k, v in value.items())
        elif isinstance(value, (dict, list)):
            value = json.dumps(value)
        parts.append(Markup('{}="{}"').format(escape(attr), value))
    return (" " + " ".join(str(p) for p in parts)) if parts else ""


def html_component(tag: str):
    """Component factory producing Elements with the given tag."""

    def factory(props: dict[str, Any], children: list[Any], key: Optional[Union[str, int]] = None) -> Element:
        return Element(tag=tag, props=props, children=children, key=key)

    factory.__name__ = f"html_{tag}"
    factory.tag = tag
    return factory


def fallback_element(component_id: str, key: Optional[Union[str, int]] = None) -> Element:
    """Visible, error-styled placeholder for an unregistered component."""
    return Element(
        tag="div",
        props={
            "class": "render-fallback",
            "style": FALLBACK_STYLE,
            "role": "alert",
            "data-missing-component": component_id,
        },
        children=[f"⚠️ Component not registered: {component_id}"],
        key=key,
    )


def is_fallback(element: Any) -> bool:
    """True when an element is a missing-component placeholder."""
    return isinstance(element, Element) and "data-missing-component" in element.props


def render_html(node: Any) -> str:
    """Serialize an element, text, None, or a list of those to HTML."""
    if isinstance(node, (list, tuple)):
        return "".join(render_html(n) for n in node)
    return _render_child(node)
