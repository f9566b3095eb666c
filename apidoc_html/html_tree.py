"""Minimal HTML tree nodes and the helpers used to build them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import overload


@dataclass
class HtmlNode:
    """A markup element.

    ``content`` is a string for text nodes, a list for block nodes and
    ``None`` for void nodes such as ``<link>``.
    """

    type: str
    attributes: dict[str, str] = field(default_factory=dict)
    content: str | list[HtmlNode] | None = None

    @property
    def is_void(self) -> bool:
        """Return True when the node has no content at all."""
        return self.content is None

    @property
    def is_text(self) -> bool:
        """Return True when the node wraps literal text."""
        return isinstance(self.content, str)

    @property
    def is_block(self) -> bool:
        """Return True when the node wraps child nodes."""
        return isinstance(self.content, list)


@overload
def tag(type_: str) -> HtmlNode: ...
@overload
def tag(type_: str, content: str | list[HtmlNode]) -> HtmlNode: ...
@overload
def tag(type_: str, class_name: str, content: str | list[HtmlNode]) -> HtmlNode: ...


def tag(type_: str, arg1: object = None, arg2: object = None) -> HtmlNode:
    """Build a node, optionally with a CSS class.

    ``tag("p")`` is void, ``tag("p", "text")`` is a text node,
    ``tag("div", [...])`` is a block node and
    ``tag("div", "summary", [...])`` sets ``class="summary"``.
    """
    if arg2 is not None:
        return _tag(type_, str(arg1) if arg1 else None, arg2)  # type: ignore[arg-type]
    return _tag(type_, None, arg1)  # type: ignore[arg-type]


def _tag(
    type_: str,
    class_name: str | None,
    content: str | list[HtmlNode] | None,
) -> HtmlNode:
    attributes = {"class": class_name} if class_name else {}
    return HtmlNode(type=type_, attributes=attributes, content=content)


def tr(cells: list[str | HtmlNode]) -> HtmlNode:
    """Build a table row; strings become text cells, nodes are wrapped."""
    return tag(
        "tr",
        [tag("td", c) if isinstance(c, str) else tag("td", [c]) for c in cells],
    )


def a(text: str, href: str, class_name: str | None = None) -> HtmlNode:
    """Build an anchor node."""
    attributes = {"href": href}
    if class_name:
        attributes["class"] = class_name
    return HtmlNode(type="a", attributes=attributes, content=text)
