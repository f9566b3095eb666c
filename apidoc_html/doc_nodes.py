"""Data model for parsed documentation comments."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class DocNodeKind(str, Enum):
    """Kinds of inline doc comment nodes."""

    PARAGRAPH = "Paragraph"
    SOFT_BREAK = "SoftBreak"
    CODE_SPAN = "CodeSpan"
    LINK_TAG = "LinkTag"
    PLAIN_TEXT = "PlainText"


@dataclass
class DocNode:
    """Base class for doc comment nodes."""

    kind: DocNodeKind | str


@dataclass
class DocParagraph(DocNode):
    """A paragraph of inline nodes."""

    kind: DocNodeKind | str = DocNodeKind.PARAGRAPH
    nodes: list[DocNode] = field(default_factory=list)


@dataclass
class DocSoftBreak(DocNode):
    """A line break inside a paragraph."""

    kind: DocNodeKind | str = DocNodeKind.SOFT_BREAK


@dataclass
class DocCodeSpan(DocNode):
    """Inline code."""

    kind: DocNodeKind | str = DocNodeKind.CODE_SPAN
    code: str = ""


@dataclass
class DocLinkTag(DocNode):
    """An ``{@link}`` tag pointing at a URL or at another declaration."""

    kind: DocNodeKind | str = DocNodeKind.LINK_TAG
    link_text: str | None = None
    url_destination: str | None = None
    code_destination: str | None = None


@dataclass
class DocPlainText(DocNode):
    """Literal text."""

    kind: DocNodeKind | str = DocNodeKind.PLAIN_TEXT
    text: str = ""


@dataclass
class DocComment:
    """The sections of one documentation comment."""

    summary_section: list[DocNode] = field(default_factory=list)
    remarks_block: list[DocNode] | None = None
