"""Rendering of doc comment nodes into HtmlNode trees."""

from __future__ import annotations

import logging

from apidoc_html.doc_nodes import (
    DocCodeSpan,
    DocLinkTag,
    DocNode,
    DocNodeKind,
    DocParagraph,
    DocPlainText,
)
from apidoc_html.errors import UnsupportedDocNodeKindError
from apidoc_html.html_tree import HtmlNode, a, tag

logger = logging.getLogger(__name__)

MISSING_LINK_HREF = "missing-link"
MISSING_LINK_TEXT = "Missing Link"


def render_doc_nodes(
    nodes: list[DocNode],
    log: logging.Logger | None = None,
) -> list[HtmlNode]:
    """Render doc nodes in order, dropping soft breaks."""
    log = log or logger
    rendered = (_render_doc_node(node, log) for node in nodes)
    return [n for n in rendered if n is not None]


def _render_doc_node(node: DocNode, log: logging.Logger) -> HtmlNode | None:
    kind = node.kind
    if kind == DocNodeKind.PARAGRAPH and isinstance(node, DocParagraph):
        return tag("p", render_doc_nodes(node.nodes, log))
    if kind == DocNodeKind.SOFT_BREAK:
        return None
    if kind == DocNodeKind.CODE_SPAN and isinstance(node, DocCodeSpan):
        return tag("code", node.code)
    if kind == DocNodeKind.LINK_TAG and isinstance(node, DocLinkTag):
        if node.url_destination:
            return a(node.link_text or node.url_destination, node.url_destination)
        log.warning(
            "DocLinkTag with codeDestination not supported: %s",
            node.code_destination,
        )
        return a(node.link_text or MISSING_LINK_TEXT, MISSING_LINK_HREF)
    if kind == DocNodeKind.PLAIN_TEXT and isinstance(node, DocPlainText):
        return tag("span", node.text)
    raise UnsupportedDocNodeKindError(kind)
