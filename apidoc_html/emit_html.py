"""Serialization of HtmlNode trees into complete HTML documents."""

from html import escape

from apidoc_html.html_tree import HtmlNode, tag

# Elements that never take a closing tag.
VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "hr", "img", "input", "link", "meta", "source"},
)


def render_node(node: HtmlNode) -> str:
    """Render a single node and its descendants."""
    attrs = "".join(
        f' {name}="{escape(str(value), quote=True)}"'
        for name, value in node.attributes.items()
    )
    if node.content is None:
        if node.type in VOID_ELEMENTS:
            return f"<{node.type}{attrs}>"
        return f"<{node.type}{attrs}></{node.type}>"
    if isinstance(node.content, str):
        inner = escape(node.content, quote=False)
    else:
        inner = "".join(render_node(child) for child in node.content)
    return f"<{node.type}{attrs}>{inner}</{node.type}>"


def emit(styles: list[str], content: list[HtmlNode]) -> str:
    """Render a full document linking each stylesheet and wrapping ``content``."""
    links = [
        HtmlNode(
            type="link",
            attributes={"rel": "stylesheet", "type": "text/css", "href": s},
        )
        for s in styles
    ]
    document = tag("html", [tag("head", links), tag("body", content)])
    return "<!DOCTYPE html>\n" + render_node(document) + "\n"
