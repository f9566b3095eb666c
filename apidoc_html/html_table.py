"""Builder for HTML tables whose body rows are appended after construction."""

from __future__ import annotations

from apidoc_html.html_tree import HtmlNode, tag


class HtmlTable:
    """A ``<table>`` with a fixed heading row and a growing list of body rows."""

    def __init__(self, headings: list[str]) -> None:
        """Create the table with one ``<th>`` per heading."""
        self.headings = list(headings)
        self.rows: list[HtmlNode] = []

    def add_row(self, row: HtmlNode) -> HtmlTable:
        """Append a body row and return the table."""
        self.rows.append(row)
        return self

    @property
    def row_count(self) -> int:
        """Number of body rows; the heading row is not counted."""
        return len(self.rows)

    def to_node(self) -> HtmlNode:
        """Return the table as a block node."""
        head = tag("thead", [tag("tr", [tag("th", h) for h in self.headings])])
        return tag("table", [head, *self.rows])


def table(headings: list[str]) -> HtmlTable:
    """Start a table with the given column headings."""
    return HtmlTable(headings)
