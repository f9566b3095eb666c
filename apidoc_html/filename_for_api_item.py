"""Derivation of the output file name for each API item."""

from apidoc_html.api_item import ApiItem, ApiItemKind
from apidoc_html.safe_filename_for_name import safe_filename_for_name
from apidoc_html.unscoped_package_name import unscoped_package_name

INDEX_FILENAME = "index.html"
HTML_EXTENSION = ".html"


def filename_for_api_item(item: ApiItem) -> str:
    """Return the file name for ``item``, e.g. ``widgets.Widget.doThing.html``.

    Overloads past the first get a ``_N`` suffix where N is the overload
    index minus one, so ``foo`` and its second overload map to ``foo.html``
    and ``foo_1.html``.
    """
    if item.kind == ApiItemKind.MODEL:
        return INDEX_FILENAME

    base_name = ""
    for level in item.get_hierarchy():
        if level.kind in (ApiItemKind.MODEL, ApiItemKind.ENTRY_POINT):
            continue
        if level.kind == ApiItemKind.PACKAGE:
            base_name = safe_filename_for_name(
                unscoped_package_name(level.display_name),
            )
            continue
        segment = safe_filename_for_name(level.display_name)
        if level.is_parameterized and level.overload_index > 1:
            segment += f"_{level.overload_index - 1}"
        base_name += "." + segment
    return base_name + HTML_EXTENSION


def link_for_api_item(item: ApiItem) -> str:
    """Return the relative link used in generated pages."""
    return "./" + filename_for_api_item(item)
