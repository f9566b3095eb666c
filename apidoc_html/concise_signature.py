"""Utility for the short signature shown in member tables."""

from apidoc_html.api_item import ApiItem


def concise_signature(item: ApiItem) -> str:
    """Return ``name(a, b)`` for function-like items and the name otherwise."""
    if item.is_parameterized:
        params = ", ".join(p.name for p in item.parameters)
        return f"{item.display_name}({params})"
    return item.display_name
