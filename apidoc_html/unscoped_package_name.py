"""Utility for dropping the ``@scope/`` prefix from a package name."""


def unscoped_package_name(name: str) -> str:
    """Return ``widgets`` for ``@scope/widgets`` and ``name`` otherwise."""
    if name.startswith("@") and "/" in name:
        return name.split("/", 1)[1]
    return name
