"""Logic for deep merging configuration dictionaries."""

from typing import Any

# List-valued keys whose entries accumulate instead of being replaced.
ADDITIVE_KEYS = frozenset({"plugins"})


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Mappings are merged recursively.
    - Lists under ``ADDITIVE_KEYS`` are concatenated, base entries first.
    - Anything else in ``update`` replaces the value in ``base``.
    """
    result = dict(base)
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(current, list)
            and isinstance(value, list)
        ):
            result[key] = [*current, *value]
        else:
            result[key] = value
    return result
