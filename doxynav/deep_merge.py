"""Logic for deep merging configuration dictionaries."""

from typing import Any

ADDITIVE_KEYS = {"ignore_symbols"}


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Objects are merged recursively.
    - Arrays in 'update' replace 'base' arrays, EXCEPT for additive keys.
    - 'ignore_symbols' is additive.
    """
    result = base.copy()
    for key, value in update.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            # Additive merge, deduplicated and sorted
            merged_set = set(result[key])
            merged_set.update(value)
            result[key] = sorted(merged_set)
        else:
            # Default: Replacement (scalars and other arrays)
            result[key] = value
    return result
