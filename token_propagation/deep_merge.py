"""Logic for merging user configuration over the defaults."""

from typing import Any

# Lists under these keys extend the defaults instead of replacing them.
ADDITIVE_KEYS = {"ignore_patterns"}


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    - Mappings are merged recursively.
    - Lists in ``update`` replace those in ``base``, except for ``ADDITIVE_KEYS``
      which are unioned, deduplicated and sorted.
    """
    result = base.copy()
    for key, value in update.items():
        current = result.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            result[key] = deep_merge(current, value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(current, list)
        ):
            result[key] = sorted(set(current) | set(value))
        else:
            result[key] = value
    return result
