"""Logic for deep merging configuration dictionaries."""

from typing import Any

ADDITIVE_KEYS = {"suppressed_errors"}


def deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries into a new one.

    - Mappings are merged recursively, so neither input is mutated.
    - Lists in `update` replace lists in `base`, except `suppressed_errors`,
      which is merged into a sorted list without duplicates.
    """
    result = {
        k: deep_merge(v, {}) if isinstance(v, dict) else v for k, v in base.items()
    }
    for key, value in update.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif (
            key in ADDITIVE_KEYS
            and isinstance(value, list)
            and isinstance(result.get(key), list)
        ):
            result[key] = sorted(set(result[key]) | set(value))
        else:
            result[key] = value
    return result
