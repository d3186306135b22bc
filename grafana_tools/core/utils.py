"""
Core Utilities.

Shared utility functions used across the package.
"""

import copy
from collections.abc import Mapping
from typing import Any


def merge_options(base: Mapping[str, Any], overlay: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """
    Deep-merge two option mappings into a new dict.

    Nested mappings are merged key by key and the overlay wins on conflict.
    Overlay values that are None are skipped, keeping the base value.
    Neither argument is modified; values taken from either side are copied.

    Args:
        base: Default options
        overlay: Caller-supplied options, may be None

    Returns:
        A new merged dict

    Example:
        merge_options({"headers": {"A": "1"}}, {"headers": {"B": "2"}})
        # {"headers": {"A": "1", "B": "2"}}
    """
    merged = copy.deepcopy(dict(base))
    if not overlay:
        return merged

    for key, value in overlay.items():
        if value is None:
            continue
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = merge_options(current, value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged
