# hydroconf/store/merge.py
"""Deep merge of configuration tables."""

from __future__ import annotations

import copy
from typing import Any, Dict


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge *override* into *base* (override wins).

    Nested tables are merged key by key. Arrays and scalars from *override*
    replace whatever *base* holds. Neither argument is modified.

    >>> deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 10}})
    {'a': 1, 'b': {'c': 10, 'd': 3}}
    """
    result: Dict[str, Any] = {**base}
    for k, v in override.items():
        if (
            k in result
            and isinstance(result[k], dict)
            and isinstance(v, dict)
        ):
            result[k] = deep_merge(result[k], v)
        else:
            result[k] = copy.deepcopy(v)
    return result
