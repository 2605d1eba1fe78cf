"""Key path expressions.

A key path addresses an entry in nested configuration tables::

    database.host          -> table "database", key "host"
    servers[0].name        -> array "servers", first element, key "name"
    servers[-1]            -> last element of "servers"

Segments are separated by dots; each segment is a name optionally followed
by one or more array subscripts. There are no wildcards.
"""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, Dict, List, Tuple, Union

from hydroconf.utils.exceptions import InvalidKeyPathError, KeyNotFoundError

PathPart = Union[str, int]

# Matches one dotted segment: a name plus optional subscripts
# Example: "servers[0][1]" -> ("servers", "[0][1]")
SEGMENT_PATTERN = re.compile(r'([^.\[\]]+)((?:\[-?\d+\])*)')

# Extracts the integer of every subscript in a segment
# Example: "[0][-1]" -> ["0", "-1"]
SUBSCRIPT_PATTERN = re.compile(r'\[(-?\d+)\]')


@lru_cache(maxsize=256)
def parse_key(key: str) -> Tuple[PathPart, ...]:
    """Split *key* into table keys (``str``) and array indices (``int``)."""
    if not isinstance(key, str) or not key:
        raise InvalidKeyPathError(f"invalid key path {key!r}: must be a non-empty string")
    parts: List[PathPart] = []
    for raw in key.split("."):
        match = SEGMENT_PATTERN.fullmatch(raw)
        if match is None:
            raise InvalidKeyPathError(f"invalid key path {key!r}: bad segment {raw!r}")
        parts.append(match.group(1))
        parts.extend(int(index) for index in SUBSCRIPT_PATTERN.findall(match.group(2)))
    return tuple(parts)


def get_path(tree: Dict[str, Any], key: str) -> Any:
    """Return the value stored at *key* in *tree*; raise if it is absent."""
    node: Any = tree
    for part in parse_key(key):
        if isinstance(part, str):
            if not isinstance(node, dict) or part not in node:
                raise KeyNotFoundError(key)
            node = node[part]
        else:
            if not isinstance(node, list) or not -len(node) <= part < len(node):
                raise KeyNotFoundError(key)
            node = node[part]
    return node


def has_path(tree: Dict[str, Any], key: str) -> bool:
    try:
        get_path(tree, key)
    except KeyNotFoundError:
        return False
    return True


def set_path(tree: Dict[str, Any], key: str, value: Any) -> None:
    """
    Store *value* at *key* in *tree*, creating intermediate containers.

    A scalar standing where a table or array is needed gets replaced.
    Subscripts past the end of an array pad it with ``None``.
    """
    parts = parse_key(key)
    node: Any = tree
    for position, part in enumerate(parts):
        is_last = position == len(parts) - 1
        if isinstance(part, int):
            index = part
            if index < 0:
                index += len(node)
                if index < 0:
                    raise InvalidKeyPathError(
                        f"invalid key path {key!r}: index {part} is out of range"
                    )
            while len(node) <= index:
                node.append(None)
            slot: Union[str, int] = index
        else:
            slot = part
        if is_last:
            node[slot] = value
            return
        wanted = list if isinstance(parts[position + 1], int) else dict
        child = node[slot] if isinstance(slot, int) else node.get(slot)
        if not isinstance(child, wanted):
            child = wanted()
            node[slot] = child
        node = child
