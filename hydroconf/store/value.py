"""Configuration values and their conversions.

A configuration value is plain Python data: ``str``, ``int``, ``float``,
``bool``, ``dict`` (table), ``list`` (array) or ``None`` (null in YAML/JSON).
The ``into_*`` helpers convert a stored value to the type a typed accessor
asks for, following loose rules: numeric strings are numbers, numbers are
booleans, boolean words such as ``"on"`` are 1 or 0, and so on. Anything
else raises :class:`TypeMismatchError`.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from hydroconf.utils.exceptions import TypeMismatchError

TRUE_STRINGS = frozenset({"1", "true", "on", "yes"})
FALSE_STRINGS = frozenset({"0", "false", "off", "no"})


def describe(value: Any) -> str:
    """Human readable kind of *value*, used in error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return f"boolean `{str(value).lower()}`"
    if isinstance(value, int):
        return f"integer `{value}`"
    if isinstance(value, float):
        return f"floating point `{value}`"
    if isinstance(value, str):
        return f"string {value!r}"
    if isinstance(value, dict):
        return "table"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


def _mismatch(value: Any, expected: str, key: Optional[str]) -> TypeMismatchError:
    where = f" for key {key!r}" if key is not None else ""
    return TypeMismatchError(f"invalid type: {describe(value)}, expected {expected}{where}")


def _bool_string(text: str) -> Optional[bool]:
    lowered = text.strip().lower()
    if lowered in TRUE_STRINGS:
        return True
    if lowered in FALSE_STRINGS:
        return False
    return None


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def normalize(value: Any) -> Any:
    """
    Turn *value* into plain configuration data.

    Mappings become ``dict`` with string keys, tuples and lists become
    ``list``. Anything that is not representable in a configuration file
    raises :class:`TypeMismatchError`.
    """
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, Mapping):
        return {str(k): normalize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [normalize(v) for v in value]
    raise TypeMismatchError(f"unsupported configuration value of type {type(value).__name__}")


def into_str(value: Any, key: Optional[str] = None) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise _mismatch(value, "a string", key)


def into_int(value: Any, key: Optional[str] = None) -> int:
    if isinstance(value, bool):
        return 1 if value else 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value):
            return _round_half_away(value)
    elif isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            parsed = float(text)
        except ValueError:
            pass
        else:
            if math.isfinite(parsed):
                return _round_half_away(parsed)
        flag = _bool_string(text)
        if flag is not None:
            return 1 if flag else 0
    raise _mismatch(value, "an integer", key)


def into_float(value: Any, key: Optional[str] = None) -> float:
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            pass
        flag = _bool_string(value)
        if flag is not None:
            return 1.0 if flag else 0.0
    raise _mismatch(value, "a floating point", key)


def into_bool(value: Any, key: Optional[str] = None) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        flag = _bool_string(value)
        if flag is not None:
            return flag
    raise _mismatch(value, "a boolean", key)


def into_table(value: Any, key: Optional[str] = None) -> Dict[str, Any]:
    if isinstance(value, dict):
        return dict(value)
    raise _mismatch(value, "a map", key)


def into_array(value: Any, key: Optional[str] = None) -> List[Any]:
    if isinstance(value, list):
        return list(value)
    raise _mismatch(value, "an array", key)
