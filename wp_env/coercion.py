"""Typed conversion of resolved values.

Conversions never raise: a value that can't be converted yields the
caller's default.
"""

import math
import re
from typing import Any, List, Optional, Union

from .constants import TRUTHY_VALUES

# A resolved value: host constants keep their type, other sources yield strings
ConfigValue = Optional[Union[bool, int, float, str, List[Any]]]

_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$", re.ASCII)


def is_numeric(value: Any) -> bool:
    """Check whether a value is a number or a numeric-looking string.

    Booleans are not numeric.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        return bool(_NUMERIC_RE.match(value))
    return False


def to_bool(value: Any, default: bool = False) -> bool:
    """Convert a value to boolean.

    Strings are true only if they match one of the truthy spellings; any
    other string is false. Numbers are true when non-zero.
    """
    if isinstance(value, bool):
        return value

    if isinstance(value, str):
        return value.strip().lower() in TRUTHY_VALUES

    if is_numeric(value):
        return bool(value)

    return default


def to_int(value: Any, default: int = 0) -> int:
    """Convert a value to integer, truncating toward zero."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    if not is_numeric(value):
        return default

    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            value = float(value)

    if math.isinf(value) or math.isnan(value):
        return default
    return int(value)


def to_float(value: Any, default: float = 0.0) -> float:
    """Convert a value to float."""
    if isinstance(value, float):
        return value

    if is_numeric(value):
        return float(value)

    return default


def to_list(value: Any, default: Optional[List[Any]] = None) -> List[Any]:
    """Convert a value to a list.

    Lists pass through unchanged. Strings are split on commas, each item is
    stripped and empty items are dropped. An empty string gives an empty list.
    """
    if default is None:
        default = []

    if isinstance(value, list):
        return value

    if isinstance(value, str):
        if not value:
            return []
        items = [item.strip() for item in value.split(",")]
        return [item for item in items if item]

    return default
