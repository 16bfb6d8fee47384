"""Lenient accessors over a parsed JSON document.

Optional sections of ``mcp.json`` are read through :func:`dig` so a missing
record never turns a reporting step into a crash, and values are judged with
:func:`is_truthy`, which keeps the loose semantics operators expect from the
JSON world: only ``null``, ``false``, zero, NaN and ``""`` count as absent.
Empty lists and empty objects are present.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

_MISSING = object()


def dig(data: Any, *path: str, default: Any = None) -> Any:
    current = data
    for key in path:
        if not isinstance(current, Mapping):
            return default
        current = current.get(key, _MISSING)
        if current is _MISSING:
            return default
    return current


def is_truthy(value: Any) -> bool:
    if value is None or value is False:
        return False
    if isinstance(value, bool):
        return True
    if isinstance(value, (int, float)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True
