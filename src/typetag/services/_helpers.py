"""Shared service-layer helper functions."""

from __future__ import annotations

import json
import math
from types import SimpleNamespace
from typing import Any

from typetag.domain.classify import classify
from typetag.domain.tags import RealType
from typetag.domain.values import FunctionRef

_SIZED_LABELS: dict[RealType, str] = {
    RealType.SET: "Set",
    RealType.MAP: "Map",
    RealType.ARRAY: "Array",
}


def truncate(text: str, width: int) -> str:
    """Shorten *text* to at most *width* characters, marking the cut with an ellipsis."""
    if len(text) <= width:
        return text
    return text[: max(width - 1, 0)] + "…"


def _describe(value: Any, tag: RealType) -> str:
    if tag is RealType.STRING:
        return json.dumps(value, ensure_ascii=False)
    if tag is RealType.BOOLEAN:
        return "true" if value else "false"
    if tag is RealType.NULL:
        return "null"
    if tag is RealType.NUMBER and isinstance(value, float) and math.isinf(value):
        return "-Infinity"
    if tag in (RealType.NAN, RealType.INFINITY):
        return str(tag)
    if tag is RealType.DATE:
        return value.isoformat()
    if tag is RealType.REGEXP:
        return f"/{value.pattern}/"
    if tag in _SIZED_LABELS:
        return f"{_SIZED_LABELS[tag]}({len(value)})"
    if tag is RealType.FUNCTION and not isinstance(value, FunctionRef):
        return f"[Function: {getattr(value, '__name__', '(anonymous)')}]"
    if tag is RealType.OBJECT and isinstance(value, SimpleNamespace):
        return f"Object({len(vars(value))})"
    return repr(value)


def describe_value(value: Any, *, max_width: int = 40) -> str:
    """Short, JSON-flavoured display string for *value*.

    Examples:
        >>> describe_value("whoo")
        '"whoo"'
        >>> describe_value([1, 2, 3])
        'Array(3)'
    """
    return truncate(_describe(value, classify(value)), max_width)
