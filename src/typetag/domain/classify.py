"""Value classification: shallow kinds and refined real types.

Classification happens in two steps:
  1. Partition by shallow kind (string, boolean, number, object, ...).
  2. Refine numbers into NaN / Infinity / number, and object-kind values
     by checks in fixed precedence: null, date, regexp, set, map, array,
     generic object.

INVARIANT: Every function here is total. No input raises.
"""

from __future__ import annotations

import math
import re
from collections import Counter
from collections.abc import Iterable, Mapping
from collections.abc import Set as AbstractSet
from datetime import date
from typing import Any

from typetag.domain.tags import RealType, ShallowKind
from typetag.domain.values import BigInt, Symbol, Undefined

# Kinds whose real type is the kind itself.
_DIRECT_KINDS: dict[ShallowKind, RealType] = {
    ShallowKind.STRING: RealType.STRING,
    ShallowKind.BOOLEAN: RealType.BOOLEAN,
    ShallowKind.BIGINT: RealType.BIGINT,
    ShallowKind.SYMBOL: RealType.SYMBOL,
    ShallowKind.UNDEFINED: RealType.UNDEFINED,
    ShallowKind.FUNCTION: RealType.FUNCTION,
}

# Object refinement, checked in order after null.
_OBJECT_CHECKS: tuple[tuple[type | tuple[type, ...], RealType], ...] = (
    (date, RealType.DATE),
    (re.Pattern, RealType.REGEXP),
    (AbstractSet, RealType.SET),
    (Mapping, RealType.MAP),
    ((list, tuple), RealType.ARRAY),
)


def shallow_kind(value: Any) -> ShallowKind:
    """Return the coarse category of *value*.

    ``None`` is an object, as are containers and plain instances.

    Examples:
        >>> shallow_kind("whoo")
        <ShallowKind.STRING: 'string'>
        >>> shallow_kind(None)
        <ShallowKind.OBJECT: 'object'>
    """
    if isinstance(value, str):
        return ShallowKind.STRING
    if isinstance(value, bool):
        return ShallowKind.BOOLEAN
    if isinstance(value, BigInt):
        return ShallowKind.BIGINT
    if isinstance(value, Symbol):
        return ShallowKind.SYMBOL
    if isinstance(value, Undefined):
        return ShallowKind.UNDEFINED
    if isinstance(value, (int, float)):
        return ShallowKind.NUMBER
    if callable(value):
        return ShallowKind.FUNCTION
    return ShallowKind.OBJECT


def _refine_number(value: int | float) -> RealType:
    if isinstance(value, float) and math.isnan(value):
        return RealType.NAN
    # Only positive infinity is singled out; -inf stays a number.
    if value == math.inf:
        return RealType.INFINITY
    return RealType.NUMBER


def _refine_object(value: Any) -> RealType:
    if value is None:
        return RealType.NULL
    for types, tag in _OBJECT_CHECKS:
        if isinstance(value, types):
            return tag
    return RealType.OBJECT


def classify(value: Any) -> RealType:
    """Return the refined real type of *value*.

    Examples:
        >>> classify(None)
        <RealType.NULL: 'null'>
        >>> classify(float("nan"))
        <RealType.NAN: 'NaN'>
        >>> classify({})
        <RealType.MAP: 'map'>
    """
    kind = shallow_kind(value)
    direct = _DIRECT_KINDS.get(kind)
    if direct is not None:
        return direct
    if kind is ShallowKind.NUMBER:
        return _refine_number(value)
    if kind is ShallowKind.OBJECT:
        return _refine_object(value)
    return RealType.UNKNOWN


def shallow_kinds(items: Iterable[Any]) -> list[ShallowKind]:
    """Map each item to its shallow kind."""
    return [shallow_kind(item) for item in items]


def classify_all(items: Iterable[Any]) -> list[RealType]:
    """Map each item to its real type."""
    return [classify(item) for item in items]


def all_same_shallow_kind(items: Iterable[Any]) -> bool:
    """True iff every item shares the first item's shallow kind.

    Vacuously true for empty input.
    """
    kinds = shallow_kinds(items)
    return all(kind is kinds[0] for kind in kinds)


def all_unique_real_types(items: Iterable[Any]) -> bool:
    """True iff no two items share a real type."""
    tags = classify_all(items)
    return len(tags) == len(set(tags))


def count_by_real_type(items: Iterable[Any]) -> list[tuple[RealType, int]]:
    """Count items per real type, sorted ascending by tag string.

    Tags are unique keys, so the tag alone decides the order.

    Examples:
        >>> count_by_real_type([True, None, False, True, object()])
        [(<RealType.BOOLEAN: 'boolean'>, 3), (<RealType.NULL: 'null'>, 1), (<RealType.OBJECT: 'object'>, 1)]
    """
    counts = Counter(classify_all(items))
    return sorted(counts.items(), key=lambda pair: str(pair[0]))
