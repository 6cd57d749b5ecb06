"""Type tag vocabularies.

Two closed sets of labels:
- ShallowKind: the coarse, typeof-like category of a value.
- RealType: the refined tag that separates null, NaN, Infinity, and the
  common container types out of the generic object kind.
"""

from __future__ import annotations

from enum import StrEnum


class ShallowKind(StrEnum):
    """Coarse value categories."""

    STRING = "string"
    BOOLEAN = "boolean"
    BIGINT = "bigint"
    SYMBOL = "symbol"
    UNDEFINED = "undefined"
    NUMBER = "number"
    FUNCTION = "function"
    OBJECT = "object"


class RealType(StrEnum):
    """Refined value tags. Every value maps to exactly one member."""

    STRING = "string"
    BOOLEAN = "boolean"
    BIGINT = "bigint"
    SYMBOL = "symbol"
    UNDEFINED = "undefined"
    NAN = "NaN"
    INFINITY = "Infinity"
    NUMBER = "number"
    FUNCTION = "function"
    NULL = "null"
    DATE = "date"
    REGEXP = "regexp"
    SET = "set"
    MAP = "map"
    ARRAY = "array"
    OBJECT = "object"
    UNKNOWN = "unknown"
