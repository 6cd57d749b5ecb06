"""typetag: value classification helpers."""

from __future__ import annotations

from typetag.domain.classify import (
    all_same_shallow_kind,
    all_unique_real_types,
    classify,
    classify_all,
    count_by_real_type,
    shallow_kind,
    shallow_kinds,
)
from typetag.domain.tags import RealType, ShallowKind
from typetag.domain.values import UNDEFINED, BigInt, Symbol

__version__ = "0.1.0"

__all__ = [
    "UNDEFINED",
    "BigInt",
    "RealType",
    "ShallowKind",
    "Symbol",
    "__version__",
    "all_same_shallow_kind",
    "all_unique_real_types",
    "classify",
    "classify_all",
    "count_by_real_type",
    "shallow_kind",
    "shallow_kinds",
]
