"""ClassifyService: classification operations over decoded JSON input.

Each operation decodes a JSON array, runs the matching domain function,
and returns a ServiceResult. Decode failures are returned as ``ok=False``
results with the DecodeError code.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from typetag.config.logging import get_logger
from typetag.domain.catalog import known_values
from typetag.domain.classify import (
    all_same_shallow_kind,
    all_unique_real_types,
    classify_all,
    count_by_real_type,
    shallow_kind,
    shallow_kinds,
)
from typetag.domain.classify import classify as classify_value
from typetag.domain.decode import DecodeError
from typetag.services.base import BaseService
from typetag.services.result import ServiceResult

logger = get_logger(__name__)

_EMPTY_WARNING = "No values given; result is vacuously true"


class ClassifyService(BaseService):
    """Shallow-kind and real-type operations for the CLI."""

    def _run(self, op: str, text: str, build: Callable[[list[Any]], ServiceResult]) -> ServiceResult:
        try:
            items = self._decode(text)
        except DecodeError as exc:
            logger.debug("decode failed", op=op, code=exc.code, detail=exc.detail)
            return ServiceResult.from_decode_error(op, exc)
        logger.debug("decoded values", op=op, count=len(items))
        return build(items)

    # ── Operations ────────────────────────────────────────────────────

    def classify(self, text: str) -> ServiceResult:
        """Classify every value: shallow kind and real type per item."""

        def build(items: list[Any]) -> ServiceResult:
            rows = [
                {
                    "index": index,
                    "value": self._describe(item),
                    "kind": str(shallow_kind(item)),
                    "type": str(classify_value(item)),
                }
                for index, item in enumerate(items)
            ]
            return ServiceResult(
                ok=True,
                op="classify",
                data={"items": rows, "count": len(rows)},
                meta=self._meta(),
            )

        return self._run("classify", text, build)

    def same_kind(self, text: str) -> ServiceResult:
        """Check whether all values share the first value's shallow kind."""

        def build(items: list[Any]) -> ServiceResult:
            same = all_same_shallow_kind(items)
            logger.debug("same kind checked", same=same)
            return ServiceResult(
                ok=True,
                op="same_kind",
                data={
                    "same": same,
                    "kinds": [str(kind) for kind in shallow_kinds(items)],
                    "count": len(items),
                },
                warnings=[] if items else [_EMPTY_WARNING],
                meta=self._meta(),
            )

        return self._run("same_kind", text, build)

    def unique_types(self, text: str) -> ServiceResult:
        """Check whether no two values share a real type."""

        def build(items: list[Any]) -> ServiceResult:
            unique = all_unique_real_types(items)
            logger.debug("uniqueness checked", unique=unique)
            return ServiceResult(
                ok=True,
                op="unique_types",
                data={
                    "unique": unique,
                    "types": [str(tag) for tag in classify_all(items)],
                    "count": len(items),
                },
                warnings=[] if items else [_EMPTY_WARNING],
                meta=self._meta(),
            )

        return self._run("unique_types", text, build)

    def count_types(self, text: str) -> ServiceResult:
        """Count values per real type, sorted by tag."""

        def build(items: list[Any]) -> ServiceResult:
            counts = [{"type": str(tag), "count": n} for tag, n in count_by_real_type(items)]
            return ServiceResult(
                ok=True,
                op="count_types",
                data={"counts": counts, "total": len(items)},
                warnings=[] if items else ["No values given"],
                meta=self._meta(),
            )

        return self._run("count_types", text, build)

    def catalog(self) -> ServiceResult:
        """List one known value per real type with its classification."""
        rows = [
            {
                "label": label,
                "value": self._describe(value),
                "kind": str(shallow_kind(value)),
                "type": str(classify_value(value)),
            }
            for label, value in known_values()
        ]
        return ServiceResult(ok=True, op="catalog", data={"items": rows, "count": len(rows)})
