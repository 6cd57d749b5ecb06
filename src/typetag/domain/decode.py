"""JSON boundary decoding into classifiable Python values.

Plain JSON maps onto native types (objects become SimpleNamespace so they
classify as ``object``, or dict when decoded with ``objects="map"``).
Values JSON cannot express are written as single-key tagged objects:

    {"$undefined": true}        -> UNDEFINED
    {"$bigint": "123"}          -> BigInt(123)
    {"$symbol": "id"}           -> Symbol("id")
    {"$date": "2024-01-31"}     -> datetime
    {"$regexp": "\\w+"}         -> re.Pattern
    {"$set": [1, 2]}            -> set
    {"$map": [["k", 1]]}        -> dict
    {"$function": "name"}       -> FunctionRef

The non-standard ``NaN``, ``Infinity`` and ``-Infinity`` literals are
accepted as floats.
"""

from __future__ import annotations

import json
import re
import sys
from collections.abc import Callable
from datetime import datetime
from types import SimpleNamespace
from typing import Any, Literal

from typetag.domain.values import UNDEFINED, BigInt, FunctionRef, Symbol

ObjectMode = Literal["object", "map"]


class DecodeError(ValueError):
    """Input could not be decoded into values.

    Attributes:
        code: Machine-readable error code.
        detail: Extra context (position, tag name, ...).
    """

    def __init__(self, code: str, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.detail = detail


def _tag_error(tag: str, message: str) -> DecodeError:
    return DecodeError("INVALID_TAGGED_VALUE", f"{tag}: {message}", tag=tag)


def _decode_bigint(raw: Any) -> BigInt:
    if isinstance(raw, bool) or not isinstance(raw, (str, int)):
        raise _tag_error("$bigint", "expected an integer or integer string")
    if isinstance(raw, str) and len(raw.strip().lstrip("+-")) > sys.get_int_max_str_digits() > 0:
        raise _tag_error("$bigint", f"too long: {len(raw)} characters exceeds the integer digit limit")
    try:
        return BigInt(int(raw))
    except ValueError as exc:
        raise _tag_error("$bigint", f"not an integer: {raw!r}") from exc


def _decode_symbol(raw: Any) -> Symbol:
    if raw is not None and not isinstance(raw, str):
        raise _tag_error("$symbol", "expected a string description or null")
    return Symbol(raw)


def _decode_date(raw: Any) -> datetime:
    if not isinstance(raw, str):
        raise _tag_error("$date", "expected an ISO 8601 string")
    try:
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        raise _tag_error("$date", f"not an ISO 8601 date: {raw!r}") from exc


def _decode_regexp(raw: Any) -> re.Pattern[str]:
    if not isinstance(raw, str):
        raise _tag_error("$regexp", "expected a pattern string")
    try:
        return re.compile(raw)
    except re.error as exc:
        raise _tag_error("$regexp", f"invalid pattern: {exc}") from exc


def _decode_set(raw: Any) -> set[Any]:
    if not isinstance(raw, list):
        raise _tag_error("$set", "expected an array of members")
    try:
        return set(raw)
    except TypeError as exc:
        raise _tag_error("$set", "members must be hashable") from exc


def _decode_map(raw: Any) -> dict[Any, Any]:
    if not isinstance(raw, list) or not all(
        isinstance(entry, list) and len(entry) == 2 for entry in raw
    ):
        raise _tag_error("$map", "expected an array of [key, value] pairs")
    try:
        return {key: value for key, value in raw}
    except TypeError as exc:
        raise _tag_error("$map", "keys must be hashable") from exc


def _decode_function(raw: Any) -> FunctionRef:
    if raw is not None and not isinstance(raw, str):
        raise _tag_error("$function", "expected a function name or null")
    return FunctionRef(raw or "")


_TAG_DECODERS: dict[str, Callable[[Any], Any]] = {
    "$undefined": lambda _raw: UNDEFINED,
    "$bigint": _decode_bigint,
    "$symbol": _decode_symbol,
    "$date": _decode_date,
    "$regexp": _decode_regexp,
    "$set": _decode_set,
    "$map": _decode_map,
    "$function": _decode_function,
}


def _object_hook(*, tagged: bool, objects: ObjectMode) -> Callable[[list[tuple[str, Any]]], Any]:
    def hook(pairs: list[tuple[str, Any]]) -> Any:
        if tagged and len(pairs) == 1:
            key, raw = pairs[0]
            decoder = _TAG_DECODERS.get(key)
            if decoder is not None:
                return decoder(raw)
        if objects == "map":
            return dict(pairs)
        return SimpleNamespace(**dict(pairs))

    return hook


def decode(text: str, *, tagged: bool = True, objects: ObjectMode = "object") -> Any:
    """Decode a single JSON document into a Python value.

    Raises:
        DecodeError: On empty input, malformed or too deeply nested JSON,
            or a malformed tagged value.
    """
    if not text.strip():
        raise DecodeError("EMPTY_INPUT", "No input values given")
    try:
        return json.loads(text, object_pairs_hook=_object_hook(tagged=tagged, objects=objects))
    except DecodeError:
        raise
    except json.JSONDecodeError as exc:
        raise DecodeError(
            "INVALID_JSON",
            f"Invalid JSON at line {exc.lineno}, column {exc.colno}: {exc.msg}",
            line=exc.lineno,
            column=exc.colno,
        ) from exc
    except RecursionError as exc:
        raise DecodeError("INVALID_JSON", "Invalid JSON: nesting too deep") from exc
    except ValueError as exc:
        # Integer literals past the interpreter's digit limit.
        raise DecodeError("INVALID_JSON", f"Invalid JSON: {exc}") from exc


def decode_values(text: str, *, tagged: bool = True, objects: ObjectMode = "object") -> list[Any]:
    """Decode a JSON array document into its list of items.

    Raises:
        DecodeError: As :func:`decode`, plus ``NOT_AN_ARRAY`` when the
            top-level document is not an array.
    """
    value = decode(text, tagged=tagged, objects=objects)
    if not isinstance(value, list):
        raise DecodeError(
            "NOT_AN_ARRAY",
            "Input must be a JSON array of values",
            got=type(value).__name__,
        )
    return value
