"""Boundary value types for categories Python has no native form of.

Values entering from untyped sources (JSON, user input) are decoded into
these so classification stays a runtime check:

- ``UNDEFINED``: an absent value, distinct from ``None`` (null).
- :class:`Symbol`: a unique token; equality is identity.
- :class:`BigInt`: an ``int`` explicitly marked as arbitrary precision.
- :class:`FunctionRef`: a named callable placeholder.
"""

from __future__ import annotations

from typing import Any, Final


class Undefined:
    """Singleton type for ``UNDEFINED``."""

    _instance: Undefined | None = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = Undefined()


class Symbol:
    """A unique token with an optional description.

    Two symbols are never equal unless they are the same object, even when
    their descriptions match.
    """

    __slots__ = ("description",)

    def __init__(self, description: str | None = None) -> None:
        self.description = description

    def __repr__(self) -> str:
        return f"Symbol({self.description or ''})"


class BigInt(int):
    """Arbitrary-precision integer tag.

    Plain ``int`` values classify as numbers; wrap them in ``BigInt`` to
    mark them as big integers.
    """

    def __repr__(self) -> str:
        return f"{int(self)}n"


class FunctionRef:
    """Named callable standing in for a function from untyped input."""

    __slots__ = ("name",)

    def __init__(self, name: str = "") -> None:
        self.name = name

    def __call__(self, *args: Any, **kwargs: Any) -> Undefined:
        return UNDEFINED

    def __repr__(self) -> str:
        return f"[Function: {self.name or '(anonymous)'}]"
