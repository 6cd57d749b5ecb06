"""Known-value catalog: one representative value per real type."""

from __future__ import annotations

import math
import re
from datetime import UTC, datetime
from types import SimpleNamespace
from typing import Any

from typetag.domain.values import UNDEFINED, BigInt, FunctionRef, Symbol


def known_values() -> list[tuple[str, Any]]:
    """Return ``(label, value)`` pairs, one per distinct real type.

    Built fresh on each call so mutable samples are never shared.
    """
    return [
        ("null", None),
        ("string", "string"),
        ("boolean", True),
        ("bigint", BigInt(10)),
        ("symbol", Symbol("id")),
        ("undefined", UNDEFINED),
        ("NaN", math.nan),
        ("Infinity", math.inf),
        ("number", 1),
        ("date", datetime.now(UTC)),
        ("function", FunctionRef("noop")),
        ("regexp", re.compile(r"\w+")),
        ("set", set()),
        ("map", {}),
        ("array", []),
        ("object", SimpleNamespace()),
    ]
