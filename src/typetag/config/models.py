"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, typetag.toml only contains overrides.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class InputConfig(BaseModel):
    """[input] section."""

    model_config = {"frozen": True}

    tagged_values: bool = True
    objects: Literal["object", "map"] = "object"


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    width: int = Field(default=120, ge=40)
    max_value_width: int = Field(default=40, ge=8)

