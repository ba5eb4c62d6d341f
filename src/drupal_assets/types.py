"""Shared type aliases."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

type OptionScalar = str | int | float | bool | None | Path
type OptionValue = (
    OptionScalar
    | tuple["OptionValue", ...]
    | list["OptionValue"]
    | dict[str, "OptionValue"]
)
type OptionMap = Mapping[str, OptionValue]
type MutableOptionMap = dict[str, OptionValue]

# One glob pattern or an iterable of glob patterns.
type PatternInput = str | Iterable[str]
