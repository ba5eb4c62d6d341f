"""Pydantic schemas for option blocks and diagnostic dumps."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_serializer

GlobalsOption = TypeAdapter(list[str])


class MangleOptions(BaseModel):
    """Name-mangling section of the minifier options."""

    model_config = ConfigDict(extra="allow")

    reserved: list[str] = Field(default_factory=list)


class UglifyOptions(BaseModel):
    """Validated minifier options.

    Only the keys this package reads are typed; everything else is passed
    through to the minifier untouched.
    """

    model_config = ConfigDict(extra="allow")

    mangle: MangleOptions | bool = Field(default_factory=MangleOptions)
    output: dict[str, Any] = Field(default_factory=dict)


class ConfigDump(BaseModel):
    """Serializable view of a configuration snapshot."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    project_root: Path
    drupal_root: Path
    style_sources: list[str]
    style_destinations: list[str]
    style_ignores: list[str]
    script_sources: list[str]
    script_destinations: list[str]
    script_ignores: list[str]
    extensions: list[Path]
    options: dict[str, Any]

    @field_serializer("options")
    def _serialize_options(self, value: dict[str, Any]) -> dict[str, Any]:
        return {str(key): _jsonable(item) for key, item in value.items()}


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, dict):
        return {str(key): _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_jsonable(item) for item in value]
    return str(value)
