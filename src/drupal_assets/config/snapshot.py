"""Immutable configuration snapshot."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

from drupal_assets.drupal.extension import DrupalExtension
from drupal_assets.schemas import ConfigDump
from drupal_assets.types import OptionValue


@dataclass(frozen=True)
class Config:
    """Read-only configuration consumed by build tasks.

    Use ``ConfigBuilder`` to create instances.
    """

    project_root: Path
    drupal_root: Path
    style_sources: tuple[str, ...] = ()
    style_destinations: tuple[str, ...] = ()
    style_ignores: tuple[str, ...] = ()
    script_sources: tuple[str, ...] = ()
    script_destinations: tuple[str, ...] = ()
    script_ignores: tuple[str, ...] = ()
    extensions: tuple[DrupalExtension, ...] = ()
    options: Mapping[str, OptionValue] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        for name in (
            "style_sources",
            "style_destinations",
            "style_ignores",
            "script_sources",
            "script_destinations",
            "script_ignores",
            "extensions",
        ):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        object.__setattr__(
            self, "options", MappingProxyType(copy.deepcopy(dict(self.options)))
        )

    def options_for(self, key: str, fallback: OptionValue = None) -> OptionValue:
        """Get options for a plugin.

        Parameters
        ----------
        key : str
            Options key, usually the name of a plugin (e.g. ``uglify``).
        fallback : OptionValue, optional
            Returned when no value is stored under ``key``. A stored falsy
            value is still returned as is.

        Returns
        -------
        OptionValue
            A copy of the stored value; changing it leaves the snapshot intact.
        """
        if key in self.options:
            return copy.deepcopy(self.options[key])
        return fallback

    def option_keys(self) -> list[str]:
        """Return the stored option keys in insertion order."""
        return list(self.options)

    def as_dict(self) -> dict[str, Any]:
        """Return the snapshot as JSON-compatible plain data."""
        return self._dump().model_dump(mode="json")

    def _dump(self) -> ConfigDump:
        return ConfigDump(
            project_root=self.project_root,
            drupal_root=self.drupal_root,
            style_sources=list(self.style_sources),
            style_destinations=list(self.style_destinations),
            style_ignores=list(self.style_ignores),
            script_sources=list(self.script_sources),
            script_destinations=list(self.script_destinations),
            script_ignores=list(self.script_ignores),
            extensions=[ext.path for ext in self.extensions],
            options=dict(self.options),
        )

    def __str__(self) -> str:
        return self._dump().model_dump_json(indent=2)
