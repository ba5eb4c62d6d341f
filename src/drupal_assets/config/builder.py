"""Mutable configuration builder."""

from __future__ import annotations

import enum
import logging
from pathlib import Path

from drupal_assets.config.defaults import (
    DEFAULT_GLOBALS,
    DEFAULT_SCRIPT_IGNORES,
    DEFAULT_STYLE_IGNORES,
    GLOBALS_KEY,
    UGLIFY_KEY,
    default_uglify_options,
)
from drupal_assets.config.snapshot import Config
from drupal_assets.drupal.discovery import (
    custom_extension_globs,
    detect_drupal_extensions,
)
from drupal_assets.drupal.extension import DrupalExtension
from drupal_assets.drupal.root import detect_drupal_root
from drupal_assets.errors import DrupalRootAlreadySetError
from drupal_assets.types import MutableOptionMap, OptionValue, PatternInput

logger = logging.getLogger(__name__)


class DrupalRootState(enum.Enum):
    """How the builder's Drupal root was obtained."""

    UNSET = "unset"
    EXPLICIT = "explicit"
    DETECTED = "detected"


def _as_patterns(patterns: PatternInput) -> list[str]:
    if isinstance(patterns, (str, Path)):
        return [str(patterns)]
    return [str(pattern) for pattern in patterns]


class ConfigBuilder:
    """Accumulate glob patterns and plugin options into a ``Config``.

    Every mutator returns the builder itself so calls can be chained::

        config = (
            ConfigBuilder(project_root)
            .apply_defaults()
            .add_all_custom_modules()
            .add_all_custom_themes()
            .build()
        )

    Parameters
    ----------
    project_root : Path
        Directory containing the project's ``composer.json``.
    """

    def __init__(self, project_root: Path | str) -> None:
        self.project_root = Path(project_root)
        self._drupal_root: Path | None = None
        self._drupal_root_state = DrupalRootState.UNSET
        self.style_sources: list[str] = []
        self.style_destinations: list[str] = []
        self.style_ignores: list[str] = []
        self.script_sources: list[str] = []
        self.script_destinations: list[str] = []
        self.script_ignores: list[str] = []
        self.discovery_ignores: list[str] = []
        self.extensions: list[DrupalExtension] = []
        self.options: MutableOptionMap = {}

    # -----------------------------
    # Drupal root
    # -----------------------------
    @property
    def drupal_root(self) -> Path:
        """Directory containing Drupal's ``index.php``.

        Detected on first access unless set with ``set_drupal_directory``.

        Raises
        ------
        DrupalRootNotFoundError
            If detection is needed and finds no candidate directory.
        """
        if self._drupal_root is None:
            self._drupal_root = detect_drupal_root(self.project_root)
            self._drupal_root_state = DrupalRootState.DETECTED
        return self._drupal_root

    @property
    def drupal_root_state(self) -> DrupalRootState:
        return self._drupal_root_state

    def set_drupal_directory(self, name: str) -> ConfigBuilder:
        """Use ``project_root / name`` as the Drupal root.

        The directory is not checked for existence.

        Raises
        ------
        DrupalRootAlreadySetError
            If the root was already detected or set.
        """
        if self._drupal_root is not None:
            raise DrupalRootAlreadySetError(self._drupal_root)

        self._drupal_root = self.project_root / name
        self._drupal_root_state = DrupalRootState.EXPLICIT
        return self

    # -----------------------------
    # Patterns
    # -----------------------------
    def add_style_sources(self, patterns: PatternInput) -> ConfigBuilder:
        """Add one or more globs for where style sources are."""
        self.style_sources.extend(_as_patterns(patterns))
        return self

    def add_style_destinations(self, patterns: PatternInput) -> ConfigBuilder:
        """Add one or more globs for where generated styles are.

        Files matching these globs are deemed safe to delete and are removed
        by the clean task before they are regenerated.
        """
        self.style_destinations.extend(_as_patterns(patterns))
        return self

    def add_style_ignores(self, patterns: PatternInput) -> ConfigBuilder:
        """Files matching these globs will not be treated as style sources."""
        self.style_ignores.extend(_as_patterns(patterns))
        return self

    def add_script_sources(self, patterns: PatternInput) -> ConfigBuilder:
        """Add one or more globs for where script sources are."""
        self.script_sources.extend(_as_patterns(patterns))
        return self

    def add_script_destinations(self, patterns: PatternInput) -> ConfigBuilder:
        """Add one or more globs for where generated scripts are.

        Files matching these globs are deemed safe to delete and are removed
        by the clean task before they are regenerated.
        """
        self.script_destinations.extend(_as_patterns(patterns))
        return self

    def add_script_ignores(self, patterns: PatternInput) -> ConfigBuilder:
        """Files matching these globs will not be treated as script sources."""
        self.script_ignores.extend(_as_patterns(patterns))
        return self

    def add_discovery_ignores(self, patterns: PatternInput) -> ConfigBuilder:
        """Skip manifests matching these globs during bulk discovery.

        Useful to keep extensions bundled inside ``node_modules`` or
        ``vendor`` directories of a custom extension out of the build.
        """
        self.discovery_ignores.extend(_as_patterns(patterns))
        return self

    # -----------------------------
    # Extensions
    # -----------------------------
    def add_extension(
        self,
        ext: DrupalExtension,
        add_styles: bool = True,
        add_scripts: bool = True,
    ) -> ConfigBuilder:
        """Add styles and scripts of a single Drupal extension.

        Parameters
        ----------
        ext : DrupalExtension
            Extension whose patterns are added.
        add_styles : bool, default=True
            Whether to add style sources and destinations.
        add_scripts : bool, default=True
            Whether to add script sources and destinations.
        """
        self.extensions.append(ext)
        if add_styles:
            self.add_style_sources(ext.style_source_patterns())
            self.add_style_destinations(ext.style_destination_patterns())

        if add_scripts:
            self.add_script_sources(ext.script_source_patterns())
            self.add_script_destinations(ext.script_destination_patterns())

        return self

    def add_all_custom_modules(
        self,
        add_styles: bool = True,
        add_scripts: bool = True,
    ) -> ConfigBuilder:
        """Add styles and scripts for all custom modules, including per-site ones."""
        return self._add_all_custom("modules", add_styles, add_scripts)

    def add_all_custom_themes(
        self,
        add_styles: bool = True,
        add_scripts: bool = True,
    ) -> ConfigBuilder:
        """Add styles and scripts for all custom themes, including per-site ones."""
        return self._add_all_custom("themes", add_styles, add_scripts)

    def _add_all_custom(
        self,
        kind: str,
        add_styles: bool,
        add_scripts: bool,
    ) -> ConfigBuilder:
        extensions = detect_drupal_extensions(
            custom_extension_globs(self.drupal_root, kind),
            ignores=self.discovery_ignores,
        )
        for ext in extensions:
            self.add_extension(ext, add_styles, add_scripts)
        return self

    # -----------------------------
    # Options
    # -----------------------------
    def get_options_for(
        self,
        key: str,
        fallback: OptionValue = None,
    ) -> OptionValue:
        """Get options for a plugin.

        Parameters
        ----------
        key : str
            Options key, usually the name of a plugin (e.g. ``uglify``).
        fallback : OptionValue, optional
            Returned when no value is stored under ``key``. A stored falsy
            value is still returned as is.
        """
        if key in self.options:
            return self.options[key]
        return fallback

    def set_options_for(self, key: str, value: OptionValue) -> ConfigBuilder:
        """Store options for a plugin, replacing any previous value."""
        self.options[key] = value
        return self

    def apply_defaults(self) -> ConfigBuilder:
        """Apply the conventional ignores, globals and minifier options."""
        globals_ = list(DEFAULT_GLOBALS)
        return (
            self.add_style_ignores(DEFAULT_STYLE_IGNORES)
            .add_script_ignores(DEFAULT_SCRIPT_IGNORES)
            .set_options_for(GLOBALS_KEY, globals_)
            .set_options_for(UGLIFY_KEY, default_uglify_options(globals_))
        )

    # -----------------------------
    # Finalize
    # -----------------------------
    def build(self) -> Config:
        """Build a configuration snapshot from the builder's current state.

        Every container is deep-copied, so later changes to the builder do
        not leak into the returned ``Config``.

        Raises
        ------
        DrupalRootNotFoundError
            If the Drupal root is not set and cannot be detected.
        """
        config = Config(
            project_root=self.project_root,
            drupal_root=self.drupal_root,
            style_sources=tuple(self.style_sources),
            style_destinations=tuple(self.style_destinations),
            style_ignores=tuple(self.style_ignores),
            script_sources=tuple(self.script_sources),
            script_destinations=tuple(self.script_destinations),
            script_ignores=tuple(self.script_ignores),
            extensions=tuple(self.extensions),
            options=self.options,
        )
        logger.debug("Configuration:\n%s", config)
        return config
