"""Conventional defaults applied by ``ConfigBuilder.apply_defaults``."""

from __future__ import annotations

from drupal_assets.types import MutableOptionMap

DEFAULT_STYLE_IGNORES: tuple[str, ...] = (
    "**/node_modules/**",
    "**/vendor/**",
    "**/*.min.css",
)

DEFAULT_SCRIPT_IGNORES: tuple[str, ...] = (
    "**/node_modules/**",
    "**/vendor/**",
    "**/*.min.js",
)

# Identifiers provided by Drupal core at runtime; minification must keep them.
DEFAULT_GLOBALS: tuple[str, ...] = (
    "$",
    "Drupal",
    "drupalSettings",
    "jQuery",
    "once",
)

GLOBALS_KEY = "globals"
UGLIFY_KEY = "uglify"


def default_uglify_options(reserved: list[str]) -> MutableOptionMap:
    """Minifier options keeping ``reserved`` names and some comments."""
    return {
        "mangle": {"reserved": reserved},
        "output": {"comments": "some"},
    }
