"""Example project config module.

Copy to the project root as ``assets_config.py`` (next to ``composer.json``).
``drupal-assets`` calls ``configure`` with a fresh builder and builds it.
"""

from __future__ import annotations

from drupal_assets import ConfigBuilder


def configure(builder: ConfigBuilder) -> None:
    """Apply defaults and add every custom extension."""
    (
        builder.apply_defaults()
        .add_discovery_ignores(["**/node_modules/**", "**/vendor/**"])
        .add_all_custom_modules()
        .add_all_custom_themes()
    )
    # Keep an extra global untouched by the minifier.
    builder.set_options_for("globals", [*builder.get_options_for("globals", []), "Backbone"])
