"""Asset build configuration for Drupal projects.

Build a configuration snapshot for front-end build tasks::

    from drupal_assets import ConfigBuilder

    config = (
        ConfigBuilder(project_root)
        .apply_defaults()
        .add_all_custom_modules()
        .add_all_custom_themes()
        .build()
    )
"""

from __future__ import annotations

from drupal_assets.config import (
    Config,
    ConfigBuilder,
    DrupalRootState,
    default_config,
    load_config,
)
from drupal_assets.drupal import (
    DrupalExtension,
    detect_drupal_extensions,
    detect_drupal_root,
)
from drupal_assets.errors import (
    ConfigLoadError,
    DrupalAssetsError,
    DrupalRootAlreadySetError,
    DrupalRootNotFoundError,
    InvalidExtensionPathError,
    OptionsError,
)

__version__ = "0.1.0"

__all__ = [
    "Config",
    "ConfigBuilder",
    "ConfigLoadError",
    "DrupalAssetsError",
    "DrupalExtension",
    "DrupalRootAlreadySetError",
    "DrupalRootNotFoundError",
    "DrupalRootState",
    "InvalidExtensionPathError",
    "OptionsError",
    "default_config",
    "detect_drupal_extensions",
    "detect_drupal_root",
    "load_config",
]
