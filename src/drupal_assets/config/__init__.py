"""Configuration model: builder, snapshot and project config loading."""

from .builder import ConfigBuilder, DrupalRootState
from .loader import DEFAULT_CONFIG_FILENAME, default_config, load_config
from .snapshot import Config

__all__ = [
    "DEFAULT_CONFIG_FILENAME",
    "Config",
    "ConfigBuilder",
    "DrupalRootState",
    "default_config",
    "load_config",
]
