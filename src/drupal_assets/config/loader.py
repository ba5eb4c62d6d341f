"""Load a project's asset configuration module."""

from __future__ import annotations

import importlib.util
import logging
from pathlib import Path
from types import ModuleType

from drupal_assets.config.builder import ConfigBuilder
from drupal_assets.config.snapshot import Config
from drupal_assets.errors import ConfigLoadError, DrupalAssetsError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "assets_config.py"


def default_config(project_root: Path) -> Config:
    """Build the configuration used when a project ships no config module.

    Applies the defaults and adds every custom module and theme.
    """
    return (
        ConfigBuilder(project_root)
        .apply_defaults()
        .add_all_custom_modules()
        .add_all_custom_themes()
        .build()
    )


def load_config(project_root: Path, config_path: Path | None = None) -> Config:
    """Load configuration for a project.

    .. warning::
        The config module is executed as Python code. Only load config files
        from trusted projects.

    Parameters
    ----------
    project_root : Path
        Directory containing the project's ``composer.json``.
    config_path : Path | None, optional
        Config module to load. Defaults to ``DEFAULT_CONFIG_FILENAME`` in the
        project root; when that file does not exist ``default_config`` is used.

    Returns
    -------
    Config
        Configuration snapshot produced by the module.

    Raises
    ------
    ConfigLoadError
        If the module cannot be imported or exposes no usable entry point.
    """
    project_root = Path(project_root)
    if config_path is None:
        candidate = project_root / DEFAULT_CONFIG_FILENAME
        if not candidate.is_file():
            logger.debug("No %s in %s, using defaults.", DEFAULT_CONFIG_FILENAME, project_root)
            return default_config(project_root)
        config_path = candidate
    elif not Path(config_path).is_file():
        raise ConfigLoadError(f"Config file not found: {config_path}")

    module = _import_config_module(Path(config_path))
    return _config_from_module(module, project_root)


def _import_config_module(path: Path) -> ModuleType:
    """Import a config module from a file path.

    Raises
    ------
    ConfigLoadError
        If the module cannot be executed.
    """
    spec = importlib.util.spec_from_file_location(path.stem, path)
    if spec is None or spec.loader is None:
        raise ConfigLoadError(f"Unable to load config module from {path}.")
    module = importlib.util.module_from_spec(spec)
    try:
        spec.loader.exec_module(module)
    except DrupalAssetsError:
        raise
    except Exception as exc:
        raise ConfigLoadError(f"Unable to import config module '{path}': {exc}") from exc
    logger.debug("Loaded config module: %s", path)
    return module


def _config_from_module(module: ModuleType, project_root: Path) -> Config:
    """Produce a ``Config`` through whichever hook the module exposes.

    Supported hooks, in order: ``build_config(project_root)``,
    ``configure(builder)`` and a ``CONFIG`` object. Errors raised by a hook
    are reported as ``ConfigLoadError`` unless they are already domain errors.
    """
    try:
        if hasattr(module, "build_config"):
            result = module.build_config(project_root)
        elif hasattr(module, "configure"):
            builder = ConfigBuilder(project_root)
            module.configure(builder)
            result = builder.build()
        elif hasattr(module, "CONFIG"):
            result = module.CONFIG
        else:
            raise ConfigLoadError(
                "Config module must expose build_config(project_root), "
                "configure(builder), or CONFIG."
            )
    except DrupalAssetsError:
        raise
    except Exception as exc:
        raise ConfigLoadError(
            f"Config module '{module.__name__}' failed: {type(exc).__name__}: {exc}"
        ) from exc

    if not isinstance(result, Config):
        raise ConfigLoadError(
            f"Config module produced {type(result).__name__}, expected Config."
        )
    return result
