"""Unit tests for project config module loading."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from drupal_assets.config.defaults import DEFAULT_STYLE_IGNORES
from drupal_assets.config.loader import (
    DEFAULT_CONFIG_FILENAME,
    default_config,
    load_config,
)
from drupal_assets.config.snapshot import Config
from drupal_assets.errors import (
    ConfigLoadError,
    DrupalRootAlreadySetError,
    DrupalRootNotFoundError,
)


def test_default_config_adds_all_custom_extensions(drupal_project: Path) -> None:
    """Defaults plus every custom module and theme."""
    config = default_config(drupal_project)
    web = (drupal_project / "web").resolve()

    assert config.style_ignores == DEFAULT_STYLE_IGNORES
    assert config.style_sources == (
        str(web / "modules" / "custom" / "foo" / "**" / "*.scss"),
        str(web / "themes" / "custom" / "bar" / "**" / "*.scss"),
    )
    assert config.options_for("globals")


def test_load_without_module_uses_defaults(drupal_project: Path) -> None:
    """Fall back to ``default_config`` when no config module exists."""
    assert load_config(drupal_project) == default_config(drupal_project)


def test_load_without_drupal_root_fails(tmp_path: Path) -> None:
    """Default config needs a Drupal root."""
    with pytest.raises(DrupalRootNotFoundError):
        load_config(tmp_path)


def test_configure_hook(drupal_project: Path, write_file: Callable[..., Path]) -> None:
    """``configure(builder)`` receives a fresh builder that is then built."""
    write_file(
        drupal_project / DEFAULT_CONFIG_FILENAME,
        "def configure(builder):\n"
        "    builder.add_all_custom_themes(add_scripts=False)\n"
        "    builder.set_options_for('sass', {'outputStyle': 'expanded'})\n",
    )

    config = load_config(drupal_project)

    assert len(config.style_sources) == 1
    assert config.script_sources == ()
    assert config.options_for("sass") == {"outputStyle": "expanded"}


def test_build_config_hook(tmp_path: Path, write_file: Callable[..., Path]) -> None:
    """``build_config(project_root)`` is called with the project root."""
    config_path = write_file(
        tmp_path / "custom_config.py",
        "from drupal_assets import ConfigBuilder\n"
        "def build_config(project_root):\n"
        "    return (\n"
        "        ConfigBuilder(project_root)\n"
        "        .set_drupal_directory('html')\n"
        "        .add_style_sources('html/**/*.scss')\n"
        "        .build()\n"
        "    )\n",
    )

    config = load_config(tmp_path, config_path)

    assert config.drupal_root == tmp_path / "html"
    assert config.style_sources == ("html/**/*.scss",)


def test_config_object_hook(tmp_path: Path, write_file: Callable[..., Path]) -> None:
    """A module may expose a ready ``CONFIG``."""
    config_path = write_file(
        tmp_path / "assets_config.py",
        "from pathlib import Path\n"
        "from drupal_assets import Config\n"
        "CONFIG = Config(project_root=Path('/p'), drupal_root=Path('/p/web'))\n",
    )

    config = load_config(tmp_path, config_path)

    assert isinstance(config, Config)
    assert config.drupal_root == Path("/p/web")


def test_module_without_hook_fails(tmp_path: Path, write_file: Callable[..., Path]) -> None:
    """Reject modules exposing none of the supported hooks."""
    write_file(tmp_path / DEFAULT_CONFIG_FILENAME, "VALUE = 1\n")
    with pytest.raises(ConfigLoadError, match="must expose"):
        load_config(tmp_path)


def test_hook_returning_wrong_type_fails(
    tmp_path: Path, write_file: Callable[..., Path]
) -> None:
    """``build_config`` must return a ``Config``."""
    write_file(
        tmp_path / DEFAULT_CONFIG_FILENAME,
        "def build_config(project_root):\n    return {}\n",
    )
    with pytest.raises(ConfigLoadError, match="expected Config"):
        load_config(tmp_path)


def test_broken_module_fails(tmp_path: Path, write_file: Callable[..., Path]) -> None:
    """Import errors are wrapped in ``ConfigLoadError``."""
    write_file(tmp_path / DEFAULT_CONFIG_FILENAME, "import definitely_missing_module\n")
    with pytest.raises(ConfigLoadError, match="Unable to import config module"):
        load_config(tmp_path)


def test_explicit_missing_path_fails(tmp_path: Path) -> None:
    """An explicitly requested config module must exist."""
    with pytest.raises(ConfigLoadError, match="not found"):
        load_config(tmp_path, tmp_path / "nope.py")


def test_invalid_import_spec_fails(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, write_file: Callable[..., Path]
) -> None:
    """Raise ConfigLoadError when no module loader can be created."""
    write_file(tmp_path / DEFAULT_CONFIG_FILENAME, "CONFIG = None\n")
    monkeypatch.setattr(
        "drupal_assets.config.loader.importlib.util.spec_from_file_location",
        lambda *_args, **_kwargs: None,
    )
    with pytest.raises(ConfigLoadError, match="Unable to load config module"):
        load_config(tmp_path)


@pytest.mark.parametrize(
    "source",
    [
        "def configure(builder):\n    builder.nope()\n",
        "def build_config(project_root):\n    return 1 / 0\n",
    ],
)
def test_failing_hook_is_wrapped(
    tmp_path: Path, write_file: Callable[..., Path], source: str
) -> None:
    """Errors raised inside a hook become ``ConfigLoadError``."""
    write_file(tmp_path / DEFAULT_CONFIG_FILENAME, source)

    with pytest.raises(ConfigLoadError, match="failed") as excinfo:
        load_config(tmp_path)
    assert excinfo.value.__cause__ is not None


def test_domain_errors_from_hooks_propagate(
    drupal_project: Path, write_file: Callable[..., Path]
) -> None:
    """Domain errors keep their own type and exit code."""
    write_file(
        drupal_project / DEFAULT_CONFIG_FILENAME,
        "def configure(builder):\n"
        "    builder.add_all_custom_themes()\n"
        "    builder.set_drupal_directory('docroot')\n",
    )

    with pytest.raises(DrupalRootAlreadySetError):
        load_config(drupal_project)
