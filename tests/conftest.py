"""Shared pytest configuration, marker assignment and project fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

WriteFile = Callable[..., Path]


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


def _write(path: Path, text: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def write_file() -> WriteFile:
    """Return a helper creating a file (and its parents) with given text."""
    return _write


@pytest.fixture
def drupal_project(tmp_path: Path) -> Path:
    """Create a Drupal project with one custom module and one custom theme."""
    root = tmp_path / "project"
    _write(root / "composer.json", "{}\n")
    _write(root / "web" / "index.php", "<?php\n")
    _write(root / "web" / "modules" / "custom" / "foo" / "foo.info.yml", "name: Foo\n")
    _write(root / "web" / "themes" / "custom" / "bar" / "bar.info.yml", "name: Bar\n")
    return root
