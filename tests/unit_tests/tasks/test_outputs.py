"""Unit tests for the compiled output naming convention."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from drupal_assets.tasks.outputs import OutputPaths, output_path_for, plan_outputs

BASE = Path("/web/themes/custom/bar")


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("styles/main.scss", "dist/main.min.css"),
        ("styles/layout/grid.scss", "styles/dist/grid.min.css"),
        ("components/card/card.scss", "components/card/card.min.css"),
        ("scripts/app.js", "dist/app.min.js"),
        ("scripts/app.es6.js", "dist/app.min.js"),
        ("components/card/card.es6.js", "components/card/card.min.js"),
        ("legacy.sass", "legacy.min.css"),
    ],
)
def test_output_path_for(source: str, expected: str) -> None:
    assert output_path_for(BASE / source, BASE) == BASE / expected


def test_partials_produce_no_output() -> None:
    """Sass partials are only imported, never emitted."""
    assert output_path_for(BASE / "styles" / "_variables.scss", BASE) is None


def test_unknown_source_type_fails() -> None:
    with pytest.raises(ValueError, match="Not a style or script source"):
        output_path_for(BASE / "styles" / "logo.svg", BASE)


def test_plan_outputs(tmp_path: Path, write_file: Callable[..., Path]) -> None:
    """Plan outputs for matched sources, skipping partials and ignores."""
    write_file(tmp_path / "styles" / "main.scss")
    write_file(tmp_path / "styles" / "_mixins.scss")
    write_file(tmp_path / "components" / "card" / "card.scss")
    write_file(tmp_path / "node_modules" / "pkg" / "pkg.scss")

    planned = plan_outputs(
        [str(tmp_path / "**" / "*.scss")], ignores=["**/node_modules/**"]
    )

    assert planned == [
        OutputPaths(
            source=tmp_path / "components" / "card" / "card.scss",
            output=tmp_path / "components" / "card" / "card.min.css",
            source_map=tmp_path / "components" / "card" / "card.min.css.map",
        ),
        OutputPaths(
            source=tmp_path / "styles" / "main.scss",
            output=tmp_path / "dist" / "main.min.css",
            source_map=tmp_path / "dist" / "main.min.css.map",
        ),
    ]


def test_plan_outputs_lists_each_source_once(
    tmp_path: Path, write_file: Callable[..., Path]
) -> None:
    """The first pattern matching a source decides its output."""
    write_file(tmp_path / "scripts" / "app.js")

    planned = plan_outputs(
        [str(tmp_path / "**" / "*.js"), str(tmp_path / "scripts" / "*.js")]
    )

    assert [item.output for item in planned] == [tmp_path / "dist" / "app.min.js"]
