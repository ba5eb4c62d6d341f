"""Naming convention for compiled style and script outputs."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from drupal_assets.globs import glob_base
from drupal_assets.tasks.files import expand_patterns

STYLE_SUFFIXES = frozenset({".scss", ".sass"})
SCRIPT_SUFFIXES = frozenset({".js"})


@dataclass(frozen=True)
class OutputPaths:
    """Files the build writes for one source."""

    source: Path
    output: Path
    source_map: Path


def output_path_for(source: Path, base: Path) -> Path | None:
    """Compute where the build writes the compiled version of ``source``.

    Sources in a ``styles``/``scripts`` directory directly below ``base`` go
    to a sibling ``dist`` directory; everything else (e.g. ``components``)
    is written next to its source. Style sources compile to ``.min.css``,
    ``.es6.js`` scripts drop their ``.es6`` marker and all scripts become
    ``.min.js``.

    Returns
    -------
    Path | None
        Output path, or ``None`` for Sass partials which are never emitted.
    """
    source = Path(source)
    relative = source.relative_to(base)
    suffix = source.suffix.lower()

    if suffix in STYLE_SUFFIXES:
        if source.name.startswith("_"):
            return None
        dist_dir, stem, extname = "styles", source.stem, ".css"
    elif suffix in SCRIPT_SUFFIXES:
        stem = source.stem
        if stem.endswith(".es6"):
            stem = stem[: -len(".es6")]
        dist_dir, extname = "scripts", ".js"
    else:
        raise ValueError(f"Not a style or script source: {source}")

    directory = relative.parent
    if directory.parts and directory.parts[0] == dist_dir:
        directory = directory.parent / "dist"

    return Path(base) / directory / f"{stem}.min{extname}"


def plan_outputs(
    patterns: Iterable[str],
    ignores: Iterable[str] = (),
) -> list[OutputPaths]:
    """Map every source matched by ``patterns`` to the files built from it."""
    ignore_patterns = list(ignores)
    planned: dict[Path, OutputPaths] = {}
    for pattern in patterns:
        base = glob_base(pattern)
        for source in expand_patterns([pattern], ignore_patterns):
            if source in planned:
                continue
            output = output_path_for(source, base)
            if output is None:
                continue
            planned[source] = OutputPaths(
                source=source,
                output=output,
                source_map=output.with_name(output.name + ".map"),
            )
    return [planned[source] for source in sorted(planned)]
