"""Glob expansion shared by the task helpers."""

from __future__ import annotations

import glob
from collections.abc import Iterable
from pathlib import Path

from drupal_assets.globs import IgnoreRules


def is_ignored(path: str | Path, ignores: Iterable[str]) -> bool:
    """Return ``True`` if ``path`` matches any of the ``ignores`` globs."""
    return IgnoreRules.from_patterns(ignores).is_ignored(path)


def expand_patterns(
    patterns: Iterable[str],
    ignores: Iterable[str] = (),
) -> list[Path]:
    """Expand glob patterns into existing files.

    Parameters
    ----------
    patterns : Iterable[str]
        Glob patterns; ``**`` matches any number of directories.
    ignores : Iterable[str], optional
        Glob patterns of files to leave out.

    Returns
    -------
    list[Path]
        Sorted, de-duplicated list of matching files.
    """
    rules = IgnoreRules.from_patterns(ignores)
    matches: set[str] = set()
    for pattern in patterns:
        for match in glob.glob(pattern, recursive=True):
            if Path(match).is_file() and not rules.is_ignored(match):
                matches.add(match)
    return sorted(Path(match) for match in matches)
