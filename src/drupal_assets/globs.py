"""Glob helpers shared by extension discovery and the task helpers.

Ignore globs follow the usual glob rules: ``**`` matches zero or more
directories and ``*`` never crosses a directory separator. Every pattern is
anchored: absolute patterns at the filesystem root, relative ones at the
start of a relative path.
"""

from __future__ import annotations

import glob
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import pathspec

_ESCAPED = re.compile(r"\[([*?\[])\]")
_MAGIC_CHARS = frozenset("*?[")


def _anchored(pattern: str) -> str:
    # A leading slash anchors gitwildmatch patterns; without it a pattern
    # lacking a slash would match at any depth.
    return "/" + Path(pattern).as_posix().lstrip("/")


def _normalized(path: str | Path) -> str:
    return Path(path).as_posix().lstrip("/")


@dataclass(frozen=True)
class IgnoreRules:
    """Compiled ignore globs."""

    matcher: pathspec.PathSpec

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> IgnoreRules:
        lines = [_anchored(str(pattern)) for pattern in patterns]
        return cls(pathspec.PathSpec.from_lines("gitwildmatch", lines))

    def is_ignored(self, path: str | Path) -> bool:
        """Return ``True`` if ``path`` matches any of the compiled globs."""
        return self.matcher.match_file(_normalized(path))


def escape_path(path: str | Path) -> Path:
    """Escape wildcard characters of a literal path used as a glob prefix."""
    return Path(glob.escape(str(path)))


def glob_base(pattern: str) -> Path:
    """Return the leading directory of ``pattern`` that contains no wildcard.

    Segments escaped with ``escape_path`` count as literal and are unescaped.
    """
    parts: list[str] = []
    for part in Path(pattern).parts:
        if _MAGIC_CHARS.intersection(_ESCAPED.sub("", part)):
            break
        parts.append(_ESCAPED.sub(r"\1", part))
    return Path(*parts) if parts else Path(".")
