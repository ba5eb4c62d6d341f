"""Drupal extension descriptor."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from drupal_assets.errors import InvalidExtensionPathError
from drupal_assets.globs import escape_path


@dataclass(frozen=True)
class DrupalExtension:
    """A Drupal module or theme rooted at ``path``.

    All pattern getters are pure path templates; only the constructor touches
    the filesystem. Wildcard characters in ``path`` are escaped in every
    pattern.

    Raises
    ------
    InvalidExtensionPathError
        If ``path`` does not exist or is not a directory.
    """

    path: Path

    def __post_init__(self) -> None:
        path = Path(self.path)
        if not path.is_dir():
            raise InvalidExtensionPathError(path)
        object.__setattr__(self, "path", path)

    @property
    def name(self) -> str:
        """Machine name of the extension (its directory name)."""
        return self.path.name

    def style_source_patterns(self) -> list[str]:
        """Glob patterns for style sources."""
        return [str(escape_path(self.path) / "**" / "*.scss")]

    def script_source_patterns(self) -> list[str]:
        """Glob patterns for script sources."""
        return [str(escape_path(self.path) / "**" / "*.js")]

    def style_destination_patterns(self) -> list[str]:
        """Glob patterns for generated styles.

        Matched files are safe to delete since the build regenerates them.
        """
        return _destination_patterns(escape_path(self.path), "css")

    def script_destination_patterns(self) -> list[str]:
        """Glob patterns for generated scripts.

        Matched files are safe to delete since the build regenerates them.
        """
        return _destination_patterns(escape_path(self.path), "js")


def _destination_patterns(root: Path, ext: str) -> list[str]:
    return [
        str(root / "dist" / f"*.min.{ext}"),
        str(root / "dist" / f"*.{ext}.map"),
        str(root / "components" / "**" / f"*.min.{ext}"),
        str(root / "components" / "**" / f"*.{ext}.map"),
    ]
