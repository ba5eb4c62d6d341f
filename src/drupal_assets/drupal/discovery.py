"""Extension discovery based on ``*.info.yml`` manifests."""

from __future__ import annotations

import glob
import logging
from collections.abc import Iterable
from pathlib import Path

from drupal_assets.drupal.extension import DrupalExtension
from drupal_assets.globs import IgnoreRules, escape_path

logger = logging.getLogger(__name__)

MANIFEST_PATTERN = "*.info.yml"


def detect_drupal_extensions(
    paths: Iterable[str | Path],
    ignores: Iterable[str] = (),
) -> list[DrupalExtension]:
    """Find all Drupal extensions below a set of directory globs.

    Parameters
    ----------
    paths : Iterable[str | Path]
        Directory glob patterns, e.g. ``web/modules/custom/**``. A manifest
        matching ``MANIFEST_PATTERN`` is looked up under every match.
    ignores : Iterable[str], optional
        Glob patterns; manifests whose path matches one of them are skipped.

    Returns
    -------
    list[DrupalExtension]
        One extension per manifest, in pattern order. Empty when nothing
        matches.
    """
    rules = IgnoreRules.from_patterns(ignores)
    manifests: dict[str, None] = {}
    for path in paths:
        pattern = str(Path(path) / MANIFEST_PATTERN)
        for match in sorted(glob.glob(pattern, recursive=True)):
            if rules.is_ignored(match):
                logger.debug("Ignoring manifest: %s", match)
                continue
            manifests.setdefault(match, None)

    extensions = [DrupalExtension(Path(manifest).parent) for manifest in manifests]
    logger.debug(
        "Detected %d extension(s): %s",
        len(extensions),
        ", ".join(ext.name for ext in extensions),
    )
    return extensions


def custom_extension_globs(drupal_root: Path, kind: str) -> list[Path]:
    """Directory globs holding custom extensions of one ``kind``.

    Parameters
    ----------
    drupal_root : Path
        The Drupal root directory.
    kind : str
        ``modules`` or ``themes``.

    Returns
    -------
    list[Path]
        The site-wide and the per-site (multisite) custom directories, with
        wildcard characters in ``drupal_root`` escaped.
    """
    return [
        escape_path(drupal_root) / kind / "custom" / "**",
        escape_path(drupal_root) / "sites" / "*" / kind / "custom" / "**",
    ]
