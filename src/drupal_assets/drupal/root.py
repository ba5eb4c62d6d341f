"""Drupal root auto-detection."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from drupal_assets.errors import DrupalRootNotFoundError

logger = logging.getLogger(__name__)

DRUPAL_ROOT_CANDIDATES: tuple[str, ...] = ("web", "docroot")


def detect_drupal_root(
    project_root: Path,
    candidates: Sequence[str] = DRUPAL_ROOT_CANDIDATES,
) -> Path:
    """Locate the directory containing Drupal's ``index.php``.

    Parameters
    ----------
    project_root : Path
        Directory containing the project's ``composer.json``.
    candidates : Sequence[str], default=DRUPAL_ROOT_CANDIDATES
        Directory names probed in order.

    Returns
    -------
    Path
        Resolved absolute path of the first candidate that is a directory.

    Raises
    ------
    DrupalRootNotFoundError
        If none of the candidates is a directory.
    """
    for entry in candidates:
        candidate = (Path(project_root) / entry).resolve()
        if candidate.is_dir():
            logger.debug("Drupal root detected: %s", candidate)
            return candidate

    raise DrupalRootNotFoundError(Path(project_root), candidates)
