"""Delete generated styles and scripts."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from drupal_assets.config.snapshot import Config
from drupal_assets.tasks.files import expand_patterns

logger = logging.getLogger(__name__)


def clean_styles(config: Config, dry_run: bool = False) -> list[Path]:
    """Delete files matching the style destination patterns."""
    return _delete_matching(config.style_destinations, dry_run)


def clean_scripts(config: Config, dry_run: bool = False) -> list[Path]:
    """Delete files matching the script destination patterns."""
    return _delete_matching(config.script_destinations, dry_run)


def clean(config: Config, dry_run: bool = False) -> list[Path]:
    """Delete all generated styles and scripts.

    Parameters
    ----------
    config : Config
        Configuration whose destination patterns select the files.
    dry_run : bool, default=False
        Only report the files that would be deleted.

    Returns
    -------
    list[Path]
        Deleted (or, with ``dry_run``, matched) files.
    """
    return clean_styles(config, dry_run) + clean_scripts(config, dry_run)


def _delete_matching(patterns: Iterable[str], dry_run: bool) -> list[Path]:
    matched = expand_patterns(patterns)
    for path in matched:
        if dry_run:
            logger.debug("Would delete: %s", path)
            continue
        path.unlink(missing_ok=True)
        logger.debug("Deleted: %s", path)
    return matched
