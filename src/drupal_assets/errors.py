"""Exception types raised by drupal-assets."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class DrupalAssetsError(Exception):
    """Base class for all drupal-assets errors.

    Attributes
    ----------
    exit_code : int
        Process exit code used by the CLI when this error aborts a command.
    """

    exit_code = 1


class DrupalRootNotFoundError(DrupalAssetsError):
    """No Drupal root candidate exists under the project root."""

    exit_code = 2

    def __init__(self, project_root: Path, candidates: Sequence[str]) -> None:
        self.project_root = project_root
        self.candidates = tuple(candidates)
        super().__init__(
            f"Drupal root not detected at: {', '.join(self.candidates)}. "
            f"Project root: {project_root}"
        )


class InvalidExtensionPathError(DrupalAssetsError):
    """An extension path does not exist or is not a directory."""

    exit_code = 2

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Drupal extension not detected in {path}")


class DrupalRootAlreadySetError(DrupalAssetsError):
    """The Drupal root was already resolved or set explicitly."""

    def __init__(self, drupal_root: Path) -> None:
        self.drupal_root = drupal_root
        super().__init__(f"Drupal root already defined: {drupal_root}")


class ConfigLoadError(DrupalAssetsError):
    """A project config module could not be loaded or used."""

    exit_code = 3


class OptionsError(DrupalAssetsError):
    """A stored option block does not have the shape a consumer expects."""
