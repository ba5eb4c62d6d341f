"""Drupal project layout: root detection and extension discovery."""

from .discovery import (
    MANIFEST_PATTERN,
    custom_extension_globs,
    detect_drupal_extensions,
)
from .extension import DrupalExtension
from .root import DRUPAL_ROOT_CANDIDATES, detect_drupal_root

__all__ = [
    "DRUPAL_ROOT_CANDIDATES",
    "MANIFEST_PATTERN",
    "DrupalExtension",
    "custom_extension_globs",
    "detect_drupal_extensions",
    "detect_drupal_root",
]
