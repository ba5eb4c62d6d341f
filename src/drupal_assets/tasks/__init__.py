"""Helpers for task definitions consuming a ``Config``."""

from .clean import clean, clean_scripts, clean_styles
from .files import expand_patterns
from .outputs import OutputPaths, output_path_for, plan_outputs
from .scripts import resolve_uglify_options

__all__ = [
    "OutputPaths",
    "clean",
    "clean_scripts",
    "clean_styles",
    "expand_patterns",
    "output_path_for",
    "plan_outputs",
    "resolve_uglify_options",
]
