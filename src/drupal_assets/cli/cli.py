#!/usr/bin/env python3
"""
drupal_assets.cli.cli

Typer-based CLI to inspect and clean the asset build configuration of a
Drupal project.

Examples
--------
Show the configuration of the project in the current directory:

    drupal-assets show

Delete generated styles and scripts:

    drupal-assets clean --project-root /path/to/project
"""

from __future__ import annotations

import logging
import traceback
from enum import Enum
from pathlib import Path
from typing import Any

import typer

from drupal_assets import __version__
from drupal_assets.config.loader import load_config
from drupal_assets.config.snapshot import Config
from drupal_assets.drupal.root import detect_drupal_root
from drupal_assets.errors import DrupalAssetsError

app = typer.Typer(
    name="drupal-assets",
    help="Inspect and clean the front-end asset configuration of a Drupal project.",
    no_args_is_help=True,
)

PROJECT_ROOT_HELP = "Directory containing the project's composer.json."
CONFIG_HELP = "Config module to load instead of <project-root>/assets_config.py."


class AssetKind(str, Enum):
    """Asset family selector."""

    styles = "styles"
    scripts = "scripts"
    all = "all"


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error.

    Parameters
    ----------
    exc : Exception
        Exception raised by a command.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _debug(ctx: typer.Context) -> bool:
    return bool((ctx.obj or {}).get("debug", False))


def _load(ctx: typer.Context, project_root: Path, config_path: Path | None) -> Config:
    try:
        return load_config(project_root.resolve(), config_path)
    except DrupalAssetsError as exc:
        raise typer.Exit(code=_print_error(exc, _debug(ctx)))
    except Exception as exc:
        # Anything else still gets a one-line message; --debug adds the traceback.
        raise typer.Exit(code=_print_error(exc, _debug(ctx)))


def _project_root_option() -> Any:
    return typer.Option(
        Path("."),
        "--project-root",
        "-p",
        exists=True,
        file_okay=False,
        help=PROJECT_ROOT_HELP,
    )


def _config_option() -> Any:
    return typer.Option(
        None,
        "--config",
        "-c",
        dir_okay=False,
        help=CONFIG_HELP,
    )


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Initialize shared CLI state."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("show")
def show_cmd(
    ctx: typer.Context,
    project_root: Path = _project_root_option(),
    config_path: Path | None = _config_option(),
) -> None:
    """Print the resolved configuration."""
    typer.echo(str(_load(ctx, project_root, config_path)))


@app.command("extensions")
def extensions_cmd(
    ctx: typer.Context,
    project_root: Path = _project_root_option(),
    config_path: Path | None = _config_option(),
) -> None:
    """List the Drupal extensions the configuration includes."""
    config = _load(ctx, project_root, config_path)
    extensions = {ext.path: ext for ext in config.extensions}

    if not extensions:
        typer.echo("<none>")
    for ext in extensions.values():
        path = ext.path
        if path.is_relative_to(config.drupal_root):
            path = path.relative_to(config.drupal_root)
        typer.echo(f"{ext.name}  {path}")


@app.command("sources")
def sources_cmd(
    ctx: typer.Context,
    kind: AssetKind = typer.Argument(AssetKind.all, help="Which sources to list."),
    project_root: Path = _project_root_option(),
    config_path: Path | None = _config_option(),
) -> None:
    """List source files selected by the configuration (ignores applied)."""
    from drupal_assets.tasks.files import expand_patterns

    config = _load(ctx, project_root, config_path)
    sources: list[Path] = []
    try:
        if kind in (AssetKind.styles, AssetKind.all):
            sources += expand_patterns(config.style_sources, config.style_ignores)
        if kind in (AssetKind.scripts, AssetKind.all):
            sources += expand_patterns(config.script_sources, config.script_ignores)
    except Exception as exc:
        raise typer.Exit(code=_print_error(exc, _debug(ctx)))

    for source in sources:
        typer.echo(str(source))


@app.command("outputs")
def outputs_cmd(
    ctx: typer.Context,
    project_root: Path = _project_root_option(),
    config_path: Path | None = _config_option(),
) -> None:
    """Show which file the build writes for every source."""
    from drupal_assets.tasks.outputs import plan_outputs

    config = _load(ctx, project_root, config_path)
    try:
        planned = plan_outputs(config.style_sources, config.style_ignores) + plan_outputs(
            config.script_sources, config.script_ignores
        )
    except Exception as exc:
        # Sources the build cannot compile (e.g. plain .css) end up here.
        raise typer.Exit(code=_print_error(exc, _debug(ctx)))

    for item in planned:
        typer.echo(f"{item.source} -> {item.output}")


@app.command("clean")
def clean_cmd(
    ctx: typer.Context,
    kind: AssetKind = typer.Argument(AssetKind.all, help="Which outputs to delete."),
    project_root: Path = _project_root_option(),
    config_path: Path | None = _config_option(),
    dry_run: bool = typer.Option(
        False, "--dry-run", help="Only list the files that would be deleted."
    ),
) -> None:
    """Delete generated styles and scripts."""
    from drupal_assets.tasks.clean import clean, clean_scripts, clean_styles

    config = _load(ctx, project_root, config_path)
    try:
        if kind is AssetKind.styles:
            deleted = clean_styles(config, dry_run=dry_run)
        elif kind is AssetKind.scripts:
            deleted = clean_scripts(config, dry_run=dry_run)
        else:
            deleted = clean(config, dry_run=dry_run)
    except Exception as exc:
        raise typer.Exit(code=_print_error(exc, _debug(ctx)))

    verb = "Would delete" if dry_run else "Deleted"
    for path in deleted:
        typer.echo(f"{verb}: {path}")
    typer.echo(f"✓ {verb} {len(deleted)} file(s).")


@app.command("doctor")
def doctor_cmd(
    project_root: Path = _project_root_option(),
) -> None:
    """Print the package version and what was detected in the project."""
    typer.echo(f"drupal-assets: {__version__}")
    try:
        typer.echo(f"drupal root: {detect_drupal_root(project_root.resolve())}")
    except DrupalAssetsError:
        typer.echo("drupal root: <not detected>")


if __name__ == "__main__":
    app()
