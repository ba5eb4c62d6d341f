#!/usr/bin/env python3
"""Layering checks for the drupal_assets package."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src" / "drupal_assets"

# Layer directory -> import prefixes it must not use.
BANNED_IMPORTS = {
    "drupal": [
        "drupal_assets.config",
        "drupal_assets.tasks",
        "drupal_assets.cli",
        "typer",
        "pydantic",
    ],
    "config": ["drupal_assets.tasks", "drupal_assets.cli", "typer"],
    "tasks": ["drupal_assets.cli", "typer"],
}


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _violations(path: Path, banned: list[str]) -> list[str]:
    found = []
    for line in _read(path).splitlines():
        stripped = line.strip()
        if not stripped.startswith(("import ", "from ")):
            continue
        module = stripped.split()[1]
        for prefix in banned:
            if module == prefix or module.startswith(prefix + "."):
                found.append(f"{path.relative_to(ROOT)}: '{stripped}'")
    return found


def check(package: Path = PACKAGE) -> list[str]:
    """Return every layering violation below ``package``."""
    found: list[str] = []
    for layer, banned in BANNED_IMPORTS.items():
        for path in sorted((package / layer).glob("*.py")):
            found.extend(_violations(path, banned))
    return found


def main() -> None:
    """Run repository architecture boundary checks."""
    found = check()
    if found:
        raise SystemExit("Architecture violation in " + "\n".join(found))
    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
