"""Minifier options derived from a configuration snapshot."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from drupal_assets.config.defaults import GLOBALS_KEY, UGLIFY_KEY
from drupal_assets.config.snapshot import Config
from drupal_assets.errors import OptionsError
from drupal_assets.schemas import GlobalsOption, MangleOptions, UglifyOptions


def resolve_uglify_options(config: Config) -> dict[str, Any]:
    """Return minifier options with the configured globals kept unmangled.

    The ``globals`` option is appended to ``mangle.reserved`` (without
    duplicates). When mangling is disabled the options are returned as
    configured. The snapshot itself is left untouched.

    Raises
    ------
    OptionsError
        If the ``uglify`` or ``globals`` options have an unexpected shape.
    """
    try:
        parsed = UglifyOptions.model_validate(config.options_for(UGLIFY_KEY, {}))
        globals_ = GlobalsOption.validate_python(config.options_for(GLOBALS_KEY, []))
    except ValidationError as exc:
        raise OptionsError(f"Invalid minifier options: {exc}") from exc

    options = parsed.model_dump(exclude_unset=True)
    if parsed.mangle is False:
        return options

    mangle = parsed.mangle if isinstance(parsed.mangle, MangleOptions) else MangleOptions()
    reserved = list(dict.fromkeys([*mangle.reserved, *globals_]))
    options["mangle"] = {**mangle.model_dump(exclude_unset=True), "reserved": reserved}
    return options
