from __future__ import annotations

import os
from typing import Optional

from geo.uri import ParseOptions


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def build_options_from_env() -> ParseOptions:
    """Default codec options for the service.

    Env vars:
      GEO_URI_REDUNDANT_LAT_LON=1   repeat lat/lon in q when formatting (default on)
      GEO_URI_INFER_MISSING=1       infer missing fields when parsing (default off)
    """
    options = ParseOptions.DEFAULT
    if _flag("GEO_URI_REDUNDANT_LAT_LON", "1"):
        options |= ParseOptions.FORMAT_REDUNDANT_LAT_LON
    if _flag("GEO_URI_INFER_MISSING", "0"):
        options |= ParseOptions.PARSE_INFER_MISSING
    return options


def apply_override(options: ParseOptions, option: ParseOptions, enabled: Optional[bool]) -> ParseOptions:
    """Set or clear a single option; None keeps the default."""
    if enabled is None:
        return options
    if enabled:
        return options | option
    return options & ~option
