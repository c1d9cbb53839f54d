"""Text conversion for coordinates, zoom levels and timestamps.

Dates are delegated to pydantic's datetime validation, which understands
ISO-8601 with fractional seconds and a 'Z' or numeric offset suffix.
"""
from __future__ import annotations

import re
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from geo.errors import ParseError
from geo.point import NO_ZOOM

_DECIMAL_RE = re.compile(r"[+\-]?(?:\d+\.?\d*|\.\d+)")
_INT_RE = re.compile(r"[+\-]?\d+")

_DATETIME_ADAPTER = TypeAdapter(datetime)


def format_lat_lon(value: float) -> str:
    """Shortest fixed-notation text that parses back to the same float.

    Examples: 53.0 -> "53", 1e-05 -> "0.00001", -12.3450 -> "-12.345"
    """
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def parse_lat_or_lon(text: Optional[str]) -> float:
    if text is None:
        raise ParseError("missing latitude/longitude", text)
    cleaned = text.strip()
    if not _DECIMAL_RE.fullmatch(cleaned):
        raise ParseError(f"not a decimal number: {text!r}", text)
    return float(cleaned)


def parse_zoom(text: Optional[str]) -> int:
    """Parse a zoom level; None or blank text means NO_ZOOM."""
    if text is None or not text.strip():
        return NO_ZOOM
    cleaned = text.strip()
    if not _INT_RE.fullmatch(cleaned):
        raise ParseError(f"not a zoom level: {text!r}", text)
    return int(cleaned)


def format_zoom(value: int) -> Optional[str]:
    if value == NO_ZOOM:
        return None
    return str(int(value))


def _to_utc(dt: datetime) -> datetime:
    # naive datetimes are taken as UTC
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_date(dt: datetime) -> str:
    """ISO-8601 in UTC with 'Z' suffix; fractional seconds only when non-zero."""
    utc = _to_utc(dt)
    text = utc.strftime("%Y-%m-%dT%H:%M:%S")
    if utc.microsecond:
        text += ("." + f"{utc.microsecond:06d}").rstrip("0")
    return text + "Z"


def parse_date(text: Optional[str]) -> datetime:
    if text is None or not text.strip():
        raise ParseError("missing date", text)
    try:
        dt = _DATETIME_ADAPTER.validate_python(text.strip())
    except ValidationError as e:
        raise ParseError(f"not an ISO-8601 date: {text!r}", text) from e
    return _to_utc(dt)
