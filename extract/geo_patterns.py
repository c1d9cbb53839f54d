from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from geo.errors import ParseError
from geo.formatter import parse_lat_or_lon

logger = logging.getLogger(__name__)

# A search location may be None (parameter not present); those are skipped.
Locations = Sequence[Optional[str]]

_DOUBLE = r"([+\-]?[0-9.]+)"  # i.e. "-123.456"
_COMMA_DOUBLE = r"(?:\s*,\s*" + _DOUBLE + r")"  # i.e. " , +123.456"

NAME_RE = re.compile(r"(?:\s*\(([^()]+)\))")  # i.e. " (hello world)"
LAT_LON_ALT_RE = re.compile(_DOUBLE + _COMMA_DOUBLE + _COMMA_DOUBLE + "?")
LAT_LON_LAT_LON_RE = re.compile(_DOUBLE + _COMMA_DOUBLE + _COMMA_DOUBLE + _COMMA_DOUBLE)
TIME_RE = re.compile(
    r"([12]\d\d\d-\d\d-\d\dT\d\d:\d\d:\d\d(?:\.\d+)?(?:Z|[+\-]\d\d:?\d\d)?)"
)
HREF_RE = re.compile(r"(?:\s*href\s?=\s?['\"]([^'\"]*)['\"])")  # i.e. href='hello'
SRC_RE = re.compile(r"(?:\s*src\s?=\s?['\"]([^'\"]*)['\"])")  # i.e. src='hello'


def iter_matches(pattern: re.Pattern[str], locations: Iterable[Optional[str]]) -> Iterator[re.Match[str]]:
    """Yield the first match of pattern in each non-empty location, in order."""
    for candidate in locations:
        if not candidate:
            continue
        m = pattern.search(candidate)
        if m:
            yield m


def first_match(pattern: re.Pattern[str], locations: Iterable[Optional[str]]) -> Optional[re.Match[str]]:
    return next(iter_matches(pattern, locations), None)


def find_first(pattern: re.Pattern[str], locations: Iterable[Optional[str]]) -> Optional[str]:
    """Group 1 of the first match across locations, or None."""
    m = first_match(pattern, locations)
    if not m:
        return None
    return m.group(1)


def _without_names(locations: Iterable[Optional[str]]) -> Iterator[Optional[str]]:
    for candidate in locations:
        yield NAME_RE.sub(" ", candidate) if candidate else candidate


def match_name(locations: Locations) -> Optional[str]:
    return find_first(NAME_RE, locations)


def match_time_text(locations: Locations) -> Optional[str]:
    return find_first(TIME_RE, locations)


def match_link(locations: Locations) -> Optional[str]:
    return find_first(HREF_RE, locations)


def match_symbol(locations: Locations) -> Optional[str]:
    return find_first(SRC_RE, locations)


def match_lat_lon(locations: Locations) -> Optional[Tuple[float, float]]:
    """(lat, lon) from the first "lat,lon[,alt]" finding; altitude is dropped.

    Parenthesized names are blanked out first, so "(Gate 7,8)" never yields
    coordinates. Only the first finding is considered. If its numbers are
    malformed (e.g. "1.2.3") the result is None.
    """
    m = first_match(LAT_LON_ALT_RE, _without_names(locations))
    if not m:
        return None
    try:
        return parse_lat_or_lon(m.group(1)), parse_lat_or_lon(m.group(2))
    except ParseError as e:
        logger.warning("Ignoring malformed lat/lon %r: %s", m.group(0), e)
        return None


def match_area(text: Optional[str]) -> Optional[Tuple[float, float, float, float]]:
    """(lat1, lon1, lat2, lon2) from "lat,lon,lat,lon"; None if absent or malformed."""
    m = first_match(LAT_LON_LAT_LON_RE, [text])
    if not m:
        return None
    try:
        values = tuple(parse_lat_or_lon(m.group(i)) for i in range(1, 5))
    except ParseError as e:
        logger.warning("Ignoring malformed area %r: %s", m.group(0), e)
        return None
    return values  # type: ignore[return-value]
