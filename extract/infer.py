"""Fill-gaps-only extraction of name/time/link/symbol from free text.

A field that already holds a value is never overwritten; for an unset field
the first search location that matches wins.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from extract.geo_patterns import (
    Locations,
    match_link,
    match_name,
    match_symbol,
    match_time_text,
)
from geo.errors import ParseError
from geo.formatter import parse_date
from geo.point import GeoPoint

logger = logging.getLogger(__name__)


def fill_name(point: GeoPoint, locations: Locations) -> None:
    if not point.name:
        found = match_name(locations)
        if found is not None:
            point.name = found


def fill_time(point: GeoPoint, locations: Locations, time_text: Optional[str] = None) -> None:
    """Set time_of_measurement from time_text (tried first) or locations."""
    if point.time_of_measurement is not None:
        return
    candidates: List[Optional[str]] = [time_text, *locations]
    found = match_time_text(candidates)
    if found is None:
        return
    try:
        point.time_of_measurement = parse_date(found)
    except ParseError as e:
        logger.warning("Ignoring unparsable time %r: %s", found, e)


def fill_link_and_symbol(point: GeoPoint, locations: Locations) -> None:
    if not point.link:
        found = match_link(locations)
        if found is not None:
            point.link = found
    if not point.symbol:
        found = match_symbol(locations)
        if found is not None:
            point.symbol = found


def infer_missing(point: GeoPoint, text: Optional[str]) -> GeoPoint:
    """Infer name, time, link and symbol from text if not already set."""
    if text is not None:
        locations = [text]
        fill_name(point, locations)
        fill_time(point, locations)
        fill_link_and_symbol(point, locations)
    return point
