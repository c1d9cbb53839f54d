"""Conversion between GeoPoint and geo:/geoarea: uri strings.

Format::

    geo:{lat}{,lon{,alt}}{?q={lat}{,lon}{,alt}{(name)}}{&z=zmin}{&z2=zmax}{&uri=link}{&s=symbol}{&d=description}{&id=id}{&t=ISO8601time}
    geoarea:{neLat},{neLon},{swLat},{swLon}

Example with FORMAT_REDUNDANT_LAT_LON set::

    geo:12.345,-56.7890123?q=12.345,-56.7890123(name)&z=5&z2=7&uri=uri&d=description&id=id&t=1991-03-03T04:05:06Z

Compatible with draft-mayrhofer-geo-uri-00 and with map apps that only read
the q parameter. uri/s/d/id/t/z2 are non-standard extensions.
"""
from __future__ import annotations

import enum
import logging
from typing import Dict, List, Optional, Sequence, Tuple
from urllib.parse import quote_plus, unquote_plus

from extract.geo_patterns import match_area, match_lat_lon
from extract.infer import fill_link_and_symbol, fill_name, fill_time
from extract.infer import infer_missing as _infer_missing
from geo.errors import ParseError
from geo.formatter import format_date, format_lat_lon, format_zoom, parse_zoom
from geo.point import NO_ZOOM, GeoPoint, is_unset_coordinate

logger = logging.getLogger(__name__)

GEO_SCHEME = "geo:"
AREA_SCHEME = "geoarea:"

# query parameter names
QUERY = "q"
LAT_LON = "ll"
ZOOM = "z"
ZOOM_MAX = "z2"
LINK = "uri"
SYMBOL = "s"
DESCRIPTION = "d"
ID = "id"
TIME = "t"
NAME = "name"


class ParseOptions(enum.IntFlag):
    DEFAULT = 0
    # toUriString: repeat lat/lon in q, e.g. geo:52.1,9.2?q=52.1,9.2 (google only reads q)
    FORMAT_REDUNDANT_LAT_LON = 0x1
    # fromUri: take missing name/time/lat/lon/link/symbol from d and other parameters
    PARSE_INFER_MISSING = 0x100


class _UriBuilder:
    """Per-call accumulator: uri parts plus the next parameter delimiter."""

    def __init__(self, prefix: str):
        self.parts: List[str] = [prefix]
        self.delim = "?"

    def add(self, name: str, value: Optional[str], url_encode: bool = False) -> None:
        if value is None:
            return
        if url_encode:
            encoded = _encode(value)
            if encoded is None:
                logger.warning("Omitting parameter %r: value cannot be url-encoded", name)
                return
            value = encoded
        self.parts.append(f"{self.delim}{name}={value}")
        self.delim = "&"

    def build(self) -> str:
        return "".join(self.parts)


def _encode(raw: str) -> Optional[str]:
    try:
        return quote_plus(raw, encoding="utf-8", errors="strict")
    except UnicodeEncodeError:
        return None


def _format_lat_lon_pair(point: GeoPoint) -> str:
    if is_unset_coordinate(point.latitude):
        return ""
    text = format_lat_lon(point.latitude)
    if not is_unset_coordinate(point.longitude):
        text += "," + format_lat_lon(point.longitude)
    return text


def _split_query(query: str) -> Dict[str, str]:
    """key -> url-decoded value; last duplicate wins, valueless params are dropped."""
    lookup: Dict[str, str] = {}
    for param in query.split("&"):
        key, sep, value = param.partition("=")
        if not sep or not key or not value:
            continue
        lookup[key] = unquote_plus(value, encoding="utf-8")
    return lookup


def _parse_zoom_param(value: Optional[str], name: str) -> int:
    try:
        return parse_zoom(value)
    except ParseError as e:
        logger.warning("Ignoring malformed zoom %s=%r: %s", name, value, e)
        return NO_ZOOM


class GeoUri:
    """Parses and formats geo uris according to the options given at construction.

    Instances hold no per-call state and may be shared.
    """

    def __init__(self, options: int = ParseOptions.DEFAULT):
        self.options = ParseOptions(options)

    def is_set(self, option: ParseOptions) -> bool:
        return bool(self.options & option)

    # ------------------------------
    # Parsing
    # ------------------------------
    def from_uri(self, uri: Optional[str], parse_result: Optional[GeoPoint] = None) -> Optional[GeoPoint]:
        """Load a GeoPoint from a geo: uri into parse_result (or a new point).

        Returns None if uri is not a geo: uri. Fields already set in
        parse_result are kept.
        """
        if uri is None or not uri.startswith(GEO_SCHEME):
            return None
        if parse_result is None:
            parse_result = GeoPoint()

        path, sep, query = uri.partition("?")
        if not sep:
            self._fill_lat_lon(parse_result, [uri])
            return parse_result

        params = _split_query(query)
        self._fill_explicit(parse_result, params)

        # lat/lon from q take precedence over the uri path
        where_to_search: List[Optional[str]] = [params.get(QUERY), path, params.get(LAT_LON)]
        infer = self.is_set(ParseOptions.PARSE_INFER_MISSING)
        if infer:
            where_to_search.append(parse_result.description)
            for value in params.values():
                if value not in where_to_search:
                    where_to_search.append(value)

        fill_name(parse_result, where_to_search)
        fill_time(parse_result, where_to_search, time_text=params.get(TIME))
        self._fill_lat_lon(parse_result, where_to_search)

        if not parse_result.name and params.get(NAME):
            parse_result.name = params[NAME]
        if infer:
            fill_link_and_symbol(parse_result, where_to_search)
        return parse_result

    def from_area_uri(
        self, uri: Optional[str], parse_result: Optional[Sequence[GeoPoint]] = None
    ) -> Optional[Sequence[GeoPoint]]:
        """Load [north_east, south_west] from a geoarea: uri.

        Returns None if uri is not a geoarea: uri, parse_result has fewer than
        two points, or the four coordinates cannot be parsed.
        """
        if parse_result is None:
            parse_result = [GeoPoint(), GeoPoint()]
        if uri is None or len(parse_result) < 2:
            return None
        if not uri.startswith(AREA_SCHEME):
            return None

        values = match_area(uri)
        if values is None:
            return None
        lat1, lon1, lat2, lon2 = values
        parse_result[0].latitude, parse_result[0].longitude = lat1, lon1
        parse_result[1].latitude, parse_result[1].longitude = lat2, lon2
        return parse_result

    @staticmethod
    def infer_missing(point: GeoPoint, text: Optional[str]) -> GeoPoint:
        """Infer name, time, link and symbol from text if not already set."""
        return _infer_missing(point, text)

    @staticmethod
    def _fill_explicit(point: GeoPoint, params: Dict[str, str]) -> None:
        if point.description is None:
            point.description = params.get(DESCRIPTION)
        if point.link is None:
            point.link = params.get(LINK)
        if point.symbol is None:
            point.symbol = params.get(SYMBOL)
        if point.id is None:
            point.id = params.get(ID)
        if point.zoom_min == NO_ZOOM:
            point.zoom_min = _parse_zoom_param(params.get(ZOOM), ZOOM)
        if point.zoom_max == NO_ZOOM:
            point.zoom_max = _parse_zoom_param(params.get(ZOOM_MAX), ZOOM_MAX)

    @staticmethod
    def _fill_lat_lon(point: GeoPoint, where_to_search: List[Optional[str]]) -> None:
        if point.has_lat_lon():
            return
        found: Optional[Tuple[float, float]] = match_lat_lon(where_to_search)
        if found is not None:
            point.latitude, point.longitude = found

    # ------------------------------
    # Formatting
    # ------------------------------
    def to_uri_string(self, point: GeoPoint) -> str:
        """Format point as geo: uri with parameters in canonical order."""
        builder = _UriBuilder(GEO_SCHEME + _format_lat_lon_pair(point))
        builder.add(QUERY, self._format_query(point))
        builder.add(ZOOM, format_zoom(point.zoom_min))
        builder.add(ZOOM_MAX, format_zoom(point.zoom_max))
        builder.add(LINK, point.link, url_encode=True)
        builder.add(SYMBOL, point.symbol, url_encode=True)
        builder.add(DESCRIPTION, point.description, url_encode=True)
        builder.add(ID, point.id, url_encode=True)
        if point.time_of_measurement is not None:
            builder.add(TIME, format_date(point.time_of_measurement))
        return builder.build()

    def lat_lon_to_uri_string(self, latitude: float, longitude: float, zoom_level: int = NO_ZOOM) -> str:
        return self.to_uri_string(GeoPoint(latitude=latitude, longitude=longitude, zoom_min=zoom_level))

    def to_area_uri_string(self, north_east: GeoPoint, south_west: GeoPoint) -> str:
        coords = [
            north_east.latitude,
            north_east.longitude,
            south_west.latitude,
            south_west.longitude,
        ]
        return AREA_SCHEME + ",".join(format_lat_lon(c) for c in coords)

    def _format_query(self, point: GeoPoint) -> Optional[str]:
        # {lat{,lon}}{(name)}
        text = ""
        if self.is_set(ParseOptions.FORMAT_REDUNDANT_LAT_LON):
            text += _format_lat_lon_pair(point)
        if point.name is not None:
            encoded = _encode(point.name)
            if encoded is None:
                logger.warning("Omitting name %r: value cannot be url-encoded", point.name)
            else:
                text += "(" + encoded + ")"
        return text or None
