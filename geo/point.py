from __future__ import annotations

import math
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional

# Smallest positive subnormal double: never a real coordinate, and not NaN.
NO_LAT_LON: float = math.ulp(0.0)

# Zoom bound sentinel: "no lower/upper bound".
NO_ZOOM: int = -1


def is_unset_coordinate(value: Optional[float]) -> bool:
    """True for None, NaN or the NO_LAT_LON sentinel."""
    if value is None:
        return True
    if math.isnan(value):
        return True
    return value == NO_LAT_LON


@dataclass
class GeoPoint:
    """A location or trackpoint that can be displayed on a map.

    All fields except the two coordinates are optional. Unset coordinates hold
    NO_LAT_LON, unset zoom bounds hold NO_ZOOM, everything else is None.
    """

    latitude: float = NO_LAT_LON  # degrees north
    longitude: float = NO_LAT_LON  # degrees east
    time_of_measurement: Optional[datetime] = None
    name: Optional[str] = None  # short, non-unique marker label
    description: Optional[str] = None
    zoom_min: int = NO_ZOOM  # shown only if map zoom >= zoom_min
    zoom_max: int = NO_ZOOM  # shown only if map zoom <= zoom_max
    id: Optional[str] = None
    link: Optional[str] = None  # url opened from the marker
    symbol: Optional[str] = None  # icon url

    def clear(self) -> "GeoPoint":
        """Reset every field to its unset value so the instance can be reused."""
        self.latitude = NO_LAT_LON
        self.longitude = NO_LAT_LON
        self.time_of_measurement = None
        self.name = None
        self.description = None
        self.zoom_min = NO_ZOOM
        self.zoom_max = NO_ZOOM
        self.id = None
        self.link = None
        self.symbol = None
        return self

    def duplicate(self) -> "GeoPoint":
        # fields are immutable values, a shallow copy is independent
        return replace(self)

    def has_lat_lon(self) -> bool:
        return not (is_unset_coordinate(self.latitude) or is_unset_coordinate(self.longitude))

    @staticmethod
    def is_empty(point: Optional["GeoPoint"]) -> bool:
        if point is None:
            return True
        return GeoPoint.is_empty_lat_lon(point.latitude, point.longitude)

    @staticmethod
    def is_empty_lat_lon(latitude: Optional[float], longitude: Optional[float]) -> bool:
        """True if either coordinate is unset (None, NaN, NO_LAT_LON) or both are 0."""
        if is_unset_coordinate(latitude) or is_unset_coordinate(longitude):
            return True
        return latitude == 0.0 and longitude == 0.0

    def __str__(self) -> str:
        if self.name is not None:
            return self.name
        if self.id is not None:
            return "#" + self.id
        return repr(self)
