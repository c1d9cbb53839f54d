"""Geo point record, number/date formatting and the geo: uri codec.

Modules:
 - point: GeoPoint value holder and sentinels
 - formatter: lat/lon, zoom and date text conversion
 - uri: GeoUri parser/serializer
"""

__all__ = [
    "errors",
    "formatter",
    "point",
    "uri",
]
