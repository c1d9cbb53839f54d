from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from geo.point import NO_LAT_LON, NO_ZOOM, GeoPoint, is_unset_coordinate


class GeoPointModel(BaseModel):
    """JSON view of a GeoPoint. Every unset field is null."""

    latitude: Optional[float] = Field(default=None, description="Degrees north")
    longitude: Optional[float] = Field(default=None, description="Degrees east")
    time_of_measurement: Optional[datetime] = None
    name: Optional[str] = Field(default=None, description="Short marker label")
    description: Optional[str] = None
    zoom_min: Optional[int] = Field(default=None, description="Shown if map zoom >= zoom_min")
    zoom_max: Optional[int] = Field(default=None, description="Shown if map zoom <= zoom_max")
    id: Optional[str] = None
    link: Optional[str] = None
    symbol: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "latitude": 53.55,
                "longitude": 9.99,
                "time_of_measurement": "1991-03-03T04:05:06Z",
                "name": "Hamburg",
                "description": "harbour",
                "zoom_min": 5,
                "zoom_max": 7,
                "id": "hh-1",
                "link": "https://example.org/hamburg",
                "symbol": "https://example.org/pin.png",
            }
        }
    )

    @classmethod
    def from_point(cls, point: GeoPoint) -> "GeoPointModel":
        return cls(
            latitude=None if is_unset_coordinate(point.latitude) else point.latitude,
            longitude=None if is_unset_coordinate(point.longitude) else point.longitude,
            time_of_measurement=point.time_of_measurement,
            name=point.name,
            description=point.description,
            zoom_min=None if point.zoom_min == NO_ZOOM else point.zoom_min,
            zoom_max=None if point.zoom_max == NO_ZOOM else point.zoom_max,
            id=point.id,
            link=point.link,
            symbol=point.symbol,
        )

    def to_point(self) -> GeoPoint:
        return GeoPoint(
            latitude=NO_LAT_LON if self.latitude is None else self.latitude,
            longitude=NO_LAT_LON if self.longitude is None else self.longitude,
            time_of_measurement=self.time_of_measurement,
            name=self.name,
            description=self.description,
            zoom_min=NO_ZOOM if self.zoom_min is None else self.zoom_min,
            zoom_max=NO_ZOOM if self.zoom_max is None else self.zoom_max,
            id=self.id,
            link=self.link,
            symbol=self.symbol,
        )


class ParseRequest(BaseModel):
    uri: str
    infer_missing: Optional[bool] = Field(
        default=None, description="Override the service default for PARSE_INFER_MISSING"
    )

    @field_validator("uri")
    @classmethod
    def _strip_uri(cls, v: str) -> str:
        return v.strip()


class FormatRequest(BaseModel):
    point: GeoPointModel
    redundant_lat_lon: Optional[bool] = Field(
        default=None, description="Override the service default for FORMAT_REDUNDANT_LAT_LON"
    )


class InferRequest(BaseModel):
    text: str
    point: GeoPointModel = Field(default_factory=GeoPointModel)


class AreaModel(BaseModel):
    north_east: GeoPointModel
    south_west: GeoPointModel


class AreaParseRequest(BaseModel):
    uri: str

    @field_validator("uri")
    @classmethod
    def _strip_uri(cls, v: str) -> str:
        return v.strip()


class UriResponse(BaseModel):
    uri: str
