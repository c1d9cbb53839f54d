from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from app.config import apply_override
from app.logging_setup import describe_options
from app.schemas import (
    AreaModel,
    AreaParseRequest,
    FormatRequest,
    GeoPointModel,
    InferRequest,
    ParseRequest,
    UriResponse,
)
from geo.uri import GeoUri, ParseOptions

logger = logging.getLogger(__name__)

router = APIRouter()


def _set_fields(model: GeoPointModel) -> str:
    return ",".join(k for k, v in model.model_dump().items() if v is not None)


def get_default_options(request: Request) -> ParseOptions:
    # Allow apps/tests to inject defaults via app.state.geo_options
    opts = getattr(request.app.state, "geo_options", None)
    return opts if opts is not None else ParseOptions.DEFAULT


@router.post("/geo/parse", response_model=GeoPointModel)
async def parse_geo(req: ParseRequest, defaults: ParseOptions = Depends(get_default_options)) -> GeoPointModel:
    """Parse a geo: uri into a point.

    Body schema:
      {"uri": "geo:53.5,10?q=(Hamburg)", "infer_missing": false}
    """
    options = apply_override(defaults, ParseOptions.PARSE_INFER_MISSING, req.infer_missing)
    point = GeoUri(options).from_uri(req.uri)
    if point is None:
        logger.info("geo uri rejected", extra={"scheme": "geo", "outcome": "rejected"})
        raise HTTPException(status_code=422, detail=f"Not a geo uri: {req.uri!r}")
    result = GeoPointModel.from_point(point)
    logger.info(
        "geo uri parsed",
        extra={
            "scheme": "geo",
            "options": describe_options(options),
            "outcome": "parsed",
            "fields": _set_fields(result),
        },
    )
    return result


@router.post("/geo/format", response_model=UriResponse)
async def format_geo(req: FormatRequest, defaults: ParseOptions = Depends(get_default_options)) -> UriResponse:
    options = apply_override(defaults, ParseOptions.FORMAT_REDUNDANT_LAT_LON, req.redundant_lat_lon)
    uri = GeoUri(options).to_uri_string(req.point.to_point())
    logger.info(
        "geo uri formatted",
        extra={"scheme": "geo", "options": describe_options(options), "outcome": "formatted", "fields": _set_fields(req.point)},
    )
    return UriResponse(uri=uri)


@router.post("/geo/infer", response_model=GeoPointModel)
async def infer_geo(req: InferRequest) -> GeoPointModel:
    """Fill name/time/link/symbol of point from free text; set fields are kept."""
    point = GeoUri.infer_missing(req.point.to_point(), req.text)
    return GeoPointModel.from_point(point)


@router.post("/geoarea/parse", response_model=AreaModel)
async def parse_area(req: AreaParseRequest) -> AreaModel:
    area = GeoUri().from_area_uri(req.uri)
    if area is None:
        logger.info("geoarea uri rejected", extra={"scheme": "geoarea", "outcome": "rejected"})
        raise HTTPException(status_code=422, detail=f"Not a geoarea uri: {req.uri!r}")
    north_east, south_west = area[0], area[1]
    return AreaModel(
        north_east=GeoPointModel.from_point(north_east),
        south_west=GeoPointModel.from_point(south_west),
    )


@router.post("/geoarea/format", response_model=UriResponse)
async def format_area(req: AreaModel) -> UriResponse:
    if req.north_east.latitude is None or req.north_east.longitude is None \
            or req.south_west.latitude is None or req.south_west.longitude is None:
        raise HTTPException(status_code=422, detail="Both corners need latitude and longitude")
    uri = GeoUri().to_area_uri_string(req.north_east.to_point(), req.south_west.to_point())
    return UriResponse(uri=uri)
