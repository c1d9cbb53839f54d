import math
from datetime import datetime, timezone

from geo.point import NO_LAT_LON, NO_ZOOM, GeoPoint, is_unset_coordinate


def test_defaults_are_unset():
    p = GeoPoint()
    assert p.latitude == NO_LAT_LON
    assert p.longitude == NO_LAT_LON
    assert p.zoom_min == NO_ZOOM and p.zoom_max == NO_ZOOM
    assert p.name is None and p.time_of_measurement is None
    assert not p.has_lat_lon()
    # sentinel is neither NaN nor a plausible coordinate
    assert not math.isnan(NO_LAT_LON)
    assert NO_LAT_LON != 0.0


def test_is_empty():
    assert GeoPoint.is_empty_lat_lon(float("nan"), 5)
    assert GeoPoint.is_empty_lat_lon(5, float("nan"))
    assert GeoPoint.is_empty_lat_lon(0, 0)
    assert GeoPoint.is_empty_lat_lon(NO_LAT_LON, 1)
    assert not GeoPoint.is_empty_lat_lon(1, 1)
    assert not GeoPoint.is_empty_lat_lon(0, 1)
    assert GeoPoint.is_empty(None)
    assert GeoPoint.is_empty(GeoPoint())
    assert not GeoPoint.is_empty(GeoPoint(latitude=53, longitude=10))


def test_unset_coordinate_helper():
    assert is_unset_coordinate(None)
    assert is_unset_coordinate(float("nan"))
    assert is_unset_coordinate(NO_LAT_LON)
    assert not is_unset_coordinate(0.0)


def test_clear_resets_and_chains():
    p = GeoPoint(
        latitude=1, longitude=2, name="n", description="d", zoom_min=3, zoom_max=4,
        id="i", link="l", symbol="s", time_of_measurement=datetime(2000, 1, 1, tzinfo=timezone.utc),
    )
    assert p.clear() is p
    assert p == GeoPoint()


def test_duplicate_is_independent():
    p = GeoPoint(latitude=1, longitude=2, name="a")
    d = p.duplicate()
    assert d == p and d is not p
    d.name = "b"
    d.latitude = 5
    assert p.name == "a"
    assert p.latitude == 1


def test_display_form():
    assert str(GeoPoint(name="Hamburg", id="7")) == "Hamburg"
    assert str(GeoPoint(id="7")) == "#7"
    assert str(GeoPoint()).startswith("GeoPoint(")
