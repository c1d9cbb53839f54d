from datetime import datetime, timezone

from extract.infer import fill_time, infer_missing
from geo.point import GeoPoint
from geo.uri import GeoUri


def test_infer_missing_from_text():
    text = "Meet at (Cafe) 2015-01-13T12:00:00Z see href='http://cafe.org' icon src='c.png'"
    p = infer_missing(GeoPoint(), text)
    assert p.name == "Cafe"
    assert p.time_of_measurement == datetime(2015, 1, 13, 12, tzinfo=timezone.utc)
    assert p.link == "http://cafe.org"
    assert p.symbol == "c.png"
    # coordinates are not inferred from a single text block
    assert not p.has_lat_lon()


def test_infer_missing_keeps_existing_values():
    existing = datetime(2000, 1, 1, tzinfo=timezone.utc)
    p = GeoPoint(name="X", link="keep", time_of_measurement=existing)
    GeoUri.infer_missing(p, "(Y) href='other' 2015-01-13T12:00:00Z")
    assert p.name == "X"
    assert p.link == "keep"
    assert p.time_of_measurement == existing


def test_infer_missing_none_text_is_noop():
    p = GeoPoint()
    assert infer_missing(p, None) is p
    assert p == GeoPoint()


def test_fill_time_explicit_value_first_and_bad_dates_logged(caplog):
    p = GeoPoint()
    fill_time(p, ["2001-01-01T00:00:00Z"], time_text="1999-12-31T23:59:59Z")
    assert p.time_of_measurement.year == 1999

    p = GeoPoint()
    fill_time(p, ["1991-02-30T04:05:06Z"])
    assert p.time_of_measurement is None
    assert "unparsable time" in caplog.text
