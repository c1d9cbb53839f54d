from extract.geo_patterns import (
    LAT_LON_ALT_RE,
    NAME_RE,
    first_match,
    find_first,
    iter_matches,
    match_area,
    match_lat_lon,
    match_link,
    match_name,
    match_symbol,
    match_time_text,
)


def test_first_match_respects_priority_and_skips_missing():
    locations = [None, "", "no coords", "1,2", "3,4"]
    m = first_match(LAT_LON_ALT_RE, locations)
    assert m and m.group(0) == "1,2"
    # one match per location, in priority order
    assert [x.group(0) for x in iter_matches(LAT_LON_ALT_RE, locations)] == ["1,2", "3,4"]
    assert first_match(NAME_RE, locations) is None


def test_find_first_group():
    assert find_first(NAME_RE, ["x (first) (second)", "(third)"]) == "first"


def test_match_lat_lon_with_altitude_and_spaces():
    assert match_lat_lon(["geo:12.5 , -56.25,100"]) == (12.5, -56.25)
    assert match_lat_lon(["+1,-2"]) == (1.0, -2.0)
    assert match_lat_lon(["nothing here"]) is None


def test_match_lat_lon_malformed_is_absent(caplog):
    assert match_lat_lon(["1.2.3,4", "5,6"]) is None
    assert "malformed lat/lon" in caplog.text


def test_text_extractors():
    text = "I was in (Hamburg) at 1991-03-03T04:05:06Z <a href='http://x.org/a'><img src=\"pin.png\">"
    assert match_name([text]) == "Hamburg"
    assert match_time_text([text]) == "1991-03-03T04:05:06Z"
    assert match_link([text]) == "http://x.org/a"
    assert match_symbol([text]) == "pin.png"
    assert match_time_text(["2001-01-01T00:00:00.5+02:00"]) == "2001-01-01T00:00:00.5+02:00"


def test_match_area():
    assert match_area("geoarea:1,2,3,4") == (1.0, 2.0, 3.0, 4.0)
    assert match_area("geoarea:1,2,3") is None
    assert match_area("geoarea:1,2.2.2,3,4") is None
    assert match_area(None) is None


def test_match_lat_lon_ignores_numbers_inside_names():
    assert match_lat_lon(["(Gate 7,8)", "geo:53,10"]) == (53.0, 10.0)
    assert match_lat_lon(["1,2(Gate 7,8)"]) == (1.0, 2.0)
    assert match_lat_lon(["I was in (Hamburg) located at 53,10"]) == (53.0, 10.0)
    assert match_lat_lon(["(3,4)"]) is None
