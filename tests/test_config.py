from app.config import apply_override, build_options_from_env
from geo.uri import ParseOptions


def test_defaults(monkeypatch):
    monkeypatch.delenv("GEO_URI_REDUNDANT_LAT_LON", raising=False)
    monkeypatch.delenv("GEO_URI_INFER_MISSING", raising=False)
    assert build_options_from_env() == ParseOptions.FORMAT_REDUNDANT_LAT_LON


def test_env_flags(monkeypatch):
    monkeypatch.setenv("GEO_URI_REDUNDANT_LAT_LON", "0")
    monkeypatch.setenv("GEO_URI_INFER_MISSING", "true")
    assert build_options_from_env() == ParseOptions.PARSE_INFER_MISSING


def test_apply_override():
    both = ParseOptions.FORMAT_REDUNDANT_LAT_LON | ParseOptions.PARSE_INFER_MISSING
    assert apply_override(both, ParseOptions.PARSE_INFER_MISSING, None) == both
    assert apply_override(both, ParseOptions.PARSE_INFER_MISSING, False) == ParseOptions.FORMAT_REDUNDANT_LAT_LON
    assert apply_override(ParseOptions.DEFAULT, ParseOptions.PARSE_INFER_MISSING, True) == ParseOptions.PARSE_INFER_MISSING
