import csv
import io
import json

from geo.uri import ParseOptions
from scripts.convert_uris import convert_lines, main, write_rows


def test_convert_lines_keeps_line_numbers():
    rows = convert_lines(["geo:1,2?q=(A)", "", "not a uri", "geo:?d=(B)+3,4"], ParseOptions.PARSE_INFER_MISSING)
    assert [r["line"] for r in rows] == [1, 3, 4]
    assert rows[0]["ok"] is True and rows[0]["name"] == "A"
    assert rows[0]["canonical"] == "geo:1,2?q=(A)"
    assert rows[1]["ok"] is False
    assert rows[2]["latitude"] == "3" and rows[2]["name"] == "B"


def test_write_csv():
    rows = convert_lines(["geo:1,2"], ParseOptions.FORMAT_REDUNDANT_LAT_LON)
    out = io.StringIO()
    write_rows(rows, "csv", out)
    parsed = list(csv.DictReader(io.StringIO(out.getvalue())))
    assert parsed[0]["latitude"] == "1"
    assert parsed[0]["canonical"] == "geo:1,2?q=1,2"


def test_main_writes_json(tmp_path):
    src = tmp_path / "uris.txt"
    src.write_text("geo:53,10?z=3\ngeoarea:1,2,3,4\n", encoding="utf-8")
    dst = tmp_path / "out.json"
    assert main([str(src), "--format", "json", "--output", str(dst), "--no-redundant"]) == 0
    data = json.loads(dst.read_text(encoding="utf-8"))
    assert data[0]["zoom_min"] == 3
    assert data[0]["canonical"] == "geo:53,10?z=3"
    assert data[1]["ok"] is False


def test_main_missing_input(tmp_path):
    assert main([str(tmp_path / "nope.txt")]) == 1
