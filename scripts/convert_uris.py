#!/usr/bin/env python3
"""Convert a file of geo: uris (one per line) into CSV or JSON rows.

Each row holds the parsed fields and the canonical re-formatted uri. Lines
that are not geo uris are kept with ok=false so the output lines up with the
input.
"""
from __future__ import annotations

import argparse
import csv
import json
import logging
import os
import sys
from typing import Dict, List, Optional

# Make the repository root importable when run as a plain script
THIS_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(THIS_DIR, ".."))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from geo.formatter import format_date, format_lat_lon  # noqa: E402
from geo.point import NO_ZOOM, GeoPoint, is_unset_coordinate  # noqa: E402
from geo.uri import GeoUri, ParseOptions  # noqa: E402

logger = logging.getLogger("convert_uris")

COLUMNS = [
    "line",
    "ok",
    "latitude",
    "longitude",
    "name",
    "description",
    "time",
    "zoom_min",
    "zoom_max",
    "id",
    "link",
    "symbol",
    "canonical",
]


def _row(lineno: int, point: Optional[GeoPoint], codec: GeoUri) -> Dict[str, object]:
    if point is None:
        return {"line": lineno, "ok": False}
    return {
        "line": lineno,
        "ok": True,
        "latitude": None if is_unset_coordinate(point.latitude) else format_lat_lon(point.latitude),
        "longitude": None if is_unset_coordinate(point.longitude) else format_lat_lon(point.longitude),
        "name": point.name,
        "description": point.description,
        "time": format_date(point.time_of_measurement) if point.time_of_measurement else None,
        "zoom_min": None if point.zoom_min == NO_ZOOM else point.zoom_min,
        "zoom_max": None if point.zoom_max == NO_ZOOM else point.zoom_max,
        "id": point.id,
        "link": point.link,
        "symbol": point.symbol,
        "canonical": codec.to_uri_string(point),
    }


def convert_lines(lines: List[str], options: ParseOptions) -> List[Dict[str, object]]:
    codec = GeoUri(options)
    rows: List[Dict[str, object]] = []
    for lineno, raw in enumerate(lines, start=1):
        text = raw.strip()
        if not text:
            continue
        point = codec.from_uri(text)
        if point is None:
            logger.info("line %d is not a geo uri: %r", lineno, text[:80])
        rows.append(_row(lineno, point, codec))
    return rows


def write_rows(rows: List[Dict[str, object]], fmt: str, out) -> None:
    if fmt == "json":
        json.dump(rows, out, indent=2, ensure_ascii=False)
        out.write("\n")
        return
    w = csv.DictWriter(out, fieldnames=COLUMNS, extrasaction="ignore")
    w.writeheader()
    for r in rows:
        w.writerow(r)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Parse geo: uris and emit one CSV/JSON row per line.")
    ap.add_argument("input", help="Text file with one geo: uri per line")
    ap.add_argument("--format", choices=["csv", "json"], default="csv")
    ap.add_argument("--output", help="Optional path to write output (default stdout)")
    ap.add_argument("--infer-missing", action="store_true", help="Infer name/time/lat/lon from other parameters")
    ap.add_argument("--no-redundant", action="store_true", help="Do not repeat lat/lon in q of the canonical uri")
    args = ap.parse_args(argv)

    if not os.path.isfile(args.input):
        print(f"No such file: {args.input}", file=sys.stderr)
        return 1

    options = ParseOptions.DEFAULT
    if args.infer_missing:
        options |= ParseOptions.PARSE_INFER_MISSING
    if not args.no_redundant:
        options |= ParseOptions.FORMAT_REDUNDANT_LAT_LON

    with open(args.input, encoding="utf-8") as f:
        rows = convert_lines(f.read().splitlines(), options)

    if args.output:
        with open(args.output, "w", encoding="utf-8", newline="") as f:
            write_rows(rows, args.format, f)
        print(f"Wrote {len(rows)} rows to {args.output}")
    else:
        write_rows(rows, args.format, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
