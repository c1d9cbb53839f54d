"""Logging for the geo uri service.

One JSON object per line (ENABLE_JSON_LOGS=1, default) or a short text line.
Level from LOG_LEVEL. Besides the message, records may carry codec context
passed via ``extra=``:

  scheme     geo / geoarea
  options    codec option names, e.g. "FORMAT_REDUNDANT_LAT_LON"
  outcome    parsed / rejected / formatted / inferred
  fields     names of the point fields that ended up set
  rid        request id (set by the middleware)
"""
from __future__ import annotations

import json
import logging
import os
import sys
import uuid
from time import time
from typing import List

from geo.uri import ParseOptions

GEO_FIELDS = ("rid", "scheme", "options", "outcome", "fields", "status", "ms")


def describe_options(options: ParseOptions) -> str:
    names = [opt.name for opt in ParseOptions if opt and opt in options and opt.name]
    return "|".join(names) or "DEFAULT"


def _context(record: logging.LogRecord) -> dict:
    return {k: getattr(record, k) for k in GEO_FIELDS if hasattr(record, k)}


class GeoJsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        line = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            **_context(record),
        }
        if record.exc_info and record.exc_info[0]:
            line["exc_type"] = record.exc_info[0].__name__
        return json.dumps(line, ensure_ascii=False)


class GeoTextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        head = f"{self.formatTime(record, datefmt='%H:%M:%S')} {record.levelname[0]} {record.name}: {record.getMessage()}"
        tail: List[str] = [f"{k}={v}" for k, v in _context(record).items()]
        return " ".join([head, *tail])


def configure_logging() -> None:
    if getattr(configure_logging, "_configured", False):  # idempotent
        return
    handler = logging.StreamHandler(sys.stdout)
    json_logs = os.getenv("ENABLE_JSON_LOGS", "1") == "1"
    handler.setFormatter(GeoJsonFormatter() if json_logs else GeoTextFormatter())
    root = logging.getLogger()
    root.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
    configure_logging._configured = True  # type: ignore[attr-defined]


async def request_id_middleware(request, call_next):
    """Tag each request with a short id, echoed as X-Request-ID."""
    rid = uuid.uuid4().hex[:8]
    request.state.request_id = rid
    start = time()
    response = await call_next(request)
    response.headers["X-Request-ID"] = rid
    logging.getLogger("request").debug(
        "%s %s", request.method, request.url.path,
        extra={"rid": rid, "status": response.status_code, "ms": round((time() - start) * 1000.0, 2)},
    )
    return response
