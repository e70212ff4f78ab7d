"""Logging setup for the map builder.

Plain text by default; ``structured=True`` switches to one JSON object per
line with the optional fields dataset, url, feature_count and duration_ms.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

STRUCTURED_FIELDS = ("dataset", "url", "feature_count", "duration_ms")
PLAIN_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class StructuredFormatter(logging.Formatter):
    """Outputs log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in STRUCTURED_FIELDS:
            val = getattr(record, field, None)
            if val is not None:
                log_entry[field] = val

        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry)


def configure_logging(level: int | str = logging.INFO, structured: bool = False) -> None:
    """Replace the root handlers with a single stderr handler.

    Call once at startup, before any logging.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StructuredFormatter() if structured else logging.Formatter(PLAIN_FORMAT))
    root.addHandler(handler)
