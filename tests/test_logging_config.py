"""Tests for structured log output."""

from __future__ import annotations

import json
import logging

from quake_map.logging_config import StructuredFormatter, configure_logging


def _record(msg="Fetched %d features", args=(3,), **extra):
    record = logging.LogRecord("quake_map.test", logging.INFO, __file__, 1, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredFormatter:
    def test_base_fields(self):
        entry = json.loads(StructuredFormatter().format(_record()))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "quake_map.test"
        assert entry["message"] == "Fetched 3 features"
        assert "timestamp" in entry

    def test_structured_fields(self):
        entry = json.loads(StructuredFormatter().format(
            _record(dataset="earthquakes", feature_count=3, duration_ms=12.5)
        ))
        assert entry["dataset"] == "earthquakes"
        assert entry["feature_count"] == 3
        assert entry["duration_ms"] == 12.5
        assert "url" not in entry


class TestConfigureLogging:
    def test_single_handler(self):
        root = logging.getLogger()
        saved = root.handlers[:], root.level
        try:
            configure_logging(logging.DEBUG, structured=True)
            configure_logging(logging.DEBUG, structured=True)
            assert len(root.handlers) == 1
            assert isinstance(root.handlers[0].formatter, StructuredFormatter)
            assert root.level == logging.DEBUG
        finally:
            root.handlers[:] = saved[0]
            root.setLevel(saved[1])
