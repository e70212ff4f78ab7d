"""Tests for map configuration."""

from __future__ import annotations

import pytest

from quake_map.config import MapConfig
from quake_map.tectonic import PLATE_BOUNDARIES_URL
from quake_map.usgs_client import FEEDS


class TestMapConfig:
    def test_defaults(self):
        config = MapConfig()
        assert config.center == (20.0, -20.0)
        assert config.zoom == 3
        assert config.resolved_earthquake_url == FEEDS["week"]
        assert config.plates_url == PLATE_BOUNDARIES_URL
        assert [b.name for b in config.base_layers if b.show] == ["Default Map"]

    def test_explicit_url_wins_over_period(self):
        config = MapConfig(period="hour", earthquake_url="https://feeds.test/q.json")
        assert config.resolved_earthquake_url == "https://feeds.test/q.json"

    def test_unknown_period(self):
        with pytest.raises(ValueError, match="Unknown period"):
            MapConfig(period="century").resolved_earthquake_url

    def test_with_overrides_ignores_none(self):
        config = MapConfig().with_overrides(period="day", output_path=None)
        assert config.period == "day"
        assert config.output_path == "index.html"


class TestFromEnv:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("QUAKE_MAP_PERIOD", "significant")
        monkeypatch.setenv("QUAKE_MAP_PLATES_URL", "https://feeds.test/plates.json")
        monkeypatch.setenv("QUAKE_MAP_TIMEOUT", "4.5")
        monkeypatch.setenv("QUAKE_MAP_OUTPUT", "quakes.html")
        monkeypatch.delenv("QUAKE_MAP_EARTHQUAKE_URL", raising=False)

        config = MapConfig.from_env()

        assert config.resolved_earthquake_url == FEEDS["significant"]
        assert config.plates_url == "https://feeds.test/plates.json"
        assert config.timeout_seconds == 4.5
        assert config.output_path == "quakes.html"

    def test_unset_environment_gives_defaults(self, monkeypatch):
        for name in ("PERIOD", "EARTHQUAKE_URL", "PLATES_URL", "TIMEOUT", "OUTPUT"):
            monkeypatch.delenv(f"QUAKE_MAP_{name}", raising=False)
        assert MapConfig.from_env() == MapConfig()

    def test_non_numeric_timeout_names_variable(self, monkeypatch):
        monkeypatch.setenv("QUAKE_MAP_TIMEOUT", "fast")
        with pytest.raises(ValueError, match="QUAKE_MAP_TIMEOUT"):
            MapConfig.from_env()
