"""Map and feed configuration.

Defaults reproduce the published map. Every value can be overridden with a
``QUAKE_MAP_*`` environment variable, and the CLI flags override those.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace

from quake_map.tectonic import PLATE_BOUNDARIES_URL
from quake_map.usgs_client import DEFAULT_PERIOD, feed_url


@dataclass(frozen=True)
class BaseLayerConfig:
    """A background tile layer."""
    name: str
    tiles: str
    attribution: str
    show: bool = False


DEFAULT_BASE_LAYERS = (
    BaseLayerConfig(
        name="Default Map",
        tiles="https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png",
        attribution="&copy; OpenStreetMap contributors",
        show=True,
    ),
    BaseLayerConfig(
        name="Street Map",
        tiles="https://{s}.tile.openstreetmap.fr/hot/{z}/{x}/{y}.png",
        attribution="&copy; OpenStreetMap contributors, Humanitarian OpenStreetMap Team",
    ),
)


@dataclass(frozen=True)
class MapConfig:
    center: tuple[float, float] = (20.0, -20.0)
    zoom: int = 3
    base_layers: tuple[BaseLayerConfig, ...] = DEFAULT_BASE_LAYERS
    earthquakes_name: str = "Earthquakes"
    plates_name: str = "Tectonic Plates"
    period: str = DEFAULT_PERIOD
    earthquake_url: str | None = None
    plates_url: str = PLATE_BOUNDARIES_URL
    timeout_seconds: float = 15.0
    legend_position: str = "bottomright"
    output_path: str = "index.html"
    collapsed_control: bool = False

    def __post_init__(self):
        active = [layer for layer in self.base_layers if layer.show]
        if len(active) != 1:
            raise ValueError(
                f"Exactly one base layer must be active, got {len(active)}"
            )

    @property
    def resolved_earthquake_url(self) -> str:
        """Explicit URL if given, otherwise the USGS summary feed for ``period``."""
        return self.earthquake_url or feed_url(self.period)

    def with_overrides(self, **overrides) -> MapConfig:
        """Copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    @classmethod
    def from_env(cls) -> MapConfig:
        timeout = os.environ.get("QUAKE_MAP_TIMEOUT")
        try:
            timeout_seconds = float(timeout) if timeout else None
        except ValueError as exc:
            raise ValueError(f"QUAKE_MAP_TIMEOUT must be a number of seconds, got {timeout!r}") from exc
        return cls().with_overrides(
            period=os.environ.get("QUAKE_MAP_PERIOD"),
            earthquake_url=os.environ.get("QUAKE_MAP_EARTHQUAKE_URL"),
            plates_url=os.environ.get("QUAKE_MAP_PLATES_URL"),
            timeout_seconds=timeout_seconds,
            output_path=os.environ.get("QUAKE_MAP_OUTPUT"),
        )
