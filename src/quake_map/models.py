"""Earthquake data models and derived styling values."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Earthquake:
    """A single earthquake event read from a GeoJSON feed.

    Magnitude stays nullable: the feed publishes ``null`` for events that
    have not been sized yet, and the styling layer decides what to do with it.
    """

    magnitude: float | None
    place: str | None
    longitude: float
    latitude: float
    depth: float

    @classmethod
    def from_geojson_feature(cls, feature: dict) -> Earthquake:
        props = feature["properties"]
        coords = feature["geometry"]["coordinates"]
        return cls(
            magnitude=props["mag"],
            place=props["place"],
            longitude=coords[0],
            latitude=coords[1],
            depth=coords[2],
        )

    @property
    def location(self) -> list[float]:
        """Leaflet order: [lat, lon]."""
        return [self.latitude, self.longitude]


@dataclass(frozen=True)
class DepthBucket:
    """One row of the depth -> color table."""

    lower_bound: float
    color: str


@dataclass(frozen=True)
class StyleAttributes:
    """Circle marker style computed for one feature."""

    radius: float
    fill_color: str
    stroke_color: str = "#000"
    opacity: float = 1.0
    fill_opacity: float = 0.7
    weight: float = 0.5
    stroke: bool = True


@dataclass(frozen=True)
class MarkerRecord:
    """What was placed on an overlay: the event, its style and popup."""

    earthquake: Earthquake
    style: StyleAttributes
    popup_html: str
