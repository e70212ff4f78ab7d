"""Map composition for the earthquake page.

Builds one Leaflet map (via folium) with:
- two base tile layers, exactly one active
- two overlay groups: earthquakes (shown) and tectonic plates (hidden)
- an expanded layer-selection control bound to all four

Everything lives on a single ``QuakeMap`` instance that renderers and the
legend receive by reference.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import folium

from quake_map.config import MapConfig
from quake_map.legend import DepthLegend
from quake_map.models import MarkerRecord

logger = logging.getLogger(__name__)


@dataclass
class OverlayGroup:
    """A named, toggleable set of markers backed by a ``folium.FeatureGroup``."""

    name: str
    layer: folium.FeatureGroup
    markers: list[MarkerRecord] = field(default_factory=list)

    def add(self, marker: folium.CircleMarker, record: MarkerRecord) -> None:
        marker.add_to(self.layer)
        self.markers.append(record)

    def __len__(self) -> int:
        return len(self.markers)

    @property
    def is_empty(self) -> bool:
        return not self.markers


@dataclass
class QuakeMap:
    config: MapConfig
    map: folium.Map
    base_layers: dict[str, folium.TileLayer]
    earthquakes: OverlayGroup
    plates: OverlayGroup
    layer_control: folium.LayerControl
    legend: DepthLegend | None = None

    @property
    def overlays(self) -> dict[str, OverlayGroup]:
        return {self.earthquakes.name: self.earthquakes, self.plates.name: self.plates}

    def attach_legend(self) -> DepthLegend:
        """Add the depth legend once; later calls return the existing one."""
        if self.legend is None:
            self.legend = DepthLegend(position=self.config.legend_position)
            self.map.add_child(self.legend)
            logger.info("Depth legend attached at %s", self.config.legend_position)
        return self.legend

    def to_html(self) -> str:
        return self.map.get_root().render()

    def save(self, path: str | None = None) -> str:
        path = path or self.config.output_path
        self.map.save(path)
        logger.info("Map written to %s", path)
        return path


def create_quake_map(config: MapConfig | None = None) -> QuakeMap:
    """Create the map, its layers and the layer control.

    Overlay groups are created and registered with the control here, before
    any fetch starts, so renderers always have a target to populate.
    """
    config = config or MapConfig()

    fmap = folium.Map(location=list(config.center), zoom_start=config.zoom, tiles=None)

    base_layers = {}
    for base in config.base_layers:
        tile = folium.TileLayer(
            tiles=base.tiles,
            attr=base.attribution,
            name=base.name,
            overlay=False,
            control=True,
            show=base.show,
        )
        tile.add_to(fmap)
        base_layers[base.name] = tile

    earthquakes = OverlayGroup(
        name=config.earthquakes_name,
        layer=folium.FeatureGroup(name=config.earthquakes_name, overlay=True, show=True),
    )
    # The plates overlay is selectable but starts unchecked.
    plates = OverlayGroup(
        name=config.plates_name,
        layer=folium.FeatureGroup(name=config.plates_name, overlay=True, show=False),
    )
    earthquakes.layer.add_to(fmap)
    plates.layer.add_to(fmap)

    control = folium.LayerControl(collapsed=config.collapsed_control)
    control.add_to(fmap)

    logger.info(
        "Map created at %s zoom %d with base layers %s",
        config.center, config.zoom, list(base_layers),
    )
    return QuakeMap(
        config=config,
        map=fmap,
        base_layers=base_layers,
        earthquakes=earthquakes,
        plates=plates,
        layer_control=control,
    )
