"""Interactive web map of recent earthquakes with tectonic plate overlays."""

__version__ = "0.1.0"
