"""Turn fetched GeoJSON into markers on an overlay group."""

from __future__ import annotations

import logging

import folium

from quake_map.map_layers import OverlayGroup
from quake_map.models import Earthquake, MarkerRecord, StyleAttributes
from quake_map.styles import style_for_feature

logger = logging.getLogger(__name__)

POPUP_MAX_WIDTH = 300


def _format_value(value) -> str:
    """Print numbers the way the browser would: 95.0 -> 95, None -> null."""
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_popup_html(quake: Earthquake) -> str:
    return (
        f"<strong>Magnitude:</strong> {_format_value(quake.magnitude)}<br>"
        f"<strong>Depth:</strong> {_format_value(quake.depth)} km<br>"
        f"<strong>Location:</strong> {_format_value(quake.place)}"
    )


def build_marker(quake: Earthquake, style: StyleAttributes, popup_html: str) -> folium.CircleMarker:
    return folium.CircleMarker(
        location=quake.location,
        radius=style.radius,
        color=style.stroke_color,
        weight=style.weight,
        opacity=style.opacity,
        stroke=style.stroke,
        fill=True,
        fill_color=style.fill_color,
        fill_opacity=style.fill_opacity,
        popup=folium.Popup(popup_html, max_width=POPUP_MAX_WIDTH),
    )


def render_earthquakes(group: OverlayGroup, feature_collection: dict) -> int:
    """Add one circle marker per feature to ``group``.

    Markers are built for the whole collection before any is added, so a
    malformed feature (``KeyError``/``IndexError``/``TypeError``) leaves the
    group untouched and the error propagates to the caller.

    Returns the number of markers added.
    """
    pending = []
    for feature in feature_collection.get("features", []):
        quake = Earthquake.from_geojson_feature(feature)
        style = style_for_feature(quake)
        popup_html = build_popup_html(quake)
        record = MarkerRecord(earthquake=quake, style=style, popup_html=popup_html)
        pending.append((build_marker(quake, style, popup_html), record))

    for marker, record in pending:
        group.add(marker, record)

    logger.info(
        "Rendered %d earthquakes into '%s'",
        len(pending), group.name,
        extra={"dataset": "earthquakes", "feature_count": len(pending)},
    )
    return len(pending)


def render_plate_boundaries(group: OverlayGroup, feature_collection: dict) -> int:
    """Placeholder for the plate boundaries overlay.

    The boundaries are fetched but intentionally not drawn yet; the group
    stays empty whatever the payload holds. Returns 0.
    """
    logger.info(
        "Tectonic plate boundaries fetched (%d features); overlay '%s' left empty",
        len(feature_collection.get("features", [])), group.name,
        extra={"dataset": "tectonic plates"},
    )
    return 0
