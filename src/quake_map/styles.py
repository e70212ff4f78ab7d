"""Depth color buckets and magnitude-based marker sizing.

Depth buckets are ordered deepest first. ``color_for_depth`` walks them in
that order and the first bucket whose lower bound is strictly exceeded wins,
so a quake at exactly 90 km lands in the 70-90 bucket.
"""

from __future__ import annotations

from quake_map.models import DepthBucket, Earthquake, StyleAttributes

# ── Depth color table (deep=red → shallow=green) ──────────────────────────
DEPTH_BUCKETS: tuple[DepthBucket, ...] = (
    DepthBucket(90, "#FF0000"),   # red
    DepthBucket(70, "#FF4500"),   # orange-red
    DepthBucket(50, "#FFA500"),   # orange
    DepthBucket(30, "#FFD700"),   # golden yellow
    DepthBucket(10, "#FFFF00"),   # yellow
    DepthBucket(-10, "#ADFF2F"),  # light green, catch-all
)

MAGNITUDE_SCALE = 5
FALLBACK_RADIUS = 1

MARKER_STROKE_COLOR = "#000"
MARKER_OPACITY = 1.0
MARKER_FILL_OPACITY = 0.7
MARKER_WEIGHT = 0.5


def color_for_depth(depth: float, buckets: tuple[DepthBucket, ...] = DEPTH_BUCKETS) -> str:
    """Return the fill color for a depth in km.

    The last bucket is a catch-all, so negative depths (above sea level)
    and anything at or below 10 km resolve to it.
    """
    *thresholds, fallback = buckets
    for bucket in thresholds:
        if depth > bucket.lower_bound:
            return bucket.color
    return fallback.color


def radius_for_magnitude(magnitude: float | None) -> float:
    """Scale magnitude linearly to a marker radius.

    Any falsy magnitude (``None`` and also ``0``) gets the fallback radius,
    so a zero-magnitude event still shows up as a dot.
    """
    if not magnitude:
        return FALLBACK_RADIUS
    return magnitude * MAGNITUDE_SCALE


def style_for_feature(quake: Earthquake) -> StyleAttributes:
    return StyleAttributes(
        radius=radius_for_magnitude(quake.magnitude),
        fill_color=color_for_depth(quake.depth),
        stroke_color=MARKER_STROKE_COLOR,
        opacity=MARKER_OPACITY,
        fill_opacity=MARKER_FILL_OPACITY,
        weight=MARKER_WEIGHT,
        stroke=True,
    )
