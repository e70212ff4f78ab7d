"""Depth legend rendered as a Leaflet control.

The rows come straight from the same bucket table ``color_for_depth`` uses,
so the legend and the markers cannot drift apart.
"""

from __future__ import annotations

from branca.element import MacroElement
from jinja2 import Template

from quake_map.models import DepthBucket
from quake_map.styles import DEPTH_BUCKETS

LEGEND_TITLE = "Depth (km)"
SWATCH_STYLE = "width: 20px; height: 20px; display: inline-block; margin-right: 5px;"


def _format_bound(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def legend_rows(buckets: tuple[DepthBucket, ...] = DEPTH_BUCKETS) -> list[tuple[str, str]]:
    """Return ``(color, label)`` pairs from shallowest to deepest.

    Every label is ``"lower–upper"`` except the deepest, which is ``"lower+"``.
    """
    ordered = sorted(buckets, key=lambda b: b.lower_bound)
    rows = []
    for i, bucket in enumerate(ordered):
        lower = _format_bound(bucket.lower_bound)
        if i + 1 < len(ordered):
            label = f"{lower}–{_format_bound(ordered[i + 1].lower_bound)}"
        else:
            label = f"{lower}+"
        rows.append((bucket.color, label))
    return rows


def build_legend_html(buckets: tuple[DepthBucket, ...] = DEPTH_BUCKETS) -> str:
    parts = [f"<strong>{LEGEND_TITLE}</strong><br>"]
    for color, label in legend_rows(buckets):
        # only range rows break; the open-ended row closes the box
        ending = "" if label.endswith("+") else "<br>"
        label = label.replace("–", "&ndash;")
        parts.append(f'<i style="background:{color}; {SWATCH_STYLE}"></i> {label}{ending}')
    return "".join(parts)


class DepthLegend(MacroElement):
    """Static ``info legend`` box attached to the map as an ``L.control``."""

    _template = Template(
        """
        {% macro script(this, kwargs) %}
        (function() {
          var legend = L.control({position: {{ this.position|tojson }}});
          legend.onAdd = function(map) {
            var div = L.DomUtil.create("div", "info legend");
            div.innerHTML = {{ this.html|tojson }};
            div.setAttribute("style", "background: white; padding: 6px 8px; line-height: 20px;");
            return div;
          };
          legend.addTo({{ this._parent.get_name() }});
        })();
        {% endmacro %}
        """
    )

    def __init__(self, buckets: tuple[DepthBucket, ...] = DEPTH_BUCKETS, position: str = "bottomright"):
        super().__init__()
        self._name = "DepthLegend"
        self.position = position
        self.rows = legend_rows(buckets)
        self.html = build_legend_html(buckets)
