"""Tests for the depth legend."""

from __future__ import annotations

from quake_map.legend import DepthLegend, build_legend_html, legend_rows
from quake_map.map_layers import create_quake_map
from quake_map.models import DepthBucket
from quake_map.styles import DEPTH_BUCKETS


class TestLegendRows:
    def test_one_row_per_bucket(self):
        assert len(legend_rows()) == len(DEPTH_BUCKETS) == 6

    def test_labels(self):
        labels = [label for _, label in legend_rows()]
        assert labels == ["-10–10", "10–30", "30–50", "50–70", "70–90", "90+"]

    def test_last_row_open_ended_others_ranges(self):
        rows = legend_rows()
        assert rows[-1][1].endswith("+")
        for _, label in rows[:-1]:
            assert "–" in label

    def test_colors_match_style_table(self):
        colors = [color for color, _ in legend_rows()]
        assert colors == [b.color for b in reversed(DEPTH_BUCKETS)]

    def test_custom_buckets(self):
        buckets = (DepthBucket(2.5, "#111111"), DepthBucket(0, "#222222"))
        assert legend_rows(buckets) == [("#222222", "0–2.5"), ("#111111", "2.5+")]


class TestBuildLegendHtml:
    def test_title_and_swatches(self):
        html = build_legend_html()
        assert html.startswith("<strong>Depth (km)</strong><br>")
        assert html.count("<i style=") == 6
        assert "background:#FF0000" in html
        assert "-10&ndash;10" in html
        assert "90+" in html

    def test_line_breaks_only_after_ranges(self):
        html = build_legend_html()
        assert html.endswith("</i> 90+")
        assert html.count("<br>") == 1 + 5
        assert "70&ndash;90<br>" in html

class TestDepthLegend:
    def test_attached_once(self):
        quake_map = create_quake_map()
        first = quake_map.attach_legend()
        second = quake_map.attach_legend()
        assert first is second
        assert isinstance(first, DepthLegend)
        assert first.position == "bottomright"

    def test_rendered_as_leaflet_control(self):
        quake_map = create_quake_map()
        quake_map.attach_legend()
        html = quake_map.to_html()
        assert "L.control" in html
        assert "info legend" in html
        assert "Depth (km)" in html
