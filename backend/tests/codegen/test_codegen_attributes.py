"""Tests for figma_codegen.codegen.attributes — fill colors and pixel offsets.

Covers:
- round_half_away (ties away from zero, unlike built-in round)
- color_of (SOLID fills, opacity handling, non-solid fills)
- offset_of (relative offsets, rounding, missing boxes)
"""

from __future__ import annotations

import pytest

from figma_codegen.codegen.attributes import (
    Offset,
    Rgba,
    color_of,
    format_number,
    offset_of,
    round_half_away,
)
from figma_codegen.codegen.models import BoundingBox, DocumentNode, Fill


def _solid(r=0.0, g=0.0, b=0.0, **extra) -> Fill:
    return Fill.from_dict({"type": "SOLID", "color": {"r": r, "g": g, "b": b}, **extra})


def _node_with_box(box) -> DocumentNode:
    data = {"id": "1:1", "type": "RECTANGLE"}
    if box is not None:
        data["absoluteBoundingBox"] = box
    return DocumentNode.from_dict(data)


# ─── round_half_away ─────────────────────────────────────────────────


class TestRoundHalfAway:
    @pytest.mark.parametrize("value,expected", [
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),
        (-2.5, -3),
        (1.4, 1),
        (-1.6, -2),
        (3.0, 3),
        (0, 0),
    ])
    def test_rounds_ties_away_from_zero(self, value, expected):
        assert round_half_away(value) == expected

    def test_differs_from_bankers_rounding(self):
        assert round(2.5) == 2
        assert round_half_away(2.5) == 3

    def test_values_beyond_decimal_precision(self):
        assert round_half_away(1e30) == 10 ** 30
        assert round_half_away(-1e30) == -(10 ** 30)


class TestFormatNumber:
    def test_integral_float_drops_fraction(self):
        assert format_number(1.0) == "1"
        assert format_number(16.0) == "16"

    def test_fraction_kept(self):
        assert format_number(0.5) == "0.5"
        assert format_number(12.5) == "12.5"

    def test_int_unchanged(self):
        assert format_number(1) == "1"


# ─── color_of ────────────────────────────────────────────────────────


class TestColorOf:
    def test_solid_fill_channels_scaled_to_255(self):
        color = color_of(_solid(1.0, 0.5, 0.0))
        assert color == Rgba(255, 128, 0, 1)

    @pytest.mark.parametrize("r,g,b,expected", [
        (0.2, 0.4, 0.6, (51, 102, 153)),
        (0.0, 0.0, 0.0, (0, 0, 0)),
        (1.0, 1.0, 1.0, (255, 255, 255)),
        (0.1, 0.9, 0.3, (26, 230, 77)),
    ])
    def test_channel_rounding(self, r, g, b, expected):
        color = color_of(_solid(r, g, b))
        assert (color.r, color.g, color.b) == expected

    def test_opacity_becomes_alpha(self):
        color = color_of(_solid(0, 0, 0, opacity=0.5))
        assert color.a == 0.5
        assert color.to_css() == "rgba(0, 0, 0, 0.5)"

    def test_alpha_defaults_to_one(self):
        color = color_of(_solid(1, 1, 1))
        assert color.a == 1
        assert color.to_css() == "rgba(255, 255, 255, 1)"

    def test_integral_opacity_renders_without_fraction(self):
        assert color_of(_solid(0, 0, 0, opacity=1.0)).to_css() == "rgba(0, 0, 0, 1)"

    def test_non_numeric_opacity_ignored(self):
        assert color_of(_solid(0, 0, 0, opacity="0.3")).a == 1
        assert color_of(_solid(0, 0, 0, opacity=True)).a == 1
        assert color_of(_solid(0, 0, 0, opacity=None)).a == 1

    def test_non_finite_opacity_ignored(self):
        assert color_of(_solid(0, 0, 0, opacity=float("nan"))).a == 1
        assert color_of(_solid(0, 0, 0, opacity=float("inf"))).a == 1

    def test_non_solid_fill_has_no_color(self):
        fill = Fill.from_dict({"type": "GRADIENT_LINEAR", "gradientStops": []})
        assert color_of(fill) is None

    def test_missing_fill_has_no_color(self):
        assert color_of(None) is None

    def test_solid_without_color_has_no_color(self):
        assert color_of(Fill.from_dict({"type": "SOLID"})) is None

    def test_missing_channels_default_to_zero(self):
        fill = Fill.from_dict({"type": "SOLID", "color": {"r": 1.0}})
        assert color_of(fill) == Rgba(255, 0, 0, 1)


# ─── offset_of ───────────────────────────────────────────────────────


class TestOffsetOf:
    def test_offset_relative_to_origin(self):
        node = _node_with_box({"x": 110, "y": 220, "width": 50, "height": 20})
        origin = BoundingBox(x=100, y=200, width=400, height=300)
        assert offset_of(node, origin) == Offset(left=10, top=20, width=50, height=20)

    def test_fractional_values_rounded_half_away(self):
        node = _node_with_box({"x": 110.4, "y": 220.6, "width": 50.5, "height": 19.5})
        origin = BoundingBox(x=100, y=200)
        assert offset_of(node, origin) == Offset(left=10, top=21, width=51, height=20)

    def test_node_left_of_origin_gets_negative_offset(self):
        node = _node_with_box({"x": -10.5, "y": 0, "width": 10, "height": 10})
        assert offset_of(node, BoundingBox()).left == -11

    def test_missing_box_is_zero_rectangle(self):
        node = _node_with_box(None)
        assert offset_of(node, BoundingBox()) == Offset(0, 0, 0, 0)

    def test_missing_box_still_relative_to_origin(self):
        node = _node_with_box(None)
        offset = offset_of(node, BoundingBox(x=40, y=30, width=100, height=100))
        assert offset == Offset(left=-40, top=-30, width=0, height=0)

    def test_partial_box_fields_default_to_zero(self):
        node = _node_with_box({"x": 5, "y": 7})
        assert offset_of(node, BoundingBox()) == Offset(5, 7, 0, 0)
