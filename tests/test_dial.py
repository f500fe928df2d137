"""Unit tests for dial.py."""

import pytest
from zeronoise.dial import (
    EMPTY,
    FILLED,
    KNOB,
    angle_from_offset,
    normalize_angle,
    offset_in_ring,
    point_on_ring,
    render_dial,
)


class TestAngles:

    @pytest.mark.parametrize(
        "angle, expected",
        [(0, 0), (359.5, 359.5), (360, 0), (-90, 270), (725, 5)],
    )
    def test_normalize(self, angle, expected):
        assert normalize_angle(angle) == expected

    @pytest.mark.parametrize(
        "dx, dy, expected",
        [(0, -1, 0), (1, 0, 90), (0, 1, 180), (-1, 0, 270)],
    )
    def test_angle_from_offset_is_clockwise_from_top(self, dx, dy, expected):
        assert angle_from_offset(dx, dy) == pytest.approx(expected)

    def test_centre_is_zero(self):
        assert angle_from_offset(0, 0) == 0.0

    def test_offset_in_ring_scales_to_unit(self):
        """The ring's edge cells sit at distance one from the centre."""
        assert offset_in_ring(60, 12, 61, 25) == (1.0, 0.0)
        assert offset_in_ring(30, 0, 61, 25) == (0.0, -1.0)


class TestRing:

    def test_ring_points(self):
        assert point_on_ring(0, 61, 25) == (30, 0)
        assert point_on_ring(90, 61, 25) == (60, 12)
        assert point_on_ring(180, 61, 25) == (30, 24)
        assert point_on_ring(270, 61, 25) == (0, 12)

    def test_empty_dial(self):
        text = render_dial(0, 21, 11)
        assert FILLED not in text
        assert EMPTY in text
        assert len(text.split("\n")) == 11

    def test_full_dial(self):
        text = render_dial(360, 21, 11)
        assert EMPTY not in text
        assert FILLED in text

    def test_half_dial_fills_right_side(self):
        rows = render_dial(180, 21, 11).split("\n")
        assert rows[5][20] == FILLED
        assert rows[5][0] == EMPTY

    def test_knob(self):
        text = render_dial(90, 21, 11, knob=True)
        assert text.count(KNOB) == 1
        assert text.split("\n")[5][20] == KNOB

    def test_center_text(self):
        rows = render_dial(0, 21, 11, center=["12:34"]).split("\n")
        assert "12:34" in rows[5]
