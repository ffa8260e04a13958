"""Tests for shapeworld.color module."""

import random
import struct

import pytest

from shapeworld.color import WHITE, Color, hsv_to_color, random_shape_color
from shapeworld.config.spawning import SATURATION_RANGE, VALUE_RANGE


class TestHsvToColor:
    """Tests for the hsv_to_color conversion function."""

    def test_full_saturation_red(self):
        assert hsv_to_color(0.0, 1.0, 1.0) == Color(1.0, 0.0, 0.0, 1.0)

    def test_hue_wraps(self):
        """Hue 1.0 should be the same red as hue 0.0."""
        assert hsv_to_color(1.0, 1.0, 1.0) == hsv_to_color(0.0, 1.0, 1.0)

    def test_zero_saturation_gives_gray(self):
        color = hsv_to_color(0.5, 0.0, 0.5)
        assert color.r == color.g == color.b == pytest.approx(0.5)

    def test_out_of_range_inputs_are_clamped(self):
        color = hsv_to_color(0.0, 2.0, 1.5, alpha=3.0)
        assert color == Color(1.0, 0.0, 0.0, 1.0)

    def test_alpha_passed_through(self):
        assert hsv_to_color(0.3, 0.5, 0.5, alpha=0.25).a == 0.25


class TestColor:
    def test_white_default(self):
        assert WHITE.as_tuple() == (1.0, 1.0, 1.0, 1.0)

    def test_to_rgb255(self):
        assert Color(1.0, 0.5, 0.0).to_rgb255() == (255, 128, 0)

    def test_to_rgb255_clamps(self):
        assert Color(1.5, -0.5, 0.0).to_rgb255() == (255, 0, 0)

    def test_channels_held_at_float32(self):
        color = Color(0.1, 0.2, 0.3)
        assert color.r == struct.unpack("<f", struct.pack("<f", 0.1))[0]
        assert color == Color(color.r, color.g, color.b)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            WHITE.r = 0.0  # type: ignore[misc]


class TestRandomShapeColor:
    def test_deterministic_with_seed(self):
        assert random_shape_color(random.Random(5)) == random_shape_color(random.Random(5))

    def test_stays_vivid(self):
        """Random colors should never be gray or dark."""
        rng = random.Random(11)
        for _ in range(100):
            color = random_shape_color(rng)
            brightest = max(color.r, color.g, color.b)
            darkest = min(color.r, color.g, color.b)
            assert brightest >= VALUE_RANGE[0] - 1e-6
            assert brightest - darkest >= brightest * SATURATION_RANGE[0] - 1e-6
            assert color.a == 1.0
