"""Tests for artserve.core.noise and artserve.core.colors helpers."""

from __future__ import annotations

import random

import numpy as np
import pytest

from artserve.core import colors
from artserve.core.noise import PerlinNoise


class TestPerlinNoise:
    """Test the seeded Perlin field."""

    def test_scalar_returns_float(self, rng):
        value = PerlinNoise(rng).noise(0.3, 0.7)
        assert isinstance(value, float)
        assert 0.0 <= value <= 1.0

    def test_array_shape_broadcasts(self, rng):
        noise = PerlinNoise(rng)
        xs = np.linspace(0, 5, 40)[None, :]
        ys = np.linspace(0, 5, 30)[:, None]
        field = noise.noise(xs, ys)
        assert field.shape == (30, 40)
        assert field.min() >= 0.0
        assert field.max() <= 1.0

    def test_same_seed_same_field(self):
        xs = np.linspace(0, 10, 100)
        a = PerlinNoise(random.Random(7)).noise(xs, 1.5, 0.2)
        b = PerlinNoise(random.Random(7)).noise(xs, 1.5, 0.2)
        np.testing.assert_array_equal(a, b)

    def test_different_seed_different_field(self):
        xs = np.linspace(0, 10, 100)
        a = PerlinNoise(random.Random(7)).noise(xs, 1.5)
        b = PerlinNoise(random.Random(8)).noise(xs, 1.5)
        assert not np.array_equal(a, b)

    def test_field_is_continuous(self, rng):
        """Neighbouring samples differ by far less than the full range."""
        xs = np.linspace(0, 4, 2000)
        field = PerlinNoise(rng).noise(xs, 0.5)
        assert np.abs(np.diff(field)).max() < 0.05

    def test_invalid_octaves(self, rng):
        with pytest.raises(ValueError):
            PerlinNoise(rng, octaves=0)


class TestColorHelpers:
    """Test color utility functions."""

    def test_with_alpha_replaces_alpha(self):
        assert colors.with_alpha(colors.TOMATO, 30) == (0xFF, 0x63, 0x47, 30)

    @pytest.mark.parametrize("alpha,expected", [(-10, 0), (300, 255), (12.7, 12)])
    def test_with_alpha_clamps(self, alpha, expected):
        assert colors.with_alpha(colors.BLACK, alpha)[3] == expected

    def test_hsv_primary_hues(self):
        assert colors.hsv(0)[:3] == (255, 0, 0)
        assert colors.hsv(120)[:3] == (0, 255, 0)
        assert colors.hsv(360)[:3] == (255, 0, 0)

    def test_constrain(self):
        assert colors.constrain(5, 0, 3) == 3
        assert colors.constrain(-1, 0, 3) == 0
        assert colors.constrain(2, 0, 3) == 2

    def test_palettes_are_rgba(self):
        for palette in (colors.PLASMA, colors.SUNSET, colors.CANDY, colors.DARK_PINK):
            assert palette
            for color in palette:
                assert len(color) == 4
                assert all(0 <= ch <= 255 for ch in color)
