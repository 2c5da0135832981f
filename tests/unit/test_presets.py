"""Tests for artserve.core.presets — the registered render functions."""

from __future__ import annotations

import random

import numpy as np
import pytest

from artserve.core import presets
from artserve.core.registry import preset_registry

FAST_PRESETS = ["randomshape", "maze", "janus", "colorcanva", "spiralsquare"]


class TestPresetHelpers:
    """Test the helper maps used by the fractal presets."""

    def test_julia_map(self):
        z = np.array([0j, 1 + 0j])
        result = presets.julia_map(z)
        np.testing.assert_allclose(result, [presets.JULIA_C, 1 + presets.JULIA_C])

    def test_warm_cmap_ranges(self):
        r = np.linspace(0, 1, 11)
        red, green, blue = presets.warm_cmap(r, np.ones_like(r), np.ones_like(r))
        assert red.min() >= 0 and red.max() <= 255
        assert green.max() == pytest.approx(200)
        assert blue.min() >= 70


class TestPresetRendering:
    """Render quick presets end to end."""

    @pytest.mark.parametrize("name", FAST_PRESETS)
    def test_render_produces_jpeg(self, name, jpeg_decoder):
        data = preset_registry.render(name, seed=11)
        image = jpeg_decoder(data)
        assert image.mode == "RGB"

    @pytest.mark.parametrize("name", FAST_PRESETS)
    def test_same_seed_same_bytes(self, name):
        assert preset_registry.render(name, seed=3) == preset_registry.render(name, seed=3)

    def test_different_seeds_differ(self):
        a = preset_registry.render("randomshape", seed=1)
        b = preset_registry.render("randomshape", seed=2)
        assert a != b

    def test_render_function_called_directly(self, jpeg_decoder):
        """Render functions only need a random source."""
        image = jpeg_decoder(presets.draw_random_shape(random.Random(0)))
        assert image.size == (500, 500)

    def test_quality_is_applied(self):
        low = presets.draw_maze(random.Random(0), quality=5)
        high = presets.draw_maze(random.Random(0), quality=95)
        assert len(low) < len(high)

    @pytest.mark.parametrize(
        "name,size",
        [("randomshape", (500, 500)), ("maze", (600, 600)), ("janus", (500, 500))],
    )
    def test_canvas_sizes(self, name, size, jpeg_decoder):
        assert jpeg_decoder(preset_registry.render(name, seed=0)).size == size
