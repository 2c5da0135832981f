"""Tests for artserve.core.canvas — the drawing surface and JPEG encoder."""

from __future__ import annotations

import random

import pytest
from PIL import ImageChops

from artserve.arts.base import ArtEngine
from artserve.core import colors
from artserve.core.canvas import Canvas, RenderError


class _Failing(ArtEngine):
    """Engine that raises the exception it was built with."""

    def __init__(self, exc: Exception) -> None:
        self.exc = exc

    def draw(self, canvas):
        raise self.exc


class TestCanvasConstruction:
    """Test Canvas options and argument validation."""

    def test_size(self, rng):
        canvas = Canvas(300, 200, rng=rng)
        assert canvas.size == (300, 200)
        assert canvas.image.size == (300, 200)
        assert canvas.image.mode == "RGB"

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-5, 10)])
    def test_non_positive_size_rejected(self, width, height):
        with pytest.raises(ValueError):
            Canvas(width, height)

    def test_empty_schema_rejected(self):
        with pytest.raises(ValueError):
            Canvas(10, 10, color_schema=[])

    def test_default_schema(self):
        """Without a schema the canvas falls back to the plasma palette."""
        canvas = Canvas(10, 10)
        assert canvas.color_schema == colors.PLASMA

    def test_rng_created_when_omitted(self):
        assert isinstance(Canvas(10, 10).rng, random.Random)


class TestCanvasDrawing:
    """Test primitive drawing helpers."""

    def test_fill_background(self, rng):
        canvas = Canvas(20, 20, rng=rng, background=colors.TOMATO)
        canvas.fill_background()
        assert canvas.image.getpixel((10, 10)) == colors.TOMATO[:3]

    def test_random_color_from_schema(self, rng):
        canvas = Canvas(10, 10, rng=rng, color_schema=colors.CANDY)
        for _ in range(20):
            assert canvas.random_color() in colors.CANDY

    def test_circle_fill(self, small_canvas):
        small_canvas.circle(60, 60, 20, fill=colors.BLACK)
        assert small_canvas.image.getpixel((60, 60)) == (0, 0, 0)

    def test_non_positive_radius_draws_nothing(self, small_canvas):
        before = small_canvas.image.copy()
        small_canvas.circle(60, 60, 0, fill=colors.BLACK)
        small_canvas.circle(60, 60, -4, fill=colors.BLACK)
        assert ImageChops.difference(before, small_canvas.image).getbbox() is None

    def test_translucent_stroke_blends(self, small_canvas):
        """Half-transparent black over azure lands between the two."""
        small_canvas.line([(0, 60), (119, 60)], color=(0, 0, 0, 128), width=3)
        r, g, b = small_canvas.image.getpixel((60, 60))
        assert 0 < r < colors.AZURE[0]
        assert 0 < b < colors.AZURE[2]

    def test_sub_pixel_stroke_scales_alpha(self, rng):
        canvas = Canvas(10, 10, rng=rng, line_color=(10, 20, 30, 200))
        color, width = canvas.stroke(width=0.5)
        assert width == 1
        assert color == (10, 20, 30, 100)

    def test_stroke_defaults(self, rng):
        canvas = Canvas(10, 10, rng=rng, line_color=colors.TOMATO, line_width=3.0)
        assert canvas.stroke() == (colors.TOMATO, 3)


class TestCanvasDrawEngine:
    """Test engine dispatch and error wrapping."""

    @pytest.mark.parametrize(
        "exc", [ValueError("bad"), ZeroDivisionError("zero"), OSError("io")]
    )
    def test_engine_errors_become_render_errors(self, small_canvas, exc):
        with pytest.raises(RenderError) as info:
            small_canvas.draw(_Failing(exc))
        assert info.value.__cause__ is exc
        assert "_Failing" in str(info.value)

    def test_programming_errors_propagate(self, small_canvas):
        """Only parameter and arithmetic failures are wrapped."""
        with pytest.raises(TypeError):
            small_canvas.draw(_Failing(TypeError("oops")))


class TestCanvasEncoding:
    """Test JPEG encoding."""

    def test_to_bytes_is_jpeg(self, small_canvas, jpeg_decoder):
        data = small_canvas.to_bytes()
        assert data[:2] == b"\xff\xd8"
        assert jpeg_decoder(data).size == (120, 120)

    def test_quality_changes_size(self, rng):
        canvas = Canvas(200, 200, rng=rng)
        for i in range(50):
            canvas.circle(rng.uniform(0, 200), rng.uniform(0, 200), 10, fill=canvas.random_color())
        assert len(canvas.to_bytes(quality=10)) < len(canvas.to_bytes(quality=95))

    def test_encoding_failure_raises_render_error(self, small_canvas):
        """JPEG cannot carry an alpha channel; the OSError is wrapped."""
        small_canvas.image = small_canvas.image.convert("RGBA")
        with pytest.raises(RenderError):
            small_canvas.to_bytes()
