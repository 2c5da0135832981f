"""Tests for artserve.arts — the art engines.

Every engine is drawn on a small seeded canvas with scaled-down parameters.
The tests check that drawing succeeds, that it marks the canvas, and that
invalid parameters are rejected at construction.
"""

from __future__ import annotations

import random

import pytest
from PIL import ImageChops

from artserve import arts
from artserve.core.canvas import Canvas
from artserve.core.presets import julia_map, warm_cmap

ENGINES = {
    "circlegrid": lambda: arts.CircleGrid(2, 3),
    "circleline": lambda: arts.CircleLine(0.05, 30, 1.5, 2, 2),
    "circleloop": lambda: arts.CircleLoop(20),
    "circleloop2": lambda: arts.CircleLoop2(3),
    "circlemove": lambda: arts.CircleMove(50),
    "circlenoise": lambda: arts.CircleNoise(50, 20, 80),
    "colorcircle": lambda: arts.ColorCircle(10),
    "colorcircle2": lambda: arts.ColorCircle2(3),
    "randcircle": lambda: arts.RandCircle(3, 5, 0.2, 2, 5, 10, True),
    "silksmoke": lambda: arts.SilkSmoke(3, 5, 0.2, 2, 5, 10, False),
    "perlinpearls": lambda: arts.PerlinPearls(2, 20, 40, 80),
    "silksky": lambda: arts.SilkSky(3, 5),
    "blackhole": lambda: arts.BlackHole(20, 50, 0.01),
    "contourline": lambda: arts.ContourLine(20),
    "dotline": lambda: arts.DotLine(5, 20, 10, True),
    "noiseline": lambda: arts.NoiseLine(30),
    "yarn": lambda: arts.Yarn(20),
    "randomshape": lambda: arts.RandomShape(10),
    "colorcanvas": lambda: arts.ColorCanvas(3),
    "gridsquares": lambda: arts.GridSquares(24, 5, 0.2),
    "janus": lambda: arts.Janus(4, 0.2),
    "maze": lambda: arts.Maze(10),
    "oceanfish": lambda: arts.OceanFish(20, 2),
    "spiralsquare": lambda: arts.SpiralSquare(5, 80, 0.1, True),
    "dotswave": lambda: arts.DotsWave(30),
    "julia": lambda: arts.Julia(julia_map, 40, 1.5, 1.5),
    "domainwarp": lambda: arts.DomainWarp(0.01, 4, 4, 20, warm_cmap),
    "pixelhole": lambda: arts.PixelHole(10),
    "pointribbon": lambda: arts.PointRibbon(10),
    "solarflare": lambda: arts.SolarFlare(),
    "swirl": lambda: arts.Swirl(0.970, -1.899, 1.381, -1.506, 2.4, 2.4),
}


def _draw(make, seed: int) -> Canvas:
    canvas = Canvas(120, 120, rng=random.Random(seed))
    canvas.fill_background()
    canvas.draw(make())
    return canvas


class TestEngineDrawing:
    """Every engine draws onto a canvas without error."""

    @pytest.mark.parametrize("name", sorted(ENGINES))
    def test_engine_marks_canvas(self, name, small_canvas):
        before = small_canvas.image.copy()
        small_canvas.draw(ENGINES[name]())
        assert ImageChops.difference(before, small_canvas.image).getbbox() is not None

    @pytest.mark.parametrize("name", sorted(ENGINES))
    def test_engine_is_deterministic(self, name):
        """Equal seeds give identical pixels."""
        a = _draw(ENGINES[name], 42)
        b = _draw(ENGINES[name], 42)
        assert a.image.tobytes() == b.image.tobytes()

    def test_engines_cover_package(self):
        exported = {
            getattr(arts, attr)
            for attr in arts.__all__
            if attr != "ArtEngine" and not attr.startswith("_")
        }
        tested = {type(make()) for make in ENGINES.values()}
        assert exported == tested

    def test_repr_lists_parameters(self):
        assert repr(arts.Maze(10)) == "Maze(step=10)"


class TestEngineValidation:
    """Invalid parameters are rejected at construction."""

    @pytest.mark.parametrize(
        "make",
        [
            lambda: arts.CircleGrid(0, 3),
            lambda: arts.CircleGrid(5, 3),
            lambda: arts.CircleLine(0.05, 0, 1.5, 2, 2),
            lambda: arts.CircleLoop(-1),
            lambda: arts.CircleLoop2(0),
            lambda: arts.CircleNoise(50, 80, 20),
            lambda: arts.RandCircle(3, 5, 2, 0.2, 5, 10, True),
            lambda: arts.SilkSmoke(0, 5, 0.2, 2, 5, 10, False),
            lambda: arts.PerlinPearls(2, 20, 80, 40),
            lambda: arts.BlackHole(20, 50, 0),
            lambda: arts.DotLine(5, 20, -1, True),
            lambda: arts.GridSquares(24, 5, 1.5),
            lambda: arts.Janus(4, 0),
            lambda: arts.SpiralSquare(5, 80, 1.0, True),
            lambda: arts.Julia(julia_map, 0, 1.5, 1.5),
            lambda: arts.DomainWarp(0, 4, 4, 20, warm_cmap),
            lambda: arts.Swirl(1, 1, 1, 1, 0, 2),
        ],
    )
    def test_invalid_parameters(self, make):
        with pytest.raises(ValueError):
            make()


class TestEngineSpecifics:
    """Behaviour particular to individual engines."""

    def test_julia_uses_schema_colors(self, rng):
        palette = [(255, 0, 0, 255), (0, 0, 255, 255)]
        canvas = Canvas(60, 60, rng=rng, color_schema=palette, background=(0, 255, 0, 255))
        canvas.fill_background()
        canvas.draw(arts.Julia(julia_map, 40, 1.5, 1.5))
        seen = {canvas.image.getpixel((x, y)) for x in range(0, 60, 3) for y in range(0, 60, 3)}
        assert seen <= {(255, 0, 0), (0, 0, 255), (0, 255, 0)}
        assert seen & {(255, 0, 0), (0, 0, 255)}

    def test_domain_warp_blue_floor(self, rng):
        """The warm colour map never drops blue below 70."""
        canvas = Canvas(40, 40, rng=rng)
        canvas.draw(arts.DomainWarp(0.01, 4, 4, 20, warm_cmap))
        blues = canvas.image.getchannel("B")
        assert blues.getextrema()[0] >= 70

    def test_maze_uses_line_color(self, rng):
        canvas = Canvas(60, 60, rng=rng, background=(255, 255, 255, 255))
        canvas.line_color = (0, 0, 0, 255)
        canvas.fill_background()
        canvas.draw(arts.Maze(10))
        assert canvas.image.getextrema()[0][0] == 0
