"""Preset render functions.

Every function here is one preset: it builds a canvas with fixed options,
draws exactly one engine on it and returns the JPEG bytes.  Importing this
module registers all presets in :data:`~artserve.core.registry.preset_registry`.

Render functions take the request-local random source and the JPEG quality;
they never touch the module-level ``random`` state.

The four hidden presets (``circleloop1``, ``pointribbon``, ``solarflare``,
``swirl``) are complete but excluded from ``/art/{id}`` unless
``ARTSERVE_EXPOSE_HIDDEN_PRESETS`` is enabled.
"""

from __future__ import annotations

import random

import numpy as np

from artserve import arts
from artserve.core import colors
from artserve.core.canvas import DEFAULT_JPEG_QUALITY, Canvas
from artserve.core.registry import preset_registry

JULIA_C = complex(-0.1, 0.651)


def julia_map(z: np.ndarray) -> np.ndarray:
    """``z -> z^2 + c`` for the Julia preset."""
    return z * z + JULIA_C


def warm_cmap(r: np.ndarray, m1: np.ndarray, m2: np.ndarray):
    """Color map for the domain-warp preset; blue never drops below 70."""
    return (
        np.clip(m1 * 200 * r, 0, 255),
        np.clip(r * 200, 0, 255),
        np.clip(m2 * 255 * r, 70, 255),
    )


# ---------------------------------------------------------------------------
# Public presets.
# ---------------------------------------------------------------------------


@preset_registry.preset("blackhole", "Noise-distorted rings around a dark core")
def draw_blackhole(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        500,
        500,
        rng=rng,
        background=(30, 30, 30, 255),
        line_width=1.0,
        line_color=colors.TOMATO,
    )
    c.fill_background()
    c.draw(arts.BlackHole(200, 400, 0.01))
    return c.to_bytes(quality)


@preset_registry.preset("circlegrid", "Grid of decorated circles")
def draw_circle_grid(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        500,
        500,
        rng=rng,
        background=(0xDF, 0xEB, 0xF5, 0xFF),
        line_width=2.0,
        color_schema=[
            (0xED, 0x34, 0x41, 0xFF),
            (0xFF, 0xD6, 0x30, 0xFF),
            (0x32, 0x9F, 0xE3, 0xFF),
            (0x15, 0x42, 0x96, 0xFF),
            (0x00, 0x00, 0x00, 0xFF),
            (0xFF, 0xFF, 0xFF, 0xFF),
        ],
    )
    c.fill_background()
    c.draw(arts.CircleGrid(4, 6))
    return c.to_bytes(quality)


@preset_registry.preset("circleline", "Chords across a circle")
def draw_circle_line(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        600,
        600,
        rng=rng,
        background=colors.TAN,
        line_width=1.0,
        line_color=colors.LIGHT_PINK,
    )
    c.fill_background()
    c.draw(arts.CircleLine(0.02, 600, 1.5, 2, 2))
    return c.to_bytes(quality)


@preset_registry.preset("circleloop", "Recursively nested circles")
def draw_circle_loop2(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(500, 500, rng=rng, background=(8, 10, 20, 255), color_schema=colors.CANDY)
    c.fill_background()
    c.draw(arts.CircleLoop2(7))
    return c.to_bytes(quality)


@preset_registry.preset("circlemove", "A circle drifting across a wide canvas")
def draw_circle_move(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(1200, 500, rng=rng, background=colors.WHITE)
    c.fill_background()
    c.draw(arts.CircleMove(1000))
    return c.to_bytes(quality)


@preset_registry.preset("circlenoise", "Particles flowing off a ring")
def draw_circle_noise(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        500,
        500,
        rng=rng,
        background=colors.WHITE,
        alpha=5,
        line_width=0.3,
        iterations=100,
    )
    c.fill_background()
    c.draw(arts.CircleNoise(2000, 20, 80))
    return c.to_bytes(quality)


@preset_registry.preset("colorcanva", "Colored panels with tilted inserts")
def draw_color_canvas(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        500, 500, rng=rng, background=colors.BLACK, line_width=8, color_schema=colors.CANDY
    )
    c.fill_background()
    c.draw(arts.ColorCanvas(5))
    return c.to_bytes(quality)


@preset_registry.preset("colorcircle", "Scattered circles, rings and dotted rings")
def draw_color_circle(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        500,
        500,
        rng=rng,
        background=colors.WHITE,
        color_schema=[
            (0xFF, 0xC6, 0x18, 0xFF),
            (0xF4, 0x25, 0x39, 0xFF),
            (0x41, 0x78, 0xF4, 0xFF),
            (0xFE, 0x84, 0xFE, 0xFF),
            (0xFF, 0x81, 0x19, 0xFF),
            (0x56, 0xAC, 0x51, 0xFF),
            (0x98, 0x19, 0xFA, 0xFF),
            (0xFF, 0xFF, 0xFF, 0xFF),
        ],
    )
    c.fill_background()
    c.draw(arts.ColorCircle(200))
    return c.to_bytes(quality)


@preset_registry.preset("colorcircle2", "Fuzzy point rings")
def draw_color_circle2(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        500,
        500,
        rng=rng,
        background=colors.WHITE,
        color_schema=[
            (0x11, 0x60, 0xC6, 0xFF),
            (0xFD, 0xD9, 0x00, 0xFF),
            (0xF5, 0xB4, 0xF8, 0xFF),
            (0xEF, 0x13, 0x55, 0xFF),
            (0xF4, 0x9F, 0x0A, 0xFF),
        ],
    )
    c.fill_background()
    c.draw(arts.ColorCircle2(15))
    return c.to_bytes(quality)


@preset_registry.preset("contourline", "Flowing contour trails")
def draw_contour_line(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        500,
        500,
        rng=rng,
        background=(0x1A, 0x06, 0x33, 0xFF),
        color_schema=[
            (0x58, 0x18, 0x45, 0xFF),
            (0x90, 0x0C, 0x3F, 0xFF),
            (0xC7, 0x00, 0x39, 0xFF),
            (0xFF, 0x57, 0x33, 0xFF),
            (0xFF, 0xC3, 0x0F, 0xFF),
        ],
    )
    c.fill_background()
    c.draw(arts.ContourLine(200))
    return c.to_bytes(quality)


@preset_registry.preset("domainwrap", "Domain-warped noise field")
def draw_domain_warp(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(500, 500, rng=rng, background=colors.BLACK)
    c.fill_background()
    c.draw(arts.DomainWarp(0.01, 4, 4, 20, warm_cmap))
    return c.to_bytes(quality)


@preset_registry.preset("dotline", "Thick segments on a dot grid")
def draw_dot_line(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        2080,
        2080,
        rng=rng,
        background=(230, 230, 230, 255),
        line_width=10,
        iterations=15000,
        color_schema=colors.DARK_PINK,
    )
    c.fill_background()
    c.draw(arts.DotLine(100, 20, 50, False))
    return c.to_bytes(quality)


@preset_registry.preset("dotswave", "Dots riding sine waves")
def draw_dots_wave(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        500,
        500,
        rng=rng,
        background=colors.BLACK,
        color_schema=[
            (0xFF, 0xBE, 0x0B, 0xFF),
            (0xFB, 0x56, 0x07, 0xFF),
            (0xFF, 0x00, 0x6E, 0xFF),
            (0x83, 0x38, 0xEC, 0xFF),
            (0x3A, 0x86, 0xFF, 0xFF),
        ],
    )
    c.fill_background()
    c.draw(arts.DotsWave(300))
    return c.to_bytes(quality)


@preset_registry.preset("gridsquare", "Grid of nested squares")
def draw_grid_square(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    # The cells cover the whole canvas, so the background is never filled.
    c = Canvas(
        600,
        600,
        rng=rng,
        background=rng.choice(colors.DARK_PINK),
        color_schema=colors.DARK_PINK,
    )
    c.draw(arts.GridSquares(24, 10, 0.2))
    return c.to_bytes(quality)


@preset_registry.preset("janus", "Stacked two-faced discs")
def draw_janus(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        500,
        500,
        rng=rng,
        background=colors.BLACK,
        color_schema=colors.DARK_RED,
        foreground=colors.LIGHT_PINK,
    )
    c.fill_background()
    c.draw(arts.Janus(10, 0.2))
    return c.to_bytes(quality)


@preset_registry.preset("julia", "Julia set of z^2 + (-0.1 + 0.651i)")
def draw_julia(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(500, 500, rng=rng, iterations=800, color_schema=colors.CITRUS)
    c.fill_background()
    c.draw(arts.Julia(julia_map, 40, 1.5, 1.5))
    return c.to_bytes(quality)


@preset_registry.preset("maze", "Ten-print diagonal maze")
def draw_maze(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        600,
        600,
        rng=rng,
        background=colors.AZURE,
        line_width=3,
        line_color=colors.ORANGE,
    )
    c.fill_background()
    c.draw(arts.Maze(20))
    return c.to_bytes(quality)


@preset_registry.preset("noiseline", "Flow-field strokes over guide circles")
def draw_noise_line(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        500,
        500,
        rng=rng,
        background=(0xF0, 0xFE, 0xFF, 0xFF),
        color_schema=[
            (0x06, 0x7B, 0xC2, 0xFF),
            (0x84, 0xBC, 0xDA, 0xFF),
            (0xEC, 0xC3, 0x0B, 0xFF),
            (0xF3, 0x77, 0x48, 0xFF),
            (0xD5, 0x60, 0x62, 0xFF),
        ],
    )
    c.fill_background()
    c.draw(arts.NoiseLine(500))
    return c.to_bytes(quality)


@preset_registry.preset("oceanfish", "Fish cut from a striped ocean")
def draw_ocean_fish(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(500, 500, rng=rng, color_schema=colors.SUNSET)
    c.draw(arts.OceanFish(100, 8))
    return c.to_bytes(quality)


@preset_registry.preset("perlinpearls", "Pearls filled with noise trails")
def draw_perlin_pearls(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        500,
        500,
        rng=rng,
        background=colors.WHITE,
        alpha=120,
        line_width=0.3,
        iterations=200,
    )
    c.fill_background()
    c.draw(arts.PerlinPearls(10, 200, 40, 80))
    return c.to_bytes(quality)


@preset_registry.preset("pixelhole", "Dots spiralling into a hole")
def draw_pixel_hole(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        600,
        600,
        rng=rng,
        background=colors.BLACK,
        color_schema=colors.CANDY,
        iterations=800,
    )
    c.fill_background()
    c.draw(arts.PixelHole(50))
    return c.to_bytes(quality)


@preset_registry.preset("randcircle", "Wandering circle outlines")
def draw_rand_circle(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        500,
        500,
        rng=rng,
        background=colors.MISTY_ROSE,
        line_width=1.0,
        line_color=(122, 122, 122, 30),
        color_schema=colors.DARK_PINK,
        iterations=4,
    )
    c.fill_background()
    c.draw(arts.RandCircle(30, 80, 0.2, 2, 10, 30, True))
    return c.to_bytes(quality)


@preset_registry.preset("randomshape", "Random shapes in a five-color palette")
def draw_random_shape(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(500, 500, rng=rng, background=colors.WHITE, color_schema=colors.SUNSET)
    c.fill_background()
    c.draw(arts.RandomShape(150))
    return c.to_bytes(quality)


@preset_registry.preset("silkysky", "Translucent sky with a sun")
def draw_silky_sky(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(600, 600, rng=rng, alpha=10)
    c.draw(arts.SilkSky(15, 5))
    return c.to_bytes(quality)


@preset_registry.preset("silksmoke", "Smoke-like strands of wandering rings")
def draw_silk_smoke(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        500,
        500,
        rng=rng,
        background=colors.BLACK,
        line_width=1.0,
        line_color=colors.MEDIUM_AQUAMARINE,
        alpha=30,
        color_schema=colors.DARK_PINK,
        iterations=4,
    )
    c.fill_background()
    c.draw(arts.SilkSmoke(400, 20, 0.2, 2, 10, 30, False))
    return c.to_bytes(quality)


@preset_registry.preset("spiralsquare", "Nested turning squares")
def draw_spiral_square(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        500,
        500,
        rng=rng,
        background=colors.MISTY_ROSE,
        line_width=10,
        line_color=colors.ORANGE,
        color_schema=colors.DARK_PINK,
        foreground=colors.TOMATO,
    )
    c.fill_background()
    c.draw(arts.SpiralSquare(40, 400, 0.05, True))
    return c.to_bytes(quality)


@preset_registry.preset("yarn", "Tangle of thin noise curves")
def draw_yarn(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        500,
        500,
        rng=rng,
        background=colors.ORANGE,
        line_width=0.3,
        line_color=(0, 0, 0, 60),
    )
    c.fill_background()
    c.draw(arts.Yarn(2000))
    return c.to_bytes(quality)


# ---------------------------------------------------------------------------
# Hidden presets.
# ---------------------------------------------------------------------------


@preset_registry.preset("circleloop1", "Single circle swept along a loop", hidden=True)
def draw_circle_loop(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        500,
        500,
        rng=rng,
        background=colors.BLACK,
        line_width=1,
        line_color=colors.ORANGE,
        alpha=30,
        iterations=1000,
    )
    c.fill_background()
    c.draw(arts.CircleLoop(100))
    return c.to_bytes(quality)


@preset_registry.preset("pointribbon", "Ribbon of curve points", hidden=True)
def draw_point_ribbon(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        500,
        500,
        rng=rng,
        background=colors.LAVENDER,
        line_width=2,
        iterations=150000,
    )
    c.fill_background()
    c.draw(arts.PointRibbon(50))
    return c.to_bytes(quality)


@preset_registry.preset("solarflare", "Rings radiating from the centre", hidden=True)
def draw_solar_flare(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(500, 500, rng=rng, background=colors.WHITE, line_color=(255, 64, 8, 128))
    c.fill_background()
    c.draw(arts.SolarFlare())
    return c.to_bytes(quality)


@preset_registry.preset("swirl", "Swirl attractor density plot", hidden=True)
def draw_swirl(rng: random.Random, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
    c = Canvas(
        500,
        500,
        rng=rng,
        background=colors.AZURE,
        foreground=(113, 3, 0, 140),
        iterations=400000,
    )
    c.fill_background()
    c.draw(arts.Swirl(0.970, -1.899, 1.381, -1.506, 2.4, 2.4))
    return c.to_bytes(quality)
