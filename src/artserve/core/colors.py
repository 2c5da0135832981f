"""Named colors and shared palettes.

Every color is an ``(r, g, b, a)`` tuple of ints in ``0..255``.  Palettes
(called *color schemas* on the canvas) are plain lists of those tuples and
are shared data: presets pass them to :class:`~artserve.core.canvas.Canvas`
and engines pick from them with the canvas random source.

Usage
-----
::

    from artserve.core import colors

    canvas = Canvas(500, 500, background=colors.WHITE, color_schema=colors.DARK_PINK)
"""

from __future__ import annotations

import colorsys

RGBA = tuple[int, int, int, int]

# ---------------------------------------------------------------------------
# Named colors (CSS values).
# ---------------------------------------------------------------------------
BLACK: RGBA = (0x00, 0x00, 0x00, 0xFF)
WHITE: RGBA = (0xFF, 0xFF, 0xFF, 0xFF)
AZURE: RGBA = (0xF0, 0xFF, 0xFF, 0xFF)
LAVENDER: RGBA = (0xE6, 0xE6, 0xFA, 0xFF)
MISTY_ROSE: RGBA = (0xFF, 0xE4, 0xE1, 0xFF)
TOMATO: RGBA = (0xFF, 0x63, 0x47, 0xFF)
TAN: RGBA = (0xD2, 0xB4, 0x8C, 0xFF)
LIGHT_PINK: RGBA = (0xFF, 0xB6, 0xC1, 0xFF)
ORANGE: RGBA = (0xFF, 0xA5, 0x00, 0xFF)
MEDIUM_AQUAMARINE: RGBA = (0x66, 0xCD, 0xAA, 0xFF)

# ---------------------------------------------------------------------------
# Shared palettes.
# ---------------------------------------------------------------------------
PLASMA: list[RGBA] = [
    (0x0D, 0x08, 0x87, 0xFF),
    (0x6A, 0x00, 0xA8, 0xFF),
    (0xB1, 0x2A, 0x90, 0xFF),
    (0xE1, 0x64, 0x62, 0xFF),
    (0xFC, 0xA6, 0x36, 0xFF),
    (0xF0, 0xF9, 0x21, 0xFF),
]

DARK_PINK: list[RGBA] = [
    (0x51, 0x0A, 0x32, 0xFF),
    (0x80, 0x13, 0x36, 0xFF),
    (0xC7, 0x2C, 0x41, 0xFF),
    (0xEE, 0x45, 0x40, 0xFF),
    (0x2D, 0x14, 0x2C, 0xFF),
]

DARK_RED: list[RGBA] = [
    (0x48, 0x03, 0x48, 0xFF),
    (0x60, 0x14, 0x48, 0xFF),
    (0x93, 0x2F, 0x4B, 0xFF),
    (0xC7, 0x4A, 0x4C, 0xFF),
    (0xE0, 0x7A, 0x5F, 0xFF),
]

CITRUS: list[RGBA] = [
    (0xFF, 0x66, 0x00, 0xFF),
    (0x9E, 0x00, 0x00, 0xFF),
    (0xF0, 0xA2, 0x02, 0xFF),
    (0xFF, 0xD0, 0x00, 0xFF),
    (0x38, 0xB0, 0x00, 0xFF),
]

# The five-color schema used by the default route and several presets.
SUNSET: list[RGBA] = [
    (0xCF, 0x2B, 0x34, 0xFF),
    (0xF0, 0x8F, 0x46, 0xFF),
    (0xF0, 0xC1, 0x29, 0xFF),
    (0x19, 0x6E, 0x94, 0xFF),
    (0x35, 0x3A, 0x57, 0xFF),
]

CANDY: list[RGBA] = [
    (0xF9, 0xC8, 0x0E, 0xFF),
    (0xF8, 0x66, 0x24, 0xFF),
    (0xEA, 0x35, 0x46, 0xFF),
    (0x66, 0x2E, 0x9B, 0xFF),
    (0x43, 0xBC, 0xCD, 0xFF),
]


def with_alpha(color: RGBA, alpha: int) -> RGBA:
    """Return *color* with its alpha channel replaced by *alpha* (clamped)."""
    return (color[0], color[1], color[2], max(0, min(255, int(alpha))))


def hsv(hue: float, saturation: float = 1.0, value: float = 1.0, alpha: int = 255) -> RGBA:
    """Build an RGBA color from a hue in degrees and saturation/value in ``[0, 1]``."""
    r, g, b = colorsys.hsv_to_rgb((hue % 360) / 360.0, saturation, value)
    return (int(r * 255), int(g * 255), int(b * 255), alpha)


def constrain(value: float, low: float, high: float) -> float:
    """Clamp *value* into ``[low, high]``."""
    return max(low, min(high, value))
