"""Drawing surface shared by every art engine.

:class:`Canvas` wraps a Pillow RGB image together with the visual options a
preset configures before drawing: background, foreground, line color and
width, color schema, alpha and iteration count.  All drawing goes through an
``ImageDraw`` handle opened in ``"RGBA"`` mode so translucent strokes blend
into what is already on the surface.

A canvas is built per request, drawn by exactly one engine and encoded once
with :meth:`Canvas.to_bytes`.  The random source passed at construction is
owned by that request; engines must draw all randomness from ``canvas.rng``.

Usage
-----
::

    canvas = Canvas(500, 500, rng=rng, background=colors.WHITE)
    canvas.fill_background()
    canvas.draw(RandomShape(150))
    data = canvas.to_bytes()
"""

from __future__ import annotations

import io
import logging
import random
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

import numpy as np
from PIL import Image, ImageDraw

from artserve.core import colors
from artserve.core.colors import RGBA
from artserve.core.noise import PerlinNoise

if TYPE_CHECKING:
    from artserve.arts.base import ArtEngine

logger = logging.getLogger(__name__)

DEFAULT_JPEG_QUALITY = 75


class RenderError(RuntimeError):
    """Raised when an engine fails to draw or the canvas fails to encode."""


class Canvas:
    """A configurable RGB drawing surface.

    Args:
        width: Width in pixels.
        height: Height in pixels.
        rng: Request-local random source.  A fresh unseeded one is created
            when omitted.
        background: Color used by :meth:`fill_background`.
        foreground: Secondary accent color some engines use.
        line_color: Default stroke color.
        line_width: Default stroke width in pixels.  Widths below one pixel
            are drawn one pixel wide with proportionally reduced alpha.
        color_schema: Palette engines pick fill colors from.
        alpha: Default alpha engines apply to translucent strokes.
        iterations: Engine-specific iteration count.

    Raises:
        ValueError: If the size is not positive or the palette is empty.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        rng: random.Random | None = None,
        background: RGBA = colors.AZURE,
        foreground: RGBA = colors.MISTY_ROSE,
        line_color: RGBA = colors.TOMATO,
        line_width: float = 3.0,
        color_schema: Sequence[RGBA] | None = None,
        alpha: int = 255,
        iterations: int = 20,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        schema = list(color_schema) if color_schema is not None else list(colors.PLASMA)
        if not schema:
            raise ValueError("color_schema must contain at least one color")

        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.background = background
        self.foreground = foreground
        self.line_color = line_color
        self.line_width = line_width
        self.color_schema = schema
        self.alpha = alpha
        self.iterations = iterations

        self.image = Image.new("RGB", (width, height), (0, 0, 0))
        self._pen = ImageDraw.Draw(self.image, "RGBA")

    # ------------------------------------------------------------------
    # Properties and color helpers.
    # ------------------------------------------------------------------

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    @property
    def pen(self) -> ImageDraw.ImageDraw:
        """Blending ``ImageDraw`` handle over the canvas image."""
        return self._pen

    def random_color(self) -> RGBA:
        """Pick a color from the schema with the canvas random source."""
        return self.rng.choice(self.color_schema)

    def numpy_rng(self) -> np.random.Generator:
        """Derive a numpy generator from the canvas random source."""
        return np.random.default_rng(self.rng.getrandbits(64))

    def noise(self, octaves: int = 4, falloff: float = 0.5) -> PerlinNoise:
        """Build a Perlin field seeded from the canvas random source."""
        return PerlinNoise(self.rng, octaves=octaves, falloff=falloff)

    def stroke(self, color: RGBA | None = None, width: float | None = None) -> tuple[RGBA, int]:
        """Resolve a stroke color and integer pixel width.

        Sub-pixel widths are rendered as one pixel with alpha scaled by the
        width so thin translucent lines keep their weight.
        """
        color = color or self.line_color
        width = self.line_width if width is None else width
        if width < 1.0:
            return colors.with_alpha(color, color[3] * max(width, 0.0)), 1
        return color, int(round(width))

    # ------------------------------------------------------------------
    # Primitive drawing.
    # ------------------------------------------------------------------

    def fill_background(self) -> None:
        """Paint the whole surface with :attr:`background`."""
        self._pen.rectangle((0, 0, self.width, self.height), fill=self.background)

    def line(
        self,
        points: Iterable[tuple[float, float]],
        color: RGBA | None = None,
        width: float | None = None,
    ) -> None:
        stroke, px = self.stroke(color, width)
        self._pen.line(list(points), fill=stroke, width=px)

    def circle(
        self,
        x: float,
        y: float,
        radius: float,
        fill: RGBA | None = None,
        outline: RGBA | None = None,
        width: float = 1.0,
    ) -> None:
        """Draw a circle centred on ``(x, y)``; negative radii draw nothing."""
        if radius <= 0:
            return
        box = (x - radius, y - radius, x + radius, y + radius)
        if outline is None:
            self._pen.ellipse(box, fill=fill)
            return
        stroke, px = self.stroke(outline, width)
        self._pen.ellipse(box, fill=fill, outline=stroke, width=px)

    def polygon(
        self,
        points: Sequence[tuple[float, float]],
        fill: RGBA | None = None,
        outline: RGBA | None = None,
        width: float = 1.0,
    ) -> None:
        if outline is None:
            self._pen.polygon(list(points), fill=fill)
            return
        stroke, px = self.stroke(outline, width)
        self._pen.polygon(list(points), fill=fill, outline=stroke, width=px)

    def points(self, xy: Iterable[tuple[float, float]], color: RGBA) -> None:
        self._pen.point(list(xy), fill=color)

    # ------------------------------------------------------------------
    # Engine dispatch and encoding.
    # ------------------------------------------------------------------

    def draw(self, engine: ArtEngine) -> None:
        """Let *engine* draw itself onto this canvas.

        Raises:
            RenderError: If the engine fails with a parameter, arithmetic or
                I/O error.
        """
        logger.debug(f"Drawing {type(engine).__name__} on {self.width}x{self.height} canvas")
        try:
            engine.draw(self)
        except (ValueError, ArithmeticError, OSError) as e:
            raise RenderError(f"{type(engine).__name__} failed: {e}") from e

    def paste(self, image: Image.Image, mask: Image.Image | None = None) -> None:
        """Composite an RGB layer of the same size over the canvas."""
        self.image.paste(image, (0, 0), mask)

    def to_bytes(self, quality: int = DEFAULT_JPEG_QUALITY) -> bytes:
        """Encode the canvas as JPEG.

        Args:
            quality: JPEG quality (1-95).

        Returns:
            The encoded image.

        Raises:
            RenderError: If Pillow cannot encode the image.
        """
        buffer = io.BytesIO()
        try:
            self.image.save(buffer, format="JPEG", quality=quality)
        except (OSError, ValueError) as e:
            raise RenderError(f"JPEG encoding failed: {e}") from e
        return buffer.getvalue()
