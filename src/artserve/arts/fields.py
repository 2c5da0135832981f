"""Per-pixel fields, fractals and point clouds.

These engines compute whole images or large point sets with numpy and hand
the result to the canvas in one paste, rather than issuing one draw call per
pixel.
"""

from __future__ import annotations

import math
from collections.abc import Callable

import numpy as np
from PIL import Image

from artserve.arts.base import ArtEngine, require_positive
from artserve.core.canvas import Canvas

# ``cmap(r, m1, m2) -> (red, green, blue)``, each an array in 0..255.
ColorMap = Callable[
    [np.ndarray, np.ndarray, np.ndarray], tuple[np.ndarray, np.ndarray, np.ndarray]
]


class Julia(ArtEngine):
    """Escape-time rendering of the Julia set of *fn*.

    Args:
        fn: Iterated map ``z -> fn(z)``.  Must accept numpy complex arrays.
        maxz: Escape radius.
        xaxis: Half-width of the complex-plane window.
        yaxis: Half-height of the complex-plane window.

    Pixels are colored by ``schema[escape_count % len(schema)]``; points that
    never escape within ``canvas.iterations`` keep the background.
    """

    name = "julia"

    def __init__(
        self, fn: Callable[[np.ndarray], np.ndarray], maxz: float, xaxis: float, yaxis: float
    ) -> None:
        require_positive(maxz=maxz, xaxis=xaxis, yaxis=yaxis)
        self.fn = fn
        self.maxz = maxz
        self.xaxis = xaxis
        self.yaxis = yaxis

    def draw(self, c: Canvas) -> None:
        xs = np.linspace(-self.xaxis, self.xaxis, c.width)
        ys = np.linspace(-self.yaxis, self.yaxis, c.height)
        z = xs[None, :] + 1j * ys[:, None]
        counts = np.zeros(z.shape, dtype=np.int64)
        active = np.abs(z) <= self.maxz
        for _ in range(c.iterations):
            if not active.any():
                break
            z[active] = self.fn(z[active])
            counts[active] += 1
            active &= np.abs(z) <= self.maxz

        palette = np.array([col[:3] for col in c.color_schema], dtype=np.uint8)
        rgb = palette[counts % len(palette)]
        rgb[active] = c.background[:3]
        c.paste(Image.fromarray(rgb, "RGB"))


class DomainWarp(ArtEngine):
    """Noise sampled through two layers of noise-displaced coordinates.

    Args:
        scale: Pixel-to-noise coordinate scale.
        scale2: Strength of the displacement layers.
        x_offset: Offset added to every noise x coordinate.
        y_offset: Offset added to every noise y coordinate.
        cmap: Maps the final value and the two displacement magnitudes to
            RGB channels.
    """

    name = "domainwarp"

    def __init__(
        self, scale: float, scale2: float, x_offset: float, y_offset: float, cmap: ColorMap
    ) -> None:
        require_positive(scale=scale)
        self.scale = scale
        self.scale2 = scale2
        self.x_offset = x_offset
        self.y_offset = y_offset
        self.cmap = cmap

    def draw(self, c: Canvas) -> None:
        noise = c.noise()
        x = np.arange(c.width)[None, :] * self.scale + self.x_offset
        y = np.arange(c.height)[:, None] * self.scale + self.y_offset
        x, y = np.broadcast_arrays(x, y)

        qx = noise.noise(x, y)
        qy = noise.noise(x + 5.2, y + 1.3)
        rx = noise.noise(x + self.scale2 * qx + 1.7, y + self.scale2 * qy + 9.2)
        ry = noise.noise(x + self.scale2 * qx + 8.3, y + self.scale2 * qy + 2.8)
        value = noise.noise(x + self.scale2 * rx, y + self.scale2 * ry)

        red, green, blue = self.cmap(value, np.hypot(qx, qy), np.hypot(rx, ry))
        rgb = np.stack([red, green, blue], axis=-1).clip(0, 255).astype(np.uint8)
        c.paste(Image.fromarray(rgb, "RGB"))


class PixelHole(ArtEngine):
    """Dots spiralling into the centre, one schema color per ring."""

    name = "pixelhole"

    def __init__(self, dot_n: int) -> None:
        require_positive(dot_n=dot_n)
        self.dot_n = dot_n

    def draw(self, c: Canvas) -> None:
        noise = c.noise()
        cx, cy = c.width / 2, c.height / 2
        outer = min(c.width, c.height) * 0.45
        base = np.linspace(0, 2 * math.pi, self.dot_n, endpoint=False)
        n = max(c.iterations, 1)
        for it in range(n):
            progress = it / n
            theta = base + progress * 6 * math.pi
            wobble = noise.noise(np.cos(theta) + 3, np.sin(theta) + 3, progress * 4)
            r = outer * (1 - progress) * (0.6 + 0.8 * wobble)
            color = c.color_schema[it % len(c.color_schema)]
            size = 1.0 + 2.0 * (1 - progress)
            for x, y in zip(cx + np.cos(theta) * r, cy + np.sin(theta) * r):
                c.circle(x, y, size, fill=color)


class PointRibbon(ArtEngine):
    """A ribbon of points traced by a Lissajous-like curve of radius *r*."""

    name = "pointribbon"

    def __init__(self, r: float) -> None:
        require_positive(r=r)
        self.r = r

    def draw(self, c: Canvas) -> None:
        rng = c.rng
        a, b = rng.uniform(1.5, 3.5), rng.uniform(0.3, 1.2)
        t = np.linspace(0, 2 * math.pi * 40, max(c.iterations, 1))
        spread = self.r * (2.5 + np.sin(t * b))
        xs = c.width / 2 + spread * np.sin(t * a) * np.cos(t * 0.01)
        ys = c.height / 2 + spread * np.cos(t * a * 0.5) * np.sin(t * 0.013 + 1)
        chunks = np.array_split(np.arange(t.size), len(c.color_schema))
        for color, idx in zip(c.color_schema, chunks):
            c.points(zip(xs[idx], ys[idx]), color)


class SolarFlare(ArtEngine):
    """Noise-wobbled rings radiating from the canvas centre."""

    name = "solarflare"

    _RINGS = 120
    _DENSITY = 360

    def draw(self, c: Canvas) -> None:
        noise = c.noise()
        cx, cy = c.width / 2, c.height / 2
        base = min(c.width, c.height)
        theta = np.linspace(0, 2 * math.pi, self._DENSITY, endpoint=False)
        for i in range(self._RINGS):
            r = base * 0.05 + i * base * 0.003
            n = noise.noise(np.cos(theta) * 1.5 + 10, np.sin(theta) * 1.5 + 10, i * 0.02)
            rr = r * (0.6 + n * 1.6)
            pts = list(zip(cx + rr * np.cos(theta), cy + rr * np.sin(theta)))
            pts.append(pts[0])
            c.line(pts, width=1)


class Swirl(ArtEngine):
    """Density plot of the attractor ``x' = d sin(a x) - sin(b y)``,
    ``y' = c cos(a x) + cos(b y)``.

    Args:
        a, b, c, d: Attractor coefficients.
        xaxis: Half-width of the plotted window.
        yaxis: Half-height of the plotted window.
    """

    name = "swirl"

    _WALKERS = 1000

    def __init__(
        self, a: float, b: float, c: float, d: float, xaxis: float, yaxis: float
    ) -> None:
        require_positive(xaxis=xaxis, yaxis=yaxis)
        self.a, self.b, self.c, self.d = a, b, c, d
        self.xaxis = xaxis
        self.yaxis = yaxis

    def draw(self, canvas: Canvas) -> None:
        gen = canvas.numpy_rng()
        x = gen.uniform(-1, 1, self._WALKERS)
        y = gen.uniform(-1, 1, self._WALKERS)
        counts = np.zeros((canvas.height, canvas.width), dtype=np.int64)
        for _ in range(max(canvas.iterations // self._WALKERS, 1)):
            x, y = (
                self.d * np.sin(self.a * x) - np.sin(self.b * y),
                self.c * np.cos(self.a * x) + np.cos(self.b * y),
            )
            px = ((x + self.xaxis) / (2 * self.xaxis) * canvas.width).astype(np.int64)
            py = ((y + self.yaxis) / (2 * self.yaxis) * canvas.height).astype(np.int64)
            inside = (px >= 0) & (px < canvas.width) & (py >= 0) & (py < canvas.height)
            np.add.at(counts, (py[inside], px[inside]), 1)

        # Each hit blends the foreground over the pixel once.
        keep = (1 - canvas.foreground[3] / 255) ** counts
        base = np.asarray(canvas.image, dtype=float)
        fg = np.array(canvas.foreground[:3], dtype=float)
        out = base * keep[..., None] + fg * (1 - keep[..., None])
        canvas.paste(Image.fromarray(out.clip(0, 255).astype(np.uint8), "RGB"))

