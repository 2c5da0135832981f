"""Line and flow-field engines."""

from __future__ import annotations

import math

import numpy as np

from artserve.arts.base import ArtEngine, require_positive
from artserve.core import colors
from artserve.core.canvas import Canvas
from artserve.core.noise import PerlinNoise


def _flow_trails(
    noise: PerlinNoise,
    xs: np.ndarray,
    ys: np.ndarray,
    steps: int,
    scale: float,
    step_len: float,
    z: float = 0.0,
) -> tuple[np.ndarray, np.ndarray]:
    """Advect particles through a noise angle field.

    Returns:
        Two ``(steps + 1, n)`` arrays holding the x and y of every particle
        at every step, starting with the initial positions.
    """
    trail_x = np.empty((steps + 1, xs.size))
    trail_y = np.empty((steps + 1, ys.size))
    trail_x[0], trail_y[0] = xs, ys
    for s in range(steps):
        angle = noise.noise(xs * scale, ys * scale, z) * 4 * math.pi
        xs = xs + np.cos(angle) * step_len
        ys = ys + np.sin(angle) * step_len
        trail_x[s + 1], trail_y[s + 1] = xs, ys
    return trail_x, trail_y


class BlackHole(ArtEngine):
    """Concentric rings distorted by noise, fading toward the rim.

    Args:
        circle_n: Number of rings.
        density: Points sampled per ring.
        circle_gap: Radial gap between rings, as a fraction of the canvas.
    """

    name = "blackhole"

    def __init__(self, circle_n: int, density: int, circle_gap: float) -> None:
        require_positive(circle_n=circle_n, density=density, circle_gap=circle_gap)
        self.circle_n = circle_n
        self.density = density
        self.circle_gap = circle_gap

    def draw(self, c: Canvas) -> None:
        noise = c.noise()
        base = min(c.width, c.height)
        cx, cy = c.width / 2, c.height / 2
        theta = np.linspace(0, 2 * math.pi, self.density, endpoint=False)
        kx, ky = c.rng.uniform(0, 100), c.rng.uniform(0, 100)
        for i in range(self.circle_n):
            r = base * 0.1 + i * self.circle_gap * base * 0.15
            n = noise.noise(np.cos(theta) + kx, np.sin(theta) + ky, i * self.circle_gap)
            rr = r + (n - 0.5) * r * 0.8
            xs, ys = cx + rr * np.cos(theta), cy + rr * np.sin(theta)
            pts = list(zip(xs, ys))
            pts.append(pts[0])
            fade = int(c.line_color[3] * (1 - i / self.circle_n) * 0.6) + 20
            c.line(pts, color=colors.with_alpha(c.line_color, fade))


class ContourLine(ArtEngine):
    """Long flowing trails in schema colors, like contour lines of a noise map."""

    name = "contourline"

    _STEPS = 300

    def __init__(self, line_num: int) -> None:
        require_positive(line_num=line_num)
        self.line_num = line_num

    def draw(self, c: Canvas) -> None:
        noise = c.noise()
        gen = c.numpy_rng()
        xs = gen.uniform(0, c.width, self.line_num)
        ys = gen.uniform(0, c.height, self.line_num)
        tx, ty = _flow_trails(noise, xs, ys, self._STEPS, 0.004, 1.5, gen.uniform(0, 10))
        for i in range(self.line_num):
            c.line(zip(tx[:, i], ty[:, i]), color=c.random_color(), width=1)


class DotLine(ArtEngine):
    """Thick segments between neighbouring points of a dot grid.

    Args:
        n: Grid points per side.
        ras: Spacing between grid points in pixels.
        canv: Margin around the grid in pixels.
        random_color: Pick a fresh schema color per segment instead of one
            per grid diagonal.
    """

    name = "dotline"

    _DIRECTIONS = [(1, 0), (0, 1), (1, 1), (1, -1), (-1, 0), (0, -1), (-1, -1), (-1, 1)]

    def __init__(self, n: int, ras: float, canv: float, random_color: bool) -> None:
        require_positive(n=n, ras=ras)
        if canv < 0:
            raise ValueError("canv must be >= 0")
        self.n = n
        self.ras = ras
        self.canv = canv
        self.random_color = random_color

    def draw(self, c: Canvas) -> None:
        rng = c.rng
        radius = max(c.line_width / 2, 1.0)
        for _ in range(c.iterations):
            gx, gy = rng.randrange(self.n), rng.randrange(self.n)
            dx, dy = rng.choice(self._DIRECTIONS)
            ex, ey = gx + dx, gy + dy
            if not (0 <= ex < self.n and 0 <= ey < self.n):
                continue
            if self.random_color:
                color = c.random_color()
            else:
                color = c.color_schema[(gx + gy) % len(c.color_schema)]
            x0, y0 = self.canv + gx * self.ras, self.canv + gy * self.ras
            x1, y1 = self.canv + ex * self.ras, self.canv + ey * self.ras
            c.line([(x0, y0), (x1, y1)], color=color)
            c.circle(x0, y0, radius, fill=color)
            c.circle(x1, y1, radius, fill=color)


class NoiseLine(ArtEngine):
    """Short flow-field strokes over a few faint guide circles."""

    name = "noiseline"

    _STEPS = 80

    def __init__(self, n: int) -> None:
        require_positive(n=n)
        self.n = n

    def draw(self, c: Canvas) -> None:
        rng = c.rng
        noise = c.noise()
        gen = c.numpy_rng()
        base = min(c.width, c.height)
        for _ in range(rng.randint(3, 6)):
            c.circle(
                rng.uniform(0, c.width),
                rng.uniform(0, c.height),
                rng.uniform(base * 0.05, base * 0.3),
                outline=(0, 0, 0, 60),
                width=1,
            )
        xs = gen.uniform(0, c.width, self.n)
        ys = gen.uniform(0, c.height, self.n)
        tx, ty = _flow_trails(noise, xs, ys, self._STEPS, 0.003, 1.0)
        for i in range(self.n):
            color = colors.with_alpha(c.random_color(), 180)
            c.line(zip(tx[:, i], ty[:, i]), color=color, width=1)


class Yarn(ArtEngine):
    """Thin cubic curves whose control points walk through noise."""

    name = "yarn"

    _SAMPLES = 32

    def __init__(self, n: int) -> None:
        require_positive(n=n)
        self.n = n

    def draw(self, c: Canvas) -> None:
        noise = c.noise()
        xoff, yoff = c.rng.uniform(0, 1000), c.rng.uniform(0, 1000)
        steps = np.arange(self.n)[:, None] * 0.005 + np.arange(4)[None, :] * 0.3
        px = noise.noise(xoff + steps) * c.width * 1.2 - c.width * 0.1
        py = noise.noise(yoff + steps) * c.height * 1.2 - c.height * 0.1

        t = np.linspace(0, 1, self._SAMPLES)[None, :]
        basis = [(1 - t) ** 3, 3 * (1 - t) ** 2 * t, 3 * (1 - t) * t**2, t**3]
        bx = sum(b * px[:, k : k + 1] for k, b in enumerate(basis))
        by = sum(b * py[:, k : k + 1] for k, b in enumerate(basis))
        for i in range(self.n):
            c.line(zip(bx[i], by[i]))
