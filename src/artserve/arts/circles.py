"""Circle-based engines."""

from __future__ import annotations

import math

import numpy as np

from artserve.arts.base import ArtEngine, require_positive
from artserve.core import colors
from artserve.core.canvas import Canvas


class CircleGrid(ArtEngine):
    """A square grid of decorated circles.

    The number of cells per side is drawn from
    ``[circle_num_min, circle_num_max]``; every cell gets one of four
    decorations in schema colors.
    """

    name = "circlegrid"

    def __init__(self, circle_num_min: int, circle_num_max: int) -> None:
        require_positive(circle_num_min=circle_num_min)
        if circle_num_max < circle_num_min:
            raise ValueError("circle_num_max must be >= circle_num_min")
        self.circle_num_min = circle_num_min
        self.circle_num_max = circle_num_max

    def draw(self, c: Canvas) -> None:
        rng = c.rng
        seg = rng.randint(self.circle_num_min, self.circle_num_max)
        cw, ch = c.width / seg, c.height / seg
        for i in range(seg):
            for j in range(seg):
                x, y = cw * (i + 0.5), ch * (j + 0.5)
                r = min(cw, ch) / 2 * rng.uniform(0.7, 0.92)
                kind = rng.randrange(4)
                if kind == 0:
                    rings = rng.randint(2, 5)
                    for k in range(rings):
                        c.circle(x, y, r * (1 - k / rings), fill=c.random_color())
                elif kind == 1:
                    c.circle(x, y, r, fill=c.random_color())
                    stroke = c.random_color()
                    c.line([(x - r, y), (x + r, y)], color=stroke)
                    c.line([(x, y - r), (x, y + r)], color=stroke)
                elif kind == 2:
                    c.circle(x, y, r, outline=c.random_color(), width=c.line_width * 2)
                    c.circle(x, y, r * 0.3, fill=c.random_color())
                else:
                    c.circle(x, y, r, fill=c.random_color())
                    dot = c.random_color()
                    n = rng.randint(6, 12)
                    for k in range(n):
                        theta = 2 * math.pi * k / n
                        c.circle(
                            x + math.cos(theta) * r * 0.7,
                            y + math.sin(theta) * r * 0.7,
                            r * 0.1,
                            fill=dot,
                        )


class CircleLine(ArtEngine):
    """Chords between random points sampled on a circle.

    Args:
        step: Angular step (radians) between candidate points on the circle.
        line_num: Number of chords drawn.
        radius: Circle radius in axis units.
        xaxis: Half-width of the visible x range.
        yaxis: Half-height of the visible y range.
    """

    name = "circleline"

    def __init__(
        self, step: float, line_num: int, radius: float, xaxis: float, yaxis: float
    ) -> None:
        require_positive(step=step, line_num=line_num, radius=radius, xaxis=xaxis, yaxis=yaxis)
        self.step = step
        self.line_num = line_num
        self.radius = radius
        self.xaxis = xaxis
        self.yaxis = yaxis

    def _to_pixel(self, c: Canvas, x: float, y: float) -> tuple[float, float]:
        return (
            (x + self.xaxis) / (2 * self.xaxis) * c.width,
            (y + self.yaxis) / (2 * self.yaxis) * c.height,
        )

    def draw(self, c: Canvas) -> None:
        rng = c.rng
        thetas = np.arange(-math.pi, math.pi, self.step)
        pts = [
            self._to_pixel(c, self.radius * math.cos(t), self.radius * math.sin(t))
            for t in thetas
        ]
        color = colors.with_alpha(c.line_color, 140)
        for _ in range(self.line_num):
            p1, p2 = rng.choice(pts), rng.choice(pts)
            if p1 == p2:
                continue
            c.line([p1, p2], color=color)


class CircleLoop(ArtEngine):
    """A circle swept along a loop, its radius wobbling with noise."""

    name = "circleloop"

    def __init__(self, radius: float) -> None:
        require_positive(radius=radius)
        self.radius = radius

    def draw(self, c: Canvas) -> None:
        noise = c.noise()
        n = max(c.iterations, 1)
        t = np.arange(n) / n
        wobble = noise.noise(t * 4, 0.0)
        drift = noise.noise(t * 2, 10.0)
        cx = c.width / 2 + np.cos(t * 2 * math.pi) * c.width * 0.15 * drift
        cy = c.height / 2 + np.sin(t * 2 * math.pi) * c.height * 0.15 * drift
        r = self.radius * (0.5 + wobble)
        color = colors.with_alpha(c.line_color, c.alpha)
        for x, y, rr in zip(cx, cy, r):
            c.circle(x, y, rr, outline=color, width=c.line_width)


class CircleLoop2(ArtEngine):
    """Recursively nested circles, ``depth`` levels deep."""

    name = "circleloop2"

    def __init__(self, depth: int) -> None:
        require_positive(depth=depth)
        self.depth = depth

    def _nest(self, c: Canvas, x: float, y: float, r: float, depth: int) -> None:
        c.circle(x, y, r, fill=c.random_color())
        if depth == 0 or r < 2:
            return
        for _ in range(c.rng.randint(1, 3)):
            child = r * c.rng.uniform(0.35, 0.55)
            theta = c.rng.uniform(0, 2 * math.pi)
            cx = x + math.cos(theta) * (r - child)
            cy = y + math.sin(theta) * (r - child)
            self._nest(c, cx, cy, child, depth - 1)

    def draw(self, c: Canvas) -> None:
        self._nest(c, c.width / 2, c.height / 2, min(c.width, c.height) * 0.45, self.depth)


class CircleMove(ArtEngine):
    """Translucent outlines of a circle drifting across the canvas."""

    name = "circlemove"

    def __init__(self, circle_num: int) -> None:
        require_positive(circle_num=circle_num)
        self.circle_num = circle_num

    def draw(self, c: Canvas) -> None:
        noise = c.noise()
        t = np.arange(self.circle_num) / self.circle_num
        xs = c.width * 0.1 + t * c.width * 0.8
        ys = c.height / 2 + (noise.noise(t * 3, 0.0) - 0.5) * c.height * 0.6
        rs = c.height * 0.05 + noise.noise(t * 3, 10.0) * c.height * 0.3
        color = (0, 0, 0, 25)
        for x, y, r in zip(xs, ys, rs):
            c.circle(x, y, r, outline=color, width=1)


class CircleNoise(ArtEngine):
    """Particles seeded on a ring, flowing through a noise field.

    Args:
        dot_n: Number of particles.
        color_min: Lower bound of the hue range in degrees.
        color_max: Upper bound of the hue range in degrees.
    """

    name = "circlenoise"

    def __init__(self, dot_n: int, color_min: float, color_max: float) -> None:
        require_positive(dot_n=dot_n)
        if color_max < color_min:
            raise ValueError("color_max must be >= color_min")
        self.dot_n = dot_n
        self.color_min = color_min
        self.color_max = color_max

    def draw(self, c: Canvas) -> None:
        noise = c.noise()
        gen = c.numpy_rng()
        theta = gen.uniform(0, 2 * math.pi, self.dot_n)
        ring = min(c.width, c.height) * 0.3
        xs = c.width / 2 + np.cos(theta) * ring
        ys = c.height / 2 + np.sin(theta) * ring
        # Whole-degree hue buckets so each step is one point batch per hue.
        hues = np.round(gen.uniform(self.color_min, self.color_max, self.dot_n)).astype(int)
        buckets = {
            int(h): (np.flatnonzero(hues == h), colors.hsv(float(h), 0.8, 0.9, max(c.alpha, 1)))
            for h in np.unique(hues)
        }

        for it in range(c.iterations):
            angle = noise.noise(xs * 0.005, ys * 0.005, it * 0.01) * 4 * math.pi
            xs = xs + np.cos(angle) * 2
            ys = ys + np.sin(angle) * 2
            for idx, color in buckets.values():
                c.points(zip(xs[idx], ys[idx]), color)


class ColorCircle(ArtEngine):
    """Scattered circles, rings and dotted rings in schema colors."""

    name = "colorcircle"

    def __init__(self, circle_num: int) -> None:
        require_positive(circle_num=circle_num)
        self.circle_num = circle_num

    def draw(self, c: Canvas) -> None:
        rng = c.rng
        base = min(c.width, c.height)
        for _ in range(self.circle_num):
            x, y = rng.uniform(0, c.width), rng.uniform(0, c.height)
            r = rng.uniform(base * 0.01, base * 0.12)
            color = colors.with_alpha(c.random_color(), rng.randint(120, 255))
            kind = rng.randrange(3)
            if kind == 0:
                c.circle(x, y, r, fill=color)
            elif kind == 1:
                c.circle(x, y, r, outline=color, width=rng.uniform(1, 6))
            else:
                n = max(int(r), 8)
                dot = max(r * 0.08, 1.0)
                for k in range(n):
                    theta = 2 * math.pi * k / n
                    c.circle(x + math.cos(theta) * r, y + math.sin(theta) * r, dot, fill=color)


class ColorCircle2(ArtEngine):
    """Fuzzy rings built from thousands of jittered points."""

    name = "colorcircle2"

    def __init__(self, circle_num: int) -> None:
        require_positive(circle_num=circle_num)
        self.circle_num = circle_num

    def draw(self, c: Canvas) -> None:
        gen = c.numpy_rng()
        base = min(c.width, c.height)
        for _ in range(self.circle_num):
            x, y = gen.uniform(0, c.width), gen.uniform(0, c.height)
            r = gen.uniform(base * 0.05, base * 0.25)
            n = int(r * 40)
            theta = gen.uniform(0, 2 * math.pi, n)
            spread = gen.normal(0, r * 0.06, n)
            px = x + np.cos(theta) * (r + spread)
            py = y + np.sin(theta) * (r + spread)
            color = colors.with_alpha(c.random_color(), 160)
            c.points(zip(px, py), color)


class _WanderingCircles(ArtEngine):
    """Circles that random-walk across the canvas, redrawn at every step.

    Shared by :class:`RandCircle` and :class:`SilkSmoke`; subclasses decide
    how a single step is rendered.
    """

    def __init__(
        self,
        max_circle: int,
        max_steps_per_circle: int,
        min_step: float,
        max_step: float,
        min_radius: float,
        max_radius: float,
        is_random_color: bool,
    ) -> None:
        require_positive(
            max_circle=max_circle,
            max_steps_per_circle=max_steps_per_circle,
            min_radius=min_radius,
        )
        if max_step < min_step or max_radius < min_radius:
            raise ValueError("max bounds must be >= min bounds")
        self.max_circle = max_circle
        self.max_steps_per_circle = max_steps_per_circle
        self.min_step = min_step
        self.max_step = max_step
        self.min_radius = min_radius
        self.max_radius = max_radius
        self.is_random_color = is_random_color

    def _step(self, c: Canvas, x: float, y: float, r: float, fill) -> None:
        raise NotImplementedError

    def draw(self, c: Canvas) -> None:
        rng = c.rng
        for _ in range(max(c.iterations, 1)):
            for _ in range(rng.randint(1, self.max_circle)):
                x, y = rng.uniform(0, c.width), rng.uniform(0, c.height)
                r = rng.uniform(self.min_radius, self.max_radius)
                heading = rng.uniform(0, 2 * math.pi)
                fill = colors.with_alpha(c.random_color(), 30) if self.is_random_color else None
                for _ in range(rng.randint(1, self.max_steps_per_circle)):
                    self._step(c, x, y, r, fill)
                    speed = rng.uniform(self.min_step, self.max_step)
                    heading += rng.uniform(-0.3, 0.3)
                    x += math.cos(heading) * speed
                    y += math.sin(heading) * speed


class RandCircle(_WanderingCircles):
    """Wandering circle outlines, optionally filled with schema colors."""

    name = "randcircle"

    def _step(self, c: Canvas, x: float, y: float, r: float, fill) -> None:
        c.circle(x, y, r, fill=fill, outline=c.line_color, width=c.line_width)


class SilkSmoke(_WanderingCircles):
    """Wandering rings traced as polylines, building smoke-like strands."""

    name = "silksmoke"

    _SEGMENTS = 24

    def _step(self, c: Canvas, x: float, y: float, r: float, fill) -> None:
        stroke = fill or colors.with_alpha(c.line_color, c.alpha)
        pts = []
        for k in range(self._SEGMENTS + 1):
            theta = 2 * math.pi * k / self._SEGMENTS
            rr = r * c.rng.uniform(0.9, 1.1)
            pts.append((x + math.cos(theta) * rr, y + math.sin(theta) * rr))
        c.line(pts, color=stroke)


class PerlinPearls(ArtEngine):
    """Non-overlapping pearls filled with noise-driven point trails.

    Args:
        circle_n: Number of pearls.
        dots_n: Particles per pearl.
        color_min: Lower bound of the hue range in degrees.
        color_max: Upper bound of the hue range in degrees.
    """

    name = "perlinpearls"

    def __init__(self, circle_n: int, dots_n: int, color_min: float, color_max: float) -> None:
        require_positive(circle_n=circle_n, dots_n=dots_n)
        if color_max < color_min:
            raise ValueError("color_max must be >= color_min")
        self.circle_n = circle_n
        self.dots_n = dots_n
        self.color_min = color_min
        self.color_max = color_max

    def _place(self, c: Canvas) -> list[tuple[float, float, float]]:
        rng = c.rng
        base = min(c.width, c.height)
        placed: list[tuple[float, float, float]] = []
        attempts = 0
        while len(placed) < self.circle_n and attempts < self.circle_n * 200:
            attempts += 1
            r = rng.uniform(base * 0.04, base * 0.15)
            x = rng.uniform(r, c.width - r)
            y = rng.uniform(r, c.height - r)
            if all(math.hypot(x - px, y - py) > r + pr + 2 for px, py, pr in placed):
                placed.append((x, y, r))
        return placed

    def draw(self, c: Canvas) -> None:
        noise = c.noise()
        gen = c.numpy_rng()
        for idx, (x, y, r) in enumerate(self._place(c)):
            c.circle(x, y, r, outline=(0, 0, 0, 255), width=1)
            theta = gen.uniform(0, 2 * math.pi, self.dots_n)
            dist = np.sqrt(gen.uniform(0, 1, self.dots_n)) * r
            xs = x + np.cos(theta) * dist
            ys = y + np.sin(theta) * dist
            color = colors.hsv(gen.uniform(self.color_min, self.color_max), 0.8, 0.9, c.alpha)
            stroke, _ = c.stroke(color)
            for it in range(c.iterations):
                angle = noise.noise(xs * 0.01, ys * 0.01, idx + it * 0.005) * 4 * math.pi
                xs = xs + np.cos(angle)
                ys = ys + np.sin(angle)
                # Keep particles inside their pearl.
                dx, dy = xs - x, ys - y
                d = np.hypot(dx, dy)
                outside = d > r
                scale = np.where(outside, r / np.maximum(d, 1e-9), 1.0)
                xs, ys = x + dx * scale, y + dy * scale
                c.points(zip(xs, ys), stroke)


class SilkSky(ArtEngine):
    """A grid of large translucent circles with a sun on top.

    Args:
        circle_num: Circles per side of the grid.
        sun_radius: Radius multiplier shared by the sky circles and the sun.
    """

    name = "silksky"

    def __init__(self, circle_num: int, sun_radius: float) -> None:
        require_positive(circle_num=circle_num, sun_radius=sun_radius)
        self.circle_num = circle_num
        self.sun_radius = sun_radius

    def draw(self, c: Canvas) -> None:
        rng = c.rng
        base_hue = rng.uniform(180, 260)
        cell = c.width / self.circle_num
        r = cell * self.sun_radius * 0.5
        for i in range(self.circle_num):
            for j in range(self.circle_num):
                hue = base_hue + (i + j) * 4 + rng.uniform(-10, 10)
                color = colors.hsv(hue, rng.uniform(0.4, 0.9), rng.uniform(0.6, 1.0), c.alpha)
                c.circle(cell * (i + 0.5), cell * (j + 0.5) * c.height / c.width, r, fill=color)

        sun_x = rng.uniform(c.width * 0.2, c.width * 0.8)
        sun_y = rng.uniform(c.height * 0.15, c.height * 0.45)
        glow = min(c.alpha * 10, 255)
        sun = colors.hsv(rng.uniform(20, 50), 0.8, 1.0, glow)
        c.circle(sun_x, sun_y, cell * self.sun_radius * 0.4, fill=sun)
