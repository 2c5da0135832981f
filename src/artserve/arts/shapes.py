"""Geometric-shape engines."""

from __future__ import annotations

import math

from PIL import Image, ImageDraw

from artserve.arts.base import ArtEngine, require_positive
from artserve.core import colors
from artserve.core.canvas import Canvas


def _rotated_rect(
    x: float, y: float, w: float, h: float, angle: float
) -> list[tuple[float, float]]:
    """Corners of a ``w`` x ``h`` rectangle centred on ``(x, y)`` rotated by *angle*."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    corners = [(-w / 2, -h / 2), (w / 2, -h / 2), (w / 2, h / 2), (-w / 2, h / 2)]
    return [(x + cx * cos_a - cy * sin_a, y + cx * sin_a + cy * cos_a) for cx, cy in corners]


class RandomShape(ArtEngine):
    """Randomly placed rectangles, circles and triangles in schema colors."""

    name = "randomshape"

    def __init__(self, shape_num: int) -> None:
        require_positive(shape_num=shape_num)
        self.shape_num = shape_num

    def draw(self, c: Canvas) -> None:
        rng = c.rng
        base = min(c.width, c.height)
        for _ in range(self.shape_num):
            x, y = rng.uniform(0, c.width), rng.uniform(0, c.height)
            size = rng.uniform(base * 0.02, base * 0.15)
            angle = rng.uniform(0, math.pi)
            color = c.random_color()
            kind = rng.randrange(3)
            if kind == 0:
                w, h = size * rng.uniform(0.5, 2.0), size * rng.uniform(0.5, 2.0)
                c.polygon(_rotated_rect(x, y, w, h, angle), fill=color)
            elif kind == 1:
                c.circle(x, y, size / 2, fill=color)
            else:
                pts = [
                    (
                        x + math.cos(angle + k * 2 * math.pi / 3) * size / 2,
                        y + math.sin(angle + k * 2 * math.pi / 3) * size / 2,
                    )
                    for k in range(3)
                ]
                c.polygon(pts, fill=color)


class ColorCanvas(ArtEngine):
    """A ``seg`` x ``seg`` grid of colored panels with tilted inserts.

    Panels are separated by background-colored strokes of ``line_width``.
    """

    name = "colorcanvas"

    def __init__(self, seg: int) -> None:
        require_positive(seg=seg)
        self.seg = seg

    def draw(self, c: Canvas) -> None:
        rng = c.rng
        cw, ch = c.width / self.seg, c.height / self.seg
        for i in range(self.seg):
            for j in range(self.seg):
                x0, y0 = i * cw, j * ch
                box = [(x0, y0), (x0 + cw, y0), (x0 + cw, y0 + ch), (x0, y0 + ch)]
                c.polygon(box, fill=c.random_color(), outline=c.background, width=c.line_width)
                if rng.random() < 0.5:
                    side = min(cw, ch) * rng.uniform(0.3, 0.7)
                    insert = _rotated_rect(
                        x0 + cw / 2, y0 + ch / 2, side, side, rng.uniform(-0.4, 0.4)
                    )
                    c.polygon(insert, fill=c.random_color(), outline=c.background, width=2)


class GridSquares(ArtEngine):
    """Cells of nested squares shrinking by ``decay`` toward a random corner.

    Args:
        step: Cells per side.
        rect_num: Squares nested in each cell.
        decay: Fraction each nested square shrinks by.
    """

    name = "gridsquares"

    def __init__(self, step: int, rect_num: int, decay: float) -> None:
        require_positive(step=step, rect_num=rect_num)
        if not 0 < decay < 1:
            raise ValueError("decay must be in (0, 1)")
        self.step = step
        self.rect_num = rect_num
        self.decay = decay

    def draw(self, c: Canvas) -> None:
        rng = c.rng
        cw, ch = c.width / self.step, c.height / self.step
        for i in range(self.step):
            for j in range(self.step):
                x0, y0 = i * cw, j * ch
                w, h = cw, ch
                ax, ay = rng.random(), rng.random()
                for _ in range(self.rect_num):
                    c.pen.rectangle((x0, y0, x0 + w, y0 + h), fill=c.random_color())
                    nw, nh = w * (1 - self.decay), h * (1 - self.decay)
                    x0 += (w - nw) * ax
                    y0 += (h - nh) * ay
                    w, h = nw, nh


class Janus(ArtEngine):
    """Stacked two-faced discs: each split between a schema color and the foreground."""

    name = "janus"

    def __init__(self, n: int, decay: float) -> None:
        require_positive(n=n)
        if not 0 < decay < 1:
            raise ValueError("decay must be in (0, 1)")
        self.n = n
        self.decay = decay

    def draw(self, c: Canvas) -> None:
        rng = c.rng
        cx, cy = c.width / 2, c.height / 2
        r = min(c.width, c.height) * 0.45
        for _ in range(self.n):
            start = rng.uniform(0, 360)
            box = (cx - r, cy - r, cx + r, cy + r)
            c.pen.pieslice(box, start, start + 180, fill=c.random_color())
            c.pen.pieslice(box, start + 180, start + 360, fill=colors.with_alpha(c.foreground, 200))
            r *= 1 - self.decay


class Maze(ArtEngine):
    """Ten-print maze: each cell gets one of the two diagonals."""

    name = "maze"

    def __init__(self, step: int) -> None:
        require_positive(step=step)
        self.step = step

    def draw(self, c: Canvas) -> None:
        rng = c.rng
        cw, ch = c.width / self.step, c.height / self.step
        for i in range(self.step):
            for j in range(self.step):
                x0, y0 = i * cw, j * ch
                if rng.random() < 0.5:
                    c.line([(x0, y0), (x0 + cw, y0 + ch)])
                else:
                    c.line([(x0 + cw, y0), (x0, y0 + ch)])


class OceanFish(ArtEngine):
    """Striped ocean with fish silhouettes cut from a perpendicular stripe layer.

    Args:
        line_num: Stripes across the canvas.
        fish_num: Fish silhouettes.
    """

    name = "oceanfish"

    def __init__(self, line_num: int, fish_num: int) -> None:
        require_positive(line_num=line_num, fish_num=fish_num)
        self.line_num = line_num
        self.fish_num = fish_num

    def _stripes(self, c: Canvas, angle: float) -> Image.Image:
        layer = Image.new("RGB", c.size)
        pen = ImageDraw.Draw(layer)
        diag = math.hypot(c.width, c.height)
        spacing = diag / self.line_num
        dx, dy = math.cos(angle), math.sin(angle)
        nx, ny = -dy, dx
        for k in range(self.line_num + 1):
            off = -diag / 2 + k * spacing
            mx, my = c.width / 2 + nx * off, c.height / 2 + ny * off
            pen.line(
                [(mx - dx * diag, my - dy * diag), (mx + dx * diag, my + dy * diag)],
                fill=c.random_color()[:3],
                width=int(spacing) + 2,
            )
        return layer

    def draw(self, c: Canvas) -> None:
        rng = c.rng
        angle = rng.uniform(-0.3, 0.3)
        c.paste(self._stripes(c, angle))

        mask = Image.new("L", c.size, 0)
        pen = ImageDraw.Draw(mask)
        base = min(c.width, c.height)
        for _ in range(self.fish_num):
            x, y = rng.uniform(0, c.width), rng.uniform(0, c.height)
            length = rng.uniform(base * 0.12, base * 0.3)
            height = length * rng.uniform(0.35, 0.5)
            facing = rng.choice((-1, 1))
            pen.ellipse((x - length / 2, y - height / 2, x + length / 2, y + height / 2), fill=255)
            tail_x = x - facing * length / 2
            pen.polygon(
                [
                    (tail_x + facing * length * 0.05, y),
                    (tail_x - facing * length * 0.25, y - height / 2),
                    (tail_x - facing * length * 0.25, y + height / 2),
                ],
                fill=255,
            )
        c.paste(self._stripes(c, angle + math.pi / 2), mask)


class SpiralSquare(ArtEngine):
    """Nested squares, each smaller by ``decay`` and turned a little further.

    Args:
        square_num: Number of squares.
        rect_side: Side of the outermost square in pixels.
        decay: Fraction each square shrinks by.
        random_color: Fill from the schema instead of the foreground.
    """

    name = "spiralsquare"

    def __init__(self, square_num: int, rect_side: float, decay: float, random_color: bool) -> None:
        require_positive(square_num=square_num, rect_side=rect_side)
        if not 0 < decay < 1:
            raise ValueError("decay must be in (0, 1)")
        self.square_num = square_num
        self.rect_side = rect_side
        self.decay = decay
        self.random_color = random_color

    def draw(self, c: Canvas) -> None:
        rng = c.rng
        cx, cy = c.width / 2, c.height / 2
        turn = rng.uniform(0.04, 0.15) * rng.choice((-1, 1))
        side = self.rect_side
        for i in range(self.square_num):
            fill = c.random_color() if self.random_color else c.foreground
            c.polygon(
                _rotated_rect(cx, cy, side, side, i * turn),
                fill=fill,
                outline=c.line_color,
                width=max(c.line_width * side / self.rect_side, 1.0),
            )
            side *= 1 - self.decay


class DotsWave(ArtEngine):
    """Strands of dots riding sine waves across the canvas."""

    name = "dotswave"

    _DOTS_PER_STRAND = 30

    def __init__(self, dots_n: int) -> None:
        require_positive(dots_n=dots_n)
        self.dots_n = dots_n

    def draw(self, c: Canvas) -> None:
        rng = c.rng
        for _ in range(self.dots_n):
            phase = rng.uniform(0, 2 * math.pi)
            amp = rng.uniform(c.height * 0.02, c.height * 0.15)
            freq = rng.uniform(1, 4) * 2 * math.pi / c.width
            cy = rng.uniform(0, c.height)
            color = c.random_color()
            for k in range(self._DOTS_PER_STRAND):
                x = k / self._DOTS_PER_STRAND * c.width + rng.uniform(-3, 3)
                y = cy + amp * math.sin(freq * x + phase)
                c.circle(x, y, rng.uniform(0.5, 3.5), fill=color)
