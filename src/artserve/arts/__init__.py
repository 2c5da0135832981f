"""Generative art engines.

Each engine is an :class:`~artserve.arts.base.ArtEngine` subclass that takes
its numeric parameters in ``__init__`` and draws onto a
:class:`~artserve.core.canvas.Canvas` in ``draw()``.  Presets in
:mod:`artserve.core.presets` pick one engine each.

Modules
-------
circles
    Circle grids, loops, pearls, wandering circles and silky skies.
lines
    Black hole rings, flow-field trails, dot lines and yarn.
shapes
    Random shapes, panels, nested squares, mazes and ocean fish.
fields
    Julia sets, domain warping and point-cloud attractors.
"""

from artserve.arts.base import ArtEngine
from artserve.arts.circles import (
    CircleGrid,
    CircleLine,
    CircleLoop,
    CircleLoop2,
    CircleMove,
    CircleNoise,
    ColorCircle,
    ColorCircle2,
    PerlinPearls,
    RandCircle,
    SilkSky,
    SilkSmoke,
)
from artserve.arts.fields import DomainWarp, Julia, PixelHole, PointRibbon, SolarFlare, Swirl
from artserve.arts.lines import BlackHole, ContourLine, DotLine, NoiseLine, Yarn
from artserve.arts.shapes import (
    ColorCanvas,
    DotsWave,
    GridSquares,
    Janus,
    Maze,
    OceanFish,
    RandomShape,
    SpiralSquare,
)

__all__ = [
    "ArtEngine",
    "BlackHole",
    "CircleGrid",
    "CircleLine",
    "CircleLoop",
    "CircleLoop2",
    "CircleMove",
    "CircleNoise",
    "ColorCanvas",
    "ColorCircle",
    "ColorCircle2",
    "ContourLine",
    "DomainWarp",
    "DotLine",
    "DotsWave",
    "GridSquares",
    "Janus",
    "Julia",
    "Maze",
    "NoiseLine",
    "OceanFish",
    "PerlinPearls",
    "PixelHole",
    "PointRibbon",
    "RandCircle",
    "RandomShape",
    "SilkSky",
    "SilkSmoke",
    "SolarFlare",
    "SpiralSquare",
    "Swirl",
    "Yarn",
]
