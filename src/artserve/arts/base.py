"""Base class for art engines."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from artserve.core.canvas import Canvas


class ArtEngine(ABC):
    """A generative primitive that draws itself onto a canvas.

    Engines hold only their numeric parameters.  Everything that varies per
    image (random choices, noise fields) is derived from ``canvas.rng`` inside
    :meth:`draw`, so an engine instance carries no request state.

    Subclasses validate their parameters in ``__init__`` and raise
    ``ValueError`` for values that cannot produce an image.
    """

    name: str = "engine"

    @abstractmethod
    def draw(self, canvas: Canvas) -> None:
        """Draw onto *canvas* using its options and random source."""

    def __repr__(self) -> str:
        params = ", ".join(f"{k}={v!r}" for k, v in vars(self).items() if not callable(v))
        return f"{type(self).__name__}({params})"


def require_positive(**values: float) -> None:
    """Raise ``ValueError`` naming the first non-positive keyword value."""
    for key, value in values.items():
        if value <= 0:
            raise ValueError(f"{key} must be positive, got {value!r}")
