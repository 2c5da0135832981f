"""Preset registry: the dispatch table behind ``GET /art/{id}``.

A preset is a named render function.  The registry maps identifiers to
presets, validates the table once at start-up, and renders a preset with a
request-local random source so concurrent requests never share random state.

Registry Pattern
----------------
Presets register themselves when :mod:`artserve.core.presets` is imported,
the same way model adapters register in a global registry:

    >>> from artserve.core.registry import preset_registry
    >>> preset_registry.list_available()
    ['blackhole', 'circlegrid', ...]
    >>> data = preset_registry.render("julia", seed=42)

Hidden Presets
--------------
Presets registered with ``hidden=True`` are left out of lookups and listings
unless the caller passes ``include_hidden=True``.  The API enables that from
``ArtserveConfig.expose_hidden_presets``.
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable
from dataclasses import dataclass

from artserve.core.canvas import DEFAULT_JPEG_QUALITY

logger = logging.getLogger(__name__)

RenderFunction = Callable[[random.Random, int], bytes]


class PresetNotFoundError(KeyError):
    """Raised when an identifier does not name a (visible) preset."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown preset: {self.name}"


@dataclass(frozen=True)
class Preset:
    """A registered preset.

    Attributes:
        name: Identifier used in ``/art/{name}``.
        render: ``render(rng, quality) -> bytes`` producing a JPEG.
        description: One-line human description.
        hidden: Excluded from lookups unless hidden presets are exposed.
    """

    name: str
    render: RenderFunction
    description: str = ""
    hidden: bool = False


class PresetRegistry:
    """Registry mapping preset identifiers to render functions.

    Notes
    -----
    - Names are unique; registering a name twice is an error.
    - Lookups are plain dict lookups and raise :class:`PresetNotFoundError`
      for absent or hidden names.
    - The registry holds no per-request state and is safe to share between
      request threads once start-up registration is complete.
    """

    def __init__(self) -> None:
        self._presets: dict[str, Preset] = {}

    def register(
        self,
        name: str,
        render: RenderFunction,
        description: str = "",
        hidden: bool = False,
    ) -> Preset:
        """Register *render* under *name*.

        Raises:
            ValueError: If *name* is empty or already registered.
        """
        if not name:
            raise ValueError("Preset name must not be empty")
        if name in self._presets:
            raise ValueError(f"Preset '{name}' is already registered")

        preset = Preset(name=name, render=render, description=description, hidden=hidden)
        self._presets[name] = preset
        logger.debug(f"Registered preset: {name}{' (hidden)' if hidden else ''}")
        return preset

    def preset(self, name: str, description: str = "", hidden: bool = False):
        """Decorator form of :meth:`register`."""

        def decorator(render: RenderFunction) -> RenderFunction:
            self.register(name, render, description=description, hidden=hidden)
            return render

        return decorator

    def get(self, name: str, include_hidden: bool = False) -> Preset:
        """Look up a preset.

        Raises:
            PresetNotFoundError: If *name* is unknown, or hidden and
                *include_hidden* is false.
        """
        preset = self._presets.get(name)
        if preset is None or (preset.hidden and not include_hidden):
            raise PresetNotFoundError(name)
        return preset

    def list_available(self, include_hidden: bool = False) -> list[str]:
        """Return registered names in sorted order."""
        return sorted(
            name for name, preset in self._presets.items() if include_hidden or not preset.hidden
        )

    def validate(self) -> None:
        """Check that every entry resolves to a callable render function.

        Raises:
            ValueError: If the table is empty or an entry is not callable.
        """
        if not self._presets:
            raise ValueError("No presets registered")
        broken = [name for name, preset in self._presets.items() if not callable(preset.render)]
        if broken:
            raise ValueError(f"Presets without a callable render function: {', '.join(broken)}")
        logger.info(
            f"Validated {len(self._presets)} presets "
            f"({len(self.list_available())} public, "
            f"{len(self._presets) - len(self.list_available())} hidden)"
        )

    def render(
        self,
        name: str,
        seed: int | None = None,
        include_hidden: bool = False,
        quality: int = DEFAULT_JPEG_QUALITY,
    ) -> bytes:
        """Render a preset to JPEG bytes.

        Args:
            name: Preset identifier.
            seed: Seed for the request-local random source.  ``None`` seeds
                from the current time so repeated calls differ.
            include_hidden: Allow hidden presets.
            quality: JPEG quality passed to the canvas encoder.

        Returns:
            The encoded image.

        Raises:
            PresetNotFoundError: If the preset cannot be found.
            RenderError: If drawing or encoding fails.
        """
        preset = self.get(name, include_hidden=include_hidden)
        rng = random.Random(time.time_ns() if seed is None else seed)

        started = time.perf_counter()
        data = preset.render(rng, quality)
        logger.debug(
            f"Rendered preset {name} ({len(data)} bytes) in {time.perf_counter() - started:.3f}s"
        )
        return data

    def __contains__(self, name: object) -> bool:
        return name in self._presets

    def __len__(self) -> int:
        return len(self._presets)


# Global preset registry instance
preset_registry = PresetRegistry()
