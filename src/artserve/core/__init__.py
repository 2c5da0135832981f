"""Core functionality for artserve.

- **ArtserveConfig / config**: configuration via Pydantic Settings
- **Canvas / RenderError**: the drawing surface every engine paints on
- **PresetRegistry / preset_registry**: the dispatch table behind ``/art/{id}``

Importing this package also imports :mod:`artserve.core.presets`, which
registers every preset in the global registry.

Usage Example
-------------
    from artserve.core import preset_registry

    data = preset_registry.render("maze", seed=7)
"""

from artserve.core.canvas import Canvas, RenderError
from artserve.core.config import ArtserveConfig, config
from artserve.core.registry import Preset, PresetNotFoundError, PresetRegistry, preset_registry

# Import presets to ensure they're registered
from artserve.core import presets  # noqa: F401

__all__ = [
    "ArtserveConfig",
    "Canvas",
    "Preset",
    "PresetNotFoundError",
    "PresetRegistry",
    "RenderError",
    "config",
    "preset_registry",
]
