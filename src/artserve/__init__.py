"""artserve - procedurally generated art served as JPEG over HTTP."""

__version__ = "0.1.0"

from artserve.core.config import ArtserveConfig, config
from artserve.core.registry import PresetRegistry, preset_registry

# Import presets to ensure they're registered
from artserve.core import presets  # noqa: F401

__all__ = [
    "ArtserveConfig",
    "PresetRegistry",
    "config",
    "preset_registry",
]
