"""Tests for artserve.core.registry — the preset dispatch table.

Tests cover:
- Registration, duplicate detection and the decorator form.
- Lookup of public and hidden presets.
- Start-up validation of the table.
- Rendering with a request-local random source.
"""

from __future__ import annotations

import random

import pytest

from artserve.core.registry import Preset, PresetNotFoundError, PresetRegistry, preset_registry


def _render_seed(rng: random.Random, quality: int) -> bytes:
    """Fake render function returning the first draw of its random source."""
    return f"{rng.random()}:{quality}".encode()


@pytest.fixture
def registry() -> PresetRegistry:
    registry = PresetRegistry()
    registry.register("alpha", _render_seed, description="first")
    registry.register("beta", _render_seed)
    registry.register("ghost", _render_seed, hidden=True)
    return registry


@pytest.mark.unit
class TestRegistration:
    """Test adding presets to a registry."""

    def test_register_returns_preset(self):
        registry = PresetRegistry()
        preset = registry.register("alpha", _render_seed, description="first")
        assert isinstance(preset, Preset)
        assert preset.name == "alpha"
        assert preset.description == "first"
        assert preset.hidden is False
        assert "alpha" in registry
        assert len(registry) == 1

    def test_duplicate_name_rejected(self, registry):
        with pytest.raises(ValueError, match="already registered"):
            registry.register("alpha", _render_seed)

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            PresetRegistry().register("", _render_seed)

    def test_decorator_registers_and_returns_function(self):
        registry = PresetRegistry()

        @registry.preset("decorated", "via decorator", hidden=True)
        def render(rng, quality):
            return b""

        assert registry.get("decorated", include_hidden=True).render is render
        assert registry.get("decorated", include_hidden=True).description == "via decorator"


@pytest.mark.unit
class TestLookup:
    """Test preset lookup and listing."""

    def test_get_public(self, registry):
        assert registry.get("alpha").name == "alpha"

    def test_get_unknown_raises(self, registry):
        with pytest.raises(PresetNotFoundError) as info:
            registry.get("nope")
        assert info.value.name == "nope"
        assert str(info.value) == "Unknown preset: nope"

    def test_not_found_is_key_error(self, registry):
        with pytest.raises(KeyError):
            registry.get("nope")

    def test_hidden_requires_flag(self, registry):
        with pytest.raises(PresetNotFoundError):
            registry.get("ghost")
        assert registry.get("ghost", include_hidden=True).hidden is True

    def test_list_available_sorted_without_hidden(self, registry):
        assert registry.list_available() == ["alpha", "beta"]

    def test_list_available_with_hidden(self, registry):
        assert registry.list_available(include_hidden=True) == ["alpha", "beta", "ghost"]


@pytest.mark.unit
class TestValidate:
    """Test start-up validation."""

    def test_valid_registry(self, registry):
        registry.validate()

    def test_empty_registry_invalid(self):
        with pytest.raises(ValueError, match="No presets"):
            PresetRegistry().validate()

    def test_non_callable_render_invalid(self, registry):
        registry.register("broken", None)
        with pytest.raises(ValueError, match="broken"):
            registry.validate()


@pytest.mark.unit
class TestRender:
    """Test rendering through the registry."""

    def test_seed_is_deterministic(self, registry):
        assert registry.render("alpha", seed=5) == registry.render("alpha", seed=5)

    def test_seed_matches_local_random(self, registry):
        expected = f"{random.Random(5).random()}:75".encode()
        assert registry.render("alpha", seed=5) == expected

    def test_unseeded_calls_differ(self, registry):
        assert registry.render("alpha") != registry.render("alpha")

    def test_quality_forwarded(self, registry):
        assert registry.render("alpha", seed=1, quality=40).endswith(b":40")

    def test_global_random_untouched(self, registry):
        """Rendering must not consume or reseed the module-level random state."""
        random.seed(99)
        expected = random.Random(99).random()
        registry.render("alpha", seed=3)
        assert random.random() == expected

    def test_hidden_render_requires_flag(self, registry):
        with pytest.raises(PresetNotFoundError):
            registry.render("ghost", seed=1)
        assert registry.render("ghost", seed=1, include_hidden=True)

    def test_render_errors_propagate(self):
        registry = PresetRegistry()

        def explode(rng, quality):
            raise RuntimeError("boom")

        registry.register("explode", explode)
        with pytest.raises(RuntimeError, match="boom"):
            registry.render("explode")


@pytest.mark.unit
class TestGlobalRegistry:
    """Test the populated application registry."""

    EXPECTED_PUBLIC = {
        "blackhole",
        "circlegrid",
        "circleline",
        "circleloop",
        "circlemove",
        "circlenoise",
        "colorcanva",
        "colorcircle",
        "colorcircle2",
        "contourline",
        "domainwrap",
        "dotline",
        "dotswave",
        "gridsquare",
        "janus",
        "julia",
        "maze",
        "noiseline",
        "oceanfish",
        "perlinpearls",
        "pixelhole",
        "randcircle",
        "randomshape",
        "silkysky",
        "silksmoke",
        "spiralsquare",
        "yarn",
    }
    EXPECTED_HIDDEN = {"circleloop1", "pointribbon", "solarflare", "swirl"}

    def test_public_presets(self):
        assert set(preset_registry.list_available()) == self.EXPECTED_PUBLIC

    def test_hidden_presets(self):
        everything = set(preset_registry.list_available(include_hidden=True))
        assert everything - self.EXPECTED_PUBLIC == self.EXPECTED_HIDDEN

    def test_frame_writing_preset_absent(self):
        assert "domainwrap2" not in preset_registry

    def test_global_registry_validates(self):
        preset_registry.validate()
