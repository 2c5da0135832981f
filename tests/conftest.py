"""Shared pytest fixtures for artserve tests."""

import io
import random
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from artserve.core import colors
from artserve.core.canvas import Canvas
from artserve.core.config import ArtserveConfig


@pytest.fixture
def test_config(monkeypatch) -> ArtserveConfig:
    """Create a configuration isolated from the host environment.

    Returns:
        ArtserveConfig built from defaults only (no env vars, no .env file)
    """
    for name in ("PORT", "ARTSERVE_SERVER_PORT", "ARTSERVE_DEFAULT_PRESET"):
        monkeypatch.delenv(name, raising=False)
    return ArtserveConfig(_env_file=None)


@pytest.fixture
def rng() -> random.Random:
    """A fixed-seed random source so engine tests are reproducible."""
    return random.Random(1234)


@pytest.fixture
def small_canvas(rng: random.Random) -> Canvas:
    """A small canvas with its background already painted.

    Args:
        rng: Seeded random source from fixture

    Returns:
        120x120 Canvas filled with azure
    """
    canvas = Canvas(120, 120, rng=rng, background=colors.AZURE)
    canvas.fill_background()
    return canvas


@pytest.fixture
def test_client() -> Generator[TestClient, None, None]:
    """Create a TestClient with the application lifespan running.

    Yields:
        TestClient bound to artserve.api.main.app
    """
    from artserve.api.main import app

    with TestClient(app) as client:
        yield client


def decode_jpeg(data: bytes) -> Image.Image:
    """Decode JPEG bytes, failing the test if they are not a valid image."""
    image = Image.open(io.BytesIO(data))
    image.load()
    assert image.format == "JPEG"
    return image


@pytest.fixture
def jpeg_decoder():
    """Expose :func:`decode_jpeg` to tests without importing conftest."""
    return decode_jpeg
