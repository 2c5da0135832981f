"""artserve — FastAPI application.

This module is the single entry point for the web service.  It defines the
FastAPI ``app`` instance, the two image routes, and the ``main()`` CLI
function that launches the uvicorn server.

Architecture
------------
The service is stateless:

- **Presets** live in :data:`~artserve.core.registry.preset_registry`; the
  table is validated once in the lifespan hook.
- **Rendering** happens synchronously inside each request.  Routes are plain
  ``def`` functions, so FastAPI runs every request in its thread pool with
  its own canvas, buffer and random source.
- **Failures** stay inside the request: an unknown preset answers 404, a
  render failure answers 500 and is logged; the process keeps serving.
- The generated OpenAPI and docs routes are disabled so only the two image
  routes exist.

Endpoints
---------
========  ==============  ==========================================
Method    Path            Purpose
========  ==============  ==========================================
GET       ``/``           Render the default preset as JPEG
GET       ``/art/{id}``   Render the preset named ``id`` as JPEG
========  ==============  ==========================================

Usage
-----
CLI (installed entry point)::

    artserve

Direct invocation::

    python -m artserve.api.main
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, Response

from artserve import __version__
from artserve.core.config import config
from artserve.core.registry import PresetNotFoundError, preset_registry

logger = logging.getLogger(__name__)

JPEG_MEDIA_TYPE = "image/jpeg"


# ---------------------------------------------------------------------------
# Application lifecycle: validate the preset table once at start-up.
# ---------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Validate the preset table before serving any request.

    A missing render function or an unknown ``default_preset`` fails
    start-up instead of failing individual requests later.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control back to the application for the duration of its lifetime.
    """
    preset_registry.validate()
    preset_registry.get(config.default_preset, include_hidden=True)
    logger.info(
        f"Serving {len(preset_registry.list_available(config.expose_hidden_presets))} presets "
        f"(default: {config.default_preset})"
    )
    yield


# ---------------------------------------------------------------------------
# FastAPI application instance.
# ---------------------------------------------------------------------------
app = FastAPI(
    title="artserve",
    description="Procedurally generated art rendered as JPEG.",
    version=__version__,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


# ---------------------------------------------------------------------------
# Rendering helpers.
# ---------------------------------------------------------------------------


def _image_response(data: bytes) -> Response:
    """Wrap encoded JPEG bytes with explicit type and length headers."""
    return Response(
        content=data,
        media_type=JPEG_MEDIA_TYPE,
        headers={"Content-Length": str(len(data))},
    )


def _render(name: str, include_hidden: bool) -> Response:
    """Render *name* and translate failures into HTTP errors.

    Raises:
        HTTPException: 404 for an unknown (or hidden) preset, 500 when the
            preset fails to draw or encode.
    """
    try:
        data = preset_registry.render(
            name,
            include_hidden=include_hidden,
            quality=config.jpeg_quality,
        )
    except PresetNotFoundError as e:
        logger.warning(f"Unknown preset requested: {name}")
        raise HTTPException(status_code=404, detail=str(e)) from e
    except Exception as e:
        # Request boundary: any render failure becomes a 500 for this request only.
        logger.exception(f"Failed to render preset {name}")
        raise HTTPException(status_code=500, detail=f"Failed to render preset '{name}'") from e
    return _image_response(data)


# ---------------------------------------------------------------------------
# Routes.
# ---------------------------------------------------------------------------


@app.get("/")
def index(request: Request) -> Response:
    """Render the configured default preset.

    Returns:
        A ``200 image/jpeg`` response.
    """
    logger.info(f"method={request.method} path={request.url.path}")
    return _render(config.default_preset, include_hidden=True)


@app.get("/art/{preset_id}")
def art(preset_id: str) -> Response:
    """Render the preset named *preset_id*.

    Args:
        preset_id: Registered preset identifier (e.g. ``julia``, ``maze``).

    Returns:
        A ``200 image/jpeg`` response.

    Raises:
        HTTPException: 404 if the preset is unknown, 500 if rendering fails.
    """
    logger.info(f"id={preset_id}")
    return _render(preset_id, include_hidden=config.expose_hidden_presets)


# ---------------------------------------------------------------------------
# CLI entry point.
# ---------------------------------------------------------------------------


def main() -> None:
    """Launch the uvicorn ASGI server.

    Reads host and port from :data:`~artserve.core.config.config` (``PORT``
    or ``ARTSERVE_SERVER_PORT``, default 8080) and configures logging at
    ``ARTSERVE_LOG_LEVEL``.

    This function is registered as the ``artserve`` console script in
    ``pyproject.toml``.
    """
    import uvicorn

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(f"listening on {config.server_host}:{config.server_port}")

    uvicorn.run(
        "artserve.api.main:app",
        host=config.server_host,
        port=config.server_port,
        log_level=config.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
