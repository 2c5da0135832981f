"""Configuration management for artserve.

This module provides centralized configuration management using Pydantic Settings.
Configuration is loaded from environment variables with the ARTSERVE_ prefix,
allowing easy customization without code changes.

Environment Variable Loading
-----------------------------
Configuration values are loaded in the following priority order:
1. Explicit keyword arguments
2. Environment variables (ARTSERVE_* prefix)
3. .env file in the working directory
4. Default values defined in ArtserveConfig

The listening port is the one exception to the prefix rule: the plain
``PORT`` variable (as set by most container platforms) is read first, then
``ARTSERVE_SERVER_PORT``.  Without either the server listens on 8080.

Example .env file:
    PORT=8080
    ARTSERVE_DEFAULT_PRESET=julia
    ARTSERVE_EXPOSE_HIDDEN_PRESETS=true
    ARTSERVE_LOG_LEVEL=DEBUG

Global Configuration Instance
------------------------------
A global `config` instance is created automatically at module import time.
It is the single source of truth for configuration values across the
application.

    from artserve.core.config import config

    print(config.server_port)
"""

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ArtserveConfig(BaseSettings):
    """Main configuration for the artserve HTTP service.

    Attributes
    ----------
    Server Settings:
        server_host : str
            Bind address for uvicorn.
        server_port : int
            Listening port (1-65535), from ``PORT`` or ``ARTSERVE_SERVER_PORT``.

    Rendering Settings:
        default_preset : str
            Preset rendered by ``GET /``.
        expose_hidden_presets : bool
            Serve presets registered as hidden through ``/art/{id}``.
        jpeg_quality : int
            JPEG quality used when encoding every image (1-95).

    Logging:
        log_level : Literal["DEBUG", "INFO", "WARNING", "ERROR"]
            Root log level configured by the CLI entry point.

    Examples
    --------
    Create a custom configuration:

        >>> custom_config = ArtserveConfig(server_port=9000, default_preset="julia")

    Use the global configuration instance:

        >>> from artserve.core.config import config
        >>> print(config.default_preset)
        'randomshape'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ARTSERVE_",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Server settings
    server_host: str = Field(
        default="0.0.0.0",
        description="Server bind address (0.0.0.0 for all interfaces)",
    )
    server_port: int = Field(
        default=8080,
        description="Server port",
        ge=1,
        le=65535,
        validation_alias=AliasChoices("PORT", "ARTSERVE_SERVER_PORT"),
    )

    # Rendering settings
    default_preset: str = Field(
        default="randomshape",
        description="Preset rendered by the default route",
    )
    expose_hidden_presets: bool = Field(
        default=False,
        description="Serve presets that are registered as hidden",
    )
    jpeg_quality: int = Field(
        default=75,
        description="JPEG encoder quality",
        ge=1,
        le=95,
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Root log level for the server process",
    )


# Global configuration instance
# Created when the module is imported; loads values from environment variables
# (ARTSERVE_* prefix, plus PORT) and the .env file.
config = ArtserveConfig()
