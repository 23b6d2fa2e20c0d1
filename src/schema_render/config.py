"""Runtime settings for schema-render.

Values come from environment variables and are read once into a
RenderSettings model. Call reset_settings() after changing the environment
(tests do this through monkeypatch).
"""

import logging
import os
from typing import Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

_TRUTHY = ("1", "true", "yes", "on")


class RenderSettings(BaseModel):
    """Process-level settings consumed by the engine and built-in renderers."""

    default_locale: str = Field(
        default="en-US",
        description="Locale used when a render context does not carry one",
    )
    warn_on_override: bool = Field(
        default=False,
        description="Log a warning when a registration replaces an existing renderer",
    )
    log_level: str = Field(
        default="INFO",
        description="Level passed to logging.basicConfig by the API entry point",
    )

    @classmethod
    def from_env(cls) -> "RenderSettings":
        """Build settings from SCHEMA_RENDER_* environment variables."""
        return cls(
            default_locale=os.environ.get("SCHEMA_RENDER_LOCALE", "en-US"),
            warn_on_override=os.environ.get(
                "SCHEMA_RENDER_WARN_ON_OVERRIDE", ""
            ).lower() in _TRUTHY,
            log_level=os.environ.get("SCHEMA_RENDER_LOG_LEVEL", "INFO").upper(),
        )


# Global settings instance
_settings: Optional[RenderSettings] = None


def get_settings() -> RenderSettings:
    """Get the process settings, reading the environment on first use."""
    global _settings
    if _settings is None:
        _settings = RenderSettings.from_env()
        logger.debug(f"Loaded settings: {_settings.model_dump()}")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
