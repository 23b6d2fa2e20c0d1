"""Unit test fixtures."""

import pytest

from schema_render.config import reset_settings
from schema_render.engine import reset_default_engine
from schema_render.html import reset_component_registry


@pytest.fixture(autouse=True)
def reset_globals(monkeypatch):
    """Isolate process-level settings, engine and component map per test."""
    for name in ("SCHEMA_RENDER_LOCALE", "SCHEMA_RENDER_WARN_ON_OVERRIDE", "SCHEMA_RENDER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    reset_default_engine()
    reset_component_registry()
    yield
    reset_settings()
    reset_default_engine()
    reset_component_registry()
