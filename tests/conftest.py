"""Shared test fixtures."""

import pytest

from schema_render.builtins import register_builtin_renderers
from schema_render.components import DescriptorConverter, RenderBridge
from schema_render.config import RenderSettings
from schema_render.definitions import RenderContext
from schema_render.engine import RenderEngine
from schema_render.html import create_default_component_map


@pytest.fixture
def settings():
    return RenderSettings()


@pytest.fixture
def engine(settings):
    """Empty engine."""
    return RenderEngine(settings=settings)


@pytest.fixture
def builtin_engine(settings):
    """Engine with every built-in renderer registered."""
    engine = RenderEngine(settings=settings)
    register_builtin_renderers(engine)
    return engine


@pytest.fixture
def components():
    return create_default_component_map()


@pytest.fixture
def converter(components):
    return DescriptorConverter(components)


@pytest.fixture
def bridge(builtin_engine, converter):
    return RenderBridge(builtin_engine, converter)


@pytest.fixture
def context():
    return RenderContext(locale="en-US")


@pytest.fixture
def sample_record():
    """A record for group and view rendering."""
    return {
        "id": 7,
        "name": "Ada Lovelace",
        "age": 36,
        "active": True,
        "joined": "1843-07-01T00:00:00Z",
        "tags": ["math", "engines"],
    }


@pytest.fixture
def sample_fields():
    return [
        {"name": "name", "label": "Name", "type": "string"},
        {"name": "age", "label": "Age", "type": "number"},
        {"name": "active", "label": "Active", "type": "boolean", "layout": "inline"},
    ]
