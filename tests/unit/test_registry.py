"""Tests for category registries and loaders."""

import logging

import pytest

from schema_render.config import reset_settings
from schema_render.definitions import DataDefinition, FieldDefinition
from schema_render.descriptors import RenderDescriptor
from schema_render.errors import RendererNotFound
from schema_render.renderers import (
    CategoryLoader,
    CategoryRegistry,
    DataRenderer,
    FieldRenderer,
    LazyRenderer,
    RendererCategory,
)


class TextRenderer(DataRenderer):
    type = "text"

    def __init__(self, marker="text"):
        self.marker = marker

    def render(self, definition, value, context):
        return RenderDescriptor(component="span", children=[self.marker])


class NativeTextRenderer(TextRenderer):
    def render_native(self, definition, value, context):
        return f"native:{value}"


class InlineRenderer(FieldRenderer):
    type = "inline"

    def render(self, definition, value, context):
        return RenderDescriptor(component="span")


class TestCategoryRegistry:
    """Tests for CategoryRegistry."""

    def test_register_then_get_returns_same_renderer(self):
        registry = CategoryRegistry("data")
        renderer = TextRenderer()
        registry.register("text", renderer)
        assert registry.get("text") is renderer

    def test_get_missing_returns_none(self):
        assert CategoryRegistry("data").get("nope") is None

    def test_reregister_replaces(self):
        registry = CategoryRegistry("data")
        first, second = TextRenderer("a"), TextRenderer("b")
        registry.register("text", first)
        registry.register("text", second)
        assert registry.get("text") is second
        assert registry.count() == 1

    def test_override_warning_when_enabled(self, monkeypatch, caplog):
        monkeypatch.setenv("SCHEMA_RENDER_WARN_ON_OVERRIDE", "true")
        reset_settings()
        registry = CategoryRegistry("data")
        registry.register("text", TextRenderer("a"))
        with caplog.at_level(logging.WARNING, logger="schema_render.renderers.registry"):
            registry.register("text", TextRenderer("b"))
        assert "replaced" in caplog.text

    def test_override_silent_by_default(self, caplog):
        registry = CategoryRegistry("data")
        registry.register("text", TextRenderer("a"))
        with caplog.at_level(logging.WARNING, logger="schema_render.renderers.registry"):
            registry.register("text", TextRenderer("b"))
        assert caplog.records == []

    def test_rejects_non_renderer(self):
        with pytest.raises(TypeError):
            CategoryRegistry("data").register("text", object())

    def test_rejects_category_mismatch(self):
        with pytest.raises(ValueError):
            CategoryRegistry("data").register("inline", InlineRenderer())

    def test_get_types_is_a_set(self):
        registry = CategoryRegistry("data")
        registry.register("text", TextRenderer())
        registry.register("other", TextRenderer())
        assert registry.get_types() == {"text", "other"}

    def test_unregister_and_clear(self):
        registry = CategoryRegistry("data")
        registry.register("text", TextRenderer())
        assert registry.unregister("text") is True
        assert registry.unregister("text") is False
        registry.register("text", TextRenderer())
        registry.clear()
        assert len(registry) == 0
        assert "text" not in registry

    def test_registration_captures_native_capability(self):
        registry = CategoryRegistry("data")
        registry.register("plain", TextRenderer())
        registry.register("native", NativeTextRenderer())
        assert registry.get_registration("plain").has_native is False
        assert registry.get_registration("native").has_native is True

    def test_registries_are_independent(self):
        data = CategoryRegistry("data")
        fields = CategoryRegistry("field")
        data.register("text", TextRenderer())
        assert fields.get("text") is None


class TestCategoryLoader:
    """Tests for CategoryLoader dispatch and failure."""

    def test_load_by_type(self):
        registry = CategoryRegistry("data")
        renderer = TextRenderer()
        registry.register("text", renderer)
        loader = CategoryLoader(registry)
        assert loader.load(DataDefinition(type="text")) is renderer
        assert loader.load({"type": "text"}) is renderer

    def test_missing_type_raises(self):
        loader = CategoryLoader(CategoryRegistry("data"))
        with pytest.raises(RendererNotFound) as exc_info:
            loader.load({"type": "unknown"})
        assert exc_info.value.category == "data"
        assert exc_info.value.type == "unknown"
        assert "unknown" in str(exc_info.value)

    def test_not_found_is_a_lookup_error(self):
        loader = CategoryLoader(CategoryRegistry("data"))
        with pytest.raises(LookupError):
            loader.load({"type": "unknown"})

    def test_field_dispatches_on_layout(self):
        registry = CategoryRegistry("field")
        renderer = InlineRenderer()
        registry.register("inline", renderer)
        loader = CategoryLoader(registry)
        assert loader.load(FieldDefinition(name="x", type="number", layout="inline")) is renderer

    def test_field_layout_defaults_to_vertical(self):
        loader = CategoryLoader(CategoryRegistry("field"))
        assert loader.dispatch_key({"name": "x"}) == "vertical"
        with pytest.raises(RendererNotFound) as exc_info:
            loader.load({"name": "x"})
        assert exc_info.value.type == "vertical"

    def test_loader_does_not_mutate_mapping(self):
        registry = CategoryRegistry("data")
        registry.register("text", TextRenderer())
        definition = {"type": "text", "extra": {"nested": 1}}
        CategoryLoader(registry).load(definition)
        assert definition == {"type": "text", "extra": {"nested": 1}}

    @pytest.mark.asyncio
    async def test_aload_matches_load(self):
        registry = CategoryRegistry("data")
        renderer = TextRenderer()
        registry.register("text", renderer)
        assert await CategoryLoader(registry).aload({"type": "text"}) is renderer

    @pytest.mark.asyncio
    async def test_aload_missing_raises(self):
        with pytest.raises(RendererNotFound):
            await CategoryLoader(CategoryRegistry("data")).aload({"type": "x"})


class TestLazyRenderer:
    """Tests for lazily produced renderers."""

    def test_sync_factory_runs_once(self):
        calls = []

        def factory():
            calls.append(1)
            return TextRenderer()

        registry = CategoryRegistry("data")
        registry.register("text", LazyRenderer("data", "text", factory))
        loader = CategoryLoader(registry)
        first = loader.load({"type": "text"})
        second = loader.load({"type": "text"})
        assert first is second
        assert len(calls) == 1

    def test_async_factory_rejected_by_sync_load(self):
        async def factory():
            return TextRenderer()

        registry = CategoryRegistry("data")
        registry.register("text", LazyRenderer("data", "text", factory))
        with pytest.raises(TypeError, match="aresolve"):
            CategoryLoader(registry).load({"type": "text"})

    @pytest.mark.asyncio
    async def test_async_factory_resolved_by_aload(self):
        async def factory():
            return NativeTextRenderer()

        lazy = LazyRenderer(RendererCategory.DATA, "text", factory)
        registry = CategoryRegistry("data")
        registry.register("text", lazy)
        renderer = await CategoryLoader(registry).aload({"type": "text"})
        assert isinstance(renderer, NativeTextRenderer)
        assert lazy.is_resolved
        assert registry.get_registration("text").has_native

    def test_factory_must_return_renderer(self):
        lazy = LazyRenderer("data", "text", lambda: "not a renderer")
        with pytest.raises(TypeError):
            lazy.resolve()

    def test_factory_category_must_match(self):
        lazy = LazyRenderer("data", "inline", InlineRenderer)
        with pytest.raises(ValueError):
            lazy.resolve()
