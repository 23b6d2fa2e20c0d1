"""Tests for the render engine façade."""

import asyncio

import pytest

from schema_render.config import RenderSettings
from schema_render.definitions import RenderContext
from schema_render.descriptors import RenderDescriptor
from schema_render.engine import RenderEngine, get_default_engine, reset_default_engine
from schema_render.errors import RendererNotFound
from schema_render.renderers import ActionRenderer, DataRenderer, RendererCategory, ViewRenderer


class EchoRenderer(DataRenderer):
    type = "echo"

    def render(self, definition, value, context):
        return RenderDescriptor(component="span", children=[str(value)])


class AsyncEchoRenderer(DataRenderer):
    type = "async-echo"

    async def render(self, definition, value, context):
        await asyncio.sleep(0)
        return RenderDescriptor(component="span", children=[str(value)])


class MappingRenderer(DataRenderer):
    type = "mapping"

    def render(self, definition, value, context):
        return {"component": "span", "children": ["from mapping"]}


class ExplodingRenderer(DataRenderer):
    type = "explode"

    def render(self, definition, value, context):
        raise ZeroDivisionError("boom")


class ContextRenderer(ViewRenderer):
    type = "ctx"

    def render(self, definition, value, context):
        return RenderDescriptor(component="div", props={"context": context, "data": value})


class RecordingAction(ActionRenderer):
    type = "button"

    def render(self, definition, value, context):
        return RenderDescriptor(component="button", props={"value": value}, children=[definition.display_label])


class TestRegistration:
    """Tests for registering renderers on an engine."""

    def test_new_engine_is_empty(self, engine):
        assert engine.get_renderer_stats().total == 0
        for category in RendererCategory:
            assert engine.get_available_types(category) == set()

    def test_register_routes_by_category(self, engine):
        renderer = EchoRenderer()
        engine.register_renderer(renderer)
        assert engine.get_renderer("data", "echo") is renderer
        assert engine.get_renderer("view", "echo") is None
        assert engine.has_renderer(RendererCategory.DATA, "echo")

    def test_register_requires_type(self, engine):
        class Untyped(DataRenderer):
            def render(self, definition, value, context):
                return RenderDescriptor(component="span")

        with pytest.raises(ValueError):
            engine.register_renderer(Untyped())

    def test_register_rejects_non_renderers(self, engine):
        with pytest.raises(TypeError):
            engine.register_renderer("echo")

    def test_register_renderers_bulk(self, engine):
        engine.register_renderers([EchoRenderer(), AsyncEchoRenderer()])
        assert engine.get_available_types("data") == {"echo", "async-echo"}

    def test_clear_one_category(self, engine):
        engine.register_renderers([EchoRenderer(), ContextRenderer()])
        engine.clear_renderers("data")
        assert engine.get_available_types("data") == set()
        assert engine.get_available_types("view") == {"ctx"}

    def test_clear_all(self, engine):
        engine.register_renderers([EchoRenderer(), ContextRenderer()])
        engine.clear_renderers()
        assert engine.get_renderer_stats().total == 0

    def test_stats(self, engine):
        engine.register_renderers([EchoRenderer(), MappingRenderer(), ContextRenderer()])
        stats = engine.get_renderer_stats()
        assert stats.categories["data"].count == 2
        assert stats.categories["data"].types == ["echo", "mapping"]
        assert stats.counts()["view"] == 1
        assert stats.total == 3

    def test_engines_do_not_share_registries(self, settings):
        first, second = RenderEngine(settings), RenderEngine(settings)
        first.register_renderer(EchoRenderer())
        assert not second.has_renderer("data", "echo")


class TestRendering:
    """Tests for the render entry points."""

    def test_render_data(self, engine):
        engine.register_renderer(EchoRenderer())
        descriptor = engine.render_data({"type": "echo"}, 42)
        assert descriptor == RenderDescriptor(component="span", children=["42"])

    def test_missing_renderer_raises(self, engine):
        with pytest.raises(RendererNotFound):
            engine.render_data({"type": "echo"}, 1)

    def test_renderer_exception_propagates_unchanged(self, engine):
        engine.register_renderer(ExplodingRenderer())
        with pytest.raises(ZeroDivisionError, match="boom"):
            engine.render_data({"type": "explode"}, 1)

    def test_mapping_result_is_validated(self, engine):
        engine.register_renderer(MappingRenderer())
        descriptor = engine.render_data({"type": "mapping"})
        assert isinstance(descriptor, RenderDescriptor)
        assert descriptor.text_content() == "from mapping"

    def test_context_forwarded_unmodified(self, engine):
        engine.register_renderer(ContextRenderer())
        context = RenderContext(theme="dark", custom="x")
        descriptor = engine.render_view({"type": "ctx"}, {"a": 1}, context)
        assert descriptor.props["context"] is context
        assert descriptor.props["data"] == {"a": 1}

    def test_render_action_passes_no_value(self, engine):
        engine.register_renderer(RecordingAction())
        descriptor = engine.render_action({"name": "save", "title": "Save"})
        assert descriptor.props["value"] is None
        assert descriptor.children == ["Save"]

    def test_sync_render_of_async_renderer_raises(self, engine):
        engine.register_renderer(AsyncEchoRenderer())
        with pytest.raises(TypeError, match="arender_data"):
            engine.render_data({"type": "async-echo"}, 1)

    @pytest.mark.asyncio
    async def test_arender_awaits_async_renderer(self, engine):
        engine.register_renderer(AsyncEchoRenderer())
        descriptor = await engine.arender_data({"type": "async-echo"}, "x")
        assert descriptor.children == ["x"]

    @pytest.mark.asyncio
    async def test_arender_missing_raises(self, engine):
        with pytest.raises(RendererNotFound):
            await engine.arender_view({"type": "nope"})

    @pytest.mark.asyncio
    async def test_render_many_preserves_order(self, engine):
        engine.register_renderers([EchoRenderer(), AsyncEchoRenderer()])
        items = [
            {"category": "data", "definition": {"type": "async-echo"}, "value": i}
            if i % 2 else
            {"category": "data", "definition": {"type": "echo"}, "value": i}
            for i in range(10)
        ]
        results = await engine.render_many(items)
        assert [d.children[0] for d in results] == [str(i) for i in range(10)]

    @pytest.mark.asyncio
    async def test_render_many_propagates_failure(self, engine):
        engine.register_renderer(EchoRenderer())
        with pytest.raises(RendererNotFound):
            await engine.render_many([
                {"category": "data", "definition": {"type": "echo"}, "value": 1},
                {"category": "data", "definition": {"type": "missing"}, "value": 2},
            ])

    @pytest.mark.asyncio
    async def test_lazy_renderer_through_engine(self, engine):
        async def factory():
            return EchoRenderer()

        engine.register_lazy("data", "echo", factory)
        descriptor = await engine.arender_data({"type": "echo"}, "lazy")
        assert descriptor.children == ["lazy"]


class TestContextAndDefaults:
    """Tests for context creation and the default engine."""

    def test_create_context_uses_settings_locale(self):
        engine = RenderEngine(RenderSettings(default_locale="de-DE"))
        assert engine.create_context().locale == "de-DE"
        assert engine.create_context(locale="fr").locale == "fr"

    def test_default_engine_is_constructed_once_and_empty(self):
        engine = get_default_engine()
        assert get_default_engine() is engine
        assert engine.get_renderer_stats().total == 0

    def test_reset_default_engine(self):
        engine = get_default_engine()
        reset_default_engine()
        assert get_default_engine() is not engine


class EditableRenderer(DataRenderer):
    type = "editable"

    def render(self, definition, value, context):
        return RenderDescriptor(component="span", children=[str(value)])

    def render_edit(self, definition, value, context):
        return RenderDescriptor(component="input", props={"name": definition.name, "value": value})


class TestEditMode:
    """Tests for the render_edit capability."""

    def test_registration_records_edit(self, engine):
        engine.register_renderer(EditableRenderer())
        engine.register_renderer(EchoRenderer())
        assert engine.get_registration("data", "editable").has_edit
        assert not engine.get_registration("data", "echo").has_edit

    def test_edit_mode_uses_render_edit(self, engine):
        engine.register_renderer(EditableRenderer())
        descriptor = engine.render_data({"type": "editable", "name": "qty"}, 3, RenderContext(mode="edit"))
        assert descriptor.component == "input"
        assert descriptor.props == {"name": "qty", "value": 3}

    def test_view_mode_uses_render(self, engine):
        engine.register_renderer(EditableRenderer())
        descriptor = engine.render_data({"type": "editable"}, 3, RenderContext(mode="view"))
        assert descriptor == RenderDescriptor(component="span", children=["3"])
        assert engine.render_data({"type": "editable"}, 3).component == "span"

    def test_edit_mode_without_render_edit_uses_render(self, engine):
        engine.register_renderer(EchoRenderer())
        descriptor = engine.render_data({"type": "echo"}, 3, RenderContext(mode="edit"))
        assert descriptor.component == "span"

    @pytest.mark.asyncio
    async def test_arender_edit_mode(self, engine):
        engine.register_renderer(EditableRenderer())
        descriptor = await engine.arender_data({"type": "editable"}, 3, RenderContext(mode="edit"))
        assert descriptor.component == "input"
