"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from schema_render.api.main import app


@pytest.fixture
def client():
    with TestClient(app) as client:
        yield client


class TestServiceEndpoints:
    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["service"] == "schema-render API"

    def test_health_counts(self, client):
        body = client.get("/health").json()
        assert body["status"] == "healthy"
        assert body["renderers_loaded"] == 19
        assert body["renderers_by_category"]["data"] == 6
        assert body["components_loaded"] > 0


class TestRendererRoutes:
    def test_list_renderers(self, client):
        body = client.get("/v1/renderers").json()
        assert body["categories"]["action"]["types"] == ["button", "dropdown", "icon", "link", "modal", "submit"]

    def test_category_types(self, client):
        body = client.get("/v1/renderers/view").json()
        assert body == {"category": "view", "count": 2, "types": ["detail", "list"]}

    def test_unknown_category(self, client):
        assert client.get("/v1/renderers/widgets").status_code == 404


class TestRenderRoutes:
    def test_render_descriptor(self, client):
        response = client.post("/v1/render/data", json={"definition": {"type": "number"}, "value": 1234.5})
        assert response.status_code == 200
        assert response.json() == {
            "component": "span",
            "props": {"class": "number-data", "title": "1,234.5"},
            "children": ["1,234.5"],
        }

    def test_render_uses_context_locale(self, client):
        response = client.post(
            "/v1/render/data",
            json={"definition": {"type": "number"}, "value": 1234.5, "context": {"locale": "de-DE"}},
        )
        assert response.json()["children"] == ["1.234,5"]

    def test_render_unknown_type(self, client):
        response = client.post("/v1/render/data", json={"definition": {"type": "hologram"}})
        assert response.status_code == 404
        assert "hologram" in response.json()["detail"]

    def test_render_unknown_category(self, client):
        response = client.post("/v1/render/widgets", json={"definition": {"type": "x"}})
        assert response.status_code == 404

    def test_render_invalid_definition(self, client):
        response = client.post("/v1/render/data", json={"definition": {"name": "no type"}})
        assert response.status_code == 422

    def test_render_html(self, client):
        response = client.post("/v1/render/data/html", json={"definition": {"type": "string"}, "value": "<b>"})
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert response.text == '<span class="string-data" title="&lt;b&gt;">&lt;b&gt;</span>'


class TestComponentRoutes:
    def test_list_components(self, client):
        body = client.get("/v1/components").json()
        assert "span" in body["components"]
        assert body["count"] == len(body["components"])
