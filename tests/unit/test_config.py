"""Tests for settings."""

from schema_render.config import RenderSettings, get_settings, reset_settings


class TestSettings:
    def test_defaults(self):
        settings = get_settings()
        assert settings.default_locale == "en-US"
        assert settings.warn_on_override is False
        assert settings.log_level == "INFO"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("SCHEMA_RENDER_LOCALE", "fr-FR")
        monkeypatch.setenv("SCHEMA_RENDER_WARN_ON_OVERRIDE", "yes")
        monkeypatch.setenv("SCHEMA_RENDER_LOG_LEVEL", "debug")
        settings = RenderSettings.from_env()
        assert settings.default_locale == "fr-FR"
        assert settings.warn_on_override is True
        assert settings.log_level == "DEBUG"

    def test_cached_until_reset(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("SCHEMA_RENDER_LOCALE", "de-DE")
        assert get_settings() is first
        reset_settings()
        assert get_settings().default_locale == "de-DE"
