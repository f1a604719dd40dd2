"""Tests configuration — lecture des variables d'environnement, fallback marque."""
import logging

from physio_cms.core.config import get_settings, reload_settings


def test_defaults():
    settings = get_settings()
    assert settings.default_brand == "physiotherapy"
    assert settings.locale == "de"
    assert settings.log_level == "INFO"


def test_env_override(monkeypatch):
    monkeypatch.setenv("PHYSIO_CMS_DEFAULT_BRAND", "physio-konzept")
    monkeypatch.setenv("PHYSIO_CMS_LOG_LEVEL", "debug")
    settings = reload_settings()
    assert settings.default_brand == "physio-konzept"
    assert settings.log_level == "DEBUG"


def test_unknown_brand_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("PHYSIO_CMS_DEFAULT_BRAND", "yoga")
    with caplog.at_level(logging.WARNING, logger="physio_cms.core.config"):
        settings = reload_settings()
    assert settings.default_brand == "physiotherapy"
    assert "PHYSIO_CMS_DEFAULT_BRAND" in caplog.text


def test_settings_cached():
    assert get_settings() is get_settings()
