"""Fixtures communes — environnement propre (settings + cache i18n) pour chaque test."""
import pytest

from physio_cms.core.config import reload_settings
from physio_cms.core.i18n import reload_cache


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("PHYSIO_CMS_DEFAULT_BRAND", "PHYSIO_CMS_LOCALE", "PHYSIO_CMS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    reload_settings()
    reload_cache()
    yield
    reload_settings()
    reload_cache()


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from physio_cms.router import create_app
    return TestClient(create_app())
