"""
Configuration — variables d'environnement lues à la demande (cache + reload pour les tests).

PHYSIO_CMS_DEFAULT_BRAND  marque utilisée par la validation hero sans marque de page (physiotherapy)
PHYSIO_CMS_LOCALE         langue du catalogue de messages (de)
PHYSIO_CMS_LOG_LEVEL      niveau du logger physio_cms dans create_app() (INFO)
"""
import logging
import os
from functools import lru_cache

from pydantic import BaseModel

from .schemas import BRAND_KEYS, DEFAULT_BRAND, BrandKey

log = logging.getLogger(__name__)


class Settings(BaseModel):
    default_brand: BrandKey = DEFAULT_BRAND
    locale: str = "de"
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    brand = os.getenv("PHYSIO_CMS_DEFAULT_BRAND", DEFAULT_BRAND)
    if brand not in BRAND_KEYS:
        log.warning("PHYSIO_CMS_DEFAULT_BRAND=%r inconnue, fallback sur %s", brand, DEFAULT_BRAND)
        brand = DEFAULT_BRAND
    return Settings(
        default_brand=brand,
        locale=os.getenv("PHYSIO_CMS_LOCALE", "de") or "de",
        log_level=os.getenv("PHYSIO_CMS_LOG_LEVEL", "INFO").upper(),
    )


def reload_settings() -> Settings:
    """Relit l'environnement (utile en test après monkeypatch.setenv)."""
    get_settings.cache_clear()
    return get_settings()
