"""
Messages utilisateur (validation de publication), catalogue JSON par langue.

  message("publish.hero.headline_min", brand="Physiotherapie", min=3)
    → "@publish.hero.headline_min" → physio_cms/i18n/{locale}.json → {brand}, {min} remplacés

Clé absente → "[missing:clé]" (jamais d'exception).
"""
import json
import logging
import re
from pathlib import Path
from typing import Optional

from .config import get_settings

log = logging.getLogger(__name__)

_I18N_CACHE: dict = {}
_I18N_DIR = Path(__file__).parent.parent / "i18n"


def _load_lang(lang: str) -> dict:
    """Catalogue i18n/{lang}.json, chargé une fois. Langue inconnue → catalogue vide."""
    catalog = _I18N_CACHE.get(lang)
    if catalog is None:
        path = _I18N_DIR / f"{lang}.json"
        if path.exists():
            catalog = json.loads(path.read_text(encoding="utf-8"))
        else:
            log.warning("Catalogue i18n absent pour la langue %r (%s)", lang, path)
            catalog = {}
        _I18N_CACHE[lang] = catalog
    return catalog


_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def _lookup(catalog: dict, key: str) -> Optional[str]:
    node: object = catalog
    for part in key.split("."):
        if not isinstance(node, dict) or part not in node:
            return None
        node = node[part]
    # un namespace n'est pas un message
    return None if isinstance(node, dict) else str(node)


def i18n_resolve(value: str, lang: Optional[str] = None) -> str:
    """Texte d'une référence "@a.b.c" dans le catalogue de la langue ; un texte sans "@" passe tel quel."""
    if not value or not value.startswith("@"):
        return value
    key = value[1:]
    text = _lookup(_load_lang(lang or get_settings().locale), key)
    return f"[missing:{key}]" if text is None else text


def resolve_placeholders(text: str, context: Optional[dict] = None) -> str:
    """{nom} → context[nom] ; un nom absent du contexte reste visible dans le texte."""
    if not context or not text:
        return text
    return _PLACEHOLDER.sub(lambda m: str(context.get(m.group(1), m.group(0))), text)


def resolve(value: str, lang: Optional[str] = None, context: Optional[dict] = None) -> str:
    return resolve_placeholders(i18n_resolve(value, lang), context)


def message(key: str, **context) -> str:
    """message("publish.gallery.images_min", min=3) → "Mindestens 3 Bilder erforderlich"."""
    return resolve(f"@{key}", context=context)


def brand_label(brand: str) -> str:
    """Libellé affiché d'une marque ("physio-konzept" → "Physio‑Konzept")."""
    key = "physio-konzept" if brand == "physio-konzept" else "physiotherapy"
    return message(f"brands.{key}")


def reload_cache():
    """Vide le cache des catalogues (tests, changement de locale)."""
    _I18N_CACHE.clear()
