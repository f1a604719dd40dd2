"""Tests i18n — catalogue de, placeholders, libellés de marque."""
from physio_cms.core.i18n import brand_label, i18n_resolve, message, resolve, resolve_placeholders


# ── i18n_resolve ─────────────────────────────────────────────────────────────

def test_passthrough_direct_text():
    assert i18n_resolve("Direkter Text") == "Direkter Text"


def test_passthrough_empty():
    assert i18n_resolve("") == ""


def test_resolve_existing_key():
    assert i18n_resolve("@publish.errors.generic") == "Validierungsfehler"


def test_missing_key_returns_placeholder():
    assert i18n_resolve("@publish.inexistant.cle") == "[missing:publish.inexistant.cle]"


def test_namespace_is_not_a_message():
    assert i18n_resolve("@publish.faq").startswith("[missing:")


def test_unknown_lang_returns_missing():
    assert i18n_resolve("@publish.errors.generic", lang="zz").startswith("[missing:")


def test_locale_from_settings(monkeypatch):
    from physio_cms.core.config import reload_settings
    monkeypatch.setenv("PHYSIO_CMS_LOCALE", "zz")
    reload_settings()
    assert i18n_resolve("@publish.errors.generic").startswith("[missing:")


# ── Placeholders ─────────────────────────────────────────────────────────────

def test_placeholder_missing_left_intact():
    assert resolve_placeholders("Mindestens {min} {unit}", {"min": 3}) == "Mindestens 3 {unit}"


def test_placeholder_no_context():
    assert resolve_placeholders("Mindestens {min}", None) == "Mindestens {min}"


def test_resolve_pipeline():
    text = resolve("@publish.hero.headline_min", context={"brand": "Physiotherapie", "min": 3})
    assert text == "Headline (Physiotherapie) muss mindestens 3 Zeichen lang sein"


def test_message_shortcut():
    assert message("publish.gallery.images_min", min=3) == "Mindestens 3 Bilder erforderlich"


# ── Marques ──────────────────────────────────────────────────────────────────

def test_brand_labels():
    assert brand_label("physiotherapy") == "Physiotherapie"
    # trait d'union insécable U+2011
    assert brand_label("physio-konzept") == "Physio‑Konzept"
