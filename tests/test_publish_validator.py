"""Tests validation de publication — règles par type, chemins, messages, page entière."""
import copy
import logging

import pytest

from physio_cms.core.schemas import PageEnvelope
from physio_cms.registry import get_block_definition
from physio_cms.validation import (
    PublishBlockedError,
    publish_page,
    validate_block_for_publish,
    validate_page_for_publish,
)


# ── Helpers ───────────────────────────────────────────────────────────────

def page(*blocks, **extra):
    return {"blocks": list(blocks), **extra}


def block(block_type, props, block_id="b1"):
    return {"id": block_id, "type": block_type, "props": props}


def issues_of(*blocks, **extra):
    result = validate_page_for_publish(page(*blocks, **extra))
    return [(i.block_id, i.field_path, i.message) for i in result.issues]


def paths_of(*blocks, **extra):
    return [path for _, path, _ in issues_of(*blocks, **extra)]


# ── Page ──────────────────────────────────────────────────────────────────

def test_empty_page_ok():
    result = validate_page_for_publish(page())
    assert result.ok
    assert result.as_payload() == {"ok": True}


def test_blocks_missing():
    result = validate_page_for_publish({"title": "Startseite"})
    assert not result.ok
    issue = result.issues[0]
    assert (issue.block_id, issue.block_type) == ("", "unknown")
    assert issue.message == "Ungültige Seitenstruktur: blocks Array fehlt"


def test_blocks_not_a_list():
    assert not validate_page_for_publish({"blocks": "kaputt"}).ok


def test_page_not_a_dict():
    assert not validate_page_for_publish(None).ok


def test_invalid_block_entry_does_not_stop_others():
    result = validate_page_for_publish(page(
        {"type": "text", "props": {}},
        "kaputt",
        block("text", {"content": "kurz"}, "b3"),
    ))
    assert [(i.block_id, i.block_type) for i in result.issues] == [
        ("unknown", "text"), ("unknown", "unknown"), ("b3", "text"),
    ]
    assert result.issues[0].message == "Ungültiger Block: id oder type fehlt"


def test_props_not_a_dict():
    result = validate_page_for_publish(page(block("text", None)))
    assert result.issues[0].message == "Block props fehlen oder sind ungültig"
    assert result.issues[0].field_path == ""


def test_accepts_envelope():
    envelope = PageEnvelope.model_validate(page(block("text", {"content": "Genug Inhalt hier."})))
    assert validate_page_for_publish(envelope).ok


def test_payload_camel_case():
    payload = validate_page_for_publish(page(block("text", {"content": "kurz"}))).as_payload()
    assert payload["ok"] is False
    assert payload["issues"][0] == {
        "blockId": "b1",
        "blockType": "text",
        "fieldPath": "content",
        "message": "Inhalt muss mindestens 10 Zeichen lang sein",
    }


def test_issues_across_blocks_in_order():
    result = validate_page_for_publish(page(
        block("text", {"content": "kurz"}, "b1"),
        block("faq", {"items": []}, "b2"),
    ))
    assert [i.block_id for i in result.issues] == ["b1", "b2"]


def test_unexpected_error_becomes_issue(monkeypatch, caplog):
    from physio_cms.validation import publish

    def boom(*args, **kwargs):
        raise RuntimeError("kaputt")

    monkeypatch.setattr(publish, "_hero_issues", boom)
    with caplog.at_level(logging.ERROR, logger="physio_cms.validation.publish"):
        result = validate_page_for_publish(page(block("hero", {}), block("text", {"content": "x"}, "b2")))
    assert result.issues[0].message == "Unerwarteter Validierungsfehler: kaputt"
    assert result.issues[1].block_id == "b2"
    assert "b1" in caplog.text


def test_validation_deterministic():
    data = page(
        block("text", {"content": "kurz"}, "b1"),
        block("servicesGrid", {"cards": [_card(ctaHref="/x"), _card(id="c2", title="T")]}, "b2"),
        block("gallery", {"images": []}, "b3"),
    )
    first = validate_page_for_publish(data).as_payload()
    assert validate_page_for_publish(data).as_payload() == first


def test_block_check_on_malformed_block():
    issues = validate_block_for_publish({"props": {}})
    assert [(i.block_id, i.block_type) for i in issues] == [("unknown", "unknown")]
    assert validate_block_for_publish("kaputt")[0].message == "Ungültiger Block: id oder type fehlt"


# ── Defaults ──────────────────────────────────────────────────────────────

@pytest.mark.parametrize("block_type", [
    "hero", "text", "section", "servicesGrid", "faq", "team", "contactForm",
    "testimonials", "openingHours", "imageSlider", "imageText", "featureGrid", "cta", "testimonialSlider",
])
def test_defaults_publishable(block_type):
    props = copy.deepcopy(get_block_definition(block_type).defaults)
    assert validate_page_for_publish(page(block(block_type, props))).ok


def test_gallery_defaults_need_alt_texts():
    props = copy.deepcopy(get_block_definition("gallery").defaults)
    assert paths_of(block("gallery", props)) == ["images.0.alt", "images.1.alt", "images.2.alt"]


# ── Text / Section ────────────────────────────────────────────────────────

def test_text_content_min():
    assert issues_of(block("text", {"content": "kurz"})) == [
        ("b1", "content", "Inhalt muss mindestens 10 Zeichen lang sein"),
    ]


def test_text_content_not_trimmed():
    # longueur brute : les espaces comptent
    assert paths_of(block("text", {"content": "  abc     "})) == []


def test_text_content_missing():
    assert issues_of(block("text", {})) == [("b1", "content", "Pflichtfeld fehlt")]


def test_section_rules():
    assert paths_of(block("section", {"headline": "Hi", "content": "kurz"})) == ["headline", "content"]


# ── Collections ───────────────────────────────────────────────────────────

def _card(**overrides):
    return {"id": "c1", "icon": "X", "title": "Training", "text": "Gezieltes Training", **overrides}


def test_services_grid_ok():
    assert paths_of(block("servicesGrid", {"cards": [_card(), _card(id="c2", ctaText="Mehr", ctaHref="/x")]})) == []


def test_services_grid_empty():
    assert issues_of(block("servicesGrid", {"cards": []})) == [
        ("b1", "cards", "Mindestens eine Card erforderlich"),
    ]


def test_services_grid_card_paths():
    assert paths_of(block("servicesGrid", {"cards": [_card(), _card(title="T", text="kurz")]})) == [
        "cards.1.title", "cards.1.text",
    ]


@pytest.mark.parametrize("cta", [{"ctaText": "Mehr"}, {"ctaHref": "/x"}, {"ctaText": "", "ctaHref": "/x"}])
def test_services_grid_cta_pair(cta):
    assert issues_of(block("servicesGrid", {"cards": [_card(**cta)]})) == [
        ("b1", "cards.0.ctaText", "CTA Text und Link müssen beide gesetzt sein oder beide leer"),
    ]


def test_services_grid_cta_pair_checked_with_other_errors():
    assert paths_of(block("servicesGrid", {"cards": [_card(title="T", ctaText="Mehr")]})) == [
        "cards.0.title", "cards.0.ctaText",
    ]


def test_services_grid_href_without_text():
    assert issues_of(block("servicesGrid", {"cards": [_card(ctaHref="/x")]})) == [
        ("b1", "cards.0.ctaText", "CTA Text und Link müssen beide gesetzt sein oder beide leer"),
    ]


@pytest.mark.parametrize("fix", [{"ctaText": ""}, {"ctaHref": "/training"}])
def test_services_grid_cta_pair_resolved(fix):
    card = _card(ctaText="Mehr")
    assert paths_of(block("servicesGrid", {"cards": [card]})) == ["cards.0.ctaText"]
    card.update(fix)
    assert validate_page_for_publish(page(block("servicesGrid", {"cards": [card]}))).ok


def test_services_grid_cta_pair_skipped_for_malformed_card():
    card = _card(ctaText="Mehr")
    del card["title"]
    assert paths_of(block("servicesGrid", {"cards": [card]})) == ["cards.0.title"]


def test_services_grid_issues_grouped_per_card():
    cards = [_card(title="T", ctaText="Mehr"), _card(id="c2", text="kurz")]
    assert paths_of(block("servicesGrid", {"cards": cards})) == [
        "cards.0.title", "cards.0.ctaText", "cards.1.text",
    ]


def test_cards_not_a_list_collapses_to_collection():
    assert paths_of(block("servicesGrid", {"cards": "kaputt"})) == ["cards"]


def test_cards_missing():
    assert issues_of(block("servicesGrid", {})) == [("b1", "cards", "Pflichtfeld fehlt")]


def test_faq_rules():
    items = [{"id": "f1", "question": "Wie?", "answer": "Kurz"}]
    assert issues_of(block("faq", {"items": items})) == [
        ("b1", "items.0.answer", "Antwort muss mindestens 10 Zeichen lang sein"),
    ]


def test_team_rules():
    member = {"id": "m1", "name": "A", "role": "Physio", "imageUrl": "", "imageAlt": "Foto"}
    assert paths_of(block("team", {"members": [member]})) == ["members.0.name", "members.0.imageUrl"]


def test_team_empty():
    assert issues_of(block("team", {"members": []})) == [("b1", "members", "Mindestens ein Mitglied erforderlich")]


def test_testimonials_rating():
    items = [
        {"id": "t1", "quote": "Toll!", "name": "Jo", "rating": None},
        {"id": "t2", "quote": "Toll!", "name": "Jo", "rating": 6},
    ]
    assert issues_of(block("testimonials", {"items": items})) == [
        ("b1", "items.1.rating", "Wert darf höchstens 5 sein"),
    ]


def test_gallery_needs_three_images():
    images = [{"id": f"i{n}", "url": f"/bild-{n}.jpg", "alt": f"Bild {n}"} for n in range(3)]
    result = validate_page_for_publish(page(block("gallery", {"images": images[:2]})))
    assert [(i.field_path, i.message) for i in result.issues] == [
        ("images", "Mindestens 3 Bilder erforderlich"),
    ]
    assert validate_page_for_publish(page(block("gallery", {"images": images}))).as_payload() == {"ok": True}


def test_gallery_min_images_before_item_errors():
    images = [{"id": "i1", "url": "/a.jpg", "alt": ""}]
    assert issues_of(block("gallery", {"images": images})) == [
        ("b1", "images", "Mindestens 3 Bilder erforderlich"),
        ("b1", "images.0.alt", "Bild Alt-Text erforderlich"),
    ]


def test_opening_hours_rules():
    hours = [{"id": "h1", "label": "Mo", "value": "-"}]
    assert issues_of(block("openingHours", {"hours": hours})) == [
        ("b1", "hours.0.value", "Wert muss mindestens 2 Zeichen lang sein"),
    ]


def test_image_slider_rules():
    slides = [{"id": "s1", "url": "/a.jpg", "alt": ""}]
    assert issues_of(block("imageSlider", {"slides": slides})) == [
        ("b1", "slides.0.alt", "Bild Alt-Text erforderlich"),
    ]
    assert paths_of(block("imageSlider", {"slides": []})) == ["slides"]


@pytest.mark.parametrize("block_type", ["imageText", "featureGrid", "cta", "testimonialSlider"])
def test_types_without_rules(block_type):
    assert validate_page_for_publish(page(block(block_type, {}))).ok


# ── Hero ──────────────────────────────────────────────────────────────────

def test_hero_flat_fields():
    assert issues_of(block("hero", {"headline": "Hi"})) == [
        ("b1", "headline", "Headline (Physiotherapie) muss mindestens 3 Zeichen lang sein"),
    ]


def test_hero_brand_content_wins():
    props = {"headline": "Hi", "brandContent": {"physiotherapy": {"headline": "Gesund bleiben"}}}
    assert issues_of(block("hero", props)) == []


def test_hero_headline_trimmed():
    assert paths_of(block("hero", {"headline": "  ab   "})) == ["headline"]


def test_hero_cta_pair():
    assert issues_of(block("hero", {"headline": "Gesund", "ctaText": "Termin", "ctaHref": "   "})) == [
        ("b1", "ctaText", "CTA Text und Link (Physiotherapie) müssen beide gesetzt sein oder beide leer"),
    ]


def test_hero_page_brand_without_mood():
    props = {
        "brandContent": {
            "physiotherapy": {"headline": "Ihre Gesundheit in besten Händen"},
            "physio-konzept": {"headline": ""},
        },
    }
    result = validate_page_for_publish(page(block("hero", props), brand="physio-konzept"))
    assert [(i.field_path, i.message) for i in result.issues] == [
        ("headline", "Headline (Physio‑Konzept) muss mindestens 3 Zeichen lang sein"),
    ]


def test_hero_page_brand_overrides_mood():
    props = {
        "mood": "physiotherapy",
        "brandContent": {
            "physiotherapy": {"headline": "Gesund bleiben"},
            "physio-konzept": {"headline": "Go"},
        },
    }
    hero = block("hero", props)
    assert issues_of(hero, brand="physio-konzept") == [
        ("b1", "headline", "Headline (Physio‑Konzept) muss mindestens 3 Zeichen lang sein"),
    ]
    # le bloc d'entrée n'est pas modifié
    assert hero["props"]["mood"] == "physiotherapy"


def test_hero_invalid_mood_uses_default_brand(monkeypatch):
    from physio_cms.core.config import reload_settings
    monkeypatch.setenv("PHYSIO_CMS_DEFAULT_BRAND", "physio-konzept")
    reload_settings()
    messages = [m for _, _, m in issues_of(block("hero", {"mood": "yoga"}))]
    assert messages == ["Headline (Physio‑Konzept) muss mindestens 3 Zeichen lang sein"]


def test_hero_empty_brand_content_string_not_skipped():
    # brandContent.headline "" est un texte : pas de repli sur le champ plat
    props = {"headline": "Gesund bleiben", "brandContent": {"physiotherapy": {"headline": ""}}}
    assert paths_of(block("hero", props)) == ["headline"]


# ── Contact form ──────────────────────────────────────────────────────────

def _contact(**overrides):
    props = copy.deepcopy(get_block_definition("contactForm").defaults)
    props.update(overrides)
    return block("contactForm", props)


def test_contact_form_rules():
    assert paths_of(_contact(heading=" Hi ", submitLabel=" ", fields=[])) == ["heading", "submitLabel", "fields"]


def test_contact_form_consent_label():
    assert paths_of(_contact(requireConsent=True, consentLabel="  ")) == ["consentLabel"]
    assert paths_of(_contact(requireConsent=True, consentLabel="Ich stimme zu")) == []
    assert paths_of(_contact(requireConsent=False, consentLabel="")) == []


# ── publish_page ──────────────────────────────────────────────────────────

def test_publish_page_sets_status():
    published = publish_page(page(block("text", {"content": "Genug Inhalt hier."}), title="Start"))
    assert published.status == "published"
    assert published.model_extra["title"] == "Start"


def test_publish_page_blocked():
    with pytest.raises(PublishBlockedError) as exc:
        publish_page(page(block("text", {"content": "kurz"})))
    assert [i.field_path for i in exc.value.issues] == ["content"]
