"""Tests normalizer — fusion avec les defaults, fallback, unicité des ids, section conservée."""
import logging

import pytest

from physio_cms.core.schemas import Block
from physio_cms.normalize import normalize_block, normalize_blocks
from physio_cms.registry import get_all_block_types, get_block_definition


def _cards(*ids):
    return [{"id": i, "icon": "X", "title": f"Titel {i}", "text": "Ein Text"} for i in ids]


# ── Forme garantie ───────────────────────────────────────────────────────────

@pytest.mark.parametrize("block_type", get_all_block_types())
def test_output_always_parses(block_type):
    out = normalize_block({"id": "b1", "type": block_type, "props": {"garbage": 1}})
    assert get_block_definition(block_type).safe_parse(out.props).success


@pytest.mark.parametrize("props", [None, "texte", 42, [], {"content": 5}])
def test_invalid_props_fall_back_to_defaults(props):
    out = normalize_block({"id": "b1", "type": "text", "props": props})
    assert out.props == get_block_definition("text").defaults


def test_id_and_type_kept():
    out = normalize_block(Block(id="b42", type="faq", props={}))
    assert (out.id, out.type) == ("b42", "faq")


def test_valid_props_merged_over_defaults():
    out = normalize_block({"id": "b1", "type": "text", "props": {"content": "Hallo Welt"}})
    assert out.props["content"] == "Hallo Welt"
    assert out.props["alignment"] == "left"


def test_lists_replaced_not_merged():
    out = normalize_block({"id": "b1", "type": "servicesGrid", "props": {"cards": _cards("a")}})
    assert [c["id"] for c in out.props["cards"]] == ["a"]


def test_unknown_keys_dropped():
    out = normalize_block({"id": "b1", "type": "text", "props": {"content": "Hallo", "legacy": True}})
    assert "legacy" not in out.props


def test_idempotent():
    once = normalize_block({"id": "b1", "type": "servicesGrid", "props": {"cards": _cards("a", "a", "b")}})
    twice = normalize_block(once)
    assert twice.props == once.props


def test_defaults_not_mutated():
    before = get_block_definition("gallery").defaults["images"][0]["id"]
    normalize_block({"id": "b1", "type": "gallery", "props": None})
    assert get_block_definition("gallery").defaults["images"][0]["id"] == before


def test_input_not_mutated():
    props = {"cards": _cards("a", "a")}
    normalize_block({"id": "b1", "type": "servicesGrid", "props": props})
    assert [c["id"] for c in props["cards"]] == ["a", "a"]


# ── Fallback ─────────────────────────────────────────────────────────────────

def test_fallback_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="physio_cms.normalize"):
        normalize_block({"id": "b7", "type": "section", "props": {"headline": 3}})
    assert "Block b7 (section) validation failed, using defaults" in caplog.text


def test_fallback_regenerates_item_ids():
    defaults_ids = [c["id"] for c in get_block_definition("servicesGrid").defaults["cards"]]
    out = normalize_block({"id": "b1", "type": "servicesGrid", "props": {"cards": []}})
    ids = [c["id"] for c in out.props["cards"]]
    assert len(ids) == len(defaults_ids)
    assert len(set(ids)) == len(ids)
    assert not set(ids) & set(defaults_ids)
    assert ids[0].startswith("card-0-")


# ── Unicité des ids ──────────────────────────────────────────────────────────

def test_duplicate_ids_repaired():
    out = normalize_block({"id": "b1", "type": "servicesGrid", "props": {"cards": _cards("a", "b", "a")}})
    ids = [c["id"] for c in out.props["cards"]]
    assert ids[:2] == ["a", "b"]
    assert ids[2].startswith("card-2-")


@pytest.mark.parametrize("block_type,collection,prefix,item", [
    ("testimonials", "items", "testimonial", {"id": "x", "quote": "Super", "name": "Jo"}),
    ("gallery", "images", "image", {"id": "x", "url": "/a.jpg", "alt": ""}),
    ("openingHours", "hours", "hours", {"id": "x", "label": "Mo", "value": "8-18"}),
    ("imageSlider", "slides", "slide", {"id": "x", "url": "/a.jpg", "alt": "A"}),
])
def test_duplicate_ids_repaired_per_type(block_type, collection, prefix, item):
    out = normalize_block({"id": "b1", "type": block_type, "props": {collection: [item, item, item]}})
    ids = [i["id"] for i in out.props[collection]]
    assert ids[0] == "x"
    assert len(set(ids)) == 3
    assert ids[1].startswith(f"{prefix}-1-")


# ── Section ──────────────────────────────────────────────────────────────────

def test_section_preserved_on_success():
    section = {"layout": {"width": "full"}, "background": {"type": "color", "color": "#fff"}}
    out = normalize_block({"id": "b1", "type": "text", "props": {"content": "Hallo", "section": section}})
    assert out.props["section"] == section


def test_section_preserved_on_fallback():
    section = {"layout": {"width": "full"}}
    out = normalize_block({"id": "b1", "type": "text", "props": {"content": 1, "section": section}})
    assert out.props["section"] == section
    assert out.props["content"] == get_block_definition("text").defaults["content"]


def test_non_dict_section_ignored():
    out = normalize_block({"id": "b1", "type": "text", "props": {"content": "Hallo", "section": "x"}})
    assert "section" not in out.props


# ── Tableau ──────────────────────────────────────────────────────────────────

def test_normalize_blocks_keeps_order():
    blocks = [
        {"id": "b1", "type": "text", "props": {}},
        {"id": "b2", "type": "faq", "props": {}},
        {"id": "b3", "type": "hero", "props": {}},
    ]
    assert [b.id for b in normalize_blocks(blocks)] == ["b1", "b2", "b3"]
