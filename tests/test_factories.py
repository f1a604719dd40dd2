"""Tests factories — chaque item créé est valide et a un id neuf."""
import pytest

from physio_cms.registry import (
    ITEM_FACTORIES,
    create_card_button,
    create_contact_form_field,
    create_contact_info_card,
    create_hero_action,
    create_hero_trust_item,
    get_block_definition,
)


@pytest.mark.parametrize("block_type,collection", list(ITEM_FACTORIES))
def test_new_item_parses_inside_defaults(block_type, collection):
    definition = get_block_definition(block_type)
    props = dict(definition.defaults)
    props[collection] = [*props[collection], ITEM_FACTORIES[(block_type, collection)]()]
    result = definition.safe_parse(props)
    assert result.success, result.summary()


@pytest.mark.parametrize("factory", list(ITEM_FACTORIES.values()))
def test_fresh_ids(factory):
    assert factory()["id"] != factory()["id"]


@pytest.mark.parametrize("field_type,required", [
    ("name", True), ("email", True), ("phone", False), ("subject", False), ("message", True),
])
def test_contact_form_field_presets(field_type, required):
    field = create_contact_form_field(field_type)
    assert field["type"] == field_type
    assert field["required"] is required
    assert field["label"]


def test_contact_form_field_email():
    field = create_contact_form_field("email")
    assert field["label"] == "E-Mail"
    assert field["placeholder"] == "ihre@email.de"


def test_contact_info_card():
    card = create_contact_info_card()
    assert card["icon"] == "mail"
    assert card["title"] == "Neue Info"


def test_hero_helpers():
    assert create_hero_trust_item() == "Neuer Vorteil"
    action = create_hero_action()
    assert action["variant"] in ("primary", "secondary")
    assert action["id"] != create_hero_action()["id"]


def test_card_button():
    button = create_card_button()
    assert button["label"] == "New Button"
    assert button["iconPosition"] == "right"
