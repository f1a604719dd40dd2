"""Tests duplication — nouvel id de bloc, nouveaux ids d'items, source intacte."""
import copy

import pytest

from physio_cms.duplicate import ITEM_COLLECTIONS, duplicate_block
from physio_cms.registry import get_block_definition


def test_new_block_id_same_type():
    source = {"id": "b1", "type": "text", "props": {"content": "Hallo"}}
    dup = duplicate_block(source)
    assert dup.id != "b1"
    assert dup.type == "text"
    assert dup.props == {"content": "Hallo"}


@pytest.mark.parametrize("block_type,collection", list(ITEM_COLLECTIONS.items()))
def test_item_ids_regenerated(block_type, collection):
    props = copy.deepcopy(get_block_definition(block_type).defaults)
    dup = duplicate_block({"id": "b1", "type": block_type, "props": props})
    old_ids = {item["id"] for item in props[collection]}
    new_ids = [item["id"] for item in dup.props[collection]]
    assert len(new_ids) == len(old_ids)
    assert not old_ids & set(new_ids)


def test_source_untouched():
    props = copy.deepcopy(get_block_definition("faq").defaults)
    snapshot = copy.deepcopy(props)
    dup = duplicate_block({"id": "b1", "type": "faq", "props": props})
    dup.props["items"][0]["question"] = "Geändert?"
    assert props == snapshot


def test_item_content_copied():
    props = copy.deepcopy(get_block_definition("team").defaults)
    dup = duplicate_block({"id": "b1", "type": "team", "props": props})
    assert [m["name"] for m in dup.props["members"]] == [m["name"] for m in props["members"]]
    assert dup.props["section"] == props["section"]


def test_invalid_props_copied_as_is():
    dup = duplicate_block({"id": "b1", "type": "faq", "props": {"items": "kaputt"}})
    assert dup.props == {"items": "kaputt"}
