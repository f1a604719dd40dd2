"""
Normalizer — réconcilie un bloc brut (DB / édition en cours) avec son schéma.

    raw props ──safe_parse──► ok   → defaults ⊕ props parsées (listes remplacées, jamais fusionnées)
                          └─► échec → defaults (ids d'items régénérés), id/type du bloc conservés

`props.section` (layout/fond, géré par le système de sections) est mis de côté
avant validation puis ré-attaché tel quel.
"""
import copy
import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from .core.ids import repair_id
from .core.schemas import Block
from .registry import get_block_definition

log = logging.getLogger(__name__)

# type → (collection, préfixe des ids réparés)
DEDUP_COLLECTIONS = {
    "servicesGrid": ("cards", "card"),
    "testimonials": ("items", "testimonial"),
    "gallery": ("images", "image"),
    "openingHours": ("hours", "hours"),
    "imageSlider": ("slides", "slide"),
}


def _dedupe_item_ids(block_type: str, props: Dict[str, Any], regenerate_all: bool = False) -> None:
    """
    Rétablit l'unicité des ids dans la collection du type (en place).
    regenerate_all=True → tous les items reçoivent un nouvel id (defaults partagés).
    """
    entry = DEDUP_COLLECTIONS.get(block_type)
    if entry is None:
        return
    key, prefix = entry
    items = props.get(key)
    if not isinstance(items, list):
        return

    seen = set()
    repaired = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            repaired.append(item)
            continue
        item_id = item.get("id")
        if regenerate_all or item_id in seen:
            new_id = repair_id(prefix, index)
            log.debug("%s : id %r de %s.%d remplacé par %s", block_type, item_id, key, index, new_id)
            item = {**item, "id": new_id}
        seen.add(item["id"])
        repaired.append(item)
    props[key] = repaired


def normalize_block(block: Union[Block, Dict[str, Any]]) -> Block:
    """
    Fonction totale : ne lève jamais pour des props invalides.
    Le bloc retourné garde toujours l'id et le type d'entrée.
    """
    if not isinstance(block, Block):
        block = Block.model_validate(block)

    definition = get_block_definition(block.type)
    raw_props = block.props
    section: Optional[Any] = None
    if isinstance(raw_props, dict):
        section = raw_props.get("section")
        raw_props = {k: v for k, v in raw_props.items() if k != "section"}

    result = definition.safe_parse(raw_props)

    if result.success:
        props = copy.deepcopy(definition.defaults)
        props.update(result.data)
        _dedupe_item_ids(block.type, props)
    else:
        log.warning(
            "Block %s (%s) validation failed, using defaults: %s", block.id, block.type, result.summary(),
        )
        props = copy.deepcopy(definition.defaults)
        _dedupe_item_ids(block.type, props, regenerate_all=True)

    if isinstance(section, dict):
        props["section"] = section

    return Block(id=block.id, type=block.type, props=props)


def normalize_blocks(blocks: Iterable[Union[Block, Dict[str, Any]]]) -> List[Block]:
    """Version tableau — ordre conservé."""
    return [normalize_block(block) for block in blocks]
