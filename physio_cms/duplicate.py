"""Duplication d'un bloc — copie profonde, nouvel id de bloc + nouveaux ids d'items."""
import copy
from typing import Any, Dict, Union

from .core.ids import uuid
from .core.schemas import Block

# type → collection d'items portant un id
ITEM_COLLECTIONS = {
    "servicesGrid": "cards",
    "featureGrid": "features",
    "faq": "items",
    "team": "members",
    "testimonials": "items",
    "testimonialSlider": "items",
    "gallery": "images",
    "openingHours": "hours",
    "imageSlider": "slides",
    "contactForm": "fields",
}


def duplicate_block(block: Union[Block, Dict[str, Any]]) -> Block:
    """Le bloc source n'est jamais modifié."""
    if not isinstance(block, Block):
        block = Block.model_validate(block)

    props = copy.deepcopy(block.props)
    key = ITEM_COLLECTIONS.get(block.type)
    if key and isinstance(props, dict) and isinstance(props.get(key), list):
        props[key] = [
            {**item, "id": uuid()} if isinstance(item, dict) else item
            for item in props[key]
        ]
    return Block(id=uuid(), type=block.type, props=props)
