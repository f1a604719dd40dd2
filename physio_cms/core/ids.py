"""
Identifiants des éléments répétables (cards, items, images…).

- uuid()               → nouvel élément créé par l'éditeur (factories, duplication)
- default_item_id()    → contenu par défaut du registry (déterministe : "card-0")
- repair_id()          → réparation d'un doublon par le normalizer
"""
import random
import string
import time
import uuid as _uuid

_SUFFIX_ALPHABET = string.digits + string.ascii_lowercase


def uuid() -> str:
    return str(_uuid.uuid4())


def default_item_id(prefix: str, index: int) -> str:
    return f"{prefix}-{index}"


def repair_id(prefix: str, index: int) -> str:
    """{prefix}-{index}-{timestamp ms}-{suffixe base36 sur 9 caractères}"""
    suffix = "".join(random.choices(_SUFFIX_ALPHABET, k=9))
    return f"{prefix}-{index}-{int(time.time() * 1000)}-{suffix}"
