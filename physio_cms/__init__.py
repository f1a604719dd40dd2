"""
physio_cms — pipeline de blocs CMS pour sites de cabinets de physiothérapie.

  registry   type de bloc → schéma de props, defaults, métadonnées d'inspecteur
  normalize  bloc brut → bloc à la forme garantie (fallback sur les defaults)
  duplicate  copie d'un bloc avec nouveaux ids
  validation règles strictes de publication, erreurs collectées par champ
"""
from .duplicate import duplicate_block
from .normalize import normalize_block, normalize_blocks
from .registry import BLOCK_REGISTRY, get_all_block_types, get_block_definition
from .validation import PublishBlockedError, publish_page, validate_page_for_publish

__version__ = "1.0.0"

__all__ = [
    "BLOCK_REGISTRY",
    "PublishBlockedError",
    "duplicate_block",
    "get_all_block_types",
    "get_block_definition",
    "normalize_block",
    "normalize_blocks",
    "publish_page",
    "validate_page_for_publish",
]
