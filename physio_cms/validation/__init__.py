"""Validation de publication — règles strictes appliquées au moment de publier une page."""
from .publish import (
    PUBLISH_RULES,
    PublishBlockedError,
    publish_page,
    validate_block_for_publish,
    validate_page_for_publish,
)

__all__ = [
    "PUBLISH_RULES",
    "PublishBlockedError",
    "publish_page",
    "validate_block_for_publish",
    "validate_page_for_publish",
]
