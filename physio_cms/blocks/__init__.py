"""Blocs CMS — un module par famille de blocs (props, defaults, factories, inspecteur)."""
from .base import PropsModel
from .contact import create_contact_form_field, create_contact_info_card
from .faq import create_faq_item
from .features import create_card_button, create_feature_item, create_service_card
from .hero import create_hero_action, create_hero_trust_item
from .media import create_gallery_image, create_image_slide
from .opening_hours import create_opening_hour
from .panel import PANEL_DEFAULTS, PANEL_INSPECTOR_FIELDS, PanelProps
from .team import create_team_member
from .testimonials import create_testimonial_item, create_testimonial_slider_item

__all__ = [
    "PropsModel",
    "PanelProps",
    "PANEL_DEFAULTS",
    "PANEL_INSPECTOR_FIELDS",
    "create_card_button",
    "create_contact_form_field",
    "create_contact_info_card",
    "create_faq_item",
    "create_feature_item",
    "create_gallery_image",
    "create_hero_action",
    "create_hero_trust_item",
    "create_image_slide",
    "create_opening_hour",
    "create_service_card",
    "create_team_member",
    "create_testimonial_item",
    "create_testimonial_slider_item",
]
