"""
Registry des blocs — type → schéma de props, defaults, métadonnées d'inspecteur.

Table statique, totale sur BlockType. Chaque définition expose :
  parse(raw)       → props validées (lève pydantic.ValidationError)
  safe_parse(raw)  → ParseResult (success, data, errors[{path, message}])
"""
from typing import Any, Dict, List, Optional, Sequence, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .blocks import (
    create_card_button,
    create_contact_form_field,
    create_contact_info_card,
    create_faq_item,
    create_feature_item,
    create_gallery_image,
    create_hero_action,
    create_hero_trust_item,
    create_image_slide,
    create_opening_hour,
    create_service_card,
    create_team_member,
    create_testimonial_item,
    create_testimonial_slider_item,
)
from .blocks import contact, cta, faq, features, hero, image_text, media, opening_hours, team, testimonials, text
from .blocks.base import PropsModel
from .blocks.panel import PANEL_DEFAULTS, PANEL_INSPECTOR_FIELDS, PanelProps
from .core.schemas import INSPECTOR_GROUP_ORDER, BlockType, EditableElement, InspectorField

# Ordre des groupes pour les blocs à panel intérieur riche (team, gallery)
PANEL_FIRST_GROUP_ORDER: Tuple[str, ...] = (
    "basics", "layout", "panel", "design", "elements", "content", "interactions",
)


# ── Résultat de parse ───────────────────────────────────────────────────────

class ParseIssue(BaseModel):
    path: str
    message: str


class ParseResult(BaseModel):
    success: bool
    data: Optional[Dict[str, Any]] = None
    errors: List[ParseIssue] = Field(default_factory=list)

    def summary(self) -> str:
        return "; ".join(f"{e.path or '<root>'}: {e.message}" for e in self.errors)


def error_path(loc: Sequence[Any]) -> str:
    """("cards", 0, "title") → "cards.0.title" """
    return ".".join(str(part) for part in loc)


def issues_from_error(exc: ValidationError) -> List[ParseIssue]:
    return [ParseIssue(path=error_path(err["loc"]), message=err["msg"]) for err in exc.errors()]


# ── Tri des champs d'inspecteur ─────────────────────────────────────────────

def sort_inspector_fields(
    fields: List[InspectorField], group_order: Optional[Sequence[str]] = None,
) -> List[InspectorField]:
    """
    Regroupe les champs par groupe dans l'ordre donné (défaut INSPECTOR_GROUP_ORDER).
    Sans groupe → "design". Groupe absent de l'ordre → champ non affiché.
    L'ordre de déclaration est conservé à l'intérieur d'un groupe.
    """
    order = list(group_order or INSPECTOR_GROUP_ORDER)
    grouped: Dict[str, List[InspectorField]] = {}
    for field in fields:
        grouped.setdefault(field.group or "design", []).append(field)
    return [field for group in order for field in grouped.get(group, [])]


# ── Définition d'un type de bloc ────────────────────────────────────────────

class BlockDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: BlockType
    label: str
    props_model: Type[PropsModel]
    defaults: Dict[str, Any]
    inspector_fields: List[InspectorField] = Field(default_factory=list)
    elements: List[EditableElement] = Field(default_factory=list)
    allow_inline_edit: bool = False
    enable_inner_panel: bool = False
    inspector_group_order: Optional[Tuple[str, ...]] = None

    def parse(self, raw: Any) -> Dict[str, Any]:
        """Valide + coerce des props brutes. Lève pydantic.ValidationError."""
        return self.props_model.model_validate(raw).dump()

    def safe_parse(self, raw: Any) -> ParseResult:
        try:
            return ParseResult(success=True, data=self.parse(raw))
        except ValidationError as exc:
            return ParseResult(success=False, errors=issues_from_error(exc))

    def sorted_inspector_fields(self) -> List[InspectorField]:
        return sort_inspector_fields(self.inspector_fields, self.inspector_group_order)

    def json_schema(self) -> Dict[str, Any]:
        return self.props_model.model_json_schema(by_alias=True)


def with_inner_panel(definition: BlockDefinition) -> BlockDefinition:
    """
    Injecte le preset panel : defaults panel (écrasés par ceux du type) +
    champs panel en tête de l'inspecteur. Le schéma hérite déjà de PanelProps.
    """
    if not definition.enable_inner_panel:
        return definition
    if not issubclass(definition.props_model, PanelProps):
        raise TypeError(f"{definition.type}: enable_inner_panel exige un schéma dérivé de PanelProps")
    return definition.model_copy(update={
        "defaults": {**PANEL_DEFAULTS, **definition.defaults},
        "inspector_fields": [*PANEL_INSPECTOR_FIELDS, *definition.inspector_fields],
    })


# ── Table des blocs ─────────────────────────────────────────────────────────

_DEFINITIONS: List[BlockDefinition] = [
    BlockDefinition(
        type="hero", label="Hero", props_model=hero.HeroProps, defaults=hero.HERO_DEFAULTS,
        inspector_fields=hero.HERO_INSPECTOR_FIELDS, elements=hero.HERO_ELEMENTS, allow_inline_edit=True,
    ),
    BlockDefinition(
        type="text", label="Text", props_model=text.TextProps, defaults=text.TEXT_DEFAULTS,
        inspector_fields=text.TEXT_INSPECTOR_FIELDS, elements=text.TEXT_ELEMENTS, allow_inline_edit=True,
    ),
    BlockDefinition(
        type="imageText", label="Bild + Text",
        props_model=image_text.ImageTextProps, defaults=image_text.IMAGE_TEXT_DEFAULTS,
        inspector_fields=image_text.IMAGE_TEXT_INSPECTOR_FIELDS, elements=image_text.IMAGE_TEXT_ELEMENTS,
        allow_inline_edit=True,
    ),
    BlockDefinition(
        type="featureGrid", label="Feature Grid",
        props_model=features.FeatureGridProps, defaults=features.FEATURE_GRID_DEFAULTS,
        inspector_fields=features.FEATURE_GRID_INSPECTOR_FIELDS, elements=features.FEATURE_GRID_ELEMENTS,
    ),
    BlockDefinition(
        type="cta", label="Call to Action", props_model=cta.CtaProps, defaults=cta.CTA_DEFAULTS,
        inspector_fields=cta.CTA_INSPECTOR_FIELDS, elements=cta.CTA_ELEMENTS, allow_inline_edit=True,
    ),
    BlockDefinition(
        type="section", label="Section", props_model=text.SectionProps, defaults=text.SECTION_DEFAULTS,
        inspector_fields=text.SECTION_INSPECTOR_FIELDS, elements=text.SECTION_ELEMENTS, allow_inline_edit=True,
    ),
    BlockDefinition(
        type="servicesGrid", label="Services Grid",
        props_model=features.ServicesGridProps, defaults=features.SERVICES_GRID_DEFAULTS,
        inspector_fields=features.SERVICES_GRID_INSPECTOR_FIELDS, elements=features.SERVICES_GRID_ELEMENTS,
        allow_inline_edit=True,
    ),
    BlockDefinition(
        type="faq", label="FAQ", props_model=faq.FaqProps, defaults=faq.FAQ_DEFAULTS,
        inspector_fields=faq.FAQ_INSPECTOR_FIELDS, elements=faq.FAQ_ELEMENTS, enable_inner_panel=True,
    ),
    BlockDefinition(
        type="team", label="Team", props_model=team.TeamProps, defaults=team.TEAM_DEFAULTS,
        inspector_fields=team.TEAM_INSPECTOR_FIELDS, elements=team.TEAM_ELEMENTS,
        allow_inline_edit=True, enable_inner_panel=True, inspector_group_order=PANEL_FIRST_GROUP_ORDER,
    ),
    BlockDefinition(
        type="contactForm", label="Kontaktformular",
        props_model=contact.ContactFormProps, defaults=contact.CONTACT_FORM_DEFAULTS,
        inspector_fields=contact.CONTACT_FORM_INSPECTOR_FIELDS, elements=contact.CONTACT_FORM_ELEMENTS,
        allow_inline_edit=True,
    ),
    BlockDefinition(
        type="testimonials", label="Testimonials",
        props_model=testimonials.TestimonialsProps, defaults=testimonials.TESTIMONIALS_DEFAULTS,
        inspector_fields=testimonials.TESTIMONIALS_INSPECTOR_FIELDS, elements=testimonials.TESTIMONIALS_ELEMENTS,
        allow_inline_edit=True,
    ),
    BlockDefinition(
        type="gallery", label="Galerie", props_model=media.GalleryProps, defaults=media.GALLERY_DEFAULTS,
        inspector_fields=media.GALLERY_INSPECTOR_FIELDS, elements=media.GALLERY_ELEMENTS,
        enable_inner_panel=True, inspector_group_order=PANEL_FIRST_GROUP_ORDER,
    ),
    BlockDefinition(
        type="openingHours", label="Öffnungszeiten",
        props_model=opening_hours.OpeningHoursProps, defaults=opening_hours.OPENING_HOURS_DEFAULTS,
        inspector_fields=opening_hours.OPENING_HOURS_INSPECTOR_FIELDS, allow_inline_edit=True,
    ),
    BlockDefinition(
        type="imageSlider", label="Bild-Slider",
        props_model=media.ImageSliderProps, defaults=media.IMAGE_SLIDER_DEFAULTS,
        inspector_fields=media.IMAGE_SLIDER_INSPECTOR_FIELDS, elements=media.IMAGE_SLIDER_ELEMENTS,
        allow_inline_edit=True, enable_inner_panel=True,
    ),
    BlockDefinition(
        type="testimonialSlider", label="Testimonial Slider",
        props_model=testimonials.TestimonialSliderProps, defaults=testimonials.TESTIMONIAL_SLIDER_DEFAULTS,
        inspector_fields=testimonials.TESTIMONIAL_SLIDER_INSPECTOR_FIELDS, allow_inline_edit=True,
    ),
]

BLOCK_REGISTRY: Dict[str, BlockDefinition] = {d.type: with_inner_panel(d) for d in _DEFINITIONS}


def get_block_definition(block_type: str) -> BlockDefinition:
    """Lève KeyError pour un type inconnu (les appelants ne passent que des BlockType)."""
    try:
        return BLOCK_REGISTRY[block_type]
    except KeyError:
        raise KeyError(f"Bloc inconnu : {block_type!r}. Registry : {list(BLOCK_REGISTRY)}") from None


def get_all_block_types() -> List[str]:
    return list(BLOCK_REGISTRY)


# Factories d'items répétables, par collection (éditeur + tests)
ITEM_FACTORIES = {
    ("servicesGrid", "cards"): create_service_card,
    ("featureGrid", "features"): create_feature_item,
    ("faq", "items"): create_faq_item,
    ("team", "members"): create_team_member,
    ("testimonials", "items"): create_testimonial_item,
    ("testimonialSlider", "items"): create_testimonial_slider_item,
    ("gallery", "images"): create_gallery_image,
    ("openingHours", "hours"): create_opening_hour,
    ("imageSlider", "slides"): create_image_slide,
}

__all__ = [
    "BLOCK_REGISTRY",
    "BlockDefinition",
    "ITEM_FACTORIES",
    "ParseIssue",
    "ParseResult",
    "get_all_block_types",
    "get_block_definition",
    "sort_inspector_fields",
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
