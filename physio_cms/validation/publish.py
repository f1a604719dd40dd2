"""
Validation de publication — règles strictes, erreurs collectées (jamais levées).

Tier édition (registry) : un champ vide reste valide pendant la saisie.
Tier publication (ici)  : longueurs minimales, paires CTA, nombre d'items.

validate_page_for_publish(page) → PublishValidationResult
    ok=True                        → publication autorisée
    ok=False + issues[blockId, blockType, fieldPath, message]
publish_page(page) → copie "published" ou PublishBlockedError
"""
import logging
from typing import Annotated, Any, Callable, Dict, List, Optional, Tuple, Type, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from ..core.config import get_settings
from ..core.i18n import brand_label, message
from ..core.schemas import BRAND_KEYS, PageEnvelope, PublishIssue, PublishValidationResult
from ..registry import error_path

log = logging.getLogger(__name__)

PUBLISH_RULE = "publish_rule"


def _rule_error(key: str, **context) -> PydanticCustomError:
    return PydanticCustomError(PUBLISH_RULE, "{message}", {"message": message(key, **context)})


def min_chars(n: int, key: str) -> AfterValidator:
    """Longueur minimale ; le message catalogue est résolu au moment de la validation."""
    def check(value: str) -> str:
        if len(value) < n:
            raise _rule_error(key, min=n)
        return value
    return AfterValidator(check)


def required(key: str) -> AfterValidator:
    return min_chars(1, key)


class PublishModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


# ── Schémas de publication ──────────────────────────────────────────────────

class TextPublish(PublishModel):
    content: Annotated[str, min_chars(10, "publish.text.content_min")]


class SectionPublish(PublishModel):
    headline: Annotated[str, min_chars(3, "publish.section.headline_min")]
    content: Annotated[str, min_chars(10, "publish.section.content_min")]


class ServiceCardPublish(PublishModel):
    id: str
    title: Annotated[str, min_chars(2, "publish.services_grid.title_min")]
    text: Annotated[str, min_chars(5, "publish.services_grid.text_min")]
    cta_text: Optional[str] = None
    cta_href: Optional[str] = None


def service_card_cta_pair(card: Dict[str, Any]) -> Optional[Tuple[str, str]]:
    """Texte et lien du CTA : tous les deux ou aucun. → (champ, message) ou None."""
    if bool(card.get("ctaText")) != bool(card.get("ctaHref")):
        return "ctaText", message("publish.services_grid.cta_pair")
    return None


class ServicesGridPublish(PublishModel):
    cards: List[ServiceCardPublish]


class FaqItemPublish(PublishModel):
    id: str
    question: Annotated[str, min_chars(3, "publish.faq.question_min")]
    answer: Annotated[str, min_chars(10, "publish.faq.answer_min")]


class FaqPublish(PublishModel):
    items: List[FaqItemPublish]


class TeamMemberPublish(PublishModel):
    id: str
    name: Annotated[str, min_chars(2, "publish.team.name_min")]
    role: Annotated[str, min_chars(2, "publish.team.role_min")]
    image_url: Annotated[str, required("publish.team.image_url")]
    image_alt: Annotated[str, required("publish.team.image_alt")]


class TeamPublish(PublishModel):
    members: List[TeamMemberPublish]


class TestimonialPublish(PublishModel):
    id: str
    quote: Annotated[str, min_chars(3, "publish.testimonials.quote_min")]
    name: Annotated[str, min_chars(2, "publish.testimonials.name_min")]
    role: Optional[str] = None
    rating: Optional[Annotated[int, Field(ge=1, le=5)]] = None


class TestimonialsPublish(PublishModel):
    items: List[TestimonialPublish]


class GalleryImagePublish(PublishModel):
    id: str
    url: Annotated[str, required("publish.gallery.url")]
    alt: Annotated[str, required("publish.gallery.alt")]
    caption: Optional[str] = None


class GalleryPublish(PublishModel):
    images: List[GalleryImagePublish]


class OpeningHourPublish(PublishModel):
    id: str
    label: Annotated[str, min_chars(2, "publish.opening_hours.label_min")]
    value: Annotated[str, min_chars(2, "publish.opening_hours.value_min")]


class OpeningHoursPublish(PublishModel):
    hours: List[OpeningHourPublish]


class ImageSlidePublish(PublishModel):
    id: str
    url: Annotated[str, required("publish.image_slider.url")]
    alt: Annotated[str, required("publish.image_slider.alt")]
    title: Optional[str] = None
    text: Optional[str] = None


class ImageSliderPublish(PublishModel):
    slides: List[ImageSlidePublish]


class PublishRule(BaseModel):
    """Schéma + collection (chemin par défaut, cardinalité minimale)."""
    model_config = ConfigDict(frozen=True)

    schema_model: Type[PublishModel]
    field: str
    collection: bool = False
    min_items: int = 0
    min_items_key: Optional[str] = None
    # contrôle croisé par item (dict brut) → (champ, message) ou None
    item_check: Optional[Callable[[Dict[str, Any]], Optional[Tuple[str, str]]]] = None


PUBLISH_RULES: Dict[str, PublishRule] = {
    "text": PublishRule(schema_model=TextPublish, field="content"),
    "section": PublishRule(schema_model=SectionPublish, field="headline"),
    "servicesGrid": PublishRule(
        schema_model=ServicesGridPublish, field="cards", collection=True,
        min_items=1, min_items_key="publish.services_grid.cards_min",
        item_check=service_card_cta_pair,
    ),
    "faq": PublishRule(
        schema_model=FaqPublish, field="items", collection=True,
        min_items=1, min_items_key="publish.faq.items_min",
    ),
    "team": PublishRule(
        schema_model=TeamPublish, field="members", collection=True,
        min_items=1, min_items_key="publish.team.members_min",
    ),
    "testimonials": PublishRule(
        schema_model=TestimonialsPublish, field="items", collection=True,
        min_items=1, min_items_key="publish.testimonials.items_min",
    ),
    "gallery": PublishRule(
        schema_model=GalleryPublish, field="images", collection=True,
        min_items=3, min_items_key="publish.gallery.images_min",
    ),
    "openingHours": PublishRule(
        schema_model=OpeningHoursPublish, field="hours", collection=True,
        min_items=1, min_items_key="publish.opening_hours.hours_min",
    ),
    "imageSlider": PublishRule(
        schema_model=ImageSliderPublish, field="slides", collection=True,
        min_items=1, min_items_key="publish.image_slider.slides_min",
    ),
}
# imageText, featureGrid, cta, testimonialSlider : pas de règle de publication pour l'instant


class PublishBlockedError(Exception):
    """Publication refusée : la page a des problèmes bloquants."""

    def __init__(self, issues: List[PublishIssue]):
        self.issues = issues
        super().__init__(f"Publication bloquée : {len(issues)} problème(s)")


# ── Helpers ─────────────────────────────────────────────────────────────────

def _first_str(*values: Any) -> str:
    """Premier texte trouvé (un texte vide compte), sinon ""."""
    for value in values:
        if isinstance(value, str):
            return value
    return ""


def _error_message(err: Dict[str, Any]) -> str:
    if err["type"] == PUBLISH_RULE:
        return err["msg"]
    text = message(f"publish.errors.{err['type']}", **(err.get("ctx") or {}))
    if text.startswith("[missing:"):
        return message("publish.errors.generic")
    return text


def _issue(block_id: Any, block_type: Any, field_path: str, text: str) -> PublishIssue:
    return PublishIssue(block_id=str(block_id), block_type=str(block_type), field_path=field_path, message=text)


# ── Règles par type ─────────────────────────────────────────────────────────

def _schema_issues(block_id: str, block_type: str, props: Dict[str, Any], rule: PublishRule) -> List[PublishIssue]:
    issues: List[PublishIssue] = []

    # cardinalité d'abord, indépendamment de la validité des items
    items = props.get(rule.field)
    if rule.collection and isinstance(items, list) and len(items) < rule.min_items:
        issues.append(_issue(block_id, block_type, rule.field, message(rule.min_items_key, min=rule.min_items)))

    try:
        rule.schema_model.model_validate(props)
        errors = []
    except ValidationError as exc:
        errors = exc.errors()

    # (index d'item, problème) : -1 hors item ; tri stable → problèmes groupés par item
    found: List[Tuple[int, PublishIssue]] = []
    broken = set()
    for err in errors:
        loc = [to_camel(p) if isinstance(p, str) and "_" in p else p for p in err["loc"]]
        path = error_path(loc) or rule.field
        if rule.collection and not path.startswith(f"{rule.field}."):
            path = rule.field
        index = loc[1] if rule.collection and len(loc) > 1 and isinstance(loc[1], int) else -1
        if index >= 0 and err["type"] != PUBLISH_RULE:
            # item mal formé (champ absent, mauvais type) : pas de contrôle croisé
            broken.add(index)
        found.append((index, _issue(block_id, block_type, path, _error_message(err))))

    if rule.item_check and isinstance(items, list):
        for index, item in enumerate(items):
            if index in broken or not isinstance(item, dict):
                continue
            check = rule.item_check(item)
            if check:
                key, text = check
                found.append((index, _issue(block_id, block_type, f"{rule.field}.{index}.{key}", text)))

    issues.extend(issue for _, issue in sorted(found, key=lambda pair: pair[0]))
    return issues


def _hero_issues(block_id: str, props: Dict[str, Any]) -> List[PublishIssue]:
    brand = props.get("mood")
    if brand not in BRAND_KEYS:
        brand = get_settings().default_brand
    label = brand_label(brand)

    brand_content = props.get("brandContent")
    content = brand_content.get(brand) if isinstance(brand_content, dict) else None
    if not isinstance(content, dict):
        content = {}

    issues: List[PublishIssue] = []
    headline = _first_str(content.get("headline"), props.get("headline")).strip()
    if len(headline) < 3:
        issues.append(_issue(block_id, "hero", "headline", message("publish.hero.headline_min", brand=label, min=3)))

    cta_text = _first_str(content.get("ctaText"), props.get("ctaText")).strip()
    cta_href = _first_str(content.get("ctaHref"), props.get("ctaHref")).strip()
    if bool(cta_text) != bool(cta_href):
        issues.append(_issue(block_id, "hero", "ctaText", message("publish.hero.cta_pair", brand=label)))
    return issues


def _contact_form_issues(block_id: str, props: Dict[str, Any]) -> List[PublishIssue]:
    issues: List[PublishIssue] = []
    if len(_first_str(props.get("heading")).strip()) < 3:
        issues.append(_issue(block_id, "contactForm", "heading", message("publish.contact_form.heading_min", min=3)))
    if len(_first_str(props.get("submitLabel")).strip()) < 2:
        issues.append(_issue(
            block_id, "contactForm", "submitLabel", message("publish.contact_form.submit_label_min", min=2),
        ))
    fields = props.get("fields")
    if not isinstance(fields, list) or not fields:
        issues.append(_issue(block_id, "contactForm", "fields", message("publish.contact_form.fields_min")))
    if props.get("requireConsent") is True and not _first_str(props.get("consentLabel")).strip():
        issues.append(_issue(block_id, "contactForm", "consentLabel", message("publish.contact_form.consent_label")))
    return issues


def validate_block_for_publish(block: Dict[str, Any]) -> List[PublishIssue]:
    """Problèmes d'un bloc. Bloc mal formé ou exception inattendue → un problème, jamais d'exception."""
    if not isinstance(block, dict) or not block.get("id") or not block.get("type"):
        block = block if isinstance(block, dict) else {}
        return [_issue(
            block.get("id") or "unknown", block.get("type") or "unknown", "", message("publish.block.invalid"),
        )]
    block_id, block_type = block["id"], block["type"]
    try:
        props = block.get("props")
        if not isinstance(props, dict):
            return [_issue(block_id, block_type, "", message("publish.block.props_invalid"))]
        if block_type == "hero":
            return _hero_issues(block_id, props)
        if block_type == "contactForm":
            return _contact_form_issues(block_id, props)
        rule = PUBLISH_RULES.get(block_type)
        if rule is None:
            return []
        return _schema_issues(block_id, block_type, props, rule)
    except Exception as exc:
        log.exception("Validation du bloc %s (%s) en échec", block_id, block_type)
        return [_issue(block_id, block_type, "", message("publish.block.unexpected", error=exc))]


# ── Page ────────────────────────────────────────────────────────────────────

def _as_dict(value: Any) -> Any:
    return value.model_dump() if isinstance(value, BaseModel) else value


def validate_page_for_publish(page: Union[PageEnvelope, Dict[str, Any]]) -> PublishValidationResult:
    """
    Fonction pure, ne lève jamais : toute erreur interne devient un problème
    synthétique. ok ⇔ aucun problème sur l'ensemble des blocs.
    """
    try:
        page = _as_dict(page)
        blocks = page.get("blocks") if isinstance(page, dict) else None
        if not isinstance(blocks, list):
            return PublishValidationResult(
                ok=False, issues=[_issue("", "unknown", "", message("publish.page.invalid"))],
            )

        page_brand = page.get("brand")
        issues: List[PublishIssue] = []
        for raw in blocks:
            block = _as_dict(raw)
            # la marque de la page prime sur props.mood (copie, le bloc n'est pas modifié)
            is_hero = isinstance(block, dict) and block.get("type") == "hero"
            if is_hero and page_brand and isinstance(block.get("props"), dict):
                block = {**block, "props": {**block["props"], "mood": page_brand}}
            issues.extend(validate_block_for_publish(block))

        log.debug("Validation publication : %d bloc(s), %d problème(s)", len(blocks), len(issues))
        return PublishValidationResult(ok=not issues, issues=issues)
    except Exception as exc:
        log.exception("Validation de la page en échec")
        return PublishValidationResult(
            ok=False, issues=[_issue("", "unknown", "", message("publish.page.failed", error=exc))],
        )


def publish_page(page: Union[PageEnvelope, Dict[str, Any]]) -> PageEnvelope:
    """Passe la page en "published" si elle est publiable, sinon PublishBlockedError."""
    envelope = page if isinstance(page, PageEnvelope) else PageEnvelope.model_validate(page)
    result = validate_page_for_publish(envelope)
    if not result.ok:
        raise PublishBlockedError(result.issues)
    log.info("Page publiée (%d bloc(s))", len(envelope.blocks))
    return envelope.model_copy(update={"status": "published"})
