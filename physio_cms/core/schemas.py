"""
Schémas Pydantic communs du pipeline de blocs CMS.

Block (brut, éditeur/DB) → normalize_block() → Block (forme garantie)
PageEnvelope → validate_page_for_publish() → PublishValidationResult

Les props d'un bloc restent un dict JSON (clés camelCase) : leur forme dépend du
type et est portée par les schémas de `physio_cms.blocks`.
"""
from typing import Any, Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# ── Marques ─────────────────────────────────────────────────────────────────

BrandKey = Literal["physiotherapy", "physio-konzept"]

BRAND_KEYS: Tuple[str, ...] = ("physiotherapy", "physio-konzept")
DEFAULT_BRAND = "physiotherapy"

# ── Types de blocs (énumération fermée) ─────────────────────────────────────

BlockType = Literal[
    "hero",
    "text",
    "imageText",
    "featureGrid",
    "cta",
    "section",
    "servicesGrid",
    "faq",
    "team",
    "contactForm",
    "testimonials",
    "gallery",
    "openingHours",
    "imageSlider",
    "testimonialSlider",
]

PageStatus = Literal["draft", "published"]


class CamelModel(BaseModel):
    """Modèle sérialisé en camelCase (format JSON persisté / API éditeur)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Bloc + page ─────────────────────────────────────────────────────────────

class Block(BaseModel):
    """
    Bloc CMS : id stable (attribué par l'appelant), type immuable, props libres.

    `props` reste `Any` : un bloc brut peut arriver avec des props invalides,
    c'est le rôle du normalizer de les ramener à une forme valide.
    """
    id: str
    type: BlockType
    props: Any = Field(default_factory=dict)


class PageEnvelope(BaseModel):
    """Page telle que vue par le pipeline : blocs ordonnés + marque active + statut."""
    model_config = ConfigDict(extra="allow")   # id, title, slug… transitent sans être lus

    blocks: List[Block] = Field(default_factory=list)
    brand: Optional[BrandKey] = None
    status: PageStatus = "draft"


# ── Validation de publication ───────────────────────────────────────────────

class PublishIssue(CamelModel):
    """Problème bloquant la publication — adressé par blockId + fieldPath (dot-path)."""
    block_id: str
    block_type: str
    field_path: str = ""
    message: str


class PublishValidationResult(CamelModel):
    ok: bool
    issues: List[PublishIssue] = Field(default_factory=list)

    def as_payload(self) -> Dict[str, Any]:
        """{"ok": true} ou {"ok": false, "issues": [...]}."""
        if self.ok:
            return {"ok": True}
        return {"ok": False, "issues": [issue.model_dump(by_alias=True) for issue in self.issues]}


# ── Métadonnées UI (inspecteur) ─────────────────────────────────────────────

InspectorFieldType = Literal[
    "text", "textarea", "select", "url", "image", "number", "boolean", "color", "toggle",
]

InspectorGroup = Literal[
    "basics", "layout", "panel", "design", "content", "interactions", "elements",
]

INSPECTOR_GROUP_ORDER: Tuple[str, ...] = (
    "basics", "layout", "panel", "design", "content", "interactions", "elements",
)

INSPECTOR_GROUP_LABELS: Dict[str, str] = {
    "basics": "Basics",
    "layout": "Layout",
    "panel": "Panel",
    "design": "Design",
    "content": "Inhalt",
    "interactions": "Interaktionen",
    "elements": "Elemente",
}


class SelectOption(BaseModel):
    value: str
    label: str


class ShowWhen(BaseModel):
    key: str
    equals: Any


class InspectorField(CamelModel):
    """Champ de formulaire de l'inspecteur (éditeur admin)."""
    key: str
    label: str
    type: InspectorFieldType
    placeholder: Optional[str] = None
    options: Optional[List[SelectOption]] = None
    required: Optional[bool] = None
    help_text: Optional[str] = None
    show_when: Optional[ShowWhen] = None
    group: Optional[InspectorGroup] = None


class EditableElement(CamelModel):
    """Élément éditable inline dans l'aperçu (typographie / ombre par élément)."""
    id: str
    label: str
    path: str
    supports_typography: bool = False
    supports_shadow: bool = False
    group: Optional[str] = None


def select_options(*pairs: Tuple[str, str]) -> List[SelectOption]:
    """select_options(("left", "Links"), ("center", "Zentriert")) → [SelectOption…]"""
    return [SelectOption(value=value, label=label) for value, label in pairs]
