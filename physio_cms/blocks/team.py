"""Bloc Team — cartes membres (photo, rôle, bio, tags, réseaux)."""
from typing import Annotated, List, Literal, Optional

from pydantic import Field

from ..core.ids import default_item_id, uuid
from ..core.schemas import EditableElement, InspectorField, select_options
from .base import Background, ElementTypography, GridColumns, PropsModel, background_field, color_field
from .panel import PanelProps


class TeamSocial(PropsModel):
    type: Literal["linkedin", "instagram", "email", "website", "phone"]
    href: str


class TeamMember(PropsModel):
    id: str
    name: str
    role: str
    image_url: str
    image_alt: str
    bio: Optional[str] = None
    avatar_gradient: Optional[str] = None
    avatar_fit: Optional[Literal["cover", "contain"]] = None
    avatar_focus: Optional[Literal["center", "top", "bottom"]] = None
    tags: Optional[List[str]] = None
    socials: Optional[List[TeamSocial]] = None
    cta_text: Optional[str] = None
    cta_href: Optional[str] = None
    name_color: Optional[str] = None
    role_color: Optional[str] = None
    cta_color: Optional[str] = None
    card_bg_color: Optional[str] = None
    card_border_color: Optional[str] = None


class TeamProps(PanelProps):
    typography: ElementTypography = None
    eyebrow: Optional[str] = None
    headline: Optional[str] = None
    subheadline: Optional[str] = None
    headline_color: Optional[str] = None
    subheadline_color: Optional[str] = None
    name_color: Optional[str] = None
    role_color: Optional[str] = None
    cta_color: Optional[str] = None
    card_bg_color: Optional[str] = None
    card_border_color: Optional[str] = None
    members: Annotated[List[TeamMember], Field(min_length=1, max_length=12)]
    columns: GridColumns = None
    layout: Optional[Literal["cards", "compact"]] = None
    background: Optional[Background] = None
    button_preset: Optional[str] = None


def _member(index: int, name: str, role: str, bio: str, tags: List[str], socials: List[dict], slug: str) -> dict:
    return {
        "id": default_item_id("member", index),
        "name": name,
        "role": role,
        "bio": bio,
        "imageUrl": "/placeholder.svg",
        "imageAlt": name,
        "avatarGradient": f"g{index + 1}",
        "avatarFit": "cover",
        "avatarFocus": "center",
        "tags": tags,
        "socials": socials,
        "ctaText": "Profil ansehen",
        "ctaHref": f"/team/{slug}",
    }


TEAM_DEFAULTS = {
    "typography": {},
    "headline": "Unser Team",
    "subheadline": "Erfahrene Therapeuten für Ihre Gesundheit.",
    "eyebrow": "UNSER TEAM",
    "columns": 3,
    "layout": "cards",
    "background": "none",
    "section": {
        "layout": {"width": "contained", "paddingY": "lg", "paddingX": "md"},
        "background": {"type": "none"},
    },
    "members": [
        _member(
            0, "Max Mustermann", "Physiotherapeut",
            "Leidenschaftlicher Therapeut mit über 10 Jahren Erfahrung in der modernen Physiotherapie.",
            ["Physiotherapie", "Rehabilitation"],
            [{"type": "linkedin", "href": "https://linkedin.com"}, {"type": "email", "href": "mailto:max@example.com"}],
            "max-mustermann",
        ),
        _member(
            1, "Anna Schmidt", "Sportphysiotherapeutin",
            "Spezialistin für Sportmedizin und Leistungsoptimierung mit Top-Athleten.",
            ["Sportmedizin", "Training"],
            [{"type": "linkedin", "href": "https://linkedin.com"}],
            "anna-schmidt",
        ),
        _member(
            2, "Thomas Weber", "Reha-Spezialist",
            "Erfahrener Experte für medizinische Rehabilitation und postoperative Betreuung.",
            ["Rehabilitation", "Schmerztherapie"],
            [{"type": "website", "href": "https://example.com"}],
            "thomas-weber",
        ),
    ],
}


def create_team_member() -> dict:
    return {
        "id": uuid(),
        "name": "Neues Mitglied",
        "role": "Rolle",
        "bio": "Bio eingeben...",
        "imageUrl": "/placeholder.svg",
        "imageAlt": "Portrait",
        "avatarGradient": "auto",
        "avatarFit": "cover",
        "avatarFocus": "center",
        "tags": [],
        "socials": [],
        "ctaText": "Profil ansehen",
        "ctaHref": "/team",
    }


TEAM_INSPECTOR_FIELDS: List[InspectorField] = [
    InspectorField(key="headline", label="Headline", type="text", placeholder="Überschrift", required=False, group="basics"),
    InspectorField(key="subheadline", label="Subheadline", type="text", placeholder="Kurzer Text", group="basics"),
    InspectorField(
        key="columns", label="Spalten", type="select",
        options=select_options(("2", "2"), ("3", "3"), ("4", "4")), group="layout",
    ),
    InspectorField(
        key="layout", label="Layout", type="select",
        options=select_options(("cards", "Karten"), ("compact", "Kompakt")), group="layout",
    ),
    background_field(),
    color_field("headlineColor", "Headline Farbe", "#111111", group="design"),
    color_field("subheadlineColor", "Subheadline Farbe", "#666666", group="design"),
    color_field("nameColor", "Name Farbe", "#111111", group="design"),
    color_field("roleColor", "Rolle Farbe", "#666666", group="design"),
    color_field("ctaColor", "CTA Farbe", "#111111", group="interactions"),
    color_field("cardBgColor", "Karte Hintergrund", group="design"),
    color_field("cardBorderColor", "Karte Border", group="design"),
]

TEAM_ELEMENTS: List[EditableElement] = [
    EditableElement(id="team.headline", label="Überschrift", path="headline", supports_typography=True, supports_shadow=True),
    EditableElement(id="team.name", label="Name", path="members.name", supports_typography=True),
    EditableElement(id="team.role", label="Rolle", path="members.role", supports_typography=True),
    EditableElement(id="team.card", label="Karte", path="members", supports_shadow=True),
]
