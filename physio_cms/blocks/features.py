"""Blocs Feature Grid et Services Grid — grilles de cartes."""
from typing import Annotated, List, Literal, Optional

from pydantic import Field

from ..core.ids import default_item_id, uuid
from ..core.schemas import EditableElement, InspectorField, select_options
from .base import Background, ElementTypography, GridColumns, PropsModel, background_field, color_field


# ── Style / animation des cartes ────────────────────────────────────────────

class CardStyle(PropsModel):
    variant: Optional[Literal["default", "soft", "outline", "elevated"]] = None
    radius: Optional[Literal["md", "lg", "xl"]] = None
    border: Optional[Literal["none", "subtle", "strong"]] = None
    shadow: Optional[Literal["none", "sm", "md", "lg"]] = None
    accent: Optional[Literal["none", "brand", "muted"]] = None


class CardAnimation(PropsModel):
    entrance: Optional[Literal["none", "fade", "slide-up", "slide-left", "scale"]] = None
    hover: Optional[Literal["none", "lift", "glow", "tilt"]] = None
    duration_ms: Optional[float] = None
    delay_ms: Optional[float] = None


class CardButton(PropsModel):
    id: str
    label: str
    href: Optional[str] = None
    on_click_action: Optional[Literal["none", "open-modal", "scroll-to"]] = None
    target_id: Optional[str] = None
    variant: Optional[Literal["default", "secondary", "outline", "ghost", "link"]] = None
    size: Optional[Literal["sm", "default", "lg"]] = None
    icon: Optional[Literal["none", "arrow-right", "external", "download"]] = None
    icon_position: Optional[Literal["left", "right"]] = None
    disabled: Optional[bool] = None


def create_card_button() -> dict:
    return {
        "id": uuid(),
        "label": "New Button",
        "href": "#",
        "variant": "default",
        "size": "default",
        "icon": "arrow-right",
        "iconPosition": "right",
        "disabled": False,
    }


_CARD_STYLE_FIELDS: List[InspectorField] = [
    InspectorField(
        key="style.variant", label="Card Variant", type="select",
        options=select_options(("default", "Default"), ("soft", "Soft"), ("outline", "Outline"), ("elevated", "Elevated")),
    ),
    InspectorField(
        key="style.radius", label="Border Radius", type="select",
        options=select_options(("md", "Medium"), ("lg", "Large"), ("xl", "Extra Large")),
    ),
    InspectorField(
        key="style.border", label="Border Style", type="select",
        options=select_options(("none", "None"), ("subtle", "Subtle"), ("strong", "Strong")),
    ),
    InspectorField(
        key="style.shadow", label="Shadow", type="select",
        options=select_options(("none", "None"), ("sm", "Small"), ("md", "Medium"), ("lg", "Large")),
    ),
    InspectorField(
        key="style.accent", label="Accent Color", type="select",
        options=select_options(("none", "None"), ("brand", "Brand"), ("muted", "Muted")),
    ),
    InspectorField(
        key="animation.entrance", label="Entrance Animation", type="select",
        options=select_options(
            ("none", "None"), ("fade", "Fade"), ("slide-up", "Slide Up"), ("slide-left", "Slide Left"), ("scale", "Scale"),
        ),
    ),
    InspectorField(
        key="animation.hover", label="Hover Animation", type="select",
        options=select_options(("none", "None"), ("lift", "Lift"), ("glow", "Glow"), ("tilt", "Tilt")),
    ),
    InspectorField(key="animation.durationMs", label="Animation Duration (ms)", type="number", placeholder="400"),
    InspectorField(key="animation.delayMs", label="Animation Delay (ms)", type="number", placeholder="0"),
]

_COLUMNS_OPTIONS = select_options(("2", "2"), ("3", "3"), ("4", "4"))


# ── Feature Grid ────────────────────────────────────────────────────────────

class FeatureItem(PropsModel):
    id: str
    title: str
    description: str
    icon: Optional[str] = None
    title_color: Optional[str] = None
    description_color: Optional[str] = None
    icon_color: Optional[str] = None
    card_bg_color: Optional[str] = None
    card_border_color: Optional[str] = None
    style: Optional[CardStyle] = None
    animation: Optional[CardAnimation] = None


class FeatureGridProps(PropsModel):
    features: List[FeatureItem]
    title_color: Optional[str] = None
    description_color: Optional[str] = None
    icon_color: Optional[str] = None
    card_bg_color: Optional[str] = None
    card_border_color: Optional[str] = None
    columns: GridColumns = None
    design_preset: Optional[str] = None
    style: Optional[CardStyle] = None
    animation: Optional[CardAnimation] = None
    typography: ElementTypography = None


FEATURE_GRID_DEFAULTS = {
    "features": [
        {"id": "1", "title": "Feature 1", "description": "Beschreibung..."},
        {"id": "2", "title": "Feature 2", "description": "Beschreibung..."},
        {"id": "3", "title": "Feature 3", "description": "Beschreibung..."},
    ],
    "columns": 3,
    "designPreset": "standard",
    "style": {"variant": "default", "radius": "xl", "border": "subtle", "shadow": "sm", "accent": "none"},
    "animation": {"entrance": "fade", "hover": "none", "durationMs": 400, "delayMs": 0},
}


def create_feature_item() -> dict:
    return {"id": uuid(), "title": "Neues Feature", "description": "Beschreibung hier eingeben..."}


FEATURE_GRID_INSPECTOR_FIELDS: List[InspectorField] = [
    InspectorField(key="columns", label="Spalten", type="select", options=_COLUMNS_OPTIONS),
    *_CARD_STYLE_FIELDS,
    color_field("titleColor", "Titel Farbe", "#111111"),
    color_field("descriptionColor", "Beschreibung Farbe", "#666666"),
    color_field("iconColor", "Icon Farbe", "#111111"),
    color_field("cardBgColor", "Karte Hintergrund", "#FFFFFF"),
    color_field("cardBorderColor", "Karte Border", "#E5E7EB"),
]

FEATURE_GRID_ELEMENTS: List[EditableElement] = [
    EditableElement(id="featureGrid.title", label="Titel", path="features.title", supports_typography=True),
    EditableElement(id="featureGrid.description", label="Beschreibung", path="features.description", supports_typography=True),
    EditableElement(id="featureGrid.card", label="Karte", path="features", supports_shadow=True),
]


# ── Services Grid ───────────────────────────────────────────────────────────

class ServiceCard(PropsModel):
    id: str
    icon: str
    # vides autorisés pendant l'édition
    title: str
    text: str
    cta_text: Optional[str] = None
    cta_href: Optional[str] = None
    icon_color: Optional[str] = None
    icon_bg_color: Optional[str] = None
    title_color: Optional[str] = None
    text_color: Optional[str] = None
    cta_color: Optional[str] = None
    card_bg_color: Optional[str] = None
    card_border_color: Optional[str] = None


class ServicesGridProps(PropsModel):
    headline: Optional[str] = None
    subheadline: Optional[str] = None
    headline_color: Optional[str] = None
    subheadline_color: Optional[str] = None
    icon_color: Optional[str] = None
    icon_bg_color: Optional[str] = None
    title_color: Optional[str] = None
    text_color: Optional[str] = None
    cta_color: Optional[str] = None
    card_bg_color: Optional[str] = None
    card_border_color: Optional[str] = None
    columns: GridColumns = None
    cards: Annotated[List[ServiceCard], Field(min_length=1, max_length=12)]
    background: Optional[Background] = None
    typography: ElementTypography = None


_SERVICES = [
    ("HeartPulse", "Physiotherapie", "Individuelle Behandlung für Ihre Gesundheit und Wohlbefinden.", "/physiotherapie"),
    ("Dumbbell", "Training", "Gezieltes Kraft- und Ausdauertraining für optimale Ergebnisse.", "/training"),
    ("Activity", "Rehabilitation", "Professionelle Reha nach Verletzungen und Operationen.", "/rehabilitation"),
    ("Users", "Gruppenkurse", "Gemeinsam trainieren und motiviert bleiben in der Gruppe.", "/kurse"),
    ("Clock", "Prävention", "Vorbeugende Maßnahmen für langfristige Gesundheit.", "/praevention"),
    ("Sparkles", "Wellness", "Entspannung und Regeneration für Körper und Geist.", "/wellness"),
]

SERVICES_GRID_DEFAULTS = {
    "headline": "Angebote & Kurse",
    "subheadline": "Therapie, Training und Kurse – alles an einem Ort.",
    "columns": 3,
    "background": "none",
    "cards": [
        {
            "id": default_item_id("card", i),
            "icon": icon,
            "title": title,
            "text": text,
            "ctaText": "Mehr erfahren",
            "ctaHref": href,
        }
        for i, (icon, title, text, href) in enumerate(_SERVICES)
    ],
}


def create_service_card() -> dict:
    return {
        "id": uuid(),
        "icon": "Heart",
        "title": "Neuer Service",
        "text": "Beschreibung hier eingeben...",
        "ctaText": "Mehr erfahren",
        "ctaHref": "/",
    }


SERVICES_GRID_INSPECTOR_FIELDS: List[InspectorField] = [
    InspectorField(key="headline", label="Headline", type="text", placeholder="Überschrift", required=False, group="basics"),
    InspectorField(key="subheadline", label="Subheadline", type="text", placeholder="Kurzer Text", required=False, group="basics"),
    InspectorField(key="columns", label="Spalten", type="select", options=_COLUMNS_OPTIONS, group="layout"),
    background_field(),
    color_field("headlineColor", "Headline Farbe", "#111111", group="design"),
    color_field("subheadlineColor", "Subheadline Farbe", "#666666", group="design"),
    color_field("iconColor", "Icon Farbe", "#111111", group="design"),
    color_field("iconBgColor", "Icon Hintergrund", "#EEEEEE", group="design"),
    color_field("titleColor", "Titel Farbe", "#111111", group="design"),
    color_field("textColor", "Text Farbe", "#666666", group="design"),
    color_field("ctaColor", "CTA Farbe", "#111111", group="interactions"),
    color_field("cardBgColor", "Karte Hintergrund", "#FFFFFF", group="design"),
    color_field("cardBorderColor", "Karte Border", "#E5E7EB", group="design"),
]

SERVICES_GRID_ELEMENTS: List[EditableElement] = [
    EditableElement(id="servicesGrid.headline", label="Überschrift", path="headline", supports_typography=True, supports_shadow=True),
    EditableElement(id="servicesGrid.subheadline", label="Unterüberschrift", path="subheadline", supports_typography=True),
    EditableElement(id="servicesGrid.cardTitle", label="Karten-Titel", path="cards.title", supports_typography=True),
    EditableElement(id="servicesGrid.cardText", label="Karten-Text", path="cards.text", supports_typography=True),
    EditableElement(id="servicesGrid.card", label="Karte", path="cards", supports_shadow=True),
]
