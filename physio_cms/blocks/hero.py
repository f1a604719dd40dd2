"""
Bloc Hero — contenu par marque (brandContent) + champs plats hérités.

Le rendu et la validation lisent d'abord brandContent[marque], puis les champs
plats (headline, ctaText…) conservés pour les anciennes pages.
"""
from typing import List, Literal, Optional

from pydantic import Field

from ..core.ids import uuid
from ..core.schemas import BrandKey, EditableElement, InspectorField, select_options
from .base import ElementTypography, MediaValue, PropsModel, color_field


class HeroAction(PropsModel):
    id: str
    variant: Literal["primary", "secondary"] = "primary"
    label: str
    href: Optional[str] = None
    action: Optional[str] = None


class HeroBrandContent(PropsModel):
    headline: str = ""
    subheadline: str = ""
    cta_text: Optional[str] = None
    cta_href: Optional[str] = None
    secondary_cta_text: Optional[str] = None
    secondary_cta_href: Optional[str] = None
    badge_text: Optional[str] = None
    badge_color: Optional[str] = None
    badge_bg_color: Optional[str] = None
    play_text: Optional[str] = None
    play_text_color: Optional[str] = None
    play_border_color: Optional[str] = None
    play_bg_color: Optional[str] = None
    play_hover_bg_color: Optional[str] = None
    trust_items: Optional[List[str]] = None
    trust_items_color: Optional[str] = None
    trust_dot_color: Optional[str] = None
    floating_title: Optional[str] = None
    floating_title_color: Optional[str] = None
    floating_value: Optional[str] = None
    floating_value_color: Optional[str] = None
    floating_label: Optional[str] = None
    floating_label_color: Optional[str] = None
    headline_color: Optional[str] = None
    subheadline_color: Optional[str] = None
    cta_color: Optional[str] = None
    cta_bg_color: Optional[str] = None
    cta_hover_bg_color: Optional[str] = None
    cta_border_color: Optional[str] = None
    image: Optional[MediaValue] = None
    image_alt: Optional[str] = None
    image_variant: Optional[Literal["landscape", "portrait"]] = None
    image_fit: Optional[Literal["cover", "contain"]] = None
    image_focus: Optional[Literal["center", "top", "bottom"]] = None
    contain_background: Optional[Literal["none", "blur"]] = None
    actions: Optional[List[HeroAction]] = None


class HeroBrandContentMap(PropsModel):
    physiotherapy: Optional[HeroBrandContent] = None
    physio_konzept: Optional[HeroBrandContent] = Field(None, alias="physio-konzept")


class HeroProps(PropsModel):
    # Champs plats hérités
    mood: Optional[BrandKey] = None
    headline: Optional[str] = None
    subheadline: Optional[str] = None
    cta_text: Optional[str] = None
    cta_href: Optional[str] = None
    show_media: Optional[bool] = None
    media_type: Optional[Literal["image", "video"]] = None
    media_url: Optional[str] = None
    badge_text: Optional[str] = None
    play_text: Optional[str] = None
    trust_items: Optional[List[str]] = None
    floating_title: Optional[str] = None
    floating_value: Optional[str] = None
    floating_label: Optional[str] = None
    # Contenu par marque
    brand_content: Optional[HeroBrandContentMap] = None
    typography: ElementTypography = None
    button_preset: Optional[str] = None


HERO_DEFAULTS = {
    "mood": "physiotherapy",
    "headline": "Ihre Gesundheit in besten Händen",
    "subheadline": "Professionelle Physiotherapie mit ganzheitlichem Ansatz.",
    "ctaText": "Termin vereinbaren",
    "ctaHref": "/kontakt",
    "showMedia": True,
    "mediaType": "image",
    "mediaUrl": "/placeholder.svg",
    "badgeText": "Vertrauen & Fürsorge",
    "playText": "Video ansehen",
    "trustItems": ["Über 15 Jahre Erfahrung", "Alle Kassen", "Modernste Therapien"],
    "floatingTitle": "Patientenzufriedenheit",
    "floatingValue": "98%",
    "brandContent": {
        "physiotherapy": {
            "headline": "Ihre Gesundheit in besten Händen",
            "subheadline": (
                "Professionelle Physiotherapie mit ganzheitlichem Ansatz. Wir begleiten Sie "
                "auf dem Weg zu mehr Wohlbefinden und Lebensqualität."
            ),
            "ctaText": "Termin vereinbaren",
            "ctaHref": "/kontakt",
            "badgeText": "Vertrauen & Fürsorge",
            "trustItems": ["Über 15 Jahre Erfahrung", "Alle Kassen", "Modernste Therapien"],
            "floatingTitle": "Patientenzufriedenheit",
            "floatingValue": "98%",
            "image": {"url": "/placeholder.svg"},
            "imageAlt": "Professional physiotherapy treatment in a calm, welcoming environment",
            "imageVariant": "landscape",
            "imageFit": "cover",
            "imageFocus": "center",
            "containBackground": "blur",
            "actions": [
                {"id": "primary", "variant": "primary", "label": "Termin vereinbaren", "href": "/kontakt"},
            ],
        },
        "physio-konzept": {
            "headline": "Push Your Limits",
            "subheadline": (
                "Erreiche dein volles Potenzial mit individueller Trainingsbetreuung und "
                "sportphysiotherapeutischer Expertise."
            ),
            "ctaText": "Jetzt starten",
            "ctaHref": "/kontakt",
            "secondaryCtaText": "Video ansehen",
            "secondaryCtaHref": "#video",
            "badgeText": "Performance & Erfolg",
            "playText": "Video ansehen",
            "floatingTitle": "Nächstes Training",
            "floatingValue": "Heute, 18:00",
            "image": {"url": "/placeholder.svg"},
            "imageAlt": "Athlete training with focused determination and energy",
            "imageVariant": "landscape",
            "imageFit": "cover",
            "imageFocus": "center",
            "containBackground": "blur",
            "actions": [
                {"id": "primary", "variant": "primary", "label": "Jetzt starten", "href": "/kontakt"},
                {"id": "video", "variant": "secondary", "label": "Video ansehen", "action": "video"},
            ],
        },
    },
}


def create_hero_action() -> dict:
    return {"id": uuid(), "variant": "primary", "label": "Neue Action", "href": "#"}


def create_hero_trust_item() -> str:
    return "Neuer Vorteil"


HERO_INSPECTOR_FIELDS: List[InspectorField] = [
    InspectorField(
        key="mood",
        label="Brand/Mood",
        type="select",
        options=select_options(("physiotherapy", "Physiotherapie"), ("physio-konzept", "Physio-Konzept")),
        group="basics",
    ),
    InspectorField(key="headline", label="Headline", type="text", placeholder="Überschrift eingeben", group="content"),
    InspectorField(key="subheadline", label="Subheadline", type="textarea", placeholder="Unterüberschrift eingeben", group="content"),
    InspectorField(key="ctaText", label="CTA Text", type="text", placeholder="Termin vereinbaren", group="interactions"),
    InspectorField(key="ctaHref", label="CTA Link", type="url", placeholder="/kontakt", group="interactions"),
    InspectorField(key="showMedia", label="Media anzeigen", type="boolean", group="layout"),
    InspectorField(
        key="mediaType",
        label="Media Typ",
        type="select",
        options=select_options(("image", "Bild"), ("video", "Video")),
        group="layout",
    ),
    InspectorField(key="mediaUrl", label="Media URL", type="image", group="content"),
    InspectorField(key="badgeText", label="Badge Text", type="text", group="content"),
    color_field("headlineColor", "Headline Farbe", "#111111"),
    color_field("subheadlineColor", "Subheadline Farbe", "#888888"),
]

HERO_ELEMENTS: List[EditableElement] = [
    EditableElement(id="headline", label="Überschrift", path="headline", supports_typography=True, supports_shadow=True, group="Inhalt"),
    EditableElement(id="subheadline", label="Unterüberschrift", path="subheadline", supports_typography=True, supports_shadow=True, group="Inhalt"),
    EditableElement(id="badge", label="Badge/Auszeichnung", path="badgeText", supports_shadow=True, group="Inhalt"),
    EditableElement(id="cta", label="CTA Button", path="ctaText", supports_typography=True, supports_shadow=True, group="Call-to-Action"),
    EditableElement(id="media", label="Bild/Media", path="image", supports_shadow=True, group="Inhalt"),
]
