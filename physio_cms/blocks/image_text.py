"""Bloc Image + Text — média d'un côté, texte + CTA de l'autre."""
from typing import List, Literal, Optional

from ..core.schemas import EditableElement, InspectorField, select_options
from .base import Background, ElementTypography, PropsModel, background_field, color_field


class ImageTextStyle(PropsModel):
    variant: Optional[Literal["default", "soft"]] = None
    vertical_align: Optional[Literal["top", "center"]] = None
    text_align: Optional[Literal["left", "center"]] = None
    max_width: Optional[Literal["md", "lg", "xl"]] = None
    image_aspect_ratio: Optional[Literal["4/3", "16/9", "1/1", "3/2"]] = None
    padding_y: Optional[Literal["none", "sm", "md", "lg", "xl"]] = None
    padding_x: Optional[Literal["sm", "md", "lg"]] = None


class ImageTextProps(PropsModel):
    image_url: str
    image_alt: str
    image_position: Optional[Literal["left", "right"]] = None
    eyebrow: Optional[str] = None
    headline: Optional[str] = None
    content: str
    cta_text: Optional[str] = None
    cta_href: Optional[str] = None
    headline_color: Optional[str] = None
    content_color: Optional[str] = None
    cta_text_color: Optional[str] = None
    cta_bg_color: Optional[str] = None
    cta_hover_bg_color: Optional[str] = None
    cta_border_color: Optional[str] = None
    background: Optional[Background] = None
    background_color: Optional[str] = None
    design_preset: Optional[str] = None
    style: Optional[ImageTextStyle] = None
    button_preset: Optional[str] = None
    typography: ElementTypography = None


IMAGE_TEXT_DEFAULTS = {
    "imageUrl": "/placeholder.svg",
    "imageAlt": "Bildbeschreibung",
    "imagePosition": "left",
    "eyebrow": "Label",
    "headline": "Überschrift",
    "content": "Textinhalt hier eingeben...",
    "ctaText": "Mehr erfahren",
    "ctaHref": "/",
    "background": "none",
    "designPreset": "standard",
    "style": {
        "variant": "default",
        "verticalAlign": "center",
        "textAlign": "left",
        "maxWidth": "lg",
        "imageAspectRatio": "4/3",
        "paddingY": "md",
        "paddingX": "md",
    },
}

IMAGE_TEXT_INSPECTOR_FIELDS: List[InspectorField] = [
    InspectorField(key="imageUrl", label="Bild URL", type="image", required=True),
    InspectorField(key="imageAlt", label="Bild Alt-Text", type="text", placeholder="Bildbeschreibung", required=True),
    InspectorField(
        key="style.variant", label="Variante", type="select",
        options=select_options(("default", "Default"), ("soft", "Soft")),
    ),
    InspectorField(
        key="style.verticalAlign", label="Vertikale Ausrichtung", type="select",
        options=select_options(("top", "Oben"), ("center", "Zentriert")),
    ),
    InspectorField(
        key="style.imageAspectRatio",
        label="Bild Seitenverhältnis",
        type="select",
        options=select_options(
            ("4/3", "4:3 (Standard)"), ("16/9", "16:9 (Breitbild)"), ("1/1", "1:1 (Quadrat)"), ("3/2", "3:2 (Klassisch)"),
        ),
    ),
    InspectorField(
        key="imagePosition", label="Bildposition", type="select",
        options=select_options(("left", "Links"), ("right", "Rechts")),
    ),
    InspectorField(key="eyebrow", label="Eyebrow (Label)", type="text", placeholder="Label"),
    InspectorField(key="headline", label="Überschrift", type="text", placeholder="Überschrift"),
    InspectorField(key="content", label="Inhalt", type="textarea", required=True),
    InspectorField(key="ctaText", label="CTA Text", type="text", placeholder="Mehr erfahren"),
    InspectorField(key="ctaHref", label="CTA Link", type="url", placeholder="/"),
    color_field("headlineColor", "Headline Farbe", "#111111"),
    color_field("contentColor", "Inhalt Farbe", "#666666"),
    color_field("ctaTextColor", "CTA Text Farbe", "#ffffff"),
    color_field("ctaBgColor", "CTA Hintergrund", "#111111"),
    background_field(),
    color_field("backgroundColor", "Hintergrundfarbe (Custom)", "#ffffff"),
]

IMAGE_TEXT_ELEMENTS: List[EditableElement] = [
    EditableElement(id="imageText.eyebrow", label="Eyebrow", path="eyebrow", supports_typography=True),
    EditableElement(id="imageText.headline", label="Headline", path="headline", supports_typography=True),
    EditableElement(id="imageText.content", label="Content", path="content", supports_typography=True),
    EditableElement(id="imageText.cta", label="CTA", path="ctaText", supports_typography=True),
    EditableElement(id="imageText.image", label="Image", path="imageUrl"),
    EditableElement(id="imageText.surface", label="Surface", path=""),
]
