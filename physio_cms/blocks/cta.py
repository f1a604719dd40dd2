"""Bloc CTA — appel à l'action (1 ou 2 boutons)."""
from typing import List, Literal, Optional

from ..core.schemas import EditableElement, InspectorField, select_options
from .base import ElementTypography, PropsModel, color_field


class CtaProps(PropsModel):
    headline: str
    subheadline: Optional[str] = None
    primary_cta_text: str
    primary_cta_href: str
    secondary_cta_text: Optional[str] = None
    secondary_cta_href: Optional[str] = None
    variant: Optional[Literal["default", "centered", "split"]] = None
    background_color: Optional[str] = None
    headline_color: Optional[str] = None
    subheadline_color: Optional[str] = None
    primary_cta_text_color: Optional[str] = None
    primary_cta_bg_color: Optional[str] = None
    primary_cta_hover_bg_color: Optional[str] = None
    primary_cta_border_color: Optional[str] = None
    primary_cta_border_radius: Optional[str] = None
    secondary_cta_text_color: Optional[str] = None
    secondary_cta_bg_color: Optional[str] = None
    secondary_cta_hover_bg_color: Optional[str] = None
    secondary_cta_border_color: Optional[str] = None
    secondary_cta_border_radius: Optional[str] = None
    button_preset: Optional[str] = None
    typography: ElementTypography = None


CTA_DEFAULTS = {
    "headline": "Bereit zu starten?",
    "subheadline": "Kurzer Satz...",
    "primaryCtaText": "Kontakt",
    "primaryCtaHref": "/kontakt",
    "variant": "default",
}

CTA_INSPECTOR_FIELDS: List[InspectorField] = [
    InspectorField(key="headline", label="Überschrift", type="text", required=True),
    InspectorField(key="subheadline", label="Unterüberschrift", type="textarea"),
    InspectorField(key="primaryCtaText", label="Primärer CTA Text", type="text", required=True),
    InspectorField(key="primaryCtaHref", label="Primärer CTA Link", type="url", required=True),
    InspectorField(key="secondaryCtaText", label="Sekundärer CTA Text", type="text"),
    InspectorField(key="secondaryCtaHref", label="Sekundärer CTA Link", type="url"),
    InspectorField(
        key="variant",
        label="Variante",
        type="select",
        options=select_options(("default", "Standard"), ("centered", "Zentriert"), ("split", "Geteilt")),
    ),
    color_field("backgroundColor", "Hintergrundfarbe", "#ffffff"),
    color_field("headlineColor", "Headline Farbe", "#111111"),
    color_field("primaryCtaBgColor", "Primärer CTA Hintergrund", "#111111"),
    color_field("secondaryCtaBgColor", "Sekundärer CTA Hintergrund", "#ffffff"),
]

CTA_ELEMENTS: List[EditableElement] = [
    EditableElement(id="cta.headline", label="Überschrift", path="headline", supports_typography=True, supports_shadow=True),
    EditableElement(id="cta.subheadline", label="Unterüberschrift", path="subheadline", supports_typography=True),
    EditableElement(id="cta.primary", label="Primärer Button", path="primaryCtaText", supports_typography=True, supports_shadow=True),
    EditableElement(id="cta.secondary", label="Sekundärer Button", path="secondaryCtaText", supports_typography=True),
]
