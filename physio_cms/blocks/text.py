"""Blocs Text et Section — contenu éditorial."""
from typing import Any, Dict, List, Literal, Optional

from ..core.schemas import EditableElement, InspectorField, select_options
from .base import ElementTypography, PropsModel, color_field

_MAX_WIDTH = select_options(
    ("sm", "Small"), ("md", "Medium"), ("lg", "Large"), ("xl", "Extra Large"), ("full", "Vollbreite"),
)


# ── Text ────────────────────────────────────────────────────────────────────

class TextProps(PropsModel):
    content: str
    alignment: Optional[Literal["left", "center", "right"]] = None
    max_width: Optional[Literal["sm", "md", "lg", "xl", "full"]] = None
    text_size: Optional[Literal["sm", "base", "lg", "xl", "2xl"]] = None
    content_color: Optional[str] = None
    heading_color: Optional[str] = None
    link_color: Optional[str] = None
    typography: ElementTypography = None


TEXT_DEFAULTS = {
    "content": "Textinhalt hier eingeben...",
    "alignment": "left",
    "maxWidth": "lg",
    "textSize": "base",
}

TEXT_INSPECTOR_FIELDS: List[InspectorField] = [
    InspectorField(key="content", label="Inhalt", type="textarea", placeholder="Text eingeben...", required=True),
    InspectorField(
        key="alignment",
        label="Ausrichtung",
        type="select",
        options=select_options(("left", "Links"), ("center", "Zentriert"), ("right", "Rechts")),
    ),
    InspectorField(key="maxWidth", label="Maximale Breite", type="select", options=_MAX_WIDTH),
    InspectorField(
        key="textSize",
        label="Textgröße",
        type="select",
        options=select_options(
            ("sm", "Small"), ("base", "Base"), ("lg", "Large"), ("xl", "Extra Large"), ("2xl", "2x Large"),
        ),
    ),
    color_field("contentColor", "Textfarbe", "#111111"),
    color_field("headingColor", "Überschriftenfarbe", "#111111"),
    color_field("linkColor", "Linkfarbe", "#2563eb"),
]

TEXT_ELEMENTS: List[EditableElement] = [
    EditableElement(id="text.content", label="Inhalt", path="content", supports_typography=True),
]


# ── Section ─────────────────────────────────────────────────────────────────

class SectionProps(PropsModel):
    typography: ElementTypography = None
    elements: Optional[Dict[str, Any]] = None
    eyebrow: Optional[str] = None
    headline: str
    subheadline: Optional[str] = None
    content: str
    align: Optional[Literal["left", "center", "justify"]] = None
    justify_bias: Optional[Literal["none", "readable", "tight"]] = None
    max_width: Optional[Literal["sm", "md", "lg", "xl", "full"]] = None
    background: Optional[Literal["none", "muted", "gradient-soft", "gradient-brand"]] = None
    show_divider: Optional[bool] = None
    enable_glow: Optional[bool] = None
    enable_hover_elevation: Optional[bool] = None
    show_cta: Optional[bool] = None
    divider_color: Optional[str] = None
    background_color: Optional[str] = None
    eyebrow_color: Optional[str] = None
    headline_color: Optional[str] = None
    subheadline_color: Optional[str] = None
    content_color: Optional[str] = None
    cta_text: Optional[str] = None
    cta_href: Optional[str] = None
    cta_text_color: Optional[str] = None
    cta_bg_color: Optional[str] = None
    cta_hover_bg_color: Optional[str] = None
    cta_border_color: Optional[str] = None
    # anciennes pages
    primary_cta_text: Optional[str] = None
    primary_cta_href: Optional[str] = None
    secondary_cta_text: Optional[str] = None
    secondary_cta_href: Optional[str] = None
    button_preset: Optional[str] = None


SECTION_DEFAULTS = {
    "eyebrow": "Über uns",
    "headline": "Willkommen bei Physiotherapie Kroll",
    "content": "Hier können Sie Ihren Textinhalt eingeben. Unterstützung von Absätzen via \\n\\n.",
    "align": "left",
    "justifyBias": "readable",
    "maxWidth": "lg",
    "background": "none",
    "showDivider": False,
    "enableGlow": True,
    "enableHoverElevation": True,
    "showCta": True,
    "ctaText": "Mehr erfahren",
    "ctaHref": "/kontakt",
}

SECTION_INSPECTOR_FIELDS: List[InspectorField] = [
    InspectorField(key="eyebrow", label="Eyebrow", type="text", placeholder="Über uns"),
    InspectorField(
        key="headline", label="Headline", type="text",
        placeholder="Willkommen bei Physiotherapie Kroll", required=True,
    ),
    InspectorField(key="subheadline", label="Subheadline (optional)", type="text", placeholder="Kurze Beschreibung..."),
    InspectorField(
        key="content", label="Inhalt", type="textarea",
        placeholder="Textinhalt mit Absätzen via \\n\\n", required=True,
    ),
    InspectorField(
        key="align",
        label="Ausrichtung",
        type="select",
        options=select_options(("left", "Links"), ("center", "Zentriert"), ("justify", "Blocksatz")),
    ),
    InspectorField(
        key="justifyBias",
        label="Justifikations-Modus",
        type="select",
        options=select_options(
            ("none", "Keine Anpassung"), ("readable", "Lesbar (max-w-prose)"), ("tight", "Enger (max-w-3xl)"),
        ),
    ),
    InspectorField(key="maxWidth", label="Maximale Breite", type="select", options=_MAX_WIDTH),
    InspectorField(
        key="background",
        label="Hintergrund",
        type="select",
        options=select_options(
            ("none", "Kein Hintergrund"), ("muted", "Dezent (Muted)"),
            ("gradient-soft", "Soft Gradient"), ("gradient-brand", "Brand Gradient"),
        ),
    ),
    InspectorField(key="ctaText", label="CTA Button Text", type="text", placeholder="Mehr erfahren"),
    InspectorField(key="ctaHref", label="CTA Button Link", type="url", placeholder="/kontakt"),
    InspectorField(
        key="secondaryCtaText", label="Sekundärer CTA Text (optional)", type="text", placeholder="Weitere Info",
    ),
    InspectorField(key="secondaryCtaHref", label="Sekundärer CTA Link", type="url", placeholder="/info"),
    color_field("backgroundColor", "Hintergrundfarbe (Custom)", "#ffffff"),
    color_field("eyebrowColor", "Eyebrow Farbe", "#8f8f8f"),
    color_field("headlineColor", "Headline Farbe", "#222222"),
    color_field("subheadlineColor", "Subheadline Farbe", "#888888"),
    color_field("contentColor", "Inhalt Farbe", "#666666"),
    color_field("ctaTextColor", "CTA Text Farbe", "#ffffff"),
    color_field("ctaBgColor", "CTA Hintergrund", "#308973"),
    color_field("ctaHoverBgColor", "CTA Hover Hintergrund", "#276D5A"),
    color_field("ctaBorderColor", "CTA Border Farbe", "#276D5A"),
]

SECTION_ELEMENTS: List[EditableElement] = [
    EditableElement(id="section.surface", label="Oberfläche/Hintergrund", path="", supports_shadow=True),
    EditableElement(id="section.eyebrow", label="Eyebrow/Label", path="eyebrow", supports_typography=True),
    EditableElement(id="section.headline", label="Überschrift", path="headline", supports_typography=True, supports_shadow=True),
    EditableElement(id="section.subheadline", label="Unterüberschrift", path="subheadline", supports_typography=True),
    EditableElement(id="section.divider", label="Divider/Trennlinie", path="showDivider"),
    EditableElement(id="section.content", label="Inhalt/Body Text", path="content", supports_typography=True),
    EditableElement(id="section.ctaPrimary", label="Primärer CTA Button", path="ctaText", supports_typography=True, supports_shadow=True),
    EditableElement(id="section.ctaSecondary", label="Sekundärer CTA Button", path="secondaryCtaText", supports_typography=True),
]
