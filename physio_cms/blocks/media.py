"""Blocs Gallery et Image Slider — images avec légendes, dans le panel intérieur."""
from typing import Annotated, Any, ClassVar, Dict, List, Literal, Optional, Tuple

from pydantic import BeforeValidator, ConfigDict, Field

from ..core.ids import default_item_id, uuid
from ..core.schemas import EditableElement, InspectorField, select_options
from .base import (
    Background, ElementTypography, PropsModel, background_field, blank_to_none, color_field, optional_int,
)
from .panel import PanelProps


# ── Gallery ─────────────────────────────────────────────────────────────────

class GalleryImage(PropsModel):
    id: str
    url: str
    alt: str            # vide autorisé pendant l'édition
    caption: Optional[str] = None
    caption_color: Optional[str] = None
    link: Optional[str] = None


class GalleryProps(PanelProps):
    headline: Optional[str] = None
    subheadline: Optional[str] = None
    layout: Optional[Literal["grid", "masonry", "carousel", "stack", "highlight-first"]] = None
    variant: Optional[Literal["grid", "slider"]] = None
    lightbox: Optional[bool] = None
    headline_color: Optional[str] = None
    subheadline_color: Optional[str] = None
    caption_color: Optional[str] = None
    columns: optional_int(2, 6) = None
    show_captions: Optional[bool] = None
    caption_style: Optional[Literal["below", "overlay"]] = None
    gap: Optional[Literal["sm", "md", "lg"]] = None
    image_radius: Optional[Literal["none", "sm", "md", "lg", "xl"]] = None
    aspect_ratio: Optional[Literal["auto", "square", "video", "portrait", "landscape"]] = None
    image_fit: Optional[Literal["cover", "contain"]] = None
    hover_effect: Optional[Literal["none", "zoom", "lift", "fade"]] = None
    show_counter: Optional[bool] = None
    enable_motion: Optional[bool] = None
    background: Optional[Background] = None
    container_border: Optional[bool] = None
    typography: ElementTypography = None
    images: Annotated[List[GalleryImage], Field(min_length=3, max_length=18)]


GALLERY_DEFAULTS = {
    "containerBackgroundGradientPreset": "soft",
    "headline": "Galerie",
    "subheadline": "Einblicke in unsere Räume und unseren Alltag.",
    "layout": "grid",
    "variant": "grid",
    "lightbox": True,
    "columns": 3,
    "showCaptions": True,
    "captionStyle": "overlay",
    "gap": "md",
    "imageRadius": "lg",
    "aspectRatio": "landscape",
    "imageFit": "cover",
    "hoverEffect": "zoom",
    "showCounter": True,
    "enableMotion": True,
    "background": "none",
    "containerBorder": False,
    "typography": {},
    "images": [
        {"id": default_item_id("image", i), "url": "/placeholder.svg", "alt": "", "caption": caption}
        for i, caption in enumerate(("Behandlungsraum", "Trainingsbereich", "Empfang"))
    ],
}


def create_gallery_image() -> dict:
    return {"id": uuid(), "url": "/placeholder.svg", "alt": "", "caption": "Einblick in unsere Praxis"}


GALLERY_INSPECTOR_FIELDS: List[InspectorField] = [
    InspectorField(key="headline", label="Headline", type="text", placeholder="Überschrift", group="basics"),
    InspectorField(
        key="subheadline", label="Subheadline", type="textarea",
        placeholder="Kurzer erklärender Text", group="basics",
    ),
    InspectorField(
        key="layout",
        label="Layout",
        type="select",
        options=select_options(
            ("grid", "Grid"), ("masonry", "Masonry"), ("carousel", "Karussell"),
            ("stack", "Stapel"), ("highlight-first", "Erstes Bild hervorheben"),
        ),
        group="layout",
    ),
    InspectorField(
        key="columns",
        label="Spalten",
        type="select",
        options=select_options(("2", "2"), ("3", "3"), ("4", "4"), ("5", "5"), ("6", "6")),
        group="layout",
    ),
    InspectorField(
        key="gap", label="Abstand", type="select",
        options=select_options(("sm", "Klein"), ("md", "Mittel"), ("lg", "Groß")), group="layout",
    ),
    InspectorField(key="containerBorder", label="Panel Rahmen", type="boolean", group="panel"),
    color_field("headlineColor", "Headline Farbe", "#111111", group="design"),
    color_field("subheadlineColor", "Subheadline Farbe", "#666666", group="design"),
    color_field("captionColor", "Caption Farbe", "#666666", group="design"),
    InspectorField(
        key="imageRadius", label="Bild-Ecken", type="select",
        options=select_options(("none", "Keine"), ("sm", "Klein"), ("md", "Mittel"), ("lg", "Groß"), ("xl", "XL")),
        group="design",
    ),
    InspectorField(
        key="aspectRatio", label="Seitenverhältnis", type="select",
        options=select_options(
            ("auto", "Auto"), ("square", "Quadrat"), ("video", "Video"),
            ("portrait", "Hochformat"), ("landscape", "Querformat"),
        ),
        group="design",
    ),
    InspectorField(
        key="imageFit", label="Bild-Füllung", type="select",
        options=select_options(("cover", "Cover"), ("contain", "Contain")), group="design",
    ),
    InspectorField(
        key="hoverEffect", label="Hover-Effekt", type="select",
        options=select_options(("none", "Keiner"), ("zoom", "Zoom"), ("lift", "Lift"), ("fade", "Fade")),
        group="design",
    ),
    InspectorField(key="showCaptions", label="Captions anzeigen", type="boolean", group="content"),
    InspectorField(
        key="captionStyle", label="Caption Position", type="select",
        options=select_options(("below", "Unter dem Bild"), ("overlay", "Overlay (Hover)")), group="content",
    ),
    InspectorField(
        key="lightbox", label="Lightbox aktiv", type="boolean",
        help_text="Bilder per Klick vergrößern.", group="interactions",
    ),
    InspectorField(key="showCounter", label="Zähler in Lightbox", type="boolean", group="interactions"),
    InspectorField(key="enableMotion", label="Animationen", type="boolean", group="interactions"),
]

GALLERY_ELEMENTS: List[EditableElement] = [
    EditableElement(id="gallery.headline", label="Überschrift", path="headline", supports_typography=True, supports_shadow=True),
    EditableElement(id="gallery.caption", label="Caption", path="images.caption", supports_typography=True),
    EditableElement(id="gallery.image", label="Bild", path="images", supports_shadow=True),
]


# ── Image Slider ────────────────────────────────────────────────────────────

SlidesCount = Annotated[int, Field(ge=1, le=3)]


class SlidesPerView(PropsModel):
    applied_defaults: ClassVar[Tuple[str, ...]] = ("base", "md", "lg")

    base: SlidesCount = 1
    md: SlidesCount = 2
    lg: SlidesCount = 3


class SliderControls(PropsModel):
    applied_defaults: ClassVar[Tuple[str, ...]] = ("show_arrows", "show_dots", "show_progress", "show_thumbnails")

    show_arrows: bool = True
    show_dots: bool = True
    show_progress: bool = True
    show_thumbnails: bool = True


class FocalPoint(PropsModel):
    x: Annotated[float, Field(ge=0, le=1)]
    y: Annotated[float, Field(ge=0, le=1)]


class ContainerShadow(PropsModel):
    model_config = ConfigDict(extra="allow")

    enabled: Optional[bool] = None
    preset: Optional[str] = None


def _delay_or_default(value: Any) -> Any:
    """Chaîne vide / None → 5000 ms (select vidé = valeur par défaut)."""
    value = blank_to_none(value)
    return 5000 if value is None else value


class ImageSlide(PropsModel):
    id: str
    url: str
    alt: str
    title: Optional[str] = None
    text: Optional[str] = None
    link: Optional[str] = None
    focal_point: Optional[FocalPoint] = None
    title_color: Optional[str] = None
    text_color: Optional[str] = None
    card_bg_color: Optional[str] = None
    card_border_color: Optional[str] = None


class ImageSliderProps(PanelProps):
    applied_defaults: ClassVar[Tuple[str, ...]] = (
        "variant", "aspect", "loop", "autoplay", "autoplay_delay_ms", "pause_on_hover",
        "peek", "background", "container_gradient_angle", "container_border",
    )

    typography: Optional[Dict[str, Any]] = None
    eyebrow: Optional[str] = None
    headline: Optional[str] = None
    subheadline: Optional[str] = None
    eyebrow_color: Optional[str] = None
    headline_color: Optional[str] = None
    subheadline_color: Optional[str] = None
    variant: Literal["classic", "progress", "thumbnails", "hero", "cards"] = "classic"
    aspect: Literal["video", "square", "portrait", "auto"] = "video"
    slides_per_view: Optional[SlidesPerView] = None
    controls: Optional[SliderControls] = None
    loop: bool = True
    autoplay: bool = False
    autoplay_delay_ms: Annotated[
        Annotated[int, Field(ge=500, le=60000)], BeforeValidator(_delay_or_default)
    ] = 5000
    pause_on_hover: bool = True
    peek: bool = True
    card_bg_color: Optional[str] = None
    card_border_color: Optional[str] = None
    slide_title_color: Optional[str] = None
    slide_text_color: Optional[str] = None
    background: Background = "none"
    container_background_gradient_preset: Optional[
        Literal["soft", "aurora", "ocean", "sunset", "hero", "none"]
    ] = None
    container_gradient_angle: float = 135
    container_shadow: Optional[ContainerShadow] = None
    container_border: bool = False
    aria_label: Optional[str] = None
    slides: Annotated[List[ImageSlide], Field(min_length=1, max_length=12)]


IMAGE_SLIDER_DEFAULTS = {
    "eyebrow": "Galerie",
    "headline": "Impressionen",
    "subheadline": "Ein kleiner Einblick – wischen oder klicken Sie sich durch.",
    "variant": "classic",
    "aspect": "video",
    "slidesPerView": {"base": 1, "md": 2, "lg": 3},
    "controls": {"showArrows": True, "showDots": True, "showProgress": True, "showThumbnails": True},
    "loop": True,
    "autoplay": False,
    "autoplayDelayMs": 5000,
    "pauseOnHover": True,
    "peek": True,
    "background": "none",
    "containerBorder": False,
    "slides": [
        {
            "id": default_item_id("slide", 0),
            "url": "/placeholder.svg",
            "alt": "Behandlungsraum",
            "title": "Behandlungsraum",
            "text": "Ruhige Atmosphäre für Ihre Therapie.",
        },
        {
            "id": default_item_id("slide", 1),
            "url": "/placeholder.svg",
            "alt": "Trainingsbereich",
            "title": "Trainingsbereich",
            "text": "Modernes Equipment für gezieltes Training.",
        },
        {
            "id": default_item_id("slide", 2),
            "url": "/placeholder.svg",
            "alt": "Empfang",
            "title": "Empfang",
            "text": "Freundlich. Persönlich. Organisiert.",
        },
    ],
}


def create_image_slide() -> dict:
    return {"id": uuid(), "url": "/placeholder.svg", "alt": "", "title": "Headline…", "text": "Kurzer Text…"}


IMAGE_SLIDER_INSPECTOR_FIELDS: List[InspectorField] = [
    InspectorField(key="eyebrow", label="Eyebrow (optional)", type="text", placeholder="Kurzer Hinweis", group="basics"),
    InspectorField(key="headline", label="Headline", type="text", placeholder="Überschrift", group="basics"),
    InspectorField(
        key="subheadline", label="Subheadline", type="textarea",
        placeholder="Kurzer erklärender Text", group="basics",
    ),
    InspectorField(
        key="variant",
        label="Variante",
        type="select",
        options=select_options(
            ("classic", "Klassisch"), ("progress", "Fortschritt"), ("thumbnails", "Thumbnails"),
            ("hero", "Hero"), ("cards", "Karten"),
        ),
        group="layout",
    ),
    InspectorField(
        key="aspect", label="Seitenverhältnis", type="select",
        options=select_options(("video", "Video"), ("square", "Quadrat"), ("portrait", "Hochformat"), ("auto", "Auto")),
        group="layout",
    ),
    InspectorField(key="loop", label="Endlos", type="boolean", group="interactions"),
    InspectorField(key="autoplay", label="Autoplay", type="boolean", group="interactions"),
    InspectorField(
        key="autoplayDelayMs", label="Autoplay Verzögerung (ms)", type="number",
        placeholder="5000", show_when={"key": "autoplay", "equals": True}, group="interactions",
    ),
    InspectorField(key="pauseOnHover", label="Pause bei Hover", type="boolean", group="interactions"),
    InspectorField(key="containerBorder", label="Panel Rahmen", type="boolean", group="panel"),
    color_field("headlineColor", "Headline Farbe", "#111111", group="design"),
    color_field("slideTitleColor", "Slide Titel Farbe", "#111111", group="design"),
    color_field("slideTextColor", "Slide Text Farbe", "#666666", group="design"),
    InspectorField(key="ariaLabel", label="ARIA Label", type="text", group="content"),
]

IMAGE_SLIDER_ELEMENTS: List[EditableElement] = [
    EditableElement(id="imageSlider.headline", label="Überschrift", path="headline", supports_typography=True, supports_shadow=True),
    EditableElement(id="imageSlider.slideTitle", label="Slide Titel", path="slides.title", supports_typography=True),
    EditableElement(id="imageSlider.slide", label="Slide", path="slides", supports_shadow=True),
]
