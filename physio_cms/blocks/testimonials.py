"""Blocs Testimonials (grille/slider) et Testimonial Slider — avis patients."""
from typing import Annotated, List, Literal, Optional

from pydantic import Field

from ..core.ids import default_item_id, uuid
from ..core.schemas import EditableElement, InspectorField, select_options
from .base import Background, MediaValue, PropsModel, background_field, color_field, optional_int


# ── Testimonials ────────────────────────────────────────────────────────────

class TestimonialItem(PropsModel):
    id: str
    # vides autorisés pendant l'édition
    quote: str
    quote_color: Optional[str] = None
    name: str
    name_color: Optional[str] = None
    role: Optional[str] = None
    role_color: Optional[str] = None
    rating: optional_int(1, 5) = None
    avatar: Optional[MediaValue] = None
    avatar_gradient: Optional[str] = None


class TestimonialsProps(PropsModel):
    headline: Optional[str] = None
    subheadline: Optional[str] = None
    variant: Optional[Literal["grid", "slider"]] = None
    headline_color: Optional[str] = None
    subheadline_color: Optional[str] = None
    quote_color: Optional[str] = None
    name_color: Optional[str] = None
    role_color: Optional[str] = None
    columns: optional_int(1, 4) = None
    background: Optional[Background] = None
    items: Annotated[List[TestimonialItem], Field(min_length=1, max_length=12)]


TESTIMONIALS_DEFAULTS = {
    "headline": "Was unsere Patienten sagen",
    "subheadline": "Echte Erfahrungen aus unserer Praxis – persönlich, ehrlich, hilfreich.",
    "variant": "grid",
    "columns": 3,
    "background": "none",
    "items": [
        {
            "id": default_item_id("testimonial", 0),
            "quote": "Sehr professionelle Behandlung – nach wenigen Terminen ging es mir deutlich besser.",
            "name": "Julia M.",
            "role": "Patientin",
            "rating": 5,
            "avatarGradient": "g1",
        },
        {
            "id": default_item_id("testimonial", 1),
            "quote": "Kompetent, freundlich und super organisiert. Ich komme gerne wieder.",
            "name": "Thomas K.",
            "role": "Patient",
            "rating": 5,
            "avatarGradient": "g2",
        },
        {
            "id": default_item_id("testimonial", 2),
            "quote": "Individuelle Übungen und gute Erklärungen. Endlich verstehe ich, was meinem Rücken hilft.",
            "name": "Sarah L.",
            "role": "Patientin",
            "rating": 4,
            "avatarGradient": "g3",
        },
    ],
}


def create_testimonial_item() -> dict:
    return {
        "id": uuid(),
        "quote": "Sehr professionelle Behandlung – ich habe mich vom ersten Termin an gut aufgehoben gefühlt.",
        "name": "Julia M.",
        "role": "Patientin",
        "rating": 5,
        "avatarGradient": "auto",
    }


TESTIMONIALS_INSPECTOR_FIELDS: List[InspectorField] = [
    InspectorField(key="headline", label="Headline", type="text", placeholder="Überschrift"),
    InspectorField(key="subheadline", label="Subheadline", type="textarea"),
    InspectorField(
        key="variant", label="Darstellung", type="select",
        options=select_options(("grid", "Grid"), ("slider", "Slider")),
    ),
    InspectorField(
        key="columns", label="Spalten", type="select",
        options=select_options(("1", "1"), ("2", "2"), ("3", "3"), ("4", "4")),
    ),
    background_field(),
    color_field("headlineColor", "Headline Farbe", "#111111"),
    color_field("quoteColor", "Zitat Farbe", "#111111"),
    color_field("nameColor", "Name Farbe", "#111111"),
    color_field("roleColor", "Rolle Farbe", "#666666"),
]

TESTIMONIALS_ELEMENTS: List[EditableElement] = [
    EditableElement(id="testimonials.headline", label="Überschrift", path="headline", supports_typography=True, supports_shadow=True),
    EditableElement(id="testimonials.quote", label="Zitat", path="items.quote", supports_typography=True),
    EditableElement(id="testimonials.card", label="Karte", path="items", supports_shadow=True),
]


# ── Testimonial Slider ──────────────────────────────────────────────────────

class TestimonialSliderItem(PropsModel):
    id: str
    quote: str
    name: str
    role: Optional[str] = None
    image: Optional[str] = None


class TestimonialSliderProps(PropsModel):
    headline: Optional[str] = None
    subheadline: Optional[str] = None
    background: Optional[Background] = None
    autoplay: Optional[bool] = None
    interval: optional_int(1000, 30000) = None
    show_arrows: Optional[bool] = None
    show_dots: Optional[bool] = None
    items: Annotated[List[TestimonialSliderItem], Field(min_length=1, max_length=12)]


TESTIMONIAL_SLIDER_DEFAULTS = {
    "headline": "Vertrauen, das man spürt",
    "subheadline": "Das sagen unsere Patienten",
    "background": "none",
    "autoplay": False,
    "interval": 6000,
    "showArrows": True,
    "showDots": True,
    "items": [
        {"id": default_item_id("testimonialSlider", 0), "quote": "...", "name": "Julia M.", "role": "Patientin", "image": ""},
        {"id": default_item_id("testimonialSlider", 1), "quote": "...", "name": "Michael K.", "role": "Patient", "image": ""},
    ],
}


def create_testimonial_slider_item() -> dict:
    return {"id": uuid(), "quote": "", "name": "", "role": "", "image": ""}


TESTIMONIAL_SLIDER_INSPECTOR_FIELDS: List[InspectorField] = [
    InspectorField(key="headline", label="Headline", type="text"),
    InspectorField(key="subheadline", label="Subheadline", type="text"),
    background_field(),
    InspectorField(key="autoplay", label="Autoplay", type="boolean"),
    InspectorField(key="interval", label="Intervall (ms)", type="number", placeholder="6000"),
    InspectorField(key="showArrows", label="Pfeile anzeigen", type="boolean"),
    InspectorField(key="showDots", label="Punkte anzeigen", type="boolean"),
]
