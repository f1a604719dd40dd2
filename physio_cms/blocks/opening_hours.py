"""Bloc Opening Hours — lignes jour/horaire + note."""
from typing import Annotated, List, Literal, Optional

from pydantic import Field

from ..core.ids import default_item_id, uuid
from ..core.schemas import InspectorField, select_options
from .base import Background, ElementTypography, PropsModel, background_field, color_field


class OpeningHour(PropsModel):
    id: str
    label: str
    value: str
    label_color: Optional[str] = None
    value_color: Optional[str] = None


class OpeningHoursProps(PropsModel):
    headline: Optional[str] = None
    subheadline: Optional[str] = None
    headline_color: Optional[str] = None
    subheadline_color: Optional[str] = None
    label_color: Optional[str] = None
    value_color: Optional[str] = None
    note_color: Optional[str] = None
    card_bg_color: Optional[str] = None
    card_border_color: Optional[str] = None
    layout: Optional[Literal["twoColumn", "stack"]] = None
    note: Optional[str] = None
    background: Optional[Background] = None
    hours: Annotated[List[OpeningHour], Field(min_length=1, max_length=10)]
    typography: ElementTypography = None


_WEEK = [
    ("Montag", "08:00 – 18:00"),
    ("Dienstag", "08:00 – 18:00"),
    ("Mittwoch", "08:00 – 16:00"),
    ("Donnerstag", "08:00 – 18:00"),
    ("Freitag", "08:00 – 14:00"),
]

OPENING_HOURS_DEFAULTS = {
    "headline": "Öffnungszeiten",
    "subheadline": "Wir sind zu folgenden Zeiten für Sie da.",
    "layout": "twoColumn",
    "note": "Termine nach Vereinbarung. Bitte rufen Sie uns an oder nutzen Sie das Kontaktformular.",
    "background": "none",
    "hours": [
        {"id": default_item_id("hours", i), "label": label, "value": value}
        for i, (label, value) in enumerate(_WEEK)
    ],
}


def create_opening_hour() -> dict:
    return {"id": uuid(), "label": "Montag", "value": "08:00 – 18:00"}


OPENING_HOURS_INSPECTOR_FIELDS: List[InspectorField] = [
    InspectorField(key="headline", label="Headline", type="text", placeholder="Öffnungszeiten"),
    InspectorField(key="subheadline", label="Subheadline", type="text"),
    InspectorField(
        key="layout", label="Layout", type="select",
        options=select_options(("twoColumn", "Zwei Spalten"), ("stack", "Stack")),
    ),
    InspectorField(key="note", label="Hinweis (optional)", type="textarea", placeholder="z.B. Termine nach Vereinbarung"),
    background_field(),
    color_field("headlineColor", "Headline Farbe", "#111111"),
    color_field("labelColor", "Label Farbe", "#111111"),
    color_field("valueColor", "Wert Farbe", "#666666"),
    color_field("noteColor", "Hinweis Farbe", "#666666"),
]
