"""Bloc Contact Form — champs configurables, destinataires par marque, consentement RGPD."""
from typing import Annotated, ClassVar, List, Literal, Optional, Tuple

from pydantic import Field

from ..core.ids import default_item_id, uuid
from ..core.schemas import EditableElement, InspectorField, select_options
from .base import ElementTypography, PropsModel, color_field

ContactFieldType = Literal["name", "email", "phone", "subject", "message"]

# type → (label, placeholder, required)
_FIELD_PRESETS = {
    "name": ("Name", "Ihr Name", True),
    "email": ("E-Mail", "ihre@email.de", True),
    "phone": ("Telefon", "Optional", False),
    "subject": ("Betreff", "Betreff", False),
    "message": ("Nachricht", "Ihre Nachricht...", True),
}


class ContactFormField(PropsModel):
    id: str
    type: ContactFieldType
    label: str
    placeholder: Optional[str] = None
    required: bool


class ContactRecipients(PropsModel):
    physiotherapy: Optional[str] = None
    physio_konzept: Optional[str] = Field(None, alias="physio-konzept")


class PrivacyLink(PropsModel):
    label: str
    href: str


class ContactInfoCard(PropsModel):
    id: str
    icon: Literal["clock", "phone", "mapPin", "mail"]
    title: str
    value: str


class ContactFormProps(PropsModel):
    applied_defaults: ClassVar[Tuple[str, ...]] = ("require_consent",)

    heading: str
    text: Optional[str] = None
    heading_color: Optional[str] = None
    text_color: Optional[str] = None
    label_color: Optional[str] = None
    input_text_color: Optional[str] = None
    input_bg_color: Optional[str] = None
    input_border_color: Optional[str] = None
    privacy_text_color: Optional[str] = None
    privacy_link_color: Optional[str] = None
    consent_label_color: Optional[str] = None
    button_text_color: Optional[str] = None
    button_bg_color: Optional[str] = None
    button_hover_bg_color: Optional[str] = None
    button_border_color: Optional[str] = None
    recipients: Optional[ContactRecipients] = None
    fields: Annotated[List[ContactFormField], Field(min_length=1)]
    submit_label: str
    success_title: str
    success_text: str
    error_text: str
    privacy_text: str
    privacy_link: PrivacyLink
    require_consent: bool = False
    consent_label: Optional[str] = None
    consent_required_text: Optional[str] = None
    layout: Optional[Literal["stack", "split"]] = None
    button_preset: Optional[str] = None
    typography: ElementTypography = None


def create_contact_form_field(type: ContactFieldType) -> dict:
    label, placeholder, required = _FIELD_PRESETS[type]
    return {"id": uuid(), "type": type, "label": label, "placeholder": placeholder, "required": required}


def create_contact_info_card() -> dict:
    return {"id": uuid(), "icon": "mail", "title": "Neue Info", "value": "Wert eingeben"}


def _default_field(index: int, type: str) -> dict:
    label, placeholder, required = _FIELD_PRESETS[type]
    return {
        "id": default_item_id("field", index),
        "type": type,
        "label": label,
        "placeholder": placeholder,
        "required": required,
    }


CONTACT_FORM_DEFAULTS = {
    "heading": "Kontaktieren Sie uns",
    "text": "Wir freuen uns auf Ihre Nachricht und melden uns schnellstmöglich zurück.",
    "recipients": {
        "physiotherapy": "info@physiotherapie-kroll.de",
        "physio-konzept": "info@physio-konzept.de",
    },
    "fields": [_default_field(i, t) for i, t in enumerate(("name", "email", "phone", "message"))],
    "submitLabel": "Nachricht senden",
    "successTitle": "Nachricht gesendet",
    "successText": "Vielen Dank für Ihre Nachricht. Wir melden uns schnellstmöglich bei Ihnen zurück.",
    "errorText": (
        "Es ist ein Fehler aufgetreten. Bitte versuchen Sie es später erneut oder kontaktieren "
        "Sie uns direkt per E-Mail."
    ),
    "privacyText": (
        "Wir verwenden Ihre Angaben zur Bearbeitung Ihrer Anfrage. Weitere Informationen finden "
        "Sie in der Datenschutzerklärung."
    ),
    "privacyLink": {"label": "Datenschutzerklärung", "href": "/datenschutz"},
    "requireConsent": False,
    "consentLabel": "Ich akzeptiere die Datenschutzerklärung",
    "layout": "stack",
}

CONTACT_FORM_INSPECTOR_FIELDS: List[InspectorField] = [
    InspectorField(key="heading", label="Überschrift", type="text", placeholder="Kontaktieren Sie uns", required=True),
    InspectorField(key="text", label="Text", type="textarea"),
    InspectorField(key="recipients.physiotherapy", label="Empfänger (Physiotherapie)", type="text", placeholder="info@..."),
    InspectorField(key="recipients.physio-konzept", label="Empfänger (Physio-Konzept)", type="text", placeholder="info@..."),
    InspectorField(key="submitLabel", label="Button Text", type="text", placeholder="Nachricht senden", required=True),
    InspectorField(key="successTitle", label="Erfolg Titel", type="text"),
    InspectorField(key="successText", label="Erfolg Text", type="textarea"),
    InspectorField(key="errorText", label="Fehler Text", type="textarea"),
    InspectorField(key="privacyText", label="Datenschutz Text", type="textarea"),
    InspectorField(key="privacyLink.label", label="Datenschutz Link Text", type="text"),
    InspectorField(key="privacyLink.href", label="Datenschutz Link", type="url", placeholder="/datenschutz"),
    InspectorField(key="requireConsent", label="Zustimmung erforderlich", type="boolean"),
    InspectorField(
        key="consentLabel", label="Zustimmungs-Text", type="text",
        show_when={"key": "requireConsent", "equals": True},
    ),
    InspectorField(
        key="layout", label="Layout", type="select",
        options=select_options(("stack", "Gestapelt"), ("split", "Geteilt")),
    ),
    color_field("headingColor", "Überschrift Farbe", "#111111"),
    color_field("labelColor", "Label Farbe", "#111111"),
    color_field("buttonBgColor", "Button Hintergrund", "#111111"),
    color_field("buttonTextColor", "Button Textfarbe", "#ffffff"),
]

CONTACT_FORM_ELEMENTS: List[EditableElement] = [
    EditableElement(id="contactForm.heading", label="Überschrift", path="heading", supports_typography=True, supports_shadow=True),
    EditableElement(id="contactForm.text", label="Text", path="text", supports_typography=True),
    EditableElement(id="contactForm.submit", label="Button", path="submitLabel", supports_typography=True, supports_shadow=True),
]
