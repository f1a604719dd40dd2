"""Bloc FAQ — questions/réponses en accordéon, dans le panel intérieur."""
from typing import Annotated, List, Literal, Optional

from pydantic import Field

from ..core.ids import default_item_id, uuid
from ..core.schemas import EditableElement, InspectorField
from .base import ElementTypography, PropsModel, color_field
from .panel import PanelProps


class FaqItem(PropsModel):
    id: str
    question: str
    answer: str
    question_color: Optional[str] = None
    answer_color: Optional[str] = None


class FaqProps(PanelProps):
    headline: Optional[str] = None
    headline_color: Optional[str] = None
    question_color: Optional[str] = None
    answer_color: Optional[str] = None
    items: Annotated[List[FaqItem], Field(min_length=1, max_length=20)]
    variant: Optional[Literal["default", "soft"]] = None
    typography: ElementTypography = None


_QUESTIONS = [
    (
        "Wie lange dauert eine Behandlung?",
        "Eine Behandlungseinheit dauert in der Regel 30-60 Minuten, abhängig von der Art der "
        "Therapie und Ihren individuellen Bedürfnissen.",
    ),
    (
        "Werden die Kosten von der Krankenkasse übernommen?",
        "Ja, wir arbeiten mit allen gesetzlichen und privaten Krankenkassen zusammen. Die "
        "Kostenübernahme hängt von Ihrer Versicherung und der Art der Behandlung ab.",
    ),
    (
        "Brauche ich eine Überweisung vom Arzt?",
        "Für die meisten Behandlungen benötigen Sie eine ärztliche Verordnung. Bei privaten "
        "Behandlungen ist keine Überweisung erforderlich.",
    ),
    (
        "Wie kann ich einen Termin vereinbaren?",
        "Sie können einen Termin telefonisch, per E-Mail oder über unser Online-Buchungssystem "
        "vereinbaren. Wir bemühen uns, Ihnen zeitnah einen passenden Termin anzubieten.",
    ),
    (
        "Was sollte ich zum ersten Termin mitbringen?",
        "Bitte bringen Sie Ihre Versichertenkarte, einen gültigen Ausweis und, falls vorhanden, "
        "ärztliche Befunde oder Verordnungen mit.",
    ),
]

FAQ_DEFAULTS = {
    "headline": "Häufige Fragen",
    "variant": "default",
    "items": [
        {"id": default_item_id("faq", i), "question": question, "answer": answer}
        for i, (question, answer) in enumerate(_QUESTIONS)
    ],
}


def create_faq_item() -> dict:
    return {"id": uuid(), "question": "Neue Frage?", "answer": "Antwort hier eingeben..."}


FAQ_INSPECTOR_FIELDS: List[InspectorField] = [
    InspectorField(
        key="headline", label="Überschrift", type="text",
        placeholder="Überschrift eingeben", required=False, group="basics",
    ),
    color_field("headlineColor", "Überschrift Farbe", "#111111", group="design"),
    color_field("questionColor", "Frage Farbe", "#111111", group="design"),
    color_field("answerColor", "Antwort Farbe", "#666666", group="design"),
]

FAQ_ELEMENTS: List[EditableElement] = [
    EditableElement(id="faq.headline", label="Überschrift", path="headline", supports_typography=True, supports_shadow=True),
    EditableElement(id="faq.question", label="Frage", path="items.question", supports_typography=True),
    EditableElement(id="faq.answer", label="Antwort", path="items.answer", supports_typography=True),
    EditableElement(id="faq.panel", label="Panel", path="", supports_shadow=True),
]
