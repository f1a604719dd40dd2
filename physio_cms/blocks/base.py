"""
Blocs de base — modèle de props commun + types partagés (tier édition).

Le tier édition est volontairement permissif : un texte vide reste valide
pendant la saisie, un select vidé redevient "non renseigné". Les règles
strictes vivent dans physio_cms.validation.publish.
"""
from typing import Annotated, Any, ClassVar, Dict, Literal, Optional, Tuple, Union

from pydantic import BeforeValidator, ConfigDict, Field

from ..core.schemas import CamelModel, InspectorField, InspectorGroup, select_options


def blank_to_none(value: Any) -> Any:
    """Chaîne vide / None → non renseigné (un select vidé dans l'éditeur n'est pas une erreur)."""
    if value is None or value == "":
        return None
    return value


def blank_or_number(value: Any) -> Any:
    """Comme blank_to_none, + "3" → 3 (les selects de l'inspecteur envoient des chaînes)."""
    value = blank_to_none(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return value
    return value


def optional_int(ge: int, le: int):
    """Entier borné, "" / None acceptés comme non renseigné."""
    return Annotated[
        Optional[Annotated[int, Field(ge=ge, le=le)]],
        BeforeValidator(blank_to_none),
    ]


# Colonnes de grille : 2 | 3 | 4
GridColumns = Annotated[Optional[Literal[2, 3, 4]], BeforeValidator(blank_or_number)]

Background = Literal["none", "muted", "gradient"]


class PropsModel(CamelModel):
    """
    Base des schémas de props — clés camelCase, clés inconnues ignorées.

    Les props parsées sont relues avec exclude_unset : seules les clés fournies
    reviennent. `applied_defaults` liste les champs dont la valeur par défaut
    doit quand même apparaître dans le résultat du parse.
    """
    model_config = ConfigDict(extra="ignore")

    applied_defaults: ClassVar[Tuple[str, ...]] = ()

    def model_post_init(self, __context: Any) -> None:
        if self.applied_defaults:
            self.__pydantic_fields_set__.update(self.applied_defaults)

    def dump(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True)


# ── Typographie par élément ─────────────────────────────────────────────────

class TypographySettings(PropsModel):
    font_family: Optional[Literal["sans", "serif"]] = None
    font_weight: Annotated[
        Optional[Literal[300, 400, 500, 600, 700]], BeforeValidator(blank_or_number)
    ] = None
    font_size: Optional[Literal["xs", "sm", "base", "lg", "xl", "2xl", "3xl", "4xl"]] = None
    line_height: Optional[Literal["tight", "snug", "normal", "relaxed", "loose"]] = None
    letter_spacing: Optional[Literal["tighter", "tight", "normal", "wide", "wider"]] = None
    italic: Optional[bool] = None


# elementId → réglages
ElementTypography = Optional[Dict[str, Optional[TypographySettings]]]


# ── Médias : référence médiathèque ou URL directe ───────────────────────────

class MediaRef(PropsModel):
    media_id: str


class MediaUrl(PropsModel):
    url: str


MediaValue = Union[MediaRef, MediaUrl]


# ── Helpers inspecteur ──────────────────────────────────────────────────────

def color_field(
    key: str, label: str, placeholder: Optional[str] = None, group: Optional[InspectorGroup] = None,
) -> InspectorField:
    return InspectorField(key=key, label=label, type="color", placeholder=placeholder, group=group)


def background_field() -> InspectorField:
    return InspectorField(
        key="background",
        label="Background",
        type="select",
        options=select_options(("none", "None"), ("muted", "Muted"), ("gradient", "Gradient")),
    )
