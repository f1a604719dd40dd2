"""
faq, team, gallery et imageSlider. Schéma, defaults et champs d'inspecteur sont injectés
dans la définition du bloc par le registry (enable_inner_panel=True).
"""
from typing import Any, List, Literal, Optional

from ..core.schemas import InspectorField, ShowWhen, select_options
from .base import PropsModel


class PanelProps(PropsModel):
    container_background_mode: Optional[Literal["transparent", "color", "gradient"]] = None
    container_background_color: Optional[str] = None
    container_background_gradient_preset: Optional[str] = None
    container_gradient_from: Optional[str] = None
    container_gradient_via: Optional[str] = None
    container_gradient_to: Optional[str] = None
    container_gradient_angle: Optional[float] = None
    container_shadow: Any = None


PANEL_DEFAULTS = {
    "containerBackgroundMode": "transparent",
    "containerBackgroundColor": "",
    "containerBackgroundGradientPreset": "soft",
    "containerGradientFrom": "",
    "containerGradientVia": "",
    "containerGradientTo": "",
    "containerGradientAngle": 135,
    "containerShadow": None,
}

_WHEN_COLOR = ShowWhen(key="containerBackgroundMode", equals="color")
_WHEN_GRADIENT = ShowWhen(key="containerBackgroundMode", equals="gradient")

PANEL_INSPECTOR_FIELDS: List[InspectorField] = [
    InspectorField(
        key="containerBackgroundMode",
        label="Panel Hintergrund",
        type="select",
        options=select_options(("transparent", "Transparent"), ("color", "Farbe"), ("gradient", "Gradient")),
        group="panel",
    ),
    InspectorField(
        key="containerBackgroundColor", label="Panel Farbe", type="color",
        placeholder="#RRGGBB", show_when=_WHEN_COLOR, group="panel",
    ),
    InspectorField(
        key="containerBackgroundGradientPreset",
        label="Gradient Preset",
        type="select",
        options=select_options(
            ("soft", "Soft"), ("aurora", "Aurora"), ("ocean", "Ocean"),
            ("sunset", "Sunset"), ("hero", "Hero"), ("none", "Keine"),
        ),
        show_when=_WHEN_GRADIENT,
        group="panel",
    ),
    InspectorField(
        key="containerGradientFrom", label="Verlauf From", type="color",
        placeholder="#RRGGBB", show_when=_WHEN_GRADIENT, group="panel",
    ),
    InspectorField(
        key="containerGradientVia", label="Verlauf Via", type="color",
        placeholder="#RRGGBB", show_when=_WHEN_GRADIENT, group="panel",
    ),
    InspectorField(
        key="containerGradientTo", label="Verlauf To", type="color",
        placeholder="#RRGGBB", show_when=_WHEN_GRADIENT, group="panel",
    ),
    InspectorField(
        key="containerGradientAngle", label="Winkel", type="number",
        placeholder="135", show_when=_WHEN_GRADIENT, group="panel",
    ),
]
