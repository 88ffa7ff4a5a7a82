"""
Curtain wall window (advanced grid) module.

W × H facade split into an N_v × N_h grid of panels. Either count defaults
to a single panel.
"""

from .base import BaseModule
from ..schemas import CurtainWallParameters, FieldRequirements


class CurtainWallModule(BaseModule):

    MODULE_IDS = ("M9_Curtain_Wall_Grid",)

    KEYWORDS = {
        "M9_Curtain_Wall_Grid": (("curtain wall", "advanced grid"),),
    }

    REQUIREMENTS = FieldRequirements(
        requires_vertical_panels=True,
        requires_horizontal_panels=True,
        panel_label="Vertical Panels",
    )
    PARAMETERS = CurtainWallParameters

    def build_parameters(self, module_id, entry, unit):
        return CurtainWallParameters(
            qty=self.parse_quantity(entry),
            W=self.parse_length(entry.width, unit),
            H=self.parse_length(entry.height, unit),
            N_v=self.parse_count(entry.vertical_panel_count),
            N_h=self.parse_count(entry.horizontal_panel_count),
        )
