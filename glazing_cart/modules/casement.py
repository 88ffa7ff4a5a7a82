"""
Casement window (D/Curve) module.

W × H frame with N panels, O of which open. Opening sashes default to the
full panel count when the form leaves them blank.
"""

from .base import BaseModule
from ..schemas import CasementParameters, FieldRequirements


class CasementModule(BaseModule):

    MODULE_IDS = ("M1_Casement_DCurve",)

    KEYWORDS = {
        "M1_Casement_DCurve": (("casement", "d/curve"), ("casement", "d-curve")),
    }

    REQUIREMENTS = FieldRequirements(
        requires_panel=True,
        requires_opening_panels=True,
        panel_label="Panels (N)",
    )
    PARAMETERS = CasementParameters

    def build_parameters(self, module_id, entry, unit):
        panels = self.parse_count(entry.panel_count)
        return CasementParameters(
            qty=self.parse_quantity(entry),
            W=self.parse_length(entry.width, unit),
            H=self.parse_length(entry.height, unit),
            N=panels,
            O=self.parse_count(entry.opening_panel_count, default=panels),
        )
