"""
Sliding window modules (2-sash, 2-sash + net, 3-track, 3-sash).

Only W, H and qty. The sash count is fixed by the module itself, so the
form never asks for panels.
"""

from .base import BaseModule
from ..schemas import FieldRequirements, FrameParameters


class SlidingModule(BaseModule):

    MODULE_IDS = (
        "M2_Sliding_2Sash",
        "M3_Sliding_2Sash_Net",
        "M4_Sliding_3Track",
        "M5_Sliding_3Sash",
    )

    KEYWORDS = {
        "M2_Sliding_2Sash": (("sliding", "standard 2-sash"),),
        "M3_Sliding_2Sash_Net": (("sliding", "2-sash", "fixed net"),),
        "M4_Sliding_3Track": (("sliding", "3-track"),),
        "M5_Sliding_3Sash": (("sliding", "3-sash", "all-glass"),),
    }

    REQUIREMENTS = FieldRequirements()
    PARAMETERS = FrameParameters

    def build_parameters(self, module_id, entry, unit):
        return FrameParameters(
            qty=self.parse_quantity(entry),
            W=self.parse_length(entry.width, unit),
            H=self.parse_length(entry.height, unit),
        )
