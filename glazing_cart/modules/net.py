"""
Insect net modules (1125/26 net, EBM-net on 1125/26 frame, EBM-net on U-channel).

Nets are measured inside-to-inside of the existing window frame, so the
dimensions go out as in_to_in_width / in_to_in_height instead of W / H.
"""

from .base import BaseModule
from ..schemas import FieldRequirements, NetParameters


class NetModule(BaseModule):

    MODULE_IDS = (
        "M6_Net_1125_26",
        "M7_EBM_Net_1125_26",
        "M8_EBM_Net_UChannel",
    )

    KEYWORDS = {
        "M6_Net_1125_26": (("1125/26", "1132"),),
        "M7_EBM_Net_1125_26": (("ebm-net", "1125/26"),),
        "M8_EBM_Net_UChannel": (("ebm-net", "u-channel"),),
    }

    REQUIREMENTS = FieldRequirements(
        requires_inside_to_inside=True,
        width_label="Inside-to-Inside Width",
        height_label="Inside-to-Inside Height",
    )
    PARAMETERS = NetParameters

    def build_parameters(self, module_id, entry, unit):
        return NetParameters(
            qty=self.parse_quantity(entry),
            in_to_in_width=self.parse_length(entry.width, unit),
            in_to_in_height=self.parse_length(entry.height, unit),
        )
