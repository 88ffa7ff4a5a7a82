"""
Placeholder module for categories and types with no engine module yet.

Rows still go out as plain W × H × qty items tagged with the placeholder
id; the engine decides what to do with them.
"""

import logging

from .base import BaseModule
from ..schemas import FieldRequirements, FrameParameters

logger = logging.getLogger(__name__)

DOOR_PLACEHOLDER = "UM_Door_Placeholder"
PARTITION_PLACEHOLDER = "UM_Partition_Placeholder"
UNKNOWN_MODULE = "UNKNOWN_MODULE"


class PlaceholderModule(BaseModule):

    MODULE_IDS = (DOOR_PLACEHOLDER, PARTITION_PLACEHOLDER, UNKNOWN_MODULE)

    REQUIREMENTS = FieldRequirements()
    PARAMETERS = FrameParameters

    def build_parameters(self, module_id, entry, unit):
        logger.info("Building placeholder parameters for %s (type=%r)", module_id, entry.type)
        return FrameParameters(
            qty=self.parse_quantity(entry),
            W=self.parse_length(entry.width, unit),
            H=self.parse_length(entry.height, unit),
        )
