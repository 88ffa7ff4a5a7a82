"""
Abstract base class for all calculation-module families.

A family owns both halves of a module's contract with the calculation
engine: which measurement fields the form must ask for, and how a filled-in
measurement row becomes that module's parameter record. Keeping both on one
class means the two can't drift apart.

Input: RawMeasurementEntry + Unit
Output: one of the ModuleParameters variants in schemas.py
"""

import logging
from abc import ABC, abstractmethod

from ..schemas import FieldRequirements, ModuleParameters, RawMeasurementEntry
from ..units import Unit, parse_and_convert, parse_number

logger = logging.getLogger(__name__)


class BaseModule(ABC):
    """All module families inherit from this."""

    # Engine module ids served by this family
    MODULE_IDS: tuple = ()

    # module_id -> keyword groups; a type string matching every keyword of a
    # group maps to that module when the exact registry lookup misses
    KEYWORDS: dict = {}

    REQUIREMENTS = FieldRequirements()

    # Parameter record this family builds; stored specifications reload into it
    PARAMETERS = ModuleParameters

    def requirements(self, module_id: str) -> FieldRequirements:
        """Which form fields this module needs, with their display labels."""
        return self.REQUIREMENTS

    @abstractmethod
    def build_parameters(self, module_id: str, entry: RawMeasurementEntry,
                         unit: Unit) -> ModuleParameters:
        """Takes one measurement row, returns the module's parameter record."""
        pass

    # --- Helper methods for all families ---

    def match_keywords(self, raw_type: str):
        """Return the first of this family's module ids whose keywords all appear in raw_type."""
        normalized = raw_type.lower().strip()
        for module_id in self.MODULE_IDS:
            for group in self.KEYWORDS.get(module_id, ()):
                if all(kw in normalized for kw in group):
                    return module_id
        return None

    def parse_length(self, value, unit: Unit) -> float:
        """Parse a length from user input and convert it to millimetres. Bad input is 0."""
        return parse_and_convert(value, unit)

    def parse_count(self, value, default: float = 1.0) -> float:
        """Parse a quantity or panel count. Blank, zero or invalid falls back to default."""
        return parse_number(value, default=default)

    def parse_quantity(self, entry: RawMeasurementEntry) -> float:
        return self.parse_count(entry.quantity, default=1.0)
