"""
Length unit normalization.

Every length leaves the pipeline in millimetres. Text that does not parse
as a number converts as 0 so a half-filled form row still produces output;
rejecting bad input is the form's job, not ours.
"""

import enum
import math
from typing import Union


class Unit(str, enum.Enum):
    MM = "mm"
    CM = "cm"
    M = "m"
    FT = "ft"
    IN = "in"


# Multiplicative factor to millimetres
MM_PER_UNIT = {
    Unit.MM: 1.0,
    Unit.CM: 10.0,
    Unit.M: 1000.0,
    Unit.FT: 304.8,
    Unit.IN: 25.4,
}


def to_millimeters(value: float, unit: Union[Unit, str]) -> float:
    """Convert a length in `unit` to millimetres."""
    return value * MM_PER_UNIT[Unit(unit)]


def parse_number(value, default: float = 0.0) -> float:
    """
    Parse a numeric form value. Returns `default` for None, empty,
    non-numeric, non-finite and zero input (a blank quantity means one,
    not zero).
    """
    if value is None:
        return default
    try:
        number = float(str(value).strip())
    except (ValueError, TypeError):
        return default
    if not math.isfinite(number) or number == 0:
        return default
    return number


def parse_and_convert(text, unit: Union[Unit, str]) -> float:
    """Parse `text` as a length in `unit` and return millimetres. Never raises."""
    return to_millimeters(parse_number(text, default=0.0), unit)
