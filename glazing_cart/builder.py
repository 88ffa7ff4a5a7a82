"""
Parameter builder: measurement rows to normalized specifications.

Never blocks on a row: an unresolved module is tagged with its placeholder
id and sent on, and bad numbers fall back to 0 (lengths) or 1 (counts).
"""

import logging
from typing import Iterable, List, Optional, Union

from .modules import registry
from .resolver import HINT_KEY_CATEGORIES, normalize_label, resolve_category
from .schemas import (
    CasementParameters,
    Category,
    CategoryHints,
    CurtainWallParameters,
    NetParameters,
    NormalizedSpecification,
    RawMeasurementEntry,
)
from .units import Unit

logger = logging.getLogger(__name__)


def resolve_module_id(category, raw_type: str) -> str:
    """
    Registry lookup first, then keyword matching inside an enabled
    category, then the category's placeholder id.
    """
    module_id = registry.module_id_for(category, raw_type)
    if module_id is not None:
        return module_id

    if registry.is_category_enabled(category):
        module_id = registry.match_module_by_keywords(category, raw_type)
        if module_id is not None:
            logger.info("Type %r matched module %s by keywords", raw_type, module_id)
            return module_id

    module_id = registry.placeholder_module_id(category)
    logger.warning("No module for type %r in %s, using %s",
                   raw_type, Category(category).value, module_id)
    return module_id


def build_specification(entry: RawMeasurementEntry, category,
                        unit: Union[Unit, str] = Unit.MM) -> NormalizedSpecification:
    """Build the normalized specification for one measurement row."""
    category = Category(category)
    unit = Unit(unit)
    module_id = resolve_module_id(category, entry.type)
    parameters = registry.get_module(module_id).build_parameters(module_id, entry, unit)
    return NormalizedSpecification(
        category=category,
        glazing_type_label=normalize_label(entry.type, category),
        module_id=module_id,
        parameters=parameters,
    )


def build_specifications(entries: Iterable[RawMeasurementEntry],
                         hints: Optional[CategoryHints] = None,
                         unit: Union[Unit, str] = Unit.MM) -> List[NormalizedSpecification]:
    """Resolve each row's category, then build it. One specification per row, same order."""
    return [
        build_specification(entry, resolve_category(entry.type, hints), unit)
        for entry in entries
    ]


def _text(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def specification_to_entry(spec: NormalizedSpecification) -> RawMeasurementEntry:
    """
    Turn a stored specification back into a form row for editing.
    Lengths come back in millimetres.
    """
    params = spec.parameters
    if isinstance(params, NetParameters):
        width, height = params.in_to_in_width, params.in_to_in_height
    else:
        width, height = params.W, params.H

    fields = {
        "type": spec.glazing_type_label,
        "width": _text(width),
        "height": _text(height),
        "quantity": _text(params.qty),
        "panel_count": "1",
    }
    if isinstance(params, CasementParameters):
        fields["panel_count"] = _text(params.N)
        fields["opening_panel_count"] = _text(params.O)
    elif isinstance(params, CurtainWallParameters):
        fields["vertical_panel_count"] = _text(params.N_v)
        fields["horizontal_panel_count"] = _text(params.N_h)

    # Prefer the registry value so the row re-resolves exactly
    for t in registry.enabled_types(spec.category):
        if t.module_id == spec.module_id:
            fields["type"] = t.value
            break

    return RawMeasurementEntry(**fields)


def hints_from_specifications(specs: Iterable[NormalizedSpecification]) -> CategoryHints:
    """Rebuild the selection-step hints from stored specifications, without duplicates."""
    keys_by_category = {category: key for key, category in HINT_KEY_CATEGORIES.items()}
    collected = {key: [] for key in HINT_KEY_CATEGORIES}
    for spec in specs:
        key = keys_by_category.get(spec.category)
        if key is None:
            continue  # partitions have no selection-step group
        if spec.glazing_type_label not in collected[key]:
            collected[key].append(spec.glazing_type_label)
    return CategoryHints(**collected)
