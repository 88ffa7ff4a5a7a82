"""
Module registry: which glazing categories and types are switched on, and
which calculation-engine module serves each one.

MODULE_CONFIG is the single source of truth for "is this feature on": a type
is only offered to users, or accepted from input, if module_id_for() returns
an id for it. Enabling a module is a deployment-time change to this table.

To enable a module:
1. Make sure the engine implements it
2. Add (or extend) a BaseModule family for it in this package
3. Set enabled=True and the module_id on its row below
"""

from types import MappingProxyType
from typing import Optional, Union

from ..schemas import Category, CategoryConfig, FieldRequirements, TypeDescriptor
from .base import BaseModule
from .casement import CasementModule
from .curtain_wall import CurtainWallModule
from .net import NetModule
from .placeholder import (
    DOOR_PLACEHOLDER,
    PARTITION_PLACEHOLDER,
    UNKNOWN_MODULE,
    PlaceholderModule,
)
from .sliding import SlidingModule


def _type(value: str, module_id: Optional[str] = None, label: Optional[str] = None) -> TypeDescriptor:
    return TypeDescriptor(
        enabled=module_id is not None,
        module_id=module_id,
        label=label or value,
        value=value,
    )


MODULE_CONFIG = MappingProxyType({
    Category.WINDOW: CategoryConfig(enabled=True, name="Window", types=(
        _type("Casement Window (D/Curve)", "M1_Casement_DCurve"),
        _type("Sliding Window (Standard 2-Sash)", "M2_Sliding_2Sash"),
        _type("Sliding Window (2-Sash + Fixed Net)", "M3_Sliding_2Sash_Net"),
        _type("Sliding Window (3-Track, 2 Glass + 1 Net)", "M4_Sliding_3Track"),
        _type("Sliding Window (3-Sash, All-Glass)", "M5_Sliding_3Sash"),
    )),
    # Not implemented by the engine yet, every row goes out as UM_Door_Placeholder
    Category.DOOR: CategoryConfig(enabled=False, name="Door", types=(
        _type("sliding-door", label="Sliding Door"),
        _type("french-door", label="French Door"),
        _type("patio-door", label="Patio Door"),
        _type("security-door", label="Security Door"),
        _type("entrance-door", label="Entrance Door"),
    )),
    Category.NET: CategoryConfig(enabled=True, name="Net", types=(
        _type("1125/26 Net (1132-panel)", "M6_Net_1125_26"),
        _type("EBM-net (1125/26 Frame)", "M7_EBM_Net_1125_26"),
        _type("EBM-Net (U-Channel)", "M8_EBM_Net_UChannel"),
    )),
    Category.CURTAIN_WALL: CategoryConfig(enabled=True, name="Curtain Wall", types=(
        _type("Curtain Wall Window (Advanced Grid)", "M9_Curtain_Wall_Grid"),
    )),
    # Not implemented by the engine yet, every row goes out as UM_Partition_Placeholder
    Category.PARTITION: CategoryConfig(enabled=False, name="Partition", types=(
        _type("glass-partition", label="Glass Partition"),
        _type("office-partition", label="Office Partition"),
    )),
})

PLACEHOLDER_MODULE_IDS = MappingProxyType({
    Category.DOOR: DOOR_PLACEHOLDER,
    Category.PARTITION: PARTITION_PLACEHOLDER,
})


def _category_config(category: Union[Category, str]) -> Optional[CategoryConfig]:
    try:
        return MODULE_CONFIG.get(Category(category))
    except ValueError:
        return None


def enabled_categories() -> list[Category]:
    """Categories switched on, in table order."""
    return [category for category, config in MODULE_CONFIG.items() if config.enabled]


def enabled_types(category) -> list[TypeDescriptor]:
    """Enabled types of a category. Empty for a disabled or unknown category."""
    config = _category_config(category)
    if config is None or not config.enabled:
        return []
    return [t for t in config.types if t.enabled]


def is_category_enabled(category) -> bool:
    config = _category_config(category)
    return config is not None and config.enabled


def is_type_enabled(category, type_value: str) -> bool:
    return any(t.value == type_value for t in enabled_types(category))


def module_id_for(category, type_value: str) -> Optional[str]:
    """
    Engine module id for a category/type pair, or None when the category is
    disabled or unknown, the type is unknown, or the type is disabled.
    """
    for t in enabled_types(category):
        if t.value == type_value:
            return t.module_id
    return None


def find_type(type_value: str) -> Optional[tuple[Category, TypeDescriptor]]:
    """Exact match of a type value across every enabled category."""
    for category in enabled_categories():
        for t in enabled_types(category):
            if t.value == type_value:
                return category, t
    return None


def placeholder_module_id(category) -> str:
    """Module id used for rows whose category/type has no real module."""
    try:
        return PLACEHOLDER_MODULE_IDS.get(Category(category), UNKNOWN_MODULE)
    except ValueError:
        return UNKNOWN_MODULE


# --- Module families: module_id -> family instance ---

_PLACEHOLDER = PlaceholderModule()

MODULE_FAMILIES: MappingProxyType = MappingProxyType({
    module_id: family
    for family in (CasementModule(), SlidingModule(), NetModule(), CurtainWallModule(), _PLACEHOLDER)
    for module_id in family.MODULE_IDS
})


def get_module(module_id: Optional[str]) -> BaseModule:
    """Family for a module id. Unknown and placeholder ids get the placeholder family."""
    return MODULE_FAMILIES.get(module_id, _PLACEHOLDER)


def require_module(module_id: str) -> BaseModule:
    """Like get_module, but raises ValueError for an id nothing serves."""
    if module_id not in MODULE_FAMILIES:
        raise ValueError(
            f"No module registered for id: {module_id}. "
            f"Available: {list(MODULE_FAMILIES.keys())}"
        )
    return MODULE_FAMILIES[module_id]


def has_module(module_id: str) -> bool:
    """Check if a family serves a module id."""
    return module_id in MODULE_FAMILIES


def list_modules() -> list[str]:
    """All module ids with a family, placeholders included."""
    return list(MODULE_FAMILIES.keys())


def requirements_for(module_id: Optional[str]) -> FieldRequirements:
    """Form field requirements for a module id (default set for unknown ids)."""
    return get_module(module_id).requirements(module_id)


def match_module_by_keywords(category, raw_type: str) -> Optional[str]:
    """
    Loose match of a free-text type against the enabled module ids of an
    enabled category, e.g. "casement window d-curve" -> M1_Casement_DCurve.
    """
    candidates = {t.module_id for t in enabled_types(category)}
    for family in dict.fromkeys(MODULE_FAMILIES.values()):
        module_id = family.match_keywords(raw_type)
        if module_id in candidates:
            return module_id
    return None
