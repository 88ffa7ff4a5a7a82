"""
Module registry and field requirement tests.

1-6.   Category / type lookups
7-9.   Invariants and immutability
10-13. Field requirements per module family
14-15. Requirements and parameter builders stay in lock-step
"""

import pytest

from glazing_cart.modules import registry
from glazing_cart.modules.base import BaseModule
from glazing_cart.schemas import (
    CasementParameters,
    Category,
    CurtainWallParameters,
    FieldRequirements,
    FrameParameters,
    ModuleParameters,
    NetParameters,
    RawMeasurementEntry,
    TypeDescriptor,
)
from glazing_cart.units import Unit


ALL_MODULE_IDS = [
    "M1_Casement_DCurve",
    "M2_Sliding_2Sash",
    "M3_Sliding_2Sash_Net",
    "M4_Sliding_3Track",
    "M5_Sliding_3Sash",
    "M6_Net_1125_26",
    "M7_EBM_Net_1125_26",
    "M8_EBM_Net_UChannel",
    "M9_Curtain_Wall_Grid",
]


def _registry_module_ids():
    return [
        t.module_id
        for category in registry.enabled_categories()
        for t in registry.enabled_types(category)
    ]


# ============================================================
# Lookups
# ============================================================

def test_enabled_categories():
    assert registry.enabled_categories() == [Category.WINDOW, Category.NET, Category.CURTAIN_WALL]


def test_enabled_types_for_window():
    values = [t.value for t in registry.enabled_types(Category.WINDOW)]
    assert values == [
        "Casement Window (D/Curve)",
        "Sliding Window (Standard 2-Sash)",
        "Sliding Window (2-Sash + Fixed Net)",
        "Sliding Window (3-Track, 2 Glass + 1 Net)",
        "Sliding Window (3-Sash, All-Glass)",
    ]


def test_disabled_or_unknown_category_has_no_types():
    assert registry.enabled_types(Category.DOOR) == []
    assert registry.enabled_types(Category.PARTITION) == []
    assert registry.enabled_types("Skylight") == []
    assert not registry.is_category_enabled("Skylight")
    assert not registry.is_category_enabled(Category.DOOR)
    assert registry.is_category_enabled("Curtain Wall")


def test_is_type_enabled():
    assert registry.is_type_enabled(Category.NET, "EBM-Net (U-Channel)")
    assert not registry.is_type_enabled(Category.WINDOW, "EBM-Net (U-Channel)")
    assert not registry.is_type_enabled(Category.DOOR, "french-door")


def test_module_id_for():
    assert registry.module_id_for(Category.WINDOW, "Casement Window (D/Curve)") == "M1_Casement_DCurve"
    assert registry.module_id_for("Net", "1125/26 Net (1132-panel)") == "M6_Net_1125_26"
    assert registry.module_id_for(Category.CURTAIN_WALL,
                                  "Curtain Wall Window (Advanced Grid)") == "M9_Curtain_Wall_Grid"


def test_module_id_for_returns_none():
    """Disabled category, unknown type, or a type from another category."""
    assert registry.module_id_for(Category.DOOR, "french-door") is None
    assert registry.module_id_for(Category.WINDOW, "Bay Window") is None
    assert registry.module_id_for(Category.NET, "Casement Window (D/Curve)") is None
    assert registry.module_id_for("Skylight", "anything") is None


def test_registry_covers_all_nine_modules():
    assert sorted(_registry_module_ids()) == sorted(ALL_MODULE_IDS)


def test_placeholder_module_ids():
    assert registry.placeholder_module_id(Category.DOOR) == "UM_Door_Placeholder"
    assert registry.placeholder_module_id(Category.PARTITION) == "UM_Partition_Placeholder"
    assert registry.placeholder_module_id(Category.WINDOW) == "UNKNOWN_MODULE"
    assert registry.placeholder_module_id("nonsense") == "UNKNOWN_MODULE"


# ============================================================
# Invariants
# ============================================================

def test_disabled_categories_expose_no_enabled_types():
    for category, config in registry.MODULE_CONFIG.items():
        if not config.enabled:
            assert not any(t.enabled for t in config.types), category


def test_enabled_type_requires_module_id():
    with pytest.raises(ValueError):
        TypeDescriptor(enabled=True, module_id=None, label="x", value="x")


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        registry.MODULE_CONFIG[Category.DOOR] = None
    with pytest.raises(Exception):
        registry.MODULE_CONFIG[Category.WINDOW].enabled = False


# ============================================================
# Field requirements
# ============================================================

def test_casement_requirements():
    req = registry.requirements_for("M1_Casement_DCurve")
    assert req.requires_panel and req.requires_opening_panels
    assert not req.requires_inside_to_inside
    assert req.panel_label == "Panels (N)"


@pytest.mark.parametrize("module_id", ALL_MODULE_IDS[1:5])
def test_sliding_requirements(module_id):
    assert registry.requirements_for(module_id) == FieldRequirements()


@pytest.mark.parametrize("module_id", ALL_MODULE_IDS[5:8])
def test_net_requirements(module_id):
    req = registry.requirements_for(module_id)
    assert req.requires_inside_to_inside
    assert req.width_label == "Inside-to-Inside Width"
    assert req.height_label == "Inside-to-Inside Height"
    assert not req.requires_panel


def test_curtain_wall_requirements():
    req = registry.requirements_for("M9_Curtain_Wall_Grid")
    assert req.requires_vertical_panels and req.requires_horizontal_panels
    assert req.panel_label == "Vertical Panels"


@pytest.mark.parametrize("module_id", ["UM_Door_Placeholder", "UM_Partition_Placeholder",
                                       "UNKNOWN_MODULE", "M99_Not_Real", None])
def test_default_requirements_for_placeholders_and_unknowns(module_id):
    req = registry.requirements_for(module_id)
    assert req.requires_width and req.requires_height
    assert not any([req.requires_panel, req.requires_opening_panels, req.requires_vertical_panels,
                    req.requires_horizontal_panels, req.requires_inside_to_inside])
    assert (req.width_label, req.height_label, req.panel_label) == ("Width", "Height", "Panel")


def test_require_module_raises_for_unknown_id():
    assert registry.require_module("M2_Sliding_2Sash") is registry.get_module("M2_Sliding_2Sash")
    with pytest.raises(ValueError, match="Available"):
        registry.require_module("M99_Not_Real")


# ============================================================
# Lock-step: every registry module id has requirements AND a builder
# ============================================================

EXPECTED_VARIANT = {
    "M1_Casement_DCurve": CasementParameters,
    "M2_Sliding_2Sash": FrameParameters,
    "M3_Sliding_2Sash_Net": FrameParameters,
    "M4_Sliding_3Track": FrameParameters,
    "M5_Sliding_3Sash": FrameParameters,
    "M6_Net_1125_26": NetParameters,
    "M7_EBM_Net_1125_26": NetParameters,
    "M8_EBM_Net_UChannel": NetParameters,
    "M9_Curtain_Wall_Grid": CurtainWallParameters,
}


@pytest.mark.parametrize("module_id", _registry_module_ids())
def test_every_registry_module_has_family(module_id):
    """Each enabled module id has a dedicated (non-placeholder) family with both tables."""
    assert registry.has_module(module_id)
    family = registry.get_module(module_id)
    assert isinstance(family, BaseModule)
    assert module_id in family.MODULE_IDS
    assert isinstance(family.requirements(module_id), FieldRequirements)

    params = family.build_parameters(module_id, RawMeasurementEntry(width="1", height="1"), Unit.MM)
    assert isinstance(params, ModuleParameters)
    assert type(params) is EXPECTED_VARIANT[module_id]


def test_requirements_match_parameter_keys():
    """What the form asks for is what the builder emits."""
    entry = RawMeasurementEntry(width="1", height="1", panel_count="2",
                                opening_panel_count="1", vertical_panel_count="2",
                                horizontal_panel_count="2")
    for module_id in _registry_module_ids():
        req = registry.requirements_for(module_id)
        keys = set(registry.get_module(module_id).build_parameters(module_id, entry, Unit.MM).model_dump())
        assert "qty" in keys
        assert ("in_to_in_width" in keys) == req.requires_inside_to_inside
        assert ("W" in keys) == (not req.requires_inside_to_inside)
        assert ("N" in keys) == req.requires_panel
        assert ("O" in keys) == req.requires_opening_panels
        assert ("N_v" in keys) == req.requires_vertical_panels
        assert ("N_h" in keys) == req.requires_horizontal_panels


def test_keyword_matching_stays_inside_category():
    assert registry.match_module_by_keywords(Category.WINDOW, "casement window d-curve") == "M1_Casement_DCurve"
    assert registry.match_module_by_keywords(Category.NET, "EBM-net u-channel") == "M8_EBM_Net_UChannel"
    assert registry.match_module_by_keywords(Category.NET, "casement window d-curve") is None
    assert registry.match_module_by_keywords(Category.WINDOW, "bay window") is None
