"""
Category/type resolver tests.

1-3. Exact registry match dominates hints
4-7. Hint substring fallback and the Window default
8-10. Display labels
"""

import pytest

from glazing_cart.modules import registry
from glazing_cart.resolver import category_from_hint_key, normalize_label, resolve_category
from glazing_cart.schemas import Category, CategoryHints


ENABLED_TYPES = [
    (category, t.value)
    for category in registry.enabled_categories()
    for t in registry.enabled_types(category)
]

MISLEADING_HINTS = CategoryHints(
    windows=["net", "grid"],
    doors=["window", "sliding"],
    skylights=["window", "casement"],
    glass_panels=["window"],
)


# ============================================================
# Exact match
# ============================================================

@pytest.mark.parametrize("category,value", ENABLED_TYPES)
def test_exact_match_returns_registry_category(category, value):
    assert resolve_category(value, CategoryHints()) == category


@pytest.mark.parametrize("category,value", ENABLED_TYPES)
def test_exact_match_beats_misleading_hints(category, value):
    assert resolve_category(value, MISLEADING_HINTS) == category


def test_disabled_category_types_do_not_exact_match():
    """Door types are disabled, so 'french-door' is not an exact hit."""
    assert resolve_category("french-door", CategoryHints()) == Category.WINDOW


# ============================================================
# Fallbacks
# ============================================================

def test_hint_contained_in_type(selection_hints):
    assert resolve_category("Custom French Door 2-leaf", selection_hints) == Category.DOOR
    assert resolve_category("EBM screen, brown", selection_hints) == Category.NET
    assert resolve_category("Facade grid bay 3", selection_hints) == Category.CURTAIN_WALL


def test_type_contained_in_hint():
    hints = CategoryHints(skylights=["Fixed skylight net"])
    assert resolve_category("skylight", hints) == Category.NET


def test_first_hinted_category_wins():
    """Ambiguous matches go to the first hinted group (windows, doors, skylights, glass panels)."""
    hints = CategoryHints(doors=["sliding"], skylights=["sliding"])
    assert resolve_category("Sliding something", hints) == Category.DOOR


@pytest.mark.parametrize("raw_type", ["Bay Window XL", "", "zzz", "   "])
def test_unknown_type_defaults_to_window(raw_type):
    assert resolve_category(raw_type, CategoryHints()) == Category.WINDOW
    assert resolve_category(raw_type) == Category.WINDOW


def test_blank_hint_labels_never_match():
    hints = CategoryHints(doors=["", "  "])
    assert resolve_category("Anything", hints) == Category.WINDOW


def test_category_from_hint_key():
    assert category_from_hint_key("windows") == Category.WINDOW
    assert category_from_hint_key("doors") == Category.DOOR
    assert category_from_hint_key("skylights") == Category.NET
    assert category_from_hint_key("glassPanels") == Category.CURTAIN_WALL
    assert category_from_hint_key("glass_panels") == Category.CURTAIN_WALL
    assert category_from_hint_key("roofs") == Category.WINDOW


# ============================================================
# Labels
# ============================================================

def test_normalize_label_appends_missing_keyword():
    assert normalize_label("Bay", Category.WINDOW) == "Bay Window"
    assert normalize_label("french-door", Category.DOOR) == "french-door"
    assert normalize_label("1125/26 Net (1132-panel)", Category.NET) == "1125/26 Net (1132-panel)"
    assert normalize_label("Advanced Grid", "Curtain Wall") == "Advanced Grid Curtain Wall"
    assert normalize_label("  Casement WINDOW ", Category.WINDOW) == "Casement WINDOW"


@pytest.mark.parametrize("raw_type", ["Bay", "", "Sliding Window (Standard 2-Sash)", "grid", "curtain"])
@pytest.mark.parametrize("category", list(Category))
def test_normalize_label_is_idempotent(raw_type, category):
    once = normalize_label(raw_type, category)
    assert normalize_label(once, category) == once
