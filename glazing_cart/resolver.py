"""
Category/type resolution for measurement rows.

A row's type normally comes straight from the registry's option list, so an
exact match settles it. When it doesn't (the selection step and the registry
use different words), fall back to the labels the user picked on the
project-selection step, then to Window.
"""

import logging
from typing import Optional

from .modules import registry
from .schemas import Category, CategoryHints

logger = logging.getLogger(__name__)

# Selection-step key -> category. The UI calls nets "skylights" and curtain walls "glassPanels".
HINT_KEY_CATEGORIES = {
    "windows": Category.WINDOW,
    "doors": Category.DOOR,
    "skylights": Category.NET,
    "glass_panels": Category.CURTAIN_WALL,
}

_CAMEL_HINT_KEYS = {"glassPanels": "glass_panels"}

LABEL_KEYWORDS = {
    Category.WINDOW: "Window",
    Category.DOOR: "Door",
    Category.NET: "Net",
    Category.PARTITION: "Partition",
    Category.CURTAIN_WALL: "Curtain Wall",
}

DEFAULT_CATEGORY = Category.WINDOW


def category_from_hint_key(key: str) -> Category:
    """Category for a selection-step key ('windows', 'skylights', ...). Unknown keys are Window."""
    key = _CAMEL_HINT_KEYS.get(key, key)
    return HINT_KEY_CATEGORIES.get(key, DEFAULT_CATEGORY)


def _match_hints(raw_type: str, hints: CategoryHints) -> Optional[Category]:
    normalized = raw_type.lower().strip()
    if not normalized:
        return None
    for key, category in HINT_KEY_CATEGORIES.items():
        for label in getattr(hints, key):
            label = label.lower().strip()
            # First hinted category wins, even if a later one would match too
            if label and (label in normalized or normalized in label):
                return category
    return None


def resolve_category(raw_type: str, hints: Optional[CategoryHints] = None) -> Category:
    """
    Category of a measurement row.

    1. exact match against every enabled registry type
    2. case-insensitive containment against the hinted labels
    3. Window
    """
    raw_type = raw_type or ""
    found = registry.find_type(raw_type)
    if found is not None:
        return found[0]

    category = _match_hints(raw_type, hints or CategoryHints())
    if category is not None:
        logger.debug("Type %r resolved to %s by selection hint", raw_type, category.value)
        return category

    logger.warning("Could not resolve category for type %r, defaulting to %s",
                   raw_type, DEFAULT_CATEGORY.value)
    return DEFAULT_CATEGORY


def normalize_label(raw_type: str, category) -> str:
    """
    Display label for a row: the type text plus its category keyword,
    unless the keyword is already in there. Applying it twice changes nothing.
    """
    label = (raw_type or "").strip()
    keyword = LABEL_KEYWORDS[Category(category)]
    if keyword.lower() in label.lower():
        return label
    return f"{label} {keyword}" if label else keyword
