"""Deduplication, aggregation and sorting of shopping-list ingredients."""

from __future__ import annotations

import logging
import math
import unicodedata
from collections.abc import Iterable

from .aisles import classify_ingredient
from .models import OrganizedItem, RawIngredient
from .names import normalize_ingredient_name
from .units import normalize_unit

logger = logging.getLogger(__name__)

# Ligatures sorted as their expansions in French collation
_LIGATURES = str.maketrans({"œ": "oe", "Œ": "OE", "æ": "ae", "Æ": "AE"})


def collation_key(text: str) -> tuple[str, str, str]:
    """Sort key approximating French locale ordering.

    Primary: letters without accents or case. Secondary: accents.
    Tertiary: lowercase before uppercase.
    """
    expanded = unicodedata.normalize("NFD", text.translate(_LIGATURES))
    base = "".join(c for c in expanded if not unicodedata.combining(c))
    return (base.casefold(), expanded.casefold(), expanded.swapcase())


def _round2(value: float) -> float:
    # Half-up, not Python's banker's rounding
    scaled = value * 100 + 0.5
    if not math.isfinite(scaled):
        # inf and nan pass through unchanged
        return scaled / 100
    return math.floor(scaled) / 100


def aggregate_ingredients(
    raw_ingredients: Iterable[RawIngredient],
) -> list[OrganizedItem]:
    """Merge raw ingredients into a sorted shopping list.

    Entries sharing a (normalized name, normalized unit) key are summed. The
    first occurrence supplies the display name and aisle. Entries with a blank
    name are skipped and a missing quantity counts as 1.

    Returns:
        Items sorted by aisle order, then by name in French collation order.
    """
    merged: dict[str, OrganizedItem] = {}

    for ingredient in raw_ingredients:
        name = (ingredient.name or "").strip()
        if not name:
            continue

        normalized_name = normalize_ingredient_name(name)
        normalized_unit = normalize_unit(ingredient.unit or "")
        key = f"{normalized_name}::{normalized_unit}"
        quantity = ingredient.quantity or 1

        existing = merged.get(key)
        if existing is not None:
            existing.quantity = _round2(existing.quantity + quantity)
            logger.debug("Merged %r into %s (now %s)", name, key, existing.quantity)
            continue

        aisle = classify_ingredient(normalized_name)
        merged[key] = OrganizedItem(
            name=name,
            quantity=quantity,
            unit=normalized_unit,
            aisle=aisle.aisle,
            category=aisle.category,
            emoji=aisle.emoji,
            sort_order=aisle.sort_order,
        )

    return sorted(
        merged.values(),
        key=lambda item: (item.sort_order, collation_key(item.name)),
    )
