"""Cooking unit normalization (English / French)."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# Raw unit token (lowercase) → canonical unit.
# Plural forms collapse to the singular so "11 gousses" and "1 gousse" share a
# dedup key. Size and serving descriptors map to "" (unitless).
UNIT_ALIASES: Mapping[str, str] = MappingProxyType({
    # tablespoon
    "tablespoon": "c. à s.",
    "tablespoons": "c. à s.",
    "tbsp": "c. à s.",
    "cuillère à soupe": "c. à s.",
    "cuillères à soupe": "c. à s.",
    "c. à soupe": "c. à s.",
    "c.à.s.": "c. à s.",
    "c. à s.": "c. à s.",
    # teaspoon
    "teaspoon": "c. à t.",
    "teaspoons": "c. à t.",
    "tsp": "c. à t.",
    "cuillère à thé": "c. à t.",
    "cuillères à thé": "c. à t.",
    "c. à thé": "c. à t.",
    "c.à.t.": "c. à t.",
    "c. à t.": "c. à t.",
    # cup
    "cup": "tasse",
    "cups": "tasse",
    "tasse": "tasse",
    "tasses": "tasse",
    # mass
    "gram": "g",
    "grams": "g",
    "gramme": "g",
    "grammes": "g",
    "g": "g",
    "kilogram": "kg",
    "kilograms": "kg",
    "kilogramme": "kg",
    "kilogrammes": "kg",
    "kg": "kg",
    # volume
    "milliliter": "ml",
    "milliliters": "ml",
    "millilitre": "ml",
    "millilitres": "ml",
    "ml": "ml",
    "liter": "L",
    "liters": "L",
    "litre": "L",
    "litres": "L",
    # imperial
    "ounce": "oz",
    "ounces": "oz",
    "oz": "oz",
    "pound": "lb",
    "pounds": "lb",
    "lb": "lb",
    "lbs": "lb",
    # counters
    "piece": "pièce",
    "pieces": "pièce",
    "pièce": "pièce",
    "pièces": "pièce",
    "pce": "pièce",
    "pinch": "pincée",
    "pinches": "pincée",
    "pincée": "pincée",
    "pincées": "pincée",
    "slice": "tranche",
    "slices": "tranche",
    "tranche": "tranche",
    "tranches": "tranche",
    "bunch": "botte",
    "bunches": "botte",
    "botte": "botte",
    "bottes": "botte",
    "can": "boîte",
    "cans": "boîte",
    "boîte": "boîte",
    "boîtes": "boîte",
    "clove": "gousse",
    "cloves": "gousse",
    "gousse": "gousse",
    "gousses": "gousse",
    # size / serving descriptors
    "small": "",
    "medium": "",
    "large": "",
    "extra large": "",
    "xl": "",
    "serving": "",
    "servings": "",
    "portion": "",
    "portions": "",
})


def is_unit_word(word: str) -> bool:
    """Return True if *word* (any case) is a known unit or size descriptor."""
    return word.lower() in UNIT_ALIASES


def normalize_unit(unit: str) -> str:
    """Map a raw unit token to its canonical form.

    Args:
        unit: e.g. "Tablespoons", "gousses", "grams", "large"

    Returns:
        Canonical unit ("c. à s.", "gousse", "g", ""). Unknown units are
        returned trimmed but with their original casing.
    """
    lower = unit.lower().strip()
    if not lower:
        return ""
    if lower in UNIT_ALIASES:
        return UNIT_ALIASES[lower]
    return unit.strip()
