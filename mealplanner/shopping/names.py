"""Ingredient name normalization for shopping-list deduplication."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# French variants, English plurals and aliases → canonical English singular
INGREDIENT_SYNONYMS: Mapping[str, str] = MappingProxyType({
    # French
    "courgette": "zucchini",
    "courgettes": "zucchini",
    "poivron": "bell pepper",
    "poivrons": "bell pepper",
    "poivron rouge": "red bell pepper",
    "poivron vert": "green bell pepper",
    "épinard": "spinach",
    "épinards": "spinach",
    "tomate": "tomato",
    "tomates": "tomato",
    "oignon": "onion",
    "oignons": "onion",
    "carotte": "carrot",
    "carottes": "carrot",
    "champignon": "mushroom",
    "champignons": "mushroom",
    "aubergine": "eggplant",
    "aubergines": "eggplant",
    "haricot vert": "green bean",
    "haricots verts": "green bean",
    "pomme de terre": "potato",
    "pommes de terre": "potato",
    "ail": "garlic",
    "citron vert": "lime",
    "poire": "pear",
    "poires": "pear",
    "fraise": "strawberry",
    "fraises": "strawberry",
    # English plurals
    "tomatoes": "tomato",
    "potatoes": "potato",
    "bell peppers": "bell pepper",
    "red bell peppers": "red bell pepper",
    "green bell peppers": "green bell pepper",
    "mushrooms": "mushroom",
    "carrots": "carrot",
    "onions": "onion",
    "bananas": "banana",
    "apples": "apple",
    "lemons": "lemon",
    "oranges": "orange",
    "avocados": "avocado",
    "green onions": "green onion",
    "spring onions": "green onion",
    "cherry tomatoes": "cherry tomato",
    "eggs": "egg",
    "almonds": "almond",
    "walnuts": "walnut",
    "raisins": "raisin",
    "strawberries": "strawberry",
    "raspberries": "raspberry",
    "blueberries": "blueberry",
    # aliases
    "asparagus spears": "asparagus",
    "grape tomatoes": "cherry tomato",
})

# Endings that look plural but are not ("hummus", "chickpeas", "spices", ...)
_KEEP_S_ENDINGS = ("ss", "us", "is", "as", "es", "cs", "xs")


def normalize_ingredient_name(name: str) -> str:
    """Return the lowercase dedup key for an ingredient name.

    The key is only used to merge entries; display names always come from the
    original text.
    """
    lower = name.lower().strip()

    if lower in INGREDIENT_SYNONYMS:
        return INGREDIENT_SYNONYMS[lower]

    # Rules are checked in this order; the first match wins.
    if lower.endswith("rries") and len(lower) > 6:
        return lower[:-3] + "y"
    if lower.endswith("ies") and len(lower) > 5:
        return lower[:-3] + "y"
    if lower.endswith("oes") and len(lower) > 5:
        return lower[:-2]
    if (
        lower.endswith("s")
        and len(lower) > 5
        and not lower.endswith(_KEEP_S_ENDINGS)
    ):
        return lower[:-1]

    return lower
