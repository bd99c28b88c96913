"""Grocery-list ingredient normalization and aisle classification."""

from .aggregate import aggregate_ingredients, collation_key
from .aisles import AISLE_RULES, OTHER_AISLE, classify_ingredient
from .config import ShoppingConfig, load_config
from .lists import (
    EmptyShoppingListError,
    InvalidMealPlanError,
    ItemIndexError,
    ShoppingList,
    build_shopping_list,
    collect_raw_ingredients,
)
from .models import AisleInfo, OrganizedItem, RawIngredient
from .names import normalize_ingredient_name
from .parser import parse_ingredient, parse_ingredients_summary
from .units import UNIT_ALIASES, normalize_unit

__all__ = [
    "RawIngredient",
    "AisleInfo",
    "OrganizedItem",
    "UNIT_ALIASES",
    "normalize_unit",
    "normalize_ingredient_name",
    "AISLE_RULES",
    "OTHER_AISLE",
    "classify_ingredient",
    "parse_ingredient",
    "parse_ingredients_summary",
    "aggregate_ingredients",
    "collation_key",
    "ShoppingList",
    "collect_raw_ingredients",
    "build_shopping_list",
    "InvalidMealPlanError",
    "EmptyShoppingListError",
    "ItemIndexError",
    "ShoppingConfig",
    "load_config",
]
