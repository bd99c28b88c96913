"""Shopping lists built from generated meal plans."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any, Mapping

from .aggregate import aggregate_ingredients
from .aisles import classify_ingredient
from .models import OrganizedItem, RawIngredient
from .names import normalize_ingredient_name
from .parser import parse_ingredients_summary

logger = logging.getLogger(__name__)

# recipe id → structured ingredients ({"name", "amount", "unit"})
RecipeIngredients = Mapping[str, list[Mapping[str, Any]]]


class InvalidMealPlanError(ValueError):
    """The meal plan document or its recipe ingredients are malformed."""


class EmptyShoppingListError(ValueError):
    """The meal plan produced no ingredients."""


class ItemIndexError(IndexError):
    """A shopping-list item index is out of range."""


def _structured_to_raw(ingredients: list[Mapping[str, Any]]) -> list[RawIngredient]:
    result: list[RawIngredient] = []
    for ing in ingredients:
        if not isinstance(ing, Mapping):
            raise InvalidMealPlanError(
                f"Invalid recipe ingredient: {ing!r} is not an object"
            )
        amount = ing.get("amount")
        result.append(
            RawIngredient(
                name=ing.get("name") or "",
                quantity=1.0 if amount is None else amount,
                unit=ing.get("unit") or "",
            )
        )
    return result


def collect_raw_ingredients(
    plan: Mapping[str, Any],
    catalog_recipes: RecipeIngredients | None = None,
    user_recipes: RecipeIngredients | None = None,
) -> list[RawIngredient]:
    """Gather raw ingredients for every meal of a generated meal plan.

    Catalog and user recipes contribute their structured ingredient lists.
    Meals without structured ingredients (including AI-generated meals) fall
    back to parsing their ``ingredients_summary``.

    Raises:
        InvalidMealPlanError: If ``plan["days"]`` is not a list, or a day or
            meal in it is not an object.
    """
    days = plan.get("days") if isinstance(plan, Mapping) else None
    if not isinstance(days, list):
        raise InvalidMealPlanError("Invalid meal plan structure: missing 'days'")

    catalog_recipes = catalog_recipes or {}
    user_recipes = user_recipes or {}
    raw: list[RawIngredient] = []

    for i, day in enumerate(days):
        if not isinstance(day, Mapping):
            raise InvalidMealPlanError(
                f"Invalid meal plan structure: day {i} is not an object"
            )
        meals = day.get("meals") or []
        if not isinstance(meals, list):
            raise InvalidMealPlanError(
                f"Invalid meal plan structure: day {i} meals is not a list"
            )
        for meal in meals:
            if not isinstance(meal, Mapping):
                raise InvalidMealPlanError(
                    f"Invalid meal plan structure: day {i} has a meal that is not an object"
                )
            source = meal.get("source")
            structured: list[Mapping[str, Any]] = []
            if source == "catalog" and meal.get("recipe_catalog_id"):
                structured = catalog_recipes.get(meal["recipe_catalog_id"]) or []
            elif source == "user_recipe" and meal.get("user_recipe_id"):
                structured = user_recipes.get(meal["user_recipe_id"]) or []

            if structured:
                raw.extend(_structured_to_raw(structured))
            elif meal.get("ingredients_summary"):
                raw.extend(parse_ingredients_summary(meal["ingredients_summary"]))
            else:
                logger.debug(
                    "Meal %r (%s) has no ingredients", meal.get("title"), source
                )

    logger.info("Collected %d raw ingredients from %d days", len(raw), len(days))
    return raw


def _format_quantity(quantity: float) -> str:
    if float(quantity).is_integer():
        return str(int(quantity))
    return f"{quantity:g}"


def _item_from_dict(data: Mapping[str, Any]) -> OrganizedItem:
    name = data.get("name") or ""
    if data.get("aisle") and data.get("category"):
        aisle = data["aisle"]
        category = data["category"]
        emoji = data.get("emoji") or ""
        sort_order = data.get("sortOrder", data.get("sort_order", 99))
    else:
        info = classify_ingredient(normalize_ingredient_name(name))
        aisle, category = info.aisle, info.category
        emoji, sort_order = info.emoji, info.sort_order
    return OrganizedItem(
        name=name,
        quantity=1 if data.get("quantity") is None else data["quantity"],
        unit=data.get("unit") or "",
        aisle=aisle,
        category=category,
        emoji=emoji,
        sort_order=sort_order,
        price=data.get("price"),
        checked=bool(data.get("checked", False)),
    )


@dataclass
class ShoppingList:
    items: list[OrganizedItem] = field(default_factory=list)
    meal_plan_id: str | None = None
    is_completed: bool = False
    completed_at: str | None = None  # ISO-8601, UTC

    @property
    def total_cost(self) -> float | None:
        """Sum of price × quantity for priced items, or None if nothing is priced."""
        total = sum(
            (item.price or 0) * (1 if item.quantity is None else item.quantity)
            for item in self.items
        )
        return total if total > 0 else None

    @property
    def checked_count(self) -> int:
        return sum(1 for item in self.items if item.checked)

    @property
    def progress_pct(self) -> int:
        if not self.items:
            return 0
        return round(self.checked_count / len(self.items) * 100)

    def toggle_item(self, index: int, checked: bool) -> OrganizedItem:
        """Set the checked state of one item and update completion.

        The item is replaced by an updated copy; the list is completed once
        every item is checked.

        Raises:
            ItemIndexError: If ``index`` is out of range.
        """
        if index < 0 or index >= len(self.items):
            raise ItemIndexError(
                f"Invalid item index {index} (list has {len(self.items)} items)"
            )
        updated = replace(self.items[index], checked=checked)
        self.items[index] = updated

        self.is_completed = all(item.checked for item in self.items)
        self.completed_at = (
            datetime.now(timezone.utc).isoformat() if self.is_completed else None
        )
        return updated

    def grouped_by_aisle(self) -> list[tuple[str, list[OrganizedItem]]]:
        """Group items by aisle, keeping the order aisles first appear in."""
        groups: dict[str, list[OrganizedItem]] = {}
        for item in self.items:
            groups.setdefault(item.aisle, []).append(item)
        return list(groups.items())

    def to_dict(self) -> dict[str, Any]:
        return {
            "meal_plan_id": self.meal_plan_id,
            "items": [item.to_dict() for item in self.items],
            "total_cost": self.total_cost,
            "is_completed": self.is_completed,
            "completed_at": self.completed_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ShoppingList:
        """Load a stored shopping-list document.

        Items missing their aisle fields are classified again from the name.
        """
        return cls(
            items=[_item_from_dict(i) for i in data.get("items") or []],
            meal_plan_id=data.get("meal_plan_id"),
            is_completed=bool(data.get("is_completed", False)),
            completed_at=data.get("completed_at"),
        )

    def display(
        self,
        currency: str = "$CA",
        aisle_labels: Mapping[str, str] | None = None,
        show_checked: bool = True,
    ) -> str:
        """Format the shopping list for terminal display."""
        labels = aisle_labels or {}
        lines: list[str] = []
        total = len(self.items)
        lines.append("🛒 Liste d'épicerie")
        lines.append(
            f"   {self.checked_count} / {total} article{'s' if total > 1 else ''}"
            f" · {self.progress_pct}% complété"
        )
        total_cost = self.total_cost
        if total_cost is not None:
            lines.append(f"   Total estimé: {total_cost:.2f} {currency}")
        lines.append("")

        for aisle, items in self.grouped_by_aisle():
            visible = [i for i in items if show_checked or not i.checked]
            if not visible:
                continue
            header = labels.get(items[0].category, aisle)
            lines.append(f"{'─' * 50}")
            lines.append(f"{items[0].emoji} {header}")
            for item in visible:
                mark = "[x]" if item.checked else "[ ]"
                qty = _format_quantity(item.quantity)
                if item.unit:
                    qty = f"{qty} {item.unit}"
                line = f"    {mark} {item.name:<24} {qty}"
                if item.price is not None:
                    line += f"  ({item.price:.2f} {currency})"
                lines.append(line)
            lines.append("")

        return "\n".join(lines)


def build_shopping_list(
    plan: Mapping[str, Any],
    catalog_recipes: RecipeIngredients | None = None,
    user_recipes: RecipeIngredients | None = None,
    meal_plan_id: str | None = None,
) -> ShoppingList:
    """Build an aisle-sorted shopping list from a generated meal plan.

    Raises:
        InvalidMealPlanError: If the plan has no list of days.
        EmptyShoppingListError: If no meal contributes any ingredient.
    """
    raw = collect_raw_ingredients(plan, catalog_recipes, user_recipes)
    if not raw:
        raise EmptyShoppingListError("No ingredients found in this meal plan")
    items = aggregate_ingredients(raw)
    logger.info("Shopping list: %d raw ingredients → %d items", len(raw), len(items))
    return ShoppingList(items=items, meal_plan_id=meal_plan_id)
