"""Data models for shopping-list generation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RawIngredient:
    """A single ingredient entry before deduplication."""

    name: str
    quantity: float = 1.0
    unit: str = ""


@dataclass(frozen=True)
class AisleInfo:
    """Grocery aisle an ingredient belongs to."""

    aisle: str      # "Fruits & Légumes", "Autres", ...
    category: str   # produce, meat, dairy, ..., other
    emoji: str
    sort_order: int  # 1-11, catch-all pinned to 99


@dataclass
class OrganizedItem:
    """One line of the aggregated shopping list."""

    name: str
    quantity: float
    unit: str
    aisle: str
    category: str
    emoji: str
    sort_order: int
    price: float | None = None
    checked: bool = False

    @property
    def aisle_info(self) -> AisleInfo:
        return AisleInfo(
            aisle=self.aisle,
            category=self.category,
            emoji=self.emoji,
            sort_order=self.sort_order,
        )

    def to_dict(self) -> dict:
        """Serialize to the stored shopping-list item shape."""
        return {
            "name": self.name,
            "quantity": self.quantity,
            "unit": self.unit,
            "price": self.price,
            "checked": self.checked,
            "aisle": self.aisle,
            "category": self.category,
            "emoji": self.emoji,
            "sortOrder": self.sort_order,
        }
