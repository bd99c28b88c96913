"""Parsing of comma-separated ingredient summaries."""

from __future__ import annotations

import re

from .models import RawIngredient
from .units import is_unit_word, normalize_unit

_UNIT_WORD = r"[a-zA-Zàâäéèêëîïôùûüç.]+"

# "2 cups flour", "1,5 kg pommes de terre", "2 c. à s. sauce soja"
_QTY_UNIT_NAME_PATTERN = re.compile(
    rf"^([0-9]+(?:[.,][0-9]+)?)\s+({_UNIT_WORD}(?:\s+{_UNIT_WORD})?)\s+(.+)$"
)


def parse_ingredient(text: str) -> RawIngredient:
    """Parse one ingredient fragment.

    Args:
        text: e.g. "2 cups flour", "garlic cloves", "tomato"

    Returns:
        RawIngredient. Quantity defaults to 1 and unit to "" when absent.
    """
    part = text.strip()

    m = _QTY_UNIT_NAME_PATTERN.match(part)
    if m:
        quantity = float(m.group(1).replace(",", "."))
        unit = normalize_unit(m.group(2))
        return RawIngredient(name=m.group(3).strip(), quantity=quantity, unit=unit)

    # Trailing unit or size word: "garlic gousse", "onion small"
    words = part.split()
    if len(words) > 1 and is_unit_word(words[-1]):
        return RawIngredient(
            name=" ".join(words[:-1]),
            quantity=1.0,
            unit=normalize_unit(words[-1].lower()),
        )

    return RawIngredient(name=part, quantity=1.0, unit="")


def parse_ingredients_summary(summary: str | None) -> list[RawIngredient]:
    """Split an ingredient summary on commas and parse each fragment.

    Empty fragments are skipped; every other fragment yields exactly one
    RawIngredient, in input order.
    """
    if not summary:
        return []
    parts = [p.strip() for p in summary.split(",")]
    return [parse_ingredient(p) for p in parts if p]
