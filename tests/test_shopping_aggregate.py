"""Tests for shopping-list aggregation and sorting."""

import math

from mealplanner.shopping.aggregate import aggregate_ingredients, collation_key
from mealplanner.shopping.models import RawIngredient
from mealplanner.shopping.names import normalize_ingredient_name
from mealplanner.shopping.parser import parse_ingredients_summary
from mealplanner.shopping.units import normalize_unit


def _raw(name, quantity=1.0, unit=""):
    return RawIngredient(name=name, quantity=quantity, unit=unit)


class TestAggregateIngredients:
    def test_plural_merges_with_singular(self):
        result = aggregate_ingredients([_raw("tomato", 1), _raw("tomatoes", 2)])
        assert len(result) == 1
        item = result[0]
        assert item.name == "tomato"
        assert item.quantity == 3
        assert item.aisle == "Fruits & Légumes"
        assert item.sort_order == 1

    def test_unit_aliases_merge(self):
        result = aggregate_ingredients([
            _raw("Carrot", 200, "g"),
            _raw("carrots", 150, "grams"),
        ])
        assert len(result) == 1
        assert result[0].name == "Carrot"
        assert result[0].quantity == 350
        assert result[0].unit == "g"

    def test_french_and_english_merge(self):
        result = aggregate_ingredients([
            _raw("Tomates", 2),
            _raw("tomato", 1),
        ])
        assert len(result) == 1
        assert result[0].name == "Tomates"
        assert result[0].quantity == 3

    def test_different_units_stay_separate(self):
        result = aggregate_ingredients([
            _raw("lemon juice", 3, "tbsp"),
            _raw("lemon juice", 3, "tsp"),
        ])
        assert len(result) == 2
        assert {i.unit for i in result} == {"c. à s.", "c. à t."}

    def test_first_occurrence_wins_for_display(self):
        result = aggregate_ingredients([
            _raw("  Eggs ", 2),
            _raw("egg", 1),
        ])
        assert result[0].name == "Eggs"
        assert result[0].category == "dairy"

    def test_blank_names_skipped(self):
        result = aggregate_ingredients([
            _raw(""),
            _raw("   "),
            RawIngredient(name=None, quantity=1, unit=""),  # type: ignore[arg-type]
            _raw("salt"),
        ])
        assert [i.name for i in result] == ["salt"]

    def test_falsy_quantity_counts_as_one(self):
        result = aggregate_ingredients([
            _raw("rice", 0, "tasse"),
            RawIngredient(name="rice", quantity=None, unit="cups"),  # type: ignore[arg-type]
        ])
        assert result[0].quantity == 2

    def test_missing_unit(self):
        result = aggregate_ingredients([
            RawIngredient(name="salt", quantity=1, unit=None),  # type: ignore[arg-type]
        ])
        assert result[0].unit == ""

    def test_rounds_half_up_to_two_decimals(self):
        result = aggregate_ingredients([_raw("butter", 1), _raw("butter", 0.125)])
        assert result[0].quantity == 1.13

    def test_float_noise_removed(self):
        result = aggregate_ingredients([_raw("oil", 0.1, "L"), _raw("oil", 0.2, "L")])
        assert result[0].quantity == 0.3

    def test_overflowing_quantities_merge(self):
        summary = f"{'9' * 400} cups flour, {'9' * 400} cups flour"
        result = aggregate_ingredients(parse_ingredients_summary(summary))
        assert len(result) == 1
        assert math.isinf(result[0].quantity)

    def test_huge_finite_quantities_merge(self):
        big = 1e307  # sum is finite, sum * 100 is not
        result = aggregate_ingredients([_raw("flour", big), _raw("flour", big)])
        assert math.isinf(result[0].quantity)

    def test_nan_quantity_merges(self):
        result = aggregate_ingredients([_raw("salt", math.nan), _raw("salt", 1)])
        assert len(result) == 1
        assert math.isnan(result[0].quantity)

    def test_defaults_for_external_fields(self):
        item = aggregate_ingredients([_raw("flour", 2, "cups")])[0]
        assert item.price is None
        assert item.checked is False

    def test_empty(self):
        assert aggregate_ingredients([]) == []

    def test_sorted_by_aisle(self):
        result = aggregate_ingredients([
            _raw("unknown thing"),
            _raw("milk"),
            _raw("chicken"),
            _raw("tomato"),
        ])
        assert [i.name for i in result] == ["tomato", "chicken", "milk", "unknown thing"]
        assert [i.sort_order for i in result] == [1, 2, 3, 99]

    def test_sorted_by_french_collation_within_aisle(self):
        result = aggregate_ingredients([
            _raw("Zucchini"),
            _raw("épinards"),
            _raw("Banane"),
            _raw("ail"),
        ])
        assert [i.name for i in result] == ["ail", "Banane", "épinards", "Zucchini"]

    def test_dedup_keys_unique_and_quantities_conserved(self):
        raw = [
            _raw("onions", 2),
            _raw("oignon", 1),
            _raw("Onion", 1, "kg"),
            _raw("garlic", 3, "cloves"),
            _raw("ail", 2, "gousses"),
            _raw("flour", 1.5, "cups"),
            _raw("flour", 0.5, "tasse"),
        ]
        result = aggregate_ingredients(raw)

        totals: dict[str, float] = {}
        for r in raw:
            key = f"{normalize_ingredient_name(r.name)}::{normalize_unit(r.unit)}"
            totals[key] = totals.get(key, 0) + r.quantity

        assert len(result) == len(totals)
        by_name = {i.name: i for i in result}
        assert by_name["onions"].quantity == 3
        assert by_name["Onion"].quantity == 1
        assert by_name["garlic"].quantity == 5
        assert by_name["flour"].quantity == 2

    def test_input_not_mutated(self):
        raw = [_raw("tomato", 1), _raw("tomatoes", 2)]
        aggregate_ingredients(raw)
        assert raw == [_raw("tomato", 1), _raw("tomatoes", 2)]


class TestCollationKey:
    def test_accents_ignored_at_first_level(self):
        words = ["Zèbre", "abricot", "École", "eau", "œuf", "oeil"]
        assert sorted(words, key=collation_key) == [
            "abricot", "eau", "École", "oeil", "œuf", "Zèbre",
        ]

    def test_lowercase_before_uppercase(self):
        assert sorted(["Pomme", "pomme"], key=collation_key) == ["pomme", "Pomme"]

    def test_unaccented_before_accented(self):
        assert sorted(["pêche", "peche"], key=collation_key) == ["peche", "pêche"]
