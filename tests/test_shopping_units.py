"""Tests for cooking unit normalization."""

import pytest

from mealplanner.shopping.units import UNIT_ALIASES, is_unit_word, normalize_unit


class TestNormalizeUnit:
    def test_tablespoon(self):
        assert normalize_unit("Tablespoons") == "c. à s."
        assert normalize_unit("tbsp") == "c. à s."
        assert normalize_unit("cuillères à soupe") == "c. à s."

    def test_teaspoon(self):
        assert normalize_unit("tsp") == "c. à t."
        assert normalize_unit("c. à thé") == "c. à t."

    def test_cup(self):
        assert normalize_unit("cups") == "tasse"
        assert normalize_unit("Tasses") == "tasse"

    def test_metric(self):
        assert normalize_unit("grams") == "g"
        assert normalize_unit("kilogrammes") == "kg"
        assert normalize_unit("millilitres") == "ml"
        assert normalize_unit("liters") == "L"

    def test_imperial(self):
        assert normalize_unit("ounces") == "oz"
        assert normalize_unit("lbs") == "lb"

    def test_counters_collapse_to_french_singular(self):
        assert normalize_unit("cloves") == "gousse"
        assert normalize_unit("gousses") == "gousse"
        assert normalize_unit("pieces") == "pièce"
        assert normalize_unit("pinches") == "pincée"
        assert normalize_unit("slices") == "tranche"
        assert normalize_unit("bunches") == "botte"
        assert normalize_unit("cans") == "boîte"

    def test_size_descriptors_are_unitless(self):
        for word in ("small", "Medium", "LARGE", "extra large", "xl", "servings", "portion"):
            assert normalize_unit(word) == ""

    def test_whitespace_trimmed(self):
        assert normalize_unit("  cups  ") == "tasse"

    def test_empty(self):
        assert normalize_unit("") == ""
        assert normalize_unit("   ") == ""

    def test_unknown_passthrough_keeps_case(self):
        assert normalize_unit("xyz") == "xyz"
        assert normalize_unit("  Sachet ") == "Sachet"

    @pytest.mark.parametrize("raw", sorted(UNIT_ALIASES) + ["xyz", "Sachet", ""])
    def test_idempotent(self, raw):
        once = normalize_unit(raw)
        assert normalize_unit(once) == once


class TestIsUnitWord:
    def test_known(self):
        assert is_unit_word("Gousse") is True
        assert is_unit_word("small") is True

    def test_unknown(self):
        assert is_unit_word("garlic") is False


def test_aliases_are_read_only():
    with pytest.raises(TypeError):
        UNIT_ALIASES["spoon"] = "c. à s."  # type: ignore[index]
