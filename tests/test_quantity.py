import math
import pytest
from meal_prep_calculator.quantity import format_amount, parse_ingredient_quantity


def test_parse_simple_fraction():
    parsed = parse_ingredient_quantity("1/2 cup sugar")
    assert parsed.amount == 0.5
    assert parsed.unit == "cup"
    assert parsed.ingredient_name == "sugar"


def test_parse_mixed_fraction_wins_over_simple_fraction():
    parsed = parse_ingredient_quantity("2 1/2 cups flour")
    assert parsed.amount == 2.5
    assert parsed.unit == "cups"
    assert parsed.ingredient_name == "flour"


def test_parse_decimal_lowercases_unit_but_keeps_name_casing():
    parsed = parse_ingredient_quantity("2.5 Cups All-Purpose Flour")
    assert parsed.amount == 2.5
    assert parsed.unit == "cups"
    assert parsed.ingredient_name == "All-Purpose Flour"


def test_parse_whole_number_with_unit():
    parsed = parse_ingredient_quantity("3 cloves garlic, minced")
    assert parsed.amount == 3
    assert parsed.unit == "cloves"
    assert parsed.ingredient_name == "garlic, minced"


def test_parse_multi_word_unit():
    parsed = parse_ingredient_quantity("1 fl oz vanilla extract")
    assert parsed.unit == "fl oz"
    assert parsed.ingredient_name == "vanilla extract"


def test_parse_bare_number_is_pieces():
    parsed = parse_ingredient_quantity("3 eggs")
    assert parsed.amount == 3
    assert parsed.unit == "piece"
    assert parsed.ingredient_name == "eggs"


def test_parse_single_letter_unit_needs_whitespace():
    # "l" is a unit, but "large" must not be read as litres
    parsed = parse_ingredient_quantity("2 large eggs")
    assert parsed.unit == "piece"
    assert parsed.ingredient_name == "large eggs"


def test_parse_trims_whitespace():
    parsed = parse_ingredient_quantity("  2 tbsp   olive oil  ")
    assert parsed.amount == 2
    assert parsed.unit == "tbsp"
    assert parsed.ingredient_name == "olive oil"


@pytest.mark.parametrize("line", ["Salt to taste", "A pinch of pepper", ""])
def test_parse_without_quantity_falls_back_to_one_piece(line):
    parsed = parse_ingredient_quantity(line)
    assert parsed.amount == 1
    assert parsed.unit == "piece"
    assert parsed.ingredient_name == line


def test_parse_zero_denominator_does_not_raise():
    parsed = parse_ingredient_quantity("1 1/0 cup water")
    assert math.isinf(parsed.amount)
    assert parsed.unit == "cup"


@pytest.mark.parametrize("amount, expected", [
    (2.0, "2"),
    (4, "4"),
    (0, "0"),
    (1.5, "1 1/2"),
    (0.5, "1/2"),
    (0.25, "1/4"),
    (2.25, "2 1/4"),
    (0.125, "1/8"),
    (1 / 3, "1/3"),
    (7.5, "7 1/2"),
    (2.75, "2 3/4"),
])
def test_format_amount(amount, expected):
    assert format_amount(amount) == expected


def test_format_amount_falls_back_to_one_decimal():
    assert format_amount(2.9) == "2.9"


def test_format_amount_fraction_tolerance_is_loose():
    assert format_amount(0.04) == "1/8"
    assert format_amount(0.6) == "2/3"


def test_format_amount_non_finite():
    assert format_amount(math.inf) == "inf"


def test_parse_only_reads_ascii_digits():
    parsed = parse_ingredient_quantity("２ cups flour")
    assert parsed.amount == 1
    assert parsed.unit == "piece"
    assert parsed.ingredient_name == "２ cups flour"
