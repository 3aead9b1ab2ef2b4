from __future__ import annotations
import logging
import math
import re
from typing import Callable, NamedTuple
from meal_prep_calculator.arithmetic import safe_divide
from meal_prep_calculator.models import ParsedQuantity

logger = logging.getLogger(__name__)

KNOWN_UNITS: tuple[str, ...] = (
    "cup", "cups", "c",
    "tablespoon", "tablespoons", "tbsp", "tbsps", "tbs",
    "teaspoon", "teaspoons", "tsp", "tsps",
    "fluid ounce", "fluid ounces", "fl oz", "floz",
    "pint", "pints", "pt",
    "quart", "quarts", "qt",
    "gallon", "gallons", "gal",
    "milliliter", "milliliters", "ml",
    "liter", "liters", "l",
    "pound", "pounds", "lb", "lbs",
    "ounce", "ounces", "oz",
    "gram", "grams", "g",
    "kilogram", "kilograms", "kg",
    "piece", "pieces", "item", "items", "each", "whole",
    "head", "heads", "bunch", "bunches", "clove", "cloves",
)

# (decimal, label) in lookup order; on equal distance the earlier entry wins
COMMON_FRACTIONS: tuple[tuple[float, str], ...] = (
    (0.125, "1/8"),
    (0.25, "1/4"),
    (0.333, "1/3"),
    (0.5, "1/2"),
    (0.667, "2/3"),
    (0.75, "3/4"),
)
FRACTION_TOLERANCE = 0.1

_UNIT = "(" + "|".join(re.escape(u) for u in KNOWN_UNITS) + ")"


class _Strategy(NamedTuple):
    name: str
    pattern: re.Pattern[str]
    extract: Callable[[re.Match[str]], tuple[float, str, str]]


def _mixed_fraction(m: re.Match[str]) -> tuple[float, str, str]:
    amount = float(m[1]) + safe_divide(float(m[2]), float(m[3]))
    return amount, m[4].lower(), m[5]


def _simple_fraction(m: re.Match[str]) -> tuple[float, str, str]:
    return safe_divide(float(m[1]), float(m[2])), m[3].lower(), m[4]


def _number_with_unit(m: re.Match[str]) -> tuple[float, str, str]:
    return float(m[1]), m[2].lower(), m[3]


def _bare_number(m: re.Match[str]) -> tuple[float, str, str]:
    return float(m[1]), "piece", m[2]


# Most specific first: "2 1/2 cups" must not be read as "2 <name>".
_STRATEGIES: tuple[_Strategy, ...] = (
    _Strategy("mixed fraction", re.compile(rf"([0-9]+)\s+([0-9]+)/([0-9]+)\s+{_UNIT}\s+(.+)", re.I), _mixed_fraction),
    _Strategy("simple fraction", re.compile(rf"([0-9]+)/([0-9]+)\s+{_UNIT}\s+(.+)", re.I), _simple_fraction),
    _Strategy("decimal", re.compile(rf"([0-9]+\.?[0-9]*)\s+{_UNIT}\s+(.+)", re.I), _number_with_unit),
    _Strategy("whole number", re.compile(rf"([0-9]+)\s+{_UNIT}\s+(.+)", re.I), _number_with_unit),
    _Strategy("bare number", re.compile(r"([0-9]+)\s+(.+)", re.I), _bare_number),
)


def parse_ingredient_quantity(text: str) -> ParsedQuantity:
    """Split an ingredient line such as '2 1/2 cups flour' into amount, unit and name.

    Never raises. Lines with no leading quantity come back as one 'piece' whose
    name is the whole line.
    """
    trimmed = text.strip()
    for strategy in _STRATEGIES:
        match = strategy.pattern.fullmatch(trimmed)
        if match:
            amount, unit, name = strategy.extract(match)
            return ParsedQuantity(amount=amount, unit=unit, ingredient_name=name.strip())

    logger.debug("No quantity found in %r, treating as 1 piece", trimmed)
    return ParsedQuantity(amount=1, unit="piece", ingredient_name=trimmed)


def format_amount(amount: float) -> str:
    """Render an amount for display: '2', '1 1/2', '1/3', or '2.3'.

    Fractions are matched loosely (within 0.1), so the result is an
    approximation for reading, not a value to parse back.
    """
    if not math.isfinite(amount):
        return str(amount)
    if amount == math.floor(amount):
        return str(int(amount))

    whole = math.floor(amount)
    fraction = amount - whole

    closest: str | None = None
    min_diff = math.inf
    for decimal, label in COMMON_FRACTIONS:
        diff = abs(fraction - decimal)
        if diff < min_diff and diff < FRACTION_TOLERANCE:
            min_diff = diff
            closest = label

    if closest:
        return f"{whole} {closest}" if whole > 0 else closest
    return f"{amount:.1f}"
