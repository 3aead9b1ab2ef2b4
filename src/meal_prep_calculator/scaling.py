from __future__ import annotations
import logging
import math
from typing import Any, Mapping
from meal_prep_calculator.arithmetic import round_half_up, safe_divide
from meal_prep_calculator.models import Recipe, ScaledIngredient, ScaledRecipe
from meal_prep_calculator.quantity import format_amount, parse_ingredient_quantity

logger = logging.getLogger(__name__)


def compute_scale_factor(target_servings: float, original_servings: float) -> float:
    """Ratio of target to original servings; inf (not an error) when original is 0."""
    factor = safe_divide(target_servings, original_servings)
    if not math.isfinite(factor):
        logger.debug("Non-finite scale factor %s/%s", target_servings, original_servings)
    return factor


def scale_ingredient(text: str, scale_factor: float) -> ScaledIngredient:
    parsed = parse_ingredient_quantity(text)
    scaled_amount = parsed.amount * scale_factor
    unit = "pieces" if parsed.unit == "piece" and scaled_amount != 1 else parsed.unit
    return ScaledIngredient(
        original_text=text,
        scaled_text=f"{format_amount(scaled_amount)} {unit} {parsed.ingredient_name}",
        original_amount=parsed.amount,
        scaled_amount=scaled_amount,
        unit=parsed.unit,
        ingredient_name=parsed.ingredient_name,
    )


def _scale_optional(value: float | None, scale_factor: float) -> int | float | None:
    if value is None:
        return None
    return round_half_up(value * scale_factor)


def scale_recipe(recipe: Recipe | Mapping[str, Any], new_servings: float) -> ScaledRecipe:
    """Scale every ingredient line and macro total of a recipe to new_servings.

    A missing or zero serving count on the recipe is treated as 1. No
    ingredient is ever dropped: lines without a quantity are scaled as one piece.
    """
    if not isinstance(recipe, Recipe):
        recipe = Recipe.model_validate(recipe)

    original_servings = recipe.servings or 1
    scale_factor = compute_scale_factor(new_servings, original_servings)

    return ScaledRecipe(
        servings=new_servings,
        ingredients=[scale_ingredient(text, scale_factor) for text in recipe.ingredients],
        calories=round_half_up(recipe.calories * scale_factor),
        protein=round_half_up(recipe.protein * scale_factor),
        carbs=round_half_up(recipe.carbs * scale_factor),
        fat=round_half_up(recipe.fat * scale_factor),
        fiber=_scale_optional(recipe.fiber, scale_factor),
        sugar=_scale_optional(recipe.sugar, scale_factor),
    )
