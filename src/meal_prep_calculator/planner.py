from __future__ import annotations
from typing import Any, Mapping
from meal_prep_calculator.batch_time import estimate_batch_cooking_time
from meal_prep_calculator.containers import get_container_recommendations
from meal_prep_calculator.models import MealPrepPlan, Recipe, RecipeType
from meal_prep_calculator.scaling import scale_recipe

RECIPE_TYPE_KEYWORDS: tuple[tuple[RecipeType, tuple[str, ...]], ...] = (
    ("soup", ("soup", "broth", "bisque", "chowder")),
    ("stew", ("stew", "braise", "ragout")),
    ("liquid", ("smoothie", "juice", "drink", "beverage")),
    ("solid", ("casserole", "lasagna", "bake", "roast")),
)


def detect_recipe_type(title: str, description: str | None = None) -> RecipeType:
    """Guess how a dish packs from keywords in its title and description."""
    combined = f"{title.lower()} {(description or '').lower()}"
    for recipe_type, keywords in RECIPE_TYPE_KEYWORDS:
        if any(keyword in combined for keyword in keywords):
            return recipe_type
    return "mixed"


def build_meal_prep_plan(
    recipe: Recipe | Mapping[str, Any],
    total_servings: float,
    servings_to_freeze: float = 0,
    servings_for_week: float | None = None,
    recipe_type: RecipeType | None = None,
    prefer_single_serve: bool = True,
) -> MealPrepPlan:
    """Scale a recipe, estimate its batch time and size its containers in one go.

    The three results are computed independently. servings_for_week defaults to
    whatever is not frozen. The time estimate is omitted when the recipe has no
    cook time.
    """
    if not isinstance(recipe, Recipe):
        recipe = Recipe.model_validate(recipe)
    if servings_for_week is None:
        servings_for_week = max(total_servings - servings_to_freeze, 0)
    recipe_type = recipe_type or detect_recipe_type(recipe.title, recipe.description)

    scaled = scale_recipe(recipe, total_servings)
    scaled.servings_to_freeze = servings_to_freeze
    scaled.servings_for_week = servings_for_week

    time_estimate = None
    if recipe.cook_time is not None:
        time_estimate = estimate_batch_cooking_time(
            recipe.cook_time, recipe.servings or 1, total_servings, recipe.difficulty
        )

    containers = get_container_recommendations(
        total_servings, servings_to_freeze, servings_for_week, recipe_type, prefer_single_serve
    )
    return MealPrepPlan(
        recipe_type=recipe_type,
        scaled_recipe=scaled,
        time_estimate=time_estimate,
        containers=containers,
    )
