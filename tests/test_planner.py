import pytest
from meal_prep_calculator.planner import build_meal_prep_plan, detect_recipe_type


@pytest.fixture
def soup_recipe():
    return {
        "title": "Lentil Soup",
        "servings": 4,
        "ingredients": ["2 cups lentils", "1 onion", "4 cups broth"],
        "calories": 800,
        "protein": 48,
        "carbs": 120,
        "fat": 12,
        "cook_time": 60,
    }


@pytest.mark.parametrize("title, description, expected", [
    ("Chicken Noodle Soup", None, "soup"),
    ("Clam Chowder", "", "soup"),
    ("Beef Stew", None, "stew"),
    ("Green Smoothie", None, "liquid"),
    ("Veggie Lasagna", None, "solid"),
    ("Sheet Pan Roast Chicken", None, "solid"),
    ("Stir Fry", "Served with a light bisque-style sauce", "soup"),
    ("Chicken Tacos", "Weeknight favourite", "mixed"),
])
def test_detect_recipe_type(title, description, expected):
    assert detect_recipe_type(title, description) == expected


def test_plan_composes_all_three_results(soup_recipe):
    plan = build_meal_prep_plan(soup_recipe, 8, servings_to_freeze=4)
    assert plan.recipe_type == "soup"
    assert plan.scaled_recipe.servings == 8
    assert plan.scaled_recipe.calories == 1600
    assert plan.scaled_recipe.servings_to_freeze == 4
    assert plan.scaled_recipe.servings_for_week == 4
    assert plan.time_estimate is not None
    assert plan.time_estimate.estimated_time == 78
    assert plan.containers.freeze[0].volume == 48
    assert plan.containers.fresh[0].servings == 4
    assert plan.containers.all is not None


def test_plan_without_cook_time_skips_estimate(soup_recipe):
    del soup_recipe["cook_time"]
    plan = build_meal_prep_plan(soup_recipe, 8)
    assert plan.time_estimate is None
    assert plan.containers.freeze == []
    assert plan.scaled_recipe.servings_for_week == 8


def test_plan_uses_recipe_difficulty(soup_recipe):
    easy = build_meal_prep_plan({**soup_recipe, "difficulty": "easy"}, 8)
    hard = build_meal_prep_plan({**soup_recipe, "difficulty": "hard"}, 8)
    assert easy.time_estimate.breakdown.passive_cooking_time > hard.time_estimate.breakdown.passive_cooking_time


def test_explicit_recipe_type_overrides_detection(soup_recipe):
    plan = build_meal_prep_plan(soup_recipe, 8, recipe_type="solid")
    assert plan.recipe_type == "solid"
    assert plan.containers.fresh[0].volume == 48


def test_servings_for_week_never_negative(soup_recipe):
    plan = build_meal_prep_plan(soup_recipe, 4, servings_to_freeze=6)
    assert plan.scaled_recipe.servings_for_week == 0
    assert plan.containers.fresh == []


def test_plan_with_fractional_servings(soup_recipe):
    plan = build_meal_prep_plan(soup_recipe, 6.5, servings_to_freeze=4)
    assert plan.scaled_recipe.servings_for_week == 2.5
    assert plan.containers.fresh[0].servings == 2.5
    assert plan.containers.all.servings == 6.5
