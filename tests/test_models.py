from meal_prep_calculator.models import ContainerPlan, Recipe, ScaledRecipe


def test_recipe_roundtrip():
    recipe = Recipe(title="Chili", servings=6, ingredients=["2 lb beef"], calories=2400, protein=180, carbs=90, fat=120)
    assert Recipe.model_validate_json(recipe.model_dump_json()) == recipe


def test_recipe_defaults():
    recipe = Recipe(calories=100, protein=1, carbs=1, fat=1)
    assert recipe.title == ""
    assert recipe.servings is None
    assert recipe.ingredients == []
    assert recipe.fiber is None
    assert recipe.cook_time is None
    assert recipe.difficulty == "medium"


def test_recipe_flattens_ingredient_objects():
    recipe = Recipe.model_validate({
        "ingredients": [{"text": "2 cups flour"}, "1 cup milk"],
        "calories": 100, "protein": 1, "carbs": 1, "fat": 1,
    })
    assert recipe.ingredients == ["2 cups flour", "1 cup milk"]


def test_scaled_recipe_split_defaults_to_zero():
    scaled = ScaledRecipe(servings=4, calories=1, protein=1, carbs=1, fat=1)
    assert scaled.servings_to_freeze == 0
    assert scaled.servings_for_week == 0
    assert scaled.ingredients == []


def test_container_plan_defaults_to_empty():
    plan = ContainerPlan()
    assert plan.freeze == []
    assert plan.fresh == []
    assert plan.all is None
