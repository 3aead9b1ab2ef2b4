from __future__ import annotations
from meal_prep_calculator.arithmetic import format_number
from meal_prep_calculator.batch_time import format_time_estimate, get_time_savings_message
from meal_prep_calculator.containers import format_container_recommendation
from meal_prep_calculator.models import ContainerRecommendation, MealPrepPlan, ScaledRecipe


def _heading(lines: list[str], title: str) -> None:
    lines.append(f"\n{title}")
    lines.append("-" * len(title))


def format_scaled_recipe(scaled: ScaledRecipe) -> str:
    lines: list[str] = []
    _heading(lines, f"Ingredients ({format_number(scaled.servings)} servings)")
    for ingredient in scaled.ingredients:
        lines.append(f"[ ] {ingredient.scaled_text}")

    _heading(lines, "Nutrition (total)")
    macros = [
        ("Calories", scaled.calories, ""),
        ("Protein", scaled.protein, "g"),
        ("Carbs", scaled.carbs, "g"),
        ("Fat", scaled.fat, "g"),
        ("Fiber", scaled.fiber, "g"),
        ("Sugar", scaled.sugar, "g"),
    ]
    for label, value, unit in macros:
        if value is not None:
            lines.append(f"{label}: {value}{unit}")
    return "\n".join(lines).strip()


def _container_lines(lines: list[str], title: str, recs: list[ContainerRecommendation]) -> None:
    if not recs:
        return
    _heading(lines, title)
    for rec in recs:
        lines.append(f"* {format_container_recommendation(rec)}")


def format_meal_prep_plan(plan: MealPrepPlan) -> str:
    lines = [format_scaled_recipe(plan.scaled_recipe)]

    estimate = plan.time_estimate
    if estimate is not None:
        _heading(lines, "Batch cooking time")
        lines.append(
            f"{format_time_estimate(estimate.estimated_time)} "
            f"(single batch: {format_time_estimate(estimate.original_time)})"
        )
        lines.append(
            f"Prep {format_time_estimate(estimate.breakdown.prep_time)}, "
            f"active {format_time_estimate(estimate.breakdown.active_cooking_time)}, "
            f"passive {format_time_estimate(estimate.breakdown.passive_cooking_time)}"
        )
        lines.append(get_time_savings_message(estimate))
        for tip in estimate.tips:
            lines.append(f"- {tip}")

    _container_lines(lines, f"Containers to freeze ({plan.recipe_type})", plan.containers.freeze)
    _container_lines(lines, f"Containers for the week ({plan.recipe_type})", plan.containers.fresh)
    if plan.containers.all is not None:
        _heading(lines, "All at once")
        lines.append(f"* {format_container_recommendation(plan.containers.all)}")

    return "\n".join(lines).strip()
