from __future__ import annotations
import logging
from pathlib import Path
import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from meal_prep_calculator.arithmetic import format_number
from meal_prep_calculator.batch_time import (
    estimate_batch_cooking_time,
    format_time_estimate,
    get_time_savings_message,
)
from meal_prep_calculator.config import Config
from meal_prep_calculator.containers import format_container_recommendation, get_container_recommendations
from meal_prep_calculator.formatter import format_meal_prep_plan
from meal_prep_calculator.models import ContainerRecommendation
from meal_prep_calculator.planner import build_meal_prep_plan
from meal_prep_calculator.quantity import format_amount, parse_ingredient_quantity
from meal_prep_calculator.recipe_file import RecipeFileError, load_recipe
from meal_prep_calculator.scaling import scale_recipe

console = Console()
err_console = Console(stderr=True)

RECIPE_TYPES = click.Choice(["soup", "stew", "solid", "liquid", "mixed"])
DIFFICULTIES = click.Choice(["easy", "medium", "hard"])


def _load_config() -> Config:
    try:
        return Config()
    except ValidationError as e:
        err_console.print(f"[red]Error:[/red] Invalid configuration: {escape(str(e))}")
        raise SystemExit(1)


def _load_recipe_or_exit(recipe_file: str):
    try:
        return load_recipe(Path(recipe_file))
    except RecipeFileError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise SystemExit(1)


@click.group()
@click.pass_context
def cli(ctx: click.Context):
    """Meal prep calculator: scale recipes, estimate batch cooking time, size containers."""
    config = _load_config()
    logging.basicConfig(
        level=config.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )
    ctx.obj = config


@cli.command()
@click.argument("text")
def parse(text: str):
    """Show how an ingredient line is read."""
    parsed = parse_ingredient_quantity(text)
    console.print(f"Amount: [bold]{format_amount(parsed.amount)}[/bold]")
    console.print(f"Unit: [bold]{parsed.unit}[/bold]")
    console.print(f"Ingredient: [bold]{escape(parsed.ingredient_name)}[/bold]")


@cli.command()
@click.argument("recipe_file", type=click.Path(dir_okay=False))
@click.option("--servings", "servings", required=True, type=int, help="Number of servings to make")
def scale(recipe_file: str, servings: int):
    """Scale a recipe JSON file to a new number of servings."""
    recipe = _load_recipe_or_exit(recipe_file)
    scaled = scale_recipe(recipe, servings)

    table = Table(title=f"{recipe.title or 'Recipe'} × {format_number(scaled.servings)} servings")
    table.add_column("Original")
    table.add_column("Scaled", style="cyan")
    for ingredient in scaled.ingredients:
        table.add_row(escape(ingredient.original_text), escape(ingredient.scaled_text))
    console.print(table)

    console.print("\n[bold]Nutrition (total)[/bold]")
    for label, value in [
        ("Calories", scaled.calories),
        ("Protein (g)", scaled.protein),
        ("Carbs (g)", scaled.carbs),
        ("Fat (g)", scaled.fat),
        ("Fiber (g)", scaled.fiber),
        ("Sugar (g)", scaled.sugar),
    ]:
        if value is not None:
            console.print(f"  {label}: {value}")


@cli.command("time")
@click.option("--cook-time", "cook_time", required=True, type=float, help="Single-batch cook time in minutes")
@click.option("--servings", "servings", required=True, type=float, help="Servings the recipe makes")
@click.option("--target", "target", required=True, type=float, help="Servings to batch cook")
@click.option("--difficulty", "difficulty", default=None, type=DIFFICULTIES, help="Recipe difficulty")
@click.pass_obj
def time_estimate(config: Config, cook_time: float, servings: float, target: float, difficulty: str | None):
    """Estimate how long a batch will take to cook."""
    estimate = estimate_batch_cooking_time(cook_time, servings, target, difficulty or config.default_difficulty)

    console.print(f"\n[bold]Estimated time:[/bold] {format_time_estimate(estimate.estimated_time)}")
    table = Table()
    table.add_column("Phase")
    table.add_column("Time", justify="right")
    table.add_row("Prep", format_time_estimate(estimate.breakdown.prep_time))
    table.add_row("Active cooking", format_time_estimate(estimate.breakdown.active_cooking_time))
    table.add_row("Passive cooking", format_time_estimate(estimate.breakdown.passive_cooking_time))
    console.print(table)
    console.print(get_time_savings_message(estimate))
    for tip in estimate.tips:
        console.print(f"  • {tip}")


def _print_recommendations(title: str, recs: list[ContainerRecommendation]) -> None:
    if not recs:
        return
    console.print(f"\n[bold]{title}[/bold]")
    for rec in recs:
        console.print(f"  [cyan]{format_container_recommendation(rec)}[/cyan]")
        for tip in rec.recommendations:
            console.print(f"    [dim]- {tip}[/dim]")


@cli.command()
@click.option("--total", "total", required=True, type=int, help="Total servings")
@click.option("--freeze", "freeze", default=0, type=int, show_default=True, help="Servings to freeze")
@click.option("--fresh", "fresh", default=None, type=int, help="Servings for the week (default: the rest)")
@click.option("--type", "recipe_type", default=None, type=RECIPE_TYPES, help="How the dish packs")
@click.option("--single-serve/--no-single-serve", "single_serve", default=None, help="Prefer single-serve containers")
@click.pass_obj
def containers(
    config: Config, total: int, freeze: int, fresh: int | None, recipe_type: str | None, single_serve: bool | None
):
    """Recommend storage containers for a batch."""
    if fresh is None:
        fresh = max(total - freeze, 0)
    prefer_single = config.prefer_single_serve if single_serve is None else single_serve
    container_plan = get_container_recommendations(
        total, freeze, fresh, recipe_type or config.default_recipe_type, prefer_single
    )

    if not (container_plan.freeze or container_plan.fresh or container_plan.all):
        console.print("No containers needed.")
        return
    _print_recommendations("Freezer", container_plan.freeze)
    _print_recommendations("Fridge", container_plan.fresh)
    if container_plan.all is not None:
        _print_recommendations("All at once", [container_plan.all])


@cli.command()
@click.argument("recipe_file", type=click.Path(dir_okay=False))
@click.option("--servings", "servings", required=True, type=int, help="Total servings to make")
@click.option("--freeze", "freeze", default=0, type=int, show_default=True, help="Servings to freeze")
@click.option("--type", "recipe_type", default=None, type=RECIPE_TYPES, help="How the dish packs")
@click.pass_obj
def plan(config: Config, recipe_file: str, servings: int, freeze: int, recipe_type: str | None):
    """Build a full meal-prep plan for a recipe JSON file."""
    recipe = _load_recipe_or_exit(recipe_file)
    if freeze > servings:
        err_console.print(f"[red]Error:[/red] Cannot freeze {freeze} of {servings} servings.")
        raise SystemExit(1)

    meal_plan = build_meal_prep_plan(
        recipe,
        servings,
        servings_to_freeze=freeze,
        recipe_type=recipe_type or config.default_recipe_type,
        prefer_single_serve=config.prefer_single_serve,
    )
    console.print(f"\n[bold]{recipe.title or 'Meal prep plan'}[/bold]")
    console.print(format_meal_prep_plan(meal_plan), markup=False)
