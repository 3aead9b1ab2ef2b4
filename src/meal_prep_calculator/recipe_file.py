from __future__ import annotations
from pathlib import Path
from pydantic import ValidationError
from meal_prep_calculator.models import Recipe


class RecipeFileError(Exception):
    pass


def load_recipe(path: Path) -> Recipe:
    """Read a recipe from a JSON file."""
    if not path.exists():
        raise RecipeFileError(f"Recipe file '{path}' not found.")
    try:
        return Recipe.model_validate_json(path.read_text())
    except ValidationError as e:
        raise RecipeFileError(f"Recipe file '{path}' is not a valid recipe: {e}") from e
    except OSError as e:
        raise RecipeFileError(f"Could not read recipe file '{path}': {e}") from e
