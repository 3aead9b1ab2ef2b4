from __future__ import annotations
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from meal_prep_calculator.models import Difficulty, RecipeType

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="MEALPREP_", extra="ignore")

    default_difficulty: Difficulty = "medium"
    # None means detect from the recipe title and description
    default_recipe_type: Optional[RecipeType] = None
    prefer_single_serve: bool = True
    log_level: str = "WARNING"

    @field_validator("log_level", mode="after")
    @classmethod
    def known_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level
