from __future__ import annotations
from typing import Any, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator

Difficulty = Literal["easy", "medium", "hard"]
RecipeType = Literal["soup", "stew", "solid", "liquid", "mixed"]
StorageKind = Literal["freezer", "fridge"]
ContainerType = Literal["single-serve", "multi-serve", "bulk"]


class ParsedQuantity(BaseModel):
    amount: float
    unit: str
    ingredient_name: str


class Recipe(BaseModel):
    title: str = ""
    description: Optional[str] = None
    servings: Optional[float] = None
    ingredients: list[str] = Field(default_factory=list)
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: Optional[float] = None
    sugar: Optional[float] = None
    cook_time: Optional[float] = None
    difficulty: Difficulty = "medium"

    @field_validator("ingredients", mode="before")
    @classmethod
    def flatten_ingredient_objects(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return v
        return [item["text"] if isinstance(item, dict) and "text" in item else item for item in v]


class ScaledIngredient(BaseModel):
    original_text: str
    scaled_text: str
    original_amount: float
    scaled_amount: float
    unit: str
    ingredient_name: str


class ScaledRecipe(BaseModel):
    servings: float
    servings_to_freeze: float = 0
    servings_for_week: float = 0
    ingredients: list[ScaledIngredient] = Field(default_factory=list)
    # Whole numbers, except inf or nan when the scale factor is not finite
    calories: Union[int, float]
    protein: Union[int, float]
    carbs: Union[int, float]
    fat: Union[int, float]
    fiber: Optional[Union[int, float]] = None
    sugar: Optional[Union[int, float]] = None


class TimeBreakdown(BaseModel):
    prep_time: float
    active_cooking_time: float
    passive_cooking_time: float


class BatchCookingTimeEstimate(BaseModel):
    original_time: float
    estimated_time: float
    scale_factor: float
    breakdown: TimeBreakdown
    efficiency_gain: float
    tips: list[str] = Field(default_factory=list)


class ContainerSize(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    volume_oz: float
    volume_ml: float
    typical_servings: float
    suitable_for: frozenset[Literal["freezer", "fridge", "microwave", "oven"]]


class ContainerRecommendation(BaseModel):
    servings: float
    container_size: ContainerSize
    container_type: ContainerType
    quantity: int
    volume: float
    recommendations: list[str] = Field(default_factory=list)


class ContainerPlan(BaseModel):
    freeze: list[ContainerRecommendation] = Field(default_factory=list)
    fresh: list[ContainerRecommendation] = Field(default_factory=list)
    all: Optional[ContainerRecommendation] = None


class MealPrepPlan(BaseModel):
    recipe_type: RecipeType
    scaled_recipe: ScaledRecipe
    time_estimate: Optional[BatchCookingTimeEstimate] = None
    containers: ContainerPlan
