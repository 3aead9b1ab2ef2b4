"""Storage container sizing for meal-prep portions.

Recommendations are built from a fixed catalog of common container sizes,
searched smallest first for the tightest fit that leaves 10% headroom.
"""
from __future__ import annotations
import logging
import math
from meal_prep_calculator.models import (
    ContainerPlan,
    ContainerRecommendation,
    ContainerSize,
    ContainerType,
    StorageKind,
)

logger = logging.getLogger(__name__)

_MICROWAVE_SAFE = frozenset({"freezer", "fridge", "microwave"})
_COLD_ONLY = frozenset({"freezer", "fridge"})

CONTAINER_SIZES: tuple[ContainerSize, ...] = (
    ContainerSize(label="8 oz (1 cup)", volume_oz=8, volume_ml=237, typical_servings=0.5, suitable_for=_MICROWAVE_SAFE),
    ContainerSize(label="12 oz", volume_oz=12, volume_ml=355, typical_servings=0.75, suitable_for=_MICROWAVE_SAFE),
    ContainerSize(label="16 oz (1 pint)", volume_oz=16, volume_ml=473, typical_servings=1, suitable_for=_MICROWAVE_SAFE),
    ContainerSize(label="24 oz", volume_oz=24, volume_ml=710, typical_servings=1.5, suitable_for=_MICROWAVE_SAFE),
    ContainerSize(label="32 oz (1 quart)", volume_oz=32, volume_ml=946, typical_servings=2, suitable_for=_MICROWAVE_SAFE),
    ContainerSize(label="48 oz (1.5 quarts)", volume_oz=48, volume_ml=1420, typical_servings=3, suitable_for=_MICROWAVE_SAFE),
    ContainerSize(label="64 oz (2 quarts)", volume_oz=64, volume_ml=1893, typical_servings=4, suitable_for=_MICROWAVE_SAFE),
    ContainerSize(label="96 oz (3 quarts)", volume_oz=96, volume_ml=2839, typical_servings=6, suitable_for=_COLD_ONLY),
    ContainerSize(label="128 oz (1 gallon)", volume_oz=128, volume_ml=3785, typical_servings=8, suitable_for=_COLD_ONLY),
)

# Fluid ounces per serving
VOLUME_PER_SERVING: dict[str, float] = {
    "soup": 12,
    "stew": 10,
    "solid": 6,
    "liquid": 12,
    "mixed": 8,
}
DEFAULT_VOLUME_PER_SERVING = 8

HEADROOM = 1.1
SINGLE_SERVE_MAX_SERVINGS = 12
MULTI_SERVE_PORTIONS = 2
BULK_MAX_PORTIONS = 8
BULK_MIN_VOLUME_OZ = 32


def estimate_volume_per_serving(recipe_type: str | None = None) -> float:
    return VOLUME_PER_SERVING.get(recipe_type or "mixed", DEFAULT_VOLUME_PER_SERVING)


def find_best_container_size(volume_oz: float, storage: StorageKind) -> ContainerSize:
    """Smallest container for `storage` holding volume_oz plus headroom, else the largest one."""
    suitable = [c for c in CONTAINER_SIZES if storage in c.suitable_for]
    target = volume_oz * HEADROOM
    for container in suitable:
        if container.volume_oz >= target:
            return container
    logger.debug("No %s container holds %.1f oz, using the largest", storage, target)
    return suitable[-1]


def _container_tips(
    container: ContainerSize, quantity: int, storage: StorageKind, container_type: ContainerType
) -> list[str]:
    tips: list[str] = []
    if storage == "freezer":
        tips.append("Use freezer-safe containers with tight-fitting lids")
        tips.append("Leave 1/2 inch headspace for expansion when freezing")
        if "microwave" in container.suitable_for:
            tips.append("Thaw in refrigerator overnight, then reheat in microwave-safe container")
    else:
        tips.append("Use airtight containers to maintain freshness")
        if "microwave" in container.suitable_for:
            tips.append("Container is microwave-safe for easy reheating")

    if container_type == "single-serve":
        tips.append("Perfect for grab-and-go meals")
        tips.append("Easy to portion control")
    elif container_type == "multi-serve":
        tips.append("Good for family meals or meal sharing")
        tips.append("Portion out servings as needed")
    else:
        tips.append("Best for bulk storage")
        tips.append("Portion into smaller containers when ready to use")

    if quantity > 1:
        tips.append(f"You'll need {quantity} containers of this size")
    return tips


def _recommend(
    servings: float,
    volume_per_serving: float,
    portions: float,
    storage: StorageKind,
    container_type: ContainerType,
) -> ContainerRecommendation:
    container = find_best_container_size(volume_per_serving * portions, storage)
    servings_per_container = math.floor(container.volume_oz / volume_per_serving)
    quantity = math.ceil(servings / servings_per_container)
    return ContainerRecommendation(
        servings=servings,
        container_size=container,
        container_type=container_type,
        quantity=quantity,
        volume=servings * volume_per_serving,
        recommendations=_container_tips(container, quantity, storage, container_type),
    )


def recommend_for_servings(
    servings: float,
    volume_per_serving: float,
    storage: StorageKind,
    prefer_single_serve: bool,
) -> list[ContainerRecommendation]:
    """Packing options for one storage kind, ordered single-serve, multi-serve, bulk."""
    if servings <= 0:
        return []

    options: list[ContainerRecommendation] = []
    if prefer_single_serve and servings <= SINGLE_SERVE_MAX_SERVINGS:
        options.append(_recommend(servings, volume_per_serving, 1, storage, "single-serve"))
    if servings >= 2:
        options.append(_recommend(servings, volume_per_serving, MULTI_SERVE_PORTIONS, storage, "multi-serve"))
    if servings >= 4:
        bulk = _recommend(servings, volume_per_serving, min(servings, BULK_MAX_PORTIONS), storage, "bulk")
        if bulk.container_size.volume_oz >= BULK_MIN_VOLUME_OZ:
            options.append(bulk)
    return options


def get_container_recommendations(
    total_servings: float,
    servings_to_freeze: float,
    servings_for_week: float,
    recipe_type: str | None = None,
    prefer_single_serve: bool = True,
) -> ContainerPlan:
    volume_per_serving = estimate_volume_per_serving(recipe_type)
    overall = recommend_for_servings(total_servings, volume_per_serving, "fridge", False)
    return ContainerPlan(
        freeze=recommend_for_servings(servings_to_freeze, volume_per_serving, "freezer", prefer_single_serve),
        fresh=recommend_for_servings(servings_for_week, volume_per_serving, "fridge", prefer_single_serve),
        all=overall[0] if overall else None,
    )


def format_container_recommendation(rec: ContainerRecommendation) -> str:
    return f"{rec.quantity}x {rec.container_size.label} ({rec.container_type.replace('-', ' ')})"
