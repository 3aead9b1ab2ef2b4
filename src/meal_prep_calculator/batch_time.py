"""Batch cooking time estimates.

Cooking time does not scale linearly with batch size. A recipe's time is split
into prep, active and passive phases, and each phase grows at its own rate:
chopping scales almost linearly, stirring partly parallelizes, and oven or
simmer time barely changes because the equipment holds the whole batch.
"""
from __future__ import annotations
import math
from typing import NamedTuple
from meal_prep_calculator.arithmetic import format_number, round_half_up, round_to_tenth, safe_divide
from meal_prep_calculator.models import BatchCookingTimeEstimate, TimeBreakdown
from meal_prep_calculator.scaling import compute_scale_factor


class PhaseRatios(NamedTuple):
    prep: float
    active: float
    passive: float


DIFFICULTY_RATIOS: dict[str, PhaseRatios] = {
    "easy": PhaseRatios(prep=0.20, active=0.30, passive=0.50),
    "medium": PhaseRatios(prep=0.30, active=0.40, passive=0.30),
    "hard": PhaseRatios(prep=0.40, active=0.50, passive=0.10),
}

PREP_EFFICIENCY = 0.80
ACTIVE_EFFICIENCY = 0.65
PASSIVE_EFFICIENCY = 0.20

LARGE_BATCH_FACTOR = 3
VERY_LARGE_BATCH_FACTOR = 5
LARGE_BATCH_BUFFER_MINUTES = 10
VERY_LARGE_BATCH_BUFFER_MINUTES = 15


def _tips(scale_factor: float, ratios: PhaseRatios) -> list[str]:
    tips: list[str] = []
    if scale_factor >= 3:
        tips.append("Large batch - consider using multiple pans/ovens to save time")
        tips.append("Prep all ingredients before starting to cook")
    if scale_factor >= 2:
        tips.append("Batch cooking saves time - prep work can be done in one go")
    if ratios.passive > 0.3:
        tips.append("Most cooking is passive - perfect for batch prep!")
    if ratios.active > 0.4:
        tips.append("This recipe requires active attention - monitor closely during batch cooking")
    if scale_factor >= 4:
        tips.append("Very large batch - allow extra time for organization and storage")
    return tips


def _buffer_minutes(scale_factor: float) -> int:
    if scale_factor >= VERY_LARGE_BATCH_FACTOR:
        return VERY_LARGE_BATCH_BUFFER_MINUTES
    if scale_factor >= LARGE_BATCH_FACTOR:
        return LARGE_BATCH_BUFFER_MINUTES
    return 0


def estimate_batch_cooking_time(
    original_cook_time: float,
    original_servings: float,
    scaled_servings: float,
    difficulty: str = "medium",
) -> BatchCookingTimeEstimate:
    scale_factor = compute_scale_factor(scaled_servings, original_servings)
    ratios = DIFFICULTY_RATIOS.get(difficulty, DIFFICULTY_RATIOS["medium"])

    prep = original_cook_time * ratios.prep * scale_factor * PREP_EFFICIENCY
    active = original_cook_time * ratios.active * scale_factor * ACTIVE_EFFICIENCY
    # Passive time never drops below the single-batch time
    passive = original_cook_time * ratios.passive * max(1, scale_factor * PASSIVE_EFFICIENCY)

    buffer = _buffer_minutes(scale_factor)
    estimated_time = round_half_up(prep + active + passive) + buffer

    linear_time = original_cook_time * scale_factor
    efficiency_gain = safe_divide(linear_time - estimated_time, linear_time) * 100

    tips = _tips(scale_factor, ratios)
    if buffer:
        tips.append(f"Add {buffer} minutes for organization and cleanup")

    return BatchCookingTimeEstimate(
        original_time=original_cook_time,
        estimated_time=estimated_time,
        scale_factor=scale_factor,
        breakdown=TimeBreakdown(
            prep_time=round_half_up(prep),
            active_cooking_time=round_half_up(active),
            passive_cooking_time=round_half_up(passive),
        ),
        efficiency_gain=round_to_tenth(efficiency_gain),
        tips=tips,
    )


def format_time_estimate(minutes: float) -> str:
    if not math.isfinite(minutes) or minutes < 60:
        return f"{format_number(minutes)} min"

    hours = int(minutes // 60)
    mins = minutes % 60
    hour_label = f"{hours} hr{'s' if hours != 1 else ''}"
    if mins == 0:
        return hour_label
    return f"{hour_label} {format_number(mins)} min"


def get_time_savings_message(estimate: BatchCookingTimeEstimate) -> str:
    linear_time = estimate.original_time * estimate.scale_factor
    saved = linear_time - estimate.estimated_time

    if not saved > 0:
        return "Batch cooking time is similar to cooking multiple times"

    saved_percent = round_half_up(saved / linear_time * 100)
    return f"Saves ~{format_time_estimate(saved)} ({saved_percent}% efficiency gain)"
