"""Builds the defaulted user context consumed by every engine step."""

import math
from collections.abc import Iterable

from nutrition_recommender.domain.users import UserContext, UserProfile

DEFAULT_AGE = 25
DEFAULT_GENDER = "unknown"
DEFAULT_ACTIVITY_LEVEL = "moderate"


def build_user_context(profile: UserProfile) -> UserContext:
    """Substitute defaults for unset profile fields. Never fails."""
    return UserContext(
        age=profile.age if profile.age is not None else DEFAULT_AGE,
        gender=_clean_text(profile.gender) or DEFAULT_GENDER,
        activity_level=normalize_activity_level(profile.activity_level),
        health_goals=_clean_list(profile.health_goals),
        medical_conditions=_clean_list(profile.medical_conditions),
        allergies=_clean_list(profile.allergies),
        dietary_needs=_clean_list(profile.dietary_needs),
        food_dislikes=_clean_list(profile.food_dislikes),
        cultural_preferences=dict(profile.cultural_preferences or {}),
        height_cm=_positive(profile.height_cm),
        weight_kg=_positive(profile.weight_kg),
        bmi=compute_bmi(profile.height_cm, profile.weight_kg),
        is_premium=bool(profile.is_premium),
    )


def normalize_activity_level(value: str | None) -> str:
    """Lower-case the level and fold "very-active"/"very_active" to "very active"."""
    cleaned = _clean_text(value)
    if not cleaned:
        return DEFAULT_ACTIVITY_LEVEL
    return " ".join(cleaned.lower().replace("-", " ").replace("_", " ").split())


def compute_bmi(height_cm: float | None, weight_kg: float | None) -> float | None:
    """Return BMI rounded to one decimal, or None without both metrics."""
    height = _positive(height_cm)
    weight = _positive(weight_kg)
    if height is None or weight is None:
        return None
    height_m = height / 100
    return round(weight / (height_m * height_m), 1)


def _clean_text(value: str | None) -> str:
    return value.strip() if isinstance(value, str) else ""


def _clean_list(values: Iterable[str] | None) -> tuple[str, ...]:
    if not values:
        return ()
    return tuple(
        item.strip() for item in values if isinstance(item, str) and item.strip()
    )


def _positive(value: float | None) -> float | None:
    if value is None or not math.isfinite(value) or value <= 0:
        return None
    return float(value)
