"""Aggregates consumed items and compares them with daily targets."""

import math
from collections.abc import Sequence

from nutrition_recommender.domain.analysis import (
    FoodQuantity,
    MacroAnalysis,
    MacroBalance,
    MicronutrientAnalysis,
    NutritionalBalanceAnalysis,
    NutritionalTargets,
)
from nutrition_recommender.domain.foods import NutritionFacts
from nutrition_recommender.domain.users import UserContext
from nutrition_recommender.services.portions import daily_calorie_needs, is_male

PROTEIN_CALORIE_SHARE = 0.15
CARB_CALORIE_SHARE = 0.55
FAT_CALORIE_SHARE = 0.30
KCAL_PER_G_PROTEIN = 4.0
KCAL_PER_G_CARBS = 4.0
KCAL_PER_G_FAT = 9.0
FIBER_TARGET_G = 25.0
# Target only; sodium intake is not tracked in NutritionFacts.
SODIUM_TARGET_MG = 2300.0
IRON_TARGET_MG = {"male": 8.0, "other": 18.0}

MAX_PERCENTAGE = 200.0
SUGGESTION_THRESHOLD = 0.8


def total_nutrition(items: Sequence[FoodQuantity]) -> NutritionFacts:
    """Sum items scaled from per-100 g facts by grams/100."""
    calories = protein = carbs = fat = fiber = 0.0
    vitamins: dict[str, float] = {}
    minerals: dict[str, float] = {}
    for item in items:
        facts = item.nutrition
        multiplier = max(item.grams, 0.0) / 100
        calories += facts.calories * multiplier
        protein += facts.protein_g * multiplier
        carbs += facts.carbs_g * multiplier
        fat += facts.fat_g * multiplier
        fiber += facts.fiber_g * multiplier
        for name, amount in facts.vitamins.items():
            vitamins[name] = vitamins.get(name, 0.0) + amount * multiplier
        for name, amount in facts.minerals.items():
            minerals[name] = minerals.get(name, 0.0) + amount * multiplier
    return NutritionFacts(
        calories=calories,
        protein_g=protein,
        carbs_g=carbs,
        fat_g=fat,
        fiber_g=fiber,
        vitamins=vitamins,
        minerals=minerals,
    )


def nutritional_targets(context: UserContext) -> NutritionalTargets:
    calories = daily_calorie_needs(context)
    return NutritionalTargets(
        calories=calories,
        protein_g=calories * PROTEIN_CALORIE_SHARE / KCAL_PER_G_PROTEIN,
        carbs_g=calories * CARB_CALORIE_SHARE / KCAL_PER_G_CARBS,
        fat_g=calories * FAT_CALORIE_SHARE / KCAL_PER_G_FAT,
        fiber_g=FIBER_TARGET_G,
        iron_mg=IRON_TARGET_MG["male" if is_male(context) else "other"],
        sodium_mg=SODIUM_TARGET_MG,
    )


def percentage_of_target(current: float, target: float) -> float:
    """current/target as a percentage, clamped to [0, 200]."""
    if not (target > 0 and math.isfinite(current)):
        return 0.0
    return min(max(current / target * 100, 0.0), MAX_PERCENTAGE)


def analyze_balance(
    items: Sequence[FoodQuantity], context: UserContext
) -> NutritionalBalanceAnalysis:
    totals = total_nutrition(items)
    targets = nutritional_targets(context)
    return NutritionalBalanceAnalysis(
        total_calories=totals.calories,
        target_calories=targets.calories,
        macro_balance=MacroBalance(
            carbs=_macro(totals.carbs_g, targets.carbs_g),
            protein=_macro(totals.protein_g, targets.protein_g),
            fat=_macro(totals.fat_g, targets.fat_g),
        ),
        micronutrients=[
            _micronutrient("Fiber", totals.fiber_g, targets.fiber_g),
            _micronutrient("Iron", totals.minerals.get("iron", 0.0), targets.iron_mg),
        ],
        suggestions=balance_suggestions(totals, targets),
    )


def balance_suggestions(
    totals: NutritionFacts, targets: NutritionalTargets
) -> list[str]:
    suggestions: list[str] = []
    if totals.protein_g < targets.protein_g * SUGGESTION_THRESHOLD:
        suggestions.append("Add more protein-rich foods like dal, paneer, or legumes")
    if totals.fiber_g < targets.fiber_g * SUGGESTION_THRESHOLD:
        suggestions.append("Include more vegetables and whole grains for fiber")
    if totals.calories < targets.calories * SUGGESTION_THRESHOLD:
        suggestions.append("Consider adding healthy snacks to meet calorie needs")
    return suggestions


def _macro(current: float, target: float) -> MacroAnalysis:
    return MacroAnalysis(
        current=current,
        target=target,
        percentage=percentage_of_target(current, target),
    )


def _micronutrient(name: str, current: float, target: float) -> MicronutrientAnalysis:
    return MicronutrientAnalysis(
        name=name,
        current=current,
        target=target,
        percentage=percentage_of_target(current, target),
        status="Adequate" if current >= target else "Low",
    )
