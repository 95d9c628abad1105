"""Portion sizing from body metrics, with regional serving units."""

import math

from nutrition_recommender.domain.foods import FoodCategory, FoodRecord, PortionGuide
from nutrition_recommender.domain.recommendations import PortionRecommendation
from nutrition_recommender.domain.users import UserContext

DEFAULT_DAILY_CALORIES = 2000.0
DEFAULT_HEIGHT_CM = {"male": 175.0, "other": 165.0}
MEAL_SHARE_PER_FOOD = 0.4
DEFAULT_MEAL_FRACTION = 0.25

ACTIVITY_FACTORS: dict[str, float] = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very active": 1.9,
}

MEAL_FRACTIONS: dict[str, float] = {
    "breakfast": 0.25,
    "lunch": 0.35,
    "dinner": 0.30,
    "snack": 0.10,
}

# Used when the food's portion guide has no units.
CATEGORY_UNITS: dict[FoodCategory, tuple[str, float]] = {
    FoodCategory.STAPLE_GRAIN: ("katori", 150.0),
    FoodCategory.LEGUME_DISH: ("katori", 150.0),
    FoodCategory.FLATBREAD: ("piece", 30.0),
    FoodCategory.VEGETABLE_DISH: ("katori", 100.0),
    FoodCategory.CURRY: ("katori", 100.0),
}

# Guide units reported ahead of any others, with the name they are reported as.
PREFERRED_UNITS: tuple[tuple[str, str], ...] = (("katori", "katori"), ("roti", "piece"))

UNIT_GRAMS: dict[str, float] = {
    "katori": 150.0,
    "glass": 250.0,
    "roti": 30.0,
    "piece": 30.0,
    "spoon": 15.0,
    "tablespoon": 15.0,
    "cup": 200.0,
}
METRIC_UNITS: dict[str, float] = {
    "g": 1.0,
    "gram": 1.0,
    "grams": 1.0,
    "kg": 1000.0,
    "kilogram": 1000.0,
    "kilograms": 1000.0,
}

GOAL_PORTION_REASONS: tuple[tuple[str, str], ...] = (
    ("weight loss", "Portion adjusted for weight loss goals"),
    ("weight gain", "Larger portion to support weight gain"),
    ("muscle building", "Protein-rich portion for muscle building"),
)

_MALE_GENDERS = {"male", "m", "man"}


def is_male(context: UserContext) -> bool:
    return context.gender.strip().lower() in _MALE_GENDERS


def activity_factor(activity_level: str) -> float:
    default = ACTIVITY_FACTORS["moderate"]
    return ACTIVITY_FACTORS.get(activity_level.strip().lower(), default)


def daily_calorie_needs(context: UserContext) -> float:
    """Harris-Benedict BMR times activity factor; 2000 kcal without a weight."""
    if context.weight_kg is None:
        return DEFAULT_DAILY_CALORIES
    weight = context.weight_kg
    male = is_male(context)
    height = context.height_cm or DEFAULT_HEIGHT_CM["male" if male else "other"]
    if male:
        bmr = 88.362 + 13.397 * weight + 4.799 * height - 5.677 * context.age
    else:
        bmr = 447.593 + 9.247 * weight + 3.098 * height - 4.330 * context.age
    calories = bmr * activity_factor(context.activity_level)
    if not math.isfinite(calories):
        return DEFAULT_DAILY_CALORIES
    return max(calories, 0.0)


def meal_calorie_target(daily_calories: float, meal_slot: str) -> float:
    fraction = MEAL_FRACTIONS.get(meal_slot.strip().lower(), DEFAULT_MEAL_FRACTION)
    return max(daily_calories * fraction, 0.0)


def regional_portion(food: FoodRecord, grams: float) -> tuple[str, float]:
    """Express grams in the food's primary regional unit."""
    unit, unit_grams = _primary_unit(food)
    if unit_grams <= 0:
        return "grams", round(max(grams, 0.0), 2)
    return unit, round(max(grams, 0.0) / unit_grams, 2)


def convert_to_grams(
    quantity: float, unit: str, guide: PortionGuide | None = None
) -> float:
    """Convert a quantity in grams, kilograms or a regional unit to grams.

    Unknown units are taken as grams.
    """
    amount = max(quantity, 0.0)
    key = unit.strip().lower()
    if key in METRIC_UNITS:
        return amount * METRIC_UNITS[key]
    if guide is not None and guide.units.get(key, 0) > 0:
        return amount * guide.units[key]
    return amount * UNIT_GRAMS.get(key, 1.0)


def portion_reason(context: UserContext, meal_slot: str) -> str:
    for goal, reason in GOAL_PORTION_REASONS:
        if context.has_goal(goal):
            return reason
    return f"Balanced portion for {meal_slot}"


def recommend_portion(
    food: FoodRecord, context: UserContext, meal_slot: str
) -> PortionRecommendation:
    """Size the food to supply 40% of the meal slot's calorie target."""
    target = meal_calorie_target(daily_calorie_needs(context), meal_slot)
    calories_per_gram = food.nutrition.calories / 100
    grams = _serving_grams(food)
    if calories_per_gram > 0:
        sized = target * MEAL_SHARE_PER_FOOD / calories_per_gram
        if math.isfinite(sized):
            grams = sized
    return _portion(food, grams, portion_reason(context, meal_slot))


def standard_portion(food: FoodRecord) -> PortionRecommendation:
    """The record's default serving."""
    return _portion(food, _serving_grams(food), "Standard serving size")


def _portion(food: FoodRecord, grams: float, reason: str) -> PortionRecommendation:
    if not math.isfinite(grams):
        grams = _serving_grams(food)
    grams = max(grams, 0.0)
    unit, quantity = regional_portion(food, grams)
    calories = grams * food.nutrition.calories / 100
    # Unusable calorie data reports the serving without an energy estimate.
    calories = max(calories, 0.0) if math.isfinite(calories) else 0.0
    return PortionRecommendation(
        grams=round(grams),
        regional_unit=unit,
        regional_quantity=quantity,
        calories=round(calories),
        reason=reason,
    )


def _serving_grams(food: FoodRecord) -> float:
    grams = food.portion_guide.default_grams
    return grams if math.isfinite(grams) and grams > 0 else 100.0


def _primary_unit(food: FoodRecord) -> tuple[str, float]:
    units = food.portion_guide.units
    for unit, label in PREFERRED_UNITS:
        if _usable(units.get(unit)):
            return label, units[unit]
    for unit, grams in units.items():
        if _usable(grams):
            return unit, grams
    return CATEGORY_UNITS.get(food.category, ("grams", 1.0))


def _usable(grams: float | None) -> bool:
    return grams is not None and math.isfinite(grams) and grams > 0
