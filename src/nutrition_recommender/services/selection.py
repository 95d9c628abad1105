"""Turns ranked candidates into portioned, explained recommendations."""

import logging
from collections.abc import Sequence
from dataclasses import replace

from nutrition_recommender.domain.foods import (
    CATEGORY_COURSES,
    Course,
    FoodCategory,
    FoodRecord,
)
from nutrition_recommender.domain.recommendations import (
    MealSlot,
    Recommendation,
    RequestType,
    ScoredCandidate,
)
from nutrition_recommender.domain.users import UserContext
from nutrition_recommender.services.portions import (
    recommend_portion,
    standard_portion,
)
from nutrition_recommender.services.scoring import (
    DEFAULT_REGION,
    justify,
    score_foods,
)

_logger = logging.getLogger(__name__)

SLOT_COURSES: dict[str, frozenset[Course]] = {
    MealSlot.BREAKFAST: frozenset({Course.STAPLE, Course.SNACK, Course.DRINK}),
    MealSlot.LUNCH: frozenset({Course.MAIN, Course.STAPLE}),
    MealSlot.DINNER: frozenset({Course.MAIN, Course.STAPLE}),
    MealSlot.SNACK: frozenset({Course.SNACK}),
}

CONDITION_TIPS: dict[str, str] = {
    "diabetes": "Cook with minimal oil and avoid adding sugar",
    "hypertension": "Use herbs and spices instead of salt for flavor",
}

CATEGORY_TIPS: dict[FoodCategory, str] = {
    FoodCategory.VEGETABLE_DISH: "Steam or sauté lightly to retain nutrients",
}


def courses_for_slot(meal_slot: str) -> frozenset[Course]:
    """Courses acceptable for a requested slot; a course name matches itself."""
    key = meal_slot.strip().lower()
    if key in SLOT_COURSES:
        return SLOT_COURSES[key]
    if key in {course.value for course in Course}:
        return frozenset({Course(key)})
    return frozenset()


def filter_by_meal_slot(
    candidates: Sequence[ScoredCandidate], meal_slot: str
) -> list[ScoredCandidate]:
    accepted = courses_for_slot(meal_slot)
    return [
        candidate
        for candidate in candidates
        if CATEGORY_COURSES.get(candidate.food.category) in accepted
    ]


def cooking_tips(food: FoodRecord, context: UserContext) -> list[str]:
    tips = [
        tip
        for condition, tip in CONDITION_TIPS.items()
        if context.has_condition(condition)
    ]
    category_tip = CATEGORY_TIPS.get(food.category)
    if category_tip:
        tips.append(category_tip)
    if food.cooking_method.description:
        tips.append(food.cooking_method.description)
    return tips


def build_recommendation(
    candidate: ScoredCandidate, context: UserContext, meal_slot: str | None = None
) -> Recommendation:
    food = candidate.food
    return Recommendation(
        food=food,
        portion=standard_portion(food),
        score=candidate.score,
        reasons=tuple(justify(food, context)),
        cooking_tips=tuple(cooking_tips(food, context)),
        meal_slot=meal_slot,
    )


def select_recommendations(
    candidates: Sequence[ScoredCandidate],
    context: UserContext,
    max_count: int,
    meal_slot: str | None = None,
) -> list[Recommendation]:
    """Restrict to the meal slot, keep the top max_count, and explain each."""
    selected = (
        filter_by_meal_slot(candidates, meal_slot) if meal_slot else list(candidates)
    )
    if meal_slot and not selected:
        _logger.info("No candidates for meal slot %s", meal_slot)
    return [
        build_recommendation(candidate, context, meal_slot)
        for candidate in selected[: max(max_count, 0)]
    ]


def recommend(  # noqa: PLR0913
    foods: Sequence[FoodRecord],
    context: UserContext,
    request_type: RequestType,
    max_count: int,
    meal_slot: str | None = None,
    *,
    precise_portions: bool = False,
    default_region: str = DEFAULT_REGION,
) -> list[Recommendation]:
    """Score, rank and select from an already filtered snapshot."""
    ranked = score_foods(foods, context, request_type, default_region)
    recommendations = select_recommendations(ranked, context, max_count, meal_slot)
    if not (precise_portions and meal_slot):
        return recommendations
    return [
        replace(
            recommendation,
            portion=recommend_portion(recommendation.food, context, meal_slot),
        )
        for recommendation in recommendations
    ]
