"""Finds foods that fill nutrient gaps found by the balance analyzer."""

from collections.abc import Callable, Sequence

from nutrition_recommender.domain.analysis import (
    NutrientDeficiency,
    NutritionalBalanceAnalysis,
)
from nutrition_recommender.domain.foods import FoodRecord, NutritionFacts
from nutrition_recommender.domain.recommendations import Recommendation, RequestType
from nutrition_recommender.domain.users import UserContext
from nutrition_recommender.services.scoring import DEFAULT_REGION, score_foods
from nutrition_recommender.services.selection import build_recommendation

DEFICIENCY_THRESHOLD = 80.0
PER_NUTRIENT_LIMIT = 2

RICH_IN_RULES: dict[str, Callable[[NutritionFacts], bool]] = {
    "protein": lambda facts: facts.protein_g > 10,
    "fiber": lambda facts: facts.fiber_g > 5,
    "iron": lambda facts: facts.minerals.get("iron", 0.0) > 2.0,
}


def identify_deficiencies(
    analysis: NutritionalBalanceAnalysis,
) -> list[NutrientDeficiency]:
    deficiencies: list[NutrientDeficiency] = []
    if analysis.macro_balance.protein.percentage < DEFICIENCY_THRESHOLD:
        deficiencies.append(NutrientDeficiency(nutrient="protein", severity="moderate"))
    deficiencies.extend(
        NutrientDeficiency(nutrient=micro.name.lower(), severity="mild")
        for micro in analysis.micronutrients
        if micro.percentage < DEFICIENCY_THRESHOLD
    )
    return deficiencies


def foods_rich_in(nutrient: str, foods: Sequence[FoodRecord]) -> list[FoodRecord]:
    rule = RICH_IN_RULES.get(nutrient.strip().lower())
    if rule is None:
        return []
    return [food for food in foods if rule(food.nutrition)]


def complementary_recommendations(
    deficiencies: Sequence[NutrientDeficiency],
    foods: Sequence[FoodRecord],
    context: UserContext,
    max_suggestions: int,
    default_region: str = DEFAULT_REGION,
) -> list[Recommendation]:
    """Top two complementary-scored foods per deficiency, in deficiency order.

    A food rich in several missing nutrients may be suggested more than once.
    """
    suggestions: list[Recommendation] = []
    for deficiency in deficiencies:
        ranked = score_foods(
            foods_rich_in(deficiency.nutrient, foods),
            context,
            RequestType.COMPLEMENTARY,
            default_region,
        )
        suggestions.extend(
            build_recommendation(candidate, context)
            for candidate in ranked[:PER_NUTRIENT_LIMIT]
        )
    return suggestions[: max(max_suggestions, 0)]
