"""Weighted, explainable scoring of candidate foods.

A food's score is the sum of five independent contributions: nutritional
density, health-goal alignment, medical-condition adjustment, regional
preference match, and a request-type modifier. Goal and condition rules are
lookup tables keyed by the lower-cased goal or condition name; names with no
rule contribute nothing.
"""

from collections.abc import Callable, Iterable, Sequence

from nutrition_recommender.domain.foods import FoodRecord, NutritionFacts
from nutrition_recommender.domain.recommendations import RequestType, ScoredCandidate
from nutrition_recommender.domain.users import UserContext

DEFAULT_REGION = "North Indian"

HIGH_PROTEIN_G = 10.0
MODERATE_PROTEIN_G = 5.0
HIGH_FIBER_G = 5.0
MODERATE_FIBER_G = 2.0
MICRONUTRIENT_WEIGHT = 0.1
REGION_MATCH_BONUS = 1.5
HEALTHY_DENSITY_FACTOR = 1.5
INDULGENT_CALORIES = 250.0
INDULGENT_BONUS = 1.5
COMPLEMENTARY_BONUS = 1.0

Rule = Callable[[NutritionFacts], float]


def _muscle_building(facts: NutritionFacts) -> float:
    if facts.protein_g > 15:
        return 3.0
    if facts.protein_g > HIGH_PROTEIN_G:
        return 2.0
    return 0.0


def _diabetes(facts: NutritionFacts) -> float:
    score = 0.0
    if facts.fiber_g > 3:
        score += 1.5
    if facts.calories > 200:
        score -= 1.0
    return score


GOAL_RULES: dict[str, Rule] = {
    "weight loss": lambda f: 2.0 if f.calories < 150 and f.fiber_g > 3 else 0.0,
    "weight gain": lambda f: 2.0 if f.calories > 200 and f.protein_g > 8 else 0.0,
    "muscle building": _muscle_building,
    "heart health": lambda f: 2.0 if f.fiber_g > 4 else 0.0,
    "blood sugar control": lambda f: (
        2.0 if f.fiber_g > 5 and f.calories < 150 else 0.0
    ),
}

CONDITION_RULES: dict[str, Rule] = {
    "diabetes": _diabetes,
    "hypertension": lambda f: 1.5 if f.calories < 150 else 0.0,
    "high cholesterol": lambda f: 1.0 if f.fiber_g > 4 else 0.0,
}


def nutritional_density_score(facts: NutritionFacts) -> float:
    score = 0.0
    if facts.protein_g > HIGH_PROTEIN_G:
        score += 2.0
    elif facts.protein_g > MODERATE_PROTEIN_G:
        score += 1.0
    if facts.fiber_g > HIGH_FIBER_G:
        score += 2.0
    elif facts.fiber_g > MODERATE_FIBER_G:
        score += 1.0
    score += (len(facts.vitamins) + len(facts.minerals)) * MICRONUTRIENT_WEIGHT
    return score


def health_goal_score(facts: NutritionFacts, goals: Iterable[str]) -> float:
    return sum(_apply_rule(GOAL_RULES, goal, facts) for goal in goals)


def medical_condition_score(facts: NutritionFacts, conditions: Iterable[str]) -> float:
    return sum(
        _apply_rule(CONDITION_RULES, condition, facts) for condition in conditions
    )


def cultural_score(food: FoodRecord, preferred_region: str) -> float:
    if matches_region(food, preferred_region):
        return REGION_MATCH_BONUS
    return 0.0


def request_type_score(food: FoodRecord, request_type: RequestType) -> float:
    """Extra weight for the request flavor.

    Healthy requests count nutritional density a second time at 1.5x.
    """
    if request_type is RequestType.HEALTHY:
        return nutritional_density_score(food.nutrition) * HEALTHY_DENSITY_FACTOR
    if request_type is RequestType.INDULGENT:
        if food.nutrition.calories > INDULGENT_CALORIES:
            return INDULGENT_BONUS
        return 0.0
    if request_type is RequestType.COMPLEMENTARY:
        return COMPLEMENTARY_BONUS
    return 0.0


def score_food(
    food: FoodRecord,
    context: UserContext,
    request_type: RequestType,
    default_region: str = DEFAULT_REGION,
) -> float:
    """Return the total score for one food. Pure; nothing is mutated."""
    facts = food.nutrition
    return (
        nutritional_density_score(facts)
        + health_goal_score(facts, context.health_goals)
        + medical_condition_score(facts, context.medical_conditions)
        + cultural_score(food, context.preferred_region or default_region)
        + request_type_score(food, request_type)
    )


def score_foods(
    foods: Sequence[FoodRecord],
    context: UserContext,
    request_type: RequestType,
    default_region: str = DEFAULT_REGION,
) -> list[ScoredCandidate]:
    """Score and rank foods, highest first; ties keep catalog order."""
    scored = [
        ScoredCandidate(
            food=food,
            score=score_food(food, context, request_type, default_region),
        )
        for food in foods
    ]
    return sorted(scored, key=lambda candidate: candidate.score, reverse=True)


def justify(food: FoodRecord, context: UserContext) -> list[str]:
    """Human-readable reasons drawn from the scoring rule triggers.

    The regional reason needs a stated preference; the default region only
    affects the score.
    """
    facts = food.nutrition
    reasons: list[str] = []
    if facts.protein_g > HIGH_PROTEIN_G:
        reasons.append(f"High in protein ({facts.protein_g:.1f}g)")
    if facts.fiber_g > HIGH_FIBER_G:
        reasons.append(f"Good source of fiber ({facts.fiber_g:.1f}g)")
    if context.has_goal("weight loss") and facts.calories < 150:
        reasons.append("Low calorie option for weight management")
    if context.has_goal("muscle building") and facts.protein_g > HIGH_PROTEIN_G:
        reasons.append("Supports muscle building")
    if context.has_goal("heart health") and facts.fiber_g > 4:
        reasons.append("Fiber-rich choice for heart health")
    if context.has_condition("diabetes") and facts.fiber_g > 3:
        reasons.append("Fiber helps keep blood sugar steady")
    if context.has_condition("hypertension") and facts.calories < 150:
        reasons.append("Light option suited to blood pressure management")
    if context.preferred_region and matches_region(food, context.preferred_region):
        reasons.append("Matches your regional cuisine preference")
    return reasons


def matches_region(food: FoodRecord, region: str) -> bool:
    return food.regions.primary_region.strip().lower() == region.strip().lower()


def _apply_rule(rules: dict[str, Rule], name: str, facts: NutritionFacts) -> float:
    rule = rules.get(name.strip().lower())
    if rule is None:
        return 0.0
    return rule(facts)
