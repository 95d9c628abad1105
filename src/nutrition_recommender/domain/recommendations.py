"""Recommendation and meal plan result models."""

from dataclasses import dataclass
from enum import StrEnum

from nutrition_recommender.domain.foods import FoodRecord
from nutrition_recommender.domain.users import UserContext


class MealSlot(StrEnum):
    """Time-of-day slot a recommendation is made for."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class RequestType(StrEnum):
    """Flavor of a recommendation request."""

    HEALTHY = "healthy"
    BALANCED = "balanced"
    INDULGENT = "indulgent"
    COMPLEMENTARY = "complementary"


@dataclass(frozen=True)
class ScoredCandidate:
    """Food paired with its score for one scoring pass."""

    food: FoodRecord
    score: float


@dataclass(frozen=True)
class PortionRecommendation:
    """Portion size in grams and in a regional unit."""

    grams: int
    regional_unit: str
    regional_quantity: float
    calories: int
    reason: str


@dataclass(frozen=True)
class Recommendation:
    """A ranked food suggestion with portion and rationale."""

    food: FoodRecord
    portion: PortionRecommendation
    score: float
    reasons: tuple[str, ...] = ()
    cooking_tips: tuple[str, ...] = ()
    meal_slot: str | None = None


@dataclass(frozen=True)
class RecommendationResult:
    """Outcome of a recommendation request."""

    recommendations: list[Recommendation]
    context: UserContext
    success: bool
    error: str | None = None


@dataclass(frozen=True)
class MealPlanResult:
    """Outcome of a multi-day meal plan request."""

    meal_plan: dict[str, list[Recommendation]]
    total_days: int
    context: UserContext
    success: bool
    error: str | None = None
