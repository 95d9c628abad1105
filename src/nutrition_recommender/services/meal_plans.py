"""Multi-day meal plan composition."""

from collections.abc import Sequence

from nutrition_recommender.domain.foods import FoodRecord
from nutrition_recommender.domain.recommendations import (
    MealSlot,
    Recommendation,
    RequestType,
)
from nutrition_recommender.domain.users import UserContext
from nutrition_recommender.services.scoring import DEFAULT_REGION
from nutrition_recommender.services.selection import recommend

MEAL_SLOTS: tuple[tuple[MealSlot, int, RequestType], ...] = (
    (MealSlot.BREAKFAST, 2, RequestType.BALANCED),
    (MealSlot.LUNCH, 3, RequestType.BALANCED),
    (MealSlot.DINNER, 3, RequestType.BALANCED),
)
SNACK_SLOT: tuple[MealSlot, int, RequestType] = (
    MealSlot.SNACK,
    2,
    RequestType.HEALTHY,
)


def plan_slots(include_snacks: bool) -> tuple[tuple[MealSlot, int, RequestType], ...]:
    if include_snacks:
        return (*MEAL_SLOTS, SNACK_SLOT)
    return MEAL_SLOTS


def compose_day(
    foods: Sequence[FoodRecord],
    context: UserContext,
    include_snacks: bool,
    *,
    precise_portions: bool = False,
    default_region: str = DEFAULT_REGION,
) -> list[Recommendation]:
    """Breakfast, lunch, dinner (and snack) selections for one day."""
    meals: list[Recommendation] = []
    for slot, count, request_type in plan_slots(include_snacks):
        meals.extend(
            recommend(
                foods,
                context,
                request_type,
                count,
                slot,
                precise_portions=precise_portions,
                default_region=default_region,
            )
        )
    return meals


def compose_meal_plan(  # noqa: PLR0913
    foods: Sequence[FoodRecord],
    context: UserContext,
    days: int,
    include_snacks: bool = True,
    *,
    precise_portions: bool = False,
    default_region: str = DEFAULT_REGION,
) -> dict[str, list[Recommendation]]:
    """Plan keyed day_1..day_N.

    Days are independent: nothing carries over, so the same food can repeat
    across days.
    """
    return {
        f"day_{day}": compose_day(
            foods,
            context,
            include_snacks,
            precise_portions=precise_portions,
            default_region=default_region,
        )
        for day in range(1, max(days, 0) + 1)
    }
