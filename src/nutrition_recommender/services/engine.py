"""Public recommendation engine operations."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from nutrition_recommender.domain.analysis import (
    FoodQuantity,
    NutritionalBalanceAnalysis,
)
from nutrition_recommender.domain.foods import FoodRecord
from nutrition_recommender.domain.recommendations import (
    MealPlanResult,
    PortionRecommendation,
    RecommendationResult,
    RequestType,
)
from nutrition_recommender.domain.users import UserContext, UserProfile
from nutrition_recommender.services.balance import analyze_balance
from nutrition_recommender.services.catalog import (
    CatalogConstraints,
    CatalogUnavailableError,
    FoodCatalogProvider,
    find_food,
    search_foods,
)
from nutrition_recommender.services.complementary import (
    complementary_recommendations,
    identify_deficiencies,
)
from nutrition_recommender.services.context import build_user_context
from nutrition_recommender.services.filtering import filter_available_foods
from nutrition_recommender.services.meal_plans import compose_meal_plan
from nutrition_recommender.services.portions import recommend_portion
from nutrition_recommender.services.scoring import DEFAULT_REGION
from nutrition_recommender.services.selection import recommend

_logger = logging.getLogger(__name__)


def coerce_request_type(value: RequestType | str) -> RequestType:
    """Map a request type name to RequestType; unknown names mean balanced."""
    if isinstance(value, RequestType):
        return value
    try:
        return RequestType(str(value).strip().lower())
    except ValueError:
        _logger.warning("Unknown request type %r, using balanced", value)
        return RequestType.BALANCED


@dataclass
class RecommendationEngine:
    """Entry point for recommendations, meal plans, portions and balance.

    The catalog is fetched at most once per top-level call. A failed fetch is
    reported through the result's success flag and error string; it is never
    raised to the caller.
    """

    catalog: FoodCatalogProvider
    default_region: str = DEFAULT_REGION
    debug: bool = False

    async def generate_recommendations(  # noqa: PLR0913
        self,
        user: UserProfile,
        request_type: RequestType | str = RequestType.BALANCED,
        max_count: int = 10,
        meal_slot: str | None = None,
        exclude_ingredients: Sequence[str] | None = None,
        *,
        precise_portions: bool = False,
    ) -> RecommendationResult:
        """Rank catalog foods for the user, optionally for one meal slot."""
        context = build_user_context(user)
        try:
            foods = await self._available_foods(
                context, exclude_ingredients, action="recommendations"
            )
        except CatalogUnavailableError as exc:
            return RecommendationResult(
                recommendations=[],
                context=context,
                success=False,
                error=f"Failed to generate recommendations: {exc}",
            )

        recommendations = recommend(
            foods,
            context,
            coerce_request_type(request_type),
            max_count,
            meal_slot,
            precise_portions=precise_portions,
            default_region=self.default_region,
        )
        if self.debug:
            _logger.info(
                "Recommendations: slot=%s candidates=%s returned=%s",
                meal_slot,
                len(foods),
                len(recommendations),
            )
        return RecommendationResult(
            recommendations=recommendations, context=context, success=True
        )

    async def generate_meal_plan(
        self,
        user: UserProfile,
        days: int,
        include_snacks: bool = True,
        *,
        precise_portions: bool = False,
    ) -> MealPlanResult:
        """Build a day_1..day_N plan from one catalog snapshot."""
        context = build_user_context(user)
        try:
            foods = await self._available_foods(context, None, action="meal_plan")
        except CatalogUnavailableError as exc:
            return MealPlanResult(
                meal_plan={},
                total_days=0,
                context=context,
                success=False,
                error=f"Failed to generate meal plan: {exc}",
            )

        plan = compose_meal_plan(
            foods,
            context,
            days,
            include_snacks,
            precise_portions=precise_portions,
            default_region=self.default_region,
        )
        if self.debug:
            _logger.info(
                "Meal plan: days=%s items=%s",
                len(plan),
                sum(len(meals) for meals in plan.values()),
            )
        return MealPlanResult(
            meal_plan=plan, total_days=len(plan), context=context, success=True
        )

    def get_portion_recommendation(
        self, user: UserProfile, food: FoodRecord, meal_slot: str
    ) -> PortionRecommendation:
        """Portion of food sized for the user's meal slot target."""
        return recommend_portion(food, build_user_context(user), meal_slot)

    def analyze_nutritional_balance(
        self, items: Sequence[FoodQuantity], user: UserProfile
    ) -> NutritionalBalanceAnalysis:
        """Compare consumed items with the user's daily targets."""
        return analyze_balance(items, build_user_context(user))

    async def get_complementary_foods(
        self,
        current_items: Sequence[FoodQuantity],
        user: UserProfile,
        max_suggestions: int = 5,
    ) -> RecommendationResult:
        """Suggest foods rich in the nutrients the current items lack."""
        context = build_user_context(user)
        deficiencies = identify_deficiencies(analyze_balance(current_items, context))
        if not deficiencies:
            return RecommendationResult(
                recommendations=[], context=context, success=True
            )
        try:
            foods = await self._available_foods(context, None, action="complementary")
        except CatalogUnavailableError as exc:
            return RecommendationResult(
                recommendations=[],
                context=context,
                success=False,
                error=f"Failed to find complementary foods: {exc}",
            )

        return RecommendationResult(
            recommendations=complementary_recommendations(
                deficiencies,
                foods,
                context,
                max_suggestions,
                default_region=self.default_region,
            ),
            context=context,
            success=True,
        )

    async def search_foods(self, query: str) -> list[FoodRecord]:
        """Catalog foods whose name or alias contains the query."""
        return search_foods(await self._fetch_catalog(action="search"), query)

    async def get_food(self, food_id: str) -> FoodRecord | None:
        return find_food(await self._fetch_catalog(action="get_food"), food_id)

    async def _available_foods(
        self,
        context: UserContext,
        exclude_ingredients: Sequence[str] | None,
        *,
        action: str,
    ) -> list[FoodRecord]:
        foods = await self._fetch_catalog(action=action)
        return filter_available_foods(foods, context, exclude_ingredients)

    async def _fetch_catalog(self, *, action: str) -> list[FoodRecord]:
        """Fetch a catalog snapshot, wrapping any provider failure."""
        try:
            return list(await self.catalog.fetch_candidates(CatalogConstraints()))
        except CatalogUnavailableError as exc:
            _logger.warning("Catalog unavailable during %s: %s", action, exc)
            raise
        except Exception as exc:
            _logger.warning("Catalog unavailable during %s: %s", action, exc)
            raise CatalogUnavailableError(f"catalog unavailable ({exc})") from exc
