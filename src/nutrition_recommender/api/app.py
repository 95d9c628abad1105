"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Request, status

from nutrition_recommender.adapters.catalog_rows import food_to_row
from nutrition_recommender.api.schemas import (
    MealPlanRequest,
    NutritionItemsRequest,
    PortionRequest,
    RecommendationRequest,
)
from nutrition_recommender.app_logging import configure_logging
from nutrition_recommender.containers import AppContainer
from nutrition_recommender.services.catalog import CatalogUnavailableError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/foods")
    async def foods(request: Request, query: str = "") -> dict[str, object]:
        """Search the catalog by name or alias."""
        state_container: AppContainer = request.app.state.container
        try:
            matches = await state_container.engine.search_foods(query)
        except CatalogUnavailableError as exc:
            logger.warning("Food search failed: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
            ) from exc
        return {"foods": [food_to_row(food) for food in matches]}

    @app.post("/recommendations")
    async def recommendations(
        payload: RecommendationRequest, request: Request
    ) -> dict[str, object]:
        """Rank foods for a user."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.engine.generate_recommendations(
            payload.user.to_profile(),
            payload.request_type,
            payload.max_count,
            payload.meal_slot,
            payload.exclude_ingredients,
            precise_portions=payload.precise_portions,
        )
        return asdict(result)

    @app.post("/meal-plans")
    async def meal_plans(
        payload: MealPlanRequest, request: Request
    ) -> dict[str, object]:
        """Build a multi-day meal plan."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.engine.generate_meal_plan(
            payload.user.to_profile(),
            payload.days,
            payload.include_snacks,
            precise_portions=payload.precise_portions,
        )
        return asdict(result)

    @app.post("/portions")
    async def portions(payload: PortionRequest, request: Request) -> dict[str, object]:
        """Size a catalog food for a meal slot."""
        state_container: AppContainer = request.app.state.container
        try:
            food = await state_container.engine.get_food(payload.food_id)
        except CatalogUnavailableError as exc:
            logger.warning("Portion lookup failed: %s", exc)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)
            ) from exc
        if food is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail="Food not found"
            )
        portion = state_container.engine.get_portion_recommendation(
            payload.user.to_profile(), food, payload.meal_slot
        )
        return asdict(portion)

    @app.post("/nutrition/balance")
    async def nutrition_balance(
        payload: NutritionItemsRequest, request: Request
    ) -> dict[str, object]:
        """Compare consumed items with daily targets."""
        state_container: AppContainer = request.app.state.container
        analysis = state_container.engine.analyze_nutritional_balance(
            payload.to_quantities(), payload.user.to_profile()
        )
        return asdict(analysis)

    @app.post("/nutrition/complementary")
    async def nutrition_complementary(
        payload: NutritionItemsRequest, request: Request
    ) -> dict[str, object]:
        """Suggest foods covering nutrients the consumed items lack."""
        state_container: AppContainer = request.app.state.container
        result = await state_container.engine.get_complementary_foods(
            payload.to_quantities(),
            payload.user.to_profile(),
            payload.max_suggestions,
        )
        return asdict(result)

    return app
