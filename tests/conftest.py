"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from nutrition_recommender.config import Settings
from nutrition_recommender.containers import AppContainer
from nutrition_recommender.data.sample_catalog import SAMPLE_FOODS
from nutrition_recommender.domain.foods import (
    CookingMethod,
    FoodCategory,
    FoodRecord,
    NutritionFacts,
    PortionGuide,
    RegionalAvailability,
)
from nutrition_recommender.domain.users import UserProfile
from nutrition_recommender.services.cache import InMemoryCache
from nutrition_recommender.services.catalog import (
    CachedFoodCatalog,
    CatalogConstraints,
    FoodCatalogProvider,
    StaticFoodCatalog,
)
from nutrition_recommender.services.engine import RecommendationEngine


def make_food(  # noqa: PLR0913
    food_id: str,
    category: FoodCategory = FoodCategory.LEGUME_DISH,
    *,
    calories: float = 120.0,
    protein_g: float = 3.0,
    fiber_g: float = 1.0,
    ingredients: tuple[str, ...] = ("lentils",),
    region: str = "North Indian",
    units: dict[str, float] | None = None,
    minerals: dict[str, float] | None = None,
) -> FoodRecord:
    """Build a catalog record with only the fields a test cares about."""
    return FoodRecord(
        id=food_id,
        name=food_id.replace("_", " ").title(),
        category=category,
        nutrition=NutritionFacts(
            calories=calories,
            protein_g=protein_g,
            carbs_g=15.0,
            fat_g=3.0,
            fiber_g=fiber_g,
            minerals=minerals or {},
        ),
        cooking_method=CookingMethod(
            name="cooked", description="", ingredients=ingredients
        ),
        regions=RegionalAvailability(region, (region,)),
        portion_guide=PortionGuide(units=units or {}),
    )


@dataclass
class CountingCatalog(FoodCatalogProvider):
    """Static catalog that records how often it was fetched."""

    foods: list[FoodRecord] = field(default_factory=list)
    calls: int = 0

    async def fetch_candidates(
        self, constraints: CatalogConstraints
    ) -> list[FoodRecord]:
        self.calls += 1
        return list(self.foods)


@dataclass
class FailingCatalog(FoodCatalogProvider):
    """Catalog whose fetch always fails."""

    message: str = "connection refused"

    async def fetch_candidates(
        self, constraints: CatalogConstraints
    ) -> list[FoodRecord]:
        raise ConnectionError(self.message)


@pytest.fixture
def sample_foods() -> list[FoodRecord]:
    return list(SAMPLE_FOODS)


@pytest.fixture
def engine(sample_foods: list[FoodRecord]) -> RecommendationEngine:
    return RecommendationEngine(catalog=StaticFoodCatalog(sample_foods))


@pytest.fixture
def profile() -> UserProfile:
    return UserProfile(user_id="user-1", name="Asha")


@pytest.fixture
def settings() -> Settings:
    return Settings(catalog_backend="static", catalog_cache_ttl_seconds=60)


@pytest.fixture
def container(settings: Settings, sample_foods: list[FoodRecord]) -> AppContainer:
    catalog = CachedFoodCatalog(
        provider=StaticFoodCatalog(sample_foods),
        cache=InMemoryCache(),
        ttl_seconds=settings.catalog_cache_ttl_seconds,
    )
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog=catalog,
        engine=RecommendationEngine(catalog=catalog),
        close_resources=close_resources,
    )
