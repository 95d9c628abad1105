"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutrition_recommender.adapters.http_food_catalog import HttpxFoodCatalogClient
from nutrition_recommender.adapters.supabase_food_catalog import SupabaseFoodCatalog
from nutrition_recommender.config import Settings, resolve_catalog_backend
from nutrition_recommender.data.sample_catalog import SAMPLE_FOODS
from nutrition_recommender.services.cache import InMemoryCache
from nutrition_recommender.services.catalog import (
    CachedFoodCatalog,
    FoodCatalogProvider,
    StaticFoodCatalog,
)
from nutrition_recommender.services.engine import RecommendationEngine


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: FoodCatalogProvider
    engine: RecommendationEngine
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    backend = resolve_catalog_backend(resolved_settings.catalog_backend)
    http_catalog: HttpxFoodCatalogClient | None = None

    source: FoodCatalogProvider
    if backend == "supabase":
        url = resolved_settings.supabase_url
        key = resolved_settings.supabase_service_key
        if not (url and key):
            raise ValueError("Supabase catalog requires SUPABASE_URL and key")
        source = SupabaseFoodCatalog(
            client=create_client(url, key),
            table=resolved_settings.catalog_table,
        )
    elif backend == "http":
        if not resolved_settings.catalog_api_url:
            raise ValueError("HTTP catalog requires CATALOG_API_URL")
        http_catalog = HttpxFoodCatalogClient.create(
            base_url=resolved_settings.catalog_api_url,
            api_key=resolved_settings.catalog_api_key,
        )
        source = http_catalog
    else:
        source = StaticFoodCatalog(list(SAMPLE_FOODS))

    catalog = CachedFoodCatalog(
        provider=source,
        cache=InMemoryCache(),
        ttl_seconds=resolved_settings.catalog_cache_ttl_seconds,
        debug=resolved_settings.debug,
    )
    engine = RecommendationEngine(
        catalog=catalog,
        default_region=resolved_settings.default_region,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        if http_catalog is not None:
            await http_catalog.close()

    return AppContainer(
        settings=resolved_settings,
        catalog=catalog,
        engine=engine,
        close_resources=close_resources,
    )
