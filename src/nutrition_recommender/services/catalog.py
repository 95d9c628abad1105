"""Food catalog providers and snapshot helpers."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from nutrition_recommender.domain.foods import FoodCategory, FoodRecord
from nutrition_recommender.services.cache import Cache

_logger = logging.getLogger(__name__)


class CatalogUnavailableError(RuntimeError):
    """Raised when the food catalog cannot be fetched."""


@dataclass(frozen=True)
class CatalogConstraints:
    """Hints a provider may use to narrow what it returns."""

    categories: tuple[FoodCategory, ...] = ()
    limit: int | None = None

    def cache_key(self) -> str:
        categories = ",".join(sorted(str(category) for category in self.categories))
        return f"catalog:{categories or '*'}:{self.limit or '*'}"


class FoodCatalogProvider(Protocol):
    """Source of candidate foods; may be static or networked."""

    async def fetch_candidates(
        self, constraints: CatalogConstraints
    ) -> list[FoodRecord]:
        """Return catalog records, raising on failure."""


def apply_constraints(
    foods: Sequence[FoodRecord], constraints: CatalogConstraints
) -> list[FoodRecord]:
    """Narrow a snapshot by category and limit, preserving order."""
    selected = [
        food
        for food in foods
        if not constraints.categories or food.category in constraints.categories
    ]
    if constraints.limit is not None:
        return selected[: max(constraints.limit, 0)]
    return selected


def search_foods(foods: Sequence[FoodRecord], query: str) -> list[FoodRecord]:
    """Return foods whose name or alias contains the query."""
    return [food for food in foods if food.matches_query(query)]


def find_food(foods: Sequence[FoodRecord], food_id: str) -> FoodRecord | None:
    """Return the food with the given id, if present."""
    for food in foods:
        if food.id == food_id:
            return food
    return None


@dataclass
class StaticFoodCatalog(FoodCatalogProvider):
    """In-memory catalog backed by a fixed list of records."""

    foods: list[FoodRecord] = field(default_factory=list)

    async def fetch_candidates(
        self, constraints: CatalogConstraints
    ) -> list[FoodRecord]:
        return apply_constraints(self.foods, constraints)


@dataclass
class CachedFoodCatalog(FoodCatalogProvider):
    """Caches snapshots from another provider per constraint set."""

    provider: FoodCatalogProvider
    cache: Cache
    ttl_seconds: int = 3600
    debug: bool = False

    async def fetch_candidates(
        self, constraints: CatalogConstraints
    ) -> list[FoodRecord]:
        cache_key = constraints.cache_key()
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return list(cached)

        foods = await self.provider.fetch_candidates(constraints)
        self.cache.set(cache_key, list(foods), ttl_seconds=self.ttl_seconds)
        if self.debug:
            _logger.info("Catalog fetched: key=%s foods=%s", cache_key, len(foods))
        return foods
