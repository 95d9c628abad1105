"""Supabase-backed food catalog."""

from dataclasses import dataclass

from supabase import Client

from nutrition_recommender.adapters.catalog_rows import parse_food_rows
from nutrition_recommender.domain.foods import FoodRecord
from nutrition_recommender.services.catalog import (
    CatalogConstraints,
    FoodCatalogProvider,
)


@dataclass
class SupabaseFoodCatalog(FoodCatalogProvider):
    """Reads catalog rows from a Supabase table."""

    client: Client
    table: str = "indian_foods"

    async def fetch_candidates(
        self, constraints: CatalogConstraints
    ) -> list[FoodRecord]:
        query = self.client.table(self.table).select("*")
        if constraints.categories:
            query = query.in_(
                "category", [category.value for category in constraints.categories]
            )
        if constraints.limit is not None:
            query = query.limit(constraints.limit)
        response = query.order("id").execute()
        return parse_food_rows(response.data or [])
