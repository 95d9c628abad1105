"""HTTP food catalog client."""

from dataclasses import dataclass

import httpx

from nutrition_recommender.adapters.catalog_rows import parse_food_rows
from nutrition_recommender.domain.foods import FoodRecord
from nutrition_recommender.services.catalog import (
    CatalogConstraints,
    FoodCatalogProvider,
)


@dataclass
class HttpxFoodCatalogClient(FoodCatalogProvider):
    """HTTPX-backed catalog fetched from `{base_url}/foods`."""

    base_url: str
    http_client: httpx.AsyncClient
    api_key: str | None = None
    timeout_seconds: float = 15

    @classmethod
    def create(
        cls, base_url: str, api_key: str | None = None
    ) -> "HttpxFoodCatalogClient":
        """Create a catalog client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            api_key=api_key,
        )

    async def fetch_candidates(
        self, constraints: CatalogConstraints
    ) -> list[FoodRecord]:
        params: dict[str, str | int] = {}
        if self.api_key:
            params["api_key"] = self.api_key
        if constraints.categories:
            params["category"] = ",".join(
                category.value for category in constraints.categories
            )
        if constraints.limit is not None:
            params["limit"] = constraints.limit
        response = await self.http_client.get(
            f"{self.base_url}/foods",
            params=params,
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        payload = response.json()
        rows = payload.get("foods", []) if isinstance(payload, dict) else payload
        return parse_food_rows(rows if isinstance(rows, list) else [])

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
