"""Tests for networked catalog adapters and row parsing."""

import asyncio
import logging
from dataclasses import dataclass, field

import httpx
import pytest

from nutrition_recommender.adapters.catalog_rows import (
    food_to_row,
    parse_food_row,
    parse_food_rows,
)
from nutrition_recommender.adapters.http_food_catalog import HttpxFoodCatalogClient
from nutrition_recommender.adapters.supabase_food_catalog import SupabaseFoodCatalog
from nutrition_recommender.domain.foods import FoodCategory
from nutrition_recommender.domain.users import UserProfile
from nutrition_recommender.services.catalog import CatalogConstraints
from nutrition_recommender.services.engine import RecommendationEngine

DAL_ROW: dict[str, object] = {
    "id": "moong_dal",
    "name": "Moong Dal",
    "category": "Legume-Dish",
    "nutrition": {
        "calories": 105,
        "protein": 7,
        "carbs": 18,
        "fat": 0.5,
        "fiber": 4,
        "minerals": {"iron": 1.4},
    },
    "cooking_method": {
        "name": "boiled",
        "description": "Boiled and tempered",
        "ingredients": ["moong dal", "turmeric"],
    },
    "regions": {"primary_region": "North Indian", "regions": ["North Indian"]},
    "portion_guide": {"units": {"katori": 150}, "default_grams": 150},
}


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    rows: list[dict[str, object]] = field(default_factory=list)
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_limit: int | None = None
    last_order: str | None = None

    def select(self, *_args) -> "FakeTable":
        return self

    def in_(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, count: int) -> "FakeTable":
        self.last_limit = count
        return self

    def order(self, column: str, desc: bool = False) -> "FakeTable":
        self.last_order = column
        return self

    def execute(self) -> FakeResponse:
        return FakeResponse(self.rows)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        return self.tables.setdefault(name, FakeTable(name))


def test_parse_row_accepts_short_nutrient_keys() -> None:
    food = parse_food_row(DAL_ROW)

    assert food.category is FoodCategory.LEGUME_DISH
    assert food.nutrition.protein_g == 7.0
    assert food.nutrition.minerals == {"iron": 1.4}
    assert food.cooking_method.ingredients == ("moong dal", "turmeric")
    assert food.cooking_method.nutrition_multiplier == 1.0
    assert food.portion_guide.units == {"katori": 150.0}


def test_parse_rows_skips_bad_rows(caplog, monkeypatch) -> None:
    monkeypatch.setattr(logging.getLogger("nutrition_recommender"), "propagate", True)
    rows = [
        DAL_ROW,
        {"id": "nameless"},
        {**DAL_ROW, "id": "pizza", "category": "pizza"},
        {**DAL_ROW, "nutrition": {"calories": "lots"}},
        {**DAL_ROW, "id": "nan_dal", "nutrition": {"calories": float("nan")}},
        {**DAL_ROW, "id": "inf_dal", "nutrition": {"minerals": {"iron": "inf"}}},
    ]

    foods = parse_food_rows(rows)

    assert [food.id for food in foods] == ["moong_dal"]
    assert "Skipping catalog row" in caplog.text


def test_serialized_record_parses_back(sample_foods) -> None:
    for food in sample_foods:
        assert parse_food_row(food_to_row(food)) == food


def test_supabase_catalog_reads_table() -> None:
    client = FakeSupabaseClient()
    client.table("indian_foods").rows = [DAL_ROW, {"id": "broken"}]
    catalog = SupabaseFoodCatalog(client=client)  # type: ignore[arg-type]

    foods = asyncio.run(
        catalog.fetch_candidates(
            CatalogConstraints(categories=(FoodCategory.LEGUME_DISH,), limit=5)
        )
    )

    table = client.tables["indian_foods"]
    assert [food.id for food in foods] == ["moong_dal"]
    assert table.last_filters == [("category", ["legume-dish"])]
    assert table.last_limit == 5
    assert table.last_order == "id"


def test_http_catalog_fetches_foods() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"foods": [DAL_ROW]})

    client = HttpxFoodCatalogClient(
        base_url="https://catalog.example",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        api_key="key",
    )

    foods = asyncio.run(
        client.fetch_candidates(
            CatalogConstraints(
                categories=(FoodCategory.SNACK, FoodCategory.CURRY), limit=10
            )
        )
    )

    assert [food.id for food in foods] == ["moong_dal"]
    request = seen[0]
    assert request.url.path == "/foods"
    assert request.url.params["api_key"] == "key"
    assert request.url.params["category"] == "snack,curry"
    assert request.url.params["limit"] == "10"
    asyncio.run(client.close())


def test_http_catalog_accepts_bare_list() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[DAL_ROW])

    client = HttpxFoodCatalogClient(
        base_url="https://catalog.example",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    foods = asyncio.run(client.fetch_candidates(CatalogConstraints()))

    assert len(foods) == 1


def test_http_catalog_raises_for_errors() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, json={"error": "down"})

    client = HttpxFoodCatalogClient(
        base_url="https://catalog.example",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(client.fetch_candidates(CatalogConstraints()))


def test_engine_reports_http_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    client = HttpxFoodCatalogClient(
        base_url="https://catalog.example",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    engine = RecommendationEngine(catalog=client)

    result = asyncio.run(engine.generate_recommendations(UserProfile()))

    assert result.success is False
    assert result.error is not None
    assert "catalog unavailable" in result.error
