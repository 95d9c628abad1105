"""Tests for the HTTP API."""

from fastapi.testclient import TestClient

from nutrition_recommender.api.app import create_app
from nutrition_recommender.containers import AppContainer
from nutrition_recommender.services.engine import RecommendationEngine
from tests.conftest import FailingCatalog


def test_health(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_food_search(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/foods", params={"query": "dal"})

    assert response.status_code == 200
    ids = [food["id"] for food in response.json()["foods"]]
    assert "dal_makhani" in ids
    assert "dal_tadka" in ids


def test_food_search_catalog_down(container: AppContainer) -> None:
    container.engine = RecommendationEngine(catalog=FailingCatalog())
    client = TestClient(create_app(container))

    response = client.get("/foods", params={"query": "dal"})

    assert response.status_code == 503


def test_recommendations_for_lunch(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/recommendations",
        json={
            "user": {"dietary_needs": ["vegan"], "health_goals": ["heart health"]},
            "meal_slot": "lunch",
            "max_count": 3,
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["error"] is None
    assert len(body["recommendations"]) == 3
    assert {item["meal_slot"] for item in body["recommendations"]} == {"lunch"}
    assert body["context"]["dietary_needs"] == ["vegan"]


def test_recommendations_report_catalog_failure(container: AppContainer) -> None:
    container.engine = RecommendationEngine(catalog=FailingCatalog())
    client = TestClient(create_app(container))

    response = client.post("/recommendations", json={})

    assert response.status_code == 200
    assert response.json()["success"] is False


def test_recommendations_validate_payload(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/recommendations", json={"max_count": -1})

    assert response.status_code == 422


def test_meal_plan(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/meal-plans", json={"days": 2, "include_snacks": False})

    assert response.status_code == 200
    body = response.json()
    assert body["total_days"] == 2
    assert list(body["meal_plan"]) == ["day_1", "day_2"]
    assert len(body["meal_plan"]["day_1"]) == 8


def test_portion_for_known_and_unknown_food(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    found = client.post(
        "/portions", json={"food_id": "basmati_rice", "meal_slot": "lunch"}
    )
    missing = client.post("/portions", json={"food_id": "pizza"})

    assert found.status_code == 200
    assert found.json()["grams"] == 215
    assert found.json()["regional_unit"] == "katori"
    assert missing.status_code == 404


def test_nutrition_balance_converts_units(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/nutrition/balance",
        json={
            "items": [
                {
                    "name": "Dal",
                    "quantity": 2,
                    "unit": "katori",
                    "nutrition": {"calories": 100, "protein_g": 10, "fiber_g": 4},
                }
            ]
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["total_calories"] == 300.0
    assert body["macro_balance"]["protein"]["current"] == 30.0
    assert [micro["name"] for micro in body["micronutrients"]] == ["Fiber", "Iron"]


def test_nutrition_complementary(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/nutrition/complementary", json={"items": [], "max_suggestions": 3}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert [item["food"]["id"] for item in body["recommendations"]] == [
        "dal_tadka",
        "rajma",
        "dal_tadka",
    ]


def test_portion_rejects_non_finite_numbers(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/portions",
        content='{"food_id": "basmati_rice", "user": {"weight_kg": NaN}}',
        headers={"content-type": "application/json"},
    )

    assert response.status_code == 422
