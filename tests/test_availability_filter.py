"""Tests for the availability filter."""

from nutrition_recommender.domain.foods import FoodRecord
from nutrition_recommender.domain.users import UserProfile
from nutrition_recommender.services.context import build_user_context
from nutrition_recommender.services.filtering import (
    DIETARY_EXCLUSIONS,
    filter_available_foods,
    violates_dietary_needs,
)
from tests.conftest import make_food


def _ids(foods: list[FoodRecord]) -> list[str]:
    return [food.id for food in foods]


def test_no_restrictions_keeps_everything(sample_foods) -> None:
    context = build_user_context(UserProfile())

    assert filter_available_foods(sample_foods, context) == sample_foods


def test_vegan_drops_dairy_dishes(sample_foods) -> None:
    context = build_user_context(UserProfile(dietary_needs=["Vegan"]))

    available = filter_available_foods(sample_foods, context)

    dropped = set(_ids(sample_foods)) - set(_ids(available))
    assert dropped == {
        "dal_makhani",
        "palak_paneer",
        "masala_chai",
        "chaas",
        "gulab_jamun",
    }
    for food in available:
        for ingredient in food.cooking_method.ingredients:
            assert not any(
                term in ingredient.lower() for term in DIETARY_EXCLUSIONS["vegan"]
            )


def test_gluten_free_accepts_spacing_variants(sample_foods) -> None:
    context = build_user_context(UserProfile(dietary_needs=["gluten free"]))

    available = _ids(filter_available_foods(sample_foods, context))

    assert "whole_wheat_roti" not in available
    assert "gulab_jamun" not in available
    assert "poha" in available


def test_allergy_dislike_and_exclusion() -> None:
    foods = [
        make_food("peanut_chikki", ingredients=("Peanuts", "jaggery")),
        make_food("bhindi_masala", ingredients=("okra", "onion")),
        make_food("jeera_rice", ingredients=("rice", "cumin")),
        make_food("plain_dal", ingredients=("lentils",)),
    ]
    context = build_user_context(
        UserProfile(allergies=["peanut"], food_dislikes=["Bhindi"])
    )

    available = filter_available_foods(foods, context, exclude_ingredients=["cumin"])

    assert _ids(available) == ["plain_dal"]


def test_filter_is_idempotent_and_keeps_order(sample_foods) -> None:
    context = build_user_context(
        UserProfile(dietary_needs=["vegan"], food_dislikes=["rajma"])
    )

    once = filter_available_foods(sample_foods, context)
    twice = filter_available_foods(once, context)

    assert twice == once
    positions = [_ids(sample_foods).index(food_id) for food_id in _ids(once)]
    assert positions == sorted(positions)


def test_unknown_dietary_tag_excludes_nothing() -> None:
    food = make_food("kheer", ingredients=("milk", "rice", "sugar"))

    assert not violates_dietary_needs(food, ["keto"])
    assert violates_dietary_needs(food, ["vegan"])
