"""Tests for complementary food suggestions."""

from nutrition_recommender.domain.analysis import FoodQuantity, NutrientDeficiency
from nutrition_recommender.domain.foods import NutritionFacts
from nutrition_recommender.domain.users import UserProfile
from nutrition_recommender.services.balance import analyze_balance
from nutrition_recommender.services.complementary import (
    complementary_recommendations,
    foods_rich_in,
    identify_deficiencies,
)
from nutrition_recommender.services.context import build_user_context


def test_empty_day_is_deficient_in_everything() -> None:
    analysis = analyze_balance([], build_user_context(UserProfile()))

    assert identify_deficiencies(analysis) == [
        NutrientDeficiency(nutrient="protein", severity="moderate"),
        NutrientDeficiency(nutrient="fiber", severity="mild"),
        NutrientDeficiency(nutrient="iron", severity="mild"),
    ]


def test_protein_rich_day_only_lacks_micros() -> None:
    shake = NutritionFacts(calories=400.0, protein_g=40.0)
    items = [FoodQuantity(name="Shake", grams=500, nutrition=shake)]

    analysis = analyze_balance(items, build_user_context(UserProfile()))

    assert [item.nutrient for item in identify_deficiencies(analysis)] == [
        "fiber",
        "iron",
    ]


def test_rich_in_rules(sample_foods) -> None:
    protein_ids = {food.id for food in foods_rich_in("Protein", sample_foods)}

    assert protein_ids == {"dal_tadka", "rajma", "roasted_chana"}
    assert foods_rich_in("vitamin b12", sample_foods) == []


def test_two_suggestions_per_deficiency(sample_foods) -> None:
    context = build_user_context(UserProfile())
    deficiencies = [
        NutrientDeficiency(nutrient="protein", severity="moderate"),
        NutrientDeficiency(nutrient="fiber", severity="mild"),
        NutrientDeficiency(nutrient="iron", severity="mild"),
    ]

    suggestions = complementary_recommendations(
        deficiencies, sample_foods, context, max_suggestions=5
    )

    assert [item.food.id for item in suggestions] == [
        "dal_tadka",
        "rajma",
        "dal_tadka",
        "rajma",
        "dal_tadka",
    ]
    assert all(item.meal_slot is None for item in suggestions)


def test_unknown_nutrient_suggests_nothing(sample_foods) -> None:
    context = build_user_context(UserProfile())
    deficiencies = [NutrientDeficiency(nutrient="sodium", severity="mild")]

    assert complementary_recommendations(deficiencies, sample_foods, context, 5) == []
