"""Availability filter: drops foods the user cannot or will not eat."""

from collections.abc import Iterable, Sequence

from nutrition_recommender.domain.foods import FoodRecord
from nutrition_recommender.domain.users import UserContext

DIETARY_EXCLUSIONS: dict[str, tuple[str, ...]] = {
    "vegetarian": (),
    "vegan": (
        "cream",
        "butter",
        "milk",
        "paneer",
        "ghee",
        "curd",
        "yogurt",
        "cheese",
        "honey",
    ),
    "gluten-free": ("wheat", "flour", "maida", "semolina", "suji", "barley"),
}


def filter_available_foods(
    foods: Sequence[FoodRecord],
    context: UserContext,
    exclude_ingredients: Iterable[str] | None = None,
) -> list[FoodRecord]:
    """Return foods compatible with the context, preserving catalog order."""
    excluded = _terms(exclude_ingredients or ())
    allergies = _terms(context.allergies)
    dislikes = _terms(context.food_dislikes)
    diet_terms = _diet_terms(context.dietary_needs)
    return [
        food
        for food in foods
        if not _ingredients_match(food, diet_terms)
        and not _ingredients_match(food, allergies)
        and not _is_disliked(food, dislikes)
        and not _ingredients_match(food, excluded)
    ]


def violates_dietary_needs(food: FoodRecord, dietary_needs: Iterable[str]) -> bool:
    """Return True when any dietary tag's exclusion rule hits an ingredient."""
    return _ingredients_match(food, _diet_terms(dietary_needs))


def _diet_terms(dietary_needs: Iterable[str]) -> tuple[str, ...]:
    return _terms(
        term
        for need in dietary_needs
        for term in DIETARY_EXCLUSIONS.get(_diet_key(need), ())
    )


def _diet_key(need: str) -> str:
    return "-".join(need.lower().replace("_", " ").split())


def _terms(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(value.strip().lower() for value in values if value.strip())


def _ingredients_match(food: FoodRecord, terms: tuple[str, ...]) -> bool:
    if not terms:
        return False
    return any(
        term in ingredient.lower()
        for ingredient in food.cooking_method.ingredients
        for term in terms
    )


def _is_disliked(food: FoodRecord, dislikes: tuple[str, ...]) -> bool:
    if not dislikes:
        return False
    name = food.name.lower()
    return any(term in name for term in dislikes) or _ingredients_match(
        food, dislikes
    )
