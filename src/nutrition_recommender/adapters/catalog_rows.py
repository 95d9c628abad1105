"""Conversion between catalog rows (JSON objects) and FoodRecord."""

import logging
import math
from collections.abc import Iterable, Mapping

from nutrition_recommender.domain.foods import (
    CookingMethod,
    FoodCategory,
    FoodRecord,
    NutritionFacts,
    PortionGuide,
    RegionalAvailability,
)

_logger = logging.getLogger(__name__)


def parse_food_rows(rows: Iterable[Mapping[str, object]]) -> list[FoodRecord]:
    """Parse rows in order, skipping rows that cannot be parsed."""
    foods: list[FoodRecord] = []
    for index, row in enumerate(rows):
        try:
            foods.append(parse_food_row(row))
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            _logger.warning("Skipping catalog row %s: %s", index, exc)
    return foods


def parse_food_row(row: Mapping[str, object]) -> FoodRecord:
    """Parse one catalog row into a FoodRecord."""
    nutrition = _mapping(row.get("nutrition"))
    method = _mapping(row.get("cooking_method"))
    regions = _mapping(row.get("regions"))
    portion = _mapping(row.get("portion_guide"))
    return FoodRecord(
        id=str(row["id"]),
        name=str(row["name"]),
        aliases=tuple(str(alias) for alias in _sequence(row.get("aliases"))),
        category=FoodCategory(str(row["category"]).strip().lower()),
        nutrition=NutritionFacts(
            calories=_number(nutrition, "calories"),
            protein_g=_number(nutrition, "protein_g", "protein"),
            carbs_g=_number(nutrition, "carbs_g", "carbs"),
            fat_g=_number(nutrition, "fat_g", "fat"),
            fiber_g=_number(nutrition, "fiber_g", "fiber"),
            vitamins=_amounts(nutrition.get("vitamins")),
            minerals=_amounts(nutrition.get("minerals")),
        ),
        cooking_method=CookingMethod(
            name=str(method.get("name", "")),
            description=str(method.get("description", "")),
            ingredients=tuple(
                str(item) for item in _sequence(method.get("ingredients"))
            ),
            nutrition_multiplier=_number(method, "nutrition_multiplier", default=1.0),
        ),
        regions=RegionalAvailability(
            primary_region=str(regions.get("primary_region", "")),
            regions=tuple(str(item) for item in _sequence(regions.get("regions"))),
        ),
        portion_guide=PortionGuide(
            units=_amounts(portion.get("units")),
            default_grams=_number(portion, "default_grams", default=100.0),
        ),
    )


def food_to_row(food: FoodRecord) -> dict[str, object]:
    """Serialize a FoodRecord into the row shape parse_food_row reads."""
    facts = food.nutrition
    return {
        "id": food.id,
        "name": food.name,
        "aliases": list(food.aliases),
        "category": food.category.value,
        "nutrition": {
            "calories": facts.calories,
            "protein_g": facts.protein_g,
            "carbs_g": facts.carbs_g,
            "fat_g": facts.fat_g,
            "fiber_g": facts.fiber_g,
            "vitamins": dict(facts.vitamins),
            "minerals": dict(facts.minerals),
        },
        "cooking_method": {
            "name": food.cooking_method.name,
            "description": food.cooking_method.description,
            "ingredients": list(food.cooking_method.ingredients),
            "nutrition_multiplier": food.cooking_method.nutrition_multiplier,
        },
        "regions": {
            "primary_region": food.regions.primary_region,
            "regions": list(food.regions.regions),
        },
        "portion_guide": {
            "units": dict(food.portion_guide.units),
            "default_grams": food.portion_guide.default_grams,
        },
    }


def _mapping(value: object) -> Mapping[str, object]:
    return value if isinstance(value, Mapping) else {}


def _sequence(value: object) -> list[object]:
    return list(value) if isinstance(value, list | tuple) else []


def _number(data: Mapping[str, object], *keys: str, default: float = 0.0) -> float:
    for key in keys:
        value = data.get(key)
        if value is not None:
            return _finite(key, value)
    return default


def _amounts(value: object) -> dict[str, float]:
    if not isinstance(value, Mapping):
        return {}
    return {str(name): _finite(str(name), amount) for name, amount in value.items()}


def _finite(name: str, value: object) -> float:
    number = float(value)  # type: ignore[arg-type]
    if not math.isfinite(number):
        raise ValueError(f"{name} is not a finite number: {value!r}")
    return number
