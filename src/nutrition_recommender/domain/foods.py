"""Food catalog domain models."""

from dataclasses import dataclass, field
from enum import StrEnum


class FoodCategory(StrEnum):
    """Fixed set of dish categories in the catalog."""

    STAPLE_GRAIN = "staple-grain"
    LEGUME_DISH = "legume-dish"
    VEGETABLE_DISH = "vegetable-dish"
    FLATBREAD = "flatbread"
    CURRY = "curry"
    SNACK = "snack"
    DESSERT = "dessert"
    BEVERAGE = "beverage"


@dataclass(frozen=True)
class NutritionFacts:
    """Nutrition per reference serving (100 g)."""

    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    fiber_g: float = 0.0
    vitamins: dict[str, float] = field(default_factory=dict)
    minerals: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class CookingMethod:
    """Default preparation of a dish."""

    name: str
    description: str
    ingredients: tuple[str, ...] = ()
    nutrition_multiplier: float = 1.0


@dataclass(frozen=True)
class RegionalAvailability:
    """Where a dish is commonly eaten."""

    primary_region: str
    regions: tuple[str, ...] = ()


@dataclass(frozen=True)
class PortionGuide:
    """Regional serving units mapped to grams."""

    units: dict[str, float] = field(default_factory=dict)
    default_grams: float = 100.0


@dataclass(frozen=True)
class FoodRecord:
    """Catalog entry for a dish."""

    id: str
    name: str
    category: FoodCategory
    nutrition: NutritionFacts
    cooking_method: CookingMethod
    regions: RegionalAvailability
    portion_guide: PortionGuide = field(default_factory=PortionGuide)
    aliases: tuple[str, ...] = ()

    def matches_query(self, query: str) -> bool:
        """Return True when the query appears in the name or an alias."""
        needle = query.strip().lower()
        if not needle:
            return False
        if needle in self.name.lower():
            return True
        return any(needle in alias.lower() for alias in self.aliases)


class Course(StrEnum):
    """Coarse meal role of a category."""

    MAIN = "main"
    STAPLE = "staple"
    SNACK = "snack"
    DESSERT = "dessert"
    DRINK = "drink"


CATEGORY_COURSES: dict[FoodCategory, Course] = {
    FoodCategory.LEGUME_DISH: Course.MAIN,
    FoodCategory.VEGETABLE_DISH: Course.MAIN,
    FoodCategory.CURRY: Course.MAIN,
    FoodCategory.STAPLE_GRAIN: Course.STAPLE,
    FoodCategory.FLATBREAD: Course.STAPLE,
    FoodCategory.SNACK: Course.SNACK,
    FoodCategory.DESSERT: Course.DESSERT,
    FoodCategory.BEVERAGE: Course.DRINK,
}
