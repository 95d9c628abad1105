"""Nutritional balance analysis models."""

from dataclasses import dataclass

from nutrition_recommender.domain.foods import NutritionFacts


@dataclass(frozen=True)
class FoodQuantity:
    """A consumed or planned item with facts per 100 g."""

    name: str
    grams: float
    nutrition: NutritionFacts


@dataclass(frozen=True)
class NutritionalTargets:
    """Daily intake targets derived from body metrics."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float
    iron_mg: float
    sodium_mg: float


@dataclass(frozen=True)
class MacroAnalysis:
    """Current vs target intake for one macro."""

    current: float
    target: float
    percentage: float


@dataclass(frozen=True)
class MacroBalance:
    carbs: MacroAnalysis
    protein: MacroAnalysis
    fat: MacroAnalysis


@dataclass(frozen=True)
class MicronutrientAnalysis:
    """Current vs target intake for a tracked micronutrient."""

    name: str
    current: float
    target: float
    percentage: float
    status: str


@dataclass(frozen=True)
class NutritionalBalanceAnalysis:
    """Totals compared against targets with improvement suggestions."""

    total_calories: float
    target_calories: float
    macro_balance: MacroBalance
    micronutrients: list[MicronutrientAnalysis]
    suggestions: list[str]


@dataclass(frozen=True)
class NutrientDeficiency:
    nutrient: str
    severity: str
