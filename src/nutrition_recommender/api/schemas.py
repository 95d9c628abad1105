"""Pydantic request models for the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field

from nutrition_recommender.domain.analysis import FoodQuantity
from nutrition_recommender.domain.foods import NutritionFacts, PortionGuide
from nutrition_recommender.domain.users import UserProfile
from nutrition_recommender.services.portions import convert_to_grams


class UserProfilePayload(BaseModel):
    """User profile payload; every field is optional."""

    model_config = ConfigDict(allow_inf_nan=False)

    user_id: str | None = None
    name: str | None = None
    age: int | None = Field(default=None, ge=0)
    gender: str | None = None
    height_cm: float | None = None
    weight_kg: float | None = None
    activity_level: str | None = None
    health_goals: list[str] = Field(default_factory=list)
    medical_conditions: list[str] = Field(default_factory=list)
    allergies: list[str] = Field(default_factory=list)
    dietary_needs: list[str] = Field(default_factory=list)
    food_dislikes: list[str] = Field(default_factory=list)
    cultural_preferences: dict[str, object] = Field(default_factory=dict)
    is_premium: bool = False

    def to_profile(self) -> UserProfile:
        return UserProfile(**self.model_dump())


class NutritionPayload(BaseModel):
    """Nutrition facts per 100 g."""

    model_config = ConfigDict(allow_inf_nan=False)

    calories: float = Field(default=0.0, ge=0)
    protein_g: float = Field(default=0.0, ge=0)
    carbs_g: float = Field(default=0.0, ge=0)
    fat_g: float = Field(default=0.0, ge=0)
    fiber_g: float = Field(default=0.0, ge=0)
    vitamins: dict[str, float] = Field(default_factory=dict)
    minerals: dict[str, float] = Field(default_factory=dict)

    def to_facts(self) -> NutritionFacts:
        return NutritionFacts(**self.model_dump())


class FoodItemPayload(BaseModel):
    """A consumed item given as a quantity in grams or a regional unit."""

    model_config = ConfigDict(allow_inf_nan=False)

    name: str
    quantity: float = Field(default=100.0, ge=0)
    unit: str = "grams"
    portion_units: dict[str, float] = Field(default_factory=dict)
    nutrition: NutritionPayload = Field(default_factory=NutritionPayload)

    def to_quantity(self) -> FoodQuantity:
        grams = convert_to_grams(
            self.quantity, self.unit, PortionGuide(units=dict(self.portion_units))
        )
        return FoodQuantity(
            name=self.name, grams=grams, nutrition=self.nutrition.to_facts()
        )


class RecommendationRequest(BaseModel):
    """Body of POST /recommendations."""

    user: UserProfilePayload = Field(default_factory=UserProfilePayload)
    request_type: str = "balanced"
    max_count: int = Field(default=10, ge=0, le=50)
    meal_slot: str | None = None
    exclude_ingredients: list[str] = Field(default_factory=list)
    precise_portions: bool = False


class MealPlanRequest(BaseModel):
    """Body of POST /meal-plans."""

    user: UserProfilePayload = Field(default_factory=UserProfilePayload)
    days: int = Field(default=7, ge=0, le=31)
    include_snacks: bool = True
    precise_portions: bool = False


class PortionRequest(BaseModel):
    """Body of POST /portions."""

    user: UserProfilePayload = Field(default_factory=UserProfilePayload)
    food_id: str
    meal_slot: str = "lunch"


class NutritionItemsRequest(BaseModel):
    """Body of the balance and complementary endpoints."""

    user: UserProfilePayload = Field(default_factory=UserProfilePayload)
    items: list[FoodItemPayload] = Field(default_factory=list)
    max_suggestions: int = Field(default=5, ge=0, le=50)

    def to_quantities(self) -> list[FoodQuantity]:
        return [item.to_quantity() for item in self.items]
