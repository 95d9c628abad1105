"""User profile and decision context models."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UserProfile:
    """Raw user profile as resolved by the caller; every field may be unset."""

    user_id: str | None = None
    name: str | None = None
    age: int | None = None
    gender: str | None = None
    height_cm: float | None = None
    weight_kg: float | None = None
    activity_level: str | None = None
    health_goals: list[str] | None = None
    medical_conditions: list[str] | None = None
    allergies: list[str] | None = None
    dietary_needs: list[str] | None = None
    food_dislikes: list[str] | None = None
    cultural_preferences: dict[str, object] | None = None
    is_premium: bool | None = None


@dataclass(frozen=True)
class UserContext:
    """Fully defaulted, read-only snapshot used by every engine step."""

    age: int = 25
    gender: str = "unknown"
    activity_level: str = "moderate"
    health_goals: tuple[str, ...] = ()
    medical_conditions: tuple[str, ...] = ()
    allergies: tuple[str, ...] = ()
    dietary_needs: tuple[str, ...] = ()
    food_dislikes: tuple[str, ...] = ()
    cultural_preferences: dict[str, object] = field(default_factory=dict)
    height_cm: float | None = None
    weight_kg: float | None = None
    bmi: float | None = None
    is_premium: bool = False

    @property
    def preferred_region(self) -> str | None:
        """Return the preferred region, if one was stated."""
        region = self.cultural_preferences.get("preferredRegion")
        if region is None:
            region = self.cultural_preferences.get("preferred_region")
        return str(region) if region else None

    def has_goal(self, goal: str) -> bool:
        """Case-insensitive membership test for health goals."""
        return goal.lower() in {item.lower() for item in self.health_goals}

    def has_condition(self, condition: str) -> bool:
        """Case-insensitive membership test for medical conditions."""
        return condition.lower() in {item.lower() for item in self.medical_conditions}
