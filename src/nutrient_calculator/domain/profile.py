"""Domain models for the user profile and daily target."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Sex(str, Enum):
    """Biological sex used by the BMR formula."""

    MALE = "male"
    FEMALE = "female"


class ActivityLevel(Enum):
    """Fixed set of activity multipliers offered to the user."""

    SEDENTARY = (1.2, "Sedentary lifestyle")
    LIGHT = (1.375, "Light activity")
    MODERATE = (1.55, "Moderate activity")
    HIGH = (1.725, "High activity")
    VERY_HIGH = (1.9, "Very high activity")

    def __init__(self, factor: float, label: str) -> None:
        self.factor = factor
        self.label = label

    @classmethod
    def from_factor(cls, factor: float) -> "ActivityLevel":
        """Return the level for a multiplier or raise ValueError."""
        for level in cls:
            if level.factor == factor:
                return level
        raise ValueError(f"Unsupported activity factor: {factor}")


ACTIVITY_FACTORS: tuple[float, ...] = tuple(level.factor for level in ActivityLevel)


@dataclass(frozen=True)
class UserProfile:
    """Body metrics collected during onboarding."""

    age: int
    sex: Sex
    weight_kg: float
    height_cm: float
    activity_factor: float


@dataclass(frozen=True)
class DailyTarget:
    """Daily macronutrient target derived from a profile."""

    calories: int
    protein_g: int
    fat_g: int
    carbs_g: int


@dataclass(frozen=True)
class ProfileRecord:
    """Stored profile together with the target computed from it."""

    profile: UserProfile
    target: DailyTarget
    updated_at: datetime
