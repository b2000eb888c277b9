"""Request payloads accepted by the HTTP API."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from nutrient_calculator.domain.meals import MealDraft
from nutrient_calculator.domain.profile import ACTIVITY_FACTORS, Sex, UserProfile


class ProfileIn(BaseModel):
    """Body metrics submitted from the onboarding form."""

    age: int = Field(ge=0)
    sex: Literal["male", "female"]
    weight_kg: float = Field(gt=0)
    height_cm: float = Field(gt=0)
    activity_factor: float

    @field_validator("activity_factor")
    @classmethod
    def _known_factor(cls, value: float) -> float:
        if value not in ACTIVITY_FACTORS:
            raise ValueError(f"activity_factor must be one of {ACTIVITY_FACTORS}")
        return value

    def to_domain(self) -> UserProfile:
        return UserProfile(
            age=self.age,
            sex=Sex(self.sex),
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            activity_factor=self.activity_factor,
        )


class MealIn(BaseModel):
    """Macros submitted from the add-meal form."""

    calories: int = Field(default=0, ge=0)
    protein_g: int = Field(default=0, ge=0)
    fat_g: int = Field(default=0, ge=0)
    carbs_g: int = Field(default=0, ge=0)

    def to_domain(self) -> MealDraft:
        return MealDraft(
            calories=self.calories,
            protein_g=self.protein_g,
            fat_g=self.fat_g,
            carbs_g=self.carbs_g,
        )
