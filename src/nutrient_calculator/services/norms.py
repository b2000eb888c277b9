"""Daily norm calculation.

Uses the Harris-Benedict equation for basal metabolic rate, scaled by the
activity factor, and a fixed macro split: protein by body weight, fat as 30%
of calories and carbohydrates as the remainder. Each value is rounded before
the next one is derived from it, so the displayed target stays reproducible.
"""

import math

from nutrient_calculator.domain.profile import DailyTarget, Sex, UserProfile

MALE_BMR_BASE = 88.36
MALE_BMR_WEIGHT = 13.4
MALE_BMR_HEIGHT = 4.8
MALE_BMR_AGE = 5.7

FEMALE_BMR_BASE = 447.6
FEMALE_BMR_WEIGHT = 9.2
FEMALE_BMR_HEIGHT = 3.1
FEMALE_BMR_AGE = 4.3

PROTEIN_G_PER_KG = 1.6
FAT_CALORIE_SHARE = 0.3
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_FAT = 9
KCAL_PER_G_CARBS = 4


def round_half_away(value: float) -> int:
    """Round to the nearest integer, with halves rounded away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def basal_metabolic_rate(profile: UserProfile) -> float:
    """Return the unrounded BMR in kcal per day."""
    if profile.sex == Sex.MALE:
        return (
            MALE_BMR_BASE
            + MALE_BMR_WEIGHT * profile.weight_kg
            + MALE_BMR_HEIGHT * profile.height_cm
            - MALE_BMR_AGE * profile.age
        )
    return (
        FEMALE_BMR_BASE
        + FEMALE_BMR_WEIGHT * profile.weight_kg
        + FEMALE_BMR_HEIGHT * profile.height_cm
        - FEMALE_BMR_AGE * profile.age
    )


def compute(profile: UserProfile) -> DailyTarget:
    """Compute the daily macronutrient target for a profile."""
    calories = round_half_away(basal_metabolic_rate(profile) * profile.activity_factor)
    protein_g = round_half_away(profile.weight_kg * PROTEIN_G_PER_KG)
    fat_g = round_half_away(calories * FAT_CALORIE_SHARE / KCAL_PER_G_FAT)
    carbs_g = round_half_away(
        (calories - protein_g * KCAL_PER_G_PROTEIN - fat_g * KCAL_PER_G_FAT)
        / KCAL_PER_G_CARBS
    )
    return DailyTarget(
        calories=calories, protein_g=protein_g, fat_g=fat_g, carbs_g=carbs_g
    )
