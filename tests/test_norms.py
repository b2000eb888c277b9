"""Tests for the daily norm calculation."""

import pytest

from nutrient_calculator.domain.profile import DailyTarget, Sex, UserProfile
from nutrient_calculator.services import norms


def test_compute_male_sedentary() -> None:
    profile = UserProfile(
        age=30, sex=Sex.MALE, weight_kg=70, height_cm=175, activity_factor=1.2
    )

    # 88.36 + 13.4 * 70 + 4.8 * 175 - 5.7 * 30 == 88.36 + 938 + 840 - 171
    assert norms.basal_metabolic_rate(profile) == pytest.approx(1695.36)
    # 1695.36 * 1.2 == 2034.432; carbs (2034 - 448 - 612) / 4 == 243.5
    assert norms.compute(profile) == DailyTarget(
        calories=2034, protein_g=112, fat_g=68, carbs_g=244
    )


def test_compute_female_light_rounds_half_away_from_zero() -> None:
    profile = UserProfile(
        age=25, sex=Sex.FEMALE, weight_kg=60, height_cm=165, activity_factor=1.375
    )

    target = norms.compute(profile)

    assert norms.basal_metabolic_rate(profile) == pytest.approx(1403.6)
    assert target.calories == 1930
    assert target.protein_g == 96
    assert target.fat_g == 64
    # (1930 - 384 - 576) / 4 == 242.5
    assert target.carbs_g == 243


def test_compute_uses_rounded_calories_for_macros() -> None:
    profile = UserProfile(
        age=40, sex=Sex.MALE, weight_kg=82.5, height_cm=181, activity_factor=1.55
    )

    target = norms.compute(profile)

    assert target.protein_g == norms.round_half_away(82.5 * 1.6)
    assert target.fat_g == norms.round_half_away(target.calories * 0.3 / 9)
    assert target.carbs_g == norms.round_half_away(
        (target.calories - target.protein_g * 4 - target.fat_g * 9) / 4
    )


def test_compute_accepts_plain_string_sex() -> None:
    profile = UserProfile(
        age=25, sex="female", weight_kg=60, height_cm=165, activity_factor=1.375
    )

    assert norms.compute(profile).calories == 1930


def test_compute_zero_weight_is_defined() -> None:
    profile = UserProfile(
        age=0, sex=Sex.MALE, weight_kg=0, height_cm=0, activity_factor=1.2
    )

    target = norms.compute(profile)

    assert target.calories == 106
    assert target.protein_g == 0


def test_split_constants_are_fixed() -> None:
    assert norms.PROTEIN_G_PER_KG == 1.6
    assert norms.FAT_CALORIE_SHARE == 0.3
    assert norms.KCAL_PER_G_FAT == 9
    assert norms.KCAL_PER_G_PROTEIN == 4
    assert norms.KCAL_PER_G_CARBS == 4


@pytest.mark.parametrize(
    ("value", "expected"),
    [(242.5, 243), (242.4999, 242), (0.5, 1), (-0.5, -1), (-2.5, -3), (0.0, 0)],
)
def test_round_half_away(value: float, expected: int) -> None:
    assert norms.round_half_away(value) == expected
