"""Document shapes shared by the store adapters."""

from datetime import datetime
from uuid import UUID

from nutrient_calculator.domain.meals import MealEntry
from nutrient_calculator.domain.profile import (
    DailyTarget,
    ProfileRecord,
    Sex,
    UserProfile,
)


def profile_to_document(user_id: str, record: ProfileRecord) -> dict[str, object]:
    """Flatten a profile record into a single document."""
    return {
        "user_id": user_id,
        "age": record.profile.age,
        "sex": record.profile.sex.value,
        "weight_kg": record.profile.weight_kg,
        "height_cm": record.profile.height_cm,
        "activity_factor": record.profile.activity_factor,
        "calories": record.target.calories,
        "protein_g": record.target.protein_g,
        "fat_g": record.target.fat_g,
        "carbs_g": record.target.carbs_g,
        "updated_at": record.updated_at.isoformat(),
    }


def document_to_profile(row: dict[str, object]) -> ProfileRecord:
    return ProfileRecord(
        profile=UserProfile(
            age=int(row.get("age", 0)),
            sex=Sex(str(row.get("sex", Sex.MALE.value))),
            weight_kg=float(row.get("weight_kg", 0.0)),
            height_cm=float(row.get("height_cm", 0.0)),
            activity_factor=float(row.get("activity_factor", 1.2)),
        ),
        target=DailyTarget(
            calories=int(row.get("calories", 0)),
            protein_g=int(row.get("protein_g", 0)),
            fat_g=int(row.get("fat_g", 0)),
            carbs_g=int(row.get("carbs_g", 0)),
        ),
        updated_at=datetime.fromisoformat(str(row["updated_at"])),
    )


def meal_to_document(user_id: str, entry: MealEntry) -> dict[str, object]:
    return {
        "id": str(entry.id),
        "user_id": user_id,
        "calories": entry.calories,
        "protein_g": entry.protein_g,
        "fat_g": entry.fat_g,
        "carbs_g": entry.carbs_g,
        "occurred_at": entry.occurred_at.isoformat(),
    }


def document_to_meal(row: dict[str, object]) -> MealEntry:
    return MealEntry(
        id=UUID(str(row["id"])),
        calories=int(row.get("calories", 0)),
        protein_g=int(row.get("protein_g", 0)),
        fat_g=int(row.get("fat_g", 0)),
        carbs_g=int(row.get("carbs_g", 0)),
        occurred_at=datetime.fromisoformat(str(row["occurred_at"])),
    )
