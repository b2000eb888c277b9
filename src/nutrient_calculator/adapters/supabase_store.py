"""Supabase-backed store."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from nutrient_calculator.adapters.documents import (
    document_to_meal,
    document_to_profile,
    meal_to_document,
    profile_to_document,
)
from nutrient_calculator.domain.errors import PersistenceFailure
from nutrient_calculator.domain.meals import MealEntry
from nutrient_calculator.domain.profile import ProfileRecord
from nutrient_calculator.domain.session import UserContext
from nutrient_calculator.services.store import Store

PROFILE_COLUMNS = (
    "user_id, age, sex, weight_kg, height_cm, activity_factor, "
    "calories, protein_g, fat_g, carbs_g, updated_at"
)
MEAL_COLUMNS = "id, user_id, calories, protein_g, fat_g, carbs_g, occurred_at"


@dataclass
class SupabaseStore(Store):
    """Supabase implementation of the store."""

    client: Client

    def get_profile(self, context: UserContext) -> ProfileRecord | None:
        """Return the profile row for the user, if present."""
        response = (
            self.client.table("profiles")
            .select(PROFILE_COLUMNS)
            .eq("user_id", context.user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return document_to_profile(response.data[0])

    def save_profile(self, context: UserContext, record: ProfileRecord) -> None:
        """Upsert the user's profile row."""
        response = (
            self.client.table("profiles")
            .upsert(
                profile_to_document(context.user_id, record), on_conflict="user_id"
            )
            .execute()
        )
        if not response.data:
            raise PersistenceFailure("Failed to save profile in Supabase")

    def list_meals(
        self, context: UserContext, start: datetime, end: datetime
    ) -> list[MealEntry]:
        """Return meal rows in [start, end) ordered by time."""
        response = (
            self.client.table("meal_entries")
            .select(MEAL_COLUMNS)
            .eq("user_id", context.user_id)
            .gte("occurred_at", start.isoformat())
            .lt("occurred_at", end.isoformat())
            .order("occurred_at", desc=False)
            .execute()
        )
        return [document_to_meal(row) for row in response.data or []]

    def append_meal(self, context: UserContext, entry: MealEntry) -> None:
        """Insert a meal row."""
        response = (
            self.client.table("meal_entries")
            .insert(meal_to_document(context.user_id, entry))
            .execute()
        )
        if not response.data:
            raise PersistenceFailure("Failed to create meal entry in Supabase")

    def delete_meal(self, context: UserContext, meal_id: UUID) -> None:
        """Delete a meal row owned by the user."""
        self.client.table("meal_entries").delete().eq("id", str(meal_id)).eq(
            "user_id", context.user_id
        ).execute()
