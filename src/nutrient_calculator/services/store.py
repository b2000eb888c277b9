"""Persistence interface shared by the local and remote stores."""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from nutrient_calculator.domain.meals import MealEntry
from nutrient_calculator.domain.profile import ProfileRecord
from nutrient_calculator.domain.session import UserContext


class Store(Protocol):
    """Persistence interface for the profile record and meal entries."""

    def get_profile(self, context: UserContext) -> ProfileRecord | None:
        """Return the stored profile record for the user, if present."""

    def save_profile(self, context: UserContext, record: ProfileRecord) -> None:
        """Create or replace the user's profile record."""

    def list_meals(
        self, context: UserContext, start: datetime, end: datetime
    ) -> list[MealEntry]:
        """Return meal entries with start <= occurred_at < end."""

    def append_meal(self, context: UserContext, entry: MealEntry) -> None:
        """Persist a new meal entry."""

    def delete_meal(self, context: UserContext, meal_id: UUID) -> None:
        """Delete a meal entry. Unknown ids are ignored."""
