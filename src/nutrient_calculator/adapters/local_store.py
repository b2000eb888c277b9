"""Local store kept in memory, optionally mirrored to a JSON file."""

import json
import logging
import os
import tempfile
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from uuid import UUID

from nutrient_calculator.adapters.documents import (
    document_to_meal,
    document_to_profile,
    meal_to_document,
    profile_to_document,
)
from nutrient_calculator.domain.meals import MealEntry
from nutrient_calculator.domain.profile import ProfileRecord
from nutrient_calculator.domain.session import UserContext
from nutrient_calculator.services.store import Store

logger = logging.getLogger(__name__)


@dataclass
class LocalStore(Store):
    """Single-process store. Writes through to ``path`` when one is given."""

    path: Path | None = None
    profiles: dict[str, dict[str, object]] = field(default_factory=dict)
    meals: dict[str, list[dict[str, object]]] = field(default_factory=dict)

    @classmethod
    def open(cls, path: str | Path | None) -> "LocalStore":
        """Create a store, loading existing data from ``path`` if it exists."""
        if path is None:
            return cls()
        resolved = Path(path)
        store = cls(path=resolved)
        if resolved.exists():
            payload = json.loads(resolved.read_text(encoding="utf-8"))
            store.profiles = dict(payload.get("profiles", {}))
            store.meals = {
                user_id: list(rows)
                for user_id, rows in payload.get("meals", {}).items()
            }
            logger.info("Loaded local store", extra={"path": str(resolved)})
        return store

    def get_profile(self, context: UserContext) -> ProfileRecord | None:
        """Return the stored profile record for the user."""
        row = self.profiles.get(context.user_id)
        if row is None:
            return None
        return document_to_profile(row)

    def save_profile(self, context: UserContext, record: ProfileRecord) -> None:
        """Replace the user's profile record."""
        profiles = {
            **self.profiles,
            context.user_id: profile_to_document(context.user_id, record),
        }
        self._flush(profiles, self.meals)
        self.profiles = profiles

    def list_meals(
        self, context: UserContext, start: datetime, end: datetime
    ) -> list[MealEntry]:
        """Return the user's meals in [start, end) ordered by time."""
        entries = [
            document_to_meal(row) for row in self.meals.get(context.user_id, [])
        ]
        in_range = [entry for entry in entries if start <= entry.occurred_at < end]
        return sorted(in_range, key=lambda entry: entry.occurred_at)

    def append_meal(self, context: UserContext, entry: MealEntry) -> None:
        """Store a new meal entry."""
        rows = [
            *self.meals.get(context.user_id, []),
            meal_to_document(context.user_id, entry),
        ]
        meals = {**self.meals, context.user_id: rows}
        self._flush(self.profiles, meals)
        self.meals = meals

    def delete_meal(self, context: UserContext, meal_id: UUID) -> None:
        """Delete a meal entry if present."""
        rows = self.meals.get(context.user_id, [])
        remaining = [row for row in rows if row.get("id") != str(meal_id)]
        if len(remaining) == len(rows):
            return
        meals = {**self.meals, context.user_id: remaining}
        self._flush(self.profiles, meals)
        self.meals = meals

    def _flush(
        self,
        profiles: dict[str, dict[str, object]],
        meals: dict[str, list[dict[str, object]]],
    ) -> None:
        # Callers only adopt the new state once this returns.
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = json.dumps({"profiles": profiles, "meals": meals}, indent=2)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
