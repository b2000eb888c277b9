"""Meal tracking against the daily target."""

import logging
from dataclasses import dataclass, field
from uuid import UUID

from nutrient_calculator.domain.errors import PersistenceFailure
from nutrient_calculator.domain.meals import (
    DailyTotals,
    MealDraft,
    MealEntry,
    OverLimit,
)
from nutrient_calculator.domain.profile import DailyTarget
from nutrient_calculator.domain.session import UserContext
from nutrient_calculator.services.ledger import (
    MealLedger,
    build_entry,
    day_window,
    is_over_limit,
)
from nutrient_calculator.services.store import Store

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackingSummary:
    """Everything the ledger screen displays."""

    entries: list[MealEntry]
    totals: DailyTotals
    target: DailyTarget | None
    over_limit: OverLimit | None


@dataclass
class TrackingService:
    """Keeps the ledger in step with confirmed store state."""

    store: Store
    context: UserContext
    ledger: MealLedger = field(default_factory=MealLedger)

    def __post_init__(self) -> None:
        self.ledger.timezone = self.context.timezone

    def refresh(self) -> list[MealEntry]:
        """Reload today's entries from the store."""
        start, end = day_window(self.context.timezone, self.ledger.clock())
        try:
            entries = self.store.list_meals(self.context, start, end)
        except Exception as exc:
            logger.exception(
                "Failed to load meals", extra={"user_id": self.context.user_id}
            )
            raise PersistenceFailure("Couldn't load today's meals.") from exc
        self.ledger.replace(entries)
        return self.ledger.entries()

    def add_meal(self, draft: MealDraft) -> MealEntry | None:
        """Persist a meal and add it to the ledger; empty drafts are ignored."""
        entry = build_entry(draft, self.ledger.clock())
        if entry is None:
            return None
        try:
            self.store.append_meal(self.context, entry)
        except Exception as exc:
            logger.exception(
                "Failed to save meal",
                extra={"user_id": self.context.user_id, "meal_id": str(entry.id)},
            )
            raise PersistenceFailure("Couldn't save that meal.") from exc
        self.ledger.insert(entry)
        return entry

    def remove_meal(self, meal_id: UUID) -> None:
        """Delete a meal from the store, then from the ledger."""
        try:
            self.store.delete_meal(self.context, meal_id)
        except Exception as exc:
            logger.exception(
                "Failed to delete meal",
                extra={"user_id": self.context.user_id, "meal_id": str(meal_id)},
            )
            raise PersistenceFailure("Couldn't delete that meal.") from exc
        self.ledger.remove(meal_id)

    def summary(self, target: DailyTarget | None) -> TrackingSummary:
        """Return today's entries and totals, flagged against the target."""
        totals = self.ledger.totals()
        return TrackingSummary(
            entries=self.ledger.entries(),
            totals=totals,
            target=target,
            over_limit=is_over_limit(totals, target) if target else None,
        )
