"""Today's meal ledger."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4
from zoneinfo import ZoneInfo

from nutrient_calculator.domain.meals import (
    DailyTotals,
    MealDraft,
    MealEntry,
    OverLimit,
)
from nutrient_calculator.domain.profile import DailyTarget

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(tz=UTC)


def day_window(timezone_name: str, now: datetime) -> tuple[datetime, datetime]:
    """Return the [start, end) bounds of the local calendar day containing now."""
    tz = ZoneInfo(timezone_name)
    start = now.astimezone(tz).replace(hour=0, minute=0, second=0, microsecond=0)
    end = start + timedelta(days=1)
    return start, end


def is_valid_draft(draft: MealDraft) -> bool:
    """Return True when no field is negative and at least one is positive."""
    values = (draft.calories, draft.protein_g, draft.fat_g, draft.carbs_g)
    return all(value >= 0 for value in values) and any(value > 0 for value in values)


def build_entry(draft: MealDraft, occurred_at: datetime) -> MealEntry | None:
    """Create an entry with a fresh id, or None for an empty draft."""
    if not is_valid_draft(draft):
        return None
    return MealEntry(
        id=uuid4(),
        calories=draft.calories,
        protein_g=draft.protein_g,
        fat_g=draft.fat_g,
        carbs_g=draft.carbs_g,
        occurred_at=occurred_at,
    )


def sum_totals(entries: Iterable[MealEntry]) -> DailyTotals:
    total = DailyTotals()
    for entry in entries:
        total = DailyTotals(
            calories=total.calories + entry.calories,
            protein_g=total.protein_g + entry.protein_g,
            fat_g=total.fat_g + entry.fat_g,
            carbs_g=total.carbs_g + entry.carbs_g,
        )
    return total


def is_over_limit(totals: DailyTotals, target: DailyTarget) -> OverLimit:
    """Flag fields whose total strictly exceeds the target."""
    return OverLimit(
        calories=totals.calories > target.calories,
        protein_g=totals.protein_g > target.protein_g,
        fat_g=totals.fat_g > target.fat_g,
        carbs_g=totals.carbs_g > target.carbs_g,
    )


@dataclass
class MealLedger:
    """Meal entries for the current local day.

    Entries may outlive the day they were logged in, so every read filters by
    the local day window computed from ``clock`` and ``timezone``.
    """

    timezone: str = "UTC"
    clock: Clock = utc_now
    _entries: dict[UUID, MealEntry] = field(default_factory=dict)

    def add(self, draft: MealDraft) -> MealEntry | None:
        """Create and append an entry; empty drafts are ignored."""
        entry = build_entry(draft, self.clock())
        if entry is None:
            return None
        self._entries[entry.id] = entry
        return entry

    def insert(self, entry: MealEntry) -> None:
        """Append an entry that already has an id and timestamp."""
        self._entries[entry.id] = entry

    def remove(self, meal_id: UUID) -> bool:
        """Remove an entry by id. Unknown ids are ignored."""
        return self._entries.pop(meal_id, None) is not None

    def replace(self, entries: Iterable[MealEntry]) -> None:
        """Replace the membership with a store snapshot."""
        self._entries = {entry.id: entry for entry in entries}

    def entries(self) -> list[MealEntry]:
        """Return today's entries ordered by time."""
        start, end = day_window(self.timezone, self.clock())
        today = [
            entry for entry in self._entries.values() if start <= entry.occurred_at < end
        ]
        return sorted(today, key=lambda entry: entry.occurred_at)

    def totals(self) -> DailyTotals:
        """Return the sum of today's entries."""
        return sum_totals(self.entries())

    def __len__(self) -> int:
        return len(self.entries())
