"""Domain models for the meal ledger."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class MealDraft:
    """Macros as entered by the user, before an entry is created."""

    calories: int = 0
    protein_g: int = 0
    fat_g: int = 0
    carbs_g: int = 0


@dataclass(frozen=True)
class MealEntry:
    """A logged meal."""

    id: UUID
    calories: int
    protein_g: int
    fat_g: int
    carbs_g: int
    occurred_at: datetime


@dataclass(frozen=True)
class DailyTotals:
    """Sum of the day's meal entries."""

    calories: int = 0
    protein_g: int = 0
    fat_g: int = 0
    carbs_g: int = 0


@dataclass(frozen=True)
class OverLimit:
    """Per-field flags for totals that exceed the daily target."""

    calories: bool
    protein_g: bool
    fat_g: bool
    carbs_g: bool

    @property
    def exceeded(self) -> bool:
        """Return True when at least one field is over the target."""
        return self.calories or self.protein_g or self.fat_g or self.carbs_g


@dataclass(frozen=True)
class LedgerSnapshot:
    """Point-in-time view of today's ledger."""

    entries: list[MealEntry] = field(default_factory=list)
    totals: DailyTotals = field(default_factory=DailyTotals)
    error: str | None = None
