"""Tests for the meal ledger."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

from nutrient_calculator.domain.meals import DailyTotals, MealDraft, MealEntry
from nutrient_calculator.domain.profile import DailyTarget
from nutrient_calculator.services.ledger import (
    MealLedger,
    day_window,
    is_over_limit,
)
from tests.conftest import FakeClock


def _entry(occurred_at: datetime, calories: int = 100) -> MealEntry:
    return MealEntry(
        id=uuid4(),
        calories=calories,
        protein_g=10,
        fat_g=5,
        carbs_g=12,
        occurred_at=occurred_at,
    )


def test_add_ignores_all_zero_draft() -> None:
    ledger = MealLedger(clock=FakeClock())

    entry = ledger.add(MealDraft())

    assert entry is None
    assert len(ledger) == 0


def test_add_ignores_negative_values() -> None:
    ledger = MealLedger(clock=FakeClock())

    assert ledger.add(MealDraft(calories=-100)) is None
    assert ledger.add(MealDraft(calories=300, fat_g=-1)) is None
    assert len(ledger) == 0


def test_add_assigns_id_and_timestamp() -> None:
    clock = FakeClock()
    ledger = MealLedger(clock=clock)

    first = ledger.add(MealDraft(calories=500))
    second = ledger.add(MealDraft(calories=500))

    assert first is not None
    assert second is not None
    assert first.id != second.id
    assert first.occurred_at == clock.now


def test_add_calories_only_updates_calories_total() -> None:
    ledger = MealLedger(clock=FakeClock())
    ledger.add(MealDraft(calories=200, protein_g=20, fat_g=8, carbs_g=15))
    before = ledger.totals()

    ledger.add(MealDraft(calories=500))

    after = ledger.totals()
    assert len(ledger) == 2
    assert after.calories == before.calories + 500
    assert after.protein_g == before.protein_g
    assert after.fat_g == before.fat_g
    assert after.carbs_g == before.carbs_g


def test_remove_unknown_id_is_noop() -> None:
    ledger = MealLedger(clock=FakeClock())
    ledger.add(MealDraft(calories=300))
    before = ledger.totals()

    removed = ledger.remove(uuid4())

    assert removed is False
    assert len(ledger) == 1
    assert ledger.totals() == before


def test_add_then_remove_restores_totals() -> None:
    ledger = MealLedger(clock=FakeClock())
    ledger.add(MealDraft(calories=300, protein_g=12))
    before = ledger.totals()

    entry = ledger.add(MealDraft(calories=450, protein_g=30, fat_g=10, carbs_g=40))
    assert entry is not None
    ledger.remove(entry.id)

    assert ledger.totals() == before


def test_totals_exclude_entries_from_other_days() -> None:
    clock = FakeClock()
    ledger = MealLedger(clock=clock)
    ledger.insert(_entry(clock.now - timedelta(days=1), calories=900))
    ledger.insert(_entry(clock.now + timedelta(days=1), calories=700))
    ledger.insert(_entry(clock.now, calories=250))

    assert ledger.totals() == DailyTotals(
        calories=250, protein_g=10, fat_g=5, carbs_g=12
    )


def test_entries_drop_out_after_midnight() -> None:
    clock = FakeClock(now=datetime(2024, 5, 14, 23, 30, tzinfo=UTC))
    ledger = MealLedger(clock=clock)
    ledger.add(MealDraft(calories=400))
    assert ledger.totals().calories == 400

    clock.advance(timedelta(hours=1))

    assert ledger.totals() == DailyTotals()
    assert ledger.entries() == []


def test_day_window_uses_local_timezone() -> None:
    clock = FakeClock(now=datetime(2024, 5, 14, 23, 30, tzinfo=UTC))
    ledger = MealLedger(timezone="Europe/Moscow", clock=clock)
    # 23:30 UTC is already 02:30 on the 15th in Moscow.
    ledger.insert(_entry(datetime(2024, 5, 14, 20, 0, tzinfo=UTC), calories=300))
    ledger.insert(_entry(datetime(2024, 5, 14, 21, 30, tzinfo=UTC), calories=150))

    assert ledger.totals().calories == 150

    start, end = day_window("Europe/Moscow", clock.now)
    assert start.isoformat() == "2024-05-15T00:00:00+03:00"
    assert end - start == timedelta(days=1)


def test_replace_swaps_membership() -> None:
    clock = FakeClock()
    ledger = MealLedger(clock=clock)
    ledger.add(MealDraft(calories=100))
    replacement = [_entry(clock.now, calories=600)]

    ledger.replace(replacement)

    assert ledger.entries() == replacement


def test_is_over_limit_is_strict() -> None:
    target = DailyTarget(calories=2000, protein_g=100, fat_g=60, carbs_g=250)
    totals = DailyTotals(calories=2001, protein_g=100, fat_g=59, carbs_g=300)

    flags = is_over_limit(totals, target)

    assert flags.calories is True
    assert flags.protein_g is False
    assert flags.fat_g is False
    assert flags.carbs_g is True
    assert flags.exceeded is True


def test_is_over_limit_all_within_target() -> None:
    target = DailyTarget(calories=2000, protein_g=100, fat_g=60, carbs_g=250)

    flags = is_over_limit(DailyTotals(), target)

    assert flags.exceeded is False
