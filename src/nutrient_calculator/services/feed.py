"""Live view of today's ledger built on store polling."""

import asyncio
import logging
from collections.abc import AsyncIterator, Awaitable, Callable

from nutrient_calculator.domain.meals import LedgerSnapshot, MealEntry
from nutrient_calculator.domain.session import UserContext
from nutrient_calculator.services.ledger import Clock, day_window, sum_totals, utc_now
from nutrient_calculator.services.store import Store

logger = logging.getLogger(__name__)


async def watch_ledger(
    store: Store,
    context: UserContext,
    interval_seconds: float = 2.0,
    clock: Clock = utc_now,
    should_stop: Callable[[], Awaitable[bool]] | None = None,
) -> AsyncIterator[LedgerSnapshot]:
    """Yield a snapshot now and whenever today's entries change.

    Each call starts its own polling loop. A failed poll yields a snapshot
    with the last known entries and an error message, then polling resumes;
    the next successful poll always yields so the error can be cleared.
    ``should_stop`` is awaited before every poll and ends the feed when it
    returns true, even while nothing changes.
    """
    last: list[MealEntry] | None = None
    failed = False
    while True:
        if should_stop is not None and await should_stop():
            return
        start, end = day_window(context.timezone, clock())
        try:
            entries = sorted(
                store.list_meals(context, start, end),
                key=lambda entry: entry.occurred_at,
            )
        except Exception:
            logger.exception(
                "Ledger poll failed", extra={"user_id": context.user_id}
            )
            failed = True
            known = last or []
            yield LedgerSnapshot(
                entries=known,
                totals=sum_totals(known),
                error="Couldn't refresh today's meals.",
            )
        else:
            if failed or entries != last:
                failed = False
                last = entries
                yield LedgerSnapshot(entries=entries, totals=sum_totals(entries))
        await asyncio.sleep(interval_seconds)
