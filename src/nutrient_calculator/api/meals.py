"""Meal ledger endpoints."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import StreamingResponse

from nutrient_calculator.api.models import MealIn  # noqa: TC001
from nutrient_calculator.services.feed import watch_ledger
from nutrient_calculator.services.ledger import is_over_limit

if TYPE_CHECKING:
    from nutrient_calculator.containers import AppContainer

router = APIRouter(prefix="/meals", tags=["meals"])


@router.get("/today")
async def today(request: Request) -> dict[str, object]:
    """Return today's entries and totals flagged against the target."""
    container: AppContainer = request.app.state.container
    record = container.session_service.current()
    container.tracking_service.refresh()
    summary = container.tracking_service.summary(record.target if record else None)
    return jsonable_encoder(summary)


@router.post("")
async def add_meal(payload: MealIn, request: Request) -> dict[str, object]:
    """Log a meal. Entries without any positive value are ignored."""
    container: AppContainer = request.app.state.container
    entry = container.tracking_service.add_meal(payload.to_domain())
    if entry is None:
        return {"status": "ignored"}
    return {"status": "ok", "entry": jsonable_encoder(entry)}


@router.delete("/{meal_id}")
async def delete_meal(meal_id: UUID, request: Request) -> dict[str, str]:
    """Delete a meal. Unknown ids succeed without changes."""
    container: AppContainer = request.app.state.container
    container.tracking_service.remove_meal(meal_id)
    return {"status": "ok"}


@router.get("/stream")
async def stream(request: Request) -> StreamingResponse:
    """Stream ledger snapshots as server-sent events."""
    container: AppContainer = request.app.state.container
    record = container.session_service.current()
    target = record.target if record else None

    async def events() -> AsyncIterator[str]:
        async for snapshot in watch_ledger(
            container.store,
            container.context,
            interval_seconds=container.settings.feed_poll_seconds,
            should_stop=request.is_disconnected,
        ):
            payload = jsonable_encoder(snapshot)
            payload["over_limit"] = (
                jsonable_encoder(is_over_limit(snapshot.totals, target))
                if target
                else None
            )
            yield f"data: {json.dumps(payload)}\n\n"

    return StreamingResponse(events(), media_type="text/event-stream")
