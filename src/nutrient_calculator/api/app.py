"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from nutrient_calculator.api.meals import router as meals_router
from nutrient_calculator.api.models import ProfileIn
from nutrient_calculator.api.ui import router as ui_router
from nutrient_calculator.app_logging import configure_logging
from nutrient_calculator.containers import AppContainer
from nutrient_calculator.domain.errors import PersistenceFailure, SessionStateError
from nutrient_calculator.domain.profile import ActivityLevel, ProfileRecord
from nutrient_calculator.domain.session import SessionState


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            app.state.container.tracking_service.refresh()
        except PersistenceFailure:
            logger.warning("Starting with an empty ledger")
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(meals_router)
    app.include_router(ui_router)

    @app.exception_handler(PersistenceFailure)
    async def persistence_failure(
        request: Request, exc: PersistenceFailure
    ) -> JSONResponse:
        return JSONResponse(status_code=502, content={"detail": str(exc)})

    @app.exception_handler(SessionStateError)
    async def session_state_error(
        request: Request, exc: SessionStateError
    ) -> JSONResponse:
        return JSONResponse(status_code=409, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/activity-levels")
    async def activity_levels() -> list[dict[str, object]]:
        """Return the selectable activity levels."""
        return [
            {"name": level.name.lower(), "factor": level.factor, "label": level.label}
            for level in ActivityLevel
        ]

    @app.get("/profile")
    async def get_profile(request: Request) -> dict[str, object]:
        """Return the session state with the stored profile and target."""
        state_container: AppContainer = request.app.state.container
        record = state_container.session_service.current()
        return _profile_payload(record)

    @app.post("/profile")
    async def submit_profile(payload: ProfileIn, request: Request) -> dict[str, object]:
        """Compute and store the daily target for a profile."""
        state_container: AppContainer = request.app.state.container
        record = state_container.session_service.submit(payload.to_domain())
        return _profile_payload(record)

    return app


def _profile_payload(record: ProfileRecord | None) -> dict[str, object]:
    if record is None:
        return {"state": SessionState.ONBOARDING.value, "profile": None, "target": None}
    return {
        "state": SessionState.TRACKING.value,
        "profile": jsonable_encoder(record.profile),
        "target": jsonable_encoder(record.target),
    }
