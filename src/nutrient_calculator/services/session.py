"""Onboarding and profile submission."""

import logging
from dataclasses import dataclass

from nutrient_calculator.domain.errors import PersistenceFailure, SessionStateError
from nutrient_calculator.domain.profile import ProfileRecord, UserProfile
from nutrient_calculator.domain.session import SessionState, UserContext
from nutrient_calculator.services import norms
from nutrient_calculator.services.ledger import Clock, utc_now
from nutrient_calculator.services.store import Store

logger = logging.getLogger(__name__)


@dataclass
class SessionService:
    """Drives the onboarding -> tracking transition for one user."""

    store: Store
    context: UserContext
    clock: Clock = utc_now

    def current(self) -> ProfileRecord | None:
        """Return the persisted profile record, if any."""
        try:
            return self.store.get_profile(self.context)
        except Exception as exc:
            logger.exception(
                "Failed to load profile", extra={"user_id": self.context.user_id}
            )
            raise PersistenceFailure("Couldn't load your profile.") from exc

    def state(self) -> SessionState:
        if self.current() is None:
            return SessionState.ONBOARDING
        return SessionState.TRACKING

    def submit(self, profile: UserProfile) -> ProfileRecord:
        """Compute the daily target for a profile and persist both."""
        if self.state() == SessionState.TRACKING:
            raise SessionStateError("Profile is already set.")
        record = ProfileRecord(
            profile=profile,
            target=norms.compute(profile),
            updated_at=self.clock(),
        )
        try:
            self.store.save_profile(self.context, record)
        except Exception as exc:
            logger.exception(
                "Failed to save profile", extra={"user_id": self.context.user_id}
            )
            raise PersistenceFailure("Couldn't save your profile.") from exc
        logger.info(
            "Profile saved",
            extra={"user_id": self.context.user_id, "calories": record.target.calories},
        )
        return record
