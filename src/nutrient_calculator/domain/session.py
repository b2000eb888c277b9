"""Session context and state."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class UserContext:
    """Identifies whose data is read and written, and their local day."""

    user_id: str
    timezone: str = "UTC"


class SessionState(str, Enum):
    """Lifecycle of a tracking session."""

    ONBOARDING = "onboarding"
    TRACKING = "tracking"
