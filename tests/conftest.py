"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID

import pytest

from nutrient_calculator.adapters.local_store import LocalStore
from nutrient_calculator.config import Settings
from nutrient_calculator.containers import AppContainer, build_container
from nutrient_calculator.domain.meals import MealEntry
from nutrient_calculator.domain.profile import ProfileRecord
from nutrient_calculator.domain.session import UserContext
from nutrient_calculator.services.store import Store


@dataclass
class FakeClock:
    """Clock that only moves when told to."""

    now: datetime = field(
        default_factory=lambda: datetime(2024, 5, 14, 12, 0, tzinfo=UTC)
    )

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


@dataclass
class FailingStore(Store):
    """Store wrapper that raises for the operations listed in ``failing``."""

    inner: Store = field(default_factory=LocalStore)
    failing: set[str] = field(default_factory=set)
    calls: list[str] = field(default_factory=list)

    def _check(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.failing:
            raise ConnectionError(f"{operation} unavailable")

    def get_profile(self, context: UserContext) -> ProfileRecord | None:
        self._check("get_profile")
        return self.inner.get_profile(context)

    def save_profile(self, context: UserContext, record: ProfileRecord) -> None:
        self._check("save_profile")
        self.inner.save_profile(context, record)

    def list_meals(
        self, context: UserContext, start: datetime, end: datetime
    ) -> list[MealEntry]:
        self._check("list_meals")
        return self.inner.list_meals(context, start, end)

    def append_meal(self, context: UserContext, entry: MealEntry) -> None:
        self._check("append_meal")
        self.inner.append_meal(context, entry)

    def delete_meal(self, context: UserContext, meal_id: UUID) -> None:
        self._check("delete_meal")
        self.inner.delete_meal(context, meal_id)


@pytest.fixture
def settings() -> Settings:
    return Settings(store_backend="local", user_id="test-user", timezone="UTC")


@pytest.fixture
def context() -> UserContext:
    return UserContext(user_id="test-user", timezone="UTC")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store() -> FailingStore:
    return FailingStore()


@pytest.fixture
def container(settings: Settings, store: FailingStore) -> AppContainer:
    return build_container(settings, store=store)
