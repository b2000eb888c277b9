"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutrient_calculator.adapters.local_store import LocalStore
from nutrient_calculator.adapters.supabase_store import SupabaseStore
from nutrient_calculator.config import Settings
from nutrient_calculator.domain.session import UserContext
from nutrient_calculator.services.ledger import MealLedger
from nutrient_calculator.services.session import SessionService
from nutrient_calculator.services.store import Store
from nutrient_calculator.services.tracking import TrackingService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    context: UserContext
    store: Store
    session_service: SessionService
    tracking_service: TrackingService


def build_store(settings: Settings) -> Store:
    """Create the store selected by ``store_backend``."""
    if settings.store_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "STORE_BACKEND=supabase requires SUPABASE_URL and "
                "SUPABASE_SERVICE_KEY"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseStore(client)
    return LocalStore.open(settings.local_store_path)


def build_container(
    settings: Settings | None = None, store: Store | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_store = store or build_store(resolved_settings)
    context = UserContext(
        user_id=resolved_settings.user_id, timezone=resolved_settings.timezone
    )
    return AppContainer(
        settings=resolved_settings,
        context=context,
        store=resolved_store,
        session_service=SessionService(store=resolved_store, context=context),
        tracking_service=TrackingService(
            store=resolved_store,
            context=context,
            ledger=MealLedger(timezone=context.timezone),
        ),
    )
