"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import Client, create_client

from daily_ledger.adapters.supabase_day_repository import SupabaseDayRepository
from daily_ledger.config import Settings
from daily_ledger.services.days import DayService

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    day_service: DayService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    day_repository = SupabaseDayRepository(
        client=supabase_client,
        table_name=resolved_settings.day_records_table,
        increment_function=resolved_settings.increment_function,
    )
    day_service = DayService(day_repository)

    async def close_resources() -> None:
        _close_supabase_client(supabase_client)
        _logger.info("Store client closed")

    return AppContainer(
        settings=resolved_settings,
        day_service=day_service,
        close_resources=close_resources,
    )


def _close_supabase_client(client: Client) -> None:
    """Close the HTTP session held by the PostgREST client, if one was opened."""
    # postgrest is built lazily on first query; skip when never used
    postgrest = getattr(client, "_postgrest", None)
    if postgrest is None:
        return
    session = getattr(postgrest, "session", None)
    close = getattr(session, "close", None)
    if callable(close):
        close()
