"""Daily ledger API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool

from daily_ledger.api.ledger_models import MealPayload, ResetPayload  # noqa: TC001

if TYPE_CHECKING:
    from daily_ledger.containers import AppContainer
    from daily_ledger.domain.days import DayRecord

router = APIRouter(prefix="/api", tags=["days"])


@router.get("/days")
async def list_days(request: Request) -> list[dict[str, object]]:
    """Return all daily records, most recent first."""
    container: AppContainer = request.app.state.container
    days = await run_in_threadpool(container.day_service.list_days)
    return [serialize_day(day) for day in days]


@router.get("/days/today")
async def today(request: Request) -> dict[str, object]:
    """Return today's totals without creating a record."""
    container: AppContainer = request.app.state.container
    day = await run_in_threadpool(container.day_service.get_today)
    return serialize_day(day)


@router.post("/meals")
async def add_meal(payload: MealPayload, request: Request) -> dict[str, object]:
    """Add a meal's calories and protein to a specific day."""
    container: AppContainer = request.app.state.container
    day = await run_in_threadpool(
        container.day_service.add_meal,
        payload.calories,
        payload.protein,
        payload.date,
    )
    return serialize_day(day)


@router.put("/days/reset")
async def reset_day(payload: ResetPayload, request: Request) -> dict[str, object]:
    """Reset a day's calories and protein to zero."""
    container: AppContainer = request.app.state.container
    day = await run_in_threadpool(container.day_service.reset_day, payload.date)
    return serialize_day(day)


def serialize_day(day: DayRecord) -> dict[str, object]:
    """Render a day record in the public JSON shape."""
    return {
        "id": day.id,
        "date": day.date,
        "totalCalories": _number(day.total_calories),
        "totalProtein": _number(day.total_protein),
    }


def _number(value: float) -> int | float:
    return int(value) if value.is_integer() else value
