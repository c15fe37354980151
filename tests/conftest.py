"""Shared test fixtures."""

import threading
from dataclasses import dataclass, field

import pytest

from daily_ledger.config import Settings
from daily_ledger.containers import AppContainer
from daily_ledger.domain.days import DayRecord
from daily_ledger.services.days import DayRepository, DayService

TEST_SERVICE_KEY = (
    "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
    "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
    "c2lnbmF0dXJl"
)


@dataclass
class InMemoryDayRepository(DayRepository):
    """Lock-guarded in-memory day repository for tests."""

    days: dict[str, DayRecord] = field(default_factory=dict)
    writes: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock)
    _next_id: int = 1

    def list_days(self) -> list[DayRecord]:
        with self._lock:
            return sorted(self.days.values(), key=lambda d: d.date, reverse=True)

    def get_day(self, day: str) -> DayRecord | None:
        with self._lock:
            return self.days.get(day)

    def increment_day(self, day: str, calories: float, protein: float) -> DayRecord:
        with self._lock:
            current = self.days.get(day) or self._create(day)
            updated = DayRecord(
                id=current.id,
                date=day,
                total_calories=current.total_calories + calories,
                total_protein=current.total_protein + protein,
            )
            self.days[day] = updated
            self.writes += 1
            return updated

    def reset_day(self, day: str) -> DayRecord:
        with self._lock:
            current = self.days.get(day) or self._create(day)
            updated = DayRecord(
                id=current.id, date=day, total_calories=0.0, total_protein=0.0
            )
            self.days[day] = updated
            self.writes += 1
            return updated

    def _create(self, day: str) -> DayRecord:
        record = DayRecord(
            id=self._next_id, date=day, total_calories=0.0, total_protein=0.0
        )
        self._next_id += 1
        return record


@dataclass
class FailingDayRepository(DayRepository):
    """Repository whose every call fails like an unreachable store."""

    calls: int = 0

    def list_days(self) -> list[DayRecord]:
        return self._fail()

    def get_day(self, day: str) -> DayRecord | None:
        return self._fail()

    def increment_day(self, day: str, calories: float, protein: float) -> DayRecord:
        return self._fail()

    def reset_day(self, day: str) -> DayRecord:
        return self._fail()

    def _fail(self):  # type: ignore[no-untyped-def]
        self.calls += 1
        raise ConnectionError("store unavailable")


def make_container(
    settings: Settings,
    repository: DayRepository,
    closed: list[bool] | None = None,
) -> AppContainer:
    async def close_resources() -> None:
        if closed is not None:
            closed.append(True)

    return AppContainer(
        settings=settings,
        day_service=DayService(repository),
        close_resources=close_resources,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=TEST_SERVICE_KEY,
    )


@pytest.fixture
def day_repository() -> InMemoryDayRepository:
    return InMemoryDayRepository()


@pytest.fixture
def container(
    settings: Settings, day_repository: InMemoryDayRepository
) -> AppContainer:
    return make_container(settings, day_repository)
