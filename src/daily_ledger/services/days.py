"""Daily ledger service for per-day calorie and protein totals."""

import logging
import math
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from typing import Protocol, TypeVar

from daily_ledger.domain.days import DayRecord

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

AMOUNT_ERROR = (
    "Invalid input. Please provide numeric values for calories and protein."
)
DATE_ERROR = "Invalid input. Please provide a valid date in YYYY-MM-DD format."
RESET_DATE_ERROR = "Invalid input. Please provide a valid date."

FETCH_ERROR = "Server Error: Could not fetch data."
SAVE_ERROR = "Server Error: Could not save data."
RESET_ERROR = "Server Error: Could not reset data."

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class InvalidDayInputError(ValueError):
    """Raised when a request carries missing or malformed fields."""


class DayStoreError(RuntimeError):
    """Raised when the backing store fails; the message is safe to return."""


class DayRepository(Protocol):
    """Persistence interface for day records."""

    def list_days(self) -> list[DayRecord]:
        """Return all day records, most recent date first."""

    def get_day(self, day: str) -> DayRecord | None:
        """Return the record for a date, if present."""

    def increment_day(self, day: str, calories: float, protein: float) -> DayRecord:
        """Atomically add to a day's totals, creating the record if missing."""

    def reset_day(self, day: str) -> DayRecord:
        """Atomically zero a day's totals, creating the record if missing."""


@dataclass
class DayService:
    """Service that validates ledger requests and delegates to the store."""

    repository: DayRepository

    def list_days(self) -> list[DayRecord]:
        """Return every day record ordered by date descending."""
        return self._guard(self.repository.list_days, FETCH_ERROR, "list days")

    def get_today(self) -> DayRecord:
        """Return today's record, or an unsaved zeroed record when absent."""
        day = today_local_date()
        record = self._guard(
            lambda: self.repository.get_day(day), FETCH_ERROR, f"get day {day}"
        )
        return record or DayRecord.empty(day)

    def add_meal(self, calories: object, protein: object, day: object) -> DayRecord:
        """Add a meal's calories and protein to the totals for a day."""
        calories_value = parse_amount(calories)
        protein_value = parse_amount(protein)
        day_value = parse_day(day)
        record = self._guard(
            lambda: self.repository.increment_day(
                day_value, calories_value, protein_value
            ),
            SAVE_ERROR,
            f"add meal for {day_value}",
        )
        _logger.info(
            "Meal added: date=%s calories=%s protein=%s",
            day_value,
            calories_value,
            protein_value,
        )
        return record

    def reset_day(self, day: object) -> DayRecord:
        """Reset the totals for a day to zero."""
        day_value = parse_day(day, message=RESET_DATE_ERROR)
        record = self._guard(
            lambda: self.repository.reset_day(day_value),
            RESET_ERROR,
            f"reset day {day_value}",
        )
        _logger.info("Day reset: date=%s", day_value)
        return record

    def _guard(self, func: Callable[[], T], message: str, action: str) -> T:
        """Run a store call, converting any failure into a DayStoreError."""
        try:
            return func()
        except Exception as exc:
            _logger.exception("Store call failed: %s", action)
            raise DayStoreError(message) from exc


def parse_amount(value: object) -> float:
    """Coerce a calorie or protein amount to a finite, non-negative float."""
    if isinstance(value, bool) or not value:
        raise InvalidDayInputError(AMOUNT_ERROR)
    if not isinstance(value, (int, float, str)):
        raise InvalidDayInputError(AMOUNT_ERROR)
    try:
        amount = float(value)
    except (ValueError, OverflowError) as exc:
        raise InvalidDayInputError(AMOUNT_ERROR) from exc
    if not math.isfinite(amount) or amount < 0:
        raise InvalidDayInputError(AMOUNT_ERROR)
    return amount


def parse_day(value: object, message: str = DATE_ERROR) -> str:
    """Validate a YYYY-MM-DD calendar date string and return it unchanged."""
    if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
        raise InvalidDayInputError(message)
    try:
        date.fromisoformat(value)
    except ValueError as exc:
        raise InvalidDayInputError(message) from exc
    return value


def today_local_date() -> str:
    """Return today's date in local time as YYYY-MM-DD."""
    return date.today().isoformat()  # noqa: DTZ011
