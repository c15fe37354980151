"""Domain models for daily ledger records."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DayRecord:
    """Cumulative calorie and protein totals for one calendar day."""

    id: int | None
    date: str
    total_calories: float
    total_protein: float

    @classmethod
    def empty(cls, day: str) -> "DayRecord":
        """Return an unsaved record with zeroed totals."""
        return cls(id=None, date=day, total_calories=0.0, total_protein=0.0)
