"""Supabase repository for daily ledger records."""

from dataclasses import dataclass

from supabase import Client

from daily_ledger.domain.days import DayRecord
from daily_ledger.services.days import DayRepository

_COLUMNS = "id, date, total_calories, total_protein"


@dataclass
class SupabaseDayRepository(DayRepository):
    """Supabase implementation backed by a table keyed by a unique date."""

    client: Client
    table_name: str = "day_records"
    increment_function: str = "increment_day_totals"

    def list_days(self) -> list[DayRecord]:
        """Return all day records, most recent date first."""
        response = (
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .order("date", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def get_day(self, day: str) -> DayRecord | None:
        """Return the record for a date, if present."""
        response = (
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("date", day)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def increment_day(self, day: str, calories: float, protein: float) -> DayRecord:
        """Add to a day's totals via the insert-on-conflict database function."""
        response = self.client.rpc(
            self.increment_function,
            {"p_date": day, "p_calories": calories, "p_protein": protein},
        ).execute()
        row = _first_row(response.data)
        if row is None:
            raise RuntimeError("Failed to increment day totals")
        return _parse_row(row)

    def reset_day(self, day: str) -> DayRecord:
        """Upsert zeroed totals for a day."""
        response = (
            self.client.table(self.table_name)
            .upsert(
                {"date": day, "total_calories": 0, "total_protein": 0},
                on_conflict="date",
            )
            .execute()
        )
        row = _first_row(response.data)
        if row is None:
            raise RuntimeError("Failed to reset day totals")
        return _parse_row(row)


def _first_row(data: object) -> dict[str, object] | None:
    # set-returning functions yield a list, scalar composites a single object
    if isinstance(data, list):
        return data[0] if data else None
    if isinstance(data, dict):
        return data
    return None


def _parse_row(row: dict[str, object]) -> DayRecord:
    raw_id = row.get("id")
    return DayRecord(
        id=int(raw_id) if raw_id is not None else None,
        date=str(row.get("date", "")),
        total_calories=float(row.get("total_calories") or 0.0),
        total_protein=float(row.get("total_protein") or 0.0),
    )
