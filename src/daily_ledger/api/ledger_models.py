"""Request body models for the ledger endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class MealPayload(BaseModel):
    """Meal entry body; fields are validated by the service."""

    model_config = ConfigDict(extra="ignore")

    calories: Any = None
    protein: Any = None
    date: Any = None


class ResetPayload(BaseModel):
    """Reset body naming the day to zero out."""

    model_config = ConfigDict(extra="ignore")

    date: Any = None
