"""Pydantic models for API request payloads."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class GoalCreateRequest(BaseModel):
    """New goal submitted from the goal editor."""

    model_config = ConfigDict(populate_by_name=True)

    start_weight: float
    target_weight: float
    daily_calorie_delta: int = Field(alias="daily_deficit")


class WeightLogRequest(BaseModel):
    """A weigh-in for one calendar day."""

    model_config = ConfigDict(populate_by_name=True)

    day: date = Field(alias="date")
    weight: float


class SettingsUpdateRequest(BaseModel):
    """User unit and timezone preferences."""

    weight_unit: str
    timezone: str
