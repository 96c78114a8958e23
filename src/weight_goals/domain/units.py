"""Weight unit constants and conversions."""

import math
from typing import Literal

WeightUnit = Literal["kg", "lb"]

GRAMS_PER_KG = 1000.0
GRAMS_PER_LB = 453.59237

_CALORIES_PER_UNIT: dict[str, int] = {"kg": 7700, "lb": 3500}
_MAINTENANCE_TOLERANCE: dict[str, float] = {"kg": 0.5, "lb": 1.0}


def is_weight_unit(value: object) -> bool:
    """Return True when the value names a supported weight unit."""
    return isinstance(value, str) and value in _CALORIES_PER_UNIT


def calories_per_unit(unit: WeightUnit) -> int:
    """Return the energy-balance constant for one unit of body mass."""
    return _CALORIES_PER_UNIT.get(unit, _CALORIES_PER_UNIT["kg"])


def maintenance_tolerance(unit: WeightUnit) -> float:
    """Return the on-target tolerance for maintenance goals."""
    return _MAINTENANCE_TOLERANCE.get(unit, _MAINTENANCE_TOLERANCE["kg"])


def round_weight(value: float) -> float:
    """Round a weight to one decimal place, halves rounding up."""
    return math.floor(value * 10 + 0.5) / 10


def parse_weight_to_grams(value: object, unit: WeightUnit) -> int:
    """Convert a user-entered weight into integer grams.

    Accepts numbers or numeric strings. The value is rounded to 0.1 unit
    before conversion so stored weights match what the user saw.
    """
    if isinstance(value, bool):
        raise ValueError("Invalid weight")
    try:
        numeric = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise ValueError("Invalid weight") from exc
    if not math.isfinite(numeric):
        raise ValueError("Invalid weight")

    rounded = round_weight(numeric)
    if rounded <= 0:
        raise ValueError("Weight must be positive")

    per_unit = GRAMS_PER_LB if unit == "lb" else GRAMS_PER_KG
    return round(rounded * per_unit)


def grams_to_weight(grams: float, unit: WeightUnit) -> float:
    """Convert stored grams back to the user's unit, rounded to 0.1."""
    if not math.isfinite(grams):
        raise ValueError("Invalid weight")
    per_unit = GRAMS_PER_LB if unit == "lb" else GRAMS_PER_KG
    return round_weight(grams / per_unit)


def format_daily_calorie_change(daily_calorie_delta: int) -> str:
    """Format a daily calorie delta with an explicit sign.

    A deficit (positive delta) reads as "-500 kcal/day", a surplus as
    "+500 kcal/day" and maintenance as "0 kcal/day".
    """
    if daily_calorie_delta == 0:
        return "0 kcal/day"
    sign = "-" if daily_calorie_delta > 0 else "+"
    return f"{sign}{abs(daily_calorie_delta)} kcal/day"
