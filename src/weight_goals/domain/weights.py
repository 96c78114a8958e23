"""Domain models for weight history."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class WeightRecord:
    """A stored weigh-in, in grams."""

    day: date
    weight_grams: int


@dataclass(frozen=True)
class WeightEntry:
    """A weigh-in expressed in the user's weight unit."""

    day: date
    weight: float
