"""Domain models for weight goals and their derived progress."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal
from uuid import UUID

from weight_goals.domain.units import WeightUnit
from weight_goals.domain.weights import WeightEntry

GoalMode = Literal["lose", "maintain", "gain"]

ON_TARGET_DISPLAY_EPSILON = 0.05


def goal_mode_from_daily_deficit(daily_calorie_delta: int) -> GoalMode:
    """Derive the goal mode from the signed daily calorie delta.

    Positive values are a deficit (lose), negative a surplus (gain) and
    zero is maintenance.
    """
    if daily_calorie_delta == 0:
        return "maintain"
    return "lose" if daily_calorie_delta > 0 else "gain"


@dataclass(frozen=True)
class GoalRecord:
    """A stored goal row, weights in grams."""

    id: UUID
    user_id: UUID
    start_weight_grams: int
    target_weight_grams: int
    daily_calorie_delta: int
    created_at: datetime | None


@dataclass(frozen=True)
class Goal:
    """A goal expressed in the user's weight unit."""

    start_weight: float
    target_weight: float
    daily_calorie_delta: int
    created_at: datetime | None = None

    @property
    def mode(self) -> GoalMode:
        """Return the mode implied by the calorie delta."""
        return goal_mode_from_daily_deficit(self.daily_calorie_delta)


@dataclass(frozen=True)
class GoalProgress:
    """Completion toward a change goal."""

    percent: float
    is_complete: bool


@dataclass(frozen=True)
class ProjectionResult:
    """Projected completion date, or the reason there is none."""

    projected_date: date | None
    detail: str | None
    is_unavailable: bool

    @classmethod
    def unavailable(cls, detail: str) -> "ProjectionResult":
        """Build a result with no projected date."""
        return cls(projected_date=None, detail=detail, is_unavailable=True)


@dataclass(frozen=True)
class BandVisualization:
    """Normalized positions for a maintenance proximity gauge.

    All percentages are relative to a symmetric range centred on the
    target weight at 50%.
    """

    range: float
    marker_percent: float | None
    tolerance_width_percent: float
    tolerance_left_percent: float


@dataclass(frozen=True)
class MaintenanceBand:
    """Distance from a maintenance target."""

    delta: float | None
    is_on_target: bool
    tolerance: float
    visualization: BandVisualization

    @property
    def direction(self) -> Literal["above", "below", "at"] | None:
        """Return where the current weight sits relative to the target."""
        if self.delta is None:
            return None
        if abs(self.delta) < ON_TARGET_DISPLAY_EPSILON:
            return "at"
        return "above" if self.delta > 0 else "below"


@dataclass(frozen=True)
class GoalSummary:
    """Everything the dashboard card and goals page render for a goal."""

    goal: Goal
    mode: GoalMode
    unit: WeightUnit
    current: WeightEntry | None
    progress: GoalProgress | None
    band: MaintenanceBand | None
    projection: ProjectionResult
    is_complete: bool


@dataclass(frozen=True)
class GoalEditorDefaults:
    """Initial values for the goal editor form."""

    start_weight: float | None
    target_weight: float | None
    mode: GoalMode
    daily_calorie_delta_abs: int
