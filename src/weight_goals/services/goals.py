"""Goal editing and goal progress summaries.

The dashboard card, the goals page and the goal editor all read goal state
through `GoalService`, so progress, projection and maintenance proximity are
computed in one place.
"""

import logging
import math
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from weight_goals.domain.goals import (
    Goal,
    GoalEditorDefaults,
    GoalMode,
    GoalRecord,
    GoalSummary,
    goal_mode_from_daily_deficit,
)
from weight_goals.domain.units import (
    WeightUnit,
    grams_to_weight,
    parse_weight_to_grams,
    round_weight,
)
from weight_goals.services.maintenance import compute_band
from weight_goals.services.progress import compute_progress
from weight_goals.services.projection import project
from weight_goals.services.user_settings import UserSettingsService
from weight_goals.services.weights import WeightService

ALLOWED_DAILY_DEFICIT_ABS_VALUES = frozenset({0, 250, 500, 750, 1000})
DEFAULT_DAILY_DEFICIT_CHOICE = 500

_logger = logging.getLogger(__name__)


class GoalValidationError(ValueError):
    """Raised when a submitted goal is inconsistent."""


class GoalRepository(Protocol):
    """Persistence interface for goals."""

    def create_goal(
        self,
        user_id: UUID,
        start_weight_grams: int,
        target_weight_grams: int,
        daily_calorie_delta: int,
    ) -> GoalRecord:
        """Insert a new goal row and return it."""

    def get_latest_goal(self, user_id: UUID) -> GoalRecord | None:
        """Return the most recently created goal, if any."""


def parse_daily_deficit(value: object) -> int | None:
    """Parse a daily calorie delta, allowing only the standard magnitudes."""
    numeric = _to_number(value)
    if numeric is None or not numeric.is_integer():
        return None
    if abs(int(numeric)) not in ALLOWED_DAILY_DEFICIT_ABS_VALUES:
        return None
    return int(numeric)


def normalize_daily_deficit_choice(value: object) -> int:
    """Return a non-zero allowed magnitude, or the default choice."""
    numeric = _to_number(value)
    if numeric is None:
        return DEFAULT_DAILY_DEFICIT_CHOICE
    magnitude = abs(numeric)
    if magnitude != 0 and magnitude in ALLOWED_DAILY_DEFICIT_ABS_VALUES:
        return int(magnitude)
    return DEFAULT_DAILY_DEFICIT_CHOICE


def validate_goal_weights(
    mode: GoalMode, start_weight: float, target_weight: float
) -> str | None:
    """Return an error message when weights contradict the goal mode."""
    if not math.isfinite(start_weight) or start_weight <= 0:
        return "Start weight must be a positive number."
    if not math.isfinite(target_weight) or target_weight <= 0:
        return "Target weight must be a positive number."

    rounded_start = round_weight(start_weight)
    rounded_target = round_weight(target_weight)
    if mode == "lose" and rounded_target >= rounded_start:
        return (
            "For a weight loss goal, target weight must be less than "
            "your start weight."
        )
    if mode == "gain" and rounded_target <= rounded_start:
        return (
            "For a weight gain goal, target weight must be greater than "
            "your start weight."
        )
    return None


@dataclass
class GoalService:
    """Application service for goals."""

    repository: GoalRepository
    weight_service: WeightService
    user_settings_service: UserSettingsService

    def create_goal(
        self,
        user_id: UUID,
        unit: WeightUnit,
        start_weight: float,
        target_weight: float,
        daily_calorie_delta: object,
    ) -> Goal:
        """Validate and store a new goal, replacing the current one.

        Goals are never updated in place; every save inserts a row so the
        history of earlier goals is kept.
        """
        parsed_delta = parse_daily_deficit(daily_calorie_delta)
        if parsed_delta is None:
            _logger.info("Goal rejected: user_id=%s reason=daily_deficit", user_id)
            raise GoalValidationError("Invalid daily calorie change.")

        error = validate_goal_weights(
            goal_mode_from_daily_deficit(parsed_delta), start_weight, target_weight
        )
        if error:
            _logger.info("Goal rejected: user_id=%s reason=weights", user_id)
            raise GoalValidationError(error)

        record = self.repository.create_goal(
            user_id,
            parse_weight_to_grams(start_weight, unit),
            parse_weight_to_grams(target_weight, unit),
            parsed_delta,
        )
        _logger.info(
            "Goal created: user_id=%s goal_id=%s daily_deficit=%s",
            user_id,
            record.id,
            parsed_delta,
        )
        return _to_goal(record, unit)

    def get_goal(self, user_id: UUID, unit: WeightUnit) -> Goal | None:
        """Return the user's current goal in their unit."""
        record = self.repository.get_latest_goal(user_id)
        if record is None:
            return None
        return _to_goal(record, unit)

    def summarize(self, user_id: UUID) -> GoalSummary | None:
        """Return progress, proximity and projection for the current goal."""
        unit = self.user_settings_service.get_weight_unit(user_id)
        goal = self.get_goal(user_id, unit)
        if goal is None:
            return None
        timezone_name = self.user_settings_service.get_timezone(user_id)
        current = self.weight_service.latest(user_id, unit)
        current_weight = current.weight if current else None

        mode = goal.mode
        progress = None
        band = None
        if mode == "maintain":
            band = compute_band(current_weight, goal.target_weight, unit)
            is_complete = band.is_on_target
        elif current_weight is not None:
            progress = compute_progress(
                goal.start_weight, goal.target_weight, current_weight
            )
            is_complete = progress.is_complete
        else:
            is_complete = False

        projection = project(
            mode=mode,
            unit=unit,
            start_weight=goal.start_weight,
            target_weight=goal.target_weight,
            daily_calorie_delta=goal.daily_calorie_delta,
            goal_created_at=goal.created_at,
            current_weight=current_weight,
            current_weight_date=current.day if current else None,
            timezone_name=timezone_name,
        )
        return GoalSummary(
            goal=goal,
            mode=mode,
            unit=unit,
            current=current,
            progress=progress,
            band=band,
            projection=projection,
            is_complete=is_complete,
        )

    def editor_defaults(self, user_id: UUID) -> GoalEditorDefaults:
        """Return initial goal editor values from the current goal and weight."""
        unit = self.user_settings_service.get_weight_unit(user_id)
        goal = self.get_goal(user_id, unit)
        current = self.weight_service.latest(user_id, unit)
        if current is not None:
            start_weight = current.weight
        else:
            start_weight = goal.start_weight if goal else None
        mode: GoalMode = goal.mode if goal else "lose"
        if mode == "maintain":
            magnitude = 0
        elif goal is not None:
            magnitude = normalize_daily_deficit_choice(goal.daily_calorie_delta)
        else:
            magnitude = DEFAULT_DAILY_DEFICIT_CHOICE
        return GoalEditorDefaults(
            start_weight=start_weight,
            target_weight=goal.target_weight if goal else None,
            mode=mode,
            daily_calorie_delta_abs=magnitude,
        )


def _to_goal(record: GoalRecord, unit: WeightUnit) -> Goal:
    return Goal(
        start_weight=grams_to_weight(record.start_weight_grams, unit),
        target_weight=grams_to_weight(record.target_weight_grams, unit),
        daily_calorie_delta=record.daily_calorie_delta,
        created_at=record.created_at,
    )


def _to_number(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        numeric = float(value)
    elif isinstance(value, str):
        try:
            numeric = float(value)
        except ValueError:
            return None
    else:
        return None
    return numeric if math.isfinite(numeric) else None
