"""Projected completion dates using a constant energy-balance model.

Time to target is the remaining weight multiplied by the calories stored in
one unit of body mass (3500 kcal/lb, 7700 kcal/kg), divided by the daily
deficit or surplus. The rate is constant: no trend fitting, smoothing, or
adaptation as weight changes.
"""

import math
from datetime import date, datetime

from weight_goals.domain.dates import add_days, format_date_label, local_date
from weight_goals.domain.goals import GoalMode, ProjectionResult
from weight_goals.domain.units import (
    WeightUnit,
    calories_per_unit,
    format_daily_calorie_change,
)

# Drops float noise such as 80.2 - 70.2 == 10.000000000000014 before ceil.
_DAYS_PRECISION = 6

MAINTENANCE_DETAIL = "No target date projection for maintenance goals."
NO_BASELINE_DETAIL = "Unable to compute a projection date right now."


def project(  # noqa: PLR0913
    *,
    mode: GoalMode,
    unit: WeightUnit,
    start_weight: float,
    target_weight: float,
    daily_calorie_delta: int,
    goal_created_at: date | datetime | None,
    current_weight: float | None,
    current_weight_date: date | None,
    timezone_name: str = "UTC",
) -> ProjectionResult:
    """Project the date a goal will be reached.

    The baseline is the latest weigh-in when one exists, otherwise the
    goal's start weight on the day it was created. `timezone_name` only
    decides which calendar day an aware `goal_created_at` falls on.
    """
    if mode == "maintain" or daily_calorie_delta == 0:
        return ProjectionResult.unavailable(MAINTENANCE_DETAIL)

    pace_label = format_daily_calorie_change(daily_calorie_delta)
    if daily_calorie_delta > 0 and target_weight > start_weight:
        return ProjectionResult.unavailable(
            f"Projection unavailable: {pace_label} implies weight loss, "
            "but your target is above your start weight."
        )
    if daily_calorie_delta < 0 and target_weight < start_weight:
        return ProjectionResult.unavailable(
            f"Projection unavailable: {pace_label} implies weight gain, "
            "but your target is below your start weight."
        )

    if current_weight is not None and current_weight_date is not None:
        baseline_weight = current_weight
        baseline_date = current_weight_date
        baseline_label = (
            f"from your latest weigh-in ({format_date_label(baseline_date)})"
        )
    elif goal_created_at is not None:
        baseline_weight = start_weight
        baseline_date = local_date(goal_created_at, timezone_name)
        baseline_label = "from your goal start"
    else:
        return ProjectionResult.unavailable(NO_BASELINE_DETAIL)

    if daily_calorie_delta > 0:
        remaining = max(0.0, baseline_weight - target_weight)
    else:
        remaining = max(0.0, target_weight - baseline_weight)

    days_to_target = _days_to_target(remaining, unit, daily_calorie_delta)
    return ProjectionResult(
        projected_date=add_days(baseline_date, days_to_target),
        detail=f"Based on {pace_label} {baseline_label}.",
        is_unavailable=False,
    )


def _days_to_target(
    remaining: float, unit: WeightUnit, daily_calorie_delta: int
) -> int:
    if remaining == 0:
        return 0
    days = remaining * calories_per_unit(unit) / abs(daily_calorie_delta)
    return math.ceil(round(days, _DAYS_PRECISION))
