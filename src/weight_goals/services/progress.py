"""Completion percentage for weight change goals."""

from weight_goals.domain.goals import GoalProgress

ZERO_DELTA_EPSILON = 0.1


def compute_progress(
    start_weight: float, target_weight: float, current_weight: float
) -> GoalProgress:
    """Return how far the current weight has moved from start toward target.

    The percentage is clamped to [0, 100]; overshooting the target still
    reads as 100% and complete. A goal whose target equals its start is
    binary: complete within 0.1 of the target, otherwise 0%.
    """
    total_delta = target_weight - start_weight
    if total_delta == 0:
        is_complete = abs(current_weight - target_weight) <= ZERO_DELTA_EPSILON
        percent = 100.0 if is_complete else 0.0
        return GoalProgress(percent=percent, is_complete=is_complete)

    achieved_delta = current_weight - start_weight
    raw = achieved_delta / total_delta * 100
    percent = max(0.0, min(100.0, raw))
    if total_delta > 0:
        is_complete = current_weight >= target_weight
    else:
        is_complete = current_weight <= target_weight
    return GoalProgress(percent=percent, is_complete=is_complete)
