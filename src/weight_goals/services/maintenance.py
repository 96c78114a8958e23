"""Proximity model for maintenance goals."""

from weight_goals.domain.goals import BandVisualization, MaintenanceBand
from weight_goals.domain.units import WeightUnit, maintenance_tolerance

MIN_DISPLAY_RANGE = 0.1
TOLERANCE_RANGE_MULTIPLIER = 4
CENTER_PERCENT = 50.0


def compute_band(
    current_weight: float | None, target_weight: float, unit: WeightUnit
) -> MaintenanceBand:
    """Return the signed distance from target and gauge positions.

    The display range always covers both the tolerance band and the
    current-weight marker, so a weight far from target stays on the gauge.
    Without a weigh-in the delta and marker are None.
    """
    tolerance = maintenance_tolerance(unit)
    if current_weight is None:
        display_range = tolerance * TOLERANCE_RANGE_MULTIPLIER
        return MaintenanceBand(
            delta=None,
            is_on_target=False,
            tolerance=tolerance,
            visualization=_visualization(display_range, tolerance, None),
        )

    delta = current_weight - target_weight
    abs_delta = abs(delta)
    display_range = max(
        tolerance * TOLERANCE_RANGE_MULTIPLIER, abs_delta * 2, MIN_DISPLAY_RANGE
    )
    clamped = max(-display_range, min(display_range, delta))
    marker_percent = (clamped + display_range) / (2 * display_range) * 100
    return MaintenanceBand(
        delta=delta,
        is_on_target=abs_delta <= tolerance,
        tolerance=tolerance,
        visualization=_visualization(display_range, tolerance, marker_percent),
    )


def _visualization(
    display_range: float, tolerance: float, marker_percent: float | None
) -> BandVisualization:
    width = tolerance / display_range * 100
    return BandVisualization(
        range=display_range,
        marker_percent=marker_percent,
        tolerance_width_percent=width,
        tolerance_left_percent=CENTER_PERCENT - width / 2,
    )
