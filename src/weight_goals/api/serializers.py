"""JSON-ready views of domain objects."""

from dataclasses import asdict

from weight_goals.domain.dates import format_date_label
from weight_goals.domain.goals import Goal, GoalSummary, MaintenanceBand
from weight_goals.domain.weights import WeightEntry


def goal_to_dict(goal: Goal) -> dict[str, object]:
    """Serialize a goal with its derived mode."""
    return {**asdict(goal), "mode": goal.mode}


def entry_to_dict(entry: WeightEntry) -> dict[str, object]:
    """Serialize a weigh-in using the wire name for its day."""
    return {"date": entry.day, "weight": entry.weight}


def band_to_dict(band: MaintenanceBand) -> dict[str, object]:
    """Serialize a maintenance band including its direction."""
    return {**asdict(band), "direction": band.direction}


def summary_to_dict(summary: GoalSummary) -> dict[str, object]:
    """Serialize a goal summary for the dashboard and goals page."""
    projection = summary.projection
    return {
        "mode": summary.mode,
        "unit": summary.unit,
        "goal": goal_to_dict(summary.goal),
        "current": entry_to_dict(summary.current) if summary.current else None,
        "progress": asdict(summary.progress) if summary.progress else None,
        "band": band_to_dict(summary.band) if summary.band else None,
        "projection": {
            "projected_date": projection.projected_date,
            "projected_date_label": format_date_label(projection.projected_date),
            "detail": projection.detail,
            "is_unavailable": projection.is_unavailable,
        },
        "is_complete": summary.is_complete,
    }
