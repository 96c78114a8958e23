"""Tests for unit and date helpers."""

from datetime import UTC, date, datetime

import pytest

from weight_goals.domain.dates import (
    EM_DASH,
    add_days,
    format_date_label,
    local_date,
    parse_date_only,
)
from weight_goals.domain.units import (
    calories_per_unit,
    format_daily_calorie_change,
    grams_to_weight,
    maintenance_tolerance,
    parse_weight_to_grams,
    round_weight,
)


def test_unit_constants() -> None:
    assert calories_per_unit("lb") == 3500
    assert calories_per_unit("kg") == 7700
    assert maintenance_tolerance("lb") == 1.0
    assert maintenance_tolerance("kg") == 0.5


def test_parse_weight_to_grams_rounds_to_tenth() -> None:
    assert parse_weight_to_grams(80.04, "kg") == 80000
    assert parse_weight_to_grams("176.4", "lb") == 80014


@pytest.mark.parametrize("value", ["abc", None, float("nan"), 0, -3, 0.04, True])
def test_parse_weight_to_grams_rejects_invalid(value: object) -> None:
    with pytest.raises(ValueError):
        parse_weight_to_grams(value, "kg")


def test_grams_to_weight_round_trips_display_value() -> None:
    assert grams_to_weight(80014, "lb") == 176.4
    assert grams_to_weight(72340, "kg") == 72.3


def test_round_weight_rounds_halves_up() -> None:
    assert round_weight(80.25) == 80.3
    assert round_weight(80.24) == 80.2


def test_format_daily_calorie_change() -> None:
    assert format_daily_calorie_change(500) == "-500 kcal/day"
    assert format_daily_calorie_change(-250) == "+250 kcal/day"
    assert format_daily_calorie_change(0) == "0 kcal/day"


def test_parse_date_only_ignores_time() -> None:
    assert parse_date_only("2025-01-03T23:00:00.000Z") == date(2025, 1, 3)
    assert parse_date_only("2025-01-03") == date(2025, 1, 3)
    assert parse_date_only("not-a-date") is None
    assert parse_date_only(None) is None


def test_local_date_converts_aware_datetimes() -> None:
    moment = datetime(2025, 1, 2, 3, 0, tzinfo=UTC)

    assert local_date(moment) == date(2025, 1, 2)
    assert local_date(moment, "America/New_York") == date(2025, 1, 1)
    assert local_date(date(2025, 6, 1), "Asia/Tokyo") == date(2025, 6, 1)


def test_add_days_crosses_month_end() -> None:
    assert add_days(date(2025, 1, 30), 3) == date(2025, 2, 2)


def test_format_date_label() -> None:
    assert format_date_label(date(2025, 1, 3)) == "Jan 3, 2025"
    assert format_date_label(None) == EM_DASH
