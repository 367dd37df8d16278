import pytest

from compliance.types import LaborLawRules, Shift


@pytest.fixture
def default_rules():
    """Default labor law rules (Polish Labour Code thresholds)."""
    return LaborLawRules(
        jurisdiction="PL",
        max_daily_hours=12.0,
        max_night_hours=8.0,
        min_daily_rest_hours=11.0,
        max_weekly_hours=48.0,
        min_weekly_rest_hours=35.0,
    )


@pytest.fixture
def make_shift():
    """Factory to create Shift objects with unique ids."""
    counter = {"n": 0}

    def _make_shift(
        date_str: str,
        start_time: str = "08:00",
        end_time: str = "16:00",
        employee: str | None = "emp-1",
        break_minutes: int = 0,
        shift_type: str | None = None,
        shift_id: str | None = None,
    ) -> Shift:
        counter["n"] += 1
        return Shift(
            id=shift_id or f"shift-{counter['n']}",
            employee_id=employee,
            date=date_str,
            start_time=start_time,
            end_time=end_time,
            break_duration_minutes=break_minutes,
            shift_type=shift_type,
        )
    return _make_shift


@pytest.fixture
def consecutive_days():
    """ISO dates for n consecutive days starting 2025-03-03 (a Monday)."""
    from datetime import date, timedelta

    def _days(n: int, start: date = date(2025, 3, 3)) -> list[str]:
        return [(start + timedelta(days=i)).isoformat() for i in range(n)]
    return _days
