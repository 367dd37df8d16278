"""Type definitions for the compliance module."""

import math
from dataclasses import dataclass, field, fields, replace
from datetime import datetime, timedelta
from enum import Enum
from typing import Optional

from utils.time import MINUTES_PER_DAY, combine, parse_date, time_to_minutes


class ViolationType(str, Enum):
    """Types of labor law violations."""
    MAX_DAILY_HOURS = "max_daily_hours"
    MAX_NIGHT_HOURS = "max_night_hours"
    MIN_DAILY_REST = "min_daily_rest"
    MAX_WEEKLY_HOURS = "max_weekly_hours"
    MIN_WEEKLY_REST = "min_weekly_rest"


class ViolationSeverity(str, Enum):
    """Severity levels for violations."""
    ERROR = "error"  # Blocks publishing the schedule
    WARNING = "warning"  # Informational only


class ShiftType(str, Enum):
    MORNING = "morning"
    EVENING = "evening"
    NIGHT = "night"


@dataclass(frozen=True)
class Violation:
    """A single labor law violation."""
    rule_type: ViolationType
    severity: ViolationSeverity
    employee_id: str
    message: str
    shift_id: Optional[str] = None  # None for whole-week findings
    details: dict = field(default_factory=dict, compare=False, hash=False)

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "type": self.rule_type.value,
            "severity": self.severity.value,
            "employee_id": self.employee_id,
            "shift_id": self.shift_id,
            "message": self.message,
            "details": self.details,
        }


@dataclass(frozen=True)
class Shift:
    """A scheduled work interval, read-only to the engine."""
    id: str
    employee_id: Optional[str]
    date: str  # ISO date string: "2025-01-20"
    start_time: str  # HH:MM format
    end_time: str  # HH:MM format
    break_duration_minutes: int = 0
    shift_type: Optional[str] = None

    @property
    def crosses_midnight(self) -> bool:
        """An end time at or before the start time means the shift ends the next day."""
        return time_to_minutes(self.end_time) <= time_to_minutes(self.start_time)

    @property
    def duration_minutes(self) -> int:
        """Worked minutes: gross duration modulo one day, minus the break."""
        gross = (time_to_minutes(self.end_time) - time_to_minutes(self.start_time)) % MINUTES_PER_DAY
        if gross == 0:
            gross = MINUTES_PER_DAY
        return gross - self.break_duration_minutes

    @property
    def duration_hours(self) -> float:
        return self.duration_minutes / 60

    @property
    def start_datetime(self) -> datetime:
        """Get start as datetime."""
        return combine(self.date, self.start_time)

    @property
    def end_datetime(self) -> datetime:
        """Get end as datetime, on the following day for overnight shifts."""
        end = combine(self.date, self.end_time)
        if self.crosses_midnight:
            end += timedelta(days=1)
        return end

    @property
    def sort_key(self) -> tuple:
        """Chronological order key, independent of zero padding in the raw strings."""
        return (parse_date(self.date), time_to_minutes(self.start_time))

    def week_key(self, iso_weeks: bool = False) -> str:
        """Bucket key for weekly aggregation.

        By default weeks are counted from January 1st (days 1-7 are week 1,
        8-14 week 2, ...), not ISO-8601 weeks.
        """
        day = parse_date(self.date)
        if iso_weeks:
            iso_year, iso_week, _ = day.isocalendar()
            return f"{iso_year}-W{iso_week}"
        day_of_year = day.timetuple().tm_yday
        return f"{day.year}-W{math.ceil(day_of_year / 7)}"


# Statutory basis of each rule, per jurisdiction
LEGAL_BASIS: dict[str, dict[ViolationType, str]] = {
    "PL": {
        ViolationType.MAX_DAILY_HOURS: "Art. 129 KP",
        ViolationType.MAX_NIGHT_HOURS: "Art. 151(7) KP",
        ViolationType.MIN_DAILY_REST: "Art. 132 KP",
        ViolationType.MAX_WEEKLY_HOURS: "Art. 131 KP",
        ViolationType.MIN_WEEKLY_REST: "Art. 133 KP",
    },
}


@dataclass(frozen=True)
class LaborLawRules:
    """Thresholds for a jurisdiction. Defaults follow the Polish Labour Code."""
    jurisdiction: str = "PL"

    max_daily_hours: float = 12.0
    max_night_hours: float = 8.0
    min_daily_rest_hours: float = 11.0
    max_weekly_hours: float = 48.0
    min_weekly_rest_hours: float = 35.0

    night_shift_type: str = ShiftType.NIGHT.value
    iso_week_buckets: bool = False

    def with_overrides(self, **values) -> "LaborLawRules":
        """Copy with the given thresholds replaced; None values are ignored."""
        known = {f.name for f in fields(self)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown rule fields: {', '.join(sorted(unknown))}")
        return replace(self, **{k: v for k, v in values.items() if v is not None})

    def legal_basis(self, rule_type: ViolationType) -> Optional[str]:
        """Statute behind a rule, None when the jurisdiction has no entry."""
        return LEGAL_BASIS.get(self.jurisdiction, {}).get(rule_type)

    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class ComplianceContext:
    """Context for validating one employee's shifts."""
    rules: LaborLawRules
    employee_id: str
    shifts: list[Shift]  # Sorted by (date, start_time)


@dataclass
class ComplianceResult:
    """Result of compliance validation."""
    violations: list[Violation] = field(default_factory=list)
    is_compliant: bool = True
    weekly_hours: dict[str, dict[str, float]] = field(default_factory=dict)

    def add_violation(self, violation: Violation):
        """Add a violation to the result."""
        self.violations.append(violation)
        if violation.severity == ViolationSeverity.ERROR:
            self.is_compliant = False

    def extend(self, other: "ComplianceResult"):
        for violation in other.violations:
            self.add_violation(violation)
        self.weekly_hours.update(other.weekly_hours)

    @property
    def can_publish(self) -> bool:
        """Warnings never block publishing."""
        return self.is_compliant

    @property
    def error_count(self) -> int:
        """Count of error-level violations."""
        return sum(1 for v in self.violations if v.severity == ViolationSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        """Count of warning-level violations."""
        return sum(1 for v in self.violations if v.severity == ViolationSeverity.WARNING)

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "violations": [v.to_dict() for v in self.violations],
            "is_compliant": self.is_compliant,
            "can_publish": self.can_publish,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "weekly_hours": self.weekly_hours,
        }
