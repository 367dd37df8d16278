from pydantic import BaseModel, Field, field_validator

from compliance.types import LaborLawRules, Shift
from utils.time import parse_date, parse_time


class ShiftSchema(BaseModel):
    id: str
    employee_id: str | None = None
    date: str  # ISO date string: "2025-01-20"
    start_time: str  # "08:00" or "08:00:00"
    end_time: str
    break_duration_minutes: int = Field(default=0, ge=0)
    shift_type: str | None = None  # "morning", "evening", "night"

    @field_validator("date")
    @classmethod
    def check_date(cls, value: str) -> str:
        try:
            parsed = parse_date(value)
        except ValueError:
            raise ValueError("Invalid date format. Use YYYY-MM-DD")
        return parsed.isoformat()

    @field_validator("start_time", "end_time")
    @classmethod
    def check_time(cls, value: str) -> str:
        try:
            parsed = parse_time(value)
        except ValueError:
            raise ValueError("Invalid time format. Use HH:MM")
        return parsed.strftime("%H:%M")

    def to_shift(self) -> Shift:
        return Shift(
            id=self.id,
            employee_id=self.employee_id or None,
            date=self.date,
            start_time=self.start_time,
            end_time=self.end_time,
            break_duration_minutes=self.break_duration_minutes,
            shift_type=self.shift_type,
        )


class LaborLawRulesSchema(BaseModel):
    """Per-request threshold overrides; omitted fields keep the configured value."""
    jurisdiction: str | None = None
    max_daily_hours: float | None = Field(default=None, gt=0)
    max_night_hours: float | None = Field(default=None, gt=0)
    min_daily_rest_hours: float | None = Field(default=None, gt=0)
    max_weekly_hours: float | None = Field(default=None, gt=0)
    min_weekly_rest_hours: float | None = Field(default=None, gt=0)
    iso_week_buckets: bool | None = None

    def apply(self, rules: LaborLawRules) -> LaborLawRules:
        return rules.with_overrides(**self.model_dump())


class ViolationSchema(BaseModel):
    """Labor law violation detected in a schedule."""
    type: str  # "max_daily_hours", "min_daily_rest", etc.
    severity: str  # "error", "warning"
    employee_id: str
    shift_id: str | None = None
    message: str
    details: dict | None = None


class ValidateShiftsRequest(BaseModel):
    shifts: list[ShiftSchema]
    rules: LaborLawRulesSchema | None = None


class ValidateShiftsResponse(BaseModel):
    violations: list[ViolationSchema] = []
    error_count: int
    warning_count: int
    is_compliant: bool
    can_publish: bool
    weekly_hours: dict[str, dict[str, float]] = {}


class PublishCheckResponse(BaseModel):
    can_publish: bool
    warnings: list[ViolationSchema] = []
