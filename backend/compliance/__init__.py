"""Labor law compliance module for shift scheduling."""

from .types import (
    ComplianceContext,
    ComplianceResult,
    LaborLawRules,
    Shift,
    ShiftType,
    Violation,
    ViolationType,
    ViolationSeverity,
)
from .engine import (
    ComplianceEngine,
    can_publish,
    validate_all,
    validate_employee,
    validate_schedule_compliance,
)
from .validators import (
    BaseValidator,
    DailyHoursValidator,
    DailyRestValidator,
    WeeklyHoursValidator,
    WeeklyRestValidator,
)

__all__ = [
    "ComplianceContext",
    "ComplianceResult",
    "LaborLawRules",
    "Shift",
    "ShiftType",
    "Violation",
    "ViolationType",
    "ViolationSeverity",
    "ComplianceEngine",
    "can_publish",
    "validate_all",
    "validate_employee",
    "validate_schedule_compliance",
    "BaseValidator",
    "DailyHoursValidator",
    "DailyRestValidator",
    "WeeklyHoursValidator",
    "WeeklyRestValidator",
]
