"""Compliance validation engine that orchestrates all validators."""

import logging
from typing import TYPE_CHECKING, Iterable, Optional

from .types import (
    ComplianceContext,
    ComplianceResult,
    LaborLawRules,
    Shift,
    Violation,
    ViolationSeverity,
)
from .validators import (
    BaseValidator,
    DailyHoursValidator,
    DailyRestValidator,
    WeeklyHoursValidator,
    WeeklyRestValidator,
)

if TYPE_CHECKING:
    from db.repository import ShiftRepository


class ComplianceEngine:
    """
    Main engine for running labor law validation.

    Stateless apart from its rules: the same shifts always produce the
    same violations, and the input list is never modified.
    """

    def __init__(self, rules: Optional[LaborLawRules] = None):
        """Initialize with all validators."""
        self.rules = rules or LaborLawRules()
        self.validators: list[BaseValidator] = [
            DailyHoursValidator(),
            DailyRestValidator(),
            WeeklyHoursValidator(),
            WeeklyRestValidator(),
        ]

    def validate_employee(self, shifts: list[Shift], employee_id: str) -> list[Violation]:
        """
        Validate the shifts of a single employee.

        Args:
            shifts: Any shifts, in any order; other employees' shifts are ignored
            employee_id: Employee to validate

        Returns:
            Violations found, empty when the employee has no shifts
        """
        return self.check_employee(shifts, employee_id).violations

    def validate_all(self, shifts: list[Shift]) -> list[Violation]:
        """Validate every employee referenced by at least one shift."""
        return self.check(shifts).violations

    def check(self, shifts: list[Shift]) -> ComplianceResult:
        """
        Run all validators for every assigned employee.

        Args:
            shifts: All shifts of a schedule; unassigned shifts are skipped

        Returns:
            ComplianceResult with all violations and weekly hour totals
        """
        result = ComplianceResult()

        for employee_id in employee_ids(shifts):
            result.extend(self.check_employee(shifts, employee_id))

        logging.info(
            f"Compliance check ({self.rules.jurisdiction}): {len(shifts)} shifts, "
            f"{result.error_count} errors, {result.warning_count} warnings"
        )
        return result

    def check_employee(self, shifts: list[Shift], employee_id: str) -> ComplianceResult:
        """Run all validators for one employee, keeping their weekly hour totals."""
        result = ComplianceResult()

        own_shifts = employee_shifts(shifts, employee_id)
        if not own_shifts:
            return result

        context = ComplianceContext(
            rules=self.rules,
            employee_id=employee_id,
            shifts=own_shifts,
        )
        for validator in self.validators:
            validator.validate(context, result)

        logging.debug(
            f"Employee {employee_id}: {len(own_shifts)} shifts, {len(result.violations)} violations"
        )
        return result

    @staticmethod
    def build_shifts(records: Iterable[dict]) -> list[Shift]:
        """
        Convert raw shift rows (as returned by the datastore) to Shift objects.

        Accepts both snake_case column names and camelCase keys.
        """
        shifts = []
        for record in records:
            shifts.append(Shift(
                id=str(record["id"]),
                employee_id=_optional_str(_get(record, "employee_id", "employeeId")),
                date=str(record["date"]),
                start_time=str(_require(record, "start_time", "startTime")),
                end_time=str(_require(record, "end_time", "endTime")),
                break_duration_minutes=int(_get(record, "break_duration_minutes", "breakDurationMinutes") or 0),
                shift_type=_optional_str(_get(record, "shift_type", "shiftType")),
            ))
        return shifts


def employee_ids(shifts: Iterable[Shift]) -> list[str]:
    """Distinct assigned employee ids, in order of first appearance."""
    seen: dict[str, None] = {}
    for shift in shifts:
        if shift.employee_id:
            seen.setdefault(shift.employee_id, None)
    return list(seen)


def employee_shifts(shifts: Iterable[Shift], employee_id: str) -> list[Shift]:
    """One employee's shifts, sorted by date then start time."""
    return sorted(
        (s for s in shifts if s.employee_id == employee_id),
        key=lambda s: s.sort_key,
    )


def validate_employee(
    shifts: list[Shift],
    employee_id: str,
    rules: Optional[LaborLawRules] = None,
) -> list[Violation]:
    """Validate one employee with a throwaway engine."""
    return ComplianceEngine(rules).validate_employee(shifts, employee_id)


def validate_all(shifts: list[Shift], rules: Optional[LaborLawRules] = None) -> list[Violation]:
    """Validate every assigned employee with a throwaway engine."""
    return ComplianceEngine(rules).validate_all(shifts)


def can_publish(violations: Iterable[Violation]) -> bool:
    """A schedule may only be published when no violation is an error."""
    return not any(v.severity == ViolationSeverity.ERROR for v in violations)


async def validate_schedule_compliance(
    schedule_id: str,
    repository: "ShiftRepository",
    rules: Optional[LaborLawRules] = None,
) -> ComplianceResult:
    """
    Validate a stored schedule for compliance.

    This is a convenience function for use in the API layer.

    Args:
        schedule_id: The schedule to validate
        repository: Datastore providing the schedule's shifts
        rules: Thresholds to apply, defaults when omitted

    Returns:
        ComplianceResult with violations
    """
    shifts = await repository.fetch_shifts(schedule_id)
    logging.debug(f"Loaded {len(shifts)} shifts for schedule {schedule_id}")
    return ComplianceEngine(rules).check(shifts)


def _get(record: dict, *keys):
    for key in keys:
        if key in record:
            return record[key]
    return None


def _require(record: dict, *keys):
    value = _get(record, *keys)
    if value is None:
        raise KeyError(keys[0])
    return value


def _optional_str(value) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)
