"""Compliance validators for labor law enforcement."""

import logging
from abc import ABC, abstractmethod
from collections import defaultdict
from datetime import timedelta

from utils.time import parse_date

from .types import (
    ComplianceContext,
    ComplianceResult,
    Violation,
    ViolationType,
    ViolationSeverity,
)

DAYS_PER_WEEK = 7


class BaseValidator(ABC):
    """Base class for compliance validators."""

    @abstractmethod
    def validate(self, context: ComplianceContext, result: ComplianceResult) -> None:
        """Validate compliance and add violations to result."""
        pass


class DailyHoursValidator(BaseValidator):
    """Validates single-shift length limits (all shifts and night shifts)."""

    def validate(self, context: ComplianceContext, result: ComplianceResult) -> None:
        """Check every shift on its own."""
        rules = context.rules

        for shift in context.shifts:
            hours = shift.duration_hours

            if hours > rules.max_daily_hours:
                result.add_violation(Violation(
                    rule_type=ViolationType.MAX_DAILY_HOURS,
                    severity=ViolationSeverity.ERROR,
                    employee_id=context.employee_id,
                    shift_id=shift.id,
                    message=f"Shift on {shift.date} lasts {hours:.1f}h, exceeds max of {rules.max_daily_hours:g}h",
                    details={
                        "shift_hours": round(hours, 2),
                        "max_allowed": rules.max_daily_hours,
                        "legal_basis": rules.legal_basis(ViolationType.MAX_DAILY_HOURS),
                    },
                ))

            # Independent of the check above: a 14h night shift yields both
            if shift.shift_type == rules.night_shift_type and hours > rules.max_night_hours:
                result.add_violation(Violation(
                    rule_type=ViolationType.MAX_NIGHT_HOURS,
                    severity=ViolationSeverity.ERROR,
                    employee_id=context.employee_id,
                    shift_id=shift.id,
                    message=f"Night shift on {shift.date} lasts {hours:.1f}h, exceeds max of {rules.max_night_hours:g}h",
                    details={
                        "shift_hours": round(hours, 2),
                        "max_allowed": rules.max_night_hours,
                        "legal_basis": rules.legal_basis(ViolationType.MAX_NIGHT_HOURS),
                    },
                ))


class DailyRestValidator(BaseValidator):
    """Validates minimum uninterrupted rest between consecutive shifts."""

    def validate(self, context: ComplianceContext, result: ComplianceResult) -> None:
        """Check rest between each adjacent pair of shifts."""
        rules = context.rules
        shifts = context.shifts

        for i in range(1, len(shifts)):
            prev_shift = shifts[i - 1]
            curr_shift = shifts[i]

            rest_hours = (curr_shift.start_datetime - prev_shift.end_datetime).total_seconds() / 3600

            if rest_hours < 0:
                logging.debug(
                    f"Skipping rest check for {context.employee_id}: shift {curr_shift.id} "
                    f"starts {-rest_hours:.1f}h before shift {prev_shift.id} ends"
                )
                continue

            if rest_hours < rules.min_daily_rest_hours:
                result.add_violation(Violation(
                    rule_type=ViolationType.MIN_DAILY_REST,
                    severity=ViolationSeverity.ERROR,
                    employee_id=context.employee_id,
                    shift_id=curr_shift.id,
                    message=f"Only {rest_hours:.1f}h rest before shift on {curr_shift.date} (min {rules.min_daily_rest_hours:g}h required)",
                    details={
                        "rest_hours": round(rest_hours, 2),
                        "min_required": rules.min_daily_rest_hours,
                        "previous_shift_id": prev_shift.id,
                        "previous_shift_end": prev_shift.end_datetime.isoformat(),
                        "current_shift_start": curr_shift.start_datetime.isoformat(),
                        "legal_basis": rules.legal_basis(ViolationType.MIN_DAILY_REST),
                    },
                ))


class WeeklyHoursValidator(BaseValidator):
    """Validates total worked hours per week bucket."""

    def validate(self, context: ComplianceContext, result: ComplianceResult) -> None:
        """Sum worked hours per week and check the weekly limit."""
        rules = context.rules

        weekly_hours: dict[str, float] = defaultdict(float)
        for shift in context.shifts:
            weekly_hours[shift.week_key(rules.iso_week_buckets)] += shift.duration_hours

        result.weekly_hours[context.employee_id] = dict(weekly_hours)

        for week, hours in weekly_hours.items():
            if hours > rules.max_weekly_hours:
                result.add_violation(Violation(
                    rule_type=ViolationType.MAX_WEEKLY_HOURS,
                    severity=ViolationSeverity.ERROR,
                    employee_id=context.employee_id,
                    message=f"Week {week}: {hours:.1f}h scheduled, exceeds max of {rules.max_weekly_hours:g}h",
                    details={
                        "week": week,
                        "weekly_hours": round(hours, 2),
                        "max_allowed": rules.max_weekly_hours,
                        "legal_basis": rules.legal_basis(ViolationType.MAX_WEEKLY_HOURS),
                    },
                ))


class WeeklyRestValidator(BaseValidator):
    """Flags 7-day windows without a single day off."""

    def validate(self, context: ComplianceContext, result: ComplianceResult) -> None:
        """Slide a 7-day window over the distinct work dates."""
        rules = context.rules

        shift_days = [parse_date(shift.date) for shift in context.shifts]
        dates = sorted(set(shift_days))
        if len(dates) < DAYS_PER_WEEK:
            return

        for i in range(len(dates) - DAYS_PER_WEEK + 1):
            window_start = dates[i]
            window_end = window_start + timedelta(days=DAYS_PER_WEEK)

            shifts_in_window = sum(1 for day in shift_days if window_start <= day < window_end)

            if shifts_in_window == DAYS_PER_WEEK:
                result.add_violation(Violation(
                    rule_type=ViolationType.MIN_WEEKLY_REST,
                    severity=ViolationSeverity.WARNING,
                    employee_id=context.employee_id,
                    message=f"No day off in the 7 days starting {window_start} (min {rules.min_weekly_rest_hours:g}h weekly rest required)",
                    details={
                        "window_start": window_start.isoformat(),
                        "window_end": window_end.isoformat(),
                        "min_required": rules.min_weekly_rest_hours,
                        "legal_basis": rules.legal_basis(ViolationType.MIN_WEEKLY_REST),
                    },
                ))
