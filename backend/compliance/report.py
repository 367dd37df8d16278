"""Tabular views of compliance results for managers."""

import pandas as pd

from .types import ComplianceResult, Violation, ViolationSeverity

VIOLATION_COLUMNS = ["severity", "employee_id", "type", "shift_id", "message"]
SEVERITY_RANK = {ViolationSeverity.ERROR: 0, ViolationSeverity.WARNING: 1}


def display_order(violation: Violation) -> tuple:
    """Sort key: errors first, then employee, then rule type."""
    return (
        SEVERITY_RANK[violation.severity],
        violation.employee_id,
        violation.rule_type.value,
        violation.shift_id or "",
    )


def sort_violations(violations: list[Violation]) -> list[Violation]:
    return sorted(violations, key=display_order)


def violations_dataframe(violations: list[Violation]) -> pd.DataFrame:
    """One row per violation, in display order."""
    data = [
        {k: v.to_dict()[k] for k in VIOLATION_COLUMNS}
        for v in sort_violations(violations)
    ]
    return pd.DataFrame(data, columns=VIOLATION_COLUMNS)


def weekly_hours_dataframe(result: ComplianceResult) -> pd.DataFrame:
    """Pivot of worked hours: one row per employee, one column per week bucket."""
    data = []
    for employee_id, weeks in result.weekly_hours.items():
        for week, hours in weeks.items():
            data.append({
                "employee": employee_id,
                "week": week,
                "hours": round(hours, 2),
            })
    if not data:
        return pd.DataFrame()

    df = pd.DataFrame(data)
    df_wide = pd.pivot(df, index="employee", columns="week", values="hours")
    return df_wide.fillna(0.0)
