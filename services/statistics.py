"""Derive shift and absence statistics for a reporting window."""
from __future__ import annotations

import logging
import math
from collections import Counter
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, Iterable, Optional

from domain.intervals import clipped_duration_days, month_range, overlaps, validate_range
from domain.models import Absence, DateRange, Shift
from domain.shift_types import AbsenceType, ShiftType, absence_label, shift_label

logger = logging.getLogger(__name__)


def percentage(value: int, total: int) -> int:
    """Whole percentage of *value* in *total*, rounding halves up; 0 for an empty total."""

    if total == 0:
        return 0
    return int(math.floor(100 * value / total + 0.5))


@dataclass
class Statistics:
    date_range: DateRange
    shift_counts: Dict[ShiftType, int] = field(default_factory=dict)
    absence_days: Dict[AbsenceType, int] = field(default_factory=dict)
    total_employees: int = 0
    employee_filter: Optional[int] = None

    @property
    def total_shifts(self) -> int:
        return sum(self.shift_counts.get(kind, 0) for kind in ShiftType)

    def count(self, kind: ShiftType) -> int:
        return self.shift_counts.get(kind, 0)

    def percent(self, kind: ShiftType) -> int:
        return percentage(self.count(kind), self.total_shifts)

    @property
    def office_shifts(self) -> int:
        return self.count(ShiftType.OFFICE)

    @property
    def remote_shifts(self) -> int:
        return self.count(ShiftType.REMOTE)

    @property
    def oncall_shifts(self) -> int:
        return self.count(ShiftType.ONCALL)

    @property
    def vacation_days(self) -> int:
        return self.absence_days.get(AbsenceType.VACATION, 0)

    @property
    def sick_leave_days(self) -> int:
        return self.absence_days.get(AbsenceType.SICK_LEAVE, 0)

    def as_dict(self) -> Dict[str, Any]:
        return {
            **self.date_range.as_dict(),
            "employee_id": self.employee_filter,
            "office_shifts": self.office_shifts,
            "remote_shifts": self.remote_shifts,
            "oncall_shifts": self.oncall_shifts,
            "office_percent": self.percent(ShiftType.OFFICE),
            "remote_percent": self.percent(ShiftType.REMOTE),
            "oncall_percent": self.percent(ShiftType.ONCALL),
            "vacation_days": self.vacation_days,
            "sick_leave_days": self.sick_leave_days,
            "total_employees": self.total_employees,
            "total_shifts": self.total_shifts,
        }

    def rows(self) -> list[tuple[str, str, int, Optional[int]]]:
        """Flat ``(kind, label, value, percent)`` rows for tabular exports."""

        result: list[tuple[str, str, int, Optional[int]]] = []
        for kind in ShiftType:
            result.append((kind.value, shift_label(kind), self.count(kind), self.percent(kind)))
        result.append(("total_shifts", "Всего смен", self.total_shifts, None))
        for absence_kind in AbsenceType:
            result.append((absence_kind.value, absence_label(absence_kind), self.absence_days.get(absence_kind, 0), None))
        result.append(("total_employees", "Сотрудники", self.total_employees, None))
        return result


def default_range(today: Optional[date] = None) -> DateRange:
    today = today or date.today()
    return month_range(today.year, today.month)


def aggregate(
    date_range: DateRange,
    shifts: Iterable[Shift],
    absences: Iterable[Absence],
    active_employee_count: int,
    employee_filter: Optional[int] = None,
) -> Statistics:
    """Count shifts by type and clipped absence days inside *date_range*.

    Absences that extend past either edge of the window contribute only the
    days inside it. ``active_employee_count`` is reported unchanged. A window
    ending before it starts raises :class:`ValidationError`.
    """

    validate_range(date_range)

    shift_counts: Counter = Counter({kind: 0 for kind in ShiftType})
    for shift in shifts:
        if shift.shift_date not in date_range:
            continue
        if employee_filter is not None and shift.employee_id != employee_filter:
            continue
        shift_counts[shift.shift_type] += 1

    absence_days: Counter = Counter({kind: 0 for kind in AbsenceType})
    for absence in absences:
        if employee_filter is not None and absence.employee_id != employee_filter:
            continue
        if not overlaps(absence.interval, date_range):
            continue
        absence_days[absence.absence_type] += clipped_duration_days(absence.interval, date_range)

    stats = Statistics(
        date_range=date_range,
        shift_counts=dict(shift_counts),
        absence_days=dict(absence_days),
        total_employees=int(active_employee_count),
        employee_filter=employee_filter,
    )
    logger.debug("aggregated %s shifts for %s..%s", stats.total_shifts, date_range.start, date_range.end)
    return stats
