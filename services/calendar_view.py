"""Project shifts and absences onto a Monday-first month grid."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from domain.intervals import month_range
from domain.models import Absence, Employee, Shift
from domain.shift_types import absence_label, display_color, shift_label

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    "Январь", "Февраль", "Март", "Апрель", "Май", "Июнь",
    "Июль", "Август", "Сентябрь", "Октябрь", "Ноябрь", "Декабрь",
)
WEEKDAY_NAMES = ("Пн", "Вт", "Ср", "Чт", "Пт", "Сб", "Вс")
UNKNOWN_EMPLOYEE = "Неизвестный сотрудник"


@dataclass
class CalendarEntry:
    shift: Shift
    employee: Optional[Employee]
    absence: Optional[Absence] = None

    @property
    def employee_known(self) -> bool:
        return self.employee is not None

    @property
    def in_conflict(self) -> bool:
        return self.absence is not None

    @property
    def employee_name(self) -> str:
        return self.employee.name if self.employee else UNKNOWN_EMPLOYEE

    @property
    def short_name(self) -> str:
        return self.employee.short_name if self.employee else UNKNOWN_EMPLOYEE

    @property
    def label(self) -> str:
        if self.absence is not None:
            return absence_label(self.absence.absence_type)
        return shift_label(self.shift.shift_type)

    @property
    def color(self) -> str:
        return display_color(self.shift.shift_type, self.absence.absence_type if self.absence else None)

    @property
    def tooltip(self) -> str:
        text = f"{self.employee_name} - {shift_label(self.shift.shift_type)}"
        if self.absence is not None:
            text += f" ({absence_label(self.absence.absence_type)})"
        if self.shift.notes:
            text += f"\n{self.shift.notes}"
        return text

    def as_dict(self) -> Dict[str, Any]:
        return {
            "shift": self.shift.as_dict(),
            "employee_id": self.shift.employee_id,
            "employee_name": self.employee_name,
            "short_name": self.short_name,
            "employee_known": self.employee_known,
            "in_conflict": self.in_conflict,
            "absence": self.absence.as_dict() if self.absence else None,
            "label": self.label,
            "color": self.color,
            "tooltip": self.tooltip,
        }


@dataclass
class DayCell:
    day: date
    entries: List[CalendarEntry] = field(default_factory=list)
    is_today: bool = False

    @property
    def has_conflict(self) -> bool:
        return any(entry.in_conflict for entry in self.entries)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "date": self.day.isoformat(),
            "day": self.day.day,
            "is_today": self.is_today,
            "has_conflict": self.has_conflict,
            "entries": [entry.as_dict() for entry in self.entries],
        }


@dataclass
class MonthGrid:
    year: int
    month: int
    cells: List[Optional[DayCell]]
    employee_filter: Optional[int] = None

    @property
    def leading_blanks(self) -> int:
        count = 0
        for cell in self.cells:
            if cell is not None:
                break
            count += 1
        return count

    @property
    def days(self) -> List[DayCell]:
        return [cell for cell in self.cells if cell is not None]

    @property
    def title(self) -> str:
        return f"{MONTH_NAMES[self.month - 1]} {self.year}"

    def weeks(self) -> List[List[Optional[DayCell]]]:
        return [self.cells[idx: idx + 7] for idx in range(0, len(self.cells), 7)]

    def as_dict(self) -> Dict[str, Any]:
        return {
            "year": self.year,
            "month": self.month,
            "title": self.title,
            "weekdays": list(WEEKDAY_NAMES),
            "employee_id": self.employee_filter,
            "leading_blanks": self.leading_blanks,
            "cells": [cell.as_dict() if cell else None for cell in self.cells],
        }


def _employee_index(employees: Union[Mapping[int, Employee], Iterable[Employee]]) -> Dict[int, Employee]:
    if isinstance(employees, Mapping):
        return dict(employees)
    return {employee.id: employee for employee in employees}


def project_month(
    year: int,
    month: int,
    shifts: Iterable[Shift],
    absences: Iterable[Absence],
    employees: Union[Mapping[int, Employee], Iterable[Employee]],
    employee_filter: Optional[int] = None,
    *,
    today: Optional[date] = None,
) -> MonthGrid:
    """Build the month grid for ``year``/``month``.

    Day 1 is preceded by ``weekday()`` placeholders (Monday = 0) and the grid
    stops at the last day of the month. Every shift on a day is kept; a shift
    whose employee is absent that day carries the absence and is reported as a
    conflict rather than dropped. Shifts referencing employees missing from
    *employees* are kept with ``employee=None``.
    """

    window = month_range(year, month)
    by_id = _employee_index(employees)

    shifts_by_day: Dict[date, List[Shift]] = {}
    for shift in shifts:
        if shift.shift_date not in window:
            continue
        if employee_filter is not None and shift.employee_id != employee_filter:
            continue
        shifts_by_day.setdefault(shift.shift_date, []).append(shift)

    absences_by_employee: Dict[int, List[Absence]] = {}
    for absence in absences:
        absences_by_employee.setdefault(absence.employee_id, []).append(absence)

    cells: List[Optional[DayCell]] = [None] * window.start.weekday()
    day = window.start
    while day <= window.end:
        cell = DayCell(day=day, is_today=(today == day))
        for shift in shifts_by_day.get(day, ()):
            absence = _absence_on(absences_by_employee.get(shift.employee_id, ()), day)
            employee = by_id.get(shift.employee_id)
            if employee is None:
                logger.warning("shift %s references unknown employee %s", shift.id, shift.employee_id)
            cell.entries.append(CalendarEntry(shift=shift, employee=employee, absence=absence))
        cells.append(cell)
        day += timedelta(days=1)

    return MonthGrid(year=int(year), month=int(month), cells=cells, employee_filter=employee_filter)


def _absence_on(absences: Sequence[Absence], day: date) -> Optional[Absence]:
    for absence in absences:
        if absence.covers(day):
            return absence
    return None
