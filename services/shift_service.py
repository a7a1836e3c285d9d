"""Shift workflow: load record slices, run the pure core, gate writes."""
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, Optional

from dao import absences_dao, employees_dao, shifts_dao
from domain.conflicts import ConflictCheck, can_assign_shift
from domain.errors import NotFoundError, ValidationError
from domain.intervals import month_range, parse_date
from domain.models import DateRange, Employee, Shift
from domain.shift_types import parse_shift_type
from services.calendar_view import MonthGrid, project_month
from services.statistics import Statistics, aggregate

logger = logging.getLogger(__name__)


class ShiftConflictError(Exception):
    """Raised when a shift is requested on a day the employee is absent."""

    def __init__(self, check: ConflictCheck, employee: Employee) -> None:
        super().__init__(check.message(employee.name))
        self.check = check
        self.employee = employee

    def as_dict(self) -> Dict[str, Any]:
        return {"error": "conflict", "message": str(self), **self.check.as_dict()}


def parse_employee_id(raw: Any) -> int:
    if raw in (None, ""):
        raise ValidationError("employee_id is required", field="employee_id")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"employee_id must be an integer, got {raw!r}", field="employee_id") from None


def parse_optional_employee_id(raw: Any) -> Optional[int]:
    if raw in (None, ""):
        return None
    return parse_employee_id(raw)


def _assignable_employee(employee_id: int) -> Employee:
    employee = employees_dao.get_employee(employee_id)
    if employee is None:
        raise ValidationError(f"employee {employee_id} does not exist", field="employee_id")
    if not employee.active:
        raise ValidationError(f"employee {employee.name} is inactive", field="employee_id")
    return employee


def check_shift(employee_id: int, day: date) -> ConflictCheck:
    absences = absences_dao.list_absences(DateRange(day, day), employee_id)
    return can_assign_shift(employee_id, day, absences)


def create_shift(payload: Dict[str, Any]) -> Shift:
    employee_id = parse_employee_id(payload.get("employee_id"))
    day = parse_date(payload.get("shift_date"), field="shift_date")
    kind = parse_shift_type(payload.get("shift_type", "office"))
    notes = str(payload.get("notes") or "").strip() or None

    employee = _assignable_employee(employee_id)
    check = check_shift(employee.id, day)
    if not check.allowed:
        logger.info("rejected %s shift for employee %s on %s: absent", kind.value, employee.id, day)
        raise ShiftConflictError(check, employee)

    shift = shifts_dao.create_shift(employee.id, day, kind, notes)
    logger.info("created shift %s (%s) for employee %s on %s", shift.id, kind.value, employee.id, day)
    return shift


def delete_shift(shift_id: int) -> None:
    if not shifts_dao.delete_shift(shift_id):
        raise NotFoundError("shift", shift_id)
    logger.info("deleted shift %s", shift_id)


def load_month(year: int, month: int, employee_id: Optional[int] = None, *, today: Optional[date] = None) -> MonthGrid:
    window = month_range(year, month)
    return project_month(
        year,
        month,
        shifts_dao.list_shifts(window, employee_id),
        absences_dao.list_absences(window, employee_id),
        employees_dao.list_employees(),
        employee_id,
        today=today,
    )


def load_statistics(date_range: DateRange, employee_id: Optional[int] = None) -> Statistics:
    return aggregate(
        date_range,
        shifts_dao.list_shifts(date_range, employee_id),
        absences_dao.list_absences(date_range, employee_id),
        employees_dao.count_active(employee_id),
        employee_id,
    )
