from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from dao import employees_dao
from domain.errors import NotFoundError, ValidationError
from domain.intervals import parse_date_range
from domain.models import Absence, DateRange
from domain.shift_types import AbsenceType, parse_absence_type
from services import db

logger = logging.getLogger(__name__)

_COLUMNS = "id, employee_id, absence_type, start_date, end_date, notes, created_at"


def _from_row(row) -> Absence:
    return Absence(
        id=int(row["id"]),
        employee_id=int(row["employee_id"]),
        absence_type=AbsenceType(row["absence_type"]),
        start_date=date.fromisoformat(row["start_date"]),
        end_date=date.fromisoformat(row["end_date"]),
        notes=row["notes"],
        created_at=datetime.fromisoformat(row["created_at"]) if row["created_at"] else None,
    )


def _clean(payload: Dict[str, Any]) -> tuple[int, str, str, str, Optional[str]]:
    try:
        employee_id = int(payload["employee_id"])
    except (KeyError, TypeError, ValueError):
        raise ValidationError("employee_id is required", field="employee_id") from None
    kind = parse_absence_type(payload.get("absence_type", AbsenceType.VACATION.value))
    interval = parse_date_range(
        payload.get("start_date"),
        payload.get("end_date"),
        start_field="start_date",
        end_field="end_date",
    )
    notes = str(payload.get("notes") or "").strip() or None
    if employees_dao.get_employee(employee_id) is None:
        raise ValidationError(f"employee {employee_id} does not exist", field="employee_id")
    return employee_id, kind.value, interval.start.isoformat(), interval.end.isoformat(), notes


def list_absences(date_range: Optional[DateRange] = None, employee_id: Optional[int] = None) -> List[Absence]:
    """Absences overlapping *date_range* (all of them when no range is given)."""

    sql = f"SELECT {_COLUMNS} FROM absences WHERE 1 = 1"
    params: list[Any] = []
    if date_range is not None:
        sql += " AND start_date <= ? AND end_date >= ?"
        params.extend([date_range.end.isoformat(), date_range.start.isoformat()])
    if employee_id is not None:
        sql += " AND employee_id = ?"
        params.append(employee_id)
    sql += " ORDER BY start_date DESC, id"
    return [_from_row(row) for row in db.query_all(sql, params)]


def get_absence(absence_id: int) -> Optional[Absence]:
    row = db.query_one(f"SELECT {_COLUMNS} FROM absences WHERE id = ?", (absence_id,))
    return _from_row(row) if row else None


def add_absence(payload: Dict[str, Any]) -> Absence:
    values = _clean(payload)
    absence_id = db.insert(
        "INSERT INTO absences(employee_id, absence_type, start_date, end_date, notes) VALUES (?, ?, ?, ?, ?)",
        values,
    )
    logger.info("recorded %s for employee %s: %s..%s", values[1], values[0], values[2], values[3])
    return get_absence(absence_id)  # type: ignore[return-value]


def update_absence(absence_id: int, payload: Dict[str, Any]) -> Absence:
    updated = db.execute(
        "UPDATE absences SET employee_id = ?, absence_type = ?, start_date = ?, end_date = ?, notes = ? WHERE id = ?",
        (*_clean(payload), absence_id),
    )
    if not updated:
        raise NotFoundError("absence", absence_id)
    return get_absence(absence_id)  # type: ignore[return-value]


def delete_absence(absence_id: int) -> int:
    return db.execute("DELETE FROM absences WHERE id = ?", (absence_id,))
