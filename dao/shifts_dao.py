from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, List, Optional

from domain.models import DateRange, Shift
from domain.shift_types import ShiftType
from services import db

logger = logging.getLogger(__name__)

_COLUMNS = "id, employee_id, shift_date, shift_type, notes, created_at"


def _from_row(row) -> Shift:
    return Shift(
        id=int(row["id"]),
        employee_id=int(row["employee_id"]),
        shift_date=date.fromisoformat(row["shift_date"]),
        shift_type=ShiftType(row["shift_type"]),
        notes=row["notes"],
        created_at=datetime.fromisoformat(row["created_at"]) if row["created_at"] else None,
    )


def list_shifts(date_range: DateRange, employee_id: Optional[int] = None) -> List[Shift]:
    sql = f"SELECT {_COLUMNS} FROM shifts WHERE shift_date >= ? AND shift_date <= ?"
    params: list[Any] = [date_range.start.isoformat(), date_range.end.isoformat()]
    if employee_id is not None:
        sql += " AND employee_id = ?"
        params.append(employee_id)
    sql += " ORDER BY shift_date, id"
    return [_from_row(row) for row in db.query_all(sql, params)]


def get_shift(shift_id: int) -> Optional[Shift]:
    row = db.query_one(f"SELECT {_COLUMNS} FROM shifts WHERE id = ?", (shift_id,))
    return _from_row(row) if row else None


def create_shift(employee_id: int, shift_date: date, shift_type: ShiftType, notes: Optional[str] = None) -> Shift:
    shift_id = db.insert(
        "INSERT INTO shifts(employee_id, shift_date, shift_type, notes) VALUES (?, ?, ?, ?)",
        (employee_id, shift_date.isoformat(), shift_type.value, notes or None),
    )
    return get_shift(shift_id)  # type: ignore[return-value]


def delete_shift(shift_id: int) -> int:
    return db.execute("DELETE FROM shifts WHERE id = ?", (shift_id,))
