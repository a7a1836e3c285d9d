from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from domain.errors import NotFoundError, ValidationError
from domain.models import Employee
from services import db

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, position, email, active, created_at"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def _from_row(row) -> Employee:
    return Employee(
        id=int(row["id"]),
        name=row["name"],
        position=row["position"] or "",
        email=row["email"] or "",
        active=bool(row["active"]),
        created_at=datetime.fromisoformat(row["created_at"]) if row["created_at"] else None,
    )


def parse_flag(raw: Any, *, default: bool, field: str = "active") -> bool:
    if raw is None:
        return default
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int):
        return raw != 0
    text = str(raw).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValidationError(f"{field} must be a boolean, got {raw!r}", field=field)


def _clean(payload: Dict[str, Any]) -> tuple[str, str, str, int]:
    name = str(payload.get("name") or "").strip()
    if not name:
        raise ValidationError("name is required", field="name")
    return (
        name,
        str(payload.get("position") or "").strip(),
        str(payload.get("email") or "").strip(),
        1 if parse_flag(payload.get("active"), default=True) else 0,
    )


def list_employees(active_only: bool = False) -> List[Employee]:
    rows = db.query_all(
        f"SELECT {_COLUMNS} FROM employees"
        + (" WHERE active = 1" if active_only else "")
        + " ORDER BY name"
    )
    return [_from_row(row) for row in rows]


def get_employee(emp_id: int) -> Optional[Employee]:
    row = db.query_one(f"SELECT {_COLUMNS} FROM employees WHERE id = ?", (emp_id,))
    if not row:
        return None
    return _from_row(row)


def count_active(emp_id: Optional[int] = None) -> int:
    sql = "SELECT COUNT(1) FROM employees WHERE active = 1"
    params: list[Any] = []
    if emp_id is not None:
        sql += " AND id = ?"
        params.append(emp_id)
    row = db.query_one(sql, params)
    return int(row[0]) if row else 0


def create_employee(payload: Dict[str, Any]) -> Employee:
    emp_id = db.insert(
        "INSERT INTO employees(name, position, email, active) VALUES (?, ?, ?, ?)",
        _clean(payload),
    )
    logger.info("created employee %s", emp_id)
    return get_employee(emp_id)  # type: ignore[return-value]


def update_employee(emp_id: int, payload: Dict[str, Any]) -> Employee:
    updated = db.execute(
        "UPDATE employees SET name = ?, position = ?, email = ?, active = ? WHERE id = ?",
        (*_clean(payload), emp_id),
    )
    if not updated:
        raise NotFoundError("employee", emp_id)
    return get_employee(emp_id)  # type: ignore[return-value]


def delete_employee(emp_id: int) -> int:
    deleted = db.execute("DELETE FROM employees WHERE id = ?", (emp_id,))
    if deleted:
        logger.info("deleted employee %s with their shifts and absences", emp_id)
    return deleted
