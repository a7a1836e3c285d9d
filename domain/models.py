"""Domain dataclasses for shift and absence records."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Dict, Optional

from .shift_types import AbsenceType, ShiftType


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass(frozen=True)
class DateRange:
    """Inclusive span of calendar days."""

    start: date
    end: date

    def __contains__(self, day: object) -> bool:
        return isinstance(day, date) and self.start <= day <= self.end

    def as_dict(self) -> Dict[str, str]:
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}


@dataclass
class Employee:
    id: int
    name: str
    position: str = ""
    email: str = ""
    active: bool = True
    created_at: Optional[datetime] = None

    @property
    def short_name(self) -> str:
        parts = self.name.split()
        return parts[0] if parts else self.name

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "position": self.position,
            "email": self.email,
            "active": self.active,
            "created_at": _iso(self.created_at),
        }


@dataclass
class Shift:
    id: int
    employee_id: int
    shift_date: date
    shift_type: ShiftType
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "shift_date": self.shift_date.isoformat(),
            "shift_type": self.shift_type.value,
            "notes": self.notes,
            "created_at": _iso(self.created_at),
        }


@dataclass
class Absence:
    id: int
    employee_id: int
    absence_type: AbsenceType
    start_date: date
    end_date: date
    notes: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def interval(self) -> DateRange:
        return DateRange(self.start_date, self.end_date)

    def covers(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def as_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "absence_type": self.absence_type.value,
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "notes": self.notes,
            "created_at": _iso(self.created_at),
        }
