"""Shift assignment guard against recorded absences."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, Iterable, Optional

from .models import Absence
from .shift_types import ABSENCE_LOCATIVE, absence_label

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConflictCheck:
    allowed: bool
    conflicting_absence: Optional[Absence] = None

    def message(self, employee_name: Optional[str] = None) -> str:
        """Human readable explanation of a rejection (empty when allowed)."""

        if self.allowed or self.conflicting_absence is None:
            return ""
        absence = self.conflicting_absence
        who = employee_name or "Сотрудник"
        return (
            f"Нельзя назначить смену. {who} находится в {ABSENCE_LOCATIVE[absence.absence_type]} "
            f"с {absence.start_date:%d.%m.%Y} по {absence.end_date:%d.%m.%Y}"
        )

    def as_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"allowed": self.allowed}
        if self.conflicting_absence is not None:
            absence = self.conflicting_absence
            payload["conflicting_absence"] = {
                **absence.as_dict(),
                "label": absence_label(absence.absence_type),
            }
        return payload


ALLOWED = ConflictCheck(allowed=True)


def can_assign_shift(employee_id: int, day: date, absences: Iterable[Absence]) -> ConflictCheck:
    """Check whether *employee_id* may work on *day*.

    *absences* may include other employees' records; they are ignored. When
    several absences cover the day the first one found is reported.
    """

    for absence in absences:
        if absence.employee_id == employee_id and absence.covers(day):
            logger.debug("employee %s is absent on %s (absence %s)", employee_id, day, absence.id)
            return ConflictCheck(allowed=False, conflicting_absence=absence)
    return ALLOWED
