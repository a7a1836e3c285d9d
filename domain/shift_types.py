"""Closed shift and absence tags with their display mappings."""
from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Union

from .errors import ValidationError

__all__ = [
    "ShiftType",
    "AbsenceType",
    "SHIFT_LABELS",
    "ABSENCE_LABELS",
    "ABSENCE_LOCATIVE",
    "SHIFT_COLORS",
    "ABSENCE_COLORS",
    "parse_shift_type",
    "parse_absence_type",
    "shift_label",
    "absence_label",
    "shift_color",
    "absence_color",
    "display_color",
]


class ShiftType(str, Enum):
    OFFICE = "office"
    REMOTE = "remote"
    ONCALL = "oncall"


class AbsenceType(str, Enum):
    VACATION = "vacation"
    SICK_LEAVE = "sick_leave"


SHIFT_LABELS: Dict[ShiftType, str] = {
    ShiftType.OFFICE: "Офис",
    ShiftType.REMOTE: "Удаленно",
    ShiftType.ONCALL: "Дежурный",
}

ABSENCE_LABELS: Dict[AbsenceType, str] = {
    AbsenceType.VACATION: "Отпуск",
    AbsenceType.SICK_LEAVE: "Больничный",
}

# Prepositional forms used in "сотрудник находится в ..." messages.
ABSENCE_LOCATIVE: Dict[AbsenceType, str] = {
    AbsenceType.VACATION: "отпуске",
    AbsenceType.SICK_LEAVE: "больничном",
}

SHIFT_COLORS: Dict[ShiftType, str] = {
    ShiftType.OFFICE: "blue",
    ShiftType.REMOTE: "green",
    ShiftType.ONCALL: "orange",
}

ABSENCE_COLORS: Dict[AbsenceType, str] = {
    AbsenceType.VACATION: "yellow",
    AbsenceType.SICK_LEAVE: "red",
}


def _parse(enum_cls, raw: Union[str, Enum, None], field: str):
    if isinstance(raw, enum_cls):
        return raw
    try:
        return enum_cls(str(raw or "").strip().lower())
    except ValueError:
        allowed = ", ".join(item.value for item in enum_cls)
        raise ValidationError(f"Unknown {field} {raw!r}; expected one of: {allowed}", field=field) from None


def parse_shift_type(raw: Union[str, ShiftType, None]) -> ShiftType:
    """Return the :class:`ShiftType` for *raw*, rejecting anything outside the closed set."""

    return _parse(ShiftType, raw, "shift_type")


def parse_absence_type(raw: Union[str, AbsenceType, None]) -> AbsenceType:
    return _parse(AbsenceType, raw, "absence_type")


def shift_label(kind: ShiftType) -> str:
    return SHIFT_LABELS[kind]


def absence_label(kind: AbsenceType) -> str:
    return ABSENCE_LABELS[kind]


def shift_color(kind: ShiftType) -> str:
    return SHIFT_COLORS[kind]


def absence_color(kind: AbsenceType) -> str:
    return ABSENCE_COLORS[kind]


def display_color(shift_kind: ShiftType, absence_kind: Optional[AbsenceType] = None) -> str:
    """Absence colour wins over the shift colour when both apply to a day."""

    if absence_kind is not None:
        return absence_color(absence_kind)
    return shift_color(shift_kind)
