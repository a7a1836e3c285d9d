import pytest

from domain.errors import ValidationError
from domain.shift_types import (
    ABSENCE_COLORS,
    ABSENCE_LABELS,
    ABSENCE_LOCATIVE,
    SHIFT_COLORS,
    SHIFT_LABELS,
    AbsenceType,
    ShiftType,
    display_color,
    parse_absence_type,
    parse_shift_type,
)


def test_every_tag_has_label_and_color():
    assert set(SHIFT_LABELS) == set(ShiftType)
    assert set(SHIFT_COLORS) == set(ShiftType)
    assert set(ABSENCE_LABELS) == set(AbsenceType)
    assert set(ABSENCE_COLORS) == set(AbsenceType)
    assert set(ABSENCE_LOCATIVE) == set(AbsenceType)


def test_parse_known_values():
    assert parse_shift_type("oncall") is ShiftType.ONCALL
    assert parse_shift_type(" Remote ") is ShiftType.REMOTE
    assert parse_absence_type("sick_leave") is AbsenceType.SICK_LEAVE


@pytest.mark.parametrize("raw", ["night", "", None, "sick-leave"])
def test_parse_rejects_unknown_values(raw):
    with pytest.raises(ValidationError):
        parse_shift_type(raw)
    with pytest.raises(ValidationError):
        parse_absence_type(raw)


def test_absence_colour_takes_precedence():
    assert display_color(ShiftType.OFFICE) == "blue"
    assert display_color(ShiftType.OFFICE, AbsenceType.SICK_LEAVE) == "red"
