from datetime import date

import pytest

from domain.errors import ValidationError
from domain.intervals import month_range
from domain.models import Absence, DateRange, Shift
from domain.shift_types import AbsenceType, ShiftType
from services.statistics import aggregate, default_range, percentage

JUNE = month_range(2024, 6)


def shift(shift_id: int, kind: ShiftType, day: date = date(2024, 6, 10), emp_id: int = 1) -> Shift:
    return Shift(id=shift_id, employee_id=emp_id, shift_date=day, shift_type=kind)


def absence(kind: AbsenceType, start: date, end: date, emp_id: int = 1, absence_id: int = 1) -> Absence:
    return Absence(id=absence_id, employee_id=emp_id, absence_type=kind, start_date=start, end_date=end)


def test_shift_percentages():
    shifts = [shift(1, ShiftType.OFFICE), shift(2, ShiftType.OFFICE), shift(3, ShiftType.OFFICE), shift(4, ShiftType.REMOTE)]
    stats = aggregate(JUNE, shifts, [], 5)
    data = stats.as_dict()
    assert data["total_shifts"] == 4
    assert (data["office_percent"], data["remote_percent"], data["oncall_percent"]) == (75, 25, 0)
    assert data["total_employees"] == 5


def test_percentages_sum_to_about_one_hundred():
    shifts = [shift(1, ShiftType.OFFICE), shift(2, ShiftType.REMOTE), shift(3, ShiftType.ONCALL)]
    stats = aggregate(JUNE, shifts, [], 1)
    total = sum(stats.percent(kind) for kind in ShiftType)
    assert 99 <= total <= 101


def test_empty_input_is_all_zero():
    data = aggregate(JUNE, [], [], 0).as_dict()
    for key in (
        "office_shifts", "remote_shifts", "oncall_shifts",
        "office_percent", "remote_percent", "oncall_percent",
        "vacation_days", "sick_leave_days", "total_employees", "total_shifts",
    ):
        assert data[key] == 0


def test_absence_clipped_to_window():
    sick = absence(AbsenceType.SICK_LEAVE, date(2024, 5, 28), date(2024, 6, 3))
    stats = aggregate(JUNE, [], [sick], 3)
    assert stats.sick_leave_days == 3
    assert stats.vacation_days == 0


def test_absences_summed_per_type():
    absences = [
        absence(AbsenceType.VACATION, date(2024, 6, 10), date(2024, 6, 14), absence_id=1),
        absence(AbsenceType.VACATION, date(2024, 6, 28), date(2024, 7, 10), emp_id=2, absence_id=2),
        absence(AbsenceType.SICK_LEAVE, date(2024, 7, 1), date(2024, 7, 2), absence_id=3),
    ]
    stats = aggregate(JUNE, [], absences, 3)
    assert stats.vacation_days == 5 + 3
    assert stats.sick_leave_days == 0


def test_records_outside_range_are_filtered():
    shifts = [shift(1, ShiftType.OFFICE, date(2024, 5, 31)), shift(2, ShiftType.ONCALL, date(2024, 6, 30))]
    stats = aggregate(JUNE, shifts, [], 1)
    assert stats.total_shifts == 1
    assert stats.oncall_shifts == 1


def test_employee_filter():
    shifts = [shift(1, ShiftType.OFFICE, emp_id=1), shift(2, ShiftType.REMOTE, emp_id=2)]
    absences = [absence(AbsenceType.VACATION, date(2024, 6, 1), date(2024, 6, 2), emp_id=2)]
    stats = aggregate(JUNE, shifts, absences, 1, employee_filter=1)
    assert stats.total_shifts == 1
    assert stats.office_shifts == 1
    assert stats.vacation_days == 0
    assert stats.as_dict()["employee_id"] == 1


def test_percentage_rounds_half_up():
    assert percentage(1, 8) == 13
    assert percentage(0, 0) == 0
    assert percentage(2, 3) == 67


def test_default_range_is_current_month():
    assert default_range(date(2024, 2, 17)) == DateRange(date(2024, 2, 1), date(2024, 2, 29))


def test_rows_cover_every_type():
    rows = aggregate(JUNE, [shift(1, ShiftType.REMOTE)], [], 1).rows()
    keys = [row[0] for row in rows]
    assert keys == ["office", "remote", "oncall", "total_shifts", "vacation", "sick_leave", "total_employees"]
    assert rows[1][2:] == (1, 100)


def test_inverted_range_is_rejected():
    inverted = DateRange(date(2024, 6, 30), date(2024, 6, 1))
    with pytest.raises(ValidationError) as excinfo:
        aggregate(inverted, [shift(1, ShiftType.OFFICE)], [], 1)
    assert excinfo.value.field == "end"
