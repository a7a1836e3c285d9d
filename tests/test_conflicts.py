from datetime import date, timedelta

from domain.conflicts import can_assign_shift
from domain.models import Absence
from domain.shift_types import AbsenceType


def vacation(emp_id: int = 1, start: date = date(2024, 6, 10), end: date = date(2024, 6, 14), absence_id: int = 1) -> Absence:
    return Absence(id=absence_id, employee_id=emp_id, absence_type=AbsenceType.VACATION, start_date=start, end_date=end)


def test_shift_inside_vacation_is_rejected():
    absence = vacation()
    check = can_assign_shift(1, date(2024, 6, 12), [absence])
    assert check.allowed is False
    assert check.conflicting_absence is absence
    assert check.conflicting_absence.absence_type is AbsenceType.VACATION


def test_shift_after_vacation_is_allowed():
    check = can_assign_shift(1, date(2024, 6, 15), [vacation()])
    assert check.allowed is True
    assert check.conflicting_absence is None


def test_every_day_of_absence_blocks_and_neighbours_do_not():
    absence = vacation()
    day = absence.start_date
    while day <= absence.end_date:
        assert not can_assign_shift(1, day, [absence]).allowed
        day += timedelta(days=1)
    assert can_assign_shift(1, absence.start_date - timedelta(days=1), [absence]).allowed
    assert can_assign_shift(1, absence.end_date + timedelta(days=1), [absence]).allowed


def test_other_employees_absences_are_ignored():
    check = can_assign_shift(2, date(2024, 6, 12), [vacation(emp_id=1)])
    assert check.allowed


def test_overlapping_absences_report_one_of_them():
    first = vacation(absence_id=1)
    second = Absence(
        id=2,
        employee_id=1,
        absence_type=AbsenceType.SICK_LEAVE,
        start_date=date(2024, 6, 11),
        end_date=date(2024, 6, 13),
    )
    check = can_assign_shift(1, date(2024, 6, 12), [first, second])
    assert not check.allowed
    assert check.conflicting_absence in (first, second)


def test_empty_absence_list_allows():
    assert can_assign_shift(1, date(2024, 6, 12), []).allowed


def test_rejection_message_names_the_interval():
    check = can_assign_shift(1, date(2024, 6, 12), [vacation()])
    message = check.message("Иван Петров")
    assert "Иван Петров" in message
    assert "отпуске" in message
    assert "10.06.2024" in message and "14.06.2024" in message
    assert check.as_dict()["conflicting_absence"]["label"] == "Отпуск"
