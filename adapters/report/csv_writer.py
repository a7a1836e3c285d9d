"""CSV report helpers."""
from __future__ import annotations

import csv
from pathlib import Path
from typing import IO, Union

from services.calendar_view import MonthGrid
from services.statistics import Statistics

Target = Union[str, Path, IO[str]]


def _write(target: Target, rows) -> Target:
    if isinstance(target, (str, Path)):
        path = Path(target)
        with path.open("w", newline="", encoding="utf-8") as handle:
            csv.writer(handle).writerows(rows)
        return path
    csv.writer(target).writerows(rows)
    return target


def write_statistics(target: Target, stats: Statistics) -> Target:
    rows = [["start", "end", "metric", "label", "value", "percent"]]
    for key, label, value, percent in stats.rows():
        rows.append([stats.date_range.start.isoformat(), stats.date_range.end.isoformat(), key, label, value, "" if percent is None else percent])
    return _write(target, rows)


def write_month(target: Target, grid: MonthGrid) -> Target:
    rows = [["date", "employee_id", "employee", "shift_type", "absence_type", "in_conflict", "notes"]]
    for cell in grid.days:
        for entry in cell.entries:
            rows.append([
                cell.day.isoformat(),
                entry.shift.employee_id,
                entry.employee_name,
                entry.shift.shift_type.value,
                entry.absence.absence_type.value if entry.absence else "",
                int(entry.in_conflict),
                entry.shift.notes or "",
            ])
    return _write(target, rows)
