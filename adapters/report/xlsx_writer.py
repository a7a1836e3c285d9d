"""Excel report writer."""
from __future__ import annotations

from pathlib import Path
from typing import IO, Union

from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill

from services.calendar_view import WEEKDAY_NAMES, MonthGrid
from services.statistics import Statistics

Target = Union[str, Path, IO[bytes]]

HEADER_FONT = Font(bold=True)
CENTER = Alignment(horizontal="center", vertical="top", wrap_text=True)
FILLS = {
    "blue": PatternFill("solid", fgColor="DBEAFE"),
    "green": PatternFill("solid", fgColor="DCFCE7"),
    "orange": PatternFill("solid", fgColor="FFEDD5"),
    "yellow": PatternFill("solid", fgColor="FEF9C3"),
    "red": PatternFill("solid", fgColor="FEE2E2"),
}


def write_statistics(target: Target, stats: Statistics, *, title: str | None = None) -> Target:
    wb = Workbook()
    ws = wb.active
    ws.title = title or "Statistics"

    ws.cell(row=1, column=1, value="Период").font = HEADER_FONT
    ws.cell(row=1, column=2, value=f"{stats.date_range.start.isoformat()} - {stats.date_range.end.isoformat()}")
    for col, header in enumerate(("Показатель", "Значение", "%"), start=1):
        ws.cell(row=3, column=col, value=header).font = HEADER_FONT

    for row_idx, (_, label, value, percent) in enumerate(stats.rows(), start=4):
        ws.cell(row=row_idx, column=1, value=label)
        ws.cell(row=row_idx, column=2, value=value)
        if percent is not None:
            ws.cell(row=row_idx, column=3, value=percent)

    ws.column_dimensions["A"].width = 24
    wb.save(target)
    return target


def write_month(target: Target, grid: MonthGrid) -> Target:
    """One sheet laid out like the calendar: seven columns, one row per week."""

    wb = Workbook()
    ws = wb.active
    ws.title = grid.title

    for col, name in enumerate(WEEKDAY_NAMES, start=1):
        cell = ws.cell(row=1, column=col, value=name)
        cell.font = HEADER_FONT
        cell.alignment = CENTER
        ws.column_dimensions[cell.column_letter].width = 22

    for week_idx, week in enumerate(grid.weeks(), start=2):
        for col, day_cell in enumerate(week, start=1):
            if day_cell is None:
                continue
            lines = [str(day_cell.day.day)]
            lines.extend(f"{entry.short_name}: {entry.label}" for entry in day_cell.entries)
            cell = ws.cell(row=week_idx, column=col, value="\n".join(lines))
            cell.alignment = CENTER
            colors = {entry.color for entry in day_cell.entries}
            if len(colors) == 1:
                cell.fill = FILLS[colors.pop()]

    wb.save(target)
    return target
