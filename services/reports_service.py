from __future__ import annotations

from io import BytesIO, StringIO
from typing import Optional, Tuple

from adapters.report import csv_writer, xlsx_writer
from domain.models import DateRange
from services import shift_service


def _suffix(employee_id: Optional[int]) -> str:
    return f"_emp{employee_id}" if employee_id is not None else ""


def export_statistics_csv(date_range: DateRange, employee_id: Optional[int] = None) -> Tuple[StringIO, str]:
    stats = shift_service.load_statistics(date_range, employee_id)
    buffer = StringIO()
    csv_writer.write_statistics(buffer, stats)
    buffer.seek(0)
    filename = f"statistics_{date_range.start.isoformat()}_{date_range.end.isoformat()}{_suffix(employee_id)}.csv"
    return buffer, filename


def export_statistics_xlsx(date_range: DateRange, employee_id: Optional[int] = None) -> Tuple[BytesIO, str]:
    stats = shift_service.load_statistics(date_range, employee_id)
    buffer = BytesIO()
    xlsx_writer.write_statistics(buffer, stats)
    buffer.seek(0)
    filename = f"statistics_{date_range.start.isoformat()}_{date_range.end.isoformat()}{_suffix(employee_id)}.xlsx"
    return buffer, filename


def export_month_csv(year: int, month: int, employee_id: Optional[int] = None) -> Tuple[StringIO, str]:
    grid = shift_service.load_month(year, month, employee_id)
    buffer = StringIO()
    csv_writer.write_month(buffer, grid)
    buffer.seek(0)
    return buffer, f"shifts_{year:04d}-{month:02d}{_suffix(employee_id)}.csv"


def export_month_xlsx(year: int, month: int, employee_id: Optional[int] = None) -> Tuple[BytesIO, str]:
    grid = shift_service.load_month(year, month, employee_id)
    buffer = BytesIO()
    xlsx_writer.write_month(buffer, grid)
    buffer.seek(0)
    return buffer, f"shifts_{year:04d}-{month:02d}{_suffix(employee_id)}.xlsx"
