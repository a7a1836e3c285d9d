from __future__ import annotations

from datetime import date

from flask import Blueprint, Response, jsonify, request

from domain.errors import ValidationError
from services import reports_service, shift_service

bp = Blueprint("calendar", __name__)


def _resolve_month() -> tuple[int, int]:
    today = date.today()
    try:
        year = int(request.args.get("year") or today.year)
        month = int(request.args.get("month") or today.month)
    except ValueError:
        raise ValidationError("year and month must be integers", field="month") from None
    return year, month


@bp.route("/api/calendar")
def month_grid():
    year, month = _resolve_month()
    employee_id = shift_service.parse_optional_employee_id(request.args.get("employee_id"))
    grid = shift_service.load_month(year, month, employee_id, today=date.today())
    return jsonify(grid.as_dict())


@bp.route("/api/calendar.csv")
def month_csv():
    year, month = _resolve_month()
    employee_id = shift_service.parse_optional_employee_id(request.args.get("employee_id"))
    buffer, filename = reports_service.export_month_csv(year, month, employee_id)
    return Response(
        buffer.getvalue(),
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@bp.route("/api/calendar.xlsx")
def month_xlsx():
    year, month = _resolve_month()
    employee_id = shift_service.parse_optional_employee_id(request.args.get("employee_id"))
    stream, filename = reports_service.export_month_xlsx(year, month, employee_id)
    return (stream.getvalue(), 200, {
        "Content-Type": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "Content-Disposition": f"attachment; filename={filename}",
    })
