from __future__ import annotations

from flask import Blueprint, Response, jsonify, request

from domain.intervals import parse_date_range
from services import reports_service, shift_service
from services.statistics import default_range


bp = Blueprint("reports", __name__)


def _resolve_range():
    if request.args.get("start") or request.args.get("end"):
        return parse_date_range(request.args.get("start"), request.args.get("end"))
    return default_range()


@bp.route("/api/statistics")
def statistics_api():
    employee_id = shift_service.parse_optional_employee_id(request.args.get("employee_id"))
    stats = shift_service.load_statistics(_resolve_range(), employee_id)
    return jsonify(stats.as_dict())


@bp.route("/api/statistics.csv")
def statistics_csv():
    employee_id = shift_service.parse_optional_employee_id(request.args.get("employee_id"))
    buffer, filename = reports_service.export_statistics_csv(_resolve_range(), employee_id)
    return Response(
        buffer.getvalue(),
        mimetype="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@bp.route("/api/statistics.xlsx")
def statistics_xlsx():
    employee_id = shift_service.parse_optional_employee_id(request.args.get("employee_id"))
    stream, filename = reports_service.export_statistics_xlsx(_resolve_range(), employee_id)
    return (stream.getvalue(), 200, {
        "Content-Type": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        "Content-Disposition": f"attachment; filename={filename}",
    })
