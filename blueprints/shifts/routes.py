from __future__ import annotations

from flask import Blueprint, jsonify, request

from dao import employees_dao, shifts_dao
from domain.intervals import parse_date, parse_date_range
from services import shift_service
from services.statistics import default_range

bp = Blueprint("shifts", __name__)


@bp.route("/api/shifts", methods=["GET"])
def list_shifts():
    employee_id = shift_service.parse_optional_employee_id(request.args.get("employee_id"))
    if request.args.get("start") or request.args.get("end"):
        date_range = parse_date_range(request.args.get("start"), request.args.get("end"))
    else:
        date_range = default_range()
    shifts = shifts_dao.list_shifts(date_range, employee_id)
    return jsonify({**date_range.as_dict(), "shifts": [shift.as_dict() for shift in shifts]})


@bp.route("/api/shifts/check", methods=["GET"])
def check_shift():
    employee_id = shift_service.parse_employee_id(request.args.get("employee_id"))
    day = parse_date(request.args.get("date"))
    check = shift_service.check_shift(employee_id, day)
    payload = check.as_dict()
    if not check.allowed:
        employee = employees_dao.get_employee(employee_id)
        payload["message"] = check.message(employee.name if employee else None)
    return jsonify(payload)


@bp.route("/api/shifts", methods=["POST"])
def create_shift():
    payload = request.get_json(force=True, silent=True) or {}
    shift = shift_service.create_shift(payload)
    return jsonify(shift.as_dict()), 201


@bp.route("/api/shifts/<int:shift_id>", methods=["DELETE"])
def delete_shift(shift_id: int):
    shift_service.delete_shift(shift_id)
    return jsonify({"deleted": 1})
