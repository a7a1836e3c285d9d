from __future__ import annotations

from flask import Blueprint, jsonify, request

from dao import absences_dao
from domain.errors import NotFoundError
from domain.intervals import duration_days, parse_date_range
from domain.shift_types import absence_label
from services.shift_service import parse_optional_employee_id

bp = Blueprint("absences", __name__)


def _serialize(absence):
    return {
        **absence.as_dict(),
        "label": absence_label(absence.absence_type),
        "duration_days": duration_days(absence.interval),
    }


@bp.route("/api/absences", methods=["GET"])
def list_absences():
    employee_id = parse_optional_employee_id(request.args.get("employee_id"))
    date_range = None
    if request.args.get("start") or request.args.get("end"):
        date_range = parse_date_range(request.args.get("start"), request.args.get("end"))
    absences = absences_dao.list_absences(date_range, employee_id)
    return jsonify({"absences": [_serialize(absence) for absence in absences]})


@bp.route("/api/absences", methods=["POST"])
def create_absence():
    payload = request.get_json(force=True, silent=True) or {}
    absence = absences_dao.add_absence(payload)
    return jsonify(_serialize(absence)), 201


@bp.route("/api/absences/<int:absence_id>", methods=["PUT"])
def update_absence(absence_id: int):
    payload = request.get_json(force=True, silent=True) or {}
    return jsonify(_serialize(absences_dao.update_absence(absence_id, payload)))


@bp.route("/api/absences/<int:absence_id>", methods=["DELETE"])
def delete_absence(absence_id: int):
    if not absences_dao.delete_absence(absence_id):
        raise NotFoundError("absence", absence_id)
    return jsonify({"deleted": 1})
