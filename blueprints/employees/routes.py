from __future__ import annotations

from flask import Blueprint, jsonify, request

from dao import employees_dao
from domain.errors import NotFoundError

bp = Blueprint("employees", __name__)


@bp.route("/api/employees", methods=["GET"])
def list_employees():
    active_only = employees_dao.parse_flag(request.args.get("active_only"), default=False, field="active_only")
    employees = employees_dao.list_employees(active_only=active_only)
    return jsonify({"employees": [emp.as_dict() for emp in employees]})


@bp.route("/api/employees/<int:emp_id>", methods=["GET"])
def get_employee(emp_id: int):
    employee = employees_dao.get_employee(emp_id)
    if employee is None:
        raise NotFoundError("employee", emp_id)
    return jsonify(employee.as_dict())


@bp.route("/api/employees", methods=["POST"])
def create_employee():
    payload = request.get_json(force=True, silent=True) or {}
    employee = employees_dao.create_employee(payload)
    return jsonify(employee.as_dict()), 201


@bp.route("/api/employees/<int:emp_id>", methods=["PUT"])
def update_employee(emp_id: int):
    payload = request.get_json(force=True, silent=True) or {}
    return jsonify(employees_dao.update_employee(emp_id, payload).as_dict())


@bp.route("/api/employees/<int:emp_id>", methods=["DELETE"])
def delete_employee(emp_id: int):
    if not employees_dao.delete_employee(emp_id):
        raise NotFoundError("employee", emp_id)
    return jsonify({"deleted": 1})
