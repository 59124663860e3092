from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..attendance.controller import error_response
from ..core.exceptions import AuthenticationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or {}
        try:
            employee = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))
        except AuthenticationError as e:
            return jsonify({"message": str(e), "error": e.kind}), 401
        except Exception as e:
            return error_response(e)

        session.clear()
        session["employee_id"] = employee.employee_id
        session["name"] = employee.full_name
        session["branch_id"] = employee.branch_id
        return jsonify({"employeeId": employee.employee_id, "name": employee.full_name}), 200

    @app.route("/api/auth/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"message": "Logged out"}), 200
