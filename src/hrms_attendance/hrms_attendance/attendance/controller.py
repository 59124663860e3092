from __future__ import annotations

import logging
from datetime import date, timedelta
from functools import wraps

from flask import Flask, jsonify, request, session

from ..common.datetime_utils import now_local, parse_iso_date
from ..core.constants import DEFAULT_REPORT_DAYS
from ..core.exceptions import DomainError, GeofenceRejectedError, SessionNotFoundError, ValidationError
from ..container import Container
from .model import PunchRequest

logger = logging.getLogger(__name__)


def error_response(e: Exception):
    """Map a raised exception to the JSON error body and HTTP status."""

    if isinstance(e, DomainError):
        body = {"message": str(e), "error": e.kind}
        if isinstance(e, GeofenceRejectedError):
            body["distanceMeters"] = round(e.distance_meters)
            body["reference"] = e.reference_name
        status = 404 if isinstance(e, SessionNotFoundError) else 400
        return jsonify(body), status

    logger.exception("Unexpected attendance failure")
    return jsonify({"message": "Server Error", "error": "Unexpected"}), 500


def register(app: Flask, container: Container) -> None:
    def login_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "employee_id" not in session:
                return jsonify({"message": "Not authenticated", "error": "Unauthorized"}), 401
            return view(*args, **kwargs)

        return wrapper

    def _optional_date(name: str) -> date | None:
        value = request.args.get(name)
        if not value:
            return None
        try:
            return parse_iso_date(value)
        except ValueError:
            raise ValidationError(f"{name} must be YYYY-MM-DD") from None

    @app.route("/api/attendance/checkin", methods=["POST"], endpoint="checkin")
    @login_required
    def checkin():
        try:
            punch = PunchRequest.from_json(request.get_json(silent=True))
            attendance = container.attendance_service.check_in(
                int(session["employee_id"]),
                punch,
                now=now_local(),
            )
            return jsonify(attendance.to_dict()), 201
        except Exception as e:
            return error_response(e)

    @app.route("/api/attendance/checkout", methods=["PUT"], endpoint="checkout")
    @login_required
    def checkout():
        try:
            punch = PunchRequest.from_json(request.get_json(silent=True))
            attendance = container.attendance_service.check_out(
                int(session["employee_id"]),
                punch,
                now=now_local(),
            )
            return jsonify(attendance.to_dict()), 200
        except Exception as e:
            return error_response(e)

    @app.route("/api/attendance/today", methods=["GET"], endpoint="attendance_today")
    @login_required
    def attendance_today():
        try:
            view = container.attendance_service.get_today(
                int(session["employee_id"]),
                work_date=_optional_date("date"),
                now=now_local(),
            )
            return jsonify(view.to_dict()), 200
        except Exception as e:
            return error_response(e)

    @app.route("/api/attendance/history", methods=["GET"], endpoint="attendance_history")
    @login_required
    def attendance_history():
        try:
            page = container.attendance_service.get_history(
                int(session["employee_id"]),
                page=request.args.get("page"),
                limit=request.args.get("limit"),
                work_date=_optional_date("date"),
            )
            return jsonify(page.to_dict()), 200
        except Exception as e:
            return error_response(e)

    def _report_range() -> tuple[date, date]:
        today = now_local().date()
        start = _optional_date("start") or today - timedelta(days=DEFAULT_REPORT_DAYS)
        end = _optional_date("end") or today
        return start, end

    @app.route("/api/attendance/report", methods=["GET"], endpoint="attendance_report")
    @login_required
    def attendance_report():
        try:
            start, end = _report_range()
            data = container.report_service.build_attendance_report(
                start=start,
                end=end,
                employee_id=int(session["employee_id"]),
            )
            return jsonify(data.to_dict()), 200
        except Exception as e:
            return error_response(e)

    @app.route("/api/attendance/report.csv", methods=["GET"], endpoint="attendance_report_csv")
    @login_required
    def attendance_report_csv():
        try:
            start, end = _report_range()
            data = container.report_service.build_attendance_report(
                start=start,
                end=end,
                employee_id=int(session["employee_id"]),
            )
        except Exception as e:
            return error_response(e)

        filename = f"my_attendance_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return app.response_class(
            data.to_csv(),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
