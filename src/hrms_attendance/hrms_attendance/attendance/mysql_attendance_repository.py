from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, Optional, Sequence

from mysql.connector.errors import IntegrityError

from ..core.enums import AttendanceStatus
from ..core.exceptions import AlreadyCheckedInError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, is_duplicate_key, to_float
from .model import AttendanceReportRow, AttendanceSession, LocationDetails
from .repository import AttendanceRepository

_SESSION_COLUMNS = """
    attendance_id, employee_id, work_date, punch_in, punch_out, status, work_hours,
    punch_in_latitude, punch_in_longitude, punch_in_address, punch_in_area, punch_in_city, punch_in_pincode,
    punch_out_latitude, punch_out_longitude, punch_out_address, punch_out_area, punch_out_city, punch_out_pincode,
    punch_in_selfie, punch_out_selfie
"""


def _location(row: Dict[str, Any], prefix: str) -> Optional[LocationDetails]:
    lat = row.get(f"{prefix}_latitude")
    lon = row.get(f"{prefix}_longitude")
    if lat is None or lon is None:
        return None
    return LocationDetails(
        latitude=to_float(lat),
        longitude=to_float(lon),
        address=row.get(f"{prefix}_address") or "",
        area=row.get(f"{prefix}_area") or "",
        city=row.get(f"{prefix}_city") or "",
        pincode=row.get(f"{prefix}_pincode") or "",
    )


def _row_to_session(r: Dict[str, Any]) -> AttendanceSession:
    return AttendanceSession(
        attendance_id=int(r["attendance_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        punch_in=r["punch_in"],
        punch_out=r.get("punch_out"),
        status=AttendanceStatus(r["status"]),
        work_hours=to_float(r.get("work_hours")),
        punch_in_location=_location(r, "punch_in"),
        punch_out_location=_location(r, "punch_out"),
        punch_in_selfie=r.get("punch_in_selfie"),
        punch_out_selfie=r.get("punch_out_selfie"),
    )


def _location_params(location: Optional[LocationDetails]) -> tuple:
    if not location:
        return (None, None, None, None, None, None)
    return (
        location.latitude,
        location.longitude,
        location.address,
        location.area,
        location.city,
        location.pincode,
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_SESSION_COLUMNS} FROM attendance_sessions WHERE employee_id=%s AND work_date=%s",
                (employee_id, work_date),
            )
            r = fetchone(cur)
            return _row_to_session(r) if r else None

    def _get_by_id(self, cur, attendance_id: int) -> AttendanceSession:
        cur.execute(f"SELECT {_SESSION_COLUMNS} FROM attendance_sessions WHERE attendance_id=%s", (attendance_id,))
        return _row_to_session(fetchone(cur))

    def list_for_employee(
        self,
        employee_id: int,
        *,
        limit: int,
        offset: int = 0,
        work_date: Optional[date] = None,
    ) -> Sequence[AttendanceSession]:
        where = "WHERE employee_id=%s"
        params: list[Any] = [employee_id]
        if work_date:
            where += " AND work_date=%s"
            params.append(work_date)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_SESSION_COLUMNS}
                FROM attendance_sessions
                {where}
                ORDER BY work_date DESC
                LIMIT %s OFFSET %s
                """,
                tuple(params + [int(limit), int(offset)]),
            )
            return [_row_to_session(r) for r in fetchall(cur)]

    def count_for_employee(self, employee_id: int, *, work_date: Optional[date] = None) -> int:
        where = "WHERE employee_id=%s"
        params: list[Any] = [employee_id]
        if work_date:
            where += " AND work_date=%s"
            params.append(work_date)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total FROM attendance_sessions {where}", tuple(params))
            r = fetchone(cur)
            return int(r["total"]) if r else 0

    def create_checkin(
        self,
        *,
        employee_id: int,
        work_date: date,
        punch_in: datetime,
        status: AttendanceStatus,
        location: LocationDetails,
        selfie: Optional[str] = None,
    ) -> AttendanceSession:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_sessions(
                        employee_id, work_date, punch_in, status,
                        punch_in_latitude, punch_in_longitude, punch_in_address,
                        punch_in_area, punch_in_city, punch_in_pincode, punch_in_selfie
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (employee_id, work_date, punch_in, status.value, *_location_params(location), selfie),
                )
                return self._get_by_id(cur, int(cur.lastrowid))
        except IntegrityError as e:
            # The unique key (employee_id, work_date) settles concurrent check-ins.
            if is_duplicate_key(e):
                raise AlreadyCheckedInError() from e
            raise

    def update_checkout(
        self,
        *,
        attendance_id: int,
        punch_out: datetime,
        status: AttendanceStatus,
        work_hours: float,
        location: Optional[LocationDetails] = None,
        selfie: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_sessions
                SET punch_out=%s, status=%s, work_hours=%s,
                    punch_out_latitude=%s, punch_out_longitude=%s, punch_out_address=%s,
                    punch_out_area=%s, punch_out_city=%s, punch_out_pincode=%s,
                    punch_out_selfie=COALESCE(%s, punch_out_selfie)
                WHERE attendance_id=%s AND punch_out IS NULL
                """,
                (punch_out, status.value, work_hours, *_location_params(location), selfie, attendance_id),
            )
            return cur.rowcount > 0

    def get_report_rows(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[int] = None,
        branch_id: Optional[int] = None,
    ) -> Sequence[AttendanceReportRow]:
        where = ["a.work_date BETWEEN %s AND %s"]
        params: list[Any] = [start_date, end_date]
        if employee_id:
            where.append("a.employee_id=%s")
            params.append(employee_id)
        if branch_id:
            where.append("e.branch_id=%s")
            params.append(branch_id)
        where_sql = " AND ".join(where)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT a.employee_id, e.full_name, e.username, b.name AS branch_name,
                       a.work_date, a.punch_in, a.punch_out, a.status, a.work_hours
                FROM attendance_sessions a
                JOIN employees e ON e.employee_id = a.employee_id
                LEFT JOIN branches b ON b.branch_id = e.branch_id
                WHERE {where_sql}
                ORDER BY a.work_date DESC, e.full_name
                """,
                tuple(params),
            )
            return [
                AttendanceReportRow(
                    employee_id=int(r["employee_id"]),
                    full_name=r["full_name"],
                    username=r["username"],
                    branch_name=r.get("branch_name"),
                    work_date=r["work_date"],
                    punch_in=r["punch_in"],
                    punch_out=r.get("punch_out"),
                    status=AttendanceStatus(r["status"]),
                    work_hours=to_float(r.get("work_hours")),
                )
                for r in fetchall(cur)
            ]
