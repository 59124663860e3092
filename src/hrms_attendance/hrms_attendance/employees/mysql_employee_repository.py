from __future__ import annotations

from typing import Any, Dict, Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, to_float
from .model import Employee, OfficeLocation
from .repository import EmployeeRepository

_SELECT = """
    SELECT employee_id, full_name, username, password_hash, branch_id,
           office_latitude, office_longitude, office_address, is_active
    FROM employees
"""


def _row_to_employee(row: Dict[str, Any]) -> Employee:
    office = None
    if row.get("office_latitude") is not None and row.get("office_longitude") is not None:
        office = OfficeLocation(
            latitude=to_float(row["office_latitude"]),
            longitude=to_float(row["office_longitude"]),
            address=row.get("office_address"),
        )
    return Employee(
        employee_id=int(row["employee_id"]),
        full_name=row["full_name"],
        username=row["username"],
        password_hash=row["password_hash"],
        branch_id=row.get("branch_id"),
        office_location=office,
        is_active=bool(row.get("is_active", True)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE employee_id=%s", (employee_id,))
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def get_by_username(self, username: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE username=%s", (username,))
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def set_office_location(self, employee_id: int, location: OfficeLocation) -> bool:
        # Only the first bootstrap wins if two check-ins race.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET office_latitude=%s, office_longitude=%s, office_address=%s
                WHERE employee_id=%s AND office_latitude IS NULL
                """,
                (location.latitude, location.longitude, location.address, employee_id),
            )
            return cur.rowcount > 0
