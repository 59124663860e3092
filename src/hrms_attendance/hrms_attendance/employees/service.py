from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionEmployee:
    """What we store into the Flask session after login."""

    employee_id: int
    full_name: str
    branch_id: Optional[int]


class AuthService:
    """Use case: authenticate employee (login)."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def authenticate(self, username: str, password: str) -> SessionEmployee:
        username = require_non_empty(username, "username")
        employee = self._employees.get_by_username(username)
        if not employee or not employee.is_active:
            raise AuthenticationError("Invalid username or password")

        try:
            ok = isinstance(password, str) and check_password_hash(employee.password_hash, password)
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME'
            ok = False

        if not ok:
            logger.info("Failed login for username=%s", username)
            raise AuthenticationError("Invalid username or password")

        return SessionEmployee(
            employee_id=employee.employee_id,
            full_name=employee.full_name,
            branch_id=employee.branch_id,
        )
