from __future__ import annotations

from typing import Optional, Protocol

from .model import Employee, OfficeLocation


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_username(self, username: str) -> Optional[Employee]:
        raise NotImplementedError

    def set_office_location(self, employee_id: int, location: OfficeLocation) -> bool:
        raise NotImplementedError
