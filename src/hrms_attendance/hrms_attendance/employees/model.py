from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class OfficeLocation:
    """Legacy per-employee office point, used when no branch location exists."""

    latitude: float
    longitude: float
    address: Optional[str] = None


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: plain data object, no DB access code here.
    """

    employee_id: int
    full_name: str
    username: str
    password_hash: str
    branch_id: Optional[int] = None
    office_location: Optional[OfficeLocation] = None
    is_active: bool = True
