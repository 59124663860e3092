from __future__ import annotations

from typing import Optional

from ..branches.model import Branch
from ..branches.repository import BranchRepository
from ..core.constants import LEGACY_OFFICE_NAME
from ..employees.model import Employee
from .model import Found, NotSet, ReferenceLocation, ReferenceLookup


class ReferenceLocator:
    """Resolve the point an employee's check-in is measured against.

    Order: branch location, then the legacy per-employee office location.
    """

    def __init__(self, branches: BranchRepository):
        self._branches = branches

    def branch_for(self, employee: Employee) -> Optional[Branch]:
        if not employee.branch_id:
            return None
        return self._branches.get_by_id(employee.branch_id)

    def lookup(self, employee: Employee) -> ReferenceLookup:
        branch = self.branch_for(employee)
        if branch and branch.has_location:
            return Found(ReferenceLocation(branch.latitude, branch.longitude, branch.name))

        office = employee.office_location
        if office:
            return Found(ReferenceLocation(office.latitude, office.longitude, LEGACY_OFFICE_NAME))

        return NotSet()
