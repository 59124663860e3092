from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional

from ..branches.model import Branch
from ..common.datetime_utils import to_iso
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class LocationDetails:
    latitude: float
    longitude: float
    address: str = ""
    area: str = ""
    city: str = ""
    pincode: str = ""

    def to_dict(self) -> dict:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            "address": self.address,
            "area": self.area,
            "city": self.city,
            "pincode": self.pincode,
        }


@dataclass(frozen=True)
class PunchRequest:
    """Raw punch payload as received from the client (values not yet validated)."""

    latitude: Any = None
    longitude: Any = None
    address: Optional[str] = None
    area: Optional[str] = None
    city: Optional[str] = None
    pincode: Optional[str] = None
    selfie: Optional[str] = None

    @classmethod
    def from_json(cls, data: Optional[dict]) -> "PunchRequest":
        if not isinstance(data, dict):
            data = {}
        return cls(
            latitude=data.get("latitude"),
            longitude=data.get("longitude"),
            address=data.get("address"),
            area=data.get("area"),
            city=data.get("city"),
            pincode=data.get("pincode"),
            selfie=data.get("selfie"),
        )

    def location(self, latitude: float, longitude: float) -> LocationDetails:
        return LocationDetails(
            latitude=latitude,
            longitude=longitude,
            address=self.address or "",
            area=self.area or "",
            city=self.city or "",
            pincode=str(self.pincode or ""),
        )


@dataclass(frozen=True)
class AttendanceSession:
    """Domain entity: one employee's check-in/check-out pair for one calendar date."""

    attendance_id: int
    employee_id: int
    work_date: date
    punch_in: datetime
    status: AttendanceStatus
    punch_out: Optional[datetime] = None
    work_hours: Optional[float] = None
    punch_in_location: Optional[LocationDetails] = None
    punch_out_location: Optional[LocationDetails] = None
    punch_in_selfie: Optional[str] = field(default=None, repr=False)
    punch_out_selfie: Optional[str] = field(default=None, repr=False)

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "employeeId": self.employee_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "punchIn": to_iso(self.punch_in),
            "punchOut": to_iso(self.punch_out),
            "status": self.status.value,
            "workHours": self.work_hours,
            "location": {
                "punchIn": self.punch_in_location.to_dict() if self.punch_in_location else None,
                "punchOut": self.punch_out_location.to_dict() if self.punch_out_location else None,
            },
            "punchInSelfie": self.punch_in_selfie,
            "punchOutSelfie": self.punch_out_selfie,
        }


@dataclass(frozen=True)
class TodayView:
    session: Optional[AttendanceSession]
    branch: Optional[Branch]

    def to_dict(self) -> dict:
        branch = None
        if self.branch:
            branch = {
                "name": self.branch.name,
                "address": self.branch.address,
                "latitude": self.branch.latitude,
                "longitude": self.branch.longitude,
            }
        return {"data": self.session.to_dict() if self.session else None, "branch": branch}


@dataclass(frozen=True)
class HistoryPage:
    items: list[AttendanceSession]
    page: int
    limit: int
    total: int

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0

    def to_dict(self) -> dict:
        return {
            "data": [s.to_dict() for s in self.items],
            "pagination": {"page": self.page, "limit": self.limit, "total": self.total, "pages": self.pages},
        }


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for reports/exports (joined with employee and branch)."""

    employee_id: int
    full_name: str
    username: str
    branch_name: Optional[str]
    work_date: date
    punch_in: datetime
    punch_out: Optional[datetime]
    status: AttendanceStatus
    work_hours: Optional[float]
