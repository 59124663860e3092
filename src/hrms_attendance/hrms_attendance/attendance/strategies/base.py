from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ...core.enums import AttendanceStatus


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    work_hours: Optional[float] = None


@dataclass(frozen=True)
class CheckInContext:
    now: datetime
    work_start: datetime


@dataclass(frozen=True)
class CheckOutContext:
    punch_in: datetime
    punch_out: datetime
    prior_status: AttendanceStatus
    work_hours: float
    work_end: datetime
    low_work_hours: float


class CheckInStrategy(ABC):
    """Strategy Pattern: decide the status assigned at check-in."""

    @abstractmethod
    def matches(self, ctx: CheckInContext) -> bool:
        raise NotImplementedError

    @abstractmethod
    def decide(self, ctx: CheckInContext) -> AttendanceStatus:
        raise NotImplementedError


class CheckOutStrategy(ABC):
    """Strategy Pattern: one rule in the ordered check-out rule list."""

    @abstractmethod
    def matches(self, ctx: CheckOutContext) -> bool:
        raise NotImplementedError

    @abstractmethod
    def decide(self, ctx: CheckOutContext) -> AttendanceStatus:
        raise NotImplementedError
