from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class ReferenceLocation:
    """Point an employee's punches are measured against (branch or legacy office)."""

    latitude: float
    longitude: float
    name: Optional[str] = None

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)


@dataclass(frozen=True)
class Found:
    location: ReferenceLocation


@dataclass(frozen=True)
class NotSet:
    """No reference on file: the caller bootstraps one from the claimed point."""


ReferenceLookup = Union[Found, NotSet]


@dataclass(frozen=True)
class ProximityResult:
    accepted: bool
    distance_meters: float
