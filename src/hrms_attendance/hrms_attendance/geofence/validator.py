from __future__ import annotations

import math

from ..common.validators import require_latitude, require_longitude
from ..core.constants import DEFAULT_GEOFENCE_RADIUS_METERS, EARTH_RADIUS_KM
from ..core.exceptions import ValidationError
from .model import GeoPoint, ProximityResult


def haversine_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance between two points in kilometres."""
    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.latitude)) * math.cos(math.radians(b.latitude)) * math.sin(d_lon / 2) ** 2
    )
    h = min(h, 1.0)
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def validate_proximity(
    claimed: GeoPoint,
    reference: GeoPoint,
    radius_meters: float = DEFAULT_GEOFENCE_RADIUS_METERS,
) -> ProximityResult:
    for point in (claimed, reference):
        require_latitude(point.latitude)
        require_longitude(point.longitude)
    if radius_meters < 0:
        raise ValidationError("radius must not be negative")

    distance_meters = haversine_km(claimed, reference) * 1000
    return ProximityResult(accepted=distance_meters <= radius_meters, distance_meters=distance_meters)
