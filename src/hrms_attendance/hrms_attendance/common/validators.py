from __future__ import annotations

from typing import Any

from ..core.exceptions import MissingLocationError, ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _as_float(value: Any, field_name: str) -> float:
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None


def require_latitude(value: float) -> float:
    if not -90.0 <= value <= 90.0:
        raise ValidationError("latitude must be between -90 and 90")
    return value


def require_longitude(value: float) -> float:
    if not -180.0 <= value <= 180.0:
        raise ValidationError("longitude must be between -180 and 180")
    return value


def require_coordinates(latitude: Any, longitude: Any) -> tuple[float, float]:
    """Coerce request coordinates; 0 is a valid coordinate, only absent/blank counts as missing."""
    if _is_blank(latitude) or _is_blank(longitude):
        raise MissingLocationError()
    lat = require_latitude(_as_float(latitude, "latitude"))
    lon = require_longitude(_as_float(longitude, "longitude"))
    return lat, lon


def has_coordinates(latitude: Any, longitude: Any) -> bool:
    return not _is_blank(latitude) and not _is_blank(longitude)


def coerce_positive_int(value: Any, default: int, *, maximum: int | None = None) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError):
        return default
    if n < 1:
        return default
    if maximum is not None and n > maximum:
        return maximum
    return n
