from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""

    kind = "DomainError"


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    kind = "ValidationError"


class MissingLocationError(ValidationError):
    """Raised when a punch request does not carry latitude/longitude."""

    kind = "MissingLocation"

    def __init__(self, message: str = "Location is required"):
        super().__init__(message)


class GeofenceRejectedError(ValidationError):
    """Raised when the claimed point lies outside the allowed radius."""

    kind = "GeofenceRejected"

    def __init__(self, *, distance_meters: float, radius_meters: float, reference_name: Optional[str] = None):
        self.distance_meters = distance_meters
        self.radius_meters = radius_meters
        self.reference_name = reference_name
        super().__init__(
            f"You are {distance_meters:.0f}m away from {reference_name or 'office'}. "
            f"Must be within {radius_meters:.0f}m."
        )


class AlreadyCheckedInError(ValidationError):
    kind = "AlreadyCheckedIn"

    def __init__(self, message: str = "Already checked in today"):
        super().__init__(message)


class AlreadyCheckedOutError(ValidationError):
    kind = "AlreadyCheckedOut"

    def __init__(self, message: str = "Already checked out today"):
        super().__init__(message)


class SessionNotFoundError(DomainError):
    """Raised when checking out without a check-in for the day."""

    kind = "SessionNotFound"

    def __init__(self, message: str = "No check-in record found for today"):
        super().__init__(message)


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

    kind = "AuthenticationError"
