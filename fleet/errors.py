"""
Errors raised by the fleet models.

Every missing or malformed field has its own exception class so callers
can tell them apart with ``except`` clauses or ``pytest.raises``. All of
them derive from ModelError, which is a ValueError.
"""

from typing import Optional


class ModelError(ValueError):
    """Base class for all model validation errors."""

    message = "invalid model"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class MissingFieldError(ModelError):
    """A required field is empty or unset."""


class InvalidValueError(ModelError):
    """A field holds a value outside its allowed set or format."""


# ---------------------------------------------------------------------------
# Persistence bookkeeping
# ---------------------------------------------------------------------------
class IDMissing(MissingFieldError):
    message = "id is missing"


class InvalidID(InvalidValueError):
    message = "id is invalid"


class CreatedAtMissing(MissingFieldError):
    message = "created_at is missing"


class UpdatedAtMissing(MissingFieldError):
    message = "updated_at is missing"


class InvalidTimestamp(InvalidValueError):
    message = "timestamp is invalid"


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------
class EmailEmpty(MissingFieldError):
    message = "email is required"


class InvalidEmail(InvalidValueError):
    message = "email is invalid"


class PasswordEmpty(MissingFieldError):
    message = "password is required"


class RoleEmpty(MissingFieldError):
    message = "role is required"


class InvalidRole(InvalidValueError):
    message = "role is invalid"


# ---------------------------------------------------------------------------
# Vehicle
# ---------------------------------------------------------------------------
class VehicleNameEmpty(MissingFieldError):
    message = "vehicle name is required"


class VehicleModelEmpty(MissingFieldError):
    message = "vehicle model is required"


class VehicleStatusEmpty(MissingFieldError):
    message = "vehicle status is required"


class InvalidVehicleStatus(InvalidValueError):
    message = "invalid vehicle status"


class LicenseNumberEmpty(MissingFieldError):
    message = "license number is required"


# ---------------------------------------------------------------------------
# Tracking data
# ---------------------------------------------------------------------------
class VehicleIDEmpty(MissingFieldError):
    message = "vehicle id is empty"


class InvalidVehicleID(InvalidValueError):
    message = "invalid vehicle id"


class LocationEmpty(MissingFieldError):
    message = "location is empty"


class MileageEmpty(MissingFieldError):
    message = "mileage is empty"


class FuelConditionEmpty(MissingFieldError):
    message = "fuel condition is empty"


class InvalidFuelCondition(InvalidValueError):
    message = "invalid fuel condition"
