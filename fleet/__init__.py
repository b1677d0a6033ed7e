"""
Vehicle tracking domain models.

This package provides the records a vehicle-tracking service stores:
- User: Accounts with an email, password hash and Role
- Vehicle: Fleet vehicles with a VehicleStatus
- TrackingData: Location/mileage/fuel readings for a vehicle
- TrackingDataRequest: Incoming tracking payloads
- RecordSet: The contents of a YAML record file

Every record follows the same lifecycle: validate() checks fields,
build() stamps timestamps before a write, check() verifies a record
read back from storage.
"""

from . import errors
from .model import Model, ZERO_ID, is_zero_id, parse_object_id, parse_timestamp
from .user import User, AuthUser, Role, validate_email
from .vehicle import Vehicle, VehicleStatus
from .tracking import TrackingData, TrackingDataRequest, FuelCondition
from .records import RecordSet
from .loader import (
    to_json,
    from_json,
    to_document,
    from_document,
    load_records,
    save_records,
)

__all__ = [
    "errors",
    "Model",
    "ZERO_ID",
    "is_zero_id",
    "parse_object_id",
    "parse_timestamp",
    "User",
    "AuthUser",
    "Role",
    "validate_email",
    "Vehicle",
    "VehicleStatus",
    "TrackingData",
    "TrackingDataRequest",
    "FuelCondition",
    "RecordSet",
    "to_json",
    "from_json",
    "to_document",
    "from_document",
    "load_records",
    "save_records",
]
