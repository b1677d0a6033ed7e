"""Tracking data - periodic location, mileage and fuel readings for a vehicle."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional

from bson import ObjectId

from . import errors
from .model import Model, is_zero_id, parse_object_id, plain_value
from .vehicle import VehicleStatus


class FuelCondition(str, Enum):
    """Coarse fuel tank level."""

    EMPTY = "empty"
    LOW = "low"
    HALF = "half"
    FULL = "full"

    @classmethod
    def validate(cls, value: Any) -> "FuelCondition":
        if not value:
            raise errors.FuelConditionEmpty()
        try:
            return cls(value)
        except ValueError:
            raise errors.InvalidFuelCondition() from None


def _check_reading(location: str, mileage: float, status: Any, fuel_condition: Any):
    """Checks shared by stored tracking data and incoming requests."""
    if not location:
        raise errors.LocationEmpty()
    # Mileage may be fractional but never zero
    if mileage == 0:
        raise errors.MileageEmpty()
    VehicleStatus.validate(status)
    FuelCondition.validate(fuel_condition)


@dataclass
class TrackingData(Model):
    """A single reading reported for a vehicle."""

    vehicle_id: Optional[ObjectId] = None
    location: str = ""
    mileage: float = 0.0
    status: str = ""
    fuel_condition: str = ""

    JSON_FIELDS = ("vehicle_id", "location", "mileage", "status", "fuel_condition")
    DOCUMENT_FIELDS = JSON_FIELDS
    OBJECT_ID_FIELDS = {"vehicle_id": errors.InvalidVehicleID}

    def set_vehicle_id(self, vehicle_id: Any) -> "TrackingData":
        self.vehicle_id = parse_object_id(vehicle_id, errors.InvalidVehicleID)
        return self

    def set_location(self, location: str) -> "TrackingData":
        self.location = location
        return self

    def set_mileage(self, mileage: float) -> "TrackingData":
        self.mileage = mileage
        return self

    def set_status(self, status: Any) -> "TrackingData":
        self.status = plain_value(status)
        return self

    def set_fuel_condition(self, fuel_condition: Any) -> "TrackingData":
        self.fuel_condition = plain_value(fuel_condition)
        return self

    def validate(self) -> None:
        if is_zero_id(self.vehicle_id):
            raise errors.VehicleIDEmpty()
        if not isinstance(self.vehicle_id, ObjectId):
            raise errors.InvalidVehicleID()
        _check_reading(self.location, self.mileage, self.status, self.fuel_condition)


class TrackingDataRequest:
    """Incoming payload for recording tracking data; vehicle_id is a hex string."""

    def __init__(
        self,
        vehicle_id: str = "",
        location: str = "",
        mileage: float = 0.0,
        status: str = "",
        fuel_condition: str = "",
    ):
        self.vehicle_id = vehicle_id
        self.location = location
        self.mileage = mileage
        self.status = status
        self.fuel_condition = fuel_condition

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TrackingDataRequest":
        return cls(
            data.get("vehicle_id") or "",
            data.get("location") or "",
            data.get("mileage") or 0.0,
            data.get("status") or "",
            data.get("fuel_condition") or "",
        )

    def validate(self) -> None:
        if not self.vehicle_id:
            raise errors.VehicleIDEmpty()
        parse_object_id(self.vehicle_id, errors.InvalidVehicleID)
        _check_reading(self.location, self.mileage, self.status, self.fuel_condition)

    def to_tracking_data(self) -> TrackingData:
        """Convert to an unsaved TrackingData record."""
        return TrackingData(
            vehicle_id=parse_object_id(self.vehicle_id, errors.InvalidVehicleID),
            location=self.location,
            mileage=self.mileage,
            status=plain_value(self.status),
            fuel_condition=plain_value(self.fuel_condition),
        )
