"""Vehicle records and their status values."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from . import errors
from .model import Model, plain_value


class VehicleStatus(str, Enum):
    """Lifecycle status of a vehicle in the fleet."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    REPAIR = "repair"
    SOLD = "sold"
    RENTED = "rented"

    @classmethod
    def validate(cls, value: Any) -> "VehicleStatus":
        if not value:
            raise errors.VehicleStatusEmpty()
        try:
            return cls(value)
        except ValueError:
            raise errors.InvalidVehicleStatus() from None


@dataclass
class Vehicle(Model):
    """A vehicle in the fleet."""

    vehicle_name: str = ""
    vehicle_model: str = ""
    vehicle_status: str = ""
    mileage: float = 0.0
    license_number: str = ""

    JSON_FIELDS = (
        "vehicle_name",
        "vehicle_model",
        "vehicle_status",
        "mileage",
        "license_number",
    )
    DOCUMENT_FIELDS = JSON_FIELDS

    @property
    def display_name(self) -> str:
        """Human-readable name, e.g. 'Hilux (Toyota) ABC-123'."""
        base = self.vehicle_name
        if self.vehicle_model:
            base = f"{base} ({self.vehicle_model})"
        return f"{base} {self.license_number}" if self.license_number else base

    def set_vehicle_name(self, name: str) -> "Vehicle":
        self.vehicle_name = name
        return self

    def set_vehicle_model(self, model: str) -> "Vehicle":
        self.vehicle_model = model
        return self

    def set_vehicle_status(self, status: Any) -> "Vehicle":
        self.vehicle_status = plain_value(status)
        return self

    def set_mileage(self, mileage: float) -> "Vehicle":
        self.mileage = mileage
        return self

    def set_license_number(self, license_number: str) -> "Vehicle":
        self.license_number = license_number
        return self

    def validate(self) -> None:
        if not self.vehicle_name:
            raise errors.VehicleNameEmpty()
        if not self.vehicle_model:
            raise errors.VehicleModelEmpty()
        VehicleStatus.validate(self.vehicle_status)
        # Mileage is not checked: a brand new vehicle legitimately has 0.
        if not self.license_number:
            raise errors.LicenseNumberEmpty()
