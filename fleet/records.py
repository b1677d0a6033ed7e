"""RecordSet - the users, vehicles and tracking data held in one record file."""

from typing import Iterator, List, Optional, Tuple, Union

from bson import ObjectId

from .model import Model
from .tracking import TrackingData
from .user import User
from .vehicle import Vehicle

# Record file section names, in file order
SECTIONS = ("users", "vehicles", "tracking")


class RecordSet:
    """All records loaded from a record file."""

    def __init__(
        self,
        users: Optional[List[User]] = None,
        vehicles: Optional[List[Vehicle]] = None,
        tracking: Optional[List[TrackingData]] = None,
    ):
        self.users = users or []
        self.vehicles = vehicles or []
        self.tracking = tracking or []

    def __len__(self) -> int:
        return len(self.users) + len(self.vehicles) + len(self.tracking)

    def section(self, name: str) -> List[Model]:
        """Records for a section name ('users', 'vehicles' or 'tracking')."""
        if name not in SECTIONS:
            raise KeyError(f"Unknown section '{name}' (expected one of {', '.join(SECTIONS)})")
        return getattr(self, name)

    def iter_records(self) -> Iterator[Tuple[str, Model]]:
        """Yield (section, record) pairs in file order."""
        for name in SECTIONS:
            for record in getattr(self, name):
                yield name, record

    def get_vehicle(self, vehicle_id: Union[str, ObjectId]) -> Optional[Vehicle]:
        """Find a vehicle by its identifier (hex string or ObjectId)."""
        key = str(vehicle_id)
        for vehicle in self.vehicles:
            if vehicle.id is not None and str(vehicle.id) == key:
                return vehicle
        return None

    def get_user_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive)."""
        email = email.lower()
        for user in self.users:
            if user.email.lower() == email:
                return user
        return None

    def get_tracking_for_vehicle(
        self, vehicle_id: Union[str, ObjectId], include_deleted: bool = False
    ) -> List[TrackingData]:
        """Tracking data reported for a vehicle, newest first."""
        key = str(vehicle_id)
        entries = [
            t
            for t in self.tracking
            if t.vehicle_id is not None
            and str(t.vehicle_id) == key
            and (include_deleted or not t.is_deleted)
        ]
        return sorted(entries, key=_created_key, reverse=True)

    def get_last_tracking(self, vehicle_id: Union[str, ObjectId]) -> Optional[TrackingData]:
        """The most recent live tracking entry for a vehicle."""
        entries = self.get_tracking_for_vehicle(vehicle_id)
        return entries[0] if entries else None

    def get_orphaned_tracking(self) -> List[TrackingData]:
        """Tracking entries whose vehicle is not part of this record set."""
        known = {str(v.id) for v in self.vehicles if v.id is not None}
        return [
            t for t in self.tracking if t.vehicle_id is not None and str(t.vehicle_id) not in known
        ]


def _created_key(entry: TrackingData):
    # Entries never stamped sort last
    return (entry.created_at is not None, entry.created_at or 0)
