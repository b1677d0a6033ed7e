"""Model base class - identity, timestamps and the validate/build/check lifecycle."""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, Type

from bson import ObjectId
from dateutil.parser import isoparse

from . import errors
from .logger import get_logger

logger = get_logger(__name__)

ZERO_ID = ObjectId("0" * 24)


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def is_zero_id(value: Any) -> bool:
    """True when an identifier is unset (None, empty or all zeros)."""
    return not value or value == ZERO_ID


def parse_object_id(
    value: Any, error: Type[errors.ModelError] = errors.InvalidID
) -> ObjectId:
    """Convert a hex string (or ObjectId) to an ObjectId, raising `error` if malformed."""
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    raise error()


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Read a timestamp from JSON, YAML or a document.

    Accepts ISO-8601 strings and datetime objects. Naive values are UTC.
    """
    if value is None or value == "":
        return None
    if not isinstance(value, datetime):
        try:
            value = isoparse(str(value))
        except (ValueError, OverflowError):
            raise errors.InvalidTimestamp(f"invalid timestamp: {value!r}") from None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def plain_value(value: Any) -> Any:
    """Unwrap enum members to their stored string."""
    return value.value if isinstance(value, Enum) else value


@dataclass
class Model:
    """
    Common base for persisted records.

    Identity is assigned by the persistence layer. Subclasses implement
    validate(); build() runs before a write and check() after a read.
    """

    # Serialized field names, in order; subclasses fill these in
    JSON_FIELDS = ()
    DOCUMENT_FIELDS = ()
    # Fields holding ObjectId references, mapped to the error for a bad value
    OBJECT_ID_FIELDS = {}
    # Fields kept out of API responses but written to record files
    SECRET_FIELDS = ()

    id: Optional[ObjectId] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def validate(self) -> None:
        """Check field correctness, raising the first error found."""
        raise NotImplementedError

    def build(self) -> "Model":
        """
        Prepare the record for saving.

        created_at is only set while unset; updated_at is refreshed on
        every call.
        """
        now = utcnow()
        if self.created_at is None:
            self.created_at = now
        self.updated_at = now
        logger.debug("Built %s (created_at=%s)", type(self).__name__, self.created_at)
        self.validate()
        return self

    def check(self) -> "Model":
        """Verify a record that came back from the database."""
        if is_zero_id(self.id):
            raise errors.IDMissing()
        if not isinstance(self.id, ObjectId):
            raise errors.InvalidID()
        if self.created_at is None:
            raise errors.CreatedAtMissing()
        if self.updated_at is None:
            raise errors.UpdatedAtMissing()
        self.validate()
        return self

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def soft_delete(self) -> "Model":
        """Mark the record deleted without removing it."""
        now = utcnow()
        self.deleted_at = now
        self.updated_at = now
        return self

    def restore(self) -> "Model":
        """Clear the soft-delete marker."""
        self.deleted_at = None
        self.updated_at = utcnow()
        return self
