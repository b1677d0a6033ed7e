"""JSON / document conversion and YAML record file loading and saving."""

from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Type, TypeVar, Union

import yaml

from . import errors
from .logger import get_logger
from .model import Model, is_zero_id, parse_object_id, parse_timestamp, plain_value
from .records import RecordSet, SECTIONS
from .tracking import TrackingData
from .user import User
from .vehicle import Vehicle

logger = get_logger(__name__)

M = TypeVar("M", bound=Model)

SECTION_TYPES: Dict[str, Type[Model]] = {
    "users": User,
    "vehicles": Vehicle,
    "tracking": TrackingData,
}


# =============================================================================
# JSON representation
# =============================================================================


def _json_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    value = plain_value(value)
    if value is not None and not isinstance(value, (str, int, float, bool)):
        # ObjectId references
        return str(value)
    return value


def to_json(record: Model, include_secrets: bool = False) -> Dict[str, Any]:
    """
    Serialize a record to its flat JSON object.

    id is omitted while unset, deleted_at while absent. Secret fields
    (the user password hash) are only written when include_secrets is set,
    which record files do.
    """
    d: Dict[str, Any] = {}
    if not is_zero_id(record.id):
        d["id"] = str(record.id)
    for name in record.JSON_FIELDS:
        d[name] = _json_value(getattr(record, name))
    if include_secrets:
        for name in record.SECRET_FIELDS:
            d[name] = getattr(record, name)
    d["created_at"] = _json_value(record.created_at)
    d["updated_at"] = _json_value(record.updated_at)
    if record.deleted_at is not None:
        d["deleted_at"] = _json_value(record.deleted_at)
    return d


def from_json(cls: Type[M], data: Dict[str, Any]) -> M:
    """Build a record of type `cls` from its JSON object."""
    record = cls()
    if data.get("id"):
        record.id = parse_object_id(data["id"])
    _read_fields(record, data, cls.JSON_FIELDS + cls.SECRET_FIELDS)
    return record


# =============================================================================
# Document mapping
# =============================================================================


def to_document(record: Model) -> Dict[str, Any]:
    """Serialize a record to a document; ObjectIds and datetimes stay native."""
    d: Dict[str, Any] = {}
    if not is_zero_id(record.id):
        d["_id"] = record.id
    for name in record.DOCUMENT_FIELDS:
        d[name] = plain_value(getattr(record, name))
    d["created_at"] = record.created_at
    d["updated_at"] = record.updated_at
    if record.deleted_at is not None:
        d["deleted_at"] = record.deleted_at
    return d


def from_document(cls: Type[M], document: Dict[str, Any]) -> M:
    """Build a record of type `cls` from a stored document."""
    record = cls()
    if document.get("_id") is not None:
        record.id = parse_object_id(document["_id"])
    _read_fields(record, document, cls.DOCUMENT_FIELDS)
    return record


def _read_fields(record: Model, data: Dict[str, Any], fields) -> None:
    for name in fields:
        if name not in data or data[name] is None:
            continue
        value = data[name]
        error = record.OBJECT_ID_FIELDS.get(name)
        if error is not None:
            value = parse_object_id(value, error) if value != "" else None
        setattr(record, name, value)
    record.created_at = parse_timestamp(data.get("created_at"))
    record.updated_at = parse_timestamp(data.get("updated_at"))
    record.deleted_at = parse_timestamp(data.get("deleted_at"))


# =============================================================================
# Record files
# =============================================================================


def load_records(filename: Union[str, Path]) -> RecordSet:
    """Load users, vehicles and tracking data from a YAML (or JSON) file."""
    with open(filename, "r") as fp:
        data = yaml.load(fp, Loader=yaml.SafeLoader) or {}

    if not isinstance(data, dict):
        raise errors.ModelError(f"{filename}: expected a mapping of record sections")

    sections = {}
    for name in SECTIONS:
        cls = SECTION_TYPES[name]
        sections[name] = [from_json(cls, item) for item in data.get(name) or []]

    record_set = RecordSet(**sections)
    logger.debug("Loaded %d records from %s", len(record_set), filename)
    return record_set


def save_records(filename: Union[str, Path], record_set: RecordSet) -> None:
    """
    Write a record set to a YAML file.

    Sections without records are left out.
    """
    data: Dict[str, Any] = {}
    for name in SECTIONS:
        records = record_set.section(name)
        if records:
            data[name] = [to_json(record, include_secrets=True) for record in records]

    with open(filename, "w") as fp:
        yaml.dump(
            data,
            fp,
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
            width=120,
        )
    logger.info("Saved %d records to %s", len(record_set), filename)
