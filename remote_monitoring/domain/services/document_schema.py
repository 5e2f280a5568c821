"""Generic extraction of document store identifiers from any record."""

from dataclasses import is_dataclass
from typing import Any, Mapping

from remote_monitoring.domain.entities.errors import InvalidArgumentError

STORAGE_ID_KEY = "id"
STORAGE_RESOURCE_ID_KEY = "_rid"

# Document keys mapped onto the attribute names used by the entities.
_ATTRIBUTE_NAMES = {
    STORAGE_ID_KEY: "id",
    STORAGE_RESOURCE_ID_KEY: "resource_id",
}


def _read_key(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(key)

    if is_dataclass(record):
        value = getattr(record, _ATTRIBUTE_NAMES[key], None)
        if value is not None:
            return value

    extra = getattr(record, "extra", None)
    if isinstance(extra, Mapping):
        return extra.get(key)
    return None


def get_document_value(record: Any, key: str) -> str:
    """
    Read a storage identifier from a raw document or an entity.

    Args:
        record: A document mapping or an entity with the matching attribute
            (or an ``extra`` mapping holding the raw key).
        key: Either ``STORAGE_ID_KEY`` or ``STORAGE_RESOURCE_ID_KEY``.

    Returns:
        The identifier as a string, or ``""`` when the record has none.

    Raises:
        InvalidArgumentError: If ``record`` is None.
    """
    if record is None:
        raise InvalidArgumentError("record")

    value = _read_key(record, key)
    if value is None:
        return ""
    return str(value)


def get_storage_id(record: Any) -> str:
    return get_document_value(record, STORAGE_ID_KEY)


def get_storage_resource_id(record: Any) -> str:
    return get_document_value(record, STORAGE_RESOURCE_ID_KEY)
