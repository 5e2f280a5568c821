"""
Database package - Infrastructure Layer

Mapping between device records and the documents of the document store.
"""

from remote_monitoring.infrastructure.database.device_document import (
    device_from_document,
    device_to_document,
)

__all__ = ["device_from_document", "device_to_document"]
