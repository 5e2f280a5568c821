"""
Domain Services Package

Stateless helpers operating on device records.
"""

from . import device_schema, document_schema

__all__ = ["device_schema", "document_schema"]
