"""
Domain Layer Package

Device entities, domain errors and the device schema service. Nothing in
this layer depends on infrastructure or frameworks.
"""

from remote_monitoring.domain import entities, services

__all__ = ["entities", "services"]
