"""
Remote Monitoring - Device Schema Package

Helpers for reading, initializing and persisting the device records of the
remote monitoring solution.

Layer Structure:
- Domain: Device entities, errors and the device schema accessors
- Infrastructure: Document store id extraction and document mapping
- Shared: Cross-cutting concerns (logging, constants, environment)
- Main: Configuration settings
"""
