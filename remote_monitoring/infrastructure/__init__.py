"""
Infrastructure Layer Package

Adapters between the domain entities and the document store.
"""
