"""
Main module - Composition Root

Settings loading and logging bootstrap for applications embedding the
device schema package.
"""

from .config import AppSettings, get_settings, init_logging

__all__ = ["AppSettings", "get_settings", "init_logging"]
