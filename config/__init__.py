# Path: config/__init__.py
# Purpose: Package initializer for configuration module.
# Layer: config.
# Details: Exposes the settings model and logging setup for application-wide configuration.

from .logging_setup import setup_logging
from .settings import TaskDBSettings

__all__ = ["TaskDBSettings", "setup_logging"]
