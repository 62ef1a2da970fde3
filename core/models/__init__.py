# Path: core/models/__init__.py
# Purpose: Package initializer for domain model definitions.
# Layer: core/models.
# Details: Exposes dataclasses used across registration, scanning, and catalog layers.

from .domain import MISC_CATEGORY, Catalog, Category, DirectoryEntry, ScanError, TaskIdentifier

__all__ = ["MISC_CATEGORY", "Catalog", "Category", "DirectoryEntry", "ScanError", "TaskIdentifier"]
