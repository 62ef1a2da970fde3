# Path: core/indexing/lister.py
# Purpose: Define the directory listing interface used by the task scanner.
# Layer: core/indexing.
# Details: Provides the DirectoryLister protocol, its os.scandir implementation, and the listing error type.

from __future__ import annotations

import os
from typing import Any, Iterator, Protocol

from core.models.domain import DirectoryEntry


class DirectoryListingError(Exception):
    """Raised by a DirectoryLister when a directory cannot be opened or read."""

    def __init__(self, path: str, reason: str = "") -> None:
        super().__init__(f'Failed to list "{path}" directory.' + (f" {reason}" if reason else ""))
        self.path = path
        self.reason = reason


class DirectoryLister(Protocol):
    """Open, enumerate, and close a single directory.

    Handles are scoped to one directory. ``list`` is lazy and finite; it can
    only be restarted by opening the directory again.
    """

    def open(self, path: str) -> Any:
        """Return a handle for ``path`` or raise DirectoryListingError."""

    def list(self, handle: Any) -> Iterator[DirectoryEntry]:
        """Yield the immediate entries of the opened directory."""

    def close(self, handle: Any) -> None:
        """Release the handle returned by ``open``."""


class FileSystemDirectoryLister:
    """DirectoryLister backed by ``os.scandir``."""

    def open(self, path: str) -> Any:
        try:
            return os.scandir(path)
        except (OSError, ValueError) as exc:
            raise DirectoryListingError(path, getattr(exc, "strerror", None) or str(exc)) from exc

    def list(self, handle: Any) -> Iterator[DirectoryEntry]:
        try:
            for entry in handle:
                yield DirectoryEntry(name=entry.name, is_dir=entry.is_dir())
        except (OSError, ValueError) as exc:
            filename = getattr(exc, "filename", None)
            path = os.fsdecode(filename) if filename is not None else "?"
            raise DirectoryListingError(path, getattr(exc, "strerror", None) or str(exc)) from exc

    def close(self, handle: Any) -> None:
        handle.close()
