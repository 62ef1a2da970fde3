# Path: core/tasks/base.py
# Purpose: Define the configuration interface consumed by the task catalog.
# Layer: core/tasks.
# Details: Provides the TaskDirectoryConfig protocol implemented by the settings layer.

from __future__ import annotations

from typing import Protocol, Sequence


class TaskDirectoryConfig(Protocol):
    """Configuration source for user task discovery."""

    script_extensions: Sequence[str]

    def get_user_task_directories(self) -> Sequence[str]:
        """Return configured user task roots in scan order."""
