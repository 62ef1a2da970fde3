# Path: core/tasks/__init__.py
# Purpose: Provide the task registry and catalog interfaces.
# Layer: core/tasks.
# Details: Exposes the registration store, the TaskDB catalog service, and built-in task registration.

from .base import TaskDirectoryConfig
from .builtin import BUILTIN_TASKS, register_builtin_tasks
from .registry import RegistrationStore
from .task_db import TaskDB

__all__ = [
    "TaskDirectoryConfig",
    "BUILTIN_TASKS",
    "register_builtin_tasks",
    "RegistrationStore",
    "TaskDB",
]
