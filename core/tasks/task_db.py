# Path: core/tasks/task_db.py
# Purpose: Merge built-in registrations and discovered user scripts into the queryable task catalog.
# Layer: core/tasks.
# Details: Provides TaskDB, the owned registry object handed to startup code, the API, and scripts.

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from core.indexing.lister import DirectoryLister
from core.indexing.scanner import SUPPORTED_EXTENSIONS, scan_user_dir, task_sort_key
from core.models.domain import MISC_CATEGORY, Catalog, Category, ScanError, TaskIdentifier

from .base import TaskDirectoryConfig
from .registry import RegistrationStore

logger = logging.getLogger(__name__)


class TaskDB:
    """Task registry and discovery service.

    Built-in tasks are registered once at startup. ``scan`` rebuilds the
    catalog from those registrations plus the scripts found under the
    configured user directories. Queries only read the last published
    catalog; they never trigger a scan.

    The catalog is built off to the side and published with a single
    reference assignment, so readers observe it either before or after a
    scan, never half-built.
    """

    def __init__(
        self,
        config: Optional[TaskDirectoryConfig] = None,
        lister: Optional[DirectoryLister] = None,
    ) -> None:
        self._config = config
        self._lister = lister
        self._store = RegistrationStore()
        self._catalog = Catalog()

    @property
    def store(self) -> RegistrationStore:
        """Return the built-in registration store."""

        return self._store

    @property
    def catalog(self) -> Catalog:
        """Return the currently published catalog snapshot."""

        return self._catalog

    @property
    def last_scan_errors(self) -> List[ScanError]:
        """Return the directories that could not be listed during the last scan."""

        return list(self._catalog.errors)

    def register(self, class_name: str, category: str) -> None:
        """Register a built-in task. Takes effect on the next scan."""

        self._store.register(class_name, category)

    def scan(self) -> None:
        """Rebuild and publish the catalog.

        External calls:
        - core/indexing/scanner.py::scan_user_dir - collect scripts per category for each root.
        """

        tasks: Dict[Category, List[TaskIdentifier]] = self._store.snapshot()
        tasks.setdefault(MISC_CATEGORY, [])
        errors: List[ScanError] = []

        for root in self._user_task_directories():
            result = scan_user_dir(root, self._script_extensions(), self._lister)
            for category, found in result.tasks.items():
                tasks.setdefault(category, []).extend(found)
            errors.extend(result.errors)

        for task_list in tasks.values():
            task_list.sort(key=task_sort_key)

        self._catalog = Catalog.from_lists(tasks, tuple(errors))
        logger.info(
            "Task scan finished: categories=%d tasks=%d errors=%d",
            len(tasks),
            len(self._catalog),
            len(errors),
        )

    def get_categories(self) -> List[Category]:
        """Return every category of the current catalog in ascending order."""

        return self._catalog.categories()

    def get_tasks_in_category(self, category: str) -> List[TaskIdentifier]:
        """Return the sorted tasks of ``category``; empty when it is unknown."""

        return self._catalog.tasks_in(category)

    def _user_task_directories(self) -> Sequence[str]:
        if self._config is None:
            return ()
        return list(self._config.get_user_task_directories())

    def _script_extensions(self) -> Sequence[str]:
        if self._config is None:
            return SUPPORTED_EXTENSIONS
        return tuple(self._config.script_extensions)
