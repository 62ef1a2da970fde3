# Path: core/tasks/registry.py
# Purpose: Keep the built-in task registrations made by startup code.
# Layer: core/tasks.
# Details: Provides an append-only category -> class name store and structural snapshots of it.

from __future__ import annotations

import logging
from typing import Dict, Iterable, List

from core.models.domain import Category, TaskIdentifier

logger = logging.getLogger(__name__)


class RegistrationStore:
    """Record built-in tasks registered at startup.

    This store is the canonical source of:
    - built-in task class names, in registration order.
    - the categories those tasks are displayed under.

    Entries are only ever appended; nothing is removed or reordered.
    """

    def __init__(self) -> None:
        self._tasks: Dict[Category, List[TaskIdentifier]] = {}

    def register(self, class_name: str, category: str) -> None:
        """Append ``class_name`` to ``category``, creating the category if needed."""

        task_list = self._tasks.get(category)
        if task_list is None:
            self._tasks[category] = [class_name]
        else:
            task_list.append(class_name)
        logger.debug("Registered built-in task %s in category %r", class_name, category)

    def snapshot(self) -> Dict[Category, List[TaskIdentifier]]:
        """Return a copy whose lists can be mutated without touching the store."""

        return {category: list(task_list) for category, task_list in self._tasks.items()}

    def categories(self) -> Iterable[Category]:
        """Iterate over registered categories in first-registration order."""

        return iter(list(self._tasks))

    def tasks_in(self, category: Category) -> List[TaskIdentifier]:
        return list(self._tasks.get(category, ()))

    def __contains__(self, category: object) -> bool:
        return category in self._tasks

    def __len__(self) -> int:
        return sum(len(task_list) for task_list in self._tasks.values())
