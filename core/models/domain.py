# Path: core/models/domain.py
# Purpose: Define domain models shared across registration, scanning, and catalog queries.
# Layer: core/models.
# Details: Lightweight dataclasses simplify handing catalog snapshots between API, CLI, and core services.

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Tuple

MISC_CATEGORY = "Miscellaneous"

# Built-in class name or full path to a user script file.
TaskIdentifier = str
Category = str


@dataclass(frozen=True)
class DirectoryEntry:
    """Single entry reported by a directory lister."""

    name: str
    is_dir: bool


@dataclass(frozen=True)
class ScanError:
    """A directory that could not be listed during a scan."""

    path: str
    reason: str = ""

    def to_dict(self) -> dict:
        return {"path": self.path, "reason": self.reason}


@dataclass(frozen=True)
class Catalog:
    """Published snapshot mapping each category to its sorted task list.

    Instances are never mutated after construction; a new scan produces a new
    Catalog which replaces the old one as a whole. The directories that could
    not be listed while building it travel with it in ``errors``.
    """

    tasks: Mapping[Category, Tuple[TaskIdentifier, ...]] = field(default_factory=dict)
    errors: Tuple[ScanError, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tasks", MappingProxyType(dict(self.tasks)))
        object.__setattr__(self, "errors", tuple(self.errors))

    @classmethod
    def from_lists(
        cls,
        categories: Mapping[Category, List[TaskIdentifier]],
        errors: Tuple[ScanError, ...] = (),
    ) -> "Catalog":
        """Freeze a freshly built category map into a Catalog."""

        frozen: Dict[Category, Tuple[TaskIdentifier, ...]] = {
            category: tuple(task_list) for category, task_list in categories.items()
        }
        return cls(tasks=frozen, errors=errors)

    def categories(self) -> List[Category]:
        return sorted(self.tasks)

    def tasks_in(self, category: Category) -> List[TaskIdentifier]:
        return list(self.tasks.get(category, ()))

    def __len__(self) -> int:
        return sum(len(task_list) for task_list in self.tasks.values())
