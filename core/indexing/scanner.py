# Path: core/indexing/scanner.py
# Purpose: Scan user task folders and collect script file paths grouped by category.
# Layer: core/indexing.
# Details: Provides per-root category discovery, category-name inference, and the task sort key.

from __future__ import annotations

import logging
import os
import re
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

from core.models.domain import MISC_CATEGORY, Category, DirectoryEntry, ScanError, TaskIdentifier

from .lister import DirectoryLister, DirectoryListingError, FileSystemDirectoryLister

SUPPORTED_EXTENSIONS = (".gd", ".cs")

logger = logging.getLogger(__name__)

_WORD_SEPARATOR = re.compile(r"[\W_]+")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


@dataclass
class ScanResult:
    """Tasks and errors collected from one user task root."""

    tasks: Dict[Category, List[TaskIdentifier]] = field(default_factory=dict)
    errors: List[ScanError] = field(default_factory=list)


def capitalize(name: str) -> str:
    """Turn a directory name into a display category.

    Words are split on non-alphanumeric characters and camelCase boundaries,
    then title-cased: ``patrol_tasks`` and ``patrolTasks`` both give
    ``Patrol Tasks``.
    """

    words: List[str] = []
    for chunk in _WORD_SEPARATOR.split(name):
        if not chunk:
            continue
        words.extend(_CAMEL_BOUNDARY.sub(" ", chunk).split())
    return " ".join(word[:1].upper() + word[1:].lower() for word in words)


def task_basename(identifier: TaskIdentifier) -> str:
    """Return the final path segment, accepting both separator styles."""

    return identifier[max(identifier.rfind("/"), identifier.rfind("\\")) + 1 :]


def task_sort_key(identifier: TaskIdentifier) -> Tuple[str, str]:
    """Order by case-insensitive basename, then by the full identifier."""

    return task_basename(identifier).lower(), identifier


@contextmanager
def _listing(lister: DirectoryLister, path: str) -> Iterator[Iterable[DirectoryEntry]]:
    handle = lister.open(path)
    try:
        yield lister.list(handle)
    finally:
        lister.close(handle)


def _read_entries(lister: DirectoryLister, path: str) -> List[DirectoryEntry]:
    with _listing(lister, path) as entries:
        return list(entries)


def _report(path: str, exc: DirectoryListingError) -> ScanError:
    logger.error('Failed to list "%s" directory.', path)
    return ScanError(path=path, reason=exc.reason)


def collect_script_files(
    path: str,
    extensions: Sequence[str] = SUPPORTED_EXTENSIONS,
    lister: Optional[DirectoryLister] = None,
) -> Tuple[List[TaskIdentifier], List[ScanError]]:
    """Return script files directly inside ``path`` (no recursion)."""

    if not path:
        return [], []

    lister = lister or FileSystemDirectoryLister()
    suffixes = tuple(extensions)
    try:
        entries = _read_entries(lister, path)
    except DirectoryListingError as exc:
        return [], [_report(path, exc)]

    found = [os.path.join(path, entry.name) for entry in entries if entry.name.endswith(suffixes)]
    return found, []


def scan_user_dir(
    root: str,
    extensions: Sequence[str] = SUPPORTED_EXTENSIONS,
    lister: Optional[DirectoryLister] = None,
) -> ScanResult:
    """Collect tasks from one user root.

    Each visible first-level subdirectory becomes a category holding the
    scripts found directly inside it. Scripts lying directly in the root go to
    the misc category. Hidden entries (including ``.`` and ``..``) are skipped.
    """

    result = ScanResult()
    if not root:
        logger.debug("Skipping empty user task directory entry")
        return result

    lister = lister or FileSystemDirectoryLister()
    try:
        entries = _read_entries(lister, root)
    except DirectoryListingError as exc:
        result.errors.append(_report(root, exc))
        return result

    for entry in entries:
        if not entry.is_dir or entry.name.startswith("."):
            continue
        category = capitalize(entry.name)
        task_list = result.tasks.setdefault(category, [])
        found, errors = collect_script_files(os.path.join(root, entry.name), extensions, lister)
        task_list.extend(found)
        result.errors.extend(errors)

    loose, errors = collect_script_files(root, extensions, lister)
    result.tasks.setdefault(MISC_CATEGORY, []).extend(loose)
    result.errors.extend(errors)

    logger.debug(
        "Scanned %s: %d categories, %d tasks",
        root,
        len(result.tasks),
        sum(len(task_list) for task_list in result.tasks.values()),
    )
    return result
