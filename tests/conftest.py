# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from config import TaskDBSettings

from .fakes import write_tree


@pytest.fixture()
def task_root(tmp_path: Path) -> Path:
    """
    A user task directory shaped like a real project:

    ai/tasks/
      idle.gd                 -> Miscellaneous
      notes.txt               -> ignored (extension)
      combat_tasks/attack.gd  -> Combat Tasks
      combat_tasks/Block.cs   -> Combat Tasks
      combat_tasks/deep/x.gd  -> ignored (one level only)
      .git/hook.gd            -> ignored (hidden)
    """
    root = tmp_path / "ai" / "tasks"
    write_tree(
        root,
        [
            "idle.gd",
            "notes.txt",
            "combat_tasks/attack.gd",
            "combat_tasks/Block.cs",
            "combat_tasks/deep/x.gd",
            ".git/hook.gd",
        ],
    )
    return root


@pytest.fixture()
def settings_for():
    """Build settings for the given roots, keeping the default extensions."""

    def _make(*roots: Path | str) -> TaskDBSettings:
        return TaskDBSettings(user_task_dirs=[str(r) for r in roots])

    return _make


@pytest.fixture()
def restore_root_logging():
    """Put root logger handlers and level back after tests that reconfigure logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
