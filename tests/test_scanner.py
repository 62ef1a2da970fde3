# tests/test_scanner.py

from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from core.indexing import (
    DirectoryListingError,
    FileSystemDirectoryLister,
    capitalize,
    collect_script_files,
    scan_user_dir,
    task_sort_key,
)
from core.models.domain import MISC_CATEGORY

from .fakes import FakeDirectoryLister, dirs, files


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("patrol_tasks", "Patrol Tasks"),
        ("combat-tasks", "Combat Tasks"),
        ("combatTasks", "Combat Tasks"),
        ("HTTPRequest", "Http Request"),
        ("MY  dir", "My Dir"),
        ("__private__", "Private"),
        ("v2_tasks", "V2 Tasks"),
        ("utility", "Utility"),
    ],
)
def test_capitalize(name: str, expected: str) -> None:
    assert capitalize(name) == expected


def test_task_sort_key_is_case_insensitive_on_basename() -> None:
    ids = ["/b/Zebra.gd", "/z/apple.gd", "BTWait", "/a/bTWait.gd"]
    assert sorted(ids, key=task_sort_key) == ["/z/apple.gd", "BTWait", "/a/bTWait.gd", "/b/Zebra.gd"]


def test_task_sort_key_breaks_ties_by_full_identifier() -> None:
    ids = ["/root2/sub/attack.gd", "/root1/sub/attack.gd", "C:\\tasks\\Attack.gd"]
    assert sorted(ids, key=task_sort_key) == [
        "/root1/sub/attack.gd",
        "/root2/sub/attack.gd",
        "C:\\tasks\\Attack.gd",
    ]


def test_collect_script_files_is_one_level_and_filters_extensions(task_root: Path) -> None:
    found, errors = collect_script_files(str(task_root / "combat_tasks"))

    assert errors == []
    assert sorted(found) == sorted(
        [str(task_root / "combat_tasks" / "attack.gd"), str(task_root / "combat_tasks" / "Block.cs")]
    )


def test_collect_script_files_custom_extensions(task_root: Path) -> None:
    found, _ = collect_script_files(str(task_root), extensions=[".txt"])
    assert found == [str(task_root / "notes.txt")]


def test_collect_script_files_empty_path_is_noop() -> None:
    assert collect_script_files("") == ([], [])


def test_scan_user_dir_infers_categories(task_root: Path) -> None:
    result = scan_user_dir(str(task_root))

    assert result.errors == []
    assert set(result.tasks) == {"Combat Tasks", MISC_CATEGORY}
    assert sorted(result.tasks["Combat Tasks"]) == sorted(
        [str(task_root / "combat_tasks" / "attack.gd"), str(task_root / "combat_tasks" / "Block.cs")]
    )
    assert result.tasks[MISC_CATEGORY] == [str(task_root / "idle.gd")]


def test_scan_user_dir_skips_hidden_directories(task_root: Path) -> None:
    result = scan_user_dir(str(task_root))

    assert "Git" not in result.tasks
    assert all(".git" not in path for paths in result.tasks.values() for path in paths)


def test_scan_user_dir_reports_unreadable_root(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    missing = str(tmp_path / "missing")
    with caplog.at_level(logging.ERROR, logger="core.indexing.scanner"):
        result = scan_user_dir(missing)

    assert result.tasks == {}
    assert [e.path for e in result.errors] == [missing]
    assert f'Failed to list "{missing}" directory.' in caplog.text


def test_scan_user_dir_empty_root_is_silent(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.ERROR):
        result = scan_user_dir("")

    assert result.tasks == {} and result.errors == []
    assert caplog.records == []


def test_scan_user_dir_continues_after_unreadable_subdirectory() -> None:
    root = "/proj/tasks"
    good = os.path.join(root, "good")
    lister = FakeDirectoryLister(
        tree={
            root: dirs("broken", "good", ".", "..") + files("loose.cs"),
            good: files("walk.gd", "readme.md"),
        }
    )

    result = scan_user_dir(root, lister=lister)

    assert [e.path for e in result.errors] == [os.path.join(root, "broken")]
    assert result.tasks["Broken"] == []
    assert result.tasks["Good"] == [os.path.join(good, "walk.gd")]
    assert result.tasks[MISC_CATEGORY] == [os.path.join(root, "loose.cs")]
    # "." and ".." never produce a second pass over the root.
    assert lister.opened.count(root) == 2


def test_scan_user_dir_closes_every_handle() -> None:
    root = "/proj/tasks"
    lister = FakeDirectoryLister(
        tree={root: dirs("a", "b"), os.path.join(root, "a"): [], os.path.join(root, "b"): files("x.gd")}
    )

    scan_user_dir(root, lister=lister)

    assert sorted(lister.opened) == sorted(lister.closed)


def test_filesystem_lister_raises_listing_error(tmp_path: Path) -> None:
    lister = FileSystemDirectoryLister()
    with pytest.raises(DirectoryListingError) as info:
        lister.open(str(tmp_path / "nope"))

    assert info.value.path == str(tmp_path / "nope")
    assert "Failed to list" in str(info.value)


def test_filesystem_lister_reports_directories(tmp_path: Path) -> None:
    (tmp_path / "sub").mkdir()
    (tmp_path / "file.gd").write_text("", encoding="utf-8")
    lister = FileSystemDirectoryLister()

    handle = lister.open(str(tmp_path))
    try:
        entries = {e.name: e.is_dir for e in lister.list(handle)}
    finally:
        lister.close(handle)

    assert entries == {"sub": True, "file.gd": False}


def test_filesystem_lister_wraps_invalid_path() -> None:
    lister = FileSystemDirectoryLister()
    with pytest.raises(DirectoryListingError) as info:
        lister.open("bad\x00root")

    assert info.value.path == "bad\x00root"
    assert isinstance(info.value.__cause__, ValueError)
