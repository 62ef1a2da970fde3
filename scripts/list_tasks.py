# Path: scripts/list_tasks.py
# Purpose: CLI tool to scan user task folders and print the merged task catalog.
# Layer: scripts.
# Details: Demonstrates how to wire settings, built-in registration, and TaskDB scanning together.

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on sys.path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import TaskDBSettings, setup_logging
from core.tasks import TaskDB, register_builtin_tasks


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="List built-in and user-authored tasks by category")
    parser.add_argument("--config", type=Path, default=None, help="JSON settings file")
    parser.add_argument("--dir", dest="dirs", action="append", default=None, help="User task directory (repeatable)")
    parser.add_argument("--ext", dest="extensions", action="append", default=None, help="Script extension (repeatable)")
    parser.add_argument("--no-builtins", action="store_true", help="Skip registering built-in tasks")
    parser.add_argument("--category", type=str, default=None, help="Only print tasks of this category")
    parser.add_argument("--log-level", type=str, default=None, help="Override the configured log level")
    return parser


def load_settings(args: argparse.Namespace) -> TaskDBSettings:
    """Merge the settings source with command-line overrides."""

    settings = TaskDBSettings.from_file(args.config) if args.config else TaskDBSettings.from_env()
    updates: dict = {}
    if args.dirs is not None:
        updates["user_task_dirs"] = args.dirs
    if args.extensions is not None:
        updates["script_extensions"] = args.extensions
    if args.no_builtins:
        updates["load_builtin_tasks"] = False
    if args.log_level:
        updates["log_level"] = args.log_level
    if not updates:
        return settings
    return TaskDBSettings.model_validate({**settings.model_dump(), **updates})


def main(argv: Optional[List[str]] = None) -> int:
    """Scan and print the task catalog."""

    args = build_parser().parse_args(argv)
    settings = load_settings(args)
    setup_logging(settings.log_level)

    task_db = TaskDB(config=settings)
    if settings.load_builtin_tasks:
        register_builtin_tasks(task_db)
    task_db.scan()

    categories = [args.category] if args.category else task_db.get_categories()
    for category in categories:
        print(f"{category}:")
        for task in task_db.get_tasks_in_category(category):
            print(f"  {task}")
    return 1 if task_db.last_scan_errors else 0


if __name__ == "__main__":
    sys.exit(main())
