# Path: config/settings.py
# Purpose: Provide typed configuration for task discovery.
# Layer: config.
# Details: Centralizes user task directories, script extensions, and logging verbosity.

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import List

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "TASKDB"


class TaskDBSettings(BaseModel):
    """Settings consumed by TaskDB when scanning for user-authored tasks."""

    user_task_dirs: List[str] = Field(
        default_factory=lambda: ["ai/tasks"],
        description="Root folders scanned for user task scripts, in scan order.",
    )
    script_extensions: List[str] = Field(
        default_factory=lambda: [".gd", ".cs"],
        description="Filename suffixes recognized as task scripts.",
    )
    load_builtin_tasks: bool = Field(default=True, description="Register built-in tasks at startup.")
    log_level: str = Field(default="INFO", description="Verbosity level for application logs.")

    @field_validator("script_extensions")
    @classmethod
    def _normalize_extensions(cls, value: List[str]) -> List[str]:
        normalized: List[str] = []
        for ext in value:
            ext = ext.strip()
            if not ext:
                continue
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        return normalized

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.strip().upper() or "INFO"

    def get_user_task_directories(self) -> List[str]:
        """Return configured user task roots in scan order."""

        return list(self.user_task_dirs)

    @classmethod
    def from_file(cls, path: Path | str = "taskdb_config.json") -> "TaskDBSettings":
        """Load settings from a JSON file."""

        cfg_path = Path(path)
        payload = json.loads(cfg_path.read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            raise ValueError(f"Expected a JSON object in {cfg_path}")
        return cls.model_validate(payload)

    @classmethod
    def from_env(cls) -> "TaskDBSettings":
        """Instantiate settings, applying TASKDB_* environment overrides when present."""

        overrides: dict = {}
        dirs = os.getenv(f"{ENV_PREFIX}_USER_TASK_DIRS")
        if dirs is not None:
            overrides["user_task_dirs"] = dirs.split(os.pathsep) if dirs else []
        extensions = os.getenv(f"{ENV_PREFIX}_SCRIPT_EXTENSIONS")
        if extensions:
            overrides["script_extensions"] = extensions.split(",")
        log_level = os.getenv(f"{ENV_PREFIX}_LOG_LEVEL")
        if log_level:
            overrides["log_level"] = log_level
        return cls(**overrides)


__all__ = ["TaskDBSettings"]
