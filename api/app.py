# Path: api/app.py
# Purpose: Expose a FastAPI application for task catalog queries.
# Layer: api.
# Details: Provides health checks, category and task listing, and a rescan endpoint delegating to TaskDB.

from __future__ import annotations

from typing import Any, Dict, Optional

from core.tasks import TaskDB


def create_app(task_db: Optional[TaskDB] = None):  # type: ignore[override]
    """Create a FastAPI app instance serving the provided task catalog."""

    from fastapi import FastAPI, HTTPException

    app = FastAPI(title="TaskDB API", version="0.1.0")

    def _require_db() -> TaskDB:
        if task_db is None:
            raise HTTPException(status_code=500, detail="Task database is not configured.")
        return task_db

    @app.get("/health")
    def health() -> Dict[str, str]:
        """Return a simple health status payload."""

        return {"status": "ok"}

    @app.get("/categories")
    def categories() -> Dict[str, Any]:
        """List categories of the current catalog."""

        return {"categories": _require_db().get_categories()}

    @app.get("/categories/{category}/tasks")
    def tasks_in_category(category: str) -> Dict[str, Any]:
        """List tasks of one category; unknown categories yield an empty list."""

        return {"category": category, "tasks": _require_db().get_tasks_in_category(category)}

    @app.post("/scan")
    def scan() -> Dict[str, Any]:
        """Rescan user task directories and return the refreshed categories."""

        db = _require_db()
        db.scan()
        return {
            "categories": db.get_categories(),
            "errors": [error.to_dict() for error in db.last_scan_errors],
        }

    return app
