"""Task store factory and exports.

This module provides a factory that builds a TaskStore over the JSON document
configured through the environment.

Environment Variables:
    TODO_FILE: Custom path for the task document (relative or absolute).
               Must stay inside the base directory. Default: todo.json

Example:
    from pathlib import Path
    from taskstore import get_task_store

    store = get_task_store(Path.cwd())
    store.add("groceries", "milk, eggs")
    tasks = store.list()
"""

from __future__ import annotations

import os
from pathlib import Path

from taskstore.errors import (
    DeserializationError,
    DuplicateNameError,
    SerializationError,
    StorageIOError,
    TaskNotFoundError,
    TaskStoreError,
)
from taskstore.json_backend import JSONDocumentBackend
from taskstore.protocol import DocumentBackend, Task, TaskRecord, TaskStatus
from taskstore.store import TaskStore

__all__ = [
    "DEFAULT_TODO_FILE",
    "DeserializationError",
    "DocumentBackend",
    "DuplicateNameError",
    "JSONDocumentBackend",
    "SerializationError",
    "StorageIOError",
    "Task",
    "TaskNotFoundError",
    "TaskRecord",
    "TaskStatus",
    "TaskStore",
    "TaskStoreError",
    "get_task_store",
    "_resolve_safe_path",
]

DEFAULT_TODO_FILE = "todo.json"


def _resolve_safe_path(base_dir: Path, user_path: str) -> Path | None:
    """Resolve a path, ensuring it stays within base_dir.

    Args:
        base_dir: The base directory paths must stay within.
        user_path: User-provided path (relative or absolute).

    Returns:
        Resolved absolute path, or None if path escapes base_dir.
    """
    if not user_path or not user_path.strip():
        return None

    if "\x00" in user_path:
        return None

    candidate = Path(user_path)
    if not candidate.is_absolute():
        candidate = base_dir / candidate

    resolved = candidate.resolve()
    base_resolved = base_dir.resolve()

    try:
        resolved.relative_to(base_resolved)
        return resolved
    except ValueError:
        return None


def _get_document_path(base_dir: Path) -> Path:
    """Get the task document path from environment or default.

    Raises:
        ValueError: If TODO_FILE is invalid or escapes base_dir.
    """
    custom_path = os.environ.get("TODO_FILE", "").strip()

    if custom_path:
        safe_path = _resolve_safe_path(base_dir, custom_path)
        if safe_path is None:
            raise ValueError(f"TODO_FILE '{custom_path}' escapes base directory")
        return safe_path

    return base_dir / DEFAULT_TODO_FILE


def get_task_store(base_dir: Path) -> TaskStore:
    """Get a TaskStore over the configured JSON document.

    Args:
        base_dir: Directory the document path is resolved against, usually
            the current working directory.

    Returns:
        A TaskStore backed by a JSONDocumentBackend.

    Raises:
        ValueError: If the TODO_FILE configuration is invalid.
    """
    return TaskStore(JSONDocumentBackend(_get_document_path(base_dir)))
