"""Shared fixtures for taskstore tests.

Every fixture points at a fresh document under pytest's tmp_path, so tests
never share a task file.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from taskstore.json_backend import JSONDocumentBackend
from taskstore.protocol import Task, TaskRecord, TaskStatus
from taskstore.store import TaskStore


@pytest.fixture
def tmp_project(tmp_path: Path) -> Path:
    """Create a temporary project directory for testing.

    Returns:
        Path to a clean temporary directory.
    """
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def document_path(tmp_project: Path) -> Path:
    """Path of a task document that does not exist yet."""
    return tmp_project / "todo.json"


@pytest.fixture
def json_backend(document_path: Path) -> JSONDocumentBackend:
    """Create a JSON document backend over a missing document."""
    return JSONDocumentBackend(document_path)


@pytest.fixture
def store(json_backend: JSONDocumentBackend) -> TaskStore:
    """Create a task store over an empty JSON document backend."""
    return TaskStore(json_backend)


@pytest.fixture
def sample_record() -> TaskRecord:
    """A valid serialized task record."""
    return {
        "name": "groceries",
        "description": "milk, eggs",
        "status": "pending",
    }


@pytest.fixture
def sample_tasks() -> list[Task]:
    """A list of tasks with mixed statuses, in insertion order."""
    return [
        Task("write", "draft the release notes"),
        Task("review", "check the open pull requests", TaskStatus.DONE),
        Task("ship", "tag and publish"),
    ]
