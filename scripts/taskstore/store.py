"""Task store operations.

Each operation re-reads the whole collection from the backend, applies its
change in memory and, if it mutated anything, writes the whole collection
back. Nothing is cached between calls, and a failed operation never saves.

There is no locking: two processes mutating the same document concurrently
can overwrite each other's changes.
"""

from __future__ import annotations

import logging
from pathlib import Path

from taskstore.errors import DuplicateNameError, TaskNotFoundError
from taskstore.json_backend import JSONDocumentBackend
from taskstore.protocol import DocumentBackend, Task, TaskStatus

logger = logging.getLogger(__name__)


def _find_index(tasks: list[Task], name: str) -> int:
    """Return the index of the first task named exactly ``name``.

    Raises:
        TaskNotFoundError: If no task has that name.
    """
    for i, task in enumerate(tasks):
        if task.name == name:
            return i
    raise TaskNotFoundError(name)


class TaskStore:
    """Named task collection persisted through a document backend.

    Attributes:
        backend: The DocumentBackend holding the collection.

    Example:
        store = TaskStore.from_path(Path("todo.json"))
        store.add("release", "tag and publish 1.2")
        store.tick("release")
        for task in store.list():
            print(task.name, task.status.value)
    """

    def __init__(self, backend: DocumentBackend) -> None:
        self.backend = backend

    @classmethod
    def from_path(cls, path: Path) -> "TaskStore":
        """Create a store backed by the JSON document at ``path``."""
        return cls(JSONDocumentBackend(path))

    def add(self, name: str, description: str) -> Task:
        """Append a new pending task.

        Empty names are not rejected here; callers validate input.

        Raises:
            DuplicateNameError: If a task with ``name`` already exists.
        """
        tasks = self.backend.load()
        if any(task.name == name for task in tasks):
            raise DuplicateNameError(name)

        task = Task(name=name, description=description, status=TaskStatus.PENDING)
        tasks.append(task)
        self.backend.save(tasks)
        logger.debug("Added task %r", name)
        return task

    def edit(self, name: str, description: str) -> Task:
        """Replace the description of an existing task.

        Raises:
            TaskNotFoundError: If no task has ``name``.
        """
        tasks = self.backend.load()
        i = _find_index(tasks, name)
        task = tasks[i] = tasks[i].with_description(description)
        self.backend.save(tasks)
        logger.debug("Edited task %r", name)
        return task

    def tick(self, name: str) -> Task:
        """Mark a task done. Ticking a done task is a no-op that still saves.

        Raises:
            TaskNotFoundError: If no task has ``name``.
        """
        tasks = self.backend.load()
        i = _find_index(tasks, name)
        task = tasks[i] = tasks[i].ticked()
        self.backend.save(tasks)
        logger.debug("Ticked task %r", name)
        return task

    def remove(self, name: str) -> None:
        """Delete a task, keeping the order of the others.

        Raises:
            TaskNotFoundError: If no task has ``name``.
        """
        tasks = self.backend.load()
        del tasks[_find_index(tasks, name)]
        self.backend.save(tasks)
        logger.debug("Removed task %r", name)

    def get(self, name: str) -> Task:
        """Return the task named ``name``.

        Raises:
            TaskNotFoundError: If no task has ``name``.
        """
        tasks = self.backend.load()
        return tasks[_find_index(tasks, name)]

    def list(self, status: TaskStatus | None = None) -> list[Task]:
        """Return all tasks in insertion order, optionally only one status."""
        tasks = self.backend.load()
        if status is None:
            return tasks
        status = TaskStatus(status)
        return [task for task in tasks if task.status is status]
