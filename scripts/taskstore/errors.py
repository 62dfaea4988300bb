"""Exception hierarchy for the task store.

Every failure the store can surface derives from TaskStoreError, so callers
can render any of them with a single except clause. Each class also derives
from the closest builtin so generic handlers (OSError, ValueError,
LookupError) keep working.
"""

from __future__ import annotations


class TaskStoreError(Exception):
    """Base exception for task store failures."""


class StorageIOError(TaskStoreError, OSError):
    """The backing document could not be opened, read, created or written."""


class DeserializationError(TaskStoreError, ValueError):
    """The backing document exists but is not a valid list of task records."""


class SerializationError(TaskStoreError, ValueError):
    """A task could not be encoded into the backing document."""


class DuplicateNameError(TaskStoreError, ValueError):
    """A task with the requested name already exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Task with name {name} already exists")
        self.name = name


class TaskNotFoundError(TaskStoreError, LookupError):
    """No task with the requested name exists."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Task with name {name} does not exist")
        self.name = name
