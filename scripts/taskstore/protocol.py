"""Protocols and type definitions for the task store.

This module defines the task model, its serialized record shape, and the
interface every document backend implements.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Mapping, Protocol, TypedDict


class TaskStatus(str, Enum):
    """Task lifecycle statuses.

    A task starts PENDING and can only move to DONE.
    """

    PENDING = "pending"
    DONE = "done"


class TaskRecord(TypedDict):
    """Serialized structure of a single task in the backing document.

    Attributes:
        name: Unique, case-sensitive task identifier.
        description: Free-form task description.
        status: One of the TaskStatus values ("pending" or "done").
    """

    name: str
    description: str
    status: str


_RECORD_FIELDS = ("name", "description", "status")


@dataclass(frozen=True)
class Task:
    """In-memory task model.

    Tasks are immutable; changes produce a new Task via ``with_description``
    or ``ticked``, so a task's name can never change after creation.
    """

    name: str
    description: str
    status: TaskStatus = TaskStatus.PENDING

    def __post_init__(self) -> None:
        object.__setattr__(self, "status", TaskStatus(self.status))

    @property
    def done(self) -> bool:
        return self.status is TaskStatus.DONE

    def with_description(self, description: str) -> "Task":
        return replace(self, description=description)

    def ticked(self) -> "Task":
        return replace(self, status=TaskStatus.DONE)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Task":
        """Build a task from a decoded record.

        Raises:
            ValueError: If the record is not an object, lacks a field, has a
                non-string field, or carries an unknown status.
        """
        if not isinstance(record, Mapping):
            raise ValueError(f"expected an object, got {type(record).__name__}")

        missing = [key for key in _RECORD_FIELDS if key not in record]
        if missing:
            raise ValueError(f"missing required fields: {', '.join(missing)}")

        for key in _RECORD_FIELDS:
            if not isinstance(record[key], str):
                raise ValueError(f"field {key!r} must be a string")

        try:
            status = TaskStatus(record["status"])
        except ValueError:
            raise ValueError(f"invalid status: {record['status']!r}") from None

        return cls(
            name=record["name"],
            description=record["description"],
            status=status,
        )

    def to_record(self) -> TaskRecord:
        return {
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
        }


class DocumentBackend(Protocol):
    """Protocol for task document backends.

    A backend owns exactly one document holding the whole ordered task
    collection. It is stateless between calls: every load re-reads the
    document and every save rewrites it entirely.
    """

    def load(self) -> list[Task]:
        """Load the full ordered task collection.

        Returns:
            The tasks in document order. An empty list if the document does
            not exist yet.

        Raises:
            StorageIOError: If the document exists but cannot be read.
            DeserializationError: If the contents are not a valid task list.
        """
        ...

    def save(self, tasks: list[Task]) -> None:
        """Replace the document with the given task collection.

        Args:
            tasks: The complete ordered collection to persist.

        Raises:
            StorageIOError: If the document cannot be created or written.
            SerializationError: If a task cannot be encoded.
        """
        ...
