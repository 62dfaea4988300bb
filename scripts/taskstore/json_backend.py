"""JSON file-based document backend for the task store.

This module persists the whole task collection as a single JSON array.

Saves are full rewrites performed in place: the document is truncated and
rewritten on every save. This is NOT atomic. If the process is interrupted or
the write fails part way, the document can be left truncated or empty, and
recovering it (for example from a backup) is up to the operator.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from taskstore.errors import DeserializationError, SerializationError, StorageIOError
from taskstore.protocol import Task

logger = logging.getLogger(__name__)


class JSONDocumentBackend:
    """JSON file-based document backend for tasks.

    Stores all tasks in a single JSON file as an array of records, in
    insertion order. Holds no state besides the document path: nothing is
    cached between calls.

    Attributes:
        path: The Path to the JSON document.

    Example:
        backend = JSONDocumentBackend(Path("/home/user/todo.json"))
        tasks = backend.load()
        tasks.append(Task("write docs", "README and changelog"))
        backend.save(tasks)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the JSON document backend.

        Args:
            path: The path to the JSON document. It does not need to exist.
        """
        self.path = Path(path)

    def load(self) -> list[Task]:
        """Load all tasks from the JSON document.

        A missing document means no tasks yet and yields an empty list.

        Returns:
            The tasks in document order.

        Raises:
            StorageIOError: If the document exists but cannot be read.
            DeserializationError: If the document is not valid JSON, is not an
                array, or contains an invalid task record.
        """
        if not self.path.exists():
            logger.debug("No task document at %s, starting empty", self.path)
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise DeserializationError(f"Invalid JSON in task document {self.path}: {e}") from e
        except UnicodeDecodeError as e:
            raise DeserializationError(f"Task document {self.path} is not valid UTF-8: {e}") from e
        except (ValueError, RecursionError) as e:
            # Oversized integer literals and pathological nesting.
            raise DeserializationError(f"Unreadable task document {self.path}: {e}") from e
        except OSError as e:
            raise StorageIOError(f"Failed to read task document {self.path}: {e}") from e

        if not isinstance(data, list):
            raise DeserializationError(
                f"Invalid task document {self.path}: expected an array, "
                f"got {type(data).__name__}"
            )

        tasks = []
        for i, record in enumerate(data):
            try:
                tasks.append(Task.from_record(record))
            except ValueError as e:
                raise DeserializationError(
                    f"Invalid task document {self.path}: task {i}: {e}"
                ) from e

        logger.debug("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        """Overwrite the JSON document with the given tasks.

        Creates the parent directory if needed. The payload is encoded to UTF-8
        bytes before the file is opened, so an encoding failure leaves the previous
        document untouched; a failure during the write itself does not.

        Args:
            tasks: The complete ordered task collection.

        Raises:
            StorageIOError: If the directory or document cannot be written.
            SerializationError: If a task cannot be encoded.
        """
        try:
            payload = json.dumps(
                [task.to_record() for task in tasks], indent=2, ensure_ascii=False
            )
            # Lone surrogates survive json.dumps but not UTF-8.
            data = (payload + "\n").encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to encode tasks: {e}") from e

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise StorageIOError(f"Failed to write task document {self.path}: {e}") from e

        logger.debug("Saved %d tasks to %s", len(tasks), self.path)
