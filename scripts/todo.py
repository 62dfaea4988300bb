#!/usr/bin/env python3
"""
todo - record, edit, complete and remove named tasks from the command line.

Thin wrapper over taskstore.TaskStore: parses arguments, runs exactly one
store operation against the configured document and prints the result.

Usage:
    todo.py add NAME DESCRIPTION
    todo.py edit NAME DESCRIPTION
    todo.py tick NAME
    todo.py remove NAME
    todo.py list [--status {pending,done}]

Environment Variables:
    TODO_FILE (optional): Task document path (relative to the working
                          directory or absolute). Default: todo.json
    DEBUG (optional): If set, enables debug logging to stderr.

Exit Codes:
    0: Success
    1: Store error (duplicate name, unknown task, unreadable document, ...)
    2: Invalid command line arguments
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
import traceback
from pathlib import Path

from taskstore import Task, TaskStatus, TaskStore, TaskStoreError, get_task_store

# Version check
if sys.version_info < (3, 10):
    print("Error: Python 3.10+ required", file=sys.stderr)
    sys.exit(1)

logger = logging.getLogger("todo")


def setup_logging() -> None:
    """Send log records to stderr; DEBUG level only when DEBUG is set."""
    level = logging.DEBUG if os.environ.get("DEBUG") else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def format_task(task: Task) -> str:
    """Render a task as a single checklist line."""
    mark = "x" if task.done else " "
    return f"[{mark}] {task.name}: {task.description}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todo", description="Track named tasks.")
    commands = parser.add_subparsers(dest="command", required=True)

    add = commands.add_parser("add", help="add a new pending task")
    add.add_argument("name")
    add.add_argument("description")

    edit = commands.add_parser("edit", help="replace a task's description")
    edit.add_argument("name")
    edit.add_argument("description")

    tick = commands.add_parser("tick", help="mark a task done")
    tick.add_argument("name")

    remove = commands.add_parser("remove", help="delete a task")
    remove.add_argument("name")

    list_ = commands.add_parser("list", help="show tasks")
    list_.add_argument(
        "--status",
        choices=[status.value for status in TaskStatus],
        help="only show tasks with this status",
    )

    return parser


def run_command(store: TaskStore, args: argparse.Namespace) -> list[str]:
    """Run the parsed command against the store and return output lines."""
    if args.command == "add":
        return [format_task(store.add(args.name, args.description))]
    if args.command == "edit":
        return [format_task(store.edit(args.name, args.description))]
    if args.command == "tick":
        return [format_task(store.tick(args.name))]
    if args.command == "remove":
        store.remove(args.name)
        return [f"Removed {args.name}"]

    status = TaskStatus(args.status) if args.status else None
    tasks = store.list(status)
    if not tasks:
        return ["No tasks"]
    return [format_task(task) for task in tasks]


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the todo command."""
    args = build_parser().parse_args(argv)
    setup_logging()

    try:
        store = get_task_store(Path.cwd())
        logger.debug("Using task document %s", store.backend.path)

        for line in run_command(store, args):
            print(line)

        sys.exit(0)

    except (TaskStoreError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        # Unexpected errors - preserve stack trace for debugging
        print(f"Unexpected error: {e!r}", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
