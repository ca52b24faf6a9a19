"""An interactive to-do list stored as JSON."""

from __future__ import annotations

import argparse
import json
import math
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

DEFAULT_PATH = Path("todos.json")
MENU = "1. Add Task\n2. List Tasks\n3. Mark a Task\n4. Save Tasks as JSON\n5. Exit"
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class Todo:
    """A task with a description, a completion flag and a creation time."""

    description: str
    completed: bool = False
    created_at: datetime = field(default_factory=_now)

    def mark_completed(self) -> None:
        self.completed = True

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form; the time is whole seconds since the epoch."""
        return {
            "created_at": math.floor(self.created_at.timestamp()),
            "description": self.description,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: Any) -> "Todo":
        """Build a task from its JSON form, raising ValueError if it is malformed."""
        if not isinstance(data, dict):
            raise ValueError("task must be an object")
        try:
            created_at = data["created_at"]
            description = data["description"]
            completed = data["completed"]
        except KeyError as exc:
            raise ValueError(f"missing field {exc.args[0]!r}") from None
        if isinstance(created_at, bool) or not isinstance(created_at, int):
            raise ValueError("created_at must be an integer")
        if not isinstance(description, str):
            raise ValueError("description must be a string")
        if not isinstance(completed, bool):
            raise ValueError("completed must be a boolean")
        try:
            moment = datetime.fromtimestamp(created_at).astimezone()
        except (OverflowError, OSError) as exc:
            raise ValueError(f"created_at out of range: {created_at}") from exc
        return cls(description=description, completed=completed, created_at=moment)

    def format_line(self, number: int) -> str:
        mark = "X" if self.completed else " "
        return f"{number}. [{mark}] {self.description} : {self.created_at.strftime(TIME_FORMAT)}"


def save_tasks(todos: Iterable[Todo], path: Union[str, Path] = DEFAULT_PATH) -> None:
    """Write the tasks to ``path`` as a JSON array."""
    Path(path).write_text(
        json.dumps([todo.to_dict() for todo in todos], separators=(",", ":")),
        encoding="utf-8",
    )


def load_tasks(path: Union[str, Path] = DEFAULT_PATH) -> list[Todo]:
    """Read tasks from ``path``.

    Raises OSError if the file cannot be read and ValueError if it does not
    hold a valid task list.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError("task file must hold a list")
    return [Todo.from_dict(item) for item in data]


def _load_or_empty(path: Path) -> list[Todo]:
    try:
        return load_tasks(path)
    except ValueError:
        print("Failed to parse tasks. Starting with an empty list.")
    except OSError:
        print("No previous tasks found. Starting fresh.")
    return []


def _ask(prompt: str) -> str:
    return input(prompt).strip()


def _parse_index(text: str) -> Optional[int]:
    digits = text[1:] if text.startswith("+") else text
    if digits and digits.isascii() and digits.isdigit():
        return int(digits)
    return None


def _mark(todos: list[Todo]) -> None:
    number = _parse_index(_ask("Enter task number to mark as completed: "))
    if number is None:
        print("Invalid Input! Please enter a number.")
    elif 0 < number <= len(todos):
        todos[number - 1].mark_completed()
        print("Task marked successfully!")
    else:
        print(
            f"Invalid Task Number! Please choose a number between 1 and {len(todos)}."
        )


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive menu until the user exits or input ends."""
    parser = argparse.ArgumentParser(prog="todo", description=__doc__)
    parser.add_argument("--file", type=Path, default=DEFAULT_PATH, help="task file")
    args = parser.parse_args(argv)

    todos = _load_or_empty(args.file)
    try:
        while True:
            print(MENU)
            choice = _ask("Enter your choice: ")
            if choice == "1":
                todos.append(Todo(_ask("Enter task description: ")))
                print("Task added!")
            elif choice == "5":
                print("Goodbye!")
                break
            elif choice not in {"2", "3", "4"}:
                print("Invalid choice! Try again.")
            elif not todos:
                print("No tasks are available!")
            elif choice == "2":
                for number, todo in enumerate(todos, start=1):
                    print(todo.format_line(number))
            elif choice == "3":
                _mark(todos)
            else:
                try:
                    save_tasks(todos, args.file)
                except OSError as exc:
                    print(f"Failed to write to file: {exc}", file=sys.stderr)
                else:
                    print("Tasks saved!")
    except EOFError:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())