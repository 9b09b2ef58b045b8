"""A small file-backed store of todos."""

from __future__ import annotations

import json
from pathlib import Path

import platformdirs

from todocli.todo import Todo

APP_DIR_NAME = "todo"
DATABASE_FILE_NAME = "todo.gdbm"


class DatabaseError(Exception):
    """Raised when the todo store cannot be read or written."""


def default_database_path() -> Path:
    """Return the path of the todo store in the user's configuration directory."""
    config_dir = platformdirs.user_config_path(appname=None, appauthor=False)
    return Path(config_dir) / APP_DIR_NAME / DATABASE_FILE_NAME


class Database:
    """Todos keyed by identifier, saved to a file after each change.

    A database without a path keeps its todos in memory only.
    """

    def __init__(self, path: str | Path | None) -> None:
        self.path = Path(path) if path is not None else None
        self._todos: dict[str, Todo] = {}
        self.load()

    @classmethod
    def open_default(cls) -> Database:
        """Open the store at the default location, creating its directory."""
        path = default_database_path()
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise DatabaseError("Could not create config directory") from exc
        return cls(path)

    @classmethod
    def in_memory(cls) -> Database:
        """Open a store that never touches the disk."""
        return cls(None)

    def load(self) -> None:
        """Replace the todos held with those in the file, if it has any."""
        if self.path is None or not self.path.exists():
            return
        try:
            content = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DatabaseError("Could not read database file") from exc
        if not content:
            return
        try:
            raw = json.loads(content)
            todos = [Todo.from_dict(entry) for entry in raw.values()]
        except (ValueError, TypeError, KeyError, AttributeError) as exc:
            raise DatabaseError("Could not deserialize database file") from exc
        self._todos = {todo.id: todo for todo in todos}

    def save(self) -> None:
        """Write all todos to the file."""
        if self.path is None:
            return
        content = json.dumps(
            {todo_id: todo.to_dict() for todo_id, todo in self._todos.items()},
            ensure_ascii=False,
        )
        try:
            self.path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise DatabaseError("Could not write database file") from exc

    def add_todo(self, todo: Todo) -> None:
        self._todos[todo.id] = todo
        self.save()

    def update_todo(self, todo: Todo) -> None:
        self._todos[todo.id] = todo
        self.save()

    def delete_todo(self, todo_id: str) -> None:
        self._todos.pop(todo_id, None)
        self.save()

    def get_todo(self, todo_id: str) -> Todo | None:
        return self._todos.get(todo_id)

    def get_all_todos(self) -> list[Todo]:
        """Active todos first, then completed; oldest modification first in each."""
        return sorted(
            self._todos.values(),
            key=lambda todo: (todo.is_completed(), todo.last_modified_at),
        )

    def insert(self, todo: Todo) -> None:
        """Put a todo in the store without writing the file."""
        self._todos[todo.id] = todo