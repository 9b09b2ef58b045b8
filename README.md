# todocli

A small todo manager that runs in your terminal, drawn in the Tokyo Night
colour scheme.

All todos are shown in one table: open items come first, then completed
ones, and each group is ordered oldest first by last change. Each todo has a
subject, a free-text description, and timestamps for when it was created,
last modified and closed.

## Installation

```
pip install .
```

The interface is drawn with the standard library's `curses` module, so it
needs a platform where that module is available (Linux, macOS and other
Unix-like systems).

## Usage

Start the application:

```
todocli
```

Your todos are kept in a file named `todo.gdbm` in a `todo` directory under
your user configuration directory (as reported by `platformdirs`). Despite
its name the file holds JSON. It is written after every change.

### Main list

| Key          | Action                            |
|--------------|-----------------------------------|
| `j` / Down   | Move the selection down (wraps)   |
| `k` / Up     | Move the selection up (wraps)     |
| Enter        | View the selected todo            |
| `e`          | Edit the selected todo            |
| `n`          | Create a new todo                 |
| `d`          | Mark the todo done, or open again |
| `x`          | Delete the selected todo          |
| `q`          | Quit                              |

### Detail view

When viewing a todo, press `e` to start editing it and Esc to go back.

When editing or creating a todo:

| Key       | Action                                                 |
|-----------|--------------------------------------------------------|
| Tab       | Move to the other field                                |
| Shift+Tab | Move to the other field                                |
| Backspace | Delete the last character of the field                 |
| Enter     | Start a new line (description field only)              |
| Ctrl+S    | Save and close; stays open if the subject is blank     |
| Esc       | Close, saving the todo if its subject is not blank     |

A todo whose subject is empty or only whitespace is never saved. Text is
only added or removed at the end of a field; there is no cursor to move
within it.

### Deleting

Pressing `x` asks for confirmation. Press `y` to delete, or `n` / Esc to
cancel.

## Using it as a library

The data layer can be used without the interface:

```python
from todocli.database import Database
from todocli.todo import Todo

db = Database.open_default()
db.add_todo(Todo.create("Buy milk", "Semi-skimmed"))
for todo in db.get_all_todos():
    print(todo.status_icon(), todo.subject)
```

`Database.in_memory()` gives a database that is never written to disk.
Problems reading or writing the file raise `todocli.database.DatabaseError`.

The application state lives in `todocli.app.App`, which takes a `Database`;
key presses are applied to it with `todocli.events.handle_key_event` and
`todocli.events.Key`. Screens can be drawn off-terminal onto a
`todocli.layout.Canvas` with `App.render`, and read back with
`Canvas.text_rows()`.

## Running the tests

```
pip install ".[test]"
pytest
```