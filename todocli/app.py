"""Application state: which screen is showing and what it acts on."""

from __future__ import annotations

from enum import Enum

from todocli.database import Database
from todocli.detail import DetailMode, DetailView
from todocli.dialog import ConfirmDialog
from todocli.layout import Canvas, Rect
from todocli.main_view import MainView
from todocli.todo import Todo


class AppState(Enum):
    MAIN = "main"
    DETAIL = "detail"
    CONFIRM = "confirm"


class App:
    """The todo list, the open popup if any, and the store behind them."""

    def __init__(self, database: Database | None = None) -> None:
        self.database = database if database is not None else Database.open_default()
        self.state = AppState.MAIN
        self.main_view = MainView()
        self.detail_view: DetailView | None = None
        self.confirm_dialog: ConfirmDialog | None = None
        self.should_quit = False
        self.current_todo_id: str | None = None
        self.pending_delete_id: str | None = None

    def get_current_todos(self) -> list[Todo]:
        """All todos, active and completed, in display order."""
        return self.database.get_all_todos()

    def get_selected_todo(self) -> Todo | None:
        index = self.main_view.selected_index()
        todos = self.get_current_todos()
        if index is None or not 0 <= index < len(todos):
            return None
        return todos[index]

    def open_detail_view(self) -> None:
        todo = self.get_selected_todo()
        if todo is not None:
            self.current_todo_id = todo.id
            self.detail_view = DetailView.for_viewing(todo)
            self.state = AppState.DETAIL

    def open_edit_view(self) -> None:
        todo = self.get_selected_todo()
        if todo is not None:
            self.current_todo_id = todo.id
            self.detail_view = DetailView.for_editing(todo)
            self.state = AppState.DETAIL

    def open_new_todo(self) -> None:
        self.current_todo_id = None
        self.detail_view = DetailView.for_creation()
        self.state = AppState.DETAIL

    def _commit_detail(self, view: DetailView) -> None:
        if view.mode is DetailMode.NEW:
            self.database.add_todo(Todo.create(view.subject, view.description))
        elif view.mode is DetailMode.EDIT and self.current_todo_id is not None:
            todo = self.database.get_todo(self.current_todo_id)
            if todo is not None:
                todo.update(view.subject, view.description)
                self.database.update_todo(todo)

    def save_current_todo(self) -> None:
        """Save the open popup and close it; leave it open if its subject is blank."""
        view = self.detail_view
        if view is not None:
            if not view.is_valid():
                return
            self._commit_detail(view)
        self.close_detail_view()

    def close_detail_view(self) -> None:
        self.detail_view = None
        self.current_todo_id = None
        self.state = AppState.MAIN

    def close_detail_view_with_save(self) -> None:
        """Close the popup, saving it first when its subject is not blank."""
        view = self.detail_view
        if view is not None and view.is_valid():
            self._commit_detail(view)
        self.close_detail_view()

    def toggle_selected_todo(self) -> None:
        todo = self.get_selected_todo()
        if todo is not None:
            todo.toggle_completion()
            self.database.update_todo(todo)

    def confirm_delete_selected(self) -> None:
        todo = self.get_selected_todo()
        if todo is not None:
            self.pending_delete_id = todo.id
            self.confirm_dialog = ConfirmDialog(
                title="Delete Todo",
                message=f'Delete todo: "{todo.subject}"?',
            )
            self.state = AppState.CONFIRM

    def delete_confirmed_todo(self) -> None:
        if self.pending_delete_id is not None:
            self.database.delete_todo(self.pending_delete_id)
        self.close_confirm_dialog()

    def close_confirm_dialog(self) -> None:
        self.confirm_dialog = None
        self.pending_delete_id = None
        self.state = AppState.MAIN

    def quit(self) -> None:
        self.should_quit = True

    def render(self, canvas: Canvas, area: Rect) -> None:
        """Draw the main screen and, above it, any open popup."""
        self.main_view.render(canvas, area, self.get_current_todos())
        if self.state is AppState.DETAIL and self.detail_view is not None:
            self.detail_view.render(canvas, area)
        elif self.state is AppState.CONFIRM and self.confirm_dialog is not None:
            self.confirm_dialog.render(canvas, area)