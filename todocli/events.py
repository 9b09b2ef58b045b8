"""Keyboard input and how each screen responds to it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from todocli.app import App, AppState
from todocli.detail import DESCRIPTION_FIELD, DetailMode


class KeyCode(Enum):
    """The kinds of key the application reacts to."""

    CHAR = "char"
    ENTER = "enter"
    ESC = "esc"
    TAB = "tab"
    BACKTAB = "backtab"
    BACKSPACE = "backspace"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class Key:
    """A key press: its code, the character typed and whether Ctrl was held."""

    code: KeyCode
    char: str | None = None
    ctrl: bool = False

    def __post_init__(self) -> None:
        if self.code is KeyCode.CHAR and (self.char is None or len(self.char) != 1):
            raise ValueError("a character key needs exactly one character")


def handle_key_event(app: App, key: Key) -> None:
    """Apply ``key`` to ``app`` according to the screen currently showing."""
    if app.state is AppState.MAIN:
        _handle_main_keys(app, key)
    elif app.state is AppState.DETAIL:
        _handle_detail_keys(app, key)
    elif app.state is AppState.CONFIRM:
        _handle_confirm_keys(app, key)


def _handle_main_keys(app: App, key: Key) -> None:
    length = len(app.get_current_todos())
    match key:
        case Key(code=KeyCode.CHAR, char="q"):
            app.quit()
        case Key(code=KeyCode.CHAR, char="j") | Key(code=KeyCode.DOWN):
            app.main_view.next(length)
        case Key(code=KeyCode.CHAR, char="k") | Key(code=KeyCode.UP):
            app.main_view.previous(length)
        case Key(code=KeyCode.ENTER):
            app.open_detail_view()
        case Key(code=KeyCode.CHAR, char="d"):
            app.toggle_selected_todo()
        case Key(code=KeyCode.CHAR, char="n"):
            app.open_new_todo()
        case Key(code=KeyCode.CHAR, char="x"):
            app.confirm_delete_selected()
        case Key(code=KeyCode.CHAR, char="e"):
            app.open_edit_view()


def _handle_detail_keys(app: App, key: Key) -> None:
    view = app.detail_view
    if view is None:
        return
    if view.mode is DetailMode.VIEW:
        match key:
            case Key(code=KeyCode.ESC):
                app.close_detail_view_with_save()
            case Key(code=KeyCode.CHAR, char="e"):
                view.mode = DetailMode.EDIT
        return
    match key:
        case Key(code=KeyCode.ESC):
            app.close_detail_view_with_save()
        case Key(code=KeyCode.CHAR, char="s", ctrl=True):
            app.save_current_todo()
        case Key(code=KeyCode.TAB):
            view.next_field()
        case Key(code=KeyCode.BACKTAB):
            view.previous_field()
        case Key(code=KeyCode.CHAR, char=str() as char):
            view.add_char(char)
        case Key(code=KeyCode.BACKSPACE):
            view.delete_char()
        case Key(code=KeyCode.ENTER) if view.current_field == DESCRIPTION_FIELD:
            view.add_char("\n")


def _handle_confirm_keys(app: App, key: Key) -> None:
    match key:
        case Key(code=KeyCode.CHAR, char="y"):
            app.delete_confirmed_todo()
        case Key(code=KeyCode.CHAR, char="n") | Key(code=KeyCode.ESC):
            app.close_confirm_dialog()