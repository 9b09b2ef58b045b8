from datetime import datetime, timedelta, timezone

import pytest

from todocli.app import App, AppState
from todocli.database import Database
from todocli.detail import DetailMode
from todocli.events import Key, KeyCode, handle_key_event
from todocli.todo import Todo


def make_app():
    return App(Database.in_memory())


def char(c, ctrl=False):
    return Key(KeyCode.CHAR, c, ctrl)


def add_todo(app, subject, description="Description", hours_ago=0):
    todo = Todo.create(subject, description)
    todo.last_modified_at = datetime.now(timezone.utc) - timedelta(hours=hours_ago)
    app.database.insert(todo)
    return todo


def test_char_key_needs_a_character():
    with pytest.raises(ValueError):
        Key(KeyCode.CHAR)


def test_main_keys_quit():
    app = make_app()
    handle_key_event(app, char("q"))
    assert app.should_quit


def test_main_keys_navigation():
    app = make_app()
    add_todo(app, "Todo 1", "Description 1", hours_ago=2)
    add_todo(app, "Todo 2", "Description 2", hours_ago=1)

    handle_key_event(app, char("j"))
    assert app.main_view.selected_index() == 1
    handle_key_event(app, char("k"))
    assert app.main_view.selected_index() == 0
    handle_key_event(app, Key(KeyCode.DOWN))
    assert app.main_view.selected_index() == 1
    handle_key_event(app, Key(KeyCode.UP))
    assert app.main_view.selected_index() == 0
    handle_key_event(app, char("k"))
    assert app.main_view.selected_index() == 1


def test_main_keys_open_detail_view():
    app = make_app()
    add_todo(app, "Test Todo")
    handle_key_event(app, Key(KeyCode.ENTER))
    assert app.state is AppState.DETAIL
    assert app.detail_view.mode is DetailMode.VIEW
    assert app.detail_view.subject == "Test Todo"


def test_main_keys_new_todo():
    app = make_app()
    handle_key_event(app, char("n"))
    assert app.state is AppState.DETAIL
    assert app.detail_view.mode is DetailMode.NEW


def test_main_keys_edit_todo():
    app = make_app()
    add_todo(app, "Test Todo")
    handle_key_event(app, char("e"))
    assert app.state is AppState.DETAIL
    assert app.detail_view.mode is DetailMode.EDIT


def test_main_keys_toggle():
    app = make_app()
    todo = add_todo(app, "Test Todo")
    handle_key_event(app, char("d"))
    assert app.database.get_todo(todo.id).is_completed()
    handle_key_event(app, char("d"))
    assert not app.database.get_todo(todo.id).is_completed()


def test_main_keys_confirm_delete():
    app = make_app()
    todo = add_todo(app, "Test Todo")
    handle_key_event(app, char("x"))
    assert app.state is AppState.CONFIRM
    assert app.confirm_dialog is not None
    assert app.pending_delete_id == todo.id


def test_main_keys_without_todos_keep_main_state():
    app = make_app()
    handle_key_event(app, Key(KeyCode.ENTER))
    handle_key_event(app, char("x"))
    assert app.state is AppState.MAIN
    assert app.detail_view is None


def test_detail_keys_view_mode_escape():
    app = make_app()
    app.open_new_todo()
    app.detail_view.mode = DetailMode.VIEW
    handle_key_event(app, Key(KeyCode.ESC))
    assert app.state is AppState.MAIN
    assert app.detail_view is None


def test_detail_keys_view_mode_edit():
    app = make_app()
    app.open_new_todo()
    app.detail_view.mode = DetailMode.VIEW
    handle_key_event(app, char("e"))
    assert app.detail_view.mode is DetailMode.EDIT


def test_detail_keys_view_mode_ignores_typing():
    app = make_app()
    add_todo(app, "Test Todo")
    app.open_detail_view()
    handle_key_event(app, char("z"))
    assert app.detail_view.subject == "Test Todo"


def test_detail_keys_edit_mode():
    app = make_app()
    app.open_new_todo()

    handle_key_event(app, Key(KeyCode.TAB))
    assert app.detail_view.current_field == 1

    handle_key_event(app, char("H"))
    assert app.detail_view.description == "H"

    handle_key_event(app, Key(KeyCode.BACKSPACE))
    assert app.detail_view.description == ""

    handle_key_event(app, char("s", ctrl=True))
    assert app.state is AppState.DETAIL
    assert app.get_current_todos() == []


def test_detail_keys_backtab():
    app = make_app()
    app.open_new_todo()
    handle_key_event(app, Key(KeyCode.BACKTAB))
    assert app.detail_view.current_field == 1
    handle_key_event(app, Key(KeyCode.BACKTAB))
    assert app.detail_view.current_field == 0


def test_plain_s_is_typed():
    app = make_app()
    app.open_new_todo()
    handle_key_event(app, char("s"))
    assert app.detail_view.subject == "s"
    assert app.state is AppState.DETAIL


def test_ctrl_s_saves_valid_todo():
    app = make_app()
    app.open_new_todo()
    for c in "Hi":
        handle_key_event(app, char(c))
    handle_key_event(app, char("s", ctrl=True))
    assert app.state is AppState.MAIN
    assert [todo.subject for todo in app.get_current_todos()] == ["Hi"]


def test_enter_adds_newline_only_in_description():
    app = make_app()
    app.open_new_todo()
    handle_key_event(app, Key(KeyCode.ENTER))
    assert app.detail_view.subject == ""
    handle_key_event(app, Key(KeyCode.TAB))
    handle_key_event(app, Key(KeyCode.ENTER))
    assert app.detail_view.description == "\n"


def test_escape_in_new_mode_saves_valid_todo():
    app = make_app()
    app.open_new_todo()
    handle_key_event(app, char("A"))
    handle_key_event(app, Key(KeyCode.ESC))
    assert app.state is AppState.MAIN
    assert [todo.subject for todo in app.get_current_todos()] == ["A"]


def test_escape_in_edit_mode_updates_todo():
    app = make_app()
    todo = add_todo(app, "Test Todo")
    handle_key_event(app, char("e"))
    handle_key_event(app, char("!"))
    handle_key_event(app, Key(KeyCode.ESC))
    assert app.database.get_todo(todo.id).subject == "Test Todo!"


def test_confirm_keys_cancel():
    app = make_app()
    add_todo(app, "Test Todo")
    app.confirm_delete_selected()

    handle_key_event(app, char("n"))
    assert app.state is AppState.MAIN
    assert app.confirm_dialog is None

    app.confirm_delete_selected()
    handle_key_event(app, Key(KeyCode.ESC))
    assert app.state is AppState.MAIN
    assert app.confirm_dialog is None
    assert len(app.get_current_todos()) == 1


def test_confirm_keys_yes_deletes():
    app = make_app()
    add_todo(app, "Test Todo")
    app.confirm_delete_selected()
    handle_key_event(app, char("y"))
    assert app.state is AppState.MAIN
    assert app.get_current_todos() == []


def test_handle_key_event_routing():
    app = make_app()
    handle_key_event(app, char("q"))
    assert app.should_quit

    app = make_app()
    app.open_new_todo()
    handle_key_event(app, char("H"))
    assert app.detail_view.subject == "H"
    assert not app.should_quit

    app = make_app()
    add_todo(app, "Test Todo")
    app.confirm_delete_selected()
    handle_key_event(app, char("n"))
    assert app.state is AppState.MAIN