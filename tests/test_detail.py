from todocli.detail import DetailMode, DetailView
from todocli.layout import Canvas, Rect
from todocli.theme import Theme
from todocli.todo import Todo


def create_test_todo():
    return Todo.create("Test Subject", "Test Description")


def _render(view):
    canvas = Canvas(100, 40)
    view.render(canvas, Rect(0, 0, 100, 40))
    return canvas


def _find(canvas, text):
    for y, row in enumerate(canvas.text_rows()):
        x = row.find(text)
        if x >= 0:
            return x, y
    return None


def test_detail_view_creation_for_viewing():
    todo = create_test_todo()
    view = DetailView.for_viewing(todo)
    assert view.mode is DetailMode.VIEW
    assert view.subject == "Test Subject"
    assert view.description == "Test Description"
    assert view.current_field == 0
    assert view.created_at == todo.created_at
    assert view.last_modified_at == todo.last_modified_at
    assert view.closed_at is None


def test_detail_view_creation_for_editing():
    todo = create_test_todo()
    view = DetailView.for_editing(todo)
    assert view.mode is DetailMode.EDIT
    assert view.subject == "Test Subject"
    assert view.description == "Test Description"
    assert view.current_field == 0
    assert view.created_at == todo.created_at
    assert view.last_modified_at == todo.last_modified_at


def test_detail_view_creation_for_new():
    view = DetailView.for_creation()
    assert view.mode is DetailMode.NEW
    assert view.subject == ""
    assert view.description == ""
    assert view.current_field == 0
    assert view.created_at is None
    assert view.last_modified_at is None
    assert view.closed_at is None


def test_field_navigation():
    view = DetailView.for_creation()
    assert view.current_field == 0
    view.next_field()
    assert view.current_field == 1
    view.next_field()
    assert view.current_field == 0
    view.previous_field()
    assert view.current_field == 1
    view.previous_field()
    assert view.current_field == 0


def test_add_char():
    view = DetailView.for_creation()
    view.current_field = 0
    view.add_char("H")
    view.add_char("i")
    assert view.subject == "Hi"
    view.current_field = 1
    for ch in "Test":
        view.add_char(ch)
    assert view.description == "Test"
    assert view.subject == "Hi"


def test_delete_char():
    view = DetailView.for_creation()
    view.subject = "Hello"
    view.description = "World"
    view.current_field = 0
    view.delete_char()
    assert view.subject == "Hell"
    view.current_field = 1
    view.delete_char()
    assert view.description == "Worl"
    view.subject = ""
    view.current_field = 0
    view.delete_char()
    assert view.subject == ""


def test_is_valid():
    view = DetailView.for_creation()
    assert not view.is_valid()
    view.subject = "   "
    assert not view.is_valid()
    view.subject = "Valid Subject"
    assert view.is_valid()
    view.subject = "  Valid Subject  "
    assert view.is_valid()


def test_completed_todo_detail_view():
    todo = create_test_todo()
    todo.toggle_completion()
    view = DetailView.for_viewing(todo)
    assert view.closed_at is not None
    assert view.closed_at == todo.closed_at


def test_render_new_highlights_focused_subject():
    view = DetailView.for_creation()
    view.subject = "Hi"
    canvas = _render(view)
    assert _find(canvas, "New Todo") is not None
    assert _find(canvas, "Ctrl+S") is not None
    x, y = _find(canvas, "Hi")
    assert canvas.style_at(x, y) == Theme.selected()
    assert _find(canvas, "Status: Active") is not None


def test_render_view_mode_uses_plain_style():
    view = DetailView.for_viewing(create_test_todo())
    canvas = _render(view)
    assert _find(canvas, "Todo Details") is not None
    assert _find(canvas, "=Edit") is not None
    x, y = _find(canvas, "Test Subject")
    assert canvas.style_at(x, y) == Theme.default()
    assert _find(canvas, "Created: ") is not None
    assert _find(canvas, "Modified: ") is not None


def test_render_completed_shows_closed_time():
    todo = create_test_todo()
    todo.toggle_completion()
    canvas = _render(DetailView.for_viewing(todo))
    status_x, status_y = _find(canvas, "Status: Completed")
    assert canvas.style_at(status_x, status_y) == Theme.accent()
    assert canvas.style_at(status_x + len("Status: "), status_y) == Theme.completed()
    closed_text = todo.closed_at.strftime("%Y-%m-%d %H:%M:%S")
    x, y = _find(canvas, "Closed: " + closed_text)
    assert y == status_y + 1
    assert canvas.style_at(x, y) == Theme.accent()
    assert canvas.style_at(x + len("Closed: "), y) == Theme.completed()


def test_render_multiline_description_uses_separate_rows():
    view = DetailView.for_creation()
    view.description = "first line\nsecond line"
    view.current_field = 1
    canvas = _render(view)
    first = _find(canvas, "first line")
    second = _find(canvas, "second line")
    assert second[1] == first[1] + 1
    assert canvas.style_at(*first) == Theme.selected()


def test_render_leaves_outside_of_popup_untouched():
    canvas = Canvas(100, 40)
    for y in range(40):
        canvas.put(0, y, "#" * 100)
    DetailView.for_creation().render(canvas, Rect(0, 0, 100, 40))
    rows = canvas.text_rows()
    assert rows[0] == "#" * 100
    assert rows[-1] == "#" * 100