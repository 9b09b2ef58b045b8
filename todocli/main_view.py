"""The main screen: a header, the table of todos and a footer of key hints."""

from __future__ import annotations

from typing import Iterable

from todocli.layout import Canvas, Direction, Length, Min, Rect, Span, split
from todocli.theme import Style, Theme
from todocli.todo import Todo

HEADER_TEXT = "📝 TodoCLI - Terminal Todo Manager"
TABLE_TITLE = "📝 All Todos"
HIGHLIGHT_SYMBOL = "▶ "
COMPLETED_ROW_ICON = "🔴"
ROW_TIME_FORMAT = "%Y-%m-%d %H:%M"
COLUMN_HEADERS = ("📋", "Subject", "Last Modified")


def _fill(canvas: Canvas, area: Rect, style: Style) -> None:
    for y in range(area.y, area.bottom):
        canvas.put(area.x, y, " " * area.width, style)


class MainView:
    """The list of all todos with a movable selection."""

    def __init__(self) -> None:
        self._selected: int | None = 0
        self._offset = 0

    def select(self, index: int | None) -> None:
        """Select the row at ``index``, or nothing when it is None."""
        self._selected = index
        if index is None:
            self._offset = 0

    def selected_index(self) -> int | None:
        return self._selected

    def next(self, length: int) -> None:
        """Move the selection down one row, wrapping to the top."""
        if length == 0:
            return
        self._selected = 0 if self._selected is None else (self._selected + 1) % length

    def previous(self, length: int) -> None:
        """Move the selection up one row, wrapping to the bottom."""
        if length == 0:
            return
        if self._selected is None:
            self._selected = 0
        elif self._selected == 0:
            self._selected = length - 1
        else:
            self._selected -= 1

    def render(self, canvas: Canvas, area: Rect, todos: Iterable[Todo]) -> None:
        """Draw the whole main screen into ``area``."""
        todos = list(todos)
        header_area, table_area, footer_area = split(
            area, [Length(3), Min(0), Length(3)], Direction.VERTICAL
        )
        self._render_header(canvas, header_area)
        self._render_table(canvas, table_area, todos)
        self._render_footer(canvas, footer_area)

    @staticmethod
    def _render_header(canvas: Canvas, area: Rect) -> None:
        inner = canvas.draw_block(area, "TodoCLI", Theme.border(), Theme.accent())
        style = Theme.accent().bolded()
        _fill(canvas, inner, style)
        canvas.draw_lines(inner, [[Span(HEADER_TEXT, style)]])

    def _update_offset(self, length: int, visible: int) -> None:
        self._offset = min(self._offset, max(length - 1, 0))
        if self._selected is None or length == 0 or visible <= 0:
            return
        selected = min(self._selected, length - 1)
        if selected < self._offset:
            self._offset = selected
        elif selected >= self._offset + visible:
            self._offset = selected - visible + 1

    @staticmethod
    def _put_cells(
        canvas: Canvas, columns: list[Rect], y: int, texts: Iterable[str], style: Style
    ) -> None:
        for column, text in zip(columns, texts):
            if column.width <= 0:
                continue
            canvas.put(column.x, y, " " * column.width, style)
            canvas.put(column.x, y, text, style, max_width=column.width)

    def _render_table(self, canvas: Canvas, area: Rect, todos: list[Todo]) -> None:
        inner = canvas.draw_block(area, TABLE_TITLE, Theme.border(), Theme.accent())
        if inner.width <= 0 or inner.height <= 0:
            return

        symbol_width = len(HIGHLIGHT_SYMBOL) if self._selected is not None else 0
        symbol_width = min(symbol_width, inner.width)
        columns_area = Rect(
            inner.x + symbol_width, inner.y, inner.width - symbol_width, inner.height
        )
        columns = split(
            columns_area,
            [Length(3), Length(1), Min(20), Length(1), Length(16)],
            Direction.HORIZONTAL,
        )[::2]

        header_style = Theme.accent().bolded()
        _fill(canvas, Rect(inner.x, inner.y, inner.width, 1), header_style)
        self._put_cells(canvas, columns, inner.y, COLUMN_HEADERS, header_style)

        body_top = inner.y + 2
        visible = max(inner.bottom - body_top, 0)
        self._update_offset(len(todos), visible)

        rows = enumerate(todos[self._offset :], start=self._offset)
        for y, (index, todo) in zip(range(body_top, inner.bottom), rows):
            if todo.is_completed():
                style, icon = Theme.completed(), COMPLETED_ROW_ICON
            else:
                style, icon = Theme.default(), todo.status_icon()
            if index == self._selected:
                style = Theme.selected()
                _fill(canvas, Rect(inner.x, y, inner.width, 1), style)
                canvas.put(inner.x, y, HIGHLIGHT_SYMBOL, style, max_width=symbol_width)
            texts = (icon, todo.subject, todo.last_modified_at.strftime(ROW_TIME_FORMAT))
            self._put_cells(canvas, columns, y, texts, style)

    @staticmethod
    def _render_footer(canvas: Canvas, area: Rect) -> None:
        inner = canvas.draw_block(area, None, Theme.border())
        _fill(canvas, inner, Theme.default())
        canvas.draw_lines(
            inner,
            [
                [
                    Span("💡 Controls: ", Theme.accent()),
                    Span("Enter", Theme.active()),
                    Span("=View/Edit  ", Theme.default()),
                    Span("d", Theme.active()),
                    Span("=Toggle  ", Theme.default()),
                    Span("n", Theme.active()),
                    Span("=New  ", Theme.default()),
                    Span("x", Theme.error()),
                    Span("=Delete  ", Theme.default()),
                    Span("q", Theme.warning()),
                    Span("=Quit", Theme.default()),
                ]
            ],
        )