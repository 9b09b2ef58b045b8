"""The popup that shows, edits or creates a single todo."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from todocli.layout import (
    Canvas,
    Direction,
    Length,
    Min,
    Rect,
    Span,
    centered_rect,
    split,
)
from todocli.theme import Theme
from todocli.todo import Todo

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
SUBJECT_FIELD = 0
DESCRIPTION_FIELD = 1


class DetailMode(Enum):
    VIEW = "view"
    EDIT = "edit"
    NEW = "new"


_TITLES = {
    DetailMode.VIEW: "Todo Details",
    DetailMode.EDIT: "Edit Todo",
    DetailMode.NEW: "New Todo",
}


@dataclass
class DetailView:
    """Fields of a todo being viewed or edited, and the field with focus."""

    mode: DetailMode
    subject: str = ""
    description: str = ""
    created_at: datetime | None = None
    closed_at: datetime | None = None
    last_modified_at: datetime | None = None
    current_field: int = SUBJECT_FIELD

    @classmethod
    def _from_todo(cls, todo: Todo, mode: DetailMode) -> DetailView:
        return cls(
            mode=mode,
            subject=todo.subject,
            description=todo.description,
            created_at=todo.created_at,
            closed_at=todo.closed_at,
            last_modified_at=todo.last_modified_at,
        )

    @classmethod
    def for_viewing(cls, todo: Todo) -> DetailView:
        return cls._from_todo(todo, DetailMode.VIEW)

    @classmethod
    def for_editing(cls, todo: Todo) -> DetailView:
        return cls._from_todo(todo, DetailMode.EDIT)

    @classmethod
    def for_creation(cls) -> DetailView:
        return cls(mode=DetailMode.NEW)

    def _field_style(self, field: int):
        if self.current_field == field and self.mode is not DetailMode.VIEW:
            return Theme.selected()
        return Theme.default()

    def render(self, canvas: Canvas, area: Rect) -> None:
        """Draw the popup centred in ``area``."""
        popup = centered_rect(80, 70, area)
        canvas.clear(popup)
        subject_area, description_area, metadata_area, controls_area = split(
            popup,
            [Length(3), Min(8), Length(6), Length(3)],
            Direction.VERTICAL,
        )

        inner = canvas.draw_block(subject_area, "Subject", Theme.border(), Theme.accent())
        canvas.draw_lines(inner, [[Span(self.subject, self._field_style(SUBJECT_FIELD))]])

        description_style = self._field_style(DESCRIPTION_FIELD)
        inner = canvas.draw_block(
            description_area, "Description", Theme.border(), Theme.accent()
        )
        canvas.draw_lines(
            inner,
            [[Span(part, description_style)] for part in self.description.split("\n")],
            wrap=True,
        )

        inner = canvas.draw_block(metadata_area, "Information", Theme.border(), Theme.accent())
        canvas.draw_lines(inner, self._metadata_lines())

        inner = canvas.draw_block(
            controls_area, _TITLES[self.mode], Theme.border(), Theme.accent()
        )
        canvas.draw_lines(inner, [self._controls_line()])

    def _metadata_lines(self) -> list[list[Span]]:
        lines = []
        if self.created_at is not None:
            lines.append(
                [
                    Span("Created: ", Theme.accent()),
                    Span(self.created_at.strftime(TIME_FORMAT), Theme.default()),
                ]
            )
        if self.last_modified_at is not None:
            lines.append(
                [
                    Span("Modified: ", Theme.accent()),
                    Span(self.last_modified_at.strftime(TIME_FORMAT), Theme.default()),
                ]
            )
        if self.closed_at is not None:
            status = Span("Completed", Theme.completed())
        else:
            status = Span("Active", Theme.success())
        lines.append([Span("Status: ", Theme.accent()), status])
        if self.closed_at is not None:
            lines.append(
                [
                    Span("Closed: ", Theme.accent()),
                    Span(self.closed_at.strftime(TIME_FORMAT), Theme.completed()),
                ]
            )
        return lines

    def _controls_line(self) -> list[Span]:
        if self.mode is DetailMode.VIEW:
            return [
                Span("Controls: ", Theme.accent()),
                Span("e", Theme.active()),
                Span("=Edit  ", Theme.default()),
                Span("Esc", Theme.warning()),
                Span("=Back", Theme.default()),
            ]
        return [
            Span("Controls: ", Theme.accent()),
            Span("Tab", Theme.active()),
            Span("=Switch Field  ", Theme.default()),
            Span("Ctrl+S", Theme.success()),
            Span("=Save  ", Theme.default()),
            Span("Esc", Theme.warning()),
            Span("=Cancel", Theme.default()),
        ]

    def next_field(self) -> None:
        self.current_field = (self.current_field + 1) % 2

    def previous_field(self) -> None:
        self.current_field = DESCRIPTION_FIELD if self.current_field == SUBJECT_FIELD else SUBJECT_FIELD

    def add_char(self, char: str) -> None:
        if self.current_field == SUBJECT_FIELD:
            self.subject += char
        elif self.current_field == DESCRIPTION_FIELD:
            self.description += char

    def delete_char(self) -> None:
        if self.current_field == SUBJECT_FIELD:
            self.subject = self.subject[:-1]
        elif self.current_field == DESCRIPTION_FIELD:
            self.description = self.description[:-1]

    def is_valid(self) -> bool:
        """A todo needs a subject that is not just whitespace."""
        return bool(self.subject.strip())