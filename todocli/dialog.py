"""A yes/no confirmation popup."""

from __future__ import annotations

from dataclasses import dataclass

from todocli.layout import Canvas, Direction, Length, Min, Rect, Span, centered_rect, split
from todocli.theme import Theme


@dataclass
class ConfirmDialog:
    """A titled question that the user answers with y or n."""

    title: str
    message: str

    def render(self, canvas: Canvas, area: Rect) -> None:
        """Draw the dialog centred in ``area``."""
        popup = centered_rect(50, 30, area)
        canvas.clear(popup)
        message_area, controls_area = split(popup, [Min(3), Length(3)], Direction.VERTICAL)

        inner = canvas.draw_block(
            message_area, self.title, Theme.border(), Theme.error().bolded()
        )
        canvas.draw_lines(
            inner,
            [
                [Span(self.message, Theme.default())],
                [],
                [Span("Are you sure?", Theme.warning().bolded())],
            ],
        )

        inner = canvas.draw_block(controls_area, None, Theme.border())
        canvas.draw_lines(
            inner,
            [
                [
                    Span("⚠️  ", Theme.warning()),
                    Span("y", Theme.error()),
                    Span("=Yes  ", Theme.default()),
                    Span("n", Theme.success()),
                    Span("/", Theme.default()),
                    Span("Esc", Theme.success()),
                    Span("=No", Theme.default()),
                ]
            ],
        )