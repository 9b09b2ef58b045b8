"""Screen geometry and a character-cell canvas for drawing text widgets."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum
from itertools import dropwhile, groupby
from typing import Iterable, Sequence, Union

from todocli.theme import Style


class Direction(Enum):
    """The axis along which an area is split."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


@dataclass(frozen=True)
class Rect:
    """A rectangle of cells: top-left corner and size."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass(frozen=True)
class Length:
    """A segment of exactly this many cells."""

    value: int


@dataclass(frozen=True)
class Min:
    """A segment of at least this many cells that takes up spare room."""

    value: int


@dataclass(frozen=True)
class Percentage:
    """A segment taking this percentage of the whole."""

    value: int


Constraint = Union[Length, Min, Percentage]


@dataclass(frozen=True)
class Span:
    """A run of text drawn in one style."""

    text: str
    style: Style = Style()


LineLike = Union[str, Span, Iterable[Union[str, Span]]]


def _base_size(constraint: Constraint, total: int) -> int:
    if isinstance(constraint, Percentage):
        return total * constraint.value // 100
    return max(constraint.value, 0)


def _shrink(sizes: list[int], eligible: list[bool], overflow: int) -> tuple[list[int], int]:
    """Take up to ``overflow`` cells from eligible segments, last first."""
    shrunk = []
    for size, allowed in zip(reversed(sizes), reversed(eligible)):
        cut = min(size, overflow) if allowed else 0
        overflow -= cut
        shrunk.append(size - cut)
    return shrunk[::-1], overflow


def split(
    area: Rect,
    constraints: Sequence[Constraint],
    direction: Direction = Direction.VERTICAL,
) -> list[Rect]:
    """Divide ``area`` into consecutive segments following ``constraints``."""
    constraints = list(constraints)
    vertical = direction is Direction.VERTICAL
    total = area.height if vertical else area.width
    sizes = [_base_size(c, total) for c in constraints]
    flexible = [isinstance(c, Min) for c in constraints]
    excess = total - sum(sizes)

    if excess > 0 and any(flexible):
        share, extra = divmod(excess, sum(flexible))
        bonus = iter(range(sum(flexible)))
        sizes = [
            size + share + (1 if next(bonus) < extra else 0) if is_flex else size
            for size, is_flex in zip(sizes, flexible)
        ]
    elif excess > 0 and sizes:
        sizes[-1] += excess
    elif excess < 0:
        sizes, overflow = _shrink(sizes, flexible, -excess)
        sizes, _ = _shrink(sizes, [True] * len(sizes), overflow)

    rects = []
    offset = area.y if vertical else area.x
    for size in sizes:
        if vertical:
            rects.append(Rect(area.x, offset, area.width, size))
        else:
            rects.append(Rect(offset, area.y, size, area.height))
        offset += size
    return rects


def centered_rect(percent_x: int, percent_y: int, area: Rect) -> Rect:
    """Return a rectangle of the given percentages centred within ``area``."""
    margin_y = (100 - percent_y) // 2
    rows = split(
        area,
        [Percentage(margin_y), Percentage(percent_y), Percentage(margin_y)],
        Direction.VERTICAL,
    )
    margin_x = (100 - percent_x) // 2
    columns = split(
        rows[1],
        [Percentage(margin_x), Percentage(percent_x), Percentage(margin_x)],
        Direction.HORIZONTAL,
    )
    return columns[1]


def _char_width(ch: str) -> int:
    if unicodedata.category(ch) == "Cc":
        return -1
    if unicodedata.combining(ch) or "\ufe00" <= ch <= "\ufe0f" or ch == "\u200d":
        return 0
    if unicodedata.east_asian_width(ch) in ("W", "F"):
        return 2
    return 1


def _flatten(line: LineLike) -> list[tuple[str, Style]]:
    if isinstance(line, str):
        return [(ch, Style()) for ch in line]
    if isinstance(line, Span):
        return [(ch, line.style) for ch in line.text]
    cells: list[tuple[str, Style]] = []
    for item in line:
        cells.extend(_flatten(item))
    return cells


def _wrap(cells: list[tuple[str, Style]], width: int) -> list[list[tuple[str, Style]]]:
    if width <= 0:
        return []
    rows = []
    while len(cells) > width:
        window = cells[: width + 1]
        cut = max((i for i, (ch, _) in enumerate(window) if ch == " "), default=0)
        if cut == 0:
            rows.append(cells[:width])
            cells = cells[width:]
        else:
            rows.append(cells[:cut])
            cells = cells[cut + 1 :]
        cells = list(dropwhile(lambda cell: cell[0] == " ", cells))
    rows.append(cells)
    return rows


@dataclass
class _Cell:
    char: str = " "
    style: Style = Style()


class Canvas:
    """A grid of styled character cells that widgets draw onto."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._cells = [[_Cell() for _ in range(width)] for _ in range(height)]

    def put(
        self,
        x: int,
        y: int,
        text: str,
        style: Style | None = None,
        max_width: int | None = None,
    ) -> int:
        """Write ``text`` from column ``x`` of row ``y``; return the column after it."""
        style = style if style is not None else Style()
        limit = self.width if max_width is None else min(self.width, x + max_width)
        if not 0 <= y < self.height:
            return x
        row = self._cells[y]
        last: _Cell | None = None
        for ch in text:
            width = _char_width(ch)
            if width < 0:
                continue
            if width == 0:
                if last is not None:
                    last.char += ch
                continue
            if x + width > limit:
                break
            if x >= 0:
                last = row[x]
                last.char = ch
                last.style = style
                if width == 2:
                    row[x + 1].char = ""
                    row[x + 1].style = style
            x += width
        return x

    def _clip(self, area: Rect) -> tuple[range, range]:
        columns = range(max(area.x, 0), min(area.right, self.width))
        rows = range(max(area.y, 0), min(area.bottom, self.height))
        return columns, rows

    def clear(self, area: Rect) -> None:
        """Blank every cell in ``area``."""
        columns, rows = self._clip(area)
        for y in rows:
            for x in columns:
                self._cells[y][x] = _Cell()

    def draw_block(
        self,
        area: Rect,
        title: str | None = None,
        border_style: Style | None = None,
        title_style: Style | None = None,
    ) -> Rect:
        """Draw a bordered box with an optional title; return the area inside it."""
        border_style = border_style if border_style is not None else Style()
        if area.width < 2 or area.height < 2:
            return Rect(area.x, area.y, 0, 0)
        inner = area.width - 2
        self.put(area.x, area.y, "┌" + "─" * inner + "┐", border_style)
        self.put(area.x, area.bottom - 1, "└" + "─" * inner + "┘", border_style)
        for y in range(area.y + 1, area.bottom - 1):
            self.put(area.x, y, "│", border_style)
            self.put(area.right - 1, y, "│", border_style)
        if title:
            self.put(
                area.x + 1,
                area.y,
                title,
                title_style if title_style is not None else border_style,
                max_width=inner,
            )
        return Rect(area.x + 1, area.y + 1, inner, area.height - 2)

    def draw_lines(self, area: Rect, lines: Iterable[LineLike], wrap: bool = False) -> None:
        """Draw lines of spans into ``area``, wrapping words if asked."""
        rows: list[list[tuple[str, Style]]] = []
        for line in lines:
            cells = _flatten(line)
            if wrap:
                rows.extend(_wrap(cells, area.width))
            else:
                rows.append(cells)
        for y, row in zip(range(area.y, area.bottom), rows):
            x = area.x
            for style, run in groupby(row, key=lambda cell: cell[1]):
                room = area.right - x
                if room <= 0:
                    break
                x = self.put(x, y, "".join(ch for ch, _ in run), style, max_width=room)

    def text_rows(self) -> list[str]:
        """Return the text of every row."""
        return ["".join(cell.char for cell in row) for row in self._cells]

    def style_at(self, x: int, y: int) -> Style:
        """Return the style of the cell at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the canvas")
        return self._cells[y][x].style