"""The terminal front end: draws the application and feeds it key presses."""

from __future__ import annotations

import argparse
import curses
import locale
import sys
from itertools import groupby

from todocli.app import App
from todocli.database import DatabaseError
from todocli.events import Key, KeyCode, handle_key_event
from todocli.layout import Canvas, Rect
from todocli.theme import Color, Style

TICK_MS = 100

_SPECIAL_KEYS = {
    curses.KEY_UP: KeyCode.UP,
    curses.KEY_DOWN: KeyCode.DOWN,
    curses.KEY_ENTER: KeyCode.ENTER,
    curses.KEY_BACKSPACE: KeyCode.BACKSPACE,
    curses.KEY_BTAB: KeyCode.BACKTAB,
}

_SPECIAL_CHARS = {
    "\n": KeyCode.ENTER,
    "\r": KeyCode.ENTER,
    "\x1b": KeyCode.ESC,
    "\t": KeyCode.TAB,
    "\x7f": KeyCode.BACKSPACE,
    "\x08": KeyCode.BACKSPACE,
}

_BASIC_COLORS = {
    curses.COLOR_BLACK: (0, 0, 0),
    curses.COLOR_RED: (205, 49, 49),
    curses.COLOR_GREEN: (13, 188, 121),
    curses.COLOR_YELLOW: (229, 229, 16),
    curses.COLOR_BLUE: (36, 114, 200),
    curses.COLOR_MAGENTA: (188, 63, 188),
    curses.COLOR_CYAN: (17, 168, 205),
    curses.COLOR_WHITE: (229, 229, 229),
}


def key_from_curses(value: int | str) -> Key | None:
    """Turn a value read from curses into a key, or None if it means nothing here."""
    if isinstance(value, int):
        if value in _SPECIAL_KEYS:
            return Key(_SPECIAL_KEYS[value])
        if 0 <= value < curses.KEY_MIN:
            value = chr(value)
        else:
            return None
    if len(value) != 1:
        return None
    if value in _SPECIAL_CHARS:
        return Key(_SPECIAL_CHARS[value])
    code = ord(value)
    if 1 <= code <= 26:
        return Key(KeyCode.CHAR, chr(code + ord("a") - 1), ctrl=True)
    if code < 32 or code == 127:
        return None
    return Key(KeyCode.CHAR, value)


def _nearest_basic(rgb: Color) -> int:
    return min(
        _BASIC_COLORS,
        key=lambda number: sum((a - b) ** 2 for a, b in zip(_BASIC_COLORS[number], rgb)),
    )


class _Palette:
    """Curses colour pairs for theme styles, allocated on first use."""

    def __init__(self) -> None:
        self._pairs: dict[tuple[int, int], int] = {}
        self._colors: dict[Color, int] = {}
        self._next_color = 16
        self._default_fg = curses.COLOR_WHITE
        self._default_bg = curses.COLOR_BLACK
        try:
            self.enabled = curses.has_colors()
            if self.enabled:
                curses.start_color()
                self._custom = curses.can_change_color() and curses.COLORS > 16
        except curses.error:
            self.enabled = False
            self._custom = False
            return
        if self.enabled:
            try:
                curses.use_default_colors()
                self._default_fg = self._default_bg = -1
            except curses.error:
                pass

    def _color(self, rgb: Color | None, default: int) -> int:
        if rgb is None:
            return default
        if rgb in self._colors:
            return self._colors[rgb]
        number = _nearest_basic(rgb)
        if self._custom and self._next_color < curses.COLORS:
            try:
                curses.init_color(self._next_color, *(c * 1000 // 255 for c in rgb))
                number = self._next_color
                self._next_color += 1
            except curses.error:
                pass
        self._colors[rgb] = number
        return number

    def _pair(self, fg: int, bg: int) -> int:
        if (fg, bg) in self._pairs:
            return self._pairs[(fg, bg)]
        number = len(self._pairs) + 1
        if number >= curses.COLOR_PAIRS:
            return 0
        try:
            curses.init_pair(number, fg, bg)
        except curses.error:
            return 0
        self._pairs[(fg, bg)] = number
        return number

    def attr(self, style: Style) -> int:
        attr = curses.A_BOLD if style.bold else curses.A_NORMAL
        if not self.enabled or (style.fg is None and style.bg is None):
            return attr
        fg = self._color(style.fg, self._default_fg)
        bg = self._color(style.bg, self._default_bg)
        try:
            return attr | curses.color_pair(self._pair(fg, bg))
        except curses.error:
            return attr


def _paint(screen, canvas: Canvas, palette: _Palette) -> None:
    screen.erase()
    for y, text in enumerate(canvas.text_rows()):
        try:
            screen.addstr(y, 0, text)
        except curses.error:
            # Writing the bottom-right cell moves the cursor off the screen.
            pass
        x = 0
        columns = groupby(range(canvas.width), key=lambda column: canvas.style_at(column, y))
        for style, run in columns:
            count = len(list(run))
            try:
                screen.chgat(y, x, count, palette.attr(style))
            except curses.error:
                pass
            x += count
    screen.refresh()


def _prepare_terminal(screen) -> None:
    for setting, value in ((curses.curs_set, 0), (curses.set_escdelay, 25)):
        try:
            setting(value)
        except curses.error:
            pass
    screen.keypad(True)
    screen.timeout(TICK_MS)


def run_app(screen, app: App) -> None:
    """Draw ``app`` on ``screen`` and handle keys until it asks to quit."""
    palette = _Palette()
    _prepare_terminal(screen)
    while True:
        height, width = screen.getmaxyx()
        canvas = Canvas(width, height)
        app.render(canvas, Rect(0, 0, width, height))
        _paint(screen, canvas, palette)

        try:
            value = screen.get_wch()
        except curses.error:
            value = None
        if value is not None:
            key = key_from_curses(value)
            if key is not None:
                handle_key_event(app, key)

        if app.should_quit:
            break


def main(argv: list[str] | None = None) -> int:
    """Start the todo manager in the terminal."""
    parser = argparse.ArgumentParser(prog="todocli", description="A terminal todo manager.")
    parser.parse_args(argv)
    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass

    try:
        app = App()
    except DatabaseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        curses.wrapper(run_app, app)
    except (DatabaseError, curses.error) as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())