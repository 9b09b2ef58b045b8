"""The Tokyo Night colour palette and the text styles built from it."""

from __future__ import annotations

from dataclasses import dataclass, replace

Color = tuple[int, int, int]


@dataclass(frozen=True)
class Style:
    """Foreground and background colours plus a bold flag."""

    fg: Color | None = None
    bg: Color | None = None
    bold: bool = False

    def bolded(self) -> Style:
        """Return the same style in bold."""
        return replace(self, bold=True)


class Theme:
    """Named styles of the Tokyo Night palette."""

    BACKGROUND: Color = (26, 27, 38)
    FOREGROUND: Color = (192, 202, 245)
    ACTIVE: Color = (122, 162, 247)
    COMPLETED: Color = (247, 118, 142)
    BORDER: Color = (65, 72, 104)
    ACCENT: Color = (187, 154, 247)
    SUCCESS: Color = (158, 206, 106)
    WARNING: Color = (255, 158, 100)
    ERROR: Color = (247, 118, 142)

    @staticmethod
    def default() -> Style:
        return Style(fg=Theme.FOREGROUND, bg=Theme.BACKGROUND)

    @staticmethod
    def active() -> Style:
        return Style(fg=Theme.ACTIVE, bg=Theme.BACKGROUND)

    @staticmethod
    def completed() -> Style:
        return Style(fg=Theme.COMPLETED, bg=Theme.BACKGROUND)

    @staticmethod
    def border() -> Style:
        return Style(fg=Theme.BORDER)

    @staticmethod
    def accent() -> Style:
        return Style(fg=Theme.ACCENT, bg=Theme.BACKGROUND)

    @staticmethod
    def success() -> Style:
        return Style(fg=Theme.SUCCESS, bg=Theme.BACKGROUND)

    @staticmethod
    def warning() -> Style:
        return Style(fg=Theme.WARNING, bg=Theme.BACKGROUND)

    @staticmethod
    def error() -> Style:
        return Style(fg=Theme.ERROR, bg=Theme.BACKGROUND)

    @staticmethod
    def selected() -> Style:
        return Style(fg=Theme.BACKGROUND, bg=Theme.ACTIVE)