"""Colour theme and text styles for the terminal interface."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Color(enum.Enum):
    """Terminal colours used by the theme."""

    RESET = "reset"
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    GRAY = "gray"
    WHITE = "white"


class Modifier(enum.Flag):
    """Text attributes that can be combined."""

    NONE = 0
    BOLD = enum.auto()
    DIM = enum.auto()
    ITALIC = enum.auto()
    UNDERLINED = enum.auto()
    SLOW_BLINK = enum.auto()
    RAPID_BLINK = enum.auto()
    REVERSED = enum.auto()
    HIDDEN = enum.auto()
    CROSSED_OUT = enum.auto()


@dataclass(frozen=True)
class Style:
    """Foreground, background and text attributes of a span of text."""

    fg: Color | None = None
    bg: Color | None = None
    modifiers: Modifier = Modifier.NONE

    def with_fg(self, color: Color) -> Style:
        return Style(color, self.bg, self.modifiers)

    def with_bg(self, color: Color) -> Style:
        return Style(self.fg, color, self.modifiers)

    def with_modifier(self, modifier: Modifier) -> Style:
        return Style(self.fg, self.bg, self.modifiers | modifier)


@dataclass(frozen=True)
class Theme:
    """The palette of the interface and the styles derived from it."""

    primary: Color = Color.CYAN
    secondary: Color = Color.BLUE
    accent: Color = Color.MAGENTA
    background: Color = Color.BLACK
    error: Color = Color.RED
    warning: Color = Color.YELLOW
    success: Color = Color.GREEN
    info: Color = Color.BLUE
    text_primary: Color = Color.WHITE

    def title_style(self) -> Style:
        return Style(fg=self.primary, modifiers=Modifier.BOLD)

    def header_style(self) -> Style:
        return Style(fg=self.secondary, modifiers=Modifier.BOLD)

    def success_style(self) -> Style:
        return Style(fg=self.success, modifiers=Modifier.BOLD)

    def error_style(self) -> Style:
        return Style(fg=self.error, modifiers=Modifier.BOLD)

    def warning_style(self) -> Style:
        return Style(fg=self.warning, modifiers=Modifier.BOLD)

    def info_style(self) -> Style:
        return Style(fg=self.info)

    def selected_style(self) -> Style:
        return Style(fg=self.background, bg=self.primary, modifiers=Modifier.BOLD)

    def button_style(self, pressed: bool) -> Style:
        if pressed:
            return Style(fg=self.background, bg=self.accent, modifiers=Modifier.BOLD)
        return Style(fg=self.primary)

    def button_hover_style(self) -> Style:
        return Style(fg=self.text_primary, bg=self.secondary, modifiers=Modifier.BOLD)

    def button_normal_style(self) -> Style:
        return Style(fg=self.primary, modifiers=Modifier.DIM)

    def primary_style(self) -> Style:
        return Style(fg=self.primary)


THEME = Theme()