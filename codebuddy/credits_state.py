"""State of the credits screen."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .geometry import Rect

SCROLL_STEP = 5
VISIBLE_LINES = 20


class CreditsComponent(enum.Enum):
    BACK_TO_OVERVIEW = enum.auto()
    SCROLL_UP = enum.auto()
    SCROLL_DOWN = enum.auto()


@dataclass
class CreditsWidgetState:
    """Clickable areas and scroll position of the credits screen."""

    selected_component: CreditsComponent = CreditsComponent.BACK_TO_OVERVIEW
    hovered_component: CreditsComponent | None = None
    registered_components: dict[CreditsComponent, Rect] = field(default_factory=dict)
    scroll_offset: int = 0
    total_lines: int = 0

    def is_over(self, component: CreditsComponent, x: int, y: int) -> bool:
        rect = self.registered_components.get(component)
        return rect is not None and rect.contains(x, y)

    def scroll_up(self) -> None:
        if self.scroll_offset > 0:
            self.scroll_offset = max(0, self.scroll_offset - SCROLL_STEP)

    def scroll_down(self) -> None:
        if self.scroll_offset < max(0, self.total_lines - VISIBLE_LINES):
            self.scroll_offset += SCROLL_STEP