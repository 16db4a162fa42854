"""State of the overview (main menu) screen."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .geometry import Rect


class OverviewComponent(enum.Enum):
    START_ANALYSIS = enum.auto()
    VIEW_REPORTS = enum.auto()
    SETTINGS = enum.auto()
    CREDITS = enum.auto()
    HELP = enum.auto()
    EXIT = enum.auto()


class SelectionDirection(enum.Enum):
    NEXT = enum.auto()
    PREVIOUS = enum.auto()


@dataclass
class RepoInfo:
    path: str = "."
    source_branch: str = "main"
    target_branch: str = "HEAD"
    files_to_analyze: int = 0


@dataclass
class OverviewWidgetState:
    """Menu selection, hover and clickable areas of the overview screen."""

    selected_component: OverviewComponent = OverviewComponent.START_ANALYSIS
    hovered_component: OverviewComponent | None = None
    registered_components: dict[OverviewComponent, Rect] = field(default_factory=dict)
    repo_info: RepoInfo = field(default_factory=RepoInfo)
    show_help: bool = False

    def is_over(self, component: OverviewComponent, x: int, y: int) -> bool:
        rect = self.registered_components.get(component)
        return rect is not None and rect.contains(x, y)

    def update_hover(self, x: int, y: int) -> None:
        self.hovered_component = next(
            (c for c, rect in self.registered_components.items() if rect.contains(x, y)),
            None,
        )

    def move_selection(self, direction: SelectionDirection) -> None:
        """Move the menu cursor one entry, wrapping around at either end."""
        order = list(OverviewComponent)
        step = 1 if direction is SelectionDirection.NEXT else -1
        index = order.index(self.selected_component)
        self.selected_component = order[(index + step) % len(order)]