"""State of the analysis screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class AnalysisWidgetState:
    """Progress of a running analysis and the review it produced."""

    is_analyzing: bool = False
    progress: float = 0.0
    current_file: str = ""
    review: Any = None
    selected_issue: int = 0

    def start_analysis(self) -> None:
        self.is_analyzing = True
        self.progress = 0.0
        self.current_file = ""
        self.review = None

    def update_progress(self, progress: float, current_file: str) -> None:
        self.progress = progress
        self.current_file = current_file

    def complete_analysis(self, review: Any) -> None:
        self.is_analyzing = False
        self.progress = 100.0
        self.review = review
        self.selected_issue = 0

    def move_issue_selection(self, direction: int) -> None:
        """Move the issue cursor by ``direction``, clamped to the issue list."""
        if self.review is None or not self.review.issues:
            return
        last = len(self.review.issues) - 1
        self.selected_issue = min(max(self.selected_issue + direction, 0), last)