"""Screen state - window size and drawer content."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from ..config import (
    SCREEN_W, SCREEN_H, DRAWER_TITLE, DEMO_ROWS,
    ROW_HEIGHT, ROW_SPACING, CONTENT_PADDING,
)


@dataclass
class ScreenState:
    """Layout inputs for the demo screen."""
    screen_w: int = SCREEN_W
    screen_h: int = SCREEN_H
    title: str = DRAWER_TITLE
    rows: List[str] = field(default_factory=lambda: list(DEMO_ROWS))

    def content_height(self) -> float:
        """Natural height of the row list below the handle area."""
        if not self.rows:
            return 0.0
        n = len(self.rows)
        return CONTENT_PADDING * 2 + n * ROW_HEIGHT + (n - 1) * ROW_SPACING
