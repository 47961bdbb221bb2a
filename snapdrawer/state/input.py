"""Input state - pointer press tracking for drag vs. tap."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from ..config import TAP_SLOP_PX, TAP_MAX_MS


@dataclass
class InputState:
    """State for pointer handling over the drawer."""
    is_pressed: bool = False
    press_pos: Tuple[float, float] = (0.0, 0.0)
    press_time: float = 0.0
    press_on_handle: bool = False
    max_travel: float = 0.0

    def start_press(self, x: float, y: float, t: float, on_handle: bool) -> None:
        """Record a pointer press inside the drawer."""
        self.is_pressed = True
        self.press_pos = (x, y)
        self.press_time = t
        self.press_on_handle = on_handle
        self.max_travel = 0.0

    def track(self, x: float, y: float) -> None:
        """Update the furthest distance travelled since the press."""
        dx = x - self.press_pos[0]
        dy = y - self.press_pos[1]
        self.max_travel = max(self.max_travel, (dx * dx + dy * dy) ** 0.5)

    def end_press(self) -> bool:
        """End the press. Returns True if a press was active."""
        was_pressed = self.is_pressed
        self.is_pressed = False
        return was_pressed

    def is_tap(self, t: float) -> bool:
        """Check if the press that just ended counts as a tap on the handle."""
        return (self.press_on_handle and
                self.max_travel < TAP_SLOP_PX and
                (t - self.press_time) * 1000.0 <= TAP_MAX_MS)
