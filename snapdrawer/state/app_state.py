"""Composite AppState - the demo screen's drawer plus its sub-states."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from .input import InputState
from .screen import ScreenState
from ..config import DEMO_MIN_HEIGHT, DEMO_HALF_HEIGHT, DEMO_MAX_HEIGHT, HANDLE_AREA_HEIGHT
from ..controller import DrawerController
from ..types import DrawerConfig, DrawerState


def default_drawer(initial_state: DrawerState = DrawerState.HALF_EXPANDED) -> DrawerController:
    """Drawer with the demo's map-screen geometry."""
    config = DrawerConfig(
        min_height=DEMO_MIN_HEIGHT,
        half_height=DEMO_HALF_HEIGHT,
        max_height=DEMO_MAX_HEIGHT,
    )
    return DrawerController(config, initial_state)


@dataclass
class AppState:
    """
    Everything the demo loop reads and writes.

    Usage:
        state.drawer.current_state
        state.screen.screen_h
        state.input.is_pressed
    """
    drawer: DrawerController = field(default_factory=default_drawer)
    screen: ScreenState = field(default_factory=ScreenState)
    input: InputState = field(default_factory=InputState)
    running: bool = True

    # ═══════════════════════════════════════════════════════════════════════
    # Derived geometry
    # ═══════════════════════════════════════════════════════════════════════

    def panel_top(self, timestamp: Optional[float] = None) -> float:
        """Screen y of the drawer's top edge."""
        cfg = self.drawer.config
        return self.screen.screen_h - cfg.max_height + self.drawer.offset(timestamp)

    def is_in_drawer(self, y: float, timestamp: Optional[float] = None) -> bool:
        return y >= self.panel_top(timestamp)

    def is_on_handle(self, y: float, timestamp: Optional[float] = None) -> bool:
        """Check if y falls in the handle strip at the top of the drawer."""
        top = self.panel_top(timestamp)
        return top <= y <= top + HANDLE_AREA_HEIGHT

    @property
    def fab_visible(self) -> bool:
        """Floating button hides while the drawer is fully expanded."""
        return self.drawer.current_state != DrawerState.FULLY_EXPANDED
