"""Command Pattern for drawer input.

Commands encapsulate actions that can be triggered by pointer or keyboard
input. Each command has an execute() method and optional can_execute()
for guards, so input polling stays separate from drawer logic.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .state import AppState

from .snap import step_up, step_down
from .logging import log


class Command(ABC):
    """Base class for all commands."""

    @abstractmethod
    def execute(self, state: "AppState") -> bool:
        """Execute the command. Returns True if action was taken."""
        pass

    def can_execute(self, state: "AppState") -> bool:
        """Check if command can be executed. Override for guards."""
        return True


# ═══════════════════════════════════════════════════════════════════════════
# Drag Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class StartDrag(Command):
    """Pointer pressed inside the drawer."""
    x: float
    y: float
    t: float

    def can_execute(self, state: "AppState") -> bool:
        return not state.drawer.is_dragging and state.is_in_drawer(self.y, self.t)

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        on_handle = state.is_on_handle(self.y, self.t)
        state.input.start_press(self.x, self.y, self.t, on_handle)
        state.drawer.on_drag_start((self.x, self.y), self.t)
        log(f"[CMD] StartDrag at y={self.y:.0f} handle={on_handle}")
        return True


@dataclass
class UpdateDrag(Command):
    """Pointer moved while pressed."""
    x: float
    y: float
    t: float

    def can_execute(self, state: "AppState") -> bool:
        return state.drawer.is_dragging

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        state.input.track(self.x, self.y)
        state.drawer.on_drag_move((self.x, self.y), self.t)
        return True


@dataclass
class EndDrag(Command):
    """Pointer released; a short still press on the handle is a tap."""
    x: float
    y: float
    t: float

    def can_execute(self, state: "AppState") -> bool:
        return state.drawer.is_dragging

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        state.input.track(self.x, self.y)
        state.input.end_press()
        if state.input.is_tap(self.t):
            state.drawer.abort_drag()
            new_state = state.drawer.toggle_state()
            log(f"[CMD] TapHandle -> {new_state.name}")
            return True
        new_state = state.drawer.on_drag_end((self.x, self.y), self.t)
        log(f"[CMD] EndDrag -> {new_state.name}")
        return True


@dataclass
class CancelDrag(Command):
    """Drag interrupted (window lost focus, pointer left the window)."""

    def can_execute(self, state: "AppState") -> bool:
        return state.drawer.is_dragging

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        state.input.end_press()
        new_state = state.drawer.on_drag_cancel()
        log(f"[CMD] CancelDrag -> {new_state.name}")
        return True


# ═══════════════════════════════════════════════════════════════════════════
# State Commands
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class ToggleDrawer(Command):
    """Same as tapping the handle."""

    def can_execute(self, state: "AppState") -> bool:
        return not state.drawer.is_dragging

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        new_state = state.drawer.toggle_state()
        log(f"[CMD] ToggleDrawer -> {new_state.name}")
        return True


@dataclass
class StepDrawer(Command):
    """Move one state up (direction < 0) or down (direction > 0)."""
    direction: int = -1

    def can_execute(self, state: "AppState") -> bool:
        return not state.drawer.is_dragging

    def execute(self, state: "AppState") -> bool:
        if not self.can_execute(state):
            return False
        current = state.drawer.current_state
        target = step_down(current) if self.direction > 0 else step_up(current)
        if target == current:
            return False
        state.drawer.set_state(target)
        log(f"[CMD] StepDrawer {current.name} -> {target.name}")
        return True


@dataclass
class CloseApp(Command):
    """Close the demo."""

    def execute(self, state: "AppState") -> bool:
        log("[CMD] CloseApp")
        state.running = False
        return True
