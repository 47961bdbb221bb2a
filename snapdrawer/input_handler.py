"""Input Handler - maps raylib input events to drawer commands.

Polls pointer and keyboard state once per frame and returns the commands
to execute, in order.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from .state import AppState

from .rl_compat import rl
from .commands import (
    Command,
    StartDrag, UpdateDrag, EndDrag, CancelDrag,
    StepDrawer, ToggleDrawer, CloseApp,
)
from .config import KEY_EXPAND, KEY_COLLAPSE, KEY_TOGGLE, KEY_CLOSE
from .logging import now


@dataclass
class MouseState:
    """Current mouse state snapshot."""
    x: float = 0.0
    y: float = 0.0
    left_pressed: bool = False
    left_released: bool = False
    left_down: bool = False
    focused: bool = True


@dataclass
class InputHandler:
    """Handles input polling and command generation."""

    key_expand: int = KEY_EXPAND
    key_collapse: int = KEY_COLLAPSE
    key_toggle: int = KEY_TOGGLE
    key_close: int = KEY_CLOSE

    _last_y: Optional[float] = None

    def poll_mouse(self) -> MouseState:
        """Get current mouse state."""
        pos = rl.GetMousePosition()
        return MouseState(
            x=pos.x,
            y=pos.y,
            left_pressed=rl.IsMouseButtonPressed(rl.MOUSE_BUTTON_LEFT),
            left_released=rl.IsMouseButtonReleased(rl.MOUSE_BUTTON_LEFT),
            left_down=rl.IsMouseButtonDown(rl.MOUSE_BUTTON_LEFT),
            focused=rl.IsWindowFocused(),
        )

    def poll(self, state: "AppState") -> List[Command]:
        """Poll all input and return commands for this frame."""
        commands: List[Command] = []
        t = now()
        mouse = self.poll_mouse()
        commands.extend(self.pointer_commands(state, mouse, t))

        if rl.IsKeyPressed(self.key_close):
            commands.append(CloseApp())
        if rl.IsKeyPressed(self.key_expand):
            commands.append(StepDrawer(direction=-1))
        if rl.IsKeyPressed(self.key_collapse):
            commands.append(StepDrawer(direction=1))
        if rl.IsKeyPressed(self.key_toggle):
            commands.append(ToggleDrawer())
        return commands

    def pointer_commands(self, state: "AppState", mouse: MouseState,
                         t: float) -> List[Command]:
        """Translate a mouse snapshot into drag commands."""
        if state.drawer.is_dragging:
            if not mouse.focused:
                self._last_y = None
                return [CancelDrag()]
            if mouse.left_released or not mouse.left_down:
                self._last_y = None
                return [EndDrag(mouse.x, mouse.y, t)]
            if mouse.y != self._last_y:
                self._last_y = mouse.y
                return [UpdateDrag(mouse.x, mouse.y, t)]
            return []

        if mouse.left_pressed and state.is_in_drawer(mouse.y, t):
            self._last_y = mouse.y
            return [StartDrag(mouse.x, mouse.y, t)]
        return []


_input_handler: Optional[InputHandler] = None


def get_input_handler() -> InputHandler:
    """Get the input handler instance."""
    global _input_handler
    if _input_handler is None:
        _input_handler = InputHandler()
    return _input_handler
