"""Application - demo main loop orchestrator.

The Application class coordinates, once per frame:
- Input handling (via InputHandler)
- Command execution
- State updates (content measurement, settle animation)
- Rendering (via Renderer)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional
import sys
import traceback

from .state import AppState, default_drawer
from .renderer import Renderer, get_renderer
from .input_handler import InputHandler, get_input_handler
from .commands import Command
from .rl_compat import rl, RL_VERSION, init_window
from .config import TARGET_FPS, WINDOW_TITLE
from .logging import log, now, increment_frame
from .types import DrawerState

STATE_ARGS = {
    "collapsed": DrawerState.COLLAPSED,
    "half": DrawerState.HALF_EXPANDED,
    "full": DrawerState.FULLY_EXPANDED,
}


@dataclass
class Application:
    """
    Demo application orchestrator.

    Usage:
        app = Application(state)
        app.initialize()
        app.run()
    """

    state: AppState = field(default_factory=AppState)
    renderer: Renderer = field(default_factory=get_renderer)
    input_handler: InputHandler = field(default_factory=get_input_handler)

    def initialize(self) -> None:
        """Open the window and hook drawer notifications."""
        screen = self.state.screen
        log(f"[APP] Creating window {screen.screen_w}x{screen.screen_h} ({RL_VERSION})")
        init_window(screen.screen_w, screen.screen_h, WINDOW_TITLE)
        rl.SetExitKey(0)
        rl.SetTargetFPS(TARGET_FPS)
        self.state.drawer.set_content_height(screen.content_height())
        self.state.drawer.add_listener(self._on_drawer_state)
        log("[APP] Application initialized")

    def run(self) -> None:
        """Run the main loop until the window closes or CloseApp runs."""
        self.state.running = True
        log("[APP] Starting main loop")
        try:
            while self.state.running:
                self._frame()
        except Exception as e:
            log(f"[APP][CRITICAL] Unhandled exception: {e!r}")
            log(f"[APP][CRITICAL] Traceback:\n{traceback.format_exc()}")
            raise
        finally:
            self._cleanup()

    def _frame(self) -> None:
        """Execute a single frame."""
        if rl.WindowShouldClose():
            self.state.running = False
            return

        # 1. Poll input and generate commands
        commands = self.input_handler.poll(self.state)

        # 2. Execute commands
        self.execute(commands)
        if not self.state.running:
            return

        # 3. Update state
        t = now()
        self.state.drawer.set_content_height(self.state.screen.content_height())
        self.state.drawer.update(t)

        # 4. Render
        self.renderer.draw_frame(self.state, t)

        # 5. Frame bookkeeping
        increment_frame()

    def execute(self, commands: List[Command]) -> None:
        for cmd in commands:
            cmd.execute(self.state)
            if not self.state.running:
                return

    def _on_drawer_state(self, old: DrawerState, new: DrawerState) -> None:
        if new == DrawerState.FULLY_EXPANDED:
            log("[APP] Drawer fully expanded, hiding floating button")
        elif old == DrawerState.FULLY_EXPANDED:
            log("[APP] Drawer left full state, showing floating button")

    def _cleanup(self) -> None:
        log("[APP] Closing window")
        rl.CloseWindow()
        log("[APP] Cleanup complete")


def parse_initial_state(args: List[str]) -> DrawerState:
    """Read `--state {collapsed,half,full}` from args (default half)."""
    for i, a in enumerate(args):
        value: Optional[str] = None
        if a.startswith("--state="):
            value = a.split("=", 1)[1]
        elif a == "--state" and i + 1 < len(args):
            value = args[i + 1]
        if value is not None:
            if value not in STATE_ARGS:
                log(f"[ARGS] Unknown state {value!r}, using half")
                return DrawerState.HALF_EXPANDED
            return STATE_ARGS[value]
    return DrawerState.HALF_EXPANDED


def main(argv: Optional[List[str]] = None) -> None:
    log("[MAIN] Starting SnapDrawer demo")
    args = sys.argv[1:] if argv is None else argv
    initial = parse_initial_state(args)
    log(f"[ARGS] Initial drawer state {initial.name}")

    app = Application(state=AppState(drawer=default_drawer(initial)))
    app.initialize()
    app.run()
