"""Renderer - handles all drawing operations.

The Renderer is a pure drawing layer that only reads state and draws to
screen. Drawer geometry comes from the controller's offset; the renderer
never decides where the drawer rests.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .state import AppState

from .rl_compat import (
    rl,
    make_rect as RL_Rect, make_color as RL_Color,
    draw_text as RL_DrawText, measure_text,
)
from .config import (
    HANDLE_AREA_HEIGHT, HANDLE_BAR_W, HANDLE_BAR_H, HANDLE_BAR_TOP,
    CORNER_RADIUS, TITLE_FONT_SIZE,
    ROW_HEIGHT, ROW_SPACING, ROW_FONT_SIZE, CONTENT_PADDING,
    FAB_RADIUS, FAB_MARGIN,
    COLOR_BACKDROP, COLOR_BACKDROP_GRID, COLOR_PANEL, COLOR_PANEL_BORDER,
    COLOR_HANDLE, COLOR_TEXT, COLOR_ROW, COLOR_FAB, COLOR_FAB_ICON,
)
from .logging import now

GRID_STEP = 48


@dataclass
class Renderer:
    """
    Handles all drawing operations.

    Usage:
        renderer = Renderer()
        renderer.draw_frame(state)
    """

    def draw_frame(self, state: "AppState", t: Optional[float] = None) -> None:
        """Draw one complete frame at time t."""
        t = now() if t is None else t
        rl.BeginDrawing()
        try:
            self.draw_backdrop(state)
            self.draw_fab(state, t)
            self.draw_drawer(state, t)
        finally:
            rl.EndDrawing()

    # ═══════════════════════════════════════════════════════════════════════
    # Backdrop
    # ═══════════════════════════════════════════════════════════════════════

    def draw_backdrop(self, state: "AppState") -> None:
        """Flat grid standing in for the map behind the drawer."""
        w, h = state.screen.screen_w, state.screen.screen_h
        rl.ClearBackground(RL_Color(COLOR_BACKDROP))
        grid = RL_Color(COLOR_BACKDROP_GRID)
        for x in range(0, w, GRID_STEP):
            rl.DrawLine(x, 0, x, h, grid)
        for y in range(0, h, GRID_STEP):
            rl.DrawLine(0, y, w, y, grid)

    # ═══════════════════════════════════════════════════════════════════════
    # Floating action button
    # ═══════════════════════════════════════════════════════════════════════

    def draw_fab(self, state: "AppState", t: float) -> None:
        """Round button riding just above the drawer's top edge."""
        if not state.fab_visible:
            return
        cx = state.screen.screen_w - FAB_MARGIN - FAB_RADIUS
        cy = state.panel_top(t) - FAB_MARGIN - FAB_RADIUS
        rl.DrawCircle(int(cx), int(cy), FAB_RADIUS, RL_Color(COLOR_FAB))
        icon = RL_Color(COLOR_FAB_ICON)
        arm = FAB_RADIUS // 2
        rl.DrawRectangle(int(cx - arm), int(cy - 2), arm * 2, 4, icon)
        rl.DrawRectangle(int(cx - 2), int(cy - arm), 4, arm * 2, icon)

    # ═══════════════════════════════════════════════════════════════════════
    # Drawer
    # ═══════════════════════════════════════════════════════════════════════

    def draw_drawer(self, state: "AppState", t: float) -> None:
        """Draw the panel, handle, title and rows at the controller's offset."""
        w, h = state.screen.screen_w, state.screen.screen_h
        top = state.panel_top(t)
        panel_h = state.drawer.config.max_height
        roundness = min(1.0, (CORNER_RADIUS * 2) / max(1.0, min(w, panel_h)))

        rl.DrawRectangleRounded(RL_Rect(-1, top - 1, w + 2, panel_h + 2),
                                roundness, 12, RL_Color(COLOR_PANEL_BORDER))
        rl.DrawRectangleRounded(RL_Rect(0, top, w, panel_h),
                                roundness, 12, RL_Color(COLOR_PANEL))

        bar_x = (w - HANDLE_BAR_W) / 2
        rl.DrawRectangleRounded(RL_Rect(bar_x, top + HANDLE_BAR_TOP, HANDLE_BAR_W, HANDLE_BAR_H),
                                1.0, 6, RL_Color(COLOR_HANDLE))

        title = state.screen.title
        tw = measure_text(title, TITLE_FONT_SIZE)
        RL_DrawText(title, int((w - tw) / 2), int(top + HANDLE_BAR_TOP + HANDLE_BAR_H + 10),
                    TITLE_FONT_SIZE, RL_Color(COLOR_TEXT))

        content_top = top + HANDLE_AREA_HEIGHT
        visible = int(h - content_top)
        if visible <= 0:
            return
        rl.BeginScissorMode(0, int(content_top), w, visible)
        try:
            self.draw_rows(state, content_top)
        finally:
            rl.EndScissorMode()

    def draw_rows(self, state: "AppState", content_top: float) -> None:
        w = state.screen.screen_w
        row_color = RL_Color(COLOR_ROW)
        text_color = RL_Color(COLOR_TEXT)
        y = content_top + CONTENT_PADDING
        for label in state.screen.rows:
            rl.DrawRectangleRounded(
                RL_Rect(CONTENT_PADDING, y, w - CONTENT_PADDING * 2, ROW_HEIGHT),
                0.3, 8, row_color)
            RL_DrawText(label, CONTENT_PADDING * 2,
                        int(y + (ROW_HEIGHT - ROW_FONT_SIZE) / 2),
                        ROW_FONT_SIZE, text_color)
            y += ROW_HEIGHT + ROW_SPACING


_renderer: Optional[Renderer] = None


def get_renderer() -> Renderer:
    """Get the renderer instance."""
    global _renderer
    if _renderer is None:
        _renderer = Renderer()
    return _renderer
