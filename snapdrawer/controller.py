"""Drawer controller - owns the drawer state and the offset a renderer draws.

Offsets are measured downward from the fully expanded position, so 0 is
the panel at max_height and config.collapsed_offset is the panel at
min_height. Every offset this module hands out is inside that range.
"""

from __future__ import annotations
from typing import Callable, List, Optional, Tuple

from .animation import SnapAnimation, create_snap_animation
from .config import SNAP_ANIM_MS, SNAP_ANIM_CURVE
from .gesture import GestureSampler
from .logging import log, now
from .math_utils import clamp
from .snap import resolve_snap
from .types import DrawerConfig, DrawerState, DragSample

StateListener = Callable[[DrawerState, DrawerState], None]


class DrawerController:
    """Drawer state machine for one screen."""

    def __init__(
        self,
        config: DrawerConfig,
        initial_state: DrawerState = DrawerState.HALF_EXPANDED,
        content_height: Optional[float] = None,
        sampler: Optional[GestureSampler] = None,
        anim_duration_ms: float = SNAP_ANIM_MS,
        anim_curve: str = SNAP_ANIM_CURVE,
    ):
        self.config = config
        self.current_state = DrawerState(initial_state)
        self.sampler = sampler or GestureSampler()
        self.anim_duration_ms = anim_duration_ms
        self.anim_curve = anim_curve

        self._content_height: Optional[float] = None
        self._live_translation: float = 0.0
        self._drag_base: float = 0.0
        self._dragging: bool = False
        self._anim: Optional[SnapAnimation] = None
        self._listeners: List[StateListener] = []

        if content_height is not None:
            self.set_content_height(content_height)

    # ═══════════════════════════════════════════════════════════════════════
    # Geometry
    # ═══════════════════════════════════════════════════════════════════════

    @property
    def content_height(self) -> Optional[float]:
        return self._content_height

    def set_content_height(self, height: Optional[float]) -> None:
        """Record the natural height of the drawer's content (None = unknown)."""
        self._content_height = None if height is None else max(0.0, float(height))

    def clamp_offset(self, offset: float) -> float:
        return clamp(offset, 0.0, self.config.collapsed_offset)

    def target_offset(self, state: DrawerState,
                      measured_content_height: Optional[float] = None) -> float:
        """Resting offset for state.

        The half state shrinks to fit short content plus the handle
        allowance, never growing past half_height.
        """
        cfg = self.config
        if state == DrawerState.COLLAPSED:
            offset = cfg.collapsed_offset
        elif state == DrawerState.HALF_EXPANDED:
            content = measured_content_height
            if content is None:
                content = self._content_height
            if content is None:
                height = cfg.half_height
            else:
                height = min(cfg.half_height, content + cfg.handle_allowance)
            offset = cfg.max_height - height
        else:
            offset = 0.0
        return self.clamp_offset(offset)

    def nominal_height(self, state: DrawerState) -> float:
        """Configured panel height for a state, ignoring content sizing."""
        cfg = self.config
        return {
            DrawerState.COLLAPSED: cfg.min_height,
            DrawerState.HALF_EXPANDED: cfg.half_height,
            DrawerState.FULLY_EXPANDED: cfg.max_height,
        }[DrawerState(state)]

    # ═══════════════════════════════════════════════════════════════════════
    # Rendered offset
    # ═══════════════════════════════════════════════════════════════════════

    @property
    def is_dragging(self) -> bool:
        return self._dragging

    @property
    def is_settling(self) -> bool:
        return self._anim is not None

    @property
    def live_translation(self) -> float:
        """Translation of the active drag; 0.0 when no drag is active."""
        return self._live_translation

    def offset(self, timestamp: Optional[float] = None) -> float:
        """Offset to render at timestamp (default: now)."""
        if self._dragging:
            return self.clamp_offset(self._drag_base + self._live_translation)
        if self._anim is not None:
            t = now() if timestamp is None else timestamp
            return self.clamp_offset(self._anim.value_at(t))
        return self.target_offset(self.current_state)

    @property
    def current_offset(self) -> float:
        return self.offset()

    @property
    def visible_height(self) -> float:
        """Height of the panel above the bottom edge right now."""
        return self.config.max_height - self.current_offset

    def update(self, timestamp: Optional[float] = None) -> bool:
        """Advance the settle animation. Returns True while it is running."""
        if self._anim is None:
            return False
        t = now() if timestamp is None else timestamp
        if self._anim.is_complete_at(t):
            self._anim = None
            log(f"[ANIM] Settled at {self.current_state.name}")
            return False
        return True

    # ═══════════════════════════════════════════════════════════════════════
    # Gestures
    # ═══════════════════════════════════════════════════════════════════════

    def on_drag_start(self, position: Tuple[float, float],
                      timestamp: Optional[float] = None) -> None:
        """Start a drag, freezing any settle animation where it is."""
        t = now() if timestamp is None else timestamp
        base = self.offset(t)
        if self._anim is not None:
            log(f"[DRAWER] Settle interrupted at offset {base:.1f}")
            self._anim = None
        self.sampler.on_drag_start(position, t)
        self._drag_base = base
        self._live_translation = 0.0
        self._dragging = True

    def on_drag_move(self, position: Tuple[float, float],
                     timestamp: Optional[float] = None) -> DragSample:
        sample = self.sampler.on_drag_move(position, timestamp)
        self.on_gesture_update(sample)
        return sample

    def on_drag_end(self, position: Tuple[float, float],
                    timestamp: Optional[float] = None) -> DrawerState:
        sample = self.sampler.on_drag_end(position, timestamp)
        return self.on_gesture_end(sample)

    def on_drag_cancel(self) -> DrawerState:
        """Platform cancellation: resolve with the last known sample."""
        sample = self.sampler.cancel()
        return self.on_gesture_end(sample)

    def abort_drag(self) -> None:
        """Drop the active drag without resolving it; settle back in place.

        Used when the pointer turned out to be a tap rather than a drag.
        """
        sample = self.sampler.cancel()
        release_offset = self.clamp_offset(self._drag_base + sample.translation)
        self._dragging = False
        self._live_translation = 0.0
        self._drag_base = 0.0
        self._transition(self.current_state, release_offset)

    def on_gesture_update(self, sample: DragSample) -> float:
        """Live follow: track the pointer from the current resting offset.

        Returns the clamped offset to render.
        """
        if not self._dragging:
            self._anim = None
            self._drag_base = self.target_offset(self.current_state)
            self._dragging = True
        self._live_translation = sample.translation
        return self.clamp_offset(self._drag_base + self._live_translation)

    def on_gesture_end(self, sample: DragSample) -> DrawerState:
        """Resolve the release and start settling towards the new target."""
        if self._dragging:
            release_offset = self.clamp_offset(self._drag_base + sample.translation)
        else:
            release_offset = self.offset(sample.timestamp or None)
        self._dragging = False
        self._live_translation = 0.0
        self._drag_base = 0.0

        new_state = resolve_snap(self.current_state, sample, self.config)
        self._transition(new_state, release_offset, sample.timestamp or None)
        return new_state

    # ═══════════════════════════════════════════════════════════════════════
    # Programmatic state changes
    # ═══════════════════════════════════════════════════════════════════════

    def toggle_state(self) -> DrawerState:
        """Tap on the handle: COLLAPSED -> HALF -> FULL -> HALF -> ..."""
        if self.current_state == DrawerState.HALF_EXPANDED:
            new_state = DrawerState.FULLY_EXPANDED
        else:
            new_state = DrawerState.HALF_EXPANDED
        self.set_state(new_state)
        return self.current_state

    def set_state(self, state: DrawerState, animate: bool = True) -> None:
        """Move to state from wherever the drawer currently is."""
        if self._dragging:
            log("[DRAWER] set_state during drag ignored")
            return
        start = self.offset()
        self._transition(DrawerState(state), start if animate else None)

    def _transition(self, new_state: DrawerState, from_offset: Optional[float],
                    timestamp: Optional[float] = None) -> None:
        old_state = self.current_state
        self.current_state = new_state
        target = self.target_offset(new_state)

        if from_offset is None or abs(from_offset - target) < 0.5:
            self._anim = None
        else:
            self._anim = create_snap_animation(
                from_offset, target,
                start_time=timestamp,
                duration_ms=self.anim_duration_ms,
                curve=self.anim_curve,
            )

        if new_state != old_state:
            log(f"[DRAWER] {old_state.name} -> {new_state.name}")
            self._notify(old_state, new_state)

    # ═══════════════════════════════════════════════════════════════════════
    # Listeners
    # ═══════════════════════════════════════════════════════════════════════

    def add_listener(self, callback: StateListener) -> None:
        """Call callback(old_state, new_state) on every state change."""
        self._listeners.append(callback)

    def remove_listener(self, callback: StateListener) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self, old_state: DrawerState, new_state: DrawerState) -> None:
        for callback in list(self._listeners):
            try:
                callback(old_state, new_state)
            except Exception as e:
                log(f"[DRAWER][ERR] Listener failed for {new_state.name}: {e!r}")
