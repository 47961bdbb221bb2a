"""Gesture sampler - turns a pointer drag stream into DragSamples."""

from __future__ import annotations
from collections import deque
from typing import Deque, Optional, Tuple

from .config import VELOCITY_WINDOW_MS, VELOCITY_HISTORY_LIMIT
from .errors import InvalidStateError
from .logging import log, now
from .types import DragSample


class GestureSampler:
    """Tracks a single active vertical drag.

    Positions are (x, y) pairs in screen coordinates, y growing downward.
    Velocity is a finite difference over the trailing velocity window.
    """

    def __init__(self, velocity_window_ms: float = VELOCITY_WINDOW_MS):
        self.velocity_window_ms = velocity_window_ms
        self._active: bool = False
        self._origin: Tuple[float, float] = (0.0, 0.0)
        self._history: Deque[Tuple[float, float]] = deque(maxlen=VELOCITY_HISTORY_LIMIT)
        self._last_sample: Optional[DragSample] = None

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def origin(self) -> Tuple[float, float]:
        return self._origin

    @property
    def last_sample(self) -> Optional[DragSample]:
        """Most recent sample of the current (or last) gesture."""
        return self._last_sample

    def on_drag_start(self, position: Tuple[float, float],
                      timestamp: Optional[float] = None) -> None:
        """Begin a gesture at position, discarding any previous one."""
        t = now() if timestamp is None else timestamp
        if self._active:
            log("[GESTURE] Drag restarted while active")
        self._active = True
        self._origin = (float(position[0]), float(position[1]))
        self._history.clear()
        self._history.append((t, self._origin[1]))
        self._last_sample = DragSample(0.0, 0.0, t)

    def on_drag_move(self, position: Tuple[float, float],
                     timestamp: Optional[float] = None) -> DragSample:
        """Record a pointer move and return the running sample."""
        self._require_active("on_drag_move")
        return self._record(position, timestamp)

    def on_drag_end(self, position: Tuple[float, float],
                    timestamp: Optional[float] = None) -> DragSample:
        """Record the release position and close the gesture."""
        self._require_active("on_drag_end")
        sample = self._record(position, timestamp)
        self._active = False
        log(f"[GESTURE] End translation={sample.translation:.1f} "
            f"velocity={sample.predicted_velocity:.1f}")
        return sample

    def cancel(self) -> DragSample:
        """Close the gesture without a release position.

        Returns the last known sample so the caller can resolve it like a
        normal release.
        """
        self._require_active("cancel")
        self._active = False
        sample = self._last_sample or DragSample(0.0, 0.0, now())
        log(f"[GESTURE] Cancelled translation={sample.translation:.1f}")
        return sample

    def _require_active(self, op: str) -> None:
        if not self._active:
            log(f"[GESTURE][ERR] {op} called with no active drag")
            raise InvalidStateError(f"{op} called with no active drag")

    def _record(self, position: Tuple[float, float],
                timestamp: Optional[float]) -> DragSample:
        t = now() if timestamp is None else timestamp
        y = float(position[1])
        self._history.append((t, y))
        self._prune(t)
        sample = DragSample(
            translation=y - self._origin[1],
            predicted_velocity=self._estimate_velocity(),
            timestamp=t,
        )
        self._last_sample = sample
        return sample

    def _prune(self, t: float) -> None:
        """Drop history older than the velocity window, keeping two points."""
        cutoff = t - self.velocity_window_ms / 1000.0
        while len(self._history) > 2 and self._history[0][0] < cutoff:
            self._history.popleft()

    def _estimate_velocity(self) -> float:
        if len(self._history) < 2:
            return 0.0
        t0, y0 = self._history[0]
        t1, y1 = self._history[-1]
        dt = t1 - t0
        if dt <= 0.0:
            return 0.0
        return (y1 - y0) / dt
