"""Settle animation - moves the drawer from where a drag left it to its target."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from .config import (
    SNAP_ANIM_MS, SNAP_ANIM_CURVE,
    SPRING_RESPONSE_S, SPRING_DAMPING, SPRING_SETTLE_PX,
)
from .math_utils import lerp, ease_out_quad, spring_progress, spring_settle_time
from .logging import now, log

CURVES = ("spring", "ease")


@dataclass
class SnapAnimation:
    """Non-blocking offset animation, sampled by the caller each frame.

    The ease curve runs for exactly duration_ms. The spring runs for at
    least duration_ms and until it is within SPRING_SETTLE_PX of the
    target, so it never jumps onto the target mid-overshoot.
    """
    from_offset: float = 0.0
    to_offset: float = 0.0
    duration_ms: float = SNAP_ANIM_MS
    curve: str = SNAP_ANIM_CURVE
    start_time: float = field(default_factory=now)
    finished: bool = False
    total_ms: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        if self.curve not in CURVES:
            raise ValueError(f"Unknown animation curve {self.curve!r}")
        self.total_ms = max(0.0, self.duration_ms)
        if self.curve == "spring" and self.duration_ms > 0:
            settle_s = spring_settle_time(self.to_offset - self.from_offset,
                                          SPRING_RESPONSE_S, SPRING_DAMPING,
                                          SPRING_SETTLE_PX)
            self.total_ms = max(self.total_ms, settle_s * 1000.0)

    def progress_at(self, t: float) -> float:
        """Linear time progress (0.0 to 1.0) at time t."""
        if self.total_ms <= 0:
            return 1.0
        elapsed = (t - self.start_time) * 1000.0
        return min(1.0, max(0.0, elapsed / self.total_ms))

    def is_complete_at(self, t: float) -> bool:
        return self.finished or self.progress_at(t) >= 1.0

    def value_at(self, t: float) -> float:
        """Offset at time t; the spring curve may briefly overshoot."""
        if self.is_complete_at(t):
            return self.to_offset
        if self.curve == "ease":
            k = ease_out_quad(self.progress_at(t))
            return lerp(self.from_offset, self.to_offset, k)
        k = spring_progress(t - self.start_time, SPRING_RESPONSE_S, SPRING_DAMPING)
        return self.from_offset + (self.to_offset - self.from_offset) * k

    def finish(self) -> None:
        """Mark animation as finished; value_at then returns to_offset."""
        self.finished = True


def create_snap_animation(
    from_offset: float,
    to_offset: float,
    start_time: Optional[float] = None,
    duration_ms: float = SNAP_ANIM_MS,
    curve: str = SNAP_ANIM_CURVE,
) -> SnapAnimation:
    """Create a settle animation starting now (or at start_time)."""
    anim = SnapAnimation(
        from_offset=from_offset,
        to_offset=to_offset,
        duration_ms=duration_ms,
        curve=curve,
        start_time=now() if start_time is None else start_time,
    )
    log(f"[ANIM] Snap {from_offset:.1f} -> {to_offset:.1f} "
        f"{curve} duration={anim.total_ms:.0f}ms")
    return anim
