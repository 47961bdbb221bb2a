"""Snap resolution - pure functions deciding the drawer's next resting state.

A gesture moves the drawer at most one state per release, however far the
pointer travelled.
"""

from __future__ import annotations

from .config import STILL_EPSILON
from .logging import log
from .math_utils import sign
from .types import DrawerConfig, DrawerState, DragSample


def step_up(state: DrawerState) -> DrawerState:
    """Next higher state, clamped at FULLY_EXPANDED."""
    return DrawerState(min(int(state) + 1, int(DrawerState.FULLY_EXPANDED)))


def step_down(state: DrawerState) -> DrawerState:
    """Next lower state, clamped at COLLAPSED."""
    return DrawerState(max(int(state) - 1, int(DrawerState.COLLAPSED)))


def drag_direction(sample: DragSample) -> int:
    """Direction of a gesture: 1 = down, -1 = up, 0 = none.

    Displacement decides; when it is effectively zero the velocity sign
    decides instead.
    """
    if sample.translation > STILL_EPSILON:
        return 1
    if sample.translation < -STILL_EPSILON:
        return -1
    return sign(sample.predicted_velocity)


def is_confirmed(sample: DragSample, config: DrawerConfig) -> bool:
    """Check whether a released gesture should change state.

    Displacement must strictly exceed drag_threshold, or the velocity must
    strictly exceed snap_velocity_threshold in the drag direction.
    """
    direction = drag_direction(sample)
    if direction == 0:
        return False
    if abs(sample.translation) > config.drag_threshold:
        return True
    velocity = sample.predicted_velocity
    return (abs(velocity) > config.snap_velocity_threshold and
            sign(velocity) == direction)


def resolve_snap(current_state: DrawerState, final_sample: DragSample,
                 config: DrawerConfig) -> DrawerState:
    """Map (current state, final sample, config) to the next state."""
    if not is_confirmed(final_sample, config):
        return current_state

    if drag_direction(final_sample) > 0:
        next_state = step_down(current_state)
    else:
        next_state = step_up(current_state)

    if next_state != current_state:
        log(f"[SNAP] {current_state.name} -> {next_state.name} "
            f"(d={final_sample.translation:.1f}, v={final_sample.predicted_velocity:.1f})")
    return next_state
