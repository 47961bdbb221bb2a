"""Pure math utilities - no external dependencies."""

from __future__ import annotations
import math


def clamp(v: float, a: float, b: float) -> float:
    """Clamp value v to range [a, b]."""
    return a if v < a else b if v > b else v


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation from a to b by factor t (clamped to [0, 1])."""
    t = clamp(t, 0.0, 1.0)
    return a + (b - a) * t


def sign(v: float) -> int:
    """Return -1, 0 or 1 according to the sign of v."""
    if v > 0:
        return 1
    if v < 0:
        return -1
    return 0


def ease_out_quad(t: float) -> float:
    """Quadratic ease-out: decelerating to zero velocity."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return 1.0 - (1.0 - t) * (1.0 - t)


def spring_progress(elapsed_s: float, response_s: float, damping: float) -> float:
    """Position of an underdamped spring released from 0 towards 1.

    Args:
        elapsed_s: Seconds since the spring was released.
        response_s: Period of the undamped oscillation in seconds.
        damping: Damping fraction in (0, 1); 1.0 or more is treated as
            critically damped.

    Returns:
        Progress value; may exceed 1.0 briefly (overshoot).
    """
    if elapsed_s <= 0.0:
        return 0.0
    if response_s <= 0.0:
        return 1.0
    omega = 2.0 * math.pi / response_s
    if damping >= 1.0:
        return 1.0 - (1.0 + omega * elapsed_s) * math.exp(-omega * elapsed_s)
    omega_d = omega * math.sqrt(1.0 - damping * damping)
    decay = math.exp(-damping * omega * elapsed_s)
    return 1.0 - decay * (
        math.cos(omega_d * elapsed_s)
        + (damping * omega / omega_d) * math.sin(omega_d * elapsed_s)
    )


def spring_envelope(elapsed_s: float, response_s: float, damping: float) -> float:
    """Upper bound on |1 - spring_progress| at elapsed_s."""
    if response_s <= 0.0:
        return 0.0
    omega = 2.0 * math.pi / response_s
    if damping >= 1.0:
        return (1.0 + omega * elapsed_s) * math.exp(-omega * elapsed_s)
    return math.exp(-damping * omega * elapsed_s) / math.sqrt(1.0 - damping * damping)


def spring_settle_time(distance: float, response_s: float, damping: float,
                       tolerance: float, step_s: float = 0.005,
                       limit_s: float = 10.0) -> float:
    """Seconds until a spring covering distance stays within tolerance of its target."""
    distance = abs(distance)
    if distance <= tolerance:
        return 0.0
    t = 0.0
    while t < limit_s and distance * spring_envelope(t, response_s, damping) > tolerance:
        t += step_s
    return t
