"""Core data types for SnapDrawer."""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import List
import math
import numbers

from .config import DRAG_THRESHOLD, SNAP_VELOCITY_THRESHOLD, HANDLE_ALLOWANCE
from .errors import ConfigError


class DrawerState(IntEnum):
    """Resting positions of the drawer, ordered from lowest to highest."""
    COLLAPSED = 0
    HALF_EXPANDED = 1
    FULLY_EXPANDED = 2


def _is_number(v) -> bool:
    return isinstance(v, numbers.Real) and not isinstance(v, bool) and math.isfinite(v)


@dataclass(frozen=True)
class DrawerConfig:
    """Immutable drawer geometry and gesture thresholds.

    Heights are measured from the bottom edge of the screen. Raises
    ConfigError on construction if any value is out of range.
    """
    min_height: float
    half_height: float
    max_height: float
    snap_velocity_threshold: float = SNAP_VELOCITY_THRESHOLD
    drag_threshold: float = DRAG_THRESHOLD
    handle_allowance: float = HANDLE_ALLOWANCE

    def __post_init__(self) -> None:
        errors = self.validate()
        if errors:
            raise ConfigError(errors)

    def validate(self) -> List[str]:
        """Return a list of validation errors (empty if valid)."""
        errors = []
        positive = ("min_height", "half_height", "max_height",
                    "snap_velocity_threshold", "drag_threshold")
        for name in positive:
            v = getattr(self, name)
            if not _is_number(v):
                errors.append(f"{name} must be a finite number, got {v!r}")
            elif v <= 0:
                errors.append(f"{name} must be positive, got {v!r}")

        if not _is_number(self.handle_allowance):
            errors.append(f"handle_allowance must be a finite number, got {self.handle_allowance!r}")
        elif self.handle_allowance < 0:
            errors.append(f"handle_allowance must not be negative, got {self.handle_allowance!r}")

        heights = (self.min_height, self.half_height, self.max_height)
        if all(_is_number(h) for h in heights):
            if not self.min_height < self.half_height:
                errors.append("min_height must be less than half_height")
            if not self.half_height < self.max_height:
                errors.append("half_height must be less than max_height")
        return errors

    @property
    def collapsed_offset(self) -> float:
        """Largest legal offset: the panel resting at min_height."""
        return self.max_height - self.min_height


@dataclass(frozen=True)
class DragSample:
    """One reading of an active drag.

    translation is cumulative vertical displacement since drag start and
    predicted_velocity is in px/s; both are positive downward.
    """
    translation: float
    predicted_velocity: float = 0.0
    timestamp: float = 0.0
