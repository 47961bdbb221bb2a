"""Drawer error taxonomy.

Each error carries a message and a suggestion for how the integrating
screen should resolve it. Neither kind is expected in normal operation:
both indicate a bug in the caller.
"""

from __future__ import annotations
from typing import List, Optional


class DrawerError(Exception):
    """Base class for drawer errors."""

    def __init__(self, message: str, suggestion: str = ""):
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        result = self.message
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict:
        return {
            "type": type(self).__name__,
            "message": self.message,
            "suggestion": self.suggestion,
        }


# Field name fragment -> suggestion, in display order
CONFIG_SUGGESTIONS = [
    ("height", "Heights must be positive with min_height < half_height < max_height"),
    ("threshold", "drag_threshold and snap_velocity_threshold must be positive numbers"),
    ("handle_allowance", "handle_allowance must be zero or a positive number"),
]


def suggest_config_fix(errors: List[str]) -> str:
    """Join the suggestions for the fields named in errors."""
    found = [s for key, s in CONFIG_SUGGESTIONS if any(key in e for e in errors)]
    return "; ".join(found) or "Check the DrawerConfig values"


class ConfigError(DrawerError):
    """Invalid DrawerConfig; raised at construction, never at runtime."""

    def __init__(self, errors: List[str], suggestion: Optional[str] = None):
        self.errors = list(errors)
        super().__init__(
            "Invalid drawer configuration: " + "; ".join(self.errors),
            suggestion or suggest_config_fix(self.errors),
        )


class InvalidStateError(DrawerError):
    """Gesture API called out of order (e.g. a move with no active drag)."""

    def __init__(self, message: str):
        super().__init__(
            message,
            "Forward drag events as start, move..., end/cancel for a single pointer",
        )
