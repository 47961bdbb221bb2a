"""State management submodules for the SnapDrawer demo."""

from .input import InputState
from .screen import ScreenState
from .app_state import AppState, default_drawer

__all__ = [
    'InputState',
    'ScreenState',
    'AppState',
    'default_drawer',
]
