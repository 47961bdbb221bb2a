"""SnapDrawer - a bottom drawer that snaps between three heights."""

from .errors import DrawerError, ConfigError, InvalidStateError
from .types import DrawerState, DrawerConfig, DragSample
from .gesture import GestureSampler
from .snap import resolve_snap, step_up, step_down
from .controller import DrawerController

__version__ = "0.1.0"

__all__ = [
    'DrawerError',
    'ConfigError',
    'InvalidStateError',
    'DrawerState',
    'DrawerConfig',
    'DragSample',
    'GestureSampler',
    'resolve_snap',
    'step_up',
    'step_down',
    'DrawerController',
]
