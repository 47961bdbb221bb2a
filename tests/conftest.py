"""
Global test fixtures for SnapDrawer tests
"""
import pytest

from snapdrawer.types import DrawerConfig, DrawerState
from snapdrawer.controller import DrawerController
from snapdrawer.state import AppState, ScreenState


@pytest.fixture
def config() -> DrawerConfig:
    """Map-screen geometry with the default thresholds"""
    return DrawerConfig(
        min_height=150,
        half_height=300,
        max_height=600,
        drag_threshold=50,
        snap_velocity_threshold=100,
    )


@pytest.fixture
def controller(config: DrawerConfig) -> DrawerController:
    """Controller resting half expanded, content not yet measured"""
    return DrawerController(config, DrawerState.HALF_EXPANDED)


@pytest.fixture
def ease_controller(config: DrawerConfig) -> DrawerController:
    """Controller whose settle animation never overshoots"""
    return DrawerController(config, DrawerState.HALF_EXPANDED,
                            anim_duration_ms=300, anim_curve="ease")


@pytest.fixture
def app_state(controller: DrawerController) -> AppState:
    """Demo state on an 800px tall screen"""
    return AppState(drawer=controller, screen=ScreenState(screen_w=400, screen_h=800))
