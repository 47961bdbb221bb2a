"""
Unit tests for snap.py - release resolution
"""
import pytest

from snapdrawer.types import DrawerState, DragSample
from snapdrawer.snap import resolve_snap, step_up, step_down, drag_direction, is_confirmed

ALL_STATES = list(DrawerState)


class TestStepping:
    """Tests for one-step moves through the state ordering"""

    def test_state_ordering(self):
        assert DrawerState.COLLAPSED < DrawerState.HALF_EXPANDED < DrawerState.FULLY_EXPANDED

    def test_step_up(self):
        assert step_up(DrawerState.COLLAPSED) == DrawerState.HALF_EXPANDED
        assert step_up(DrawerState.HALF_EXPANDED) == DrawerState.FULLY_EXPANDED
        assert step_up(DrawerState.FULLY_EXPANDED) == DrawerState.FULLY_EXPANDED

    def test_step_down(self):
        assert step_down(DrawerState.FULLY_EXPANDED) == DrawerState.HALF_EXPANDED
        assert step_down(DrawerState.HALF_EXPANDED) == DrawerState.COLLAPSED
        assert step_down(DrawerState.COLLAPSED) == DrawerState.COLLAPSED


class TestDirection:
    """Tests for deciding which way a gesture went"""

    def test_displacement_decides(self):
        assert drag_direction(DragSample(20, -500)) == 1
        assert drag_direction(DragSample(-20, 500)) == -1

    def test_velocity_decides_when_still(self):
        assert drag_direction(DragSample(0, 300)) == 1
        assert drag_direction(DragSample(0.2, -300)) == -1

    def test_no_direction(self):
        assert drag_direction(DragSample(0, 0)) == 0


class TestScenarios:
    """Scenarios on the map-screen geometry"""

    def test_upward_drag_past_threshold_expands(self, config):
        sample = DragSample(translation=-80, predicted_velocity=-20)
        assert resolve_snap(DrawerState.HALF_EXPANDED, sample, config) == DrawerState.FULLY_EXPANDED

    def test_small_drag_snaps_back(self, config):
        sample = DragSample(translation=10, predicted_velocity=5)
        assert resolve_snap(DrawerState.HALF_EXPANDED, sample, config) == DrawerState.HALF_EXPANDED

    def test_downward_drag_collapses(self, config):
        sample = DragSample(translation=120, predicted_velocity=0)
        assert resolve_snap(DrawerState.HALF_EXPANDED, sample, config) == DrawerState.COLLAPSED


class TestThresholds:
    """Tests for the displacement and velocity thresholds"""

    def test_exact_threshold_not_confirmed(self, config):
        sample = DragSample(translation=50, predicted_velocity=0)
        assert not is_confirmed(sample, config)
        assert resolve_snap(DrawerState.HALF_EXPANDED, sample, config) == DrawerState.HALF_EXPANDED

    def test_exact_negative_threshold_not_confirmed(self, config):
        sample = DragSample(translation=-50, predicted_velocity=0)
        assert resolve_snap(DrawerState.HALF_EXPANDED, sample, config) == DrawerState.HALF_EXPANDED

    def test_just_past_threshold_confirmed(self, config):
        sample = DragSample(translation=50.01, predicted_velocity=0)
        assert is_confirmed(sample, config)
        assert resolve_snap(DrawerState.HALF_EXPANDED, sample, config) == DrawerState.COLLAPSED

    def test_fast_flick_overrides_short_drag(self, config):
        sample = DragSample(translation=10, predicted_velocity=200)
        assert is_confirmed(sample, config)
        assert resolve_snap(DrawerState.HALF_EXPANDED, sample, config) == DrawerState.COLLAPSED

    def test_fast_upward_flick(self, config):
        sample = DragSample(translation=-10, predicted_velocity=-200)
        assert resolve_snap(DrawerState.COLLAPSED, sample, config) == DrawerState.HALF_EXPANDED

    def test_flick_against_drag_direction_ignored(self, config):
        sample = DragSample(translation=10, predicted_velocity=-200)
        assert not is_confirmed(sample, config)
        assert resolve_snap(DrawerState.HALF_EXPANDED, sample, config) == DrawerState.HALF_EXPANDED

    def test_velocity_at_threshold_not_confirmed(self, config):
        sample = DragSample(translation=10, predicted_velocity=100)
        assert resolve_snap(DrawerState.HALF_EXPANDED, sample, config) == DrawerState.HALF_EXPANDED

    def test_flick_without_displacement(self, config):
        sample = DragSample(translation=0, predicted_velocity=-250)
        assert resolve_snap(DrawerState.HALF_EXPANDED, sample, config) == DrawerState.FULLY_EXPANDED

    def test_no_movement_keeps_state(self, config):
        for state in ALL_STATES:
            assert resolve_snap(state, DragSample(0, 0), config) == state


class TestSingleStep:
    """A release never moves more than one state"""

    @pytest.mark.parametrize("state", ALL_STATES)
    @pytest.mark.parametrize("translation", [-5000, -400, -51, 51, 400, 5000])
    @pytest.mark.parametrize("velocity", [-9000, 0, 9000])
    def test_at_most_one_step(self, config, state, translation, velocity):
        result = resolve_snap(state, DragSample(translation, velocity), config)
        assert abs(int(result) - int(state)) <= 1

    @pytest.mark.parametrize("translation,velocity", [(5, 0), (80, 0), (5, 500), (5000, 9000)])
    def test_downward_from_collapsed_is_noop(self, config, translation, velocity):
        sample = DragSample(translation, velocity)
        assert resolve_snap(DrawerState.COLLAPSED, sample, config) == DrawerState.COLLAPSED

    @pytest.mark.parametrize("translation,velocity", [(-5, 0), (-80, 0), (-5, -500), (-5000, -9000)])
    def test_upward_from_fully_expanded_is_noop(self, config, translation, velocity):
        sample = DragSample(translation, velocity)
        assert resolve_snap(DrawerState.FULLY_EXPANDED, sample, config) == DrawerState.FULLY_EXPANDED
