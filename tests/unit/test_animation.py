"""
Unit tests for animation.py and math_utils.py
"""
import pytest

from snapdrawer.animation import SnapAnimation, create_snap_animation
from snapdrawer.math_utils import clamp, ease_out_quad, spring_progress, spring_settle_time


class TestSnapAnimation:

    def test_ease_endpoints(self):
        anim = SnapAnimation(from_offset=300, to_offset=0, duration_ms=300,
                             curve="ease", start_time=5.0)
        assert anim.value_at(5.0) == 300
        assert anim.value_at(5.31) == 0
        assert anim.is_complete_at(5.31)
        assert not anim.is_complete_at(5.1)

    def test_ease_is_monotonic(self):
        anim = SnapAnimation(from_offset=450, to_offset=300, duration_ms=300,
                             curve="ease", start_time=0.0)
        values = [anim.value_at(i * 0.01) for i in range(31)]
        assert values == sorted(values, reverse=True)

    def test_spring_ends_on_target(self):
        anim = create_snap_animation(0, 450, start_time=1.0)
        assert anim.value_at(1.0) == 0
        assert anim.value_at(2.0) == 450

    @pytest.mark.parametrize("from_offset,to_offset", [(450, 0), (0, 300), (450, 300), (0, 450)])
    def test_spring_lands_without_a_jump(self, from_offset, to_offset):
        anim = create_snap_animation(from_offset, to_offset, start_time=0.0)
        end = anim.total_ms / 1000.0
        assert anim.total_ms > 300
        assert abs(anim.value_at(end - 1e-4) - to_offset) < 1.0
        assert anim.value_at(end + 1e-6) == to_offset

    def test_spring_not_complete_at_nominal_duration(self):
        anim = create_snap_animation(450, 0, start_time=0.0)
        assert not anim.is_complete_at(0.3)
        assert abs(anim.value_at(0.2999) - anim.value_at(0.3)) < 1.0

    def test_ease_keeps_nominal_duration(self):
        anim = create_snap_animation(450, 0, start_time=0.0, curve="ease")
        assert anim.total_ms == 300

    def test_finish(self):
        anim = create_snap_animation(0, 450, start_time=1.0, curve="ease")
        anim.finish()
        assert anim.value_at(1.0) == 450

    def test_zero_duration(self):
        anim = SnapAnimation(from_offset=10, to_offset=20, duration_ms=0, start_time=1.0)
        assert anim.value_at(1.0) == 20

    def test_unknown_curve(self):
        with pytest.raises(ValueError):
            SnapAnimation(curve="bounce")


class TestMath:

    def test_clamp(self):
        assert clamp(-1, 0, 10) == 0
        assert clamp(11, 0, 10) == 10
        assert clamp(5, 0, 10) == 5

    def test_ease_out_quad(self):
        assert ease_out_quad(0.5) == 0.75

    def test_spring_settles(self):
        assert spring_progress(0.0, 0.3, 0.7) == 0.0
        assert spring_progress(2.0, 0.3, 0.7) == pytest.approx(1.0, abs=1e-3)

    def test_spring_overshoots(self):
        peak = max(spring_progress(i * 0.005, 0.3, 0.7) for i in range(100))
        assert peak > 1.0

    def test_critically_damped_no_overshoot(self):
        peak = max(spring_progress(i * 0.005, 0.3, 1.0) for i in range(200))
        assert peak <= 1.0

    def test_settle_time_zero_inside_tolerance(self):
        assert spring_settle_time(0.3, 0.3, 0.7, 0.5) == 0.0

    def test_settle_time_grows_with_distance(self):
        near = spring_settle_time(50, 0.3, 0.7, 0.5)
        far = spring_settle_time(450, 0.3, 0.7, 0.5)
        assert 0.0 < near < far
