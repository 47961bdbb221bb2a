"""
Unit tests for types.py and errors.py - configuration validation
"""
import math

import pytest

from snapdrawer.errors import ConfigError, DrawerError, InvalidStateError
from snapdrawer.types import DrawerConfig, DragSample


class TestDrawerConfigValidation:
    """Tests for DrawerConfig construction"""

    def test_valid_config(self):
        config = DrawerConfig(min_height=150, half_height=300, max_height=600)
        assert config.validate() == []
        assert config.drag_threshold == 50
        assert config.snap_velocity_threshold == 100
        assert config.handle_allowance == 60

    def test_collapsed_offset(self, config):
        assert config.collapsed_offset == 450

    def test_min_not_below_half(self):
        with pytest.raises(ConfigError) as exc:
            DrawerConfig(min_height=300, half_height=300, max_height=600)
        assert any("min_height" in e for e in exc.value.errors)

    def test_half_not_below_max(self):
        with pytest.raises(ConfigError) as exc:
            DrawerConfig(min_height=150, half_height=700, max_height=600)
        assert any("half_height" in e for e in exc.value.errors)

    def test_zero_height(self):
        with pytest.raises(ConfigError) as exc:
            DrawerConfig(min_height=0, half_height=300, max_height=600)
        assert any("positive" in e for e in exc.value.errors)

    def test_negative_thresholds(self):
        with pytest.raises(ConfigError) as exc:
            DrawerConfig(min_height=150, half_height=300, max_height=600,
                         drag_threshold=-1, snap_velocity_threshold=0)
        assert any("drag_threshold" in e for e in exc.value.errors)
        assert any("snap_velocity_threshold" in e for e in exc.value.errors)

    def test_negative_handle_allowance(self):
        with pytest.raises(ConfigError):
            DrawerConfig(min_height=150, half_height=300, max_height=600, handle_allowance=-5)

    def test_zero_handle_allowance_allowed(self):
        config = DrawerConfig(min_height=150, half_height=300, max_height=600, handle_allowance=0)
        assert config.handle_allowance == 0

    def test_non_numeric_rejected(self):
        with pytest.raises(ConfigError):
            DrawerConfig(min_height="150", half_height=300, max_height=600)

    def test_bool_rejected(self):
        with pytest.raises(ConfigError):
            DrawerConfig(min_height=True, half_height=300, max_height=600)

    def test_infinite_rejected(self):
        with pytest.raises(ConfigError):
            DrawerConfig(min_height=150, half_height=300, max_height=math.inf)

    def test_config_is_immutable(self, config):
        with pytest.raises(AttributeError):
            config.max_height = 800


class TestErrors:
    """Tests for the error types"""

    def test_config_error_is_drawer_error(self):
        err = ConfigError(["min_height must be positive"])
        assert isinstance(err, DrawerError)
        assert "min_height must be positive" in str(err)
        assert "Suggestion:" in str(err)

    def test_threshold_error_suggests_thresholds(self):
        with pytest.raises(ConfigError) as exc:
            DrawerConfig(min_height=150, half_height=300, max_height=600, drag_threshold=0)
        assert "threshold" in exc.value.suggestion
        assert "min_height <" not in exc.value.suggestion

    def test_handle_allowance_error_suggestion(self):
        with pytest.raises(ConfigError) as exc:
            DrawerConfig(min_height=150, half_height=300, max_height=600, handle_allowance=-1)
        assert "handle_allowance" in exc.value.suggestion
        assert "Heights" not in exc.value.suggestion

    def test_height_error_suggestion(self):
        with pytest.raises(ConfigError) as exc:
            DrawerConfig(min_height=400, half_height=300, max_height=600)
        assert "min_height < half_height < max_height" in exc.value.suggestion
        assert "threshold" not in exc.value.suggestion

    def test_mixed_errors_list_every_suggestion(self):
        with pytest.raises(ConfigError) as exc:
            DrawerConfig(min_height=400, half_height=300, max_height=600,
                         snap_velocity_threshold=-5)
        assert "Heights" in exc.value.suggestion
        assert "threshold" in exc.value.suggestion

    def test_to_dict(self):
        data = InvalidStateError("on_drag_move called with no active drag").to_dict()
        assert data["type"] == "InvalidStateError"
        assert "on_drag_move" in data["message"]
        assert data["suggestion"]


class TestDragSample:

    def test_defaults(self):
        sample = DragSample(12.5)
        assert sample.predicted_velocity == 0.0
        assert sample.timestamp == 0.0
