"""Tests for the safety palette and thresholds."""

import pytest

from line_width_planner.config import (
    DEFAULT_IDEAL_LAYER_HEIGHT_STEP,
    DEFAULT_NOZZLE_DIAMETER,
    DEFAULT_NOZZLE_FLAT_SIZE,
    DEFAULT_PALETTE,
    SafetyPalette,
    SafetyThresholds,
)
from line_width_planner.models import SafetyLevel


class TestDefaults:
    def test_default_inputs(self):
        assert DEFAULT_NOZZLE_DIAMETER == 0.4
        assert DEFAULT_NOZZLE_FLAT_SIZE == 0.6
        assert DEFAULT_IDEAL_LAYER_HEIGHT_STEP == 0.04


class TestSafetyPalette:
    """Tests for SafetyPalette."""

    def test_default_colors(self):
        assert DEFAULT_PALETTE.color_for(SafetyLevel.SAFE) == "#0f0"
        assert DEFAULT_PALETTE.color_for(SafetyLevel.WARNING) == "#ff0"
        assert DEFAULT_PALETTE.color_for(SafetyLevel.DANGER) == "#f00"

    def test_is_fixed(self):
        assert DEFAULT_PALETTE.is_fixed("#ff0")
        assert not DEFAULT_PALETTE.is_fixed("#f80")

    def test_is_fixed_compares_rgb_values(self):
        palette = SafetyPalette(safe="#00ff00", warning="#ffff00", danger="#ff0000")
        assert palette.is_fixed("#f00")
        assert palette.is_fixed("#0f0")
        assert palette.is_danger("#f00")
        assert palette.is_warning("#ff0")
        assert not palette.is_fixed("#f80")

    def test_palettes_are_hashable(self):
        assert hash(SafetyPalette()) == hash(DEFAULT_PALETTE)


class TestSafetyThresholds:
    """Tests for SafetyThresholds validation."""

    def test_defaults(self):
        thresholds = SafetyThresholds()
        assert thresholds.safe_layer_ratio == 0.8
        assert thresholds.warning_layer_ratio == 1.5
        assert thresholds.min_line_width_floor == 0.5
        assert thresholds.max_layer_ratio == 1.6

    def test_safe_above_warning_raises_error(self):
        with pytest.raises(ValueError, match="safe_layer_ratio"):
            SafetyThresholds(safe_layer_ratio=2.0, warning_layer_ratio=1.5)

    def test_floor_out_of_range_raises_error(self):
        with pytest.raises(ValueError, match="min_line_width_floor"):
            SafetyThresholds(min_line_width_floor=1.0)

    def test_non_positive_max_ratio_raises_error(self):
        with pytest.raises(ValueError, match="max_layer_ratio must be positive"):
            SafetyThresholds(max_layer_ratio=0.0)
