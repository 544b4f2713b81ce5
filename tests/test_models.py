"""Tests for sweep input and record models."""

import pytest

from line_width_planner.models import LayerHeightRecord, SweepInputs


class TestSweepInputs:
    """Test SweepInputs validation and updates."""

    @pytest.fixture
    def inputs(self):
        return SweepInputs(nozzle_diameter=0.4, nozzle_flat_size=0.6, ideal_layer_height_step=0.04)

    def test_valid_inputs(self, inputs):
        assert inputs.nozzle_diameter == 0.4
        assert inputs.nozzle_flat_size == 0.6
        assert inputs.ideal_layer_height_step == 0.04

    def test_zero_diameter_raises_error(self):
        with pytest.raises(ValueError, match="nozzle_diameter must be positive"):
            SweepInputs(nozzle_diameter=0.0, nozzle_flat_size=0.6, ideal_layer_height_step=0.04)

    def test_negative_flat_size_raises_error(self):
        with pytest.raises(ValueError, match="nozzle_flat_size must be positive"):
            SweepInputs(nozzle_diameter=0.4, nozzle_flat_size=-0.6, ideal_layer_height_step=0.04)

    def test_zero_step_raises_error(self):
        with pytest.raises(ValueError, match="ideal_layer_height_step must be positive"):
            SweepInputs(nozzle_diameter=0.4, nozzle_flat_size=0.6, ideal_layer_height_step=0.0)

    def test_nan_raises_error(self):
        with pytest.raises(ValueError, match="must be a finite number"):
            SweepInputs(
                nozzle_diameter=float("nan"), nozzle_flat_size=0.6, ideal_layer_height_step=0.04
            )

    @pytest.mark.parametrize("value", ["0.4", None, True])
    def test_non_numeric_raises_value_error(self, value):
        """Test that non-numbers are rejected with ValueError, not TypeError."""
        with pytest.raises(ValueError, match="nozzle_diameter must be a number"):
            SweepInputs(nozzle_diameter=value, nozzle_flat_size=0.6, ideal_layer_height_step=0.04)

    def test_integer_values_are_accepted(self):
        inputs = SweepInputs(nozzle_diameter=1, nozzle_flat_size=2, ideal_layer_height_step=1)
        assert inputs.nozzle_diameter == 1

    def test_tiny_step_raises_error(self):
        """Test that a sweep longer than MAX_SWEEP_LENGTH is rejected."""
        with pytest.raises(ValueError, match="too small"):
            SweepInputs(nozzle_diameter=0.4, nozzle_flat_size=0.6, ideal_layer_height_step=1e-6)

    def test_inverted_geometry_is_accepted(self):
        inputs = SweepInputs(nozzle_diameter=0.6, nozzle_flat_size=0.4, ideal_layer_height_step=0.1)
        assert inputs.has_inverted_geometry is True

    def test_normal_geometry(self, inputs):
        assert inputs.has_inverted_geometry is False

    def test_update_with_numeric_string(self, inputs):
        updated = inputs.with_update("nozzle_diameter", "0.6")
        assert updated.nozzle_diameter == 0.6
        assert updated.nozzle_flat_size == 0.6
        assert inputs.nozzle_diameter == 0.4

    def test_update_with_number(self, inputs):
        assert inputs.with_update("ideal_layer_height_step", 0.05).ideal_layer_height_step == 0.05

    @pytest.mark.parametrize("raw", ["", "abc", None, "nan", "inf", "-0.4", "0"])
    def test_invalid_update_keeps_last_valid_inputs(self, inputs, raw):
        assert inputs.with_update("nozzle_diameter", raw) is inputs

    def test_unknown_field_raises_error(self, inputs):
        with pytest.raises(ValueError, match="Unknown input field"):
            inputs.with_update("layer_height", "0.2")

    def test_inputs_are_immutable(self, inputs):
        with pytest.raises(AttributeError):
            inputs.nozzle_diameter = 0.6


class TestLayerHeightRecord:
    """Test LayerHeightRecord."""

    @staticmethod
    def make_record(worst):
        return LayerHeightRecord(
            layer_height=0.2,
            ideal_line_width=0.57,
            min_line_width=0.6,
            max_line_width=0.8,
            min_extrusion_volume=0.057,
            min_volume_delta=12.5,
            max_extrusion_volume=0.1,
            max_volume_delta=100.0,
            layer_height_safety_color="#0f0",
            line_width_safety_color=worst,
            worst_safety_color=worst,
            notes="",
        )

    def test_row_tint_safe(self):
        assert self.make_record("#0f0").row_tint == "hsl(120, 100%, 90%)"

    def test_row_tint_danger(self):
        assert self.make_record("#f00").row_tint == "hsl(0, 100%, 90%)"

    def test_row_tint_gradient(self):
        assert self.make_record("#f80").row_tint == "hsl(32, 100%, 90%)"
