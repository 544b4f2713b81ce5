"""Tests for nozzle profile presets."""

import pytest

from line_width_planner.models import SweepInputs
from line_width_planner.profiles import NozzleProfile, create_sweep_inputs


class TestNozzleProfile:
    """Tests for NozzleProfile enum and create_sweep_inputs factory."""

    def test_standard_profile(self):
        inputs = create_sweep_inputs(NozzleProfile.STANDARD)

        assert isinstance(inputs, SweepInputs)
        assert inputs.nozzle_diameter == 0.4
        assert inputs.nozzle_flat_size == 0.6
        assert inputs.ideal_layer_height_step == 0.04

    def test_custom_step(self):
        inputs = create_sweep_inputs(NozzleProfile.LARGE, ideal_layer_height_step=0.1)
        assert inputs.nozzle_diameter == 0.8
        assert inputs.ideal_layer_height_step == 0.1

    def test_profiles_ordered_by_size(self):
        diameters = [
            create_sweep_inputs(profile).nozzle_diameter
            for profile in (
                NozzleProfile.FINE,
                NozzleProfile.STANDARD,
                NozzleProfile.MEDIUM,
                NozzleProfile.LARGE,
            )
        ]
        assert diameters == sorted(diameters)

    @pytest.mark.parametrize("profile", list(NozzleProfile))
    def test_flat_wider_than_bore(self, profile):
        assert not create_sweep_inputs(profile).has_inverted_geometry

    def test_invalid_profile_raises_error(self):
        with pytest.raises(ValueError, match="Unknown nozzle profile"):
            create_sweep_inputs("invalid_profile")

    def test_invalid_step_raises_error(self):
        with pytest.raises(ValueError, match="ideal_layer_height_step must be positive"):
            create_sweep_inputs(NozzleProfile.STANDARD, ideal_layer_height_step=-0.1)
