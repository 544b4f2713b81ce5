"""Nozzle presets for common bore sizes."""

from enum import Enum

from line_width_planner.config import DEFAULT_IDEAL_LAYER_HEIGHT_STEP
from line_width_planner.models.inputs import SweepInputs


class NozzleProfile(Enum):
    """Common nozzle sizes with typical tip flat diameters."""

    FINE = "fine"  # 0.25mm bore: detail work
    STANDARD = "standard"  # 0.4mm bore: the usual default
    MEDIUM = "medium"  # 0.6mm bore: faster, stronger parts
    LARGE = "large"  # 0.8mm bore: draft and vase prints


def create_sweep_inputs(
    profile: NozzleProfile, ideal_layer_height_step: float = DEFAULT_IDEAL_LAYER_HEIGHT_STEP
) -> SweepInputs:
    """
    Create SweepInputs from a predefined nozzle profile.

    Each profile pairs a bore diameter with the flat size found on common
    brass nozzles of that size. Flat sizes vary between manufacturers, so
    measure the actual nozzle when accuracy matters.

    Args:
        profile: Nozzle profile to use
        ideal_layer_height_step: Layer height increment for the sweep

    Returns:
        SweepInputs for the selected nozzle

    Raises:
        ValueError: If the profile is unknown or the step is invalid

    Examples:
        >>> standard = create_sweep_inputs(NozzleProfile.STANDARD)
        >>> print(f"{standard.nozzle_diameter} / {standard.nozzle_flat_size}")
        0.4 / 0.6
    """
    if profile == NozzleProfile.FINE:
        return SweepInputs(
            nozzle_diameter=0.25,
            nozzle_flat_size=0.45,  # narrow tip for fine detail
            ideal_layer_height_step=ideal_layer_height_step,
        )
    elif profile == NozzleProfile.STANDARD:
        return SweepInputs(
            nozzle_diameter=0.4,
            nozzle_flat_size=0.6,
            ideal_layer_height_step=ideal_layer_height_step,
        )
    elif profile == NozzleProfile.MEDIUM:
        return SweepInputs(
            nozzle_diameter=0.6,
            nozzle_flat_size=0.9,
            ideal_layer_height_step=ideal_layer_height_step,
        )
    elif profile == NozzleProfile.LARGE:
        return SweepInputs(
            nozzle_diameter=0.8,
            nozzle_flat_size=1.2,
            ideal_layer_height_step=ideal_layer_height_step,
        )
    else:
        raise ValueError(f"Unknown nozzle profile: {profile}")
