"""Layer height sweep: one LayerHeightRecord per candidate layer height.

Example:
    >>> from line_width_planner.sweep import LayerHeightSweep
    >>>
    >>> sweep = LayerHeightSweep()
    >>> records = sweep.run(nozzle_diameter=0.4, nozzle_flat_size=0.6, ideal_layer_height_step=0.04)
    >>> records[0].layer_height
    0.04
"""

import logging
from functools import lru_cache
from typing import List, Tuple

from line_width_planner.config import (
    DEFAULT_PALETTE,
    DEFAULT_THRESHOLDS,
    SafetyPalette,
    SafetyThresholds,
)
from line_width_planner.formatting import format_number
from line_width_planner.geometry import (
    calculate_ideal_line_width,
    calculate_max_line_width,
    calculate_min_line_width,
    calculate_volume_delta,
    cylinder_volume,
)
from line_width_planner.models import LayerHeightRecord, SweepInputs
from line_width_planner.models.inputs import check_sweep_length
from line_width_planner.safety import (
    determine_layer_height_safety,
    determine_line_width_safety,
    determine_worst_safety_color,
    resolve_safety_color,
)

logger = logging.getLogger(__name__)

# Decimal places of the percentages quoted in notes
NOTE_PERCENT_DIGITS = 2

WITHIN_SPEC_NOTE = (
    "Ideal Line Width is within spec. Print will have maximum possible strength "
    "while preserving features and dimensional accuracy."
)


def generate_layer_heights(
    step: float,
    nozzle_diameter: float,
    max_layer_ratio: float = DEFAULT_THRESHOLDS.max_layer_ratio,
) -> List[float]:
    """Generate the candidate layer heights step, 2*step, ... up to the limit.

    The limit is nozzle_diameter * max_layer_ratio and is inclusive. Values are
    computed as step * i rather than accumulated, so rounding error does not
    build up along long sweeps.

    Args:
        step: Layer height increment
        nozzle_diameter: Nozzle bore diameter
        max_layer_ratio: Multiple of nozzle_diameter where the sweep ends

    Returns:
        Strictly increasing layer heights. Empty when step is not positive or
        when step already exceeds the limit.
    """
    if not step > 0:
        return []

    limit = nozzle_diameter * max_layer_ratio
    heights = []
    index = 1
    while step * index <= limit:
        heights.append(step * index)
        index += 1
    return heights


def describe_line_width(
    ideal_line_width: float,
    min_line_width: float,
    max_line_width: float,
    min_line_width_floor: float = DEFAULT_THRESHOLDS.min_line_width_floor,
) -> str:
    """Explain how the ideal line width relates to the min/max window.

    Args:
        ideal_line_width: Ideal line width of the row
        min_line_width: Minimum line width of the row
        max_line_width: Maximum line width of the row
        min_line_width_floor: Fraction of min_line_width below which the print
            is considered extremely weak

    Returns:
        Human readable note
    """
    if ideal_line_width > max_line_width:
        percent_over_spec = (ideal_line_width / max_line_width - 1) * 100
        return (
            f"Ideal Line Width is {format_number(percent_over_spec, NOTE_PERCENT_DIGITS)}% "
            f"over Maximum Line Width. Material will tend to collect on the nozzle and "
            f"be dragged around the print."
        )

    percent_under_spec = (1 - ideal_line_width / min_line_width) * 100

    if ideal_line_width < min_line_width_floor * min_line_width:
        return (
            f"Ideal Line Width is {format_number(percent_under_spec, NOTE_PERCENT_DIGITS)}% "
            f"under Minimum Line Width. Print will be extremely weak due to insufficient "
            f"extruded material required to properly adhere layers together."
        )

    if ideal_line_width < min_line_width:
        return (
            f"Ideal Line Width is {format_number(percent_under_spec, NOTE_PERCENT_DIGITS)}% "
            f"under Minimum Line Width. Print will preserve more detail in the X/Y planes "
            f"at the cost of strength."
        )

    return WITHIN_SPEC_NOTE


def build_record(
    layer_height: float,
    nozzle_diameter: float,
    nozzle_flat_size: float,
    output_volume: float,
    palette: SafetyPalette = DEFAULT_PALETTE,
    thresholds: SafetyThresholds = DEFAULT_THRESHOLDS,
) -> LayerHeightRecord:
    """Compute the full record for one layer height.

    Args:
        layer_height: Candidate layer height, must be positive
        nozzle_diameter: Nozzle bore diameter
        nozzle_flat_size: Nozzle tip flat diameter
        output_volume: Reference volume the ideal line width preserves
        palette: Colors for fixed safety levels
        thresholds: Classification thresholds

    Returns:
        LayerHeightRecord for layer_height
    """
    ideal_line_width = calculate_ideal_line_width(nozzle_diameter, layer_height)
    min_line_width = calculate_min_line_width(layer_height, nozzle_diameter)
    max_line_width = calculate_max_line_width(layer_height, nozzle_flat_size)

    min_extrusion_volume = cylinder_volume(min_line_width / 2, layer_height)
    max_extrusion_volume = cylinder_volume(max_line_width / 2, layer_height)

    layer_height_safety_color = palette.color_for(
        determine_layer_height_safety(layer_height, nozzle_diameter, thresholds)
    )
    line_width_safety_color = resolve_safety_color(
        determine_line_width_safety(
            ideal_line_width, layer_height, nozzle_diameter, nozzle_flat_size, thresholds
        ),
        palette,
    )
    worst_safety_color = determine_worst_safety_color(
        layer_height_safety_color, line_width_safety_color, palette
    )

    logger.debug(
        "layer height %.4f: layer=%s line=%s worst=%s",
        layer_height,
        layer_height_safety_color,
        line_width_safety_color,
        worst_safety_color,
    )

    return LayerHeightRecord(
        layer_height=layer_height,
        ideal_line_width=ideal_line_width,
        min_line_width=min_line_width,
        max_line_width=max_line_width,
        min_extrusion_volume=min_extrusion_volume,
        min_volume_delta=calculate_volume_delta(min_extrusion_volume, output_volume),
        max_extrusion_volume=max_extrusion_volume,
        max_volume_delta=calculate_volume_delta(max_extrusion_volume, output_volume),
        layer_height_safety_color=layer_height_safety_color,
        line_width_safety_color=line_width_safety_color,
        worst_safety_color=worst_safety_color,
        notes=describe_line_width(
            ideal_line_width, min_line_width, max_line_width, thresholds.min_line_width_floor
        ),
    )


def calculate_output_volume(nozzle_diameter: float) -> float:
    """Volume of a cylinder as wide and as tall as the nozzle bore."""
    return cylinder_volume(nozzle_diameter / 2, nozzle_diameter)


@lru_cache(maxsize=64)
def _sweep(
    nozzle_diameter: float,
    nozzle_flat_size: float,
    ideal_layer_height_step: float,
    palette: SafetyPalette,
    thresholds: SafetyThresholds,
) -> Tuple[LayerHeightRecord, ...]:
    output_volume = calculate_output_volume(nozzle_diameter)
    layer_heights = generate_layer_heights(
        ideal_layer_height_step, nozzle_diameter, thresholds.max_layer_ratio
    )
    return tuple(
        build_record(
            layer_height, nozzle_diameter, nozzle_flat_size, output_volume, palette, thresholds
        )
        for layer_height in layer_heights
    )


class LayerHeightSweep:
    """Sweeps layer heights for one nozzle and classifies each.

    Records are pure functions of the three inputs, so results are memoized on
    (nozzle_diameter, nozzle_flat_size, ideal_layer_height_step) together with
    the palette and thresholds.

    Args:
        palette: Colors for fixed safety levels (default: green/yellow/red)
        thresholds: Classification thresholds (default: 0.8 / 1.5 / 0.5 / 1.6)

    Example:
        >>> sweep = LayerHeightSweep()
        >>> records = sweep.run(0.4, 0.6, 0.04)
        >>> records[0].line_width_safety_color
        '#f00'
    """

    def __init__(
        self,
        palette: SafetyPalette = DEFAULT_PALETTE,
        thresholds: SafetyThresholds = DEFAULT_THRESHOLDS,
    ):
        self.palette = palette
        self.thresholds = thresholds

    def run(
        self,
        nozzle_diameter: float,
        nozzle_flat_size: float,
        ideal_layer_height_step: float,
    ) -> List[LayerHeightRecord]:
        """Compute one record per swept layer height.

        Inputs are expected to be validated already (positive and finite, see
        SweepInputs). A non-positive step yields an empty list.

        Note:
            nozzle_flat_size < nozzle_diameter is a precondition violation: the
            max line width falls below the min line width and the "within spec"
            window is inverted. It is logged, not corrected.

        Args:
            nozzle_diameter: Nozzle bore diameter
            nozzle_flat_size: Nozzle tip flat diameter
            ideal_layer_height_step: Layer height increment

        Returns:
            Records ordered by increasing layer height
        """
        if nozzle_flat_size < nozzle_diameter:
            logger.warning(
                "nozzle_flat_size %s is smaller than nozzle_diameter %s; "
                "max line width will be below min line width",
                nozzle_flat_size,
                nozzle_diameter,
            )

        records = _sweep(
            nozzle_diameter,
            nozzle_flat_size,
            ideal_layer_height_step,
            self.palette,
            self.thresholds,
        )
        return list(records)

    def run_inputs(self, inputs: SweepInputs) -> List[LayerHeightRecord]:
        """Run the sweep for validated SweepInputs.

        Raises:
            ValueError: If this sweep's max_layer_ratio would produce more than
                MAX_SWEEP_LENGTH layer heights for the inputs
        """
        check_sweep_length(
            inputs.nozzle_diameter,
            inputs.ideal_layer_height_step,
            self.thresholds.max_layer_ratio,
        )
        return self.run(
            inputs.nozzle_diameter, inputs.nozzle_flat_size, inputs.ideal_layer_height_step
        )

    def __repr__(self) -> str:
        """Return string representation of the sweep."""
        return f"LayerHeightSweep(palette={self.palette!r}, thresholds={self.thresholds!r})"


def run(
    nozzle_diameter: float,
    nozzle_flat_size: float,
    ideal_layer_height_step: float,
) -> List[LayerHeightRecord]:
    """Sweep with the default palette and thresholds."""
    return LayerHeightSweep().run(nozzle_diameter, nozzle_flat_size, ideal_layer_height_step)
