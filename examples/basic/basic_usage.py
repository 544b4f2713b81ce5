"""Basic usage example.

This example demonstrates:
- Validating the three sweep inputs
- Ignoring an invalid edit the way an input form would
- Running the sweep and printing the table
- Summarizing which layer heights are safe

This is the simplest way to use the line width planner.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from plot_helper import generate_example_plot

from line_width_planner import LayerHeightSweep, SweepInputs
from line_width_planner.config import (
    DEFAULT_IDEAL_LAYER_HEIGHT_STEP,
    DEFAULT_NOZZLE_DIAMETER,
    DEFAULT_NOZZLE_FLAT_SIZE,
    DEFAULT_PALETTE,
)
from line_width_planner.formatting import format_number
from line_width_planner.report import format_table
from line_width_planner.sweep import calculate_output_volume


def main():
    """Basic usage example with the default 0.4mm nozzle."""

    print("=" * 80)
    print("BASIC LINE WIDTH PLANNER USAGE")
    print("=" * 80)

    inputs = SweepInputs(
        nozzle_diameter=DEFAULT_NOZZLE_DIAMETER,  # mm bore
        nozzle_flat_size=DEFAULT_NOZZLE_FLAT_SIZE,  # mm tip flat
        ideal_layer_height_step=DEFAULT_IDEAL_LAYER_HEIGHT_STEP,  # mm
    )

    # A typo in the form is discarded; the last valid inputs stay in effect
    inputs = inputs.with_update("nozzle_diameter", "0.4mm")

    print("\nInput Configuration:")
    print(f"  Nozzle Diameter: {inputs.nozzle_diameter} mm")
    print(f"  Nozzle Flat Size: {inputs.nozzle_flat_size} mm")
    print(f"  Ideal Layer Height Step: {inputs.ideal_layer_height_step} mm")
    print()

    sweep = LayerHeightSweep()
    records = sweep.run_inputs(inputs)

    print(format_table(records, output_volume=calculate_output_volume(inputs.nozzle_diameter)))

    print("\nSafety Summary:")
    print("  " + "-" * 70)
    safe = [r for r in records if r.worst_safety_color == DEFAULT_PALETTE.safe]
    danger = [r for r in records if r.worst_safety_color == DEFAULT_PALETTE.danger]
    print(f"  Safe layer heights: {', '.join(format_number(r.layer_height, 2) for r in safe)}")
    print(f"  Dangerous layer heights: {len(danger)}/{len(records)}")

    print("\n" + "=" * 80)
    print("GENERATING PLOT")
    print("=" * 80)
    generate_example_plot("basic_usage", records)
    print()


if __name__ == "__main__":
    main()
