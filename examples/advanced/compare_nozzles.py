"""Nozzle comparison example.

This example demonstrates:
- Using the nozzle profiles (Fine, Standard, Medium, Large)
- Passing a custom palette and thresholds to the sweep
- Comparing how many layer heights each nozzle prints safely

Shows how to adapt the planner to your own nozzles and risk tolerance.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from plot_helper import save_sweep_plot

from line_width_planner import LayerHeightSweep
from line_width_planner.config import SafetyPalette, SafetyThresholds
from line_width_planner.formatting import format_number
from line_width_planner.profiles import NozzleProfile, create_sweep_inputs


def analyze_profile(sweep, profile, save_plot=False):
    """Sweep one nozzle profile and print a one-line summary.

    Args:
        sweep: LayerHeightSweep instance
        profile: NozzleProfile enum value
        save_plot: Whether to save a plot for this profile
    """
    inputs = create_sweep_inputs(profile, ideal_layer_height_step=0.02)
    records = sweep.run_inputs(inputs)

    safe = [r for r in records if r.worst_safety_color == sweep.palette.safe]
    if safe:
        window = (
            f"{format_number(safe[0].layer_height, 2)}-"
            f"{format_number(safe[-1].layer_height, 2)} mm"
        )
    else:
        window = "none"

    print(
        f"  {profile.name:<10} {inputs.nozzle_diameter:<8} {inputs.nozzle_flat_size:<8} "
        f"{len(safe):>3}/{len(records):<4} {window}"
    )

    if save_plot:
        filename = Path(__file__).parent / f"compare_nozzles_{profile.value}_plot.png"
        save_sweep_plot(records, str(filename), title=f"{profile.name.title()} Nozzle")


def main():
    """Compare all nozzle profiles with a stricter layer height policy."""

    print("=" * 80)
    print("NOZZLE PROFILE COMPARISON")
    print("=" * 80)

    # Full-length hex colors, and treat layer heights above 60% of the bore as risky
    palette = SafetyPalette(safe="#00ff00", warning="#ffff00", danger="#ff0000")
    thresholds = SafetyThresholds(safe_layer_ratio=0.6, warning_layer_ratio=1.2)
    sweep = LayerHeightSweep(palette=palette, thresholds=thresholds)

    print(f"\n  {'Profile':<10} {'Bore':<8} {'Flat':<8} {'Safe':<8} Safe Window")
    print("  " + "-" * 70)
    for profile in NozzleProfile:
        analyze_profile(sweep, profile, save_plot=profile == NozzleProfile.STANDARD)
    print()


if __name__ == "__main__":
    main()
