"""Helper functions for saving sweep plots in examples."""

import os
from typing import List, Optional

from line_width_planner import LayerHeightRecord
from line_width_planner.visualize import plot_sweep


def save_sweep_plot(
    records: List[LayerHeightRecord],
    filename: str,
    title: Optional[str] = None,
) -> None:
    """Save a sweep plot to file.

    Args:
        records: Records from a sweep
        filename: Output filename (e.g., "my_plot.png")
        title: Optional custom title
    """
    if not filename.endswith((".png", ".jpg", ".pdf")):
        filename += ".png"

    plot_sweep(records, title=title, show=False, save_path=filename)
    print(f"  Plot saved: {filename}")


def generate_example_plot(
    name: str,
    records: List[LayerHeightRecord],
    output_dir: Optional[str] = None,
) -> None:
    """Generate and save a plot with automatic naming.

    Args:
        name: Base name for the plot (e.g., "basic_usage")
        records: Records from a sweep
        output_dir: Optional output directory (defaults to caller's directory)
    """
    if output_dir is None:
        import inspect

        caller_frame = inspect.stack()[1]
        caller_file = caller_frame.filename
        output_dir = os.path.dirname(os.path.abspath(caller_file))

    filename = os.path.join(output_dir, f"{name}_plot.png")
    title = name.replace("_", " ").title()

    save_sweep_plot(records, filename=filename, title=title)
