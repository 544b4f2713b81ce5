"""Visualization utilities for layer height sweeps.

This module provides functions to plot ideal line width against the min/max
line width window and the extrusion volume deviation of each layer height.
"""

from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np

from line_width_planner.models import LayerHeightRecord


def _layer_heights(records: List[LayerHeightRecord]) -> np.ndarray:
    """Extract layer heights as an array."""
    return np.array([record.layer_height for record in records])


def plot_sweep(
    records: List[LayerHeightRecord],
    title: Optional[str] = None,
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot a full sweep analysis.

    Creates a two-panel visualization showing:
    - Ideal line width with the min/max window, markers colored by line width safety
    - Min/max extrusion volume deviation from the output volume

    Args:
        records: Records from a sweep
        title: Optional custom title (default: "Layer Height Sweep")
        show: Whether to display the plot (default: True)
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object

    Example:
        >>> from line_width_planner import run
        >>> records = run(0.4, 0.6, 0.04)
        >>> plot_sweep(records, show=False)
    """
    if not records:
        raise ValueError("Cannot plot empty sweep")

    heights = _layer_heights(records)
    ideal = np.array([record.ideal_line_width for record in records])
    min_widths = np.array([record.min_line_width for record in records])
    max_widths = np.array([record.max_line_width for record in records])
    min_deltas = np.array([record.min_volume_delta for record in records])
    max_deltas = np.array([record.max_volume_delta for record in records])

    fig, (ax1, ax2) = plt.subplots(2, 1, figsize=(12, 8), sharex=True)
    fig.suptitle(title or "Layer Height Sweep", fontsize=14, fontweight="bold")

    # Plot 1: Line widths
    ax1.fill_between(heights, min_widths, max_widths, color="green", alpha=0.1)
    ax1.plot(heights, min_widths, linestyle="--", color="gray", label="Min Line Width")
    ax1.plot(heights, max_widths, linestyle=":", color="gray", label="Max Line Width")
    ax1.plot(heights, ideal, color="black", linewidth=1, alpha=0.5)
    ax1.scatter(
        heights,
        ideal,
        c=[record.line_width_safety_color for record in records],
        edgecolors="black",
        zorder=3,
        label="Ideal Line Width",
    )
    ax1.set_ylabel("Line Width")
    ax1.set_title("Ideal Line Width vs Nozzle Window")
    ax1.legend()
    ax1.grid(True, alpha=0.3)

    # Plot 2: Volume deltas
    ax2.plot(heights, min_deltas, marker="o", label="Min Volume Delta")
    ax2.plot(heights, max_deltas, marker="s", label="Max Volume Delta")
    ax2.axhline(0, color="black", linewidth=1)
    ax2.set_xlabel("Layer Height")
    ax2.set_ylabel("Volume Delta (%)")
    ax2.set_title("Extrusion Volume vs Output Volume")
    ax2.legend()
    ax2.grid(True, alpha=0.3)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig


def plot_safety_strip(
    records: List[LayerHeightRecord],
    title: str = "Worst Case Safety by Layer Height",
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot one colored bar per layer height showing its worst safety color.

    Args:
        records: Records from a sweep
        title: Plot title
        show: Whether to display the plot
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object
    """
    if not records:
        raise ValueError("Cannot plot empty sweep")

    positions = np.arange(len(records))

    fig, ax = plt.subplots(figsize=(12, 2))
    ax.bar(
        positions,
        np.ones(len(records)),
        width=1.0,
        color=[record.worst_safety_color for record in records],
        edgecolor="black",
    )
    ax.set_xticks(positions)
    ax.set_xticklabels([f"{record.layer_height:.2f}" for record in records], rotation=45)
    ax.set_yticks([])
    ax.set_xlabel("Layer Height")
    ax.set_title(title)

    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig
