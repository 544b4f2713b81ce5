"""Extrusion volume and line width geometry."""

import math


def cylinder_volume(radius: float, height: float) -> float:
    """Volume of a cylinder, π·r²·h.

    Used both for the reference output volume (radius = nozzle_diameter / 2,
    height = nozzle_diameter) and for a bead's volume per unit length
    (radius = line_width / 2, height = layer_height).

    Examples:
        >>> round(cylinder_volume(0.2, 0.4), 5)
        0.05027
    """
    return math.pi * radius**2 * height


def calculate_ideal_line_width(nozzle_diameter: float, layer_height: float) -> float:
    """Calculate the line width that preserves the nozzle's output volume.

    The formula is: 2 * sqrt((nozzle_diameter / layer_height) * (nozzle_diameter / 2)^2)

    Thin layers need wide lines to put down the same material, thick layers
    narrow ones, so the result decreases monotonically with layer_height.

    Args:
        nozzle_diameter: Nozzle bore diameter
        layer_height: Layer height, must be positive

    Returns:
        Ideal line width in the same unit as the inputs

    Examples:
        >>> round(calculate_ideal_line_width(0.4, 0.04), 4)
        1.2649
        >>> round(calculate_ideal_line_width(0.4, 0.4), 4)
        0.4
    """
    return 2 * math.sqrt((nozzle_diameter / layer_height) * (nozzle_diameter / 2) ** 2)


def calculate_min_line_width(layer_height: float, nozzle_diameter: float) -> float:
    """Smallest plausible line width: the bore plus one layer height of squish."""
    return layer_height + nozzle_diameter


def calculate_max_line_width(layer_height: float, nozzle_flat_size: float) -> float:
    """Largest plausible line width: the tip flat plus one layer height of squish."""
    return layer_height + nozzle_flat_size


def calculate_volume_delta(volume: float, reference_volume: float) -> float:
    """Percentage deviation of ``volume`` from ``reference_volume``.

    Examples:
        >>> calculate_volume_delta(1.5, 1.0)
        50.0
    """
    return (volume / reference_volume - 1) * 100
