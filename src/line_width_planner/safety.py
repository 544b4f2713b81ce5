"""Layer height and line width safety classification.

Layer heights are classified into three fixed levels. Line widths are
classified into fixed levels except inside the soft band just below the
minimum line width, where the verdict is a color interpolated from red
(at the danger edge) through yellow (midpoint) to green (at the minimum).
"""

import logging

from line_width_planner.config import (
    DEFAULT_PALETTE,
    DEFAULT_THRESHOLDS,
    SafetyPalette,
    SafetyThresholds,
)
from line_width_planner.formatting import round_to
from line_width_planner.geometry import calculate_max_line_width, calculate_min_line_width
from line_width_planner.models.safety import GradientColor, LineWidthSafety, SafetyLevel

logger = logging.getLogger(__name__)

# Highest value of a single hex color digit
HEX_DIGIT_MAX = 15


def determine_layer_height_safety(
    layer_height: float,
    nozzle_diameter: float,
    thresholds: SafetyThresholds = DEFAULT_THRESHOLDS,
) -> SafetyLevel:
    """Classify a layer height relative to the nozzle diameter.

    Both bounds are inclusive: with default thresholds a ratio of exactly 0.8
    is SAFE and exactly 1.5 is WARNING.

    Args:
        layer_height: Candidate layer height
        nozzle_diameter: Nozzle bore diameter
        thresholds: Classification thresholds

    Returns:
        SAFE, WARNING or DANGER
    """
    ratio = layer_height / nozzle_diameter

    if ratio <= thresholds.safe_layer_ratio:
        return SafetyLevel.SAFE

    if ratio <= thresholds.warning_layer_ratio:
        return SafetyLevel.WARNING

    return SafetyLevel.DANGER


def determine_line_width_safety(
    line_width: float,
    layer_height: float,
    nozzle_diameter: float,
    nozzle_flat_size: float,
    thresholds: SafetyThresholds = DEFAULT_THRESHOLDS,
) -> LineWidthSafety:
    """Classify a line width against the nozzle's min/max line width window.

    Args:
        line_width: Line width to classify (normally the ideal line width)
        layer_height: Layer height the line is printed at
        nozzle_diameter: Nozzle bore diameter
        nozzle_flat_size: Nozzle tip flat diameter
        thresholds: Classification thresholds

    Returns:
        SafetyLevel.DANGER below the floor (half the minimum by default) or
        above the maximum, SafetyLevel.SAFE at or above the minimum, and a
        GradientColor in between.

    Algorithm:
        Inside the soft band the distance below the minimum is normalized to
        delta_ratio in [0, 1) and mapped to shift = (delta_ratio - 0.5) / 0.5
        in [-1, 1). The free color channel is round((1 - |shift|) * 15):
        - shift > 0: "#f?0", red held at max, green rising toward the midpoint
        - shift < 0: "#?f0", green held at max, red rising toward the midpoint
        - shift == 0: "#ff0"
    """
    min_line_width = calculate_min_line_width(layer_height, nozzle_diameter)
    max_line_width = calculate_max_line_width(layer_height, nozzle_flat_size)
    danger_floor = thresholds.min_line_width_floor * min_line_width

    if line_width < danger_floor or line_width > max_line_width:
        return SafetyLevel.DANGER

    if line_width >= min_line_width:
        return SafetyLevel.SAFE

    max_allowable_delta = min_line_width - danger_floor
    delta = min_line_width - line_width
    delta_ratio = delta / max_allowable_delta

    shift = (delta_ratio - 0.5) / 0.5
    shift_hex = format(int(round_to((1 - abs(shift)) * HEX_DIGIT_MAX, 0)), "x")

    logger.debug(
        "line width %.4f in soft band: delta_ratio=%.4f shift=%.4f hex=%s",
        line_width,
        delta_ratio,
        shift,
        shift_hex,
    )

    if shift > 0:
        return GradientColor(f"#f{shift_hex}0")

    if shift < 0:
        return GradientColor(f"#{shift_hex}f0")

    return GradientColor("#ff0")


def resolve_safety_color(
    verdict: LineWidthSafety, palette: SafetyPalette = DEFAULT_PALETTE
) -> str:
    """Map a verdict to its display color.

    Fixed levels resolve through the palette; gradient colors are returned as is.
    """
    if isinstance(verdict, GradientColor):
        return verdict.hex
    return palette.color_for(verdict)


def determine_worst_safety_color(
    layer_height_color: str,
    line_width_color: str,
    palette: SafetyPalette = DEFAULT_PALETTE,
) -> str:
    """Combine resolved layer height and line width colors into a worst case.

    Colors are compared by RGB value, so short and long hex forms match.

    Precedence:
        1. Either color is the danger color -> danger
        2. The line width color is a gradient (not a fixed palette color) -> it
        3. Either color is the warning color -> warning
        4. Otherwise -> safe

    Args:
        layer_height_color: Resolved layer height verdict color
        line_width_color: Resolved line width verdict color
        palette: Palette the fixed colors come from

    Returns:
        Worst case color
    """
    if palette.is_danger(layer_height_color) or palette.is_danger(line_width_color):
        return palette.danger

    if not palette.is_fixed(line_width_color):
        return line_width_color

    if palette.is_warning(layer_height_color) or palette.is_warning(line_width_color):
        return palette.warning

    return palette.safe
