"""Default inputs, safety palette and classification thresholds."""

from dataclasses import dataclass

from matplotlib.colors import to_rgb

# Default sweep inputs (any consistent length unit, millimeters in practice)
DEFAULT_NOZZLE_DIAMETER = 0.4
DEFAULT_NOZZLE_FLAT_SIZE = 0.6
DEFAULT_IDEAL_LAYER_HEIGHT_STEP = 0.04

# Upper bound on rows a single sweep may produce
MAX_SWEEP_LENGTH = 10_000


@dataclass(frozen=True)
class SafetyPalette:
    """Fixed display colors for the three safety levels.

    Colors are CSS-style hex triplets in ``#rgb`` or ``#rrggbb`` form. Gradient
    colors from the line width classifier are always ``#rgb``, so comparisons
    go through RGB values rather than strings.

    Attributes:
        safe: Color for SafetyLevel.SAFE
        warning: Color for SafetyLevel.WARNING
        danger: Color for SafetyLevel.DANGER
    """

    safe: str = "#0f0"
    warning: str = "#ff0"
    danger: str = "#f00"

    def color_for(self, level) -> str:
        """Return the fixed color of a SafetyLevel (looked up by its value)."""
        return getattr(self, level.value)

    def is_danger(self, color: str) -> bool:
        """True if ``color`` is the danger color, in short or long hex form."""
        return to_rgb(color) == to_rgb(self.danger)

    def is_warning(self, color: str) -> bool:
        """True if ``color`` is the warning color, in short or long hex form."""
        return to_rgb(color) == to_rgb(self.warning)

    def is_fixed(self, color: str) -> bool:
        """True if ``color`` is one of the three fixed palette colors.

        Colors are compared by RGB value, so "#f00" matches a "#ff0000" palette.
        """
        rgb = to_rgb(color)
        return rgb in (to_rgb(self.safe), to_rgb(self.warning), to_rgb(self.danger))


@dataclass(frozen=True)
class SafetyThresholds:
    """Ratios used to classify layer heights and line widths.

    Attributes:
        safe_layer_ratio: Highest layer_height / nozzle_diameter still SAFE
        warning_layer_ratio: Highest layer_height / nozzle_diameter still WARNING
        min_line_width_floor: Fraction of the minimum line width below which a
            line is DANGER; between it and the minimum the verdict is a gradient
        max_layer_ratio: Sweep stops once layer_height exceeds this multiple of
            the nozzle diameter
    """

    safe_layer_ratio: float = 0.8
    warning_layer_ratio: float = 1.5
    min_line_width_floor: float = 0.5
    max_layer_ratio: float = 1.6

    def __post_init__(self) -> None:
        """Validate threshold ordering."""
        if not 0 < self.safe_layer_ratio <= self.warning_layer_ratio:
            raise ValueError(
                f"safe_layer_ratio must be positive and <= warning_layer_ratio, "
                f"got {self.safe_layer_ratio} and {self.warning_layer_ratio}"
            )
        if not 0 < self.min_line_width_floor < 1:
            raise ValueError(
                f"min_line_width_floor must be between 0 and 1, got {self.min_line_width_floor}"
            )
        if self.max_layer_ratio <= 0:
            raise ValueError(f"max_layer_ratio must be positive, got {self.max_layer_ratio}")


DEFAULT_PALETTE = SafetyPalette()
DEFAULT_THRESHOLDS = SafetyThresholds()
