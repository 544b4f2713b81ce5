"""Per layer height output record."""

from dataclasses import dataclass

from line_width_planner.colors import hex_to_hsl

# Lightness used to tint a whole table row with its worst safety color
ROW_TINT_LIGHTNESS = 90


@dataclass(frozen=True)
class LayerHeightRecord:
    """Everything computed for one candidate layer height.

    Attributes:
        layer_height: Candidate layer height
        ideal_line_width: Width that keeps volume per unit length equal to the
            nozzle's output volume
        min_line_width: layer_height + nozzle_diameter
        max_line_width: layer_height + nozzle_flat_size
        min_extrusion_volume: Volume per unit length at min_line_width
        min_volume_delta: Deviation of min_extrusion_volume from the output volume (%)
        max_extrusion_volume: Volume per unit length at max_line_width
        max_volume_delta: Deviation of max_extrusion_volume from the output volume (%)
        layer_height_safety_color: Fixed color of the layer height verdict
        line_width_safety_color: Fixed or gradient color of the line width verdict
        worst_safety_color: Worst case of the two verdicts
        notes: Explanation of the line width verdict
    """

    layer_height: float
    ideal_line_width: float
    min_line_width: float
    max_line_width: float
    min_extrusion_volume: float
    min_volume_delta: float
    max_extrusion_volume: float
    max_volume_delta: float
    layer_height_safety_color: str
    line_width_safety_color: str
    worst_safety_color: str
    notes: str

    @property
    def row_tint(self) -> str:
        """Light HSL tint of worst_safety_color for row backgrounds."""
        return hex_to_hsl(self.worst_safety_color, lightness=ROW_TINT_LIGHTNESS)
