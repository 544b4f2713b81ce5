"""Core data models for layer height sweeps.

This package contains the safety verdict types, validated inputs and the
output record.
"""

from line_width_planner.models.safety import GradientColor, LineWidthSafety, SafetyLevel
from line_width_planner.models.inputs import SweepInputs
from line_width_planner.models.record import ROW_TINT_LIGHTNESS, LayerHeightRecord

__all__ = [
    "SafetyLevel",
    "GradientColor",
    "LineWidthSafety",
    "SweepInputs",
    "LayerHeightRecord",
    "ROW_TINT_LIGHTNESS",
]
