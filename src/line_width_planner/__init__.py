"""Layer height and line width safety planning for extrusion 3D printing."""

from .models import LayerHeightRecord, SweepInputs
from .sweep import LayerHeightSweep, run

__all__ = ["LayerHeightSweep", "LayerHeightRecord", "SweepInputs", "run"]
