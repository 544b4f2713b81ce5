"""Safety verdict types for layer height and line width classification."""

from dataclasses import dataclass
from enum import Enum
from typing import Union


class SafetyLevel(Enum):
    """Categorical safety verdict."""

    SAFE = "safe"
    WARNING = "warning"
    DANGER = "danger"


@dataclass(frozen=True)
class GradientColor:
    """Interpolated color for a line width inside the soft under-width band.

    Attributes:
        hex: Three digit hex color, e.g. "#f80" (closer to danger) or "#8f0"
            (closer to safe)
    """

    hex: str


# A line width verdict is either a fixed level or a gradient color
LineWidthSafety = Union[SafetyLevel, GradientColor]
