"""Validated sweep inputs collected from the operator."""

import math
import numbers
from dataclasses import dataclass, replace
from typing import Any

from line_width_planner.config import DEFAULT_THRESHOLDS, MAX_SWEEP_LENGTH

_FIELDS = ("nozzle_diameter", "nozzle_flat_size", "ideal_layer_height_step")


def check_sweep_length(
    nozzle_diameter: float, ideal_layer_height_step: float, max_layer_ratio: float
) -> None:
    """Raise ValueError if a sweep would produce more than MAX_SWEEP_LENGTH layer heights."""
    max_layer_height = nozzle_diameter * max_layer_ratio
    if max_layer_height / ideal_layer_height_step > MAX_SWEEP_LENGTH:
        raise ValueError(
            f"ideal_layer_height_step {ideal_layer_height_step} is too small for "
            f"nozzle_diameter {nozzle_diameter}: sweep would exceed "
            f"{MAX_SWEEP_LENGTH} layer heights"
        )


@dataclass(frozen=True)
class SweepInputs:
    """The three parameters a layer height sweep is computed from.

    All values share one length unit. Construction validates everything the
    engine relies on for the default thresholds. Sweeps with a larger
    max_layer_ratio re-check the sweep length (see LayerHeightSweep.run_inputs).

    Note:
        A nozzle_flat_size smaller than nozzle_diameter is accepted but
        inverts the min/max line width window. Check has_inverted_geometry
        before trusting the "within spec" verdicts.

    Attributes:
        nozzle_diameter: Bore diameter of the nozzle
        nozzle_flat_size: Diameter of the flat face at the nozzle tip
        ideal_layer_height_step: Increment between swept layer heights
    """

    nozzle_diameter: float
    nozzle_flat_size: float
    ideal_layer_height_step: float

    def __post_init__(self) -> None:
        """Validate that all values are finite and positive and the sweep is bounded."""
        for name in _FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ValueError(f"{name} must be a number, got {value!r}")
            if not math.isfinite(value):
                raise ValueError(f"{name} must be a finite number, got {value}")
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")

        check_sweep_length(
            self.nozzle_diameter, self.ideal_layer_height_step, DEFAULT_THRESHOLDS.max_layer_ratio
        )

    @property
    def has_inverted_geometry(self) -> bool:
        """True when the flat is narrower than the bore (max line width < min line width)."""
        return self.nozzle_flat_size < self.nozzle_diameter

    def with_update(self, field: str, raw: Any) -> "SweepInputs":
        """Return inputs with one field replaced by a raw user value.

        Mirrors an input form: non-numeric or otherwise invalid edits are
        ignored and the last valid inputs are kept.

        Args:
            field: One of nozzle_diameter, nozzle_flat_size, ideal_layer_height_step
            raw: Raw value as typed (string or number)

        Returns:
            Updated inputs, or self if the value was rejected

        Raises:
            ValueError: If field is not a known input name
        """
        if field not in _FIELDS:
            raise ValueError(f"Unknown input field: {field}")

        try:
            value = float(raw)
        except (TypeError, ValueError):
            return self

        try:
            return replace(self, **{field: value})
        except ValueError:
            return self
