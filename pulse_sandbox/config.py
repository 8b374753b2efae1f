"""
Domain constants and the parameter snapshot read by the simulation.

Author: maxseg2021
License: MIT
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from enum import StrEnum
from typing import NamedTuple

from pulse_sandbox.pulses import PulseShape, parse_shape

logger = logging.getLogger(__name__)


X_MIN = 0.0
X_MAX = 15.0
N_POINTS = 500
HISTORY_CAPACITY = 2000
Y_MARGIN = 0.1


class Direction(StrEnum):
    RIGHT = "Right"
    LEFT = "Left"


class SliderRange(NamedTuple):
    minimum: float
    maximum: float
    resolution: float

    def clamp(self, value: float) -> float:
        return max(self.minimum, min(self.maximum, float(value)))


SLIDER_RANGES: dict[str, SliderRange] = {
    "wave_speed": SliderRange(0.1, 5.0, 0.1),
    "amplitude": SliderRange(0.1, 2.0, 0.1),
    "width": SliderRange(0.2, 6.0, 0.1),
    "initial_center": SliderRange(X_MIN, X_MAX, 0.1),
    "probe_point": SliderRange(X_MIN, X_MAX, 0.1),
    "max_time": SliderRange(1.0, 30.0, 0.5),
    "frame_rate": SliderRange(10.0, 60.0, 1.0),
}


def parse_direction(name) -> Direction:
    """Map a dropdown label to a Direction. Unknown labels fall back to Right."""
    try:
        return Direction(name)
    except ValueError:
        logger.warning(f"Unknown direction '{name}', using '{Direction.RIGHT}'")
        return Direction.RIGHT


def start_center(direction: Direction) -> float:
    """Pulse center a fresh run starts from: left edge for Right, right edge for Left."""
    return X_MIN if direction == Direction.RIGHT else X_MAX


@dataclass(frozen=True)
class SimulationParameters:
    """Immutable snapshot of everything the user can set."""
    shape: PulseShape = PulseShape.NON_SYMMETRIC_TRIANGLE
    direction: Direction = Direction.RIGHT
    wave_speed: float = 1.0
    amplitude: float = 1.0
    width: float = 2.0
    initial_center: float = 0.0
    probe_point: float = 6.0
    max_time: float = 15.0
    frame_rate: float = 60.0

    def __post_init__(self):
        # plain strings are accepted; unknown ones fall back like the dropdowns do
        object.__setattr__(self, "shape", parse_shape(self.shape))
        object.__setattr__(self, "direction", parse_direction(self.direction))

    @property
    def step_size(self) -> float:
        return 1.0 / self.frame_rate

    @property
    def sign(self) -> float:
        # rightward motion subtracts the travelled distance from the offset
        return -1.0 if self.direction == Direction.RIGHT else 1.0

    def clamped(self) -> SimulationParameters:
        changes = {
            f.name: SLIDER_RANGES[f.name].clamp(getattr(self, f.name))
            for f in fields(self)
            if f.name in SLIDER_RANGES
        }
        return replace(self, **changes)

    def y_limits(self) -> tuple[float, float]:
        return -self.amplitude - Y_MARGIN, self.amplitude + Y_MARGIN
