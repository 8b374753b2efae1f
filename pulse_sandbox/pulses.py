"""
Closed-form pulse shapes and the traveling-pulse displacement.

Every shape is a function of the offset u from the pulse reference point.
All functions accept scalars or numpy arrays.

Author: maxseg2021
License: MIT
"""
from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from pulse_sandbox.config import SimulationParameters

logger = logging.getLogger(__name__)


class PulseShape(StrEnum):
    """Pulse shapes, valued by their display names."""
    TRIANGULAR = "Triangular"
    SQUARE = "Square"
    SINE = "Sine"
    GAUSSIAN = "Gaussian"
    NON_SYMMETRIC_TRIANGLE = "Non-symmetric Triangle"
    SINE_WAVE = "Sine-wave"
    TRAPEZOID = "Trapezoid-pulse"


DEFAULT_SHAPE = PulseShape.NON_SYMMETRIC_TRIANGLE


def triangular(u, height, width):
    return np.maximum(0.0, height * (1.0 - np.abs(u) / width))


def square(u, height, width):
    return np.where(np.abs(u) <= width / 2.0, height, 0.0)


def sine_pulse(u, height, width):
    half = width / 2.0
    return np.where(np.abs(u) <= half, height * np.sin(np.pi * u / half), 0.0)


def sine_wave_pulse(u, height, width):
    # three half-periods per 5 length units, windowed by the pulse width
    return np.where(np.abs(u) <= width / 2.0, height * np.sin(6.0 * np.pi * u / 5.0), 0.0)


def gaussian(u, height, width):
    sigma = 0.1 * width
    return height * np.exp(-(u * u) / (sigma * sigma))


def non_symmetric_triangle(u, height, width=None):
    """Ramp up over [-1, 0), ramp down over [0, 3]. Width is not used."""
    rise, fall = 1.0, 3.0
    y = np.zeros_like(u)
    up = (u >= -rise) & (u < 0.0)
    down = (u >= 0.0) & (u <= fall)
    y = np.where(up, (u + rise) / rise * height, y)
    y = np.where(down, (fall - u) / fall * height, y)
    return np.maximum(0.0, y)


def trapezoid(u, height, width=None):
    """Flat top over [-2, 1], linear fall to zero over (1, 2]. Width is not used."""
    left, flat_right, right = -2.0, 1.0, 2.0
    y = np.zeros_like(u)
    y = np.where((u >= left) & (u <= flat_right), height, y)
    ramp = (u > flat_right) & (u <= right)
    return np.where(ramp, (right - u) / (right - flat_right) * height, y)


_SHAPE_FUNCTIONS = {
    PulseShape.TRIANGULAR: triangular,
    PulseShape.SQUARE: square,
    PulseShape.SINE: sine_pulse,
    PulseShape.SINE_WAVE: sine_wave_pulse,
    PulseShape.GAUSSIAN: gaussian,
    PulseShape.NON_SYMMETRIC_TRIANGLE: non_symmetric_triangle,
    PulseShape.TRAPEZOID: trapezoid,
}


def parse_shape(name) -> PulseShape:
    """
    Map a dropdown label to a PulseShape. Unknown labels fall back to the
    non-symmetric triangle.
    """
    try:
        return PulseShape(name)
    except ValueError:
        logger.warning(f"Unknown pulse shape '{name}', using '{DEFAULT_SHAPE}'")
        return DEFAULT_SHAPE


def evaluate(offset, params: SimulationParameters):
    """
    Displacement of the selected shape at the given offset(s).

    A non-positive width is treated as a switched-off pulse and yields zeros.
    Returns a float for scalar input and an array otherwise.
    """
    u = np.asarray(offset, dtype=float)
    if params.width <= 0.0:
        y = np.zeros_like(u)
    else:
        fn = _SHAPE_FUNCTIONS.get(params.shape, non_symmetric_triangle)
        y = np.asarray(fn(u, float(params.amplitude), float(params.width)), dtype=float)
    if y.ndim == 0:
        return float(y)
    return y


def displacement_at(x, time, params: SimulationParameters):
    """u(x, t) for a rigid pulse translating at constant speed."""
    arg = np.asarray(x, dtype=float) + params.sign * params.wave_speed * time - params.initial_center
    return evaluate(arg, params)
