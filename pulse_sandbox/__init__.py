"""
Pulse sandbox: an interactive traveling pulse demo.

Author: maxseg2021
License: MIT
"""
from pulse_sandbox.config import Direction, SimulationParameters
from pulse_sandbox.pulses import PulseShape, displacement_at, evaluate, parse_shape
from pulse_sandbox.simulation import HistoryBuffer, RenderPayload, SimulationDriver

__version__ = "1.0.0"
