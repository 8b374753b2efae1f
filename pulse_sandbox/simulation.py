"""
Time stepping, probe history and per-frame render payload.

The driver owns the simulated time and play state. Each frame the UI hands it
a fresh SimulationParameters snapshot and gets back a RenderPayload.

Author: maxseg2021
License: MIT
"""
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, replace
from typing import Iterator, NamedTuple, Optional

import numpy as np
import numpy.typing as npt

from pulse_sandbox.config import (
    HISTORY_CAPACITY,
    N_POINTS,
    X_MAX,
    X_MIN,
    SimulationParameters,
    start_center,
)
from pulse_sandbox.pulses import displacement_at

logger = logging.getLogger(__name__)


class HistorySample(NamedTuple):
    time: float
    displacement: float


class HistoryBuffer:
    """Fixed-capacity FIFO of probe samples; the oldest sample is dropped first."""

    def __init__(self, capacity: int = HISTORY_CAPACITY):
        if capacity <= 0:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self._samples: deque[HistorySample] = deque(maxlen=int(capacity))

    @property
    def capacity(self) -> int:
        return self._samples.maxlen

    def append(self, time: float, displacement: float) -> None:
        self._samples.append(HistorySample(float(time), float(displacement)))

    def clear(self) -> None:
        self._samples.clear()

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[HistorySample]:
        return iter(self._samples)

    def times(self) -> npt.NDArray[np.float64]:
        return np.array([s.time for s in self._samples], dtype=float)

    def displacements(self) -> npt.NDArray[np.float64]:
        return np.array([s.displacement for s in self._samples], dtype=float)


@dataclass
class SimulationState:
    current_time: float = 0.0
    playing: bool = False


@dataclass(frozen=True)
class RenderPayload:
    """Everything the renderer needs for one frame."""
    x: npt.NDArray[np.float64]
    u: npt.NDArray[np.float64]
    marker: tuple[float, float]
    history_t: npt.NDArray[np.float64]
    history_u: npt.NDArray[np.float64]
    status_text: str
    play_label: str
    snapshot_title: str
    history_title: str
    x_limits: tuple[float, float]
    y_limits: tuple[float, float]
    time_limits: tuple[float, float]


class SimulationDriver:
    def __init__(
        self,
        params: Optional[SimulationParameters] = None,
        capacity: int = HISTORY_CAPACITY,
        n_points: int = N_POINTS,
    ):
        self.params = params if params is not None else SimulationParameters()
        self.n_points = int(n_points)
        self.state = SimulationState()
        self.history = HistoryBuffer(capacity)
        self._x = np.linspace(X_MIN, X_MAX, self.n_points)

    @property
    def current_time(self) -> float:
        return self.state.current_time

    @property
    def playing(self) -> bool:
        return self.state.playing

    @property
    def step_size(self) -> float:
        return self.params.step_size

    def play(self) -> None:
        self.state.playing = True
        logger.debug(f"Playing from t={self.state.current_time:.2f} s")

    def pause(self) -> None:
        self.state.playing = False
        logger.debug(f"Paused at t={self.state.current_time:.2f} s")

    def toggle_play(self) -> None:
        if self.state.playing:
            self.pause()
        else:
            self.play()

    def reset(self) -> None:
        self.state = SimulationState()
        self.history.clear()
        logger.info("Simulation reset.")

    def update(self, params: SimulationParameters) -> SimulationParameters:
        """
        Apply a new parameter snapshot and return the one actually in effect.

        A direction change moves the pulse center to the boundary it enters from
        and resets the run. Otherwise the current time is only clamped into
        [0, max_time]; history is kept.
        """
        previous = self.params
        if params.direction != previous.direction:
            params = replace(params, initial_center=start_center(params.direction))
            logger.info(
                f"Direction changed to {params.direction}, pulse center moved to {params.initial_center:g}"
            )
            self.params = params
            self.reset()
        else:
            self.params = params

        if params.width <= 0.0 and params.width != previous.width:
            logger.warning(f"Pulse width {params.width:g} is not positive, pulse switched off")

        self.state.current_time = float(np.clip(self.state.current_time, 0.0, params.max_time))
        return self.params

    def tick(self) -> None:
        if not self.state.playing:
            return

        t = self.state.current_time + self.step_size
        if t > self.params.max_time:
            t = self.params.max_time
            self.state.playing = False
            logger.info(f"Reached max time {t:.2f} s, paused.")
        self.state.current_time = t

        u_probe = displacement_at(self.params.probe_point, t, self.params)
        self.history.append(t, u_probe)

    def snapshot(self) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """Spatial profile at the current time; no side effects."""
        return self._x.copy(), displacement_at(self._x, self.state.current_time, self.params)

    def probe(self) -> tuple[float, float]:
        p = self.params.probe_point
        return p, displacement_at(p, self.state.current_time, self.params)

    def payload(self) -> RenderPayload:
        p = self.params
        t = self.state.current_time
        x, u = self.snapshot()
        return RenderPayload(
            x=x,
            u=u,
            marker=self.probe(),
            history_t=self.history.times(),
            history_u=self.history.displacements(),
            status_text=f"t = {t:.2f} s",
            play_label="Pause" if self.state.playing else "Play",
            snapshot_title=f"{p.shape} Pulse Traveling {p.direction}   (t={t:.2f} s)",
            history_title=f"History at x = {p.probe_point:.2f}",
            x_limits=(X_MIN, X_MAX),
            y_limits=p.y_limits(),
            time_limits=(0.0, p.max_time),
        )

    def frame(self, params: SimulationParameters) -> RenderPayload:
        """One animation frame: read parameters, advance time, sample."""
        self.update(params)
        self.tick()
        return self.payload()
