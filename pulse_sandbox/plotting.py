"""
Matplotlib drawing of a RenderPayload: the spatial snapshot on top and the
probe history below.

Author: maxseg2021
License: MIT
"""
from __future__ import annotations

from matplotlib.figure import Figure

from pulse_sandbox.simulation import RenderPayload

PULSE_COLOR = "#111111"
PROBE_COLOR = "#DC0000"


def build_figure():
    fig = Figure(figsize=(7.0, 6.4), dpi=100)
    gs = fig.add_gridspec(2, 1, height_ratios=[1.3, 1.0], hspace=0.38)
    ax_snap = fig.add_subplot(gs[0, 0])
    ax_hist = fig.add_subplot(gs[1, 0])
    return fig, ax_snap, ax_hist


def draw_snapshot(ax, payload: RenderPayload):
    ax.clear()
    ax.set_title(payload.snapshot_title, fontsize=10, loc="left")
    ax.set_xlabel("x")
    ax.set_ylabel("Displacement")
    ax.grid(True, alpha=0.2)
    ax.set_xlim(*payload.x_limits)
    ax.set_ylim(*payload.y_limits)

    ax.plot(payload.x, payload.u, linewidth=2.0, color=PULSE_COLOR)

    xp, up = payload.marker
    ax.plot([xp], [up], marker="o", markersize=8, linestyle="none", color=PROBE_COLOR)


def draw_history(ax, payload: RenderPayload):
    ax.clear()
    ax.set_title(payload.history_title, fontsize=10, loc="left")
    ax.set_xlabel("Time")
    ax.set_ylabel("Displacement")
    ax.grid(True, alpha=0.2)
    ax.set_xlim(*payload.time_limits)
    ax.set_ylim(*payload.y_limits)

    # a single sample is not a line
    if len(payload.history_t) < 2:
        return
    ax.plot(payload.history_t, payload.history_u, linewidth=2.0, color=PROBE_COLOR)
