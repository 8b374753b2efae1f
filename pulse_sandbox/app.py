"""
Pulse sandbox

Interactive 1D traveling pulse demo. A chosen pulse shape translates along
the x axis at constant speed; the lower plot records the displacement seen at
a fixed point of interest.

Author: maxseg2021
License: MIT
"""
import logging

import tkinter as tk
from tkinter import ttk

import matplotlib
matplotlib.use("TkAgg")
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg

from pulse_sandbox.config import SLIDER_RANGES, Direction, SimulationParameters, parse_direction
from pulse_sandbox.plotting import build_figure, draw_history, draw_snapshot
from pulse_sandbox.pulses import PulseShape, parse_shape
from pulse_sandbox.simulation import SimulationDriver

logger = logging.getLogger(__name__)

HINT = "Tip: For Right, choose x_point > a. For Left, choose x_point < a."


def snap(value, resolution):
    return round(float(value) / resolution) * resolution


class App(tk.Tk):
    def __init__(self, params=None):
        super().__init__()
        self.title("Wave pulse sandbox: traveling pulse and point history")
        self.geometry("1200x760")

        p = params if params is not None else SimulationParameters()
        self.driver = SimulationDriver(p)

        self.shape = tk.StringVar(value=str(p.shape))
        self.direction = tk.StringVar(value=str(p.direction))

        self.var_speed = tk.DoubleVar(value=p.wave_speed)
        self.var_height = tk.DoubleVar(value=p.amplitude)
        self.var_width = tk.DoubleVar(value=p.width)
        self.var_center = tk.DoubleVar(value=p.initial_center)
        self.var_probe = tk.DoubleVar(value=p.probe_point)
        self.var_tmax = tk.DoubleVar(value=p.max_time)
        self.var_fps = tk.DoubleVar(value=p.frame_rate)

        self._job = None

        self._build_ui()
        self._frame()

    def _build_ui(self):
        controls = ttk.Frame(self)
        controls.pack(side=tk.LEFT, fill=tk.Y, padx=10, pady=8)

        ttk.Label(controls, text="Pulse shape").pack(anchor="w")
        shape_combo = ttk.Combobox(
            controls,
            textvariable=self.shape,
            values=[s.value for s in PulseShape],
            width=24,
            state="readonly",
        )
        shape_combo.pack(anchor="w", pady=(0, 6))

        ttk.Label(controls, text="Direction").pack(anchor="w")
        dir_combo = ttk.Combobox(
            controls,
            textvariable=self.direction,
            values=[d.value for d in Direction],
            width=8,
            state="readonly",
        )
        dir_combo.pack(anchor="w", pady=(0, 6))

        buttons = ttk.Frame(controls)
        buttons.pack(anchor="w", pady=8)
        self.play_btn = ttk.Button(buttons, text="Play", command=self.toggle_play)
        self.play_btn.pack(side=tk.LEFT, padx=(0, 6))
        ttk.Button(buttons, text="Reset", command=self.reset).pack(side=tk.LEFT)

        self._add_slider(controls, "Wave speed c", self.var_speed, "wave_speed")
        self._add_slider(controls, "Pulse height", self.var_height, "amplitude")
        self._add_slider(controls, "Pulse width", self.var_width, "width")
        self._add_slider(controls, "Initial pulse center a", self.var_center, "initial_center")
        self._add_slider(controls, "Point of interest x", self.var_probe, "probe_point")
        self._add_slider(controls, "Max time", self.var_tmax, "max_time")
        self._add_slider(controls, "FPS (target)", self.var_fps, "frame_rate", fmt="{:.0f}")

        ttk.Label(controls, text=HINT, wraplength=220, foreground="#444444").pack(anchor="w", pady=8)

        self.status_label = ttk.Label(controls, text="")
        self.status_label.pack(anchor="w", pady=4)

        self.fig, self.ax_snap, self.ax_hist = build_figure()
        self.canvas = FigureCanvasTkAgg(self.fig, master=self)
        self.canvas.get_tk_widget().pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=10, pady=10)

    def _add_slider(self, parent, label, var, key, width=220, fmt="{:.1f}"):
        rng = SLIDER_RANGES[key]
        frame = ttk.Frame(parent)
        frame.pack(anchor="w", pady=2)

        ttk.Label(frame, text=label).pack(anchor="w")

        s = ttk.Scale(
            frame,
            from_=rng.minimum,
            to=rng.maximum,
            orient=tk.HORIZONTAL,
            variable=var,
            length=width,
        )
        s.pack()

        val_label = ttk.Label(frame, width=12)
        val_label.pack(anchor="w")

        def update_label(*_):
            val_label.config(text=fmt.format(snap(var.get(), rng.resolution)))

        var.trace_add("write", update_label)
        update_label()

    def _read_params(self):
        def value(var, key):
            rng = SLIDER_RANGES[key]
            return snap(var.get(), rng.resolution)

        return SimulationParameters(
            shape=parse_shape(self.shape.get()),
            direction=parse_direction(self.direction.get()),
            wave_speed=value(self.var_speed, "wave_speed"),
            amplitude=value(self.var_height, "amplitude"),
            width=value(self.var_width, "width"),
            initial_center=value(self.var_center, "initial_center"),
            probe_point=value(self.var_probe, "probe_point"),
            max_time=value(self.var_tmax, "max_time"),
            frame_rate=value(self.var_fps, "frame_rate"),
        ).clamped()

    def toggle_play(self):
        self.driver.toggle_play()
        self.play_btn.configure(text="Pause" if self.driver.playing else "Play")

    def reset(self):
        logger.debug("Reset requested from the UI.")
        self.driver.reset()
        self.play_btn.configure(text="Play")

    def _frame(self):
        requested = self._read_params()
        payload = self.driver.frame(requested)

        # a direction change moves the pulse center; keep the slider in sync
        applied = self.driver.params
        if applied.initial_center != requested.initial_center:
            self.var_center.set(applied.initial_center)

        draw_snapshot(self.ax_snap, payload)
        draw_history(self.ax_hist, payload)
        self.play_btn.configure(text=payload.play_label)
        self.status_label.configure(text=payload.status_text)
        self.canvas.draw_idle()

        self._job = self.after(max(1, int(1000.0 / applied.frame_rate)), self._frame)

    def destroy(self):
        if self._job is not None:
            self.after_cancel(self._job)
            self._job = None
        super().destroy()
