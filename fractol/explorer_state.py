"""State of the fractal explorer: view, flags, animations and rendering."""

import math
from dataclasses import dataclass, field

import numpy as np

from .keys import Button
from .maths import scale
from .palette import palette_colors
from .render import WINSIZE, RenderSettings, explorer_image

MAX_I = 300
MIN_I = 20
LDMIN = 1e-37

_JULIA_VIEWS = (4, 5, 6)


@dataclass
class Flags:
    """Switches that steer input handling and animations."""

    origin: bool = False
    zooming_in: bool = False
    zooming_out: bool = False
    combo_shift: bool = False
    combo_ctrl: bool = False
    combo_alt: bool = False
    psychedelic_colors: bool = False
    psyche_switch: bool = False
    red_toggle: bool = True
    green_toggle: bool = True
    blue_toggle: bool = True
    traveling: bool = False
    fractal_switch: bool = True
    zooming_out_start: float = 0.0
    zooming_in_start: float = 0.0


@dataclass
class SavedView:
    """A view put aside when switching to a Julia set, to come back to later."""

    shift: complex = 0j
    zoom: float = 1.0
    fractal_number: int = 0


@dataclass
class Explorer:
    """Everything the explorer knows about what it shows and how it moves."""

    fractal_number: int = 0
    julia_constant: complex = 0j
    power: float = 2.0
    shift: complex = 0j
    zoom: float = 1.0
    speed_factor: float = 0.02
    escape_value: float = 4.0
    max_iterations: float = 1
    switch_iterations: int = 20
    max_iterations_start: float = 0.0
    palette_index: int = 0
    mouse: complex = 0j
    origin: complex = 0j
    arrival: complex = 0j
    distance: complex = 0j
    zooming_out_coords: tuple = (0, 0)
    t: float = 0.0
    tc: float = 0.01
    mu: float = 0.0
    saved: SavedView = field(default_factory=SavedView)
    flags: Flags = field(default_factory=Flags)
    size: int = WINSIZE
    frame: np.ndarray | None = None

    @classmethod
    def from_selection(cls, selection):
        """Build the starting state for the set chosen on the command line."""
        return cls(
            fractal_number=selection.fractal_number,
            julia_constant=selection.julia_constant,
            power=selection.power,
        )

    def _settings(self):
        return RenderSettings(
            fractal_number=self.fractal_number,
            zoom=self.zoom,
            shift=self.shift,
            julia_constant=self.julia_constant,
            max_iterations=self.max_iterations,
            escape_value=self.escape_value,
            power=self.power,
            psychedelic=self.flags.psychedelic_colors,
            palette=palette_colors(self.palette_index),
            keep_interior=self.flags.psyche_switch,
        )

    def render(self):
        """Draw the current view into ``frame`` and return it."""
        self.frame = explorer_image(self._settings(), self.frame, self.size)
        return self.frame

    def first_render(self):
        """Draw, then raise the iteration count; stop once it reaches 40."""
        self.render()
        self.max_iterations += 2
        if self.max_iterations >= 40:
            self.flags.fractal_switch = False

    def travel(self):
        """Move the Julia constant one step along the origin-to-arrival path."""
        self.flags.traveling = True
        self.t += self.tc
        self.julia_constant = self.origin + ((math.sin(self.t) + 1) * 0.5) * self.distance
        self.render()

    def update_animations(self):
        """Advance every running animation by one frame."""
        if self.flags.traveling:
            self.travel()
        if self.flags.zooming_out:
            self.animated_zoom_out(*self.zooming_out_coords)
        if self.flags.zooming_in:
            self.animated_zoom_in()
        if self.flags.fractal_switch:
            self.first_render()

    def animated_zoom_out(self, x, y):
        """One step of the zoom-out animation, drifting back to the home view."""
        self.flags.zooming_out = False
        if self.zoom < 1:
            self.flags.zooming_out = True
            self.zoom /= 1 - self.speed_factor
            if self.zoom > 0.1:
                center = self.size >> 1
                self.shift += complex(
                    -(x - center) * self.zoom * 0.0001,
                    (y - center) * self.zoom * 0.0001,
                )
                self.shift *= 0.99
                if self.zoom > 0.9:
                    self.zoom = 1.0
                    self.shift = 0j
        self.render()

    def animated_zoom_in(self):
        """One step of the zoom-in animation."""
        self.flags.zooming_in = False
        if self.zoom > self.zoom * 0.5:
            self.flags.zooming_in = True
            self.zoom *= 1 - self.speed_factor
            self.render()

    def animated_zoom(self, button, x, y):
        """Start or stop a zoom animation on Ctrl+click."""
        ctrl_only = (
            self.flags.combo_ctrl
            and not self.flags.combo_alt
            and not self.flags.combo_shift
        )
        if not ctrl_only:
            return
        if button == Button.RIGHT:
            self.start_zoom_out(x, y)
        elif button == Button.LEFT:
            if not self.flags.zooming_in:
                self.flags.zooming_out = False
                self.animated_zoom_in()
            else:
                self.flags.zooming_in = False

    def start_zoom_out(self, x, y):
        """Begin zooming out around (x, y), or stop if already zooming out."""
        if self.flags.zooming_out:
            self.flags.zooming_out = False
            return
        self.max_iterations_start = self.max_iterations
        self.flags.zooming_out_start = self.zoom
        self.flags.zooming_in = False
        self.zooming_out_coords = (x, y)
        self.animated_zoom_out(x, y)

    def track_mouse(self, x, y):
        """Record the plane point under the pointer at pixel (x, y)."""
        if self.fractal_number in _JULIA_VIEWS:
            zoom, shift = self.saved.zoom, self.saved.shift
        else:
            zoom, shift = self.zoom, self.shift
        self.mouse = complex(
            scale(x, -3, 3, self.size) * zoom + shift.real,
            scale(y, 3, -3, self.size) * zoom + shift.imag,
        )

    def wheel_set_origin(self):
        """Take the point under the pointer as the start of a journey."""
        self.origin = self.mouse
        self.flags.origin = True

    def wheel_set_arrival(self):
        """Take the point under the pointer as the end and start travelling."""
        self.arrival = self.mouse
        self.flags.origin = False
        self.distance = self.arrival - self.origin
        self.saved = SavedView(self.shift, self.zoom, self.fractal_number)
        if self.fractal_number <= 3:
            self.fractal_number += 3
        elif self.fractal_number == 7:
            self.fractal_number += 1
        self.shift = 0j
        self.zoom = 1.0
        self.travel()