"""Pixel rendering for the classic viewer and the explorer."""

import math
from dataclasses import dataclass

import numpy as np

from .maths import scale, step
from .palette import PALETTE_SIZE, iterations_to_color

WINSIZE = 800
BLACK = 0x000000

_PARAMETER_PLANE_SETS = (1, 2, 7, 9)
_JULIA_SETS = (4, 5, 6, 8)


@dataclass
class RenderSettings:
    """Everything a frame depends on.

    ``shift`` holds the horizontal offset in its real part and the vertical
    offset in its imaginary part. With ``keep_interior`` set, points that never
    escape keep the colour they had in the previous frame.
    """

    fractal_number: int = 1
    zoom: float = 1.0
    shift: complex = 0j
    julia_constant: complex = 0j
    max_iterations: float = 50
    escape_value: float = 4.0
    power: float = 2.0
    psychedelic: bool = False
    palette: tuple | None = None
    keep_interior: bool = False


def _iteration_count(max_iterations):
    if max_iterations <= 0:
        return 0
    return math.ceil(max_iterations)


def _complex_grid(real, imag):
    grid = np.empty(np.broadcast(real, imag).shape, dtype=complex)
    grid.real = real
    grid.imag = imag
    return grid


def _axes(size):
    coords = np.arange(size, dtype=float)
    return np.meshgrid(coords, coords)


def _escape(settings, z, c):
    """Return, per point, the iteration it escaped on (-1 if never) and its z then."""
    shape = z.shape
    count = _iteration_count(settings.max_iterations)
    current = z.ravel().copy()
    constants = np.broadcast_to(c, shape).ravel().copy()
    positions = np.arange(current.size)
    escaped_at = np.full(current.size, -1, dtype=np.int64)
    escaped_z = np.zeros(current.size, dtype=complex)
    with np.errstate(all="ignore"):
        for iteration in range(count):
            if positions.size == 0:
                break
            current = step(settings.fractal_number, current, constants, settings.power)
            real, imag = current.real, current.imag
            out = real * real + imag * imag > settings.escape_value
            if out.any():
                escaped_at[positions[out]] = iteration
                escaped_z[positions[out]] = current[out]
                keep = ~out
                positions = positions[keep]
                current = current[keep]
                constants = constants[keep]
    return escaped_at.reshape(shape), escaped_z.reshape(shape)


def _gradient_colors(escaped_at, max_iterations):
    count = _iteration_count(max_iterations)
    gradient = np.array(
        [iterations_to_color(i, max_iterations) for i in range(count)],
        dtype=np.uint32,
    )
    return gradient[escaped_at]


def _palette_colors(escaped_at, escaped_z, max_iterations, palette):
    if palette is None:
        return np.zeros(escaped_at.shape, dtype=np.uint32)
    colors = np.asarray(palette, dtype=np.uint32)
    limit = int(max_iterations)
    with np.errstate(all="ignore"):
        real, imag = escaped_z.real, escaped_z.imag
        norm = np.sqrt(real * real + imag * imag)
        mu = np.log(np.log(norm)) / np.log(2.0)
        t = (escaped_at + mu) / np.float64(limit)
        t = np.where(np.isnan(t) | (t < 0), 0.0, t)
        t = np.where(t > 1, 1.0, t)
        index = (t * PALETTE_SIZE).astype(np.int64) % PALETTE_SIZE
    return colors[index]


def classic_image(settings, size=WINSIZE):
    """Render the classic viewer's frame as a (size, size) array of 0xRRGGBB, indexed [y, x]."""
    xs, ys = _axes(size)
    plane = _complex_grid(
        scale(xs, -3, 3, size) * settings.zoom + settings.shift.real,
        scale(ys, -3, 3, size) * settings.zoom - settings.shift.imag,
    )
    if settings.fractal_number == 1:
        z = np.zeros(plane.shape, dtype=complex)
        c = plane
    elif settings.fractal_number == 2:
        z = plane
        c = np.full(plane.shape, settings.julia_constant, dtype=complex)
    else:
        z = np.zeros(plane.shape, dtype=complex)
        c = np.zeros(plane.shape, dtype=complex)
    escaped_at, _ = _escape(settings, z, c)
    image = np.full(plane.shape, BLACK, dtype=np.uint32)
    mask = escaped_at >= 0
    image[mask] = _gradient_colors(escaped_at[mask], settings.max_iterations)
    return image


def _explorer_start(settings, size):
    xs, ys = _axes(size)
    left = scale(xs, -3, 3, size) * settings.zoom + settings.shift.real
    down = scale(ys, -3, 3, size) * settings.zoom - settings.shift.imag
    up = scale(ys, 3, -3, size) * settings.zoom + settings.shift.imag
    zeros = np.zeros((size, size), dtype=complex)
    number = settings.fractal_number
    if number in _PARAMETER_PLANE_SETS:
        return zeros, _complex_grid(left, down)
    if number == 3:
        return zeros, _complex_grid(left, up)
    if number in _JULIA_SETS:
        constant = np.full((size, size), settings.julia_constant, dtype=complex)
        return _complex_grid(left, up), constant
    return zeros, zeros.copy()


def explorer_image(settings, previous=None, size=WINSIZE):
    """Render the explorer's frame as a (size, size) array of 0xRRGGBB, indexed [y, x].

    ``previous`` is the last frame; it only matters when ``keep_interior`` is set.
    """
    if settings.keep_interior and previous is not None:
        image = np.array(previous, dtype=np.uint32, copy=True)
        if image.shape != (size, size):
            raise ValueError(
                f"previous frame has shape {image.shape}, expected {(size, size)}"
            )
    else:
        image = np.full((size, size), BLACK, dtype=np.uint32)
    z, c = _explorer_start(settings, size)
    escaped_at, escaped_z = _escape(settings, z, c)
    mask = escaped_at >= 0
    if settings.psychedelic:
        colors = _palette_colors(
            escaped_at[mask], escaped_z[mask], settings.max_iterations, settings.palette
        )
    else:
        colors = _gradient_colors(escaped_at[mask], settings.max_iterations)
    image[mask] = colors
    return image