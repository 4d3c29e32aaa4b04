"""Complex iteration steps for each set; work on complex scalars or numpy arrays."""

import numpy as np


def scale(value, new_min, new_max, old_max):
    """Map value from [0, old_max] onto [new_min, new_max]."""
    return (new_max - new_min) * value / old_max + new_min


def _pack(real, imag):
    if isinstance(real, np.ndarray) or isinstance(imag, np.ndarray):
        out = np.empty(np.broadcast(real, imag).shape, dtype=complex)
        out.real = real
        out.imag = imag
        return out
    return complex(real, imag)


def _mandelbrot(z, c):
    x, y = z.real, z.imag
    return _pack(x * x - y * y + c.real, 2 * x * y + c.imag)


def burning_ship(z, c):
    """One Burning Ship step: fold z into the first quadrant, square, add c."""
    x, y = abs(z.real), abs(z.imag)
    return _pack(x * x - y * y + c.real, 2 * x * y + c.imag)


def tricorn(z, c):
    """One Tricorn step: square the conjugate of z, add c."""
    x, y = z.real, z.imag
    return _pack(x * x - y * y + c.real, -2 * x * y + c.imag)


def multibrot(z, c, power):
    """One Multibrot step of the given power, in polar form."""
    x, y = z.real, z.imag
    with np.errstate(all="ignore"):
        magnitude = np.power(x * x + y * y, (power - 1) / 2.0)
        angle = power * np.arctan2(y, x)
        return _pack(
            magnitude * np.cos(angle) + c.real,
            magnitude * np.sin(angle) + c.imag,
        )


def step(fractal_number, z, c, power):
    """Advance z by one iteration of the given set; unknown sets leave z unchanged."""
    if fractal_number in (1, 4):
        return _mandelbrot(z, c)
    if fractal_number in (2, 5):
        return burning_ship(z, c)
    if fractal_number in (3, 6):
        return tricorn(z, c)
    if fractal_number in (7, 8):
        return multibrot(z, c, power)
    return z