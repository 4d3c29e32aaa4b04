import cmath

import numpy as np
import pytest

from fractol.maths import burning_ship, multibrot, scale, step, tricorn


def test_scale_endpoints():
    assert scale(0, -3, 3, 800) == -3
    assert scale(800, -3, 3, 800) == 3
    assert scale(400, -3, 3, 800) == 0


def test_scale_reversed_range():
    assert scale(0, 3, -3, 800) == 3
    assert scale(800, 3, -3, 800) == -3


@pytest.mark.parametrize("number", [1, 4])
def test_mandelbrot_step_from_zero_gives_c(number):
    c = complex(0.3, -0.4)
    assert step(number, 0j, c, 2.0) == c


@pytest.mark.parametrize("z", [1 + 1j, -0.5 + 2j, 3 - 1j])
def test_mandelbrot_step_squares(z):
    assert step(1, z, 0j, 2.0) == pytest.approx(z * z)


@pytest.mark.parametrize("z", [1 + 1j, -0.5 + 2j, 3 - 1j])
def test_tricorn_squares_conjugate(z):
    assert tricorn(z, 0j) == pytest.approx(z.conjugate() ** 2)
    assert step(3, z, 0j, 2.0) == step(6, z, 0j, 2.0)


@pytest.mark.parametrize("z", [-1 - 1j, 1 - 1j, -1 + 1j, 1 + 1j])
def test_burning_ship_ignores_signs(z):
    assert burning_ship(z, 0j) == burning_ship(1 + 1j, 0j)
    assert step(2, z, 0j, 2.0) == burning_ship(z, 0j)


def test_burning_ship_adds_c():
    c = complex(0.1, 0.2)
    assert burning_ship(-2 + 0j, c) == pytest.approx(4 + c)


@pytest.mark.parametrize("angle", [0.0, 0.5, 1.0, 2.5, -1.2])
def test_multibrot_power_two_on_unit_circle_is_square(angle):
    z = cmath.exp(1j * angle)
    assert multibrot(z, 0j, 2.0) == pytest.approx(z * z)
    assert step(7, z, 0j, 2.0) == pytest.approx(z * z)


def test_multibrot_from_zero_gives_c():
    c = complex(-0.2, 0.7)
    assert multibrot(0j, c, 3.0) == pytest.approx(c)


def test_unknown_set_leaves_z():
    assert step(9, 1 + 2j, 5j, 2.0) == 1 + 2j


@pytest.mark.parametrize("number", [1, 2, 3, 7])
def test_arrays_match_scalars(number):
    zs = np.array([0.5 + 0.5j, -1 + 0.25j, 0.1 - 0.9j])
    c = complex(-0.4, 0.6)
    result = step(number, zs, c, 3.0)
    expected = [step(number, complex(z), c, 3.0) for z in zs]
    assert np.allclose(result, expected)


def test_array_c_broadcasts():
    cs = np.array([0j, 1 + 0j])
    result = step(1, 0j, cs, 2.0)
    assert np.allclose(result, cs)