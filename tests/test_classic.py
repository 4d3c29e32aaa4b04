import numpy as np
import pytest

from fractol.classic import MAX_I, MIN_I, ClassicView, main
from fractol.keys import Button, Key, QuitRequested
from fractol.render import RenderSettings, classic_image


def test_defaults():
    view = ClassicView()
    assert view.max_iterations == MIN_I
    assert view.zoom == 1.0
    assert view.shift == 0j
    assert view.escape_value == 4.0
    assert view.fractal_number == 1


def test_plus_and_minus_change_iterations():
    view = ClassicView()
    view.key_input(Key.PLUS)
    assert view.max_iterations == MIN_I + 1
    view.key_input(Key.MINUS)
    view.key_input(Key.MINUS)
    assert view.max_iterations == MIN_I - 1


def test_plus_stops_at_maximum():
    view = ClassicView(max_iterations=MAX_I)
    view.key_input(Key.PLUS)
    assert view.max_iterations == MAX_I


def test_minus_stops_at_one():
    view = ClassicView(max_iterations=1)
    view.key_input(Key.MINUS)
    assert view.max_iterations == 1


def test_escape_requests_quit():
    with pytest.raises(QuitRequested) as info:
        ClassicView().key_input(Key.ESC)
    assert info.value.status == 0


def test_other_key_changes_nothing():
    view = ClassicView()
    view.key_input(Key.SPACE)
    assert view == ClassicView()


def test_wheel_up_at_center_only_zooms():
    view = ClassicView()
    view.mouse_input(Button.WHEEL_UP, 400, 400)
    assert view.zoom == pytest.approx(0.9)
    assert view.shift == 0j


def test_wheel_down_at_center_only_zooms():
    view = ClassicView()
    view.mouse_input(Button.WHEEL_DOWN, 400, 400)
    assert view.zoom == pytest.approx(1.1)
    assert view.shift == 0j


def test_wheel_up_moves_towards_pointer():
    view = ClassicView()
    view.mouse_input(Button.WHEEL_UP, 500, 400)
    assert view.shift.real == pytest.approx(0.09)
    assert view.shift.imag == 0


def test_wheel_is_symmetric_around_center():
    right = ClassicView()
    left = ClassicView()
    right.mouse_input(Button.WHEEL_UP, 500, 400)
    left.mouse_input(Button.WHEEL_UP, 300, 400)
    assert right.shift.real == pytest.approx(-left.shift.real)
    assert right.shift.real > 0


def test_wheel_up_below_center_moves_down():
    view = ClassicView()
    view.mouse_input(Button.WHEEL_UP, 400, 500)
    assert view.shift.imag < 0
    assert view.shift.real == 0


def test_wheel_down_moves_away_from_pointer():
    view = ClassicView()
    view.mouse_input(Button.WHEEL_DOWN, 500, 400)
    assert view.shift.real < 0


def test_clicks_change_nothing():
    view = ClassicView()
    view.mouse_input(Button.LEFT, 100, 100)
    view.mouse_input(Button.RIGHT, 700, 700)
    assert view == ClassicView()


def test_image_matches_renderer():
    view = ClassicView(size=80, zoom=0.8, shift=complex(-0.5, 0.1))
    expected = classic_image(
        RenderSettings(max_iterations=MIN_I, zoom=0.8, shift=complex(-0.5, 0.1)), 80
    )
    assert np.array_equal(view.image(), expected)


def test_image_center_is_black():
    image = ClassicView(size=80).image()
    assert image.shape == (80, 80)
    assert image[40, 40] == 0


def test_main_rejects_unknown_set(capsys):
    assert main(["nope"]) == 1
    assert "Incorrect input !" in capsys.readouterr().out


def test_main_rejects_too_many_arguments(capsys):
    assert main(["julia", "1", "2", "3"]) == 1
    assert "./fractol julia <x> <y>" in capsys.readouterr().out