"""Mouse handling for the explorer."""

from .explorer_state import MAX_I, MIN_I, SavedView
from .keys import Button


def _only(flags, shift=False, ctrl=False, alt=False):
    return (
        flags.combo_shift == shift
        and flags.combo_ctrl == ctrl
        and flags.combo_alt == alt
    )


def _wheel_combo_up(explorer):
    flags = explorer.flags
    if _only(flags, shift=True) and explorer.max_iterations < MAX_I:
        explorer.max_iterations += 1
    elif _only(flags, alt=True) and explorer.speed_factor < 0.1:
        explorer.speed_factor *= 1.2
    elif _only(flags, ctrl=True) and explorer.tc < 1:
        explorer.tc *= 1.1


def _wheel_combo_down(explorer):
    flags = explorer.flags
    if _only(flags, shift=True) and explorer.max_iterations > 10:
        explorer.max_iterations -= 1
    elif _only(flags, alt=True) and explorer.speed_factor > 0.001:
        explorer.speed_factor *= 0.8
    elif _only(flags, ctrl=True) and explorer.tc > 0.00001:
        explorer.tc *= 0.9


def wheel_combo(explorer, button):
    """With a modifier held, the wheel tunes iterations, zoom speed or travel speed."""
    if button == Button.WHEEL_UP:
        _wheel_combo_up(explorer)
    elif button == Button.WHEEL_DOWN:
        _wheel_combo_down(explorer)


def wheel_zoom(explorer, button, x, y):
    """Without modifiers, the wheel zooms towards or away from the pointer."""
    if not _only(explorer.flags):
        return
    center = explorer.size >> 1
    if button == Button.WHEEL_DOWN:
        explorer.zoom *= 1.1
        explorer.shift += complex(
            -(x - center) * explorer.zoom * 0.001,
            (y - center) * explorer.zoom * 0.001,
        )
    elif button == Button.WHEEL_UP:
        explorer.zoom *= 0.9
        explorer.shift += complex(
            (x - center) * explorer.zoom * 0.001,
            -(y - center) * explorer.zoom * 0.001,
        )


def wheel(explorer, button, x, y):
    """Handle wheel turns and wheel clicks."""
    wheel_combo(explorer, button)
    wheel_zoom(explorer, button, x, y)
    if button != Button.WHEEL_CLICK:
        return
    flags = explorer.flags
    if _only(flags):
        explorer.zoom = 1.0
        explorer.shift = 0j
        flags.zooming_in = False
        flags.zooming_out = False
        explorer.max_iterations = MIN_I
    elif _only(flags, shift=True):
        if flags.origin:
            explorer.wheel_set_arrival()
        else:
            explorer.wheel_set_origin()
    elif _only(flags, ctrl=True):
        explorer.max_iterations = MIN_I


def _previous_palette(explorer):
    if explorer.palette_index == 0:
        explorer.palette_index = 2
    elif explorer.palette_index > 0:
        explorer.palette_index -= 1


def _next_palette(explorer):
    if explorer.palette_index == 2:
        explorer.palette_index = 0
    elif explorer.palette_index < 2:
        explorer.palette_index += 1


def switch_palette(explorer, button):
    """With Alt held, left and right clicks step through the palettes."""
    if not explorer.flags.combo_alt:
        return
    if button == Button.LEFT:
        _previous_palette(explorer)
    elif button == Button.RIGHT:
        _next_palette(explorer)


def clicks_combo(explorer, button):
    """Shift+left click opens the Julia set of the point under the pointer."""
    if button == Button.LEFT and _only(explorer.flags, shift=True):
        number = explorer.fractal_number
        if number < 4 or number == 7:
            explorer.saved = SavedView(explorer.shift, explorer.zoom, number)
            explorer.shift = 0j
            explorer.zoom = 1.0
            if number == 7:
                explorer.fractal_number = 8
            elif 0 < number < 4:
                explorer.fractal_number = number + 3
        explorer.julia_constant = explorer.mouse
    switch_palette(explorer, button)


def clicks(explorer, button, x, y):
    """Plain clicks zoom in (left) or out (right) around the pointer."""
    clicks_combo(explorer, button)
    if not _only(explorer.flags):
        return
    center = explorer.size >> 1
    if button == Button.RIGHT:
        explorer.zoom *= 1.2
        explorer.shift += complex(
            -(x - center) * explorer.zoom * 0.01,
            (y - center) * explorer.zoom * 0.01,
        )
    elif button == Button.LEFT:
        explorer.zoom *= 0.8
        explorer.shift += complex(
            (x - center) * explorer.zoom * 0.01,
            -(y - center) * explorer.zoom * 0.01,
        )


def mouse_press(explorer, button, x, y):
    """Handle a mouse button press at pixel (x, y), then redraw."""
    wheel(explorer, button, x, y)
    clicks(explorer, button, x, y)
    explorer.animated_zoom(button, x, y)
    explorer.render()