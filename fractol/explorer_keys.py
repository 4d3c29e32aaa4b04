"""Keyboard handling for the explorer."""

from .explorer_state import MIN_I, SavedView
from .keys import Key, QuitRequested

_NUDGE = 0.001


def arrows(explorer, key):
    """Pan with the arrow keys; with Shift held, Up and Down zoom instead."""
    step = 0.2 * explorer.zoom
    if key == Key.RIGHT:
        explorer.shift += complex(step, 0)
    elif key == Key.LEFT:
        explorer.shift -= complex(step, 0)
    elif key == Key.DOWN:
        if explorer.flags.combo_shift:
            explorer.zoom *= 0.7
        else:
            explorer.shift -= complex(0, step)
    elif key == Key.UP:
        if explorer.flags.combo_shift:
            explorer.zoom *= 1.3
        else:
            explorer.shift += complex(0, step)


def combo_keys(explorer, key):
    """Toggle the Shift, Alt and Ctrl modifiers on key press."""
    flags = explorer.flags
    if key == Key.SHIFT:
        flags.combo_shift = not flags.combo_shift
    if key == Key.ALT_L:
        flags.combo_alt = not flags.combo_alt
    if key == Key.CTRL_L:
        flags.combo_ctrl = not flags.combo_ctrl


def _numpad_enter(explorer, key):
    if key != Key.NUM_ENTER:
        return
    if explorer.flags.combo_shift:
        explorer.max_iterations = MIN_I
        explorer.switch_iterations = MIN_I
    else:
        explorer.max_iterations = explorer.switch_iterations


def numpad_operators(explorer, key):
    """Adjust the pending iteration count with + and -, apply it with Enter."""
    flags = explorer.flags
    plain = not flags.combo_shift and not flags.combo_ctrl
    if key == Key.PLUS and plain:
        explorer.switch_iterations += 1
    elif key == Key.MINUS and explorer.switch_iterations > 1 and plain:
        explorer.switch_iterations -= 1
    _numpad_enter(explorer, key)


def psyche_switch(explorer, key):
    """Toggle keeping the previous frame's interior on P."""
    if key == Key.P:
        explorer.flags.psyche_switch = not explorer.flags.psyche_switch


def fractal_switch(explorer, key):
    """Jump to set 1 to 6 with the digit keys; 7 opens the Julia Multibrot."""
    if not Key.DIGIT_1 <= key <= Key.DIGIT_7:
        return
    explorer.shift = 0j
    explorer.zoom = 1.0
    explorer.power = 2.0
    explorer.fractal_number = key - ord("0")
    if key == Key.DIGIT_7:
        explorer.fractal_number = 8
        explorer.power = 3.0
    explorer.max_iterations = 1
    explorer.flags.fractal_switch = True


def multibrot_power_switch(explorer, key):
    """Raise or lower the Multibrot power with = and -; Shift steps by a tenth."""
    fine = explorer.flags.combo_shift
    if key == Key.EQUAL and explorer.fractal_number in (1, 7):
        explorer.power += 0.1 if fine else 1
        explorer.fractal_number = 7
    elif key == Key.HYPHEN and explorer.fractal_number == 7:
        explorer.fractal_number = 1 if explorer.power == 3 else 7
        explorer.power -= 0.1 if fine else 1
    else:
        return
    explorer.max_iterations = 1
    explorer.flags.fractal_switch = True


def backspace_switch(explorer, key):
    """Swap the current view with the saved one on Backspace."""
    if key != Key.BACKSPACE:
        return
    previous = explorer.saved
    explorer.saved = SavedView(explorer.shift, explorer.zoom, explorer.fractal_number)
    explorer.fractal_number = int(previous.fractal_number)
    explorer.shift = previous.shift
    explorer.zoom = previous.zoom


def julia_moves(explorer, key):
    """Nudge the Julia constant with the keypad arrows."""
    nudge = explorer.saved.zoom * _NUDGE
    if key == Key.KP_UP:
        explorer.julia_constant += complex(nudge, 0)
    elif key == Key.KP_DOWN:
        explorer.julia_constant -= complex(nudge, 0)
    elif key == Key.KP_LEFT:
        explorer.julia_constant += complex(0, nudge)
    elif key == Key.KP_RIGHT:
        explorer.julia_constant -= complex(0, nudge)


def _set_origin(explorer):
    explorer.origin = explorer.julia_constant
    explorer.flags.origin = True


def _set_arrival(explorer):
    explorer.arrival = explorer.julia_constant
    explorer.flags.origin = False
    explorer.distance = explorer.arrival - explorer.origin
    explorer.saved = SavedView(explorer.shift, explorer.zoom, explorer.fractal_number)
    if explorer.fractal_number <= 3:
        explorer.fractal_number += 3
    elif explorer.fractal_number == 7:
        explorer.fractal_number += 1
    explorer.travel()


def julia_constant_selector(explorer, key):
    """On A, mark the current constant as origin, then as arrival; Shift+A cancels."""
    if key != Key.A:
        return
    if explorer.flags.combo_shift:
        explorer.flags.origin = False
    elif not explorer.flags.origin:
        _set_origin(explorer)
    else:
        _set_arrival(explorer)


def animation_speed_keys(explorer, key):
    """Double or halve the travel speed with Ctrl and + or -."""
    if not explorer.flags.combo_ctrl:
        return
    if key == Key.PLUS:
        explorer.tc *= 2
    if key == Key.MINUS:
        explorer.tc /= 2


def space_pause(explorer, key):
    """Pause or resume travelling on Space."""
    if key == Key.SPACE:
        explorer.flags.traveling = not explorer.flags.traveling


def _switch_red(explorer):
    if explorer.flags.psychedelic_colors:
        explorer.palette_index = 0
    else:
        explorer.flags.red_toggle = not explorer.flags.red_toggle


def _switch_green(explorer):
    if explorer.flags.psychedelic_colors:
        explorer.palette_index = 1
    else:
        explorer.flags.blue_toggle = not explorer.flags.blue_toggle


def _switch_blue(explorer):
    if explorer.flags.psychedelic_colors:
        explorer.palette_index = 2
    else:
        explorer.flags.green_toggle = not explorer.flags.green_toggle


def color_shift(explorer, key):
    """Pick a palette with R, G or B; toggle palette colouring with E."""
    if key == Key.R:
        _switch_red(explorer)
    elif key == Key.B:
        _switch_blue(explorer)
    elif key == Key.G:
        _switch_green(explorer)
    elif key == Key.E:
        explorer.flags.psychedelic_colors = not explorer.flags.psychedelic_colors


def key_press(explorer, key):
    """Handle a key press, then redraw; Escape raises QuitRequested."""
    if key in (Key.WIN_CLOSE, Key.ESC):
        raise QuitRequested(0)
    for handler in (
        combo_keys,
        arrows,
        numpad_operators,
        psyche_switch,
        fractal_switch,
        color_shift,
        multibrot_power_switch,
        backspace_switch,
        julia_moves,
        julia_constant_selector,
        animation_speed_keys,
        space_pause,
    ):
        handler(explorer, key)
    if explorer.flags.fractal_switch:
        explorer.first_render()
    else:
        explorer.render()


def key_release(explorer, key):
    """Release a modifier when its key goes up."""
    if key == Key.SHIFT:
        explorer.flags.combo_shift = False
    elif key == Key.CTRL_L:
        explorer.flags.combo_ctrl = False
    elif key == Key.ALT_L:
        explorer.flags.combo_alt = False