"""Key and mouse button codes used by the viewers, and translation from pygame."""

import os
from enum import IntEnum

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402


class Key(IntEnum):
    """Keyboard codes, expressed as X11 keysyms."""

    ESC = 65307
    PLUS = 65451
    MINUS = 65453
    LEFT = 65361
    RIGHT = 65363
    UP = 65362
    DOWN = 65364
    ENTER = 65293
    NUM_ENTER = 65421
    BACKSPACE = 65288
    CTRL_L = 65507
    ALT_L = 65513
    SHIFT = 65505
    KP_LEFT = 65430
    KP_UP = 65431
    KP_RIGHT = 65432
    KP_DOWN = 65433
    SWITCH1 = 109
    SWITCH2 = 106
    SWITCH3 = 98
    SWITCH4 = 116
    R = 114
    G = 103
    B = 98
    E = 101
    P = 112
    D = 100
    A = 97
    SPACE = 32
    EQUAL = 61
    HYPHEN = 45
    DIGIT_1 = 49
    DIGIT_7 = 55
    WIN_CLOSE = 17


class Button(IntEnum):
    """Mouse buttons."""

    LEFT = 1
    WHEEL_CLICK = 2
    RIGHT = 3
    WHEEL_UP = 4
    WHEEL_DOWN = 5


class QuitRequested(Exception):
    """Raised when the viewer should close; carries the exit status."""

    def __init__(self, status=0):
        super().__init__(status)
        self.status = status


_SPECIAL_KEYS = {
    pygame.K_ESCAPE: Key.ESC,
    pygame.K_KP_PLUS: Key.PLUS,
    pygame.K_KP_MINUS: Key.MINUS,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.NUM_ENTER,
    pygame.K_BACKSPACE: Key.BACKSPACE,
    pygame.K_LCTRL: Key.CTRL_L,
    pygame.K_LALT: Key.ALT_L,
    pygame.K_LSHIFT: Key.SHIFT,
    pygame.K_KP4: Key.KP_LEFT,
    pygame.K_KP8: Key.KP_UP,
    pygame.K_KP6: Key.KP_RIGHT,
    pygame.K_KP2: Key.KP_DOWN,
}


def translate_key(pygame_key):
    """Return the keysym for a pygame key code, or None if it has no meaning here."""
    special = _SPECIAL_KEYS.get(pygame_key)
    if special is not None:
        return int(special)
    if 32 <= pygame_key < 127:
        return pygame_key
    return None