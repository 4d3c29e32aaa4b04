"""The explorer window: event dispatch and the main loop."""

import sys

import numpy as np

from .explorer_keys import key_press, key_release
from .explorer_mouse import mouse_press
from .explorer_state import Explorer
from .keys import QuitRequested, translate_key
from .parsing import InputError, parse_explorer_args

import pygame  # noqa: E402  (imported after keys, which quiets its banner)

_FRAME_RATE = 60


def dispatch(explorer, event):
    """Apply one pygame event to the explorer; return True if it was handled.

    Closing the window raises QuitRequested.
    """
    if event.type == pygame.QUIT:
        raise QuitRequested(0)
    if event.type in (pygame.KEYDOWN, pygame.KEYUP):
        key = translate_key(event.key)
        if key is None:
            return False
        if event.type == pygame.KEYDOWN:
            key_press(explorer, key)
        else:
            key_release(explorer, key)
        return True
    if event.type == pygame.MOUSEBUTTONDOWN:
        mouse_press(explorer, event.button, *event.pos)
        return True
    if event.type == pygame.MOUSEMOTION:
        explorer.track_mouse(*event.pos)
        return True
    return False


def _show(screen, image):
    transposed = image.T
    rgb = np.empty(transposed.shape + (3,), dtype=np.uint8)
    rgb[..., 0] = (transposed >> 16) & 0xFF
    rgb[..., 1] = (transposed >> 8) & 0xFF
    rgb[..., 2] = transposed & 0xFF
    screen.blit(pygame.surfarray.make_surface(rgb), (0, 0))
    pygame.display.flip()


def main(argv=None):
    """Run the explorer; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        selection = parse_explorer_args(args)
    except InputError as error:
        print(error)
        return 1
    explorer = Explorer.from_selection(selection)
    pygame.init()
    try:
        screen = pygame.display.set_mode((explorer.size, explorer.size))
        pygame.display.set_caption("Fractol")
        clock = pygame.time.Clock()
        shown = None
        while True:
            for event in pygame.event.get():
                dispatch(explorer, event)
            explorer.update_animations()
            if explorer.frame is not None and explorer.frame is not shown:
                _show(screen, explorer.frame)
                shown = explorer.frame
            clock.tick(_FRAME_RATE)
    except QuitRequested as request:
        return request.status
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())