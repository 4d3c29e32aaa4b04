"""The two-set viewer: Mandelbrot or Julia, zoomed with the mouse wheel."""

import sys
from dataclasses import dataclass

import numpy as np

from .keys import Button, Key, QuitRequested, translate_key
from .parsing import InputError, parse_classic_args
from .render import WINSIZE, RenderSettings, classic_image

import pygame  # noqa: E402  (imported after keys, which quiets its banner)

MAX_I = 200
MIN_I = 50


@dataclass
class ClassicView:
    """State of the classic viewer."""

    fractal_number: int = 1
    julia_constant: complex = 0j
    escape_value: float = 4.0
    max_iterations: float = MIN_I
    shift: complex = 0j
    zoom: float = 1.0
    size: int = WINSIZE

    def mouse_input(self, button, x, y):
        """Zoom towards or away from the pointer on wheel turns."""
        center = self.size >> 1
        if button == Button.WHEEL_UP:
            self.zoom *= 0.9
            self.shift += complex(
                (x - center) * self.zoom * 0.001,
                -(y - center) * self.zoom * 0.001,
            )
        elif button == Button.WHEEL_DOWN:
            self.zoom *= 1.1
            self.shift += complex(
                -(x - center) * self.zoom * 0.001,
                (y - center) * self.zoom * 0.001,
            )

    def key_input(self, key):
        """Change the iteration count, or ask to quit on Escape."""
        if key == Key.ESC:
            raise QuitRequested(0)
        if key == Key.PLUS and self.max_iterations < MAX_I:
            self.max_iterations += 1
        elif key == Key.MINUS and self.max_iterations > 1:
            self.max_iterations -= 1

    def image(self):
        """Render the current view."""
        settings = RenderSettings(
            fractal_number=self.fractal_number,
            zoom=self.zoom,
            shift=self.shift,
            julia_constant=self.julia_constant,
            max_iterations=self.max_iterations,
            escape_value=self.escape_value,
        )
        return classic_image(settings, self.size)


def _show(screen, image):
    rgb = np.empty(image.shape[::-1] + (3,), dtype=np.uint8)
    transposed = image.T
    rgb[..., 0] = (transposed >> 16) & 0xFF
    rgb[..., 1] = (transposed >> 8) & 0xFF
    rgb[..., 2] = transposed & 0xFF
    screen.blit(pygame.surfarray.make_surface(rgb), (0, 0))
    pygame.display.flip()


def main(argv=None):
    """Run the classic viewer; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        selection = parse_classic_args(args)
    except InputError as error:
        print(error)
        return 1
    view = ClassicView(
        fractal_number=selection.fractal_number,
        julia_constant=selection.julia_constant,
    )
    pygame.init()
    try:
        screen = pygame.display.set_mode((view.size, view.size))
        pygame.display.set_caption("Fractol")
        _show(screen, view.image())
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYUP:
                key = translate_key(event.key)
                if key is not None:
                    view.key_input(key)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                view.mouse_input(event.button, *event.pos)
            else:
                continue
            _show(screen, view.image())
    except QuitRequested as request:
        return request.status
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())