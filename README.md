# fractol

An interactive fractal viewer. It draws the Mandelbrot set and its relatives
in an 800×800 window (through pygame, with the pixels computed by numpy) and
lets you zoom, pan and explore them with the mouse and keyboard.

Two commands are installed:

- `fractol`: a simple viewer for the Mandelbrot and Julia sets.
- `fractol-explorer`: a richer viewer with more sets, colour palettes,
  animated zooms and smooth travel between Julia sets.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## `fractol`

```
fractol
fractol mandelbrot
fractol julia
fractol julia <x> <y>
```

With no argument the Mandelbrot set is shown. `julia` without coordinates
uses the constant `-0.8 + 0.156i`. Coordinates must be plain decimal numbers
such as `-0.4` or `0.6`: only digits, signs and at most one dot, which must
sit between two digits. Together the two numbers may hold at most 15 digits.
Any other input prints a usage box and exits with status 1.

The view starts at 50 iterations.

| Input              | Effect                              |
|--------------------|-------------------------------------|
| Mouse wheel up     | Zoom in towards the pointer         |
| Mouse wheel down   | Zoom out away from the pointer      |
| Keypad `+`         | One more iteration (up to 200)      |
| Keypad `-`         | One fewer iteration (down to 1)     |
| `Esc` / close      | Quit                                |

Keys act when they are released.

## `fractol-explorer`

```
fractol-explorer
fractol-explorer <set_name>
fractol-explorer <julia_set> [<x> <y>]
```

| Name            | Set shown                                   |
|-----------------|---------------------------------------------|
| `mandelbrot`    | Mandelbrot (also the default)               |
| `burning_ship`  | Burning Ship                                |
| `multibrot`     | Multibrot of power 3                        |
| `tricorn`       | Julia set of the Mandelbrot iteration (same as `julia_mandel`); the Tricorn itself is on key `3` |
| `julia_mandel`  | Julia set of the Mandelbrot iteration       |
| `julia_ship`    | Julia set of the Burning Ship               |
| `julia_tricorn` | Julia set of the Tricorn                    |
| `julia_multi`   | Julia set of the cubic Multibrot            |

A Julia set takes an optional constant `<x> <y>`; without one it uses `0 + 0i`.
Each coordinate may hold at most 15 digits. Bad input prints a usage box and
exits with status 1.

The image is built up progressively: the iteration count starts at 1 and grows
by two per frame until it reaches 40. The same happens after switching set
with the digit keys or the multibrot power keys.

### Keyboard

| Key                        | Effect                                                        |
|----------------------------|---------------------------------------------------------------|
| Arrows                     | Pan                                                           |
| `Shift` + Up / Down        | Zoom out / in                                                 |
| `1` … `6`                  | Mandelbrot, Burning Ship, Tricorn and their three Julia sets  |
| `7`                        | Julia set of the cubic Multibrot                              |
| `=`                        | From Mandelbrot or Multibrot, raise the power (`Shift`: by 0.1) |
| `-`                        | In the Multibrot, lower the power (`Shift`: by 0.1)           |
| Keypad `+` / `-`           | Adjust the pending iteration count (starts at 20)             |
| Keypad `Enter`             | Apply it (`Shift` + `Enter`: reset both to 20)                |
| Keypad `8` / `2`           | Move the Julia constant right / left                          |
| Keypad `4` / `6`           | Move the Julia constant up / down                             |
| `A`                        | Mark the Julia constant as origin, then as arrival, of a journey (`Shift` + `A` cancels the origin) |
| `Space`                    | Pause / resume the journey                                    |
| `Ctrl` + keypad `+` / `-`  | Double / halve the journey speed                              |
| `Backspace`                | Swap the view with the saved one                              |
| `E`                        | Toggle palette colouring                                      |
| `R` / `G` / `B`            | With palette colouring on, pick the red, green or blue palette |
| `P`                        | Toggle keeping the previous frame's colours where points do not escape |
| `Esc` / close              | Quit                                                          |

Pressing `Shift`, `Ctrl` or `Alt` turns the modifier on (pressing it again turns
it off); releasing it turns it off.

A journey moves the Julia constant back and forth between origin and arrival,
one step per frame. Marking the arrival from a non-Julia set saves the current
view and opens the matching Julia set.

### Mouse

| Input                       | Effect                                               |
|-----------------------------|------------------------------------------------------|
| Wheel                       | Zoom in (up) / out (down) around the pointer         |
| Left / right click          | Stronger zoom in / out around the pointer            |
| Middle click                | Reset the view, stop zoom animations, 20 iterations  |
| `Shift` + left click        | Open the Julia set for the point under the pointer   |
| `Shift` + middle click      | Mark origin, then arrival, of a journey at the pointer |
| `Ctrl` + left click         | Start or stop an animated zoom in                    |
| `Ctrl` + right click        | Start or stop an animated zoom out back to the home view |
| `Ctrl` + middle click       | Reset the iteration count to 20                      |
| `Alt` + left / right click  | Previous / next palette                              |
| `Shift` + wheel             | One more (up, to 300) / fewer (down, to 10) iteration |
| `Alt` + wheel               | Faster / slower animated zoom                        |
| `Ctrl` + wheel              | Faster / slower journey                              |

## Using it from Python

The window-free parts can be used directly:

- `fractol.parsing`: `parse_classic_args` and `parse_explorer_args` turn an
  argument list into a `Selection` or raise `InputError`.
- `fractol.render`: `classic_image(settings, size)` and
  `explorer_image(settings, previous, size)` return a `(size, size)` numpy
  array of `0xRRGGBB` colours, indexed `[y, x]`, from a `RenderSettings`.
- `fractol.classic.ClassicView` and `fractol.explorer_state.Explorer` hold a
  viewer's state; `fractol.explorer_keys.key_press` and
  `fractol.explorer_mouse.mouse_press` apply input to an `Explorer`.
- `fractol.maths` and `fractol.palette` hold the iteration steps and colouring.

```python
from fractol.render import RenderSettings, classic_image

image = classic_image(RenderSettings(fractal_number=1, max_iterations=50), size=200)
```