"""Colour palettes and the mapping from escape counts to colours."""

import math

PALETTE_SIZE = 20

_RED = (
    0x000000, 0x330000, 0x663300, 0x993300, 0xCC3300,
    0xFF3300, 0xFF6633, 0xFF9966, 0xFFCC99, 0xFFCC66,
    0xFFD966, 0xFFE0B3, 0xFFE6B3, 0xFFB366, 0xFF9966,
    0xFF4C00, 0xCC6600, 0x993300, 0xFF3300, 0xFFFFFF,
)

_GREEN = (
    0x000000, 0x003300, 0x336600, 0x669900, 0x99CC00,
    0xCCFF00, 0x99FF33, 0xCCFF66, 0xFFFF99, 0xFFFF66,
    0xFFFF33, 0xFFCC00, 0xFF9900, 0xFF6600, 0xFF3300,
    0xFFFF00, 0xFFFF33, 0xCCFF00, 0x99CC00, 0xFFFFFF,
)

_BLUE = (
    0x000000, 0x000033, 0x000066, 0x000099, 0x0000CC,
    0x0000FF, 0x4C4CFF, 0x8080FF, 0xA6A6FF, 0xB3B3FF,
    0xCCCCFF, 0xD1A6FF, 0xE0A6FF, 0xF2A6FF, 0xF2B3FF,
    0xF2CCE6, 0xF2E0FF, 0xE6E6FF, 0x000099, 0xFFFFFF,
)

PALETTES = (_RED, _GREEN, _BLUE)


def palette_colors(index):
    """Return the 20 colours of palette 0 (red), 1 (green) or 2 (blue)."""
    if not 0 <= index < len(PALETTES):
        raise ValueError(f"no palette {index}")
    return PALETTES[index]


def _channel(value):
    return int(value) & 0xFF


def iterations_to_color(iteration, max_iterations):
    """Colour for a point that escaped after the given iteration, as 0xRRGGBB."""
    t = iteration / max_iterations
    red = _channel(9 * (1 - t) * t * t * t * t * 255)
    green = _channel(15 * (1 - t) * (1 - t) * t * t * 255)
    blue = _channel(8.5 * (1 - t) * (1 - t) * (1 - t) * t * 255)
    return (red << 16) | (green << 8) | blue


def smooth_color(iteration, mu, max_iterations, palette):
    """Pick a palette entry from a smoothed escape count; 0 without a palette."""
    if palette is None:
        return 0
    t = (iteration + mu) / max_iterations
    if math.isnan(t) or t < 0:
        t = 0.0
    if t > 1:
        t = 1.0
    index = int(t * PALETTE_SIZE) % PALETTE_SIZE
    return palette[index]