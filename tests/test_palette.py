import pytest

from fractol.palette import (
    PALETTE_SIZE,
    PALETTES,
    iterations_to_color,
    palette_colors,
    smooth_color,
)


def test_palettes_have_twenty_colours():
    assert PALETTE_SIZE == 20
    assert all(len(palette_colors(i)) == PALETTE_SIZE for i in range(3))


def test_palette_entries_from_source():
    assert palette_colors(0)[0] == 0x000000
    assert palette_colors(0)[19] == 0xFFFFFF
    assert palette_colors(1)[5] == 0xCCFF00
    assert palette_colors(2)[5] == 0x0000FF
    assert palette_colors(0)[15] == 0xFF4C00


@pytest.mark.parametrize("index", [-1, 3])
def test_palette_bad_index(index):
    with pytest.raises(ValueError):
        palette_colors(index)


@pytest.mark.parametrize("max_iterations", [20, 50, 300])
def test_iterations_to_color_black_at_ends(max_iterations):
    assert iterations_to_color(0, max_iterations) == 0
    assert iterations_to_color(max_iterations, max_iterations) == 0


def test_iterations_to_color_within_24_bits():
    colors = [iterations_to_color(i, 50) for i in range(50)]
    assert all(0 <= c <= 0xFFFFFF for c in colors)
    assert any(c != 0 for c in colors)


def test_iterations_to_color_accepts_float_maximum():
    assert iterations_to_color(10, 50.0) == iterations_to_color(10, 50)


def test_smooth_color_start_and_end():
    palette = PALETTES[0]
    assert smooth_color(0, 0.0, 10, palette) == palette[0]
    assert smooth_color(10, 0.0, 10, palette) == palette[0]


def test_smooth_color_midpoint():
    palette = PALETTES[1]
    assert smooth_color(5, 0.0, 10, palette) == palette[10]


def test_smooth_color_clamps():
    palette = PALETTES[2]
    assert smooth_color(-5, 0.0, 10, palette) == palette[0]
    assert smooth_color(50, 0.0, 10, palette) == palette[0]


def test_smooth_color_nan_uses_first_entry():
    palette = PALETTES[0]
    assert smooth_color(3, float("nan"), 10, palette) == palette[0]


def test_smooth_color_without_palette():
    assert smooth_color(3, 0.5, 10, None) == 0


def test_smooth_color_always_from_palette():
    palette = PALETTES[2]
    for i in range(40):
        assert smooth_color(i, 0.3, 40, palette) in palette