"""Tests for ASCII and image rendering."""

import numpy as np

from levelgen.geometry import Point
from levelgen.grid import TileGrid
from levelgen.render import TILE_COLORS, render_ascii, render_image
from levelgen.tiles import ASCII_TO_TILE, TILE_TO_ASCII, TileKind


def sample_grid() -> TileGrid:
    grid = TileGrid(4, 3)
    grid.set(1, 1, TileKind.FLOOR)
    grid.set(2, 1, TileKind.WATER)
    grid.set(1, 2, TileKind.GRASS)
    grid.set(2, 2, TileKind.PILLAR)
    return grid


class TestAsciiRendering:
    def test_glyphs(self):
        assert render_ascii(sample_grid()) == "\n".join(["####", '#.~#', '#"O#'])

    def test_marks_override_tiles(self):
        text = render_ascii(sample_grid(), marks={Point(1, 1): "@"})
        assert text.splitlines()[1] == "#@~#"

    def test_every_tile_has_a_glyph(self):
        for tile in TileKind:
            assert ASCII_TO_TILE[TILE_TO_ASCII[tile]] == tile


class TestImageRendering:
    def test_image_shape(self):
        image = render_image(sample_grid(), tile_size=5)
        assert image.shape == (15, 20, 3)
        assert image.dtype == np.uint8

    def test_tile_colors(self):
        image = render_image(sample_grid(), tile_size=4)
        assert tuple(image[0, 0]) == TILE_COLORS[TileKind.WALL]
        # Middle of tile (2, 1)
        assert tuple(image[6, 10]) == TILE_COLORS[TileKind.WATER]
        assert tuple(image[10, 6]) == TILE_COLORS[TileKind.GRASS]

    def test_grid_overlay_keeps_shape(self):
        image = render_image(sample_grid(), tile_size=4, show_grid=True)
        assert image.shape == (12, 16, 3)
        assert tuple(image[0, 0]) == (64, 64, 64)

    def test_marks_draw_a_dot(self):
        image = render_image(sample_grid(), tile_size=9, marks={Point(1, 1): (0, 255, 0)})
        assert tuple(image[13, 13]) == (0, 255, 0)
