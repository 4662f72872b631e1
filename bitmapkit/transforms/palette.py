from __future__ import annotations

from ..raster import BLACK, BLUE, GREEN, RED, WHITE, Pixel, Raster
from .base import map_pixels

CONTRAST_THRESHOLD = 255 // 2
BRIGHT_TOTAL = 550
DARK_TOTAL = 150


def high_contrast(raster: Raster) -> Raster:
    """Map each pixel to black or white by its integer-averaged brightness."""

    def rule(pixel: Pixel) -> Pixel:
        if pixel.total // 3 >= CONTRAST_THRESHOLD:
            return WHITE
        return BLACK

    return map_pixels(raster, rule)


def posterize(raster: Raster) -> Raster:
    """Reduce each pixel to black, white, red, green or blue.

    Very bright pixels become white and very dark ones black. The rest take
    their dominant channel, with red winning ties over green and green over
    blue.
    """

    def rule(pixel: Pixel) -> Pixel:
        total = pixel.total
        if total >= BRIGHT_TOTAL:
            return WHITE
        if total <= DARK_TOTAL:
            return BLACK
        dominant = max(pixel.red, pixel.green, pixel.blue)
        if dominant == pixel.red:
            return RED
        if dominant == pixel.green:
            return GREEN
        return BLUE

    return map_pixels(raster, rule)
