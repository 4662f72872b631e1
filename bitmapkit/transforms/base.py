from __future__ import annotations

import math
from typing import Callable, Union

from ..raster import Pixel, Raster

PixelRule = Callable[[Pixel], Pixel]


def map_pixels(raster: Raster, rule: PixelRule) -> Raster:
    """Apply ``rule`` to every pixel and return a new raster of the same size."""
    return Raster(tuple(tuple(rule(pixel) for pixel in row) for row in raster.rows))


def scale_channels(pixel: Pixel, factor: float) -> Pixel:
    """Multiply every channel by ``factor``, truncating toward zero."""
    return Pixel(int(pixel.red * factor), int(pixel.green * factor), int(pixel.blue * factor))


def lift_channels(pixel: Pixel, factor: float) -> Pixel:
    """Scale every channel's distance from white by ``factor``, truncating toward zero."""
    return Pixel(
        int(255 - (255 - pixel.red) * factor),
        int(255 - (255 - pixel.green) * factor),
        int(255 - (255 - pixel.blue) * factor),
    )


def clamp(value: Union[int, float], low: int = 0, high: int = 255) -> Union[int, float]:
    return max(low, min(high, value))


def saturate(value: float) -> int:
    """Clamp to [0, 255] before truncating, so infinite products saturate. NaN maps to 0."""
    if math.isnan(value):
        return 0
    return int(clamp(value))
