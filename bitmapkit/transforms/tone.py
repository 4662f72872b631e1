"""Brightness and tone filters.

Only :func:`darken` clamps its output. It saturates for any factor, however large.
:func:`vignette`, :func:`clarendon` and :func:`lighten` can produce channel
values outside [0, 255]; the encoder keeps the low eight bits of such values.
Their factors must keep every product finite (see ``MAX_FACTOR`` in the
filter registry).
"""

from __future__ import annotations

import math

from ..raster import Pixel, Raster
from .base import lift_channels, map_pixels, saturate, scale_channels

HIGHLIGHT_THRESHOLD = 170
SHADOW_THRESHOLD = 90


def vignette(raster: Raster) -> Raster:
    """Darken pixels in proportion to their distance from the image centre."""
    height = raster.height
    center_row = height / 2.0
    center_col = raster.width / 2.0
    rows = []
    for row_index, row in enumerate(raster.rows):
        new_row = []
        for col_index, pixel in enumerate(row):
            distance = math.sqrt((col_index - center_col) ** 2 + (row_index - center_row) ** 2)
            factor = (height - distance) / height
            new_row.append(scale_channels(pixel, factor))
        rows.append(tuple(new_row))
    return Raster(tuple(rows))


def clarendon(raster: Raster, factor: float) -> Raster:
    """Push highlights toward white and shadows toward black; midtones are kept."""

    def rule(pixel: Pixel) -> Pixel:
        average = pixel.total / 3.0
        if average >= HIGHLIGHT_THRESHOLD:
            return lift_channels(pixel, factor)
        if average < SHADOW_THRESHOLD:
            return scale_channels(pixel, factor)
        return pixel

    return map_pixels(raster, rule)


def grayscale(raster: Raster) -> Raster:
    def rule(pixel: Pixel) -> Pixel:
        gray = int(pixel.total / 3.0)
        return Pixel(gray, gray, gray)

    return map_pixels(raster, rule)


def lighten(raster: Raster, factor: float) -> Raster:
    return map_pixels(raster, lambda pixel: lift_channels(pixel, factor))


def darken(raster: Raster, factor: float) -> Raster:
    def rule(pixel: Pixel) -> Pixel:
        return Pixel(
            saturate(pixel.red * factor),
            saturate(pixel.green * factor),
            saturate(pixel.blue * factor),
        )

    return map_pixels(raster, rule)
