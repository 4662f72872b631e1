from __future__ import annotations

import logging

from ..raster import Raster

logger = logging.getLogger(__name__)

RIGHT_ANGLE = 90


def rotate_90(raster: Raster) -> Raster:
    """Rotate clockwise by a quarter turn; width and height swap."""
    height = raster.height
    # Output row c is input column c read from the bottom row up
    return Raster(
        tuple(
            tuple(raster.rows[height - 1 - out_col][out_row] for out_col in range(height))
            for out_row in range(raster.width)
        )
    )


def rotate(raster: Raster, turns: int) -> Raster:
    """Rotate clockwise by ``turns`` quarter turns.

    Negative counts wrap around modulo a full turn. The shell rejects them
    before calling this function.
    The result is always a new raster, even for whole turns.
    """
    angle = turns * RIGHT_ANGLE
    if angle % RIGHT_ANGLE != 0:
        # Only reachable for non-integral turn counts
        logger.warning("Angle %s is not a multiple of %d degrees; image left unchanged", angle, RIGHT_ANGLE)
        return Raster(raster.rows)
    out = Raster(raster.rows)
    for _ in range(int(angle % 360) // RIGHT_ANGLE):
        out = rotate_90(out)
    return out


def enlarge(raster: Raster, x_scale: int, y_scale: int) -> Raster:
    """Nearest-neighbour upscale by integer factors along each axis."""
    new_height = raster.height * y_scale
    new_width = raster.width * x_scale
    return Raster(
        tuple(
            tuple(raster.rows[row // y_scale][col // x_scale] for col in range(new_width))
            for row in range(new_height)
        )
    )
