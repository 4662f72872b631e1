from __future__ import annotations

import pytest

from bitmapkit.raster import Pixel, Raster


@pytest.fixture
def sample_raster() -> Raster:
    return Raster.from_rows(
        [
            [Pixel(10, 20, 30), Pixel(40, 50, 60)],
            [Pixel(70, 80, 90), Pixel(100, 110, 120)],
        ]
    )


@pytest.fixture
def gradient_raster() -> Raster:
    """5x3 raster where every pixel is distinct."""
    return Raster.from_rows(
        [[Pixel(row * 50 + col, col * 40, 255 - row * 20 - col) for col in range(5)] for row in range(3)]
    )
