from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple


@dataclass(frozen=True)
class Pixel:
    """RGB triple. Channels are 8-bit on disk but may leave [0, 255] after a transform."""

    red: int
    green: int
    blue: int

    @property
    def total(self) -> int:
        return self.red + self.green + self.blue


BLACK = Pixel(0, 0, 0)
WHITE = Pixel(255, 255, 255)
RED = Pixel(255, 0, 0)
GREEN = Pixel(0, 255, 0)
BLUE = Pixel(0, 0, 255)

Row = Tuple[Pixel, ...]


@dataclass(frozen=True)
class Raster:
    """Row-major pixel grid, top row first."""

    rows: Tuple[Row, ...] = ()

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Pixel]]) -> "Raster":
        """Build a raster from any nested iterable of pixels."""
        raster = cls(tuple(tuple(row) for row in rows))
        raster.validate()
        return raster

    @classmethod
    def new(cls, width: int, height: int, fill: Pixel = BLACK) -> "Raster":
        row = (fill,) * width
        return cls(tuple(row for _ in range(height)))

    @classmethod
    def empty(cls) -> "Raster":
        """Return the marker used when a bitmap could not be decoded."""
        return cls(())

    def validate(self) -> None:
        """Check that every row has the same width."""
        if not self.rows:
            return
        width = len(self.rows[0])
        for index, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(f"Row {index} has {len(row)} pixels, expected {width}")

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        if not self.rows:
            return 0
        return len(self.rows[0])

    @property
    def is_empty(self) -> bool:
        return self.height == 0 or self.width == 0

    def pixel(self, row: int, col: int) -> Pixel:
        return self.rows[row][col]

    def __bool__(self) -> bool:
        return not self.is_empty
