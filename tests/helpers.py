from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from bitmapkit.raster import Pixel, Raster


def solid(width: int, height: int, pixel: Pixel) -> Raster:
    return Raster.new(width, height, pixel)


def bitmap_bytes(
    width: int, height: int, bits_per_pixel: int, rows: Iterable[bytes], file_size: Optional[int] = None
) -> bytes:
    """Assemble a bitmap by hand; ``rows`` are scanlines in storage order, already padded."""
    pixel_data = b"".join(rows)
    if file_size is None:
        file_size = 54 + len(pixel_data)
    header = bytearray(54)
    header[0:2] = b"BM"
    header[2:6] = file_size.to_bytes(4, "little")
    header[10:14] = (54).to_bytes(4, "little")
    header[14:18] = (40).to_bytes(4, "little")
    header[18:22] = width.to_bytes(4, "little", signed=True)
    header[22:26] = height.to_bytes(4, "little", signed=True)
    header[26:28] = (1).to_bytes(2, "little")
    header[28:30] = bits_per_pixel.to_bytes(2, "little")
    return bytes(header) + pixel_data


def scripted_input(answers: List[str]) -> Callable[[str], str]:
    """Return an input() replacement that raises EOFError once answers run out."""
    remaining = list(answers)

    def fake_input(prompt: str) -> str:
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return fake_input
