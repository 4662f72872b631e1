from __future__ import annotations

import logging
import os
from typing import List, Union

from ..errors import DecodeError
from ..raster import Pixel, Raster, Row
from .header import BitmapHeader, OUTPUT_BITS_PER_PIXEL

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def decode(data: bytes) -> Raster:
    """Decode an uncompressed bitmap into a top-row-first raster.

    Returns ``Raster.empty()`` when the header does not describe a layout this
    decoder can read; callers must check ``is_empty`` before using the result.
    """
    try:
        header = BitmapHeader.parse(data)
    except ValueError as exc:
        logger.warning("Rejecting bitmap: %s", exc)
        return Raster.empty()
    logger.debug(
        "Bitmap header: size=%d offset=%d width=%d height=%d bpp=%d",
        header.file_size,
        header.pixel_offset,
        header.width,
        header.height,
        header.bits_per_pixel,
    )
    if header.file_size != header.expected_file_size:
        logger.warning(
            "Rejecting bitmap: declared size %d does not match layout size %d",
            header.file_size,
            header.expected_file_size,
        )
        return Raster.empty()
    if header.width <= 0 or header.height <= 0:
        logger.warning("Rejecting bitmap: unsupported dimensions %dx%d", header.width, header.height)
        return Raster.empty()
    if header.bits_per_pixel < OUTPUT_BITS_PER_PIXEL:
        logger.warning("Rejecting bitmap: %d bits per pixel is not supported", header.bits_per_pixel)
        return Raster.empty()
    if len(data) < header.expected_file_size:
        logger.warning(
            "Rejecting bitmap: %d bytes available, layout needs %d", len(data), header.expected_file_size
        )
        return Raster.empty()
    return Raster(tuple(reversed(_read_rows(data, header))))


def _read_rows(data: bytes, header: BitmapHeader) -> List[Row]:
    """Read scanlines in storage order, bottom row first."""
    step = header.bytes_per_pixel
    rows: List[Row] = []
    pos = header.pixel_offset
    for _ in range(header.height):
        row = []
        for col in range(header.width):
            at = pos + col * step
            # Stored blue, green, red; any fourth byte is ignored
            row.append(Pixel(red=data[at + 2], green=data[at + 1], blue=data[at]))
        rows.append(tuple(row))
        pos += header.stride
    return rows


def read_bitmap(path: PathLike) -> Raster:
    """Read and decode a bitmap file, raising ``DecodeError`` if it cannot be read."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as exc:
        raise DecodeError(f"Cannot read bitmap {os.fspath(path)}: {exc}") from exc
    return decode(data)
