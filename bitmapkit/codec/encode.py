from __future__ import annotations

import logging
import os
from typing import Union

from ..errors import EncodeError
from ..raster import Raster
from .header import build_headers, row_padding

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def encode(raster: Raster) -> bytes:
    """Encode a raster as a 24-bit uncompressed bitmap.

    Channel values outside [0, 255] keep only their low eight bits.
    """
    if raster.is_empty:
        raise ValueError("Cannot encode an empty raster")
    raster.validate()
    width = raster.width
    padding = bytes(row_padding(width * 3))
    out = bytearray(build_headers(width, raster.height))
    for row in reversed(raster.rows):
        for pixel in row:
            out.append(pixel.blue & 0xFF)
            out.append(pixel.green & 0xFF)
            out.append(pixel.red & 0xFF)
        out += padding
    return bytes(out)


def write_bitmap(path: PathLike, raster: Raster) -> None:
    """Encode ``raster`` and write it to ``path``, raising ``EncodeError`` on I/O failure."""
    data = encode(raster)
    try:
        with open(path, "wb") as handle:
            handle.write(data)
    except OSError as exc:
        raise EncodeError(f"Cannot write bitmap {os.fspath(path)}: {exc}") from exc
    logger.debug("Wrote %dx%d bitmap to %s (%d bytes)", raster.width, raster.height, path, len(data))
