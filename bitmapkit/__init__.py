from .codec import decode, encode, read_bitmap, write_bitmap
from .errors import BitmapError, DecodeError, EncodeError, InvalidParameter
from .raster import Pixel, Raster

__version__ = "0.1.0"

__all__ = [
    "BitmapError",
    "DecodeError",
    "EncodeError",
    "InvalidParameter",
    "Pixel",
    "Raster",
    "decode",
    "encode",
    "read_bitmap",
    "write_bitmap",
]
