from .decode import decode, read_bitmap
from .encode import encode, write_bitmap
from .header import BitmapHeader, build_headers, row_padding

__all__ = [
    "BitmapHeader",
    "build_headers",
    "decode",
    "encode",
    "read_bitmap",
    "row_padding",
    "write_bitmap",
]
