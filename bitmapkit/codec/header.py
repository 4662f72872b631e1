from __future__ import annotations

from dataclasses import dataclass

MAGIC = b"BM"
FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
HEADER_SIZE = FILE_HEADER_SIZE + INFO_HEADER_SIZE
OUTPUT_BITS_PER_PIXEL = 24
PIXELS_PER_METER = 2835

# Byte offsets of the fields read while decoding
FILE_SIZE_OFFSET = 2
PIXEL_OFFSET_OFFSET = 10
WIDTH_OFFSET = 18
HEIGHT_OFFSET = 22
BITS_PER_PIXEL_OFFSET = 28


def read_uint(data: bytes, offset: int, size: int) -> int:
    """Read an unsigned little-endian integer of ``size`` bytes."""
    return int.from_bytes(data[offset : offset + size], "little", signed=False)


def read_int(data: bytes, offset: int, size: int) -> int:
    """Read a signed little-endian integer of ``size`` bytes."""
    return int.from_bytes(data[offset : offset + size], "little", signed=True)


def pack_uint(value: int, size: int) -> bytes:
    return value.to_bytes(size, "little", signed=False)


def pack_int(value: int, size: int) -> bytes:
    return value.to_bytes(size, "little", signed=True)


def row_padding(scanline_size: int) -> int:
    """Number of zero bytes that bring a scanline to a multiple of four."""
    return (4 - scanline_size % 4) % 4


@dataclass(frozen=True)
class BitmapHeader:
    """Header fields needed to locate the pixel array."""

    file_size: int
    pixel_offset: int
    width: int
    height: int
    bits_per_pixel: int

    @classmethod
    def parse(cls, data: bytes) -> "BitmapHeader":
        if len(data) < HEADER_SIZE:
            raise ValueError(f"Bitmap header needs {HEADER_SIZE} bytes, got {len(data)}")
        return cls(
            file_size=read_uint(data, FILE_SIZE_OFFSET, 4),
            pixel_offset=read_uint(data, PIXEL_OFFSET_OFFSET, 4),
            width=read_int(data, WIDTH_OFFSET, 4),
            height=read_int(data, HEIGHT_OFFSET, 4),
            bits_per_pixel=read_uint(data, BITS_PER_PIXEL_OFFSET, 2),
        )

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def scanline_size(self) -> int:
        return self.width * self.bytes_per_pixel

    @property
    def padding(self) -> int:
        return row_padding(self.scanline_size)

    @property
    def stride(self) -> int:
        return self.scanline_size + self.padding

    @property
    def expected_file_size(self) -> int:
        return self.pixel_offset + self.stride * self.height


def build_headers(width: int, height: int) -> bytes:
    """Build the 14-byte file header and 40-byte info header for a 24-bit bitmap."""
    stride = width * 3 + row_padding(width * 3)
    array_bytes = stride * height

    file_header = bytearray()
    file_header += MAGIC
    file_header += pack_uint(HEADER_SIZE + array_bytes, 4)
    file_header += pack_uint(0, 2)
    file_header += pack_uint(0, 2)
    file_header += pack_uint(HEADER_SIZE, 4)

    info_header = bytearray()
    info_header += pack_uint(INFO_HEADER_SIZE, 4)
    info_header += pack_int(width, 4)
    info_header += pack_int(height, 4)
    info_header += pack_uint(1, 2)
    info_header += pack_uint(OUTPUT_BITS_PER_PIXEL, 2)
    info_header += pack_uint(0, 4)
    info_header += pack_uint(array_bytes, 4)
    info_header += pack_int(PIXELS_PER_METER, 4)
    info_header += pack_int(PIXELS_PER_METER, 4)
    info_header += pack_uint(0, 4)
    info_header += pack_uint(0, 4)
    return bytes(file_header + info_header)
