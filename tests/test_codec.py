from __future__ import annotations

import io

import pytest
from PIL import Image

from bitmapkit.codec import BitmapHeader, decode, encode, read_bitmap, row_padding, write_bitmap
from bitmapkit.errors import DecodeError, EncodeError
from bitmapkit.interop import from_image, to_image
from bitmapkit.raster import Pixel, Raster

from .helpers import bitmap_bytes


def _u32(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset : offset + 4], "little")


def _u16(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset : offset + 2], "little")


def test_row_padding():
    assert [row_padding(n) for n in (0, 1, 2, 3, 4, 5, 6, 9, 12)] == [0, 3, 2, 1, 0, 3, 2, 3, 0]


def test_encode_headers(sample_raster):
    data = encode(sample_raster)
    assert len(data) == 70
    assert data[0:2] == b"BM"
    assert _u32(data, 2) == 70
    assert _u16(data, 6) == 0
    assert _u16(data, 8) == 0
    assert _u32(data, 10) == 54
    assert _u32(data, 14) == 40
    assert _u32(data, 18) == 2
    assert _u32(data, 22) == 2
    assert _u16(data, 26) == 1
    assert _u16(data, 28) == 24
    assert _u32(data, 30) == 0
    assert _u32(data, 34) == 16
    assert _u32(data, 38) == 2835
    assert _u32(data, 42) == 2835
    assert _u32(data, 46) == 0
    assert _u32(data, 50) == 0


def test_encode_stores_bottom_row_first_in_bgr(sample_raster):
    data = encode(sample_raster)
    assert data[54:60] == bytes([90, 80, 70, 120, 110, 100])
    assert data[60:62] == b"\x00\x00"
    assert data[62:68] == bytes([30, 20, 10, 60, 50, 40])
    assert data[68:70] == b"\x00\x00"


def test_two_by_two_round_trip(sample_raster):
    decoded = decode(encode(sample_raster))
    assert decoded == sample_raster
    assert decoded.width == 2
    assert decoded.height == 2
    assert decoded.pixel(0, 0) == Pixel(10, 20, 30)
    assert decoded.pixel(1, 1) == Pixel(100, 110, 120)


@pytest.mark.parametrize("width", [1, 2, 3, 4, 5])
def test_round_trip_across_paddings(width):
    raster = Raster.from_rows(
        [[Pixel(col * 7, row * 11, (row + col) * 13) for col in range(width)] for row in range(3)]
    )
    data = encode(raster)
    stride = width * 3 + row_padding(width * 3)
    assert len(data) == 54 + stride * 3
    assert decode(data) == raster


def test_encode_keeps_low_eight_bits():
    raster = Raster.from_rows([[Pixel(-1, 256, 300)]])
    data = encode(raster)
    assert data[54:57] == bytes([44, 0, 255])


def test_encode_rejects_empty_raster():
    with pytest.raises(ValueError):
        encode(Raster.empty())


def test_decode_rejects_size_mismatch(sample_raster):
    data = bytearray(encode(sample_raster))
    data[2:6] = (71).to_bytes(4, "little")
    result = decode(bytes(data))
    assert result.is_empty
    assert not result


@pytest.mark.parametrize("data", [b"", b"BM", bytes(53)])
def test_decode_rejects_short_header(data):
    assert decode(data) == Raster.empty()


def test_decode_rejects_truncated_pixels(sample_raster):
    assert decode(encode(sample_raster)[:-4]).is_empty


def test_decode_rejects_low_bit_depth():
    data = bitmap_bytes(4, 1, 8, [bytes([1, 2, 3, 4])])
    assert decode(data).is_empty


def test_decode_32_bit_ignores_fourth_byte():
    data = bitmap_bytes(1, 2, 32, [bytes([1, 2, 3, 255]), bytes([4, 5, 6, 255])])
    raster = decode(data)
    assert raster.rows == ((Pixel(6, 5, 4),), (Pixel(3, 2, 1),))


def test_decode_skips_row_padding():
    rows = [bytes([1, 2, 3, 0]), bytes([4, 5, 6, 0])]
    raster = decode(bitmap_bytes(1, 2, 24, rows))
    assert raster.rows == ((Pixel(6, 5, 4),), (Pixel(3, 2, 1),))


def test_header_layout_arithmetic():
    header = BitmapHeader(file_size=0, pixel_offset=54, width=5, height=3, bits_per_pixel=24)
    assert header.scanline_size == 15
    assert header.padding == 1
    assert header.expected_file_size == 54 + 16 * 3


def test_write_then_read(tmp_path, gradient_raster):
    path = tmp_path / "out.bmp"
    write_bitmap(path, gradient_raster)
    assert read_bitmap(path) == gradient_raster


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(DecodeError):
        read_bitmap(tmp_path / "missing.bmp")


def test_write_to_missing_directory_raises(tmp_path, sample_raster):
    with pytest.raises(EncodeError):
        write_bitmap(tmp_path / "no" / "such" / "dir.bmp", sample_raster)


def test_pillow_reads_encoded_bitmap(gradient_raster):
    with Image.open(io.BytesIO(encode(gradient_raster))) as img:
        assert img.format == "BMP"
        assert img.size == (5, 3)
        assert from_image(img) == gradient_raster


def test_decode_bitmap_written_by_pillow(gradient_raster):
    buffer = io.BytesIO()
    to_image(gradient_raster).save(buffer, format="BMP")
    assert decode(buffer.getvalue()) == gradient_raster
