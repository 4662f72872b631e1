from __future__ import annotations

from PIL import Image

from .raster import Pixel, Raster


def to_image(raster: Raster) -> Image.Image:
    """Copy a raster into an RGB Pillow image, keeping the low eight bits of each channel."""
    if raster.is_empty:
        raise ValueError("Cannot convert an empty raster")
    img = Image.new("RGB", (raster.width, raster.height))
    img.putdata(
        [(p.red & 0xFF, p.green & 0xFF, p.blue & 0xFF) for row in raster.rows for p in row]
    )
    return img


def from_image(img: Image.Image) -> Raster:
    if img.mode != "RGB":
        img = img.convert("RGB")
    width, height = img.size
    data = list(img.getdata())
    return Raster(
        tuple(
            tuple(Pixel(*data[row * width + col]) for col in range(width))
            for row in range(height)
        )
    )
