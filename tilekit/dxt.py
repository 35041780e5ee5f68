"""Decoding of DXT1 (BC1) compressed image data into packed RGB pixels."""

from __future__ import annotations

import struct
from dataclasses import dataclass

__all__ = ["Color", "rgb565_to_rgb", "mix_color", "resize_image", "decode_dxt1"]

# Decoded images larger than this on either side are downsampled.
MAX_SIZE = 2048

_BLOCK = struct.Struct("<HH4B")


@dataclass(frozen=True)
class Color:
    """An 8-bit-per-channel RGB colour."""

    r: int
    g: int
    b: int


def rgb565_to_rgb(value: int) -> Color:
    """Expand a 16-bit RGB565 value to 8 bits per channel."""
    return Color(
        ((value >> 11) & 0x1F) << 3,
        ((value >> 5) & 0x3F) << 2,
        (value & 0x1F) << 3,
    )


def mix_color(color0: int, color1: int, c0: Color, c1: Color, idx: int) -> Color:
    """Return the palette colour selected by a 2-bit index of a DXT1 block.

    ``color0`` and ``color1`` are the raw RGB565 endpoints, which decide between
    four-colour and three-colour-plus-black modes; ``c0`` and ``c1`` are the
    same endpoints expanded to RGB.
    """
    if idx == 0:
        return c0
    if idx == 1:
        return c1
    if color0 > color1:
        if idx == 2:
            return Color(
                (2 * c0.r + c1.r) // 3,
                (2 * c0.g + c1.g) // 3,
                (2 * c0.b + c1.b) // 3,
            )
        if idx == 3:
            return Color(
                (c0.r + 2 * c1.r) // 3,
                (c0.g + 2 * c1.g) // 3,
                (c0.b + 2 * c1.b) // 3,
            )
    else:
        if idx == 2:
            return Color((c0.r + c1.r) // 2, (c0.g + c1.g) // 2, (c0.b + c1.b) // 2)
        if idx == 3:
            return Color(0, 0, 0)
    raise ValueError(f"palette index must be 0..3, got {idx}")


def resize_image(
    pixels: bytes, width: int, height: int, new_width: int, new_height: int
) -> bytes:
    """Downsample packed RGB pixels by nearest-neighbour sampling.

    The sampling step is ``width // new_width``, used in both directions.
    """
    if new_width <= 0 or new_height <= 0:
        raise ValueError("new image size must be positive")
    scale = width // new_width
    out = bytearray(new_width * new_height * 3)
    for row in range(new_height):
        for col in range(new_width):
            pos = (row * new_width + col) * 3
            old = (row * width + col) * scale * 3
            if old + 3 > len(pixels):
                raise ValueError("pixel buffer is smaller than the image size")
            out[pos:pos + 3] = pixels[old:old + 3]
    return bytes(out)


def decode_dxt1(data: bytes, width: int, height: int) -> tuple[bytes, int, int]:
    """Decode DXT1 data to packed RGB.

    Returns the pixels with the final width and height; images larger than
    ``MAX_SIZE`` on a side are halved until they fit.
    """
    if len(data) % _BLOCK.size:
        raise ValueError("DXT1 data length must be a multiple of 8 bytes")
    if width <= 0 or height <= 0:
        raise ValueError("image size must be positive")

    pixels = bytearray(width * height * 3)
    x_pos = 0
    y_pos = 0
    for color0, color1, *rows in _BLOCK.iter_unpack(data):
        c0 = rgb565_to_rgb(color0)
        c1 = rgb565_to_rgb(color1)
        for dy, bits in enumerate(rows):
            for dx in range(4):
                cf = mix_color(color0, color1, c0, c1, (bits >> (2 * dx)) & 0x03)
                pos = ((x_pos + dx) + (y_pos + dy) * width) * 3
                if pos + 3 > len(pixels):
                    raise ValueError("DXT1 data exceeds the image size")
                pixels[pos:pos + 3] = bytes((cf.r, cf.g, cf.b))
        x_pos += 4
        if x_pos >= width:
            x_pos = 0
            y_pos += 4

    result = bytes(pixels)
    if width > MAX_SIZE or height > MAX_SIZE:
        new_width, new_height = width, height
        while new_width > MAX_SIZE or new_height > MAX_SIZE:
            new_width //= 2
            new_height //= 2
        result = resize_image(result, width, height, new_width, new_height)
        width, height = new_width, new_height
    return result, width, height