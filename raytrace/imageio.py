"""Writing packed 0x00BBGGRR pixel buffers as uncompressed BMP and TGA images."""

from __future__ import annotations

import os
import struct
from collections.abc import Iterator, Sequence

_BMP_HEADER = struct.Struct("<2sIHHIIiiHHIIiiII")
_TGA_HEADER = struct.Struct("<BBB5xHHHHBB")


def _pixel_rows(pixels: Sequence[int], width: int, height: int, stride: int) -> Iterator[bytes]:
    for y in range(height):
        row_start = y * stride
        row = pixels[row_start:row_start + width]
        if len(row) < width:
            raise IndexError("pixel buffer is too short for the image size")
        yield bytes(
            channel
            for value in row
            for channel in ((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)
        )


def bmp_bytes(pixels: Sequence[int], width: int, height: int, stride: int) -> bytes:
    """Encode a pixel buffer as a 24-bit BMP file (rows are not padded)."""
    data_size = width * height * 3
    header = _BMP_HEADER.pack(
        b"BM", 54 + data_size, 0, 0, 54,
        40, width, height, 1, 24, 0, data_size, 2835, 2835, 0, 0,
    )
    return header + b"".join(_pixel_rows(pixels, width, height, stride))


def tga_bytes(pixels: Sequence[int], width: int, height: int, stride: int) -> bytes:
    """Encode a pixel buffer as an uncompressed 24-bit TGA file."""
    header = _TGA_HEADER.pack(0, 0, 2, 0, 0, width & 0xFFFF, height & 0xFFFF, 24, 0)
    return header + b"".join(_pixel_rows(pixels, width, height, stride))


def write_bmp(path: str | os.PathLike[str], pixels: Sequence[int], width: int, height: int,
              stride: int) -> None:
    """Write a pixel buffer to a BMP file."""
    data = bmp_bytes(pixels, width, height, stride)
    with open(path, "wb") as handle:
        handle.write(data)


def write_tga(path: str | os.PathLike[str], pixels: Sequence[int], width: int, height: int,
              stride: int) -> None:
    """Write a pixel buffer to a TGA file."""
    data = tga_bytes(pixels, width, height, stride)
    with open(path, "wb") as handle:
        handle.write(data)