"""Writing rendered pixels as 32-bit uncompressed BMP files."""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import Sequence, Union

_HEADER = struct.Struct("<2sIHHIIiiHHIIiiII")
_HEADER_SIZE = 54
_INFO_SIZE = 40


def encode_bmp(pixels: Sequence[int], width: int, height: int) -> bytes:
    """Encode row-major 0xRRGGBB ``pixels`` (top row first) as a BMP file."""
    pixels = list(pixels)
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    if len(pixels) != width * height:
        raise ValueError(
            f"expected {width * height} pixels, got {len(pixels)}"
        )
    image_size = width * height * 4
    header = _HEADER.pack(
        b"BM",
        _HEADER_SIZE + image_size,
        0,
        0,
        _HEADER_SIZE,
        _INFO_SIZE,
        width,
        height,
        1,
        32,
        0,
        image_size,
        0,
        0,
        0,
        0,
    )
    row_format = struct.Struct(f"<{width}I")
    rows = [pixels[start : start + width] for start in range(0, len(pixels), width)]
    body = b"".join(row_format.pack(*row) for row in reversed(rows))
    return header + body


def write_bmp(
    path: Union[str, "os.PathLike[str]"],
    pixels: Sequence[int],
    width: int,
    height: int,
) -> None:
    """Write ``pixels`` to ``path`` as a BMP file."""
    Path(path).write_bytes(encode_bmp(pixels, width, height))