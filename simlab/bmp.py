"""Reading and writing uncompressed 24-bit BMP images."""

from __future__ import annotations

import os
import struct
from typing import Sequence, Union

import numpy as np

from simlab.color import RGB

PathLike = Union[str, "os.PathLike[str]"]

_FILE_HEADER = struct.Struct("<HIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_SIGNATURE = 0x4D42
_PIXELS_PER_METRE = 2835


class BmpFormatError(ValueError):
    """The file is not a BMP image this module can read."""


def _row_size(width: int) -> int:
    padding = (4 - (width * 3) % 4) % 4
    return width * 3 + padding


def _read_pixels(path: PathLike, *, require_uncompressed: bool) -> np.ndarray:
    """Decode a 24-bit BMP into a top-down (height, width, 3) RGB byte array."""
    with open(path, "rb") as handle:
        data = handle.read()

    if len(data) < _FILE_HEADER.size:
        raise BmpFormatError("Failed to read BMP file header")
    signature, _file_size, _res1, _res2, data_offset = _FILE_HEADER.unpack_from(data, 0)
    if signature != _SIGNATURE:
        raise BmpFormatError("Not a valid BMP file")

    if len(data) < _FILE_HEADER.size + _INFO_HEADER.size:
        raise BmpFormatError("Failed to read BMP info header")
    info = _INFO_HEADER.unpack_from(data, _FILE_HEADER.size)
    width, height, bits_per_pixel, compression = info[1], info[2], info[4], info[5]

    if bits_per_pixel != 24 or (require_uncompressed and compression != 0):
        raise BmpFormatError("Unsupported BMP format. Only 24-bit uncompressed supported")
    if width < 0 or height < 0:
        raise BmpFormatError("Top-down or negative-size BMP images are not supported")

    row_size = _row_size(width)
    end = data_offset + row_size * height
    if end > len(data):
        raise BmpFormatError("Failed to read pixel data")

    rows = np.frombuffer(data, dtype=np.uint8, count=row_size * height, offset=data_offset)
    rows = rows.reshape(height, row_size)[:, : width * 3].reshape(height, width, 3)
    # Rows are stored bottom-up and each pixel as B, G, R.
    return rows[::-1, :, ::-1].copy()


def read_bmp(path: PathLike) -> list[list[RGB]]:
    """Read a 24-bit uncompressed BMP as rows of RGB pixels, top row first."""
    pixels = _read_pixels(path, require_uncompressed=True)
    return [[RGB(int(r), int(g), int(b)) for r, g, b in row] for row in pixels]


def read_bmp_grayscale(path: PathLike) -> np.ndarray:
    """Read a 24-bit BMP as a luminosity plane scaled to [0, 1], top row first."""
    pixels = _read_pixels(path, require_uncompressed=False).astype(float)
    gray = 0.299 * pixels[..., 0] + 0.587 * pixels[..., 1] + 0.114 * pixels[..., 2]
    return gray / 255.0


def write_bmp(path: PathLike, pixels: Sequence[Sequence[Sequence[int]]]) -> None:
    """Write rows of (r, g, b) pixels, top row first, as a 24-bit uncompressed BMP."""
    rows = [list(row) for row in pixels]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all rows must have the same length")
    height = len(rows)
    width = len(rows[0]) if rows else 0

    values = np.asarray(rows, dtype=np.int64).reshape(height, width, 3) if height else (
        np.zeros((0, 0, 3), dtype=np.int64)
    )
    if values.size and (values.min() < 0 or values.max() > 255):
        raise ValueError("channel values must lie in 0..255")

    row_size = _row_size(width)
    body = np.zeros((height, row_size), dtype=np.uint8)
    body[:, : width * 3] = values[::-1, :, ::-1].astype(np.uint8).reshape(height, width * 3)
    image_bytes = body.tobytes()

    data_offset = _FILE_HEADER.size + _INFO_HEADER.size
    file_header = _FILE_HEADER.pack(_SIGNATURE, data_offset + len(image_bytes), 0, 0, data_offset)
    info_header = _INFO_HEADER.pack(
        _INFO_HEADER.size,
        width,
        height,
        1,
        24,
        0,
        len(image_bytes),
        _PIXELS_PER_METRE,
        _PIXELS_PER_METRE,
        0,
        0,
    )
    with open(path, "wb") as handle:
        handle.write(file_header)
        handle.write(info_header)
        handle.write(image_bytes)