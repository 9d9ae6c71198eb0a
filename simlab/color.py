"""Conversions between RGB pixels and the YCbCr planes used by the image compressors."""

from __future__ import annotations

from typing import NamedTuple, Sequence

import numpy as np


class RGB(NamedTuple):
    """An 8-bit-per-channel colour."""

    r: int
    g: int
    b: int


def rgb_to_y(pixel: RGB) -> float:
    """Luma of a pixel, offset by 16."""
    return 16.0 + (0.299 * pixel.r + 0.587 * pixel.g + 0.114 * pixel.b)


def rgb_to_cb(pixel: RGB) -> float:
    """Blue-difference chroma of a pixel, centred on 128."""
    return 128.0 + (-0.169 * pixel.r - 0.331 * pixel.g + 0.5 * pixel.b)


def rgb_to_cr(pixel: RGB) -> float:
    """Red-difference chroma of a pixel, centred on 128."""
    return 128.0 + (0.5 * pixel.r - 0.419 * pixel.g - 0.081 * pixel.b)


def _round_half_away(values: np.ndarray) -> np.ndarray:
    return np.sign(values) * np.floor(np.abs(values) + 0.5)


def _channels(y, cb, cr) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    y = np.asarray(y, dtype=float)
    cb = np.asarray(cb, dtype=float)
    cr = np.asarray(cr, dtype=float)
    y_scaled = (y - 16.0) * 1.164
    red = y_scaled + 1.596 * (cr - 128.0)
    green = y_scaled - 0.813 * (cr - 128.0) - 0.391 * (cb - 128.0)
    blue = y_scaled + 2.018 * (cb - 128.0)
    return tuple(
        np.clip(_round_half_away(channel), 0.0, 255.0).astype(np.uint8)
        for channel in (red, green, blue)
    )


def ycbcr_to_rgb(y: float, cb: float, cr: float) -> RGB:
    """Convert one YCbCr triple back to a clamped, rounded RGB pixel."""
    red, green, blue = _channels(y, cb, cr)
    return RGB(int(red), int(green), int(blue))


def image_to_planes(pixels: Sequence[Sequence[RGB]]) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Split rows of RGB pixels into Y, Cb and Cr planes."""
    data = np.asarray(pixels, dtype=float)
    if data.ndim != 3 or data.shape[2] != 3:
        raise ValueError("pixels must be rows of (r, g, b) triples")
    red, green, blue = data[..., 0], data[..., 1], data[..., 2]
    y = 16.0 + (0.299 * red + 0.587 * green + 0.114 * blue)
    cb = 128.0 + (-0.169 * red - 0.331 * green + 0.5 * blue)
    cr = 128.0 + (0.5 * red - 0.419 * green - 0.081 * blue)
    return y, cb, cr


def planes_to_image(y, cb, cr) -> list[list[RGB]]:
    """Recombine Y, Cb and Cr planes into rows of RGB pixels."""
    planes = [np.asarray(plane, dtype=float) for plane in (y, cb, cr)]
    if any(plane.ndim != 2 for plane in planes):
        raise ValueError("planes must be two-dimensional")
    if not planes[0].shape == planes[1].shape == planes[2].shape:
        raise ValueError("planes must share one shape")
    red, green, blue = _channels(*planes)
    return [
        [RGB(int(r), int(g), int(b)) for r, g, b in zip(row_r, row_g, row_b)]
        for row_r, row_g, row_b in zip(red, green, blue)
    ]