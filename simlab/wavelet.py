"""Haar wavelet transform, coefficient thresholding and display helpers."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

_INV_SQRT2 = 0.7071067811865476


def _decompose_last(data: np.ndarray) -> np.ndarray:
    length = data.shape[-1]
    half = length // 2
    out = data.copy()
    even = data[..., 0 : 2 * half : 2]
    odd = data[..., 1 : 2 * half : 2]
    out[..., :half] = (even + odd) * _INV_SQRT2
    out[..., half : 2 * half] = (even - odd) * _INV_SQRT2
    return out


def _reconstruct_last(data: np.ndarray) -> np.ndarray:
    length = data.shape[-1]
    half = length // 2
    out = data.copy()
    approx = data[..., :half]
    detail = data[..., half : 2 * half]
    out[..., 0 : 2 * half : 2] = (approx + detail) * _INV_SQRT2
    out[..., 1 : 2 * half : 2] = (approx - detail) * _INV_SQRT2
    return out


def haar_decompose(values) -> np.ndarray:
    """One Haar step: averages in the first half, details in the second.

    With an odd length the last value is left where it is.
    """
    return _decompose_last(np.array(values, dtype=float))


def haar_reconstruct(values) -> np.ndarray:
    """Undo one Haar step made by :func:`haar_decompose`."""
    return _reconstruct_last(np.array(values, dtype=float))


@dataclass(frozen=True)
class CompressionStats:
    """How many coefficients a threshold removed."""

    total: int
    zeroed: int
    threshold: float

    @property
    def percentage(self) -> float:
        return self.zeroed / self.total * 100.0 if self.total else 0.0

    def __str__(self) -> str:
        return (
            "Wavelet Coefficient Statistics:\n"
            f"Total Coefficients: {self.total}\n"
            f"Coefficients zeroed by compression: {self.zeroed}\n"
            f"Percentage of coefficients zeroed: {self.percentage:.2f}%\n"
            f"Threshold value used: {self.threshold:.4f}\n"
        )


class WaveletTransform:
    """Multi-level 2D Haar transform of a width x height plane."""

    def __init__(self, width: int, height: int, levels: int):
        if width < 0 or height < 0:
            raise ValueError("dimensions must not be negative")
        if levels < 1:
            raise ValueError("levels must be at least 1")
        self.width = width
        self.height = height
        self.levels = levels
        self.coefficients = np.zeros((height, width))

    def forward(self, plane) -> np.ndarray:
        """Decompose a plane; stores and returns the coefficients."""
        data = np.array(plane, dtype=float)
        if data.shape != (self.height, self.width):
            raise ValueError(
                f"plane shape {data.shape} does not match {(self.height, self.width)}"
            )
        width, height = self.width, self.height
        for _ in range(self.levels):
            if width <= 1 or height <= 1:
                break
            data[:height, :width] = _decompose_last(data[:height, :width])
            data[:height, :width] = _decompose_last(data[:height, :width].T).T
            width >>= 1
            height >>= 1
        self.coefficients = data
        return data.copy()

    def inverse(self) -> np.ndarray:
        """Reconstruct the plane in place from the stored coefficients."""
        data = self.coefficients
        width = self.width >> (self.levels - 1)
        height = self.height >> (self.levels - 1)
        for _ in range(self.levels):
            if width > 0 and height > 0:
                data[:height, :width] = _reconstruct_last(data[:height, :width].T).T
                data[:height, :width] = _reconstruct_last(data[:height, :width])
            width <<= 1
            height <<= 1
        return data.copy()

    def threshold(self, threshold: float) -> int:
        """Zero every coefficient smaller in magnitude than threshold.

        Returns how many non-zero coefficients were cleared.
        """
        small = np.abs(self.coefficients) < threshold
        cleared = int(np.count_nonzero(small & (self.coefficients != 0.0)))
        self.coefficients[small] = 0.0
        return cleared


def wavelet_compress(plane, levels: int, threshold: float) -> tuple[np.ndarray, CompressionStats]:
    """Transform, threshold and reconstruct a plane."""
    data = np.asarray(plane, dtype=float)
    if data.ndim != 2:
        raise ValueError("plane must be two-dimensional")
    height, width = data.shape
    transform = WaveletTransform(width, height, levels)
    transform.forward(data)
    zeroed = transform.threshold(threshold)
    result = transform.inverse()
    return result, CompressionStats(total=width * height, zeroed=zeroed, threshold=threshold)


def next_power_of_2(n: int) -> int:
    """Smallest power of two that is at least n (1 for n <= 1)."""
    power = 1
    while power < n:
        power *= 2
    return power


def magnitude_spectrum(data) -> np.ndarray:
    """Log-scaled magnitude of a 2D spectrum as bytes, with DC moved to the centre."""
    spectrum = np.asarray(data, dtype=complex)
    if spectrum.ndim != 2:
        raise ValueError("spectrum must be two-dimensional")
    magnitude = np.abs(spectrum)
    peak = float(magnitude.max()) if magnitude.size else 0.0
    if peak == 0.0:
        return np.zeros(spectrum.shape, dtype=np.uint8)
    normalized = np.log1p(magnitude) / np.log1p(peak)
    scaled = np.floor(normalized * 255.0).astype(np.uint8)
    height, width = spectrum.shape
    return np.roll(scaled, (height // 2, width // 2), axis=(0, 1))


def normalize_for_display(coefficients) -> np.ndarray:
    """Stretch coefficients linearly onto 0..255 bytes."""
    values = np.asarray(coefficients, dtype=float)
    if values.size == 0:
        return np.zeros(values.shape, dtype=np.uint8)
    low = float(values.min())
    span = float(values.max()) - low
    if span == 0.0:
        span = 1.0
    return np.floor(255.0 * (values - low) / span).astype(np.uint8)