"""Discrete Fourier transforms and frequency-domain low-pass filters for image planes."""

from __future__ import annotations

import numpy as np


def _dft_matrix(n: int, sign: float) -> np.ndarray:
    index = np.arange(n)
    return np.exp(sign * 2j * np.pi * np.outer(index, index) / n)


def _as_vector(values) -> np.ndarray:
    data = np.asarray(values, dtype=complex)
    if data.ndim != 1:
        raise ValueError("values must be one-dimensional")
    return data


def _as_grid(grid) -> np.ndarray:
    data = np.asarray(grid, dtype=complex)
    if data.ndim != 2:
        raise ValueError("grid must be two-dimensional")
    return data


def _as_plane(plane) -> np.ndarray:
    data = np.asarray(plane, dtype=float)
    if data.ndim != 2:
        raise ValueError("plane must be two-dimensional")
    return data


def dft(values) -> np.ndarray:
    """Forward discrete Fourier transform computed term by term."""
    data = _as_vector(values)
    return _dft_matrix(len(data), -1.0) @ data


def idft(values) -> np.ndarray:
    """Inverse discrete Fourier transform, normalised by the length."""
    data = _as_vector(values)
    if len(data) == 0:
        return data.copy()
    return (_dft_matrix(len(data), 1.0) @ data) / len(data)


def dft_2d(grid) -> np.ndarray:
    """Forward 2D transform: every row first, then every column."""
    data = _as_grid(grid)
    height, width = data.shape
    rows = data @ _dft_matrix(width, -1.0)
    return _dft_matrix(height, -1.0) @ rows


def idft_2d(grid) -> np.ndarray:
    """Inverse 2D transform: every row first, then every column."""
    data = _as_grid(grid)
    height, width = data.shape
    if height == 0 or width == 0:
        return data.copy()
    rows = (data @ _dft_matrix(width, 1.0)) / width
    return (_dft_matrix(height, 1.0) @ rows) / height


def _signed_frequencies(n: int) -> np.ndarray:
    index = np.arange(n)
    return np.where(index < n // 2, index, index - n)


def smooth_lowpass(plane, cutoff: float) -> np.ndarray:
    """Attenuate frequencies beyond a radius with an exponential roll-off.

    Frequencies within ``cutoff`` of DC are kept; farther ones are scaled by
    ``exp(-(radius - cutoff) * 0.1)``. Returns the real part of the result.
    """
    data = _as_plane(plane)
    if data.size == 0:
        return data.copy()
    height, width = data.shape
    spectrum = np.fft.fft2(data)
    di = _signed_frequencies(height).astype(float)[:, None]
    dj = _signed_frequencies(width).astype(float)[None, :]
    radius = np.sqrt(di * di + dj * dj)
    gain = np.where(radius > cutoff, np.exp(-(radius - cutoff) * 0.1), 1.0)
    return np.fft.ifft2(spectrum * gain).real


def box_lowpass(plane, cutoff: int) -> np.ndarray:
    """Zero every frequency whose row or column index exceeds ``cutoff`` in magnitude.

    Uses the term-by-term transforms and returns the real part of the result.
    """
    data = _as_plane(plane)
    if data.size == 0:
        return data.copy()
    height, width = data.shape
    spectrum = dft_2d(data)
    fi = np.abs(_signed_frequencies(height))[:, None]
    fj = np.abs(_signed_frequencies(width))[None, :]
    spectrum[(fi > cutoff) | (fj > cutoff)] = 0.0
    return idft_2d(spectrum).real