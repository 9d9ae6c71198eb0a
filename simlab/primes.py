"""Prime-factor counts and the "prime galaxy" rendering of primeness along circles."""

from __future__ import annotations

import math
from typing import Sequence, Union

import numpy as np

GAMMA = 0.7
DEFAULT_MAX_RADIUS = 1_000_000
_CHUNK = 2048

Center = Union[complex, float, Sequence[float]]


def count_prime_factors(n: int) -> int:
    """Number of prime factors of n counted with multiplicity (0 for n <= 1)."""
    if n <= 1:
        return 0
    count = 0
    while n % 2 == 0:
        count += 1
        n //= 2
    divisor = 3
    while divisor * divisor <= n:
        while n % divisor == 0:
            count += 1
            n //= divisor
        divisor += 2
    if n > 2:
        count += 1
    return count


def prime_factor_counts(limit: int) -> np.ndarray:
    """Array whose entry i is the prime-factor count of i, for 0 <= i <= limit."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    counts = np.zeros(limit + 1, dtype=np.int64)
    if limit < 2:
        return counts
    sieve = np.ones(limit + 1, dtype=bool)
    sieve[:2] = False
    for p in range(2, math.isqrt(limit) + 1):
        if sieve[p]:
            sieve[p * p :: p] = False
    for prime in np.flatnonzero(sieve):
        power = int(prime)
        while power <= limit:
            counts[power::power] += 1
            power *= int(prime)
    return counts


def primeness(factors: int, max_factors: int) -> float:
    """How prime-like a number is: 1 for primes, falling as the factor count grows."""
    if factors == 1:
        return 1.0
    if max_factors <= 0:
        raise ValueError("max_factors must be positive")
    return 1.0 - (factors - 1) / max_factors


def _colors(values) -> np.ndarray:
    """Gamma-correct primeness values and map them onto the blue-purple-red-yellow-white ramp."""
    c = np.power(np.asarray(values, dtype=float), GAMMA)
    t_purple = (c - 0.25) * 4.0
    t_red = (c - 0.5) * 4.0
    t_yellow = (c - 0.75) * 4.0
    red = np.where(
        c < 0.25, c * 4 * 128, np.where(c < 0.5, 128 + t_purple * 127, 255.0)
    )
    green = np.where(c < 0.5, 0.0, np.where(c < 0.75, t_red * 255, 255.0))
    blue = np.where(
        c < 0.25,
        255.0,
        np.where(c < 0.5, 255 * (1.0 - t_purple), np.where(c < 0.75, 0.0, t_yellow * 255)),
    )
    channels = np.stack([red, green, blue], axis=-1)
    return np.trunc(np.clip(channels, 0.0, 255.0)).astype(np.uint8)


def primeness_color(value: float) -> tuple[int, int, int]:
    """RGB colour of a primeness value after gamma correction by 0.7."""
    red, green, blue = _colors(np.array([value]))[0]
    return int(red), int(green), int(blue)


def _center(center: Center) -> tuple[float, float]:
    if isinstance(center, (int, float, complex)):
        value = complex(center)
        return value.real, value.imag
    return float(center[0]), float(center[1])


def render_primeness(
    size: int, center: Center, zoom: int = 1, max_radius: int = DEFAULT_MAX_RADIUS
) -> np.ndarray:
    """Draw, for every radius r up to max_radius, a circle of radius r / zoom coloured by r's primeness.

    Returns a (size, size, 3) RGB image; untouched pixels are black and
    larger radii overwrite smaller ones.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if zoom < 1:
        raise ValueError("zoom must be at least 1")
    if max_radius < 2:
        raise ValueError("max_radius must be at least 2")
    cx, cy = _center(center)
    counts = prime_factor_counts(max_radius)
    max_factors = int(counts[1:].max())

    reach = max(math.hypot(x - cx, y - cy) for x in (0, size) for y in (0, size)) + 2.0
    last = min(max_radius, int(math.ceil(reach * zoom)))

    factors = counts[1 : last + 1]
    values = np.where(factors == 1, 1.0, 1.0 - (factors - 1) / max_factors)
    colors = _colors(values)

    angles = np.arange(360) * math.pi / 180.0
    cos, sin = np.cos(angles)[None, :], np.sin(angles)[None, :]
    radii = np.arange(1, last + 1)
    image = np.zeros((size, size, 3), dtype=np.uint8)
    for start in range(0, len(radii), _CHUNK):
        scaled = radii[start : start + _CHUNK, None] / zoom
        xs = np.trunc(cx + scaled * cos).astype(np.int64)
        ys = np.trunc(cy + scaled * sin).astype(np.int64)
        inside = (xs >= 0) & (xs < size) & (ys >= 0) & (ys < size)
        rows, cols = np.nonzero(inside)
        image[ys[rows, cols], xs[rows, cols]] = colors[start + rows]
    return image


def zoom_in(zoom: int) -> int:
    """Next zoom level: steps of 1, 5, 20, then 10 percent as the zoom grows."""
    if zoom < 10:
        return zoom + 1
    if zoom < 50:
        return zoom + 5
    if zoom < 200:
        return zoom + 20
    return zoom + zoom // 10


def zoom_out(zoom: int) -> int:
    """Previous zoom level, mirroring :func:`zoom_in` and never below 1."""
    if zoom <= 10:
        if zoom > 1:
            zoom -= 1
    elif zoom <= 50:
        zoom -= 5
    elif zoom <= 200:
        zoom -= 20
    else:
        zoom -= zoom // 10
    return max(zoom, 1)