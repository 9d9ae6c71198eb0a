"""Grid automata: random percolation growth, vector cells, Syracuse times and drawings."""

from __future__ import annotations

import math
import random
from typing import Optional, Sequence

import numpy as np

GROWTH = 4
DEFAULT_SYRACUSE_LIMIT = 1_000_000


def count_neighbours(cells, x: int, y: int) -> int:
    """Sum of the eight cells around (x, y); cells is indexed [y][x]."""
    grid = np.asarray(cells)
    if grid.ndim != 2:
        raise ValueError("cells must be two-dimensional")
    height, width = grid.shape
    if not (1 <= x < width - 1 and 1 <= y < height - 1):
        raise IndexError("cell must not lie on the border")
    return int(grid[y - 1 : y + 2, x - 1 : x + 2].sum() - grid[y, x])


def _neighbour_sums(grid: np.ndarray) -> np.ndarray:
    height, width = grid.shape
    total = np.zeros((height - 2, width - 2), dtype=grid.dtype)
    for dy in (-1, 0, 1):
        for dx in (-1, 0, 1):
            if dx or dy:
                total += grid[1 + dy : height - 1 + dy, 1 + dx : width - 1 + dx]
    return total


def percolation_step(cells, p: int = 5000, rng: Optional[random.Random] = None) -> np.ndarray:
    """Grow interior cells at random, more readily next to grown neighbours.

    Each interior cell gains 4 with probability 1 / |p - s * (p / 8) + 1|,
    where s is the sum of its neighbours before the step. Cells are visited
    column by column. Returns a new grid; the border never changes.
    """
    grid = np.array(cells, dtype=np.int64)
    if grid.ndim != 2:
        raise ValueError("cells must be two-dimensional")
    rng = rng or random.Random()
    result = grid.copy()
    height, width = grid.shape
    if height < 3 or width < 3:
        return result
    sums = _neighbour_sums(grid)
    step = int(p / 8)
    for x in range(1, width - 1):
        for y in range(1, height - 1):
            modulus = p - int(sums[y - 1, x - 1]) * step + 1
            if modulus == 0:
                raise ValueError(f"growth odds at ({x}, {y}) are undefined")
            if rng.randrange(abs(modulus)) == 0:
                result[y, x] += GROWTH
    return result


def vector_cell_step(cells, transmission: float = 1.0) -> np.ndarray:
    """One step of the two-channel cell automaton on a (rows, columns, 2) grid.

    Each interior cell takes, in each channel, the other channel of its
    neighbours at offsets (dx, dy) with dx != dy, scaled by transmission and
    truncated to an integer after every addition. The border is cleared.
    """
    grid = np.array(cells, dtype=np.int64)
    if grid.ndim != 3 or grid.shape[2] != 2:
        raise ValueError("cells must have shape (rows, columns, 2)")
    height, width, _ = grid.shape
    result = np.zeros_like(grid)
    if height < 3 or width < 3:
        return result
    first = np.zeros((height - 2, width - 2), dtype=np.int64)
    second = np.zeros((height - 2, width - 2), dtype=np.int64)
    for dx in (-1, 0, 1):
        for dy in (-1, 0, 1):
            if dx == dy:
                continue
            window = grid[1 + dy : height - 1 + dy, 1 + dx : width - 1 + dx]
            first = np.trunc(first + transmission * window[..., 1]).astype(np.int64)
            second = np.trunc(second + transmission * window[..., 0]).astype(np.int64)
    result[1:-1, 1:-1, 0] = first
    result[1:-1, 1:-1, 1] = second
    return result


def syracuse(n: int) -> int:
    """One Collatz step: 3n + 1 for odd n, n / 2 for even n."""
    if n % 2:
        return 3 * n + 1
    return n // 2


def stopping_time(n: int, limit: int = DEFAULT_SYRACUSE_LIMIT) -> int:
    """Collatz steps taken while the value stays above 1 and at most limit."""
    steps = 0
    while 1 < n <= limit:
        n = syracuse(n)
        steps += 1
    return steps


def syracuse_color(steps: int) -> tuple[int, int, int]:
    """Drawing colour for a step count; green and blue use whole hundreds and forties."""
    return (
        int(255 * math.tanh(steps)),
        int(255 * math.tanh(steps // 100)),
        int(255 * math.tanh(steps // 40)),
    )


def drawing_to_text(grid: Sequence[Sequence[int]]) -> str:
    """Text image of a drawing: a size header, then one line per row, "0" marked and "1" blank."""
    rows = [list(row) for row in grid]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all rows must have the same length")
    columns = len(rows[0]) if rows else 0
    lines = [f"AS: {len(rows)},{columns} "]
    lines.extend("".join("0" if value else "1" for value in row) for row in rows)
    return "\n".join(lines) + "\n"