"""Particle life on arrays, with a uniform grid to limit the pairs examined."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterator, Optional

import numpy as np

_VECTOR_FIELDS = ("vel_x", "vel_y", "force_x", "force_y")


@dataclass
class ParticleSystem:
    """Positions, velocities, forces and colours of all particles as parallel arrays."""

    pos_x: np.ndarray
    pos_y: np.ndarray
    colors: np.ndarray
    vel_x: Optional[np.ndarray] = None
    vel_y: Optional[np.ndarray] = None
    force_x: Optional[np.ndarray] = None
    force_y: Optional[np.ndarray] = None

    def __post_init__(self) -> None:
        self.pos_x = np.array(self.pos_x, dtype=float)
        self.pos_y = np.array(self.pos_y, dtype=float)
        self.colors = np.array(self.colors, dtype=np.intp)
        count = len(self.pos_x)
        for name in _VECTOR_FIELDS:
            value = getattr(self, name)
            setattr(self, name, np.zeros(count) if value is None else np.array(value, dtype=float))
        arrays = [self.pos_x, self.pos_y, self.colors] + [getattr(self, n) for n in _VECTOR_FIELDS]
        if any(array.ndim != 1 or len(array) != count for array in arrays):
            raise ValueError("all particle arrays must be one-dimensional and of one length")

    def __len__(self) -> int:
        return len(self.pos_x)

    @classmethod
    def random(
        cls,
        count: int,
        width: int,
        height: int,
        colors: int,
        rng: Optional[random.Random] = None,
    ) -> "ParticleSystem":
        """Particles at random whole-number positions, at rest, with random colours."""
        if count < 0:
            raise ValueError("count must not be negative")
        rng = rng or random.Random()
        xs, ys, cs = [], [], []
        for _ in range(count):
            xs.append(float(rng.randrange(width)))
            ys.append(float(rng.randrange(height)))
            cs.append(rng.randrange(colors))
        return cls(pos_x=xs, pos_y=ys, colors=cs)

    def step(self, time_step: float, damping: float, width: float, height: float) -> None:
        """Integrate one step, damp velocities and wrap positions around the box."""
        self.vel_x += self.force_x / time_step
        self.vel_y += self.force_y / time_step
        self.vel_x *= damping
        self.vel_y *= damping
        self.pos_x += self.vel_x / time_step
        self.pos_y += self.vel_y / time_step
        for position, extent in ((self.pos_x, width), (self.pos_y, height)):
            position += np.where(position < 0, extent, 0.0)
            position -= np.where(position >= extent, extent, 0.0)


class SpatialGrid:
    """Square cells covering a width x height box, each listing the particles inside it."""

    def __init__(self, width: float, height: float, cell_size: float):
        if cell_size <= 0:
            raise ValueError("cell_size must be positive")
        self.cell_size = cell_size
        self.columns = math.ceil(width / cell_size)
        self.rows = math.ceil(height / cell_size)
        if self.columns < 1 or self.rows < 1:
            raise ValueError("the grid must have at least one cell")
        self.cells: list[list[int]] = [[] for _ in range(self.columns * self.rows)]

    def cell_index(self, column: int, row: int) -> int:
        """Position of a cell in :attr:`cells`."""
        return row * self.columns + column

    def update(self, system: ParticleSystem) -> None:
        """Refill the cells from the current positions, clamping strays to the border cells."""
        for cell in self.cells:
            cell.clear()
        columns = np.clip(np.trunc(system.pos_x / self.cell_size), 0, self.columns - 1).astype(int)
        rows = np.clip(np.trunc(system.pos_y / self.cell_size), 0, self.rows - 1).astype(int)
        for index, (column, row) in enumerate(zip(columns, rows)):
            self.cells[self.cell_index(int(column), int(row))].append(index)

    def _forward_neighbours(self, column: int, row: int) -> Iterator[int]:
        """Cells right of and below a cell, so that every neighbouring pair is met once."""
        for near_row in (row, row + 1):
            if near_row >= self.rows:
                break
            start = column + 1 if near_row == row else column - 1
            for near_column in range(max(start, 0), min(column + 2, self.columns)):
                yield self.cell_index(near_column, near_row)


def _accumulate(
    system: ParticleSystem,
    table: np.ndarray,
    first: np.ndarray,
    second: np.ndarray,
    same_cell: bool,
    r_min: float,
    r_max: float,
    repulse: float,
) -> None:
    dx = system.pos_x[second][None, :] - system.pos_x[first][:, None]
    dy = system.pos_y[second][None, :] - system.pos_y[first][:, None]
    dist_sq = dx * dx + dy * dy
    mask = (dist_sq > 0.0) & (dist_sq < r_max * r_max)
    if same_cell:
        mask &= np.triu(np.ones(mask.shape, dtype=bool), k=1)
    i, j = np.nonzero(mask)
    if i.size == 0:
        return

    p1, p2 = first[i], second[j]
    d_sq = dist_sq[i, j]
    dist = np.sqrt(d_sq)
    dir_x = dx[i, j] / dist
    dir_y = dy[i, j] / dist
    color1, color2 = system.colors[p1], system.colors[p2]
    c1 = 2.0 * table[color1, color2] / (r_max - r_min)
    c2 = 2.0 * table[color2, color1] / (r_max - r_min)

    r_mid = (r_min + r_max) / 2.0
    close = d_sq < r_min * r_min
    middle = ~close & (d_sq < r_mid * r_mid)
    push = dist * (-repulse + repulse / r_min)
    on_first = np.where(close, push, np.where(middle, dist * c1, -c1))
    on_second = np.where(close, -push, np.where(middle, -dist * c2, c2))

    np.add.at(system.force_x, p1, on_first * dir_x)
    np.add.at(system.force_y, p1, on_first * dir_y)
    np.add.at(system.force_x, p2, on_second * dir_x)
    np.add.at(system.force_y, p2, on_second * dir_y)


def compute_forces(
    system: ParticleSystem,
    grid: SpatialGrid,
    matrix,
    r_min: float,
    r_max: float,
    repulse: float,
) -> None:
    """Reset and recompute the forces of all pairs closer than r_max, using the grid.

    Closer than r_min the pair repels, up to the mid radius the force grows
    with distance, and beyond it stays constant until r_max. The grid must be
    up to date and its cells no smaller than r_max for no pair to be missed.
    """
    table = np.asarray(matrix, dtype=float)
    system.force_x[:] = 0.0
    system.force_y[:] = 0.0
    for row in range(grid.rows):
        for column in range(grid.columns):
            own = grid.cells[grid.cell_index(column, row)]
            if not own:
                continue
            first = np.asarray(own, dtype=np.intp)
            _accumulate(system, table, first, first, True, r_min, r_max, repulse)
            for neighbour in grid._forward_neighbours(column, row):
                other = grid.cells[neighbour]
                if other:
                    second = np.asarray(other, dtype=np.intp)
                    _accumulate(system, table, first, second, False, r_min, r_max, repulse)