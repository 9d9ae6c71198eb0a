"""Particle life: coloured particles attracting and repelling each other by colour pair."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional, Sequence


@dataclass
class Particle:
    """A point particle with a colour, a velocity and an accumulated force."""

    x: float
    y: float
    color: int = 0
    vx: float = 0.0
    vy: float = 0.0
    fx: float = 0.0
    fy: float = 0.0

    def advance(self, time_step: float) -> None:
        """Move by the old velocity, then add the force to the velocity, both scaled by 1/time_step."""
        old_vx, old_vy = self.vx, self.vy
        self.vx += self.fx / time_step
        self.vy += self.fy / time_step
        self.x += old_vx / time_step
        self.y += old_vy / time_step


def interact(
    a: Particle,
    b: Particle,
    r_min: float,
    r_max: float,
    matrix: Sequence[Sequence[float]],
    repulse: float,
) -> bool:
    """Apply the colour-dependent force between two particles.

    Returns False, touching nothing, when the particles coincide or are at
    least ``r_max`` apart. Forces on ``b`` accumulate; the attraction terms
    replace the force held by ``a`` rather than adding to it, and the
    long-range term is applied to every pair closer than the mid radius.
    """
    dx = b.x - a.x
    dy = b.y - a.y
    dist = math.sqrt(dx * dx + dy * dy)
    if dist == 0 or dist >= r_max:
        return False
    gx = dx / dist
    gy = dy / dist
    c1 = 2.0 * matrix[a.color][b.color] / (r_max - r_min)
    c2 = 2.0 * matrix[b.color][a.color] / (r_max - r_min)
    mid = (r_min + r_max) / 2.0

    if dist < r_min:
        push = dist * (-repulse + repulse / r_min)
        a.fx += push * gx
        a.fy += push * gy
        b.fx -= push * gx
        b.fy -= push * gy
    if r_min < dist < mid:
        a.fx = dist * c1 * gx
        a.fy = dist * c1 * gy
        b.fx -= dist * c2 * gx
        b.fy -= dist * c2 * gy
    if dist < mid and dist < r_max:
        a.fx = -c1 * gx
        a.fy = -c1 * gy
        b.fx += c2 * gx
        b.fy += c2 * gy
    return True


def random_interaction_matrix(colors: int, rng: Optional[random.Random] = None) -> list[list[float]]:
    """A colors x colors table of strengths drawn from -2.00, -1.96, ..., 1.96."""
    if colors < 0:
        raise ValueError("colors must not be negative")
    rng = rng or random.Random()
    return [[-2.0 + 4.0 * rng.randrange(100) / 100.0 for _ in range(colors)] for _ in range(colors)]


def particle_color(color: int) -> tuple[int, int, int]:
    """Drawing colour of a particle: green for 0, red for 1, blue for 2, black otherwise."""
    return (255 * (color == 1), 255 * (color == 0), 255 * (color == 2))