"""Point masses under mutual attraction, with simple box and torus boundaries."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence


@dataclass
class Body:
    """A point mass in the plane with a velocity and an accumulated force."""

    x: float
    y: float
    mass: float = 1.0
    vx: float = 0.0
    vy: float = 0.0
    fx: float = 0.0
    fy: float = 0.0

    def advance(self, time_step: float = 1.0) -> None:
        """Move by the old velocity over time_step, then add force / mass to the velocity."""
        old_vx, old_vy = self.vx, self.vy
        self.vx += self.fx / self.mass
        self.vy += self.fy / self.mass
        self.x += old_vx / time_step
        self.y += old_vy / time_step


def gravitate(a: Body, b: Body, g: float) -> bool:
    """Add the mutual attraction m_a * m_b / (g * d^2) to both bodies.

    Returns False, touching nothing, when the bodies coincide.
    """
    dx = b.x - a.x
    dy = b.y - a.y
    dist = math.sqrt(dx * dx + dy * dy)
    if dist == 0:
        return False
    strength = a.mass * b.mass / (g * dist * dist)
    fx = strength * dx / dist
    fy = strength * dy / dist
    a.fx += fx
    a.fy += fy
    b.fx -= fx
    b.fy -= fy
    return True


def repulse(a: Body, b: Body) -> bool:
    """Stop both bodies when they are within unit distance; returns whether they were."""
    if math.hypot(a.x - b.x, a.y - b.y) <= 1:
        a.vx = a.vy = 0.0
        b.vx = b.vy = 0.0
        return True
    return False


def collide_box(
    body: Body, x_min: float, x_max: float, y_min: float, y_max: float, absorb: float
) -> None:
    """Scale the velocity by absorb once per axis on which the body is outside the box."""
    if body.x > x_max or body.x < x_min:
        body.vx *= absorb
        body.vy *= absorb
    if body.y > y_max or body.y < y_min:
        body.vx *= absorb
        body.vy *= absorb


def wrap_torus(body: Body, x_min: float, x_max: float, y_min: float, y_max: float) -> None:
    """Move a body that has left the box to the opposite edge."""
    if body.x > x_max:
        body.x = x_min
    if body.x < x_min:
        body.x = x_max
    if body.y > y_max:
        body.y = y_min
    if body.y < y_min:
        body.y = y_max


def simulate_step(
    bodies: Sequence[Body], g: float, time_step: float = 1.0, pairwise: bool = True
) -> None:
    """Accumulate forces over every ordered pair, advance every body and clear the forces.

    With ``pairwise`` every ordered pair attracts and then repulses at contact.
    Without it only pairs involving the last body attract, as around a single
    heavy attractor. Each unordered pair is visited in both orders.
    """
    count = len(bodies)
    last = count - 1
    for i, first in enumerate(bodies):
        for j, second in enumerate(bodies):
            if i == j:
                continue
            if pairwise:
                gravitate(first, second, g)
                repulse(first, second)
            elif i == last or j == last:
                gravitate(first, second, g)
    for body in bodies:
        body.advance(time_step)
        body.fx = 0.0
        body.fy = 0.0