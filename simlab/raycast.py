"""Ray casting against bounded planes, and point masses in three dimensions."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

_EPSILON = 1e-9

Vector = Sequence[float]


def solve_3x3(a: Sequence[Sequence[float]], b: Vector) -> tuple[float, float, float]:
    """Solve a x = b by Gaussian elimination with partial pivoting.

    Raises ValueError when the matrix is singular.
    """
    if len(a) != 3 or any(len(row) != 3 for row in a) or len(b) != 3:
        raise ValueError("a must be 3x3 and b of length 3")
    rows = [[float(v) for v in row] + [float(rhs)] for row, rhs in zip(a, b)]

    for col in range(3):
        pivot = max(range(col, 3), key=lambda r: abs(rows[r][col]))
        if abs(rows[pivot][col]) < _EPSILON:
            raise ValueError("singular matrix")
        rows[col], rows[pivot] = rows[pivot], rows[col]
        for below in rows[col + 1 :]:
            factor = below[col] / rows[col][col]
            for k in range(col, 4):
                below[k] -= factor * rows[col][k]

    x = [0.0, 0.0, 0.0]
    for i in (2, 1, 0):
        value = rows[i][3] - sum(rows[i][j] * x[j] for j in range(i + 1, 3))
        x[i] = value / rows[i][i]
    return x[0], x[1], x[2]


@dataclass
class Plane:
    """A plane patch through ``point`` spanned by ``v1`` and ``v2``, with bounds on both parameters."""

    v1: Vector
    v2: Vector
    point: Vector
    bounds1: tuple[float, float]
    bounds2: tuple[float, float]

    def intersect(self, direction: Vector, origin: Vector) -> Optional[tuple[float, float, float]]:
        """Parameters (t, u, v) of the hit of a ray, or None if parallel or out of bounds.

        They solve t * direction + u * v1 + v * v2 = point - origin.
        """
        matrix = [[direction[i], self.v1[i], self.v2[i]] for i in range(3)]
        offset = [self.point[i] - origin[i] for i in range(3)]
        try:
            t, u, v = solve_3x3(matrix, offset)
        except ValueError:
            return None
        if u > self.bounds1[1] or u < self.bounds1[0]:
            return None
        if v > self.bounds2[1] or v < self.bounds2[0]:
            return None
        return t, u, v


def _divide(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def point_on_line(origin: Vector, direction: Vector, target: Vector) -> float:
    """Parameter s with origin + s * direction == target, or -1 if there is none."""
    s = _divide(target[0] - origin[0], direction[0])
    if s == _divide(target[1] - origin[1], direction[1]) and s == _divide(
        target[2] - origin[2], direction[2]
    ):
        return s
    return -1.0


def rotate_ray(i: float, k: float, depth: float, theta: Vector) -> tuple[float, float, float]:
    """Direction of the ray through screen point (i, k): yaw theta[0], then pitch theta[1]."""
    yaw, pitch = theta[0], theta[1]
    wx = math.cos(yaw) * i + math.sin(yaw) * depth
    wy = k
    wz = math.cos(yaw) * depth - math.sin(yaw) * i
    return (
        wx,
        wy * math.cos(pitch) - wz * math.sin(pitch),
        wy * math.sin(pitch) + wz * math.cos(pitch),
    )


def raycast(
    planes: Sequence[Plane], depth: float, size: int, origin: Vector, theta: Vector
) -> np.ndarray:
    """Render the planes seen from origin into a (size, size, 3) RGB image.

    A pixel hit in front of the camera is red, turned white where the
    integer plane coordinates fall inside the cardioid
    (u^2 + d^2)^2 + 400 u (u^2 + d^2) < 40000 d^2. Later planes overwrite earlier ones.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    image = np.zeros((size, size, 3), dtype=np.uint8)
    half = size // 2
    for i in range(-half, half):
        for k in range(-half, half):
            direction = rotate_ray(i, k, depth, theta)
            for plane in planes:
                hit = plane.intersect(direction, origin)
                if hit is None or hit[0] <= 0:
                    continue
                u, d = int(hit[1]), int(hit[2])
                radius = u * u + d * d
                inside = radius * radius + 400 * u * radius - 40000 * d * d < 0
                shade = 255 if inside else 0
                image[k + half, i + half] = (205, shade, shade)
    return image


@dataclass
class Particle3D:
    """A point mass in space with a velocity and an accumulated force."""

    x: float
    y: float
    z: float
    mass: float = 1.0
    vx: float = 0.0
    vy: float = 0.0
    vz: float = 0.0
    fx: float = 0.0
    fy: float = 0.0
    fz: float = 0.0

    def advance(self, time_step: float) -> None:
        """Move by the old velocity over time_step, then add force / mass to the velocity."""
        old = (self.vx, self.vy, self.vz)
        self.vx += self.fx / self.mass
        self.vy += self.fy / self.mass
        self.vz += self.fz / self.mass
        self.x += old[0] / time_step
        self.y += old[1] / time_step
        self.z += old[2] / time_step


def gravitate_3d(a: Particle3D, b: Particle3D, g: float) -> bool:
    """Add the mutual attraction m_a * m_b / (g * d^2) to both particles.

    The z component of the pull follows the y offset, not the z offset.
    Returns False, touching nothing, when the particles coincide.
    """
    dx, dy, dz = b.x - a.x, b.y - a.y, b.z - a.z
    dist = math.sqrt(dx * dx + dy * dy + dz * dz)
    if dist == 0:
        return False
    strength = a.mass * b.mass / (g * dist * dist)
    forces = (strength * dx / dist, strength * dy / dist, strength * dy / dist)
    a.fx += forces[0]
    a.fy += forces[1]
    a.fz += forces[2]
    b.fx -= forces[0]
    b.fy -= forces[1]
    b.fz -= forces[2]
    return True