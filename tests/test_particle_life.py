import random

import pytest

from simlab.particle_life import (
    Particle,
    interact,
    particle_color,
    random_interaction_matrix,
)

R_MIN = 5.0
R_MAX = 300.0
REPULSE = 10.0
POSITIVE = [[1.0, 1.0], [1.0, 1.0]]


def test_advance_uses_old_velocity_for_position():
    p = Particle(x=10.0, y=20.0, vx=4.0, vy=-2.0, fx=1.0, fy=3.0)
    p.advance(2.0)
    assert (p.x, p.y) == (12.0, 19.0)
    assert (p.vx, p.vy) == (4.5, -0.5)


def test_advance_without_force_keeps_velocity_and_direction():
    p = Particle(x=0.0, y=0.0, vx=3.0, vy=1.0)
    for _ in range(5):
        p.advance(100.0)
    assert (p.vx, p.vy) == (3.0, 1.0)
    assert p.x / p.y == pytest.approx(3.0)


def test_advance_without_velocity_keeps_position():
    p = Particle(x=7.0, y=8.0, fx=2.0, fy=-2.0)
    p.advance(4.0)
    assert (p.x, p.y) == (7.0, 8.0)
    assert p.vx == -p.vy


def test_coincident_particles_do_not_interact():
    a = Particle(x=5.0, y=5.0)
    b = Particle(x=5.0, y=5.0)
    assert interact(a, b, R_MIN, R_MAX, POSITIVE, REPULSE) is False
    assert (a.fx, a.fy, b.fx, b.fy) == (0.0, 0.0, 0.0, 0.0)


def test_particles_at_r_max_do_not_interact():
    a = Particle(x=0.0, y=0.0)
    b = Particle(x=R_MAX, y=0.0)
    assert interact(a, b, R_MIN, R_MAX, POSITIVE, REPULSE) is False
    assert (a.fx, b.fx) == (0.0, 0.0)


def test_long_range_force_is_equal_and_opposite():
    a = Particle(x=0.0, y=0.0)
    b = Particle(x=200.0, y=0.0)
    assert interact(a, b, R_MIN, R_MAX, POSITIVE, REPULSE) is True
    assert a.fx == pytest.approx(-b.fx)
    assert a.fx < 0
    assert a.fy == 0.0 and b.fy == 0.0


def test_long_range_force_does_not_depend_on_distance():
    near_a, near_b = Particle(x=0.0, y=0.0), Particle(x=160.0, y=0.0)
    far_a, far_b = Particle(x=0.0, y=0.0), Particle(x=290.0, y=0.0)
    interact(near_a, near_b, R_MIN, R_MAX, POSITIVE, REPULSE)
    interact(far_a, far_b, R_MIN, R_MAX, POSITIVE, REPULSE)
    assert near_a.fx == pytest.approx(far_a.fx)
    assert near_b.fx == pytest.approx(far_b.fx)


def test_force_on_first_is_replaced_and_on_second_accumulated():
    fresh_a, fresh_b = Particle(x=0.0, y=0.0), Particle(x=100.0, y=0.0)
    loaded_a = Particle(x=0.0, y=0.0, fx=50.0)
    loaded_b = Particle(x=100.0, y=0.0, fx=50.0)
    interact(fresh_a, fresh_b, R_MIN, R_MAX, POSITIVE, REPULSE)
    interact(loaded_a, loaded_b, R_MIN, R_MAX, POSITIVE, REPULSE)
    assert loaded_a.fx == pytest.approx(fresh_a.fx)
    assert loaded_b.fx - fresh_b.fx == pytest.approx(50.0)


def test_force_follows_direction_between_particles():
    a = Particle(x=0.0, y=0.0)
    b = Particle(x=120.0, y=160.0)
    interact(a, b, R_MIN, R_MAX, POSITIVE, REPULSE)
    assert a.fy / a.fx == pytest.approx(160.0 / 120.0)
    assert b.fy / b.fx == pytest.approx(160.0 / 120.0)


def test_asymmetric_matrix_uses_each_colour_pair():
    matrix = [[0.0, 1.0], [-1.0, 0.0]]
    a = Particle(x=0.0, y=0.0, color=0)
    b = Particle(x=200.0, y=0.0, color=1)
    interact(a, b, R_MIN, R_MAX, matrix, REPULSE)
    assert a.fx < 0
    assert b.fx < 0
    assert a.fx == pytest.approx(b.fx)


def test_random_matrix_shape_and_range():
    matrix = random_interaction_matrix(3, random.Random(1))
    assert len(matrix) == 3
    assert all(len(row) == 3 for row in matrix)
    values = [v for row in matrix for v in row]
    assert all(-2.0 <= v <= 1.96 + 1e-12 for v in values)
    assert all(abs(v * 25 - round(v * 25)) < 1e-9 for v in values)


def test_random_matrix_is_reproducible():
    first = random_interaction_matrix(4, random.Random(42))
    second = random_interaction_matrix(4, random.Random(42))
    assert first == second


def test_random_matrix_rejects_negative_size():
    with pytest.raises(ValueError):
        random_interaction_matrix(-1, random.Random(0))


@pytest.mark.parametrize(
    "color, expected",
    [(0, (0, 255, 0)), (1, (255, 0, 0)), (2, (0, 0, 255)), (3, (0, 0, 0))],
)
def test_particle_color(color, expected):
    assert particle_color(color) == expected