import math
import random

from particlesim.group import MAX_SPEED, init_group, update_group
from particlesim.particle import Particle


def test_init_group_ranges():
    particles = init_group(100, 30, 12, random.Random(4))
    assert [p.particle_id for p in particles] == list(range(100))
    for p in particles:
        assert 0 <= p.x <= 29
        assert 0 <= p.y <= 11
        assert p.mass == 1.0
        assert p.kind in (0, 1, 2)
        assert (p.vx, p.vy) == (0.0, 0.0)


def test_init_group_deterministic():
    first = init_group(10, 20, 20, random.Random(9))
    second = init_group(10, 20, 20, random.Random(9))
    assert len(first) == 10
    assert len(second) == 10
    first_state = [(p.x, p.y, p.kind, p.particle_id) for p in first]
    second_state = [(p.x, p.y, p.kind, p.particle_id) for p in second]
    assert first_state == second_state
    assert [state[3] for state in first_state] == list(range(10))


def test_same_type_attracts():
    a = Particle(10.0, 10.0, kind=1)
    b = Particle(14.0, 10.0, kind=1)
    update_group([a, b], 50, 50)
    assert a.x > 10.0
    assert b.x < 14.0


def test_different_types_repel():
    a = Particle(10.0, 10.0, kind=0)
    b = Particle(14.0, 10.0, kind=2)
    update_group([a, b], 50, 50)
    assert a.x < 10.0
    assert b.x > 14.0


def test_speed_is_capped_and_positions_stay_inside():
    particles = init_group(40, 20, 10, random.Random(2))
    for _ in range(20):
        update_group(particles, 20, 10)
        for p in particles:
            assert math.hypot(p.vx, p.vy) <= MAX_SPEED + 1e-9
            assert 0 <= p.x <= 19
            assert 0 <= p.y <= 9


def test_wall_bounce():
    p = Particle(0.2, 5.0, vx=-0.4)
    update_group([p], 20, 20)
    assert p.x == 0.0
    assert p.vx == 0.4


def test_lone_particle_at_rest_stays():
    p = Particle(3.0, 4.0)
    update_group([p], 20, 20)
    assert (p.x, p.y, p.vx, p.vy) == (3.0, 4.0, 0.0, 0.0)