import math

import pytest

from particlesim.particle import TYPE_COUNT, Particle, interaction_matrix


def test_hunting_preset_rows():
    matrix = interaction_matrix(1)
    assert matrix[0] == (0.0, 0.9, -0.5)
    assert matrix[1] == (-0.9, 0.0, 0.9)
    assert matrix[2] == (0.5, -0.9, 0.0)


def test_stratification_preset_self_attraction():
    matrix = interaction_matrix(2)
    for a in range(TYPE_COUNT):
        for b in range(TYPE_COUNT):
            assert matrix[a][b] == (1.0 if a == b else -0.5)


def test_alliances_preset_is_symmetric():
    matrix = interaction_matrix(4)
    for a in range(TYPE_COUNT):
        for b in range(TYPE_COUNT):
            assert matrix[a][b] == matrix[b][a]


def test_chaos_preset_value():
    assert interaction_matrix(3)[1][2] == -0.7


@pytest.mark.parametrize("mode", [0, 5, -1, 100])
def test_unknown_mode_is_zero(mode):
    matrix = interaction_matrix(mode)
    assert len(matrix) == TYPE_COUNT
    assert all(len(row) == TYPE_COUNT for row in matrix)
    assert all(value == 0.0 for row in matrix for value in row)


@pytest.mark.parametrize("mode", [1, 2, 3, 4])
def test_presets_are_square(mode):
    matrix = interaction_matrix(mode)
    assert len(matrix) == TYPE_COUNT
    assert all(len(row) == TYPE_COUNT for row in matrix)


def test_particle_defaults():
    p = Particle(1.5, 2.5)
    assert (p.vx, p.vy) == (0.0, 0.0)
    assert p.kind == 0
    assert p.mass == 1.0
    assert p.highlight_ticks == 0
    assert p.particle_id == 0


def test_particle_speed_matches_hypot():
    p = Particle(0.0, 0.0, vx=-0.3, vy=0.7)
    assert p.speed == pytest.approx(math.hypot(-0.3, 0.7))


def test_particle_speed_zero_when_still():
    assert Particle(4.0, 4.0).speed == 0.0