"""Particle record and the preset interaction matrices."""

from __future__ import annotations

import math
from dataclasses import dataclass

TYPE_COUNT = 3

Matrix = tuple[tuple[float, ...], ...]

_PRESETS: dict[int, Matrix] = {
    # Hunting
    1: (
        (0.0, 0.9, -0.5),
        (-0.9, 0.0, 0.9),
        (0.5, -0.9, 0.0),
    ),
    # Stratification
    2: (
        (1.0, -0.5, -0.5),
        (-0.5, 1.0, -0.5),
        (-0.5, -0.5, 1.0),
    ),
    # Chaos
    3: (
        (0.8, -0.6, 0.4),
        (0.2, 0.8, -0.7),
        (-0.5, 0.9, 0.5),
    ),
    # Alliances
    4: (
        (1.0, 1.0, -1.0),
        (1.0, 1.0, -1.0),
        (-1.0, -1.0, 1.0),
    ),
}

_ZERO_MATRIX: Matrix = tuple((0.0,) * TYPE_COUNT for _ in range(TYPE_COUNT))


@dataclass
class Particle:
    """A single particle: position, velocity, type and mass."""

    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    kind: int = 0
    mass: float = 1.0
    highlight_ticks: int = 0
    particle_id: int = 0

    @property
    def speed(self) -> float:
        """Magnitude of the velocity."""
        return math.hypot(self.vx, self.vy)


def interaction_matrix(mode: int) -> Matrix:
    """Return the interaction matrix of a preset; unknown modes give all zeros.

    ``matrix[a][b]`` is the force a particle of type ``a`` feels towards one of
    type ``b``: positive attracts, negative repels.
    """
    return _PRESETS.get(mode, _ZERO_MATRIX)