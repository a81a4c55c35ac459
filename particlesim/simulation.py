"""Force-matrix particle simulation on a toroidal field, with optional random events."""

from __future__ import annotations

import dataclasses
import math
import random
from typing import Optional

from particlesim.particle import TYPE_COUNT, Matrix, Particle
from particlesim.statistics import Statistics

FRICTION = 0.1
BASE_SPEED_FACTOR = 0.1
EVENT_CHANCE = 0.01
HIGHLIGHT_TICKS = 5
SOFTENING = 0.01

_EVENT_REMOVE = 0
_EVENT_TYPE_CHANGE = 1
_EVENT_REPRODUCE = 2
_EVENT_TELEPORT = 3
_EVENT_MASS_CHANGE = 4
_EVENT_SPEED_JUMP = 5
_EVENT_SLEEP = 6


def _random_mass(rng: random.Random) -> float:
    return rng.uniform(1.0, 1.5)


def reset_particles(
    count: int, width: int, height: int, rng: Optional[random.Random] = None
) -> list[Particle]:
    """Create ``count`` resting particles at random places, of random type and mass."""
    rng = rng or random.Random()
    return [
        Particle(
            x=rng.uniform(0, width),
            y=rng.uniform(0, height),
            kind=rng.randint(0, TYPE_COUNT - 1),
            mass=_random_mass(rng),
            particle_id=i,
        )
        for i in range(count)
    ]


def _apply_event(
    event: int,
    p: Particle,
    particles: list[Particle],
    width: int,
    height: int,
    rng: random.Random,
) -> None:
    if event == _EVENT_TYPE_CHANGE:
        p.kind = rng.randint(0, TYPE_COUNT - 1)
    elif event == _EVENT_REPRODUCE:
        shift_x = rng.uniform(-1.0, 1.0)
        shift_y = rng.uniform(-1.0, 1.0)
        child = dataclasses.replace(
            p,
            x=p.x + shift_x,
            y=p.y + shift_y,
            mass=_random_mass(rng),
            vx=0.0,
            vy=0.0,
            highlight_ticks=HIGHLIGHT_TICKS,
            particle_id=len(particles),
        )
        particles.append(child)
    elif event == _EVENT_TELEPORT:
        p.x = rng.random() * width
        p.y = rng.random() * height
    elif event == _EVENT_MASS_CHANGE:
        p.mass = _random_mass(rng)
    elif event == _EVENT_SPEED_JUMP:
        p.vx = rng.uniform(-1.0, 1.0) * 2.0
        p.vy = rng.uniform(-1.0, 1.0) * 2.0
    elif event == _EVENT_SLEEP:
        p.vx = 0.0
        p.vy = 0.0
    p.highlight_ticks = HIGHLIGHT_TICKS


def _acceleration(
    p: Particle, particles: list[Particle], width: int, height: int, matrix: Matrix
) -> tuple[float, float]:
    half_w = width // 2
    half_h = height // 2
    row = matrix[p.kind]
    ax = ay = 0.0
    for other in particles:
        if other is p:
            continue
        dx = other.x - p.x
        dy = other.y - p.y
        if dx > half_w:
            dx -= width
        elif dx < -half_w:
            dx += width
        if dy > half_h:
            dy -= height
        elif dy < -half_h:
            dy += height
        dist_sq = dx * dx + dy * dy + SOFTENING
        dist = math.sqrt(dist_sq)
        accel = row[other.kind] * other.mass / dist_sq
        ax += accel * dx / dist
        ay += accel * dy / dist
    return ax, ay


def simulate(
    particles: list[Particle],
    width: int,
    height: int,
    matrix: Matrix,
    enable_random_events: bool = False,
    stats: Optional[Statistics] = None,
    rng: Optional[random.Random] = None,
) -> None:
    """Advance ``particles`` by one step in place.

    Particles are updated one after another, each seeing the already moved
    earlier ones. With random events on, particles may vanish or reproduce
    during the step; children appended are processed in the same step.
    """
    rng = rng or random.Random()
    stats = stats if stats is not None else Statistics()

    i = 0
    while i < len(particles):
        p = particles[i]

        if enable_random_events and rng.random() < EVENT_CHANCE:
            event = rng.randint(0, 6)
            stats.total_random_events += 1
            stats.record_random_event(p.particle_id)
            stats.increment_event_count(event)
            if event == _EVENT_REMOVE:
                del particles[i]
                continue
            _apply_event(event, p, particles, width, height, rng)

        ax, ay = _acceleration(p, particles, width, height, matrix)
        p.vx = (p.vx + ax * BASE_SPEED_FACTOR) * (1.0 - FRICTION)
        p.vy = (p.vy + ay * BASE_SPEED_FACTOR) * (1.0 - FRICTION)
        p.x += p.vx
        p.y += p.vy

        if p.x < 0:
            p.x += width
        if p.x >= width:
            p.x -= width
        if p.y < 0:
            p.y += height
        if p.y >= height:
            p.y -= height

        if p.highlight_ticks > 0:
            p.highlight_ticks -= 1
        i += 1