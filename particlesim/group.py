"""Grouping preset: like types cluster, unlike types drift apart, walls bounce."""

from __future__ import annotations

import math
import random
from typing import Optional

from particlesim.particle import TYPE_COUNT, Particle

GROUP_ATTRACT_STRENGTH = 0.1
GROUP_REPEL_STRENGTH = 0.02
MIN_DISTANCE = 1e-3
MAX_SPEED = 0.5
PARTICLE_RADIUS = 0.5


def init_group(
    count: int, width: int, height: int, rng: Optional[random.Random] = None
) -> list[Particle]:
    """Create ``count`` resting unit-mass particles inside the field."""
    rng = rng or random.Random()
    return [
        Particle(
            x=rng.uniform(0.0, float(width - 1)),
            y=rng.uniform(0.0, float(height - 1)),
            kind=rng.randint(0, TYPE_COUNT - 1),
            mass=1.0,
            particle_id=i,
        )
        for i in range(count)
    ]


def _force_on(p: Particle, particles: list[Particle]) -> tuple[float, float]:
    fx = fy = 0.0
    for other in particles:
        if other is p:
            continue
        dx = other.x - p.x
        dy = other.y - p.y
        dist_sq = max(dx * dx + dy * dy, MIN_DISTANCE)
        dist = math.sqrt(dist_sq)
        nx = dx / dist
        ny = dy / dist
        inv_dist_sq = 1.0 / dist_sq

        if p.kind == other.kind:
            fx += GROUP_ATTRACT_STRENGTH * nx * inv_dist_sq
            fy += GROUP_ATTRACT_STRENGTH * ny * inv_dist_sq
        else:
            fx -= GROUP_REPEL_STRENGTH * nx * inv_dist_sq
            fy -= GROUP_REPEL_STRENGTH * ny * inv_dist_sq

        if dist < 2 * PARTICLE_RADIUS:
            overlap = 2 * PARTICLE_RADIUS - dist
            fx -= GROUP_REPEL_STRENGTH * nx * overlap * 10.0
            fy -= GROUP_REPEL_STRENGTH * ny * overlap * 10.0
    return fx, fy


def update_group(particles: list[Particle], width: int, height: int) -> None:
    """Advance the grouping preset by one step in place."""
    for p in particles:
        fx, fy = _force_on(p, particles)
        p.vx += fx
        p.vy += fy
        speed = math.hypot(p.vx, p.vy)
        if speed > MAX_SPEED:
            p.vx = p.vx / speed * MAX_SPEED
            p.vy = p.vy / speed * MAX_SPEED

    for p in particles:
        p.x += p.vx
        p.y += p.vy
        if p.x < 0:
            p.x = 0.0
            p.vx = -p.vx
        if p.y < 0:
            p.y = 0.0
            p.vy = -p.vy
        if p.x > width - 1:
            p.x = float(width - 1)
            p.vx = -p.vx
        if p.y > height - 1:
            p.y = float(height - 1)
            p.vy = -p.vy