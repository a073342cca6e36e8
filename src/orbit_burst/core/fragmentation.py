# MIT License (see LICENSE)
"""
Settling detection and fragment generation.

The scene is settled when every body has |vx| <= SETTLE_THRESHOLD and
|vy| <= SETTLE_THRESHOLD. A settled scene explodes one body into a ring of
FRAGMENT_COUNT fragments that all start at the seed's position:

    explosion_distance = r_seed * 2.5 * multiplier
    orbit_radius       = 2 * explosion_distance
    orbit_angle_i      = 2π i / FRAGMENT_COUNT

Fragment velocity and mass are integer draws with exclusive upper bounds,
which keeps fragment energy bounded.
"""
from __future__ import annotations
import math

import numpy as np

from ..constants import (
    EXPLOSION_DISTANCE_FACTOR,
    FRAGMENT_COUNT,
    FRAGMENT_MASS_RANGE,
    FRAGMENT_RADIUS,
    FRAGMENT_SPEED_RANGE,
    ORBIT_DISTANCE_FACTOR,
    SETTLE_THRESHOLD,
)
from ..types import Body
from ..util import random_color


def is_settled(bodies: list[Body], threshold: float = SETTLE_THRESHOLD) -> bool:
    """True if no body has a velocity component above `threshold` in magnitude."""
    for b in bodies:
        if abs(b.velocity[0]) > threshold or abs(b.velocity[1]) > threshold:
            return False
    return True


def explosion_distance(seed: Body, multiplier: float) -> float:
    return seed.radius * EXPLOSION_DISTANCE_FACTOR * multiplier


def make_fragments(seed: Body, multiplier: float, rng: np.random.Generator) -> list[Body]:
    """
    Build the fragment ring for an exploding body.

    The seed itself is not touched; removing it from the registry is the
    caller's job.

    Args:
        seed: Body being exploded.
        multiplier: Scales the explosion distance (1.0 at startup, 1.5 afterwards).
        rng: Random source for velocity, mass and color draws.

    Returns:
        FRAGMENT_COUNT new unregistered bodies.
    """
    orbit_radius = explosion_distance(seed, multiplier) * ORBIT_DISTANCE_FACTOR
    lo_v, hi_v = FRAGMENT_SPEED_RANGE
    lo_m, hi_m = FRAGMENT_MASS_RANGE

    fragments = []
    for i in range(FRAGMENT_COUNT):
        vx, vy = rng.integers(lo_v, hi_v, size=2)
        fragments.append(Body(
            position=seed.position.copy(),
            velocity=(float(vx), float(vy)),
            radius=FRAGMENT_RADIUS,
            mass=float(rng.integers(lo_m, hi_m)),
            color=random_color(rng),
            orbit_radius=orbit_radius,
            orbit_angle=2 * math.pi * i / FRAGMENT_COUNT,
        ))
    return fragments
