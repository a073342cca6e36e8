# MIT License (see LICENSE)
"""
Orbital positioning of satellites around the primary body.

Satellites do not free-fly: after integration and collisions each tick,
every non-primary body is placed on its circle around the primary,
    p = p_primary + R (cos θ, sin θ)
and its angle advances by a constant ORBIT_ANGULAR_STEP, independent of
mass or size.
"""
from __future__ import annotations
import math

import numpy as np

from ..constants import ORBIT_ANGULAR_STEP
from ..types import Body


def orbit_position(center: np.ndarray, orbit_radius: float, angle: float) -> np.ndarray:
    """Point at `angle` on the circle of `orbit_radius` around `center`."""
    return np.array(
        [center[0] + orbit_radius * math.cos(angle),
         center[1] + orbit_radius * math.sin(angle)],
        dtype=np.float64,
    )


def advance_orbits(bodies: list[Body], primary: Body, step: float = ORBIT_ANGULAR_STEP) -> None:
    """
    Place every satellite on its orbit, then advance its angle.

    Args:
        bodies: Registry; the primary itself is skipped.
        primary: Body the satellites orbit.
        step: Angle increment in radians per tick.
    """
    center = primary.position
    for b in bodies:
        if b is primary or not b.alive:
            continue
        b.position = orbit_position(center, b.orbit_radius, b.orbit_angle)
        b.orbit_angle += step
