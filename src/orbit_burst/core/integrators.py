# MIT License (see LICENSE)
"""
Time stepping for body kinematics.

The simulation uses a fixed implicit timestep of one tick, so explicit
Euler reduces to adding the velocity to the position:
    x(t+1) = x(t) + v(t)

Reference:
    https://en.wikipedia.org/wiki/Euler_method
"""
from __future__ import annotations

from ..types import Body


def euler_step(body: Body) -> None:
    """
    Advance body position by one tick (modified in-place).

    Velocity is left untouched; damping and reflection are applied
    separately so the order of the per-body update stays explicit.
    """
    body.position += body.velocity
