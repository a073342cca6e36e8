# MIT License (see LICENSE)
"""
Velocity modifiers applied once per tick.

The only ambient effect is uniform damping, a per-tick multiplicative
drag on both velocity axes:
    v(t+1) = c * v(t)
so that fragments slow down and the scene eventually settles.
"""
from __future__ import annotations

from ..constants import DAMPING
from ..types import Body


def apply_damping(body: Body, factor: float = DAMPING) -> None:
    """
    Scale body velocity by `factor` on both axes.

    Args:
        body: Body to damp (modified in-place).
        factor: Per-tick velocity multiplier. 1.0 disables damping.
    """
    body.velocity *= factor
