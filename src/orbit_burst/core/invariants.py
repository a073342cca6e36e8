# MIT License (see LICENSE)
"""
Diagnostics over the body registry.

Merges conserve total mass exactly; kinetic energy and momentum are not
conserved here (damping, absorption and orbit placement all change them)
but are handy for watching a run settle.
"""
from __future__ import annotations
import numpy as np

from ..types import Body


def total_mass(bodies: list[Body]) -> float:
    """M = Σ m"""
    return float(sum(b.mass for b in bodies))


def kinetic_energy(bodies: list[Body]) -> float:
    """
    Total translational kinetic energy.

    T = Σ 0.5 * m * v²
    """
    ke = 0.0
    for b in bodies:
        ke += 0.5 * b.mass * float(np.dot(b.velocity, b.velocity))
    return ke


def linear_momentum(bodies: list[Body]) -> np.ndarray:
    """
    Total linear momentum.

    P = Σ m * v
    """
    p = np.zeros(2, dtype=np.float64)
    for b in bodies:
        p += b.mass * b.velocity
    return p
