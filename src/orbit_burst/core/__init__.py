# MIT License (see LICENSE)
"""
Core per-tick simulation components.

This subpackage provides:
    - Integration: explicit Euler position update.
    - Forces: uniform velocity damping.
    - Orbits: satellite placement around the primary.
    - Fragmentation: settling detection and fragment rings.
    - Invariants: mass, energy and momentum diagnostics.

Typical usage:
    from orbit_burst.core import euler_step, apply_damping

    euler_step(body)
    apply_damping(body)
"""
from .integrators import euler_step
from .forces import apply_damping
from .orbits import orbit_position, advance_orbits
from .fragmentation import is_settled, make_fragments, explosion_distance
from .invariants import total_mass, kinetic_energy, linear_momentum

__all__ = [
    # Integration
    "euler_step",
    "apply_damping",
    # Orbits
    "orbit_position",
    "advance_orbits",
    # Fragmentation
    "is_settled",
    "make_fragments",
    "explosion_distance",
    # Diagnostics
    "total_mass",
    "kinetic_energy",
    "linear_momentum",
]
