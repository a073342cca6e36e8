# MIT License (see LICENSE)
"""
Collision detection and resolution subsystem.

This subpackage provides:
    - Walls: clamp-then-reflect against the frame edges.
    - Contact: circle overlap test, impulse exchange and absorbing merge.
    - Resolver: the once-per-tick pairwise pass with mark-and-compact removal.

Typical usage:
    from orbit_burst.collision import resolve_collisions

    merges = resolve_collisions(scene.bodies)
    for m in merges:
        print(m.survivor_id, "absorbed", m.absorbed_id)
"""
from .walls import reflect_walls, clamp_inside
from .contact import (
    Contact,
    circle_circle_contact,
    apply_impulse,
    absorb,
    merged_radius,
    resolve_contact,
)
from .resolver import Merge, resolve_collisions

__all__ = [
    # Walls
    "reflect_walls",
    "clamp_inside",
    # Contact
    "Contact",
    "circle_circle_contact",
    "apply_impulse",
    "absorb",
    "merged_radius",
    "resolve_contact",
    # Resolver
    "Merge",
    "resolve_collisions",
]
