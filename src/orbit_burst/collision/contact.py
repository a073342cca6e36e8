# MIT License (see LICENSE)
"""
Pairwise contact detection and absorbing resolution.

Two circles touch when the distance between their centers is at most the
sum of their radii. An approaching contact exchanges an equal-and-opposite
impulse along the collision normal, then the first body absorbs the second:

    n       = (p_b - p_a) / |p_b - p_a|
    s       = (v_b - v_a) . n            (s <= 0 means approaching)
    J       = 2 s / (m_a + m_b)
    v_a'    = v_a + J m_b n
    v_b'    = v_b - J m_a n
    m_a'    = m_a + m_b
    r_a'    = max(r_a, 5 sqrt(m_a'))

The tangential velocity component is untouched. Separating pairs are left
alone, which tolerates mild overlap once bodies recede.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from ..constants import RADIUS_PER_SQRT_MASS
from ..types import Body
from ..util import unit


@dataclass
class Contact:
    """
    Geometry of a detected contact between two bodies.

    Attributes:
        a: Surviving body (earlier in registry order).
        b: Body absorbed if the contact resolves.
        normal: Unit vector from a toward b. (1, 0) for coincident centers.
        normal_speed: Relative velocity (v_b - v_a) projected on the normal.
    """
    a: Body
    b: Body
    normal: np.ndarray
    normal_speed: float

    @property
    def approaching(self) -> bool:
        return self.normal_speed <= 0.0


def circle_circle_contact(a: Body, b: Body) -> Contact | None:
    """
    Detect overlap between two circles.

    Returns:
        A Contact if the circles touch or overlap, otherwise None.
    """
    d = b.position - a.position
    dist = float(np.hypot(d[0], d[1]))
    if dist > a.radius + b.radius:
        return None
    n = unit(d)
    rel_v = b.velocity - a.velocity
    return Contact(a=a, b=b, normal=n, normal_speed=float(np.dot(rel_v, n)))


def apply_impulse(c: Contact) -> float:
    """
    Exchange the mass-weighted normal impulse between the contact bodies.

    Returns:
        The impulse scalar J.
    """
    a, b, n = c.a, c.b, c.normal
    impulse = 2.0 * c.normal_speed / (a.mass + b.mass)
    a.velocity += impulse * b.mass * n
    b.velocity -= impulse * a.mass * n
    return impulse


def merged_radius(current: float, mass: float) -> float:
    """
    Radius after a merge: grows with sqrt(mass) but never shrinks.

    Light merges into a fresh fragment (total mass below 4) keep the old
    radius, so such a merge grows mass but not radius. This is intended.
    """
    return max(current, RADIUS_PER_SQRT_MASS * float(np.sqrt(mass)))


def absorb(a: Body, b: Body) -> None:
    """
    Fold b's mass into a and mark b as consumed.

    Position, velocity and color of the survivor are kept as they are.
    """
    a.mass += b.mass
    a.radius = merged_radius(a.radius, a.mass)
    b.alive = False


def resolve_contact(c: Contact) -> bool:
    """
    Resolve an approaching contact: impulse exchange then absorption.

    Returns:
        True if b was absorbed into a, False for a separating pair.
    """
    if not c.approaching:
        return False
    apply_impulse(c)
    absorb(c.a, c.b)
    return True
