# MIT License (see LICENSE)
"""
Pairwise collision pass over the body registry.

Every unordered pair (i, j) with i < j is tested once per tick, in
registry order. Absorbed bodies are tombstoned (alive = False) during the
scan and skipped by every later pair; the registry is compacted once at
the end of the pass, so indices stay stable while iterating.

Because the survivor grows as soon as it absorbs, a body may swallow
several neighbours in one pass.
"""
from __future__ import annotations
from dataclasses import dataclass
import logging

from ..types import Body
from .contact import circle_circle_contact, resolve_contact

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Merge:
    """Record of one absorption: `absorbed_id` was folded into `survivor_id`."""
    survivor_id: int
    absorbed_id: int


def resolve_collisions(bodies: list[Body]) -> list[Merge]:
    """
    Detect and resolve all contacts, then drop absorbed bodies.

    Args:
        bodies: Registry in iteration order (compacted in-place).

    Returns:
        Merges in the order they happened.
    """
    merges: list[Merge] = []
    n = len(bodies)
    for i in range(n):
        a = bodies[i]
        if not a.alive:
            continue
        for j in range(i + 1, n):
            b = bodies[j]
            if not b.alive:
                continue
            c = circle_circle_contact(a, b)
            if c is not None and resolve_contact(c):
                merges.append(Merge(survivor_id=a.id, absorbed_id=b.id))
                logger.debug(
                    "body %d absorbed body %d (mass=%.1f radius=%.2f)",
                    a.id, b.id, a.mass, a.radius,
                )

    if merges:
        bodies[:] = [b for b in bodies if b.alive]
    return merges
