# MIT License (see LICENSE)
"""
Boundary reflection against the frame edges.

Each axis is handled independently. A body whose circle crosses an edge
is first clamped back inside, then its velocity component on that axis is
negated, so the corrective step can never tunnel past the frame.
"""
from __future__ import annotations

from ..types import Body


def reflect_walls(body: Body, width: float, height: float) -> bool:
    """
    Clamp a body inside [r, width - r] x [r, height - r] and reflect velocity.

    Args:
        body: Body to correct (modified in-place).
        width: Frame width in scene units.
        height: Frame height in scene units.

    Returns:
        True if any wall was hit.
    """
    r = body.radius
    hit = False
    for axis, extent in ((0, width), (1, height)):
        if body.position[axis] < r:
            body.position[axis] = r
            body.velocity[axis] = -body.velocity[axis]
            hit = True
        elif body.position[axis] > extent - r:
            body.position[axis] = extent - r
            body.velocity[axis] = -body.velocity[axis]
            hit = True
    return hit


def clamp_inside(body: Body, width: float, height: float) -> bool:
    """
    Clamp a body inside [r, width - r] x [r, height - r] without touching velocity.

    Used when a body's radius grows or it takes over the primary role after
    the wall pass of the current tick.

    Returns:
        True if the position changed.
    """
    r = body.radius
    moved = False
    for axis, extent in ((0, width), (1, height)):
        if body.position[axis] < r:
            body.position[axis] = r
            moved = True
        elif body.position[axis] > extent - r:
            body.position[axis] = extent - r
            moved = True
    return moved
