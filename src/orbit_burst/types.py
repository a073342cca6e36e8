# MIT License (see LICENSE)
"""
Core type definitions for the particle simulation.

Defines the fundamental data structures:
- Body: the only simulated entity, a circle with kinematic state,
  mass and orbital parameters.
- BodyView: an immutable per-frame snapshot of a body for renderers.

Motion is discrete with an implicit timestep of one tick:
  x(t+1) = x(t) + v(t)
  v(t+1) = DAMPING * v(t)   (plus wall reflections and collision impulses)
"""
from __future__ import annotations
from dataclasses import dataclass, field

import numpy as np

from .util import f64


@dataclass(eq=False)
class Body:
    """
    A circular body with kinematic, collision and orbital state.

    Attributes:
        position: Center [x, y] in scene units.
        velocity: Linear velocity [vx, vy] in scene units per tick.
        radius: Collision and render radius. Grows when the body absorbs another.
        mass: Mass used for impulse exchange and merge growth. Must be > 0.
        color: Render color as an (r, g, b) triple of ints in [0, 255].
        orbit_radius: Distance kept from the primary body. Ignored for the primary.
        orbit_angle: Current angle around the primary in radians.
        id: Stable handle assigned by Scene.add_body().
        alive: Cleared when the body is absorbed during a collision pass.

    Note:
        For satellites the velocity is only a collision-response quantity.
        It is integrated, reflected and damped every tick like any other
        body, but the orbit update overwrites the resulting position.
        Bodies compare by identity.
    """
    position: np.ndarray | tuple[float, float] = (0.0, 0.0)
    velocity: np.ndarray | tuple[float, float] = (0.0, 0.0)
    radius: float = 10.0
    mass: float = 1.0
    color: tuple[int, int, int] = (255, 255, 255)
    orbit_radius: float = 0.0
    orbit_angle: float = 0.0

    # Runtime state (not user-specified)
    id: int = -1
    alive: bool = field(default=True, repr=False)

    def __post_init__(self) -> None:
        """Convert position/velocity to float64 arrays and validate size."""
        self.position = f64(self.position)
        self.velocity = f64(self.velocity)
        self.radius = float(self.radius)
        self.mass = float(self.mass)
        if self.mass <= 0:
            raise ValueError(f"Body mass must be positive, got {self.mass}")
        if self.radius <= 0:
            raise ValueError(f"Body radius must be positive, got {self.radius}")

    def contains(self, point: tuple[float, float] | np.ndarray) -> bool:
        """True if the point lies inside or on the body's circle."""
        dx = point[0] - self.position[0]
        dy = point[1] - self.position[1]
        return dx * dx + dy * dy <= self.radius * self.radius

    def view(self) -> "BodyView":
        """Freeze the render-relevant state of this body."""
        return BodyView(
            id=self.id,
            position=(float(self.position[0]), float(self.position[1])),
            radius=self.radius,
            color=self.color,
        )


@dataclass(frozen=True)
class BodyView:
    """
    Read-only render snapshot of a body.

    Renderers draw a filled circle of `radius` at `position` in `color`.
    """
    id: int
    position: tuple[float, float]
    radius: float
    color: tuple[int, int, int]
