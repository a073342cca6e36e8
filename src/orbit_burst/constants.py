# MIT License (see LICENSE)
"""
Fixed constants used throughout the simulation.

All quantities are in scene units (pixels) and ticks. A tick is the
implicit timestep of one Scene.step() call, so velocities are in
pixels per tick and angular rates in radians per tick.
"""
from __future__ import annotations

# Velocity multiplier applied to every body once per tick (ambient drag).
DAMPING: float = 0.99

# A body counts as settled when both velocity components are within this bound.
SETTLE_THRESHOLD: float = 0.1

# Angular velocity of every satellite around the primary, rad/tick.
ORBIT_ANGULAR_STEP: float = 0.05

# Merged radius is RADIUS_PER_SQRT_MASS * sqrt(total mass).
RADIUS_PER_SQRT_MASS: float = 5.0

# Fragmentation
FRAGMENT_COUNT: int = 10
FRAGMENT_RADIUS: float = 10.0
FRAGMENT_SPEED_RANGE: tuple[int, int] = (-5, 5)   # [low, high) per axis
FRAGMENT_MASS_RANGE: tuple[int, int] = (1, 10)    # [low, high)
EXPLOSION_DISTANCE_FACTOR: float = 2.5
ORBIT_DISTANCE_FACTOR: float = 2.0
INITIAL_EXPLOSION_MULTIPLIER: float = 1.0
EXPLOSION_MULTIPLIER: float = 1.5

# Seed body placed at the frame center before the first explosion.
SEED_RADIUS: float = 50.0
SEED_MASS: float = 1000.0
SEED_COLOR: tuple[int, int, int] = (255, 0, 0)
SEED_ORBIT_RADIUS: float = 200.0

# Default frame size used when the host has not reported one yet.
DEFAULT_WIDTH: float = 2024.0
DEFAULT_HEIGHT: float = 768.0

# Collision normal used when two centers coincide exactly.
FALLBACK_NORMAL: tuple[float, float] = (1.0, 0.0)
