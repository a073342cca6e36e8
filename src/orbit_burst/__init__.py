# MIT License (see LICENSE)
"""
orbit_burst - an interactive 2D particle simulation core.

Circular bodies move with damped Euler kinematics, bounce off the frame,
merge on collision, orbit a primary body, and explode into a ring of
fragments whenever the scene settles.

Main entry points:
    - Scene: The body registry and per-tick step.
    - Body: A simulated circle.
    - BodyView: Read-only render snapshot of a body.
    - DragController: Maps pointer gestures to primary position overrides.

Submodules:
    - collision: Wall reflection and absorbing pairwise collisions.
    - core: Integration, damping, orbits, fragmentation, diagnostics.
    - renderer: Optional visualization adapters.

Example:
    from orbit_burst import Scene

    scene = Scene(width=800, height=600, seed=1)
    scene.populate()
    for _ in range(1000):
        scene.step()
    frame = scene.snapshot()
"""
from .scene import Scene
from .types import Body, BodyView
from .interaction import DragController
from .profiler import Profiler

__all__ = [
    # Core simulation
    "Scene",
    "Body",
    "BodyView",
    # Host helpers
    "DragController",
    "Profiler",
]
