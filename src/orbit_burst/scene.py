# MIT License (see LICENSE)
"""
The simulation scene and its per-tick step.

The Scene class owns the body registry and drives the simulation.
It manages:
- The ordered list of bodies and the stable id of the primary body.
- The frame size used for wall reflection.
- The random source used by fragmentation.
- A queued position override for the primary (drag input).
- The step, which runs in this order:
    1. Apply any queued primary position override.
    2. Integrate, reflect off walls and damp every body.
    3. Resolve pairwise collisions (absorbing merges).
    4. Place satellites on their orbits around the primary.
    5. If everything has settled, explode one random body.

Structure:
    - Host creates a Scene and calls populate().
    - Host calls scene.step(width, height) once per tick.
    - Host renders scene.snapshot() and may queue overrides between ticks.
"""
from __future__ import annotations
from contextlib import nullcontext
from dataclasses import dataclass, field
import logging

import numpy as np

from .constants import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    EXPLOSION_MULTIPLIER,
    INITIAL_EXPLOSION_MULTIPLIER,
    SEED_COLOR,
    SEED_MASS,
    SEED_ORBIT_RADIUS,
    SEED_RADIUS,
)
from .types import Body, BodyView
from .util import f64
from .profiler import Profiler
from .core.integrators import euler_step
from .core.forces import apply_damping
from .core.orbits import advance_orbits
from .core.fragmentation import is_settled, make_fragments
from .collision.walls import reflect_walls, clamp_inside
from .collision.resolver import resolve_collisions

logger = logging.getLogger(__name__)


@dataclass
class Scene:
    """
    Particle simulation world.

    Attributes:
        width: Frame width in scene units, used for wall reflection.
        height: Frame height in scene units.
        seed: Seed for the fragmentation random source. None = nondeterministic.
        profiler: Optional Profiler instance for per-phase timing.
        bodies: Registry of live bodies in iteration order. Bodies passed to the
            constructor are registered through add_body(), so the first one
            becomes the primary.
        primary_id: Id of the body that satellites orbit.
        tick: Number of completed step() calls.
        explosions: Number of fragmentation events so far, including the initial one.
    """
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    seed: int | None = None
    profiler: Profiler | None = None

    # Internal state
    bodies: list[Body] = field(default_factory=list)
    primary_id: int | None = field(default=None, init=False)
    tick: int = field(default=0, init=False)
    explosions: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Validate the frame, set up the random source and register initial bodies."""
        self.resize(self.width, self.height)
        self.rng = np.random.default_rng(self.seed)
        self._next_id = 1
        self._pending_override: np.ndarray | None = None
        initial, self.bodies = self.bodies, []
        for b in initial:
            self.add_body(b)

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def add_body(self, body: Body) -> int:
        """
        Add a body to the registry.

        Assigns a unique id. The first body added to an empty scene becomes
        the primary.

        Returns:
            The assigned body id.
        """
        body.id = self._next_id
        self._next_id += 1
        body.alive = True
        self.bodies.append(body)
        if self.primary_id is None:
            self.primary_id = body.id
        return body.id

    def get(self, body_id: int) -> Body | None:
        """Look up a live body by id."""
        for b in self.bodies:
            if b.id == body_id:
                return b
        return None

    @property
    def primary(self) -> Body:
        """The body every satellite orbits."""
        body = None if self.primary_id is None else self.get(self.primary_id)
        if body is None:
            raise RuntimeError(f"Primary body {self.primary_id} is not in the registry")
        return body

    def _set_primary(self, body_id: int, reason: str) -> None:
        """Hand the primary role to a registered body and pull it inside the frame."""
        logger.info("primary handed from body %s to body %d (%s)", self.primary_id, body_id, reason)
        self.primary_id = body_id
        clamp_inside(self.primary, self.width, self.height)

    def resize(self, width: float, height: float) -> None:
        """Update the frame size used for wall reflection."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Frame size must be positive, got {width}x{height}")
        self.width = float(width)
        self.height = float(height)

    # ------------------------------------------------------------------
    # Host interface
    # ------------------------------------------------------------------

    def query_point(self, point: tuple[float, float]) -> Body | None:
        """
        Find the topmost body containing a point.

        Later bodies are drawn on top, so the registry is searched in reverse.
        """
        for b in reversed(self.bodies):
            if b.contains(point):
                return b
        return None

    def request_primary_position(self, point: tuple[float, float] | np.ndarray) -> None:
        """
        Queue an override of the primary's position.

        The override is applied at the start of the next step(); only the
        latest request between two ticks is kept.
        """
        self._pending_override = f64(point)
        logger.debug("queued primary position override %s", self._pending_override)

    @property
    def pending_override(self) -> np.ndarray | None:
        return self._pending_override

    def snapshot(self) -> tuple[BodyView, ...]:
        """Read-only view of every body for rendering."""
        return tuple(b.view() for b in self.bodies)

    def center_on_primary(self) -> None:
        """Translate every body so the primary sits at the frame center."""
        primary = self.primary
        offset = f64((self.width / 2, self.height / 2)) - primary.position
        for b in self.bodies:
            b.position = b.position + offset

    # ------------------------------------------------------------------
    # Fragmentation
    # ------------------------------------------------------------------

    def populate(self) -> list[Body]:
        """
        Seed an empty scene.

        Places one large body at the frame center and immediately explodes
        it, so the scene starts as a ring of fragments whose first member is
        the primary.

        Returns:
            The fragments created.
        """
        if self.bodies:
            raise RuntimeError("populate() requires an empty scene")
        seed_body = Body(
            position=(self.width / 2, self.height / 2),
            velocity=(0.0, 0.0),
            radius=SEED_RADIUS,
            mass=SEED_MASS,
            color=SEED_COLOR,
            orbit_radius=SEED_ORBIT_RADIUS,
            orbit_angle=0.0,
        )
        self.add_body(seed_body)
        logger.info("seeded scene %gx%g with body %d", self.width, self.height, seed_body.id)
        return self.explode(seed_body, INITIAL_EXPLOSION_MULTIPLIER)

    def explode(self, body: Body, multiplier: float) -> list[Body]:
        """
        Replace a body with a ring of fragments.

        If the exploded body was the primary, the primary passes to the
        longest-lived surviving body, or to the first fragment when the
        exploded body was the only one.

        Args:
            body: Body to explode. Must be in the registry.
            multiplier: Explosion distance multiplier.

        Returns:
            The fragments created (already registered).
        """
        if not any(b is body for b in self.bodies):
            raise ValueError(f"Body {body.id} is not in the registry")

        fragments = make_fragments(body, multiplier, self.rng)
        was_primary = body.id == self.primary_id
        self.bodies = [b for b in self.bodies if b is not body]
        body.alive = False
        successor = self.bodies[0] if self.bodies else None

        for f in fragments:
            self.add_body(f)
        if was_primary:
            heir = successor if successor is not None else fragments[0]
            self._set_primary(heir.id, f"body {body.id} exploded")

        self.explosions += 1
        logger.info(
            "explosion %d: body %d (r=%.2f) -> %d fragments, orbit radius %.1f, %d bodies",
            self.explosions, body.id, body.radius, len(fragments),
            fragments[0].orbit_radius, len(self.bodies),
        )
        return fragments

    def explode_random(self, multiplier: float = EXPLOSION_MULTIPLIER) -> list[Body]:
        """Explode a uniformly random body, the primary included."""
        body = self.bodies[int(self.rng.integers(len(self.bodies)))]
        return self.explode(body, multiplier)

    # ------------------------------------------------------------------
    # Step
    # ------------------------------------------------------------------

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def _apply_override(self) -> None:
        if self._pending_override is None:
            return
        self.primary.position = self._pending_override.copy()
        self._pending_override = None

    def _integrate(self) -> None:
        """Euler step, wall reflection and damping for every body, in order."""
        for b in self.bodies:
            euler_step(b)
            reflect_walls(b, self.width, self.height)
            apply_damping(b)

    def _collide(self) -> None:
        """Pairwise pass; survivors that grew are pulled back inside the frame."""
        merges = resolve_collisions(self.bodies)
        for survivor_id in {m.survivor_id for m in merges}:
            survivor = self.get(survivor_id)
            if survivor is not None:
                clamp_inside(survivor, self.width, self.height)
        for m in merges:
            if m.absorbed_id == self.primary_id:
                self._set_primary(m.survivor_id, f"absorbed by body {m.survivor_id}")

    def step(self, width: float | None = None, height: float | None = None) -> None:
        """
        Advance the simulation by one tick.

        Args:
            width: Current frame width. Defaults to the last known width.
            height: Current frame height. Defaults to the last known height.

        Raises:
            RuntimeError: If the registry is empty.
        """
        if not self.bodies:
            raise RuntimeError("step() called on an empty registry")
        if width is not None or height is not None:
            self.resize(
                self.width if width is None else width,
                self.height if height is None else height,
            )

        with self._section("override"):
            self._apply_override()
        with self._section("integrate"):
            self._integrate()
        with self._section("collide"):
            self._collide()
        with self._section("orbit"):
            advance_orbits(self.bodies, self.primary)
        with self._section("settle"):
            if is_settled(self.bodies):
                logger.debug("scene settled at tick %d", self.tick)
                self.explode_random()

        self.tick += 1
