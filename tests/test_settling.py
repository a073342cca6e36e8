# MIT License (see LICENSE)
import math

import pytest

from orbit_burst.scene import Scene
from orbit_burst.types import Body
from orbit_burst.core.fragmentation import is_settled


@pytest.mark.parametrize(
    "velocity, settled",
    [
        ((0.0, 0.0), True),
        ((0.1, -0.1), True),
        ((-0.1, 0.1), True),
        ((0.1001, 0.0), False),
        ((0.0, -0.2), False),
    ],
)
def test_is_settled_threshold(velocity, settled):
    bodies = [Body(velocity=(0.0, 0.0)), Body(velocity=velocity)]
    assert is_settled(bodies) is settled


def _quiet_scene(speed: float) -> Scene:
    """Primary plus two far satellites, all moving at `speed` on both axes."""
    scene = Scene(width=10000, height=10000, seed=11)
    scene.add_body(Body(position=(5000.0, 5000.0), velocity=(speed, -speed), radius=20.0, mass=30.0))
    for angle in (0.0, math.pi):
        scene.add_body(Body(
            position=(5000.0 + 1000.0 * math.cos(angle), 5000.0),
            velocity=(speed, -speed),
            radius=10.0,
            orbit_radius=1000.0,
            orbit_angle=angle,
        ))
    return scene


def test_settled_step_fires_exactly_one_fragmentation():
    scene = _quiet_scene(0.05)
    n = len(scene.bodies)

    scene.step()

    assert scene.explosions == 1
    assert len(scene.bodies) == n - 1 + 10
    # The fragments are moving, so the scene is active again
    assert not is_settled(scene.bodies)


def test_active_step_does_not_fragment():
    scene = _quiet_scene(0.2)
    n = len(scene.bodies)

    scene.step()

    assert scene.explosions == 0
    assert len(scene.bodies) == n


def test_run_keeps_exploding_as_it_settles():
    """A populated scene settles within a few hundred ticks and explodes again."""
    scene = Scene(width=800, height=600, seed=2)
    scene.populate()
    for _ in range(5000):
        scene.step()
        if scene.explosions > 1:
            break
    assert scene.explosions > 1
