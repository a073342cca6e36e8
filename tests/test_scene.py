# MIT License (see LICENSE)
import dataclasses

import numpy as np
import pytest

from orbit_burst.scene import Scene
from orbit_burst.types import Body, BodyView
from orbit_burst.profiler import Profiler


def test_step_on_empty_registry_raises():
    scene = Scene()
    with pytest.raises(RuntimeError):
        scene.step()


def test_invalid_frame_and_body_rejected():
    with pytest.raises(ValueError):
        Scene(width=0, height=100)
    with pytest.raises(ValueError):
        Scene().resize(100, -1)
    with pytest.raises(ValueError):
        Body(mass=0.0)
    with pytest.raises(ValueError):
        Body(radius=-1.0)


def test_first_body_is_primary():
    scene = Scene()
    a, b = Body(), Body(position=(100.0, 100.0))
    assert scene.add_body(a) == 1
    assert scene.add_body(b) == 2
    assert scene.primary is a


def test_constructor_bodies_are_registered():
    body = Body(position=(500.0, 500.0), velocity=(1.0, 0.0))
    scene = Scene(width=1000, height=1000, seed=0, bodies=[body])
    assert body.id == 1
    assert scene.primary is body

    scene.step()
    assert scene.tick == 1
    assert np.allclose(body.position, [501.0, 500.0])


def test_long_run_invariants():
    """
    Over a long seeded run:
      - the registry never collapses and the primary is always present,
      - a body's mass and radius never decrease,
      - merges conserve total mass between explosions.
    """
    scene = Scene(width=800, height=600, seed=7)
    scene.populate()
    prev = {b.id: (b.mass, b.radius) for b in scene.bodies}
    prev_total = sum(b.mass for b in scene.bodies)
    prev_explosions = scene.explosions

    for _ in range(1500):
        scene.step()
        assert len(scene.bodies) >= 1
        assert scene.primary in scene.bodies
        for b in scene.bodies:
            assert b.mass > 0 and b.radius > 0
            if b.id in prev:
                m0, r0 = prev[b.id]
                assert b.mass >= m0
                assert b.radius >= r0
        total = sum(b.mass for b in scene.bodies)
        if scene.explosions == prev_explosions:
            assert total == pytest.approx(prev_total)
        prev = {b.id: (b.mass, b.radius) for b in scene.bodies}
        prev_total = total
        prev_explosions = scene.explosions

    print("ticks", scene.tick, "explosions", scene.explosions, "bodies", len(scene.bodies))
    assert scene.tick == 1500


def test_absorbed_primary_hands_off_to_survivor():
    scene = Scene(width=1000, height=1000, seed=0)
    a = Body(position=(500.0, 500.0), velocity=(1.0, 0.0), radius=5.0, mass=1.0)
    b = Body(position=(510.0, 500.0), velocity=(-1.0, 0.0), radius=5.0, mass=1.0)
    scene.add_body(a); scene.add_body(b)
    scene.primary_id = b.id

    scene.step()

    assert scene.primary is a
    assert scene.bodies == [a]


def test_override_applied_at_next_step():
    scene = Scene(width=1000, height=1000, seed=0)
    p = Body(position=(100.0, 100.0), velocity=(1.0, 0.0), radius=10.0)
    scene.add_body(p)

    scene.request_primary_position((250.0, 250.0))
    scene.request_primary_position((300.0, 200.0))   # latest request wins
    assert np.allclose(p.position, [100.0, 100.0])

    scene.step()
    assert np.allclose(p.position, [301.0, 200.0])
    assert scene.pending_override is None

    scene.step()
    assert np.allclose(p.position, [301.99, 200.0])


def test_query_point_returns_topmost():
    scene = Scene()
    low = Body(position=(100.0, 100.0), radius=20.0)
    top = Body(position=(110.0, 100.0), radius=20.0)
    scene.add_body(low); scene.add_body(top)

    assert scene.query_point((110.0, 100.0)) is top
    assert scene.query_point((85.0, 100.0)) is low
    assert scene.query_point((500.0, 500.0)) is None


def test_snapshot_is_read_only_copy():
    scene = Scene()
    b = Body(position=(5.0, 6.0), radius=3.0, color=(1, 2, 3))
    scene.add_body(b)

    (view,) = scene.snapshot()
    assert view == BodyView(id=1, position=(5.0, 6.0), radius=3.0, color=(1, 2, 3))
    with pytest.raises(dataclasses.FrozenInstanceError):
        view.radius = 10.0

    b.position += 1.0
    assert view.position == (5.0, 6.0)


def test_center_on_primary():
    scene = Scene(width=400, height=300)
    p = Body(position=(100.0, 50.0))
    s = Body(position=(120.0, 50.0))
    scene.add_body(p); scene.add_body(s)

    scene.center_on_primary()

    assert np.allclose(p.position, [200.0, 150.0])
    assert np.allclose(s.position, [220.0, 150.0])


def test_step_tracks_frame_size():
    scene = Scene(width=1000, height=1000)
    body = Body(position=(480.0, 380.0), velocity=(30.0, 30.0), radius=10.0)
    scene.add_body(body)

    scene.step(500, 400)

    assert (scene.width, scene.height) == (500.0, 400.0)
    assert np.allclose(body.position, [490.0, 390.0])
    assert np.allclose(body.velocity, [-29.7, -29.7])


def test_same_seed_same_run():
    def run():
        scene = Scene(width=800, height=600, seed=42)
        scene.populate()
        for _ in range(300):
            scene.step()
        return scene.snapshot()

    assert run() == run()


def test_profiler_sections():
    prof = Profiler()
    scene = Scene(width=800, height=600, seed=1, profiler=prof)
    scene.populate()
    for _ in range(5):
        scene.step()

    summary = prof.stats.summary()
    for name in ("override", "integrate", "collide", "orbit", "settle"):
        assert summary[name]["n"] == 5
        assert summary[name]["max_ms"] >= summary[name]["mean_ms"] >= 0.0
