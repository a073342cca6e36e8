# MIT License (see LICENSE)
import numpy as np

from orbit_burst.interaction import DragController
from orbit_burst.scene import Scene
from orbit_burst.types import Body


def _scene():
    scene = Scene(width=1000, height=1000, seed=0)
    primary = Body(position=(100.0, 100.0), velocity=(1.0, 0.0), radius=10.0)
    scene.add_body(primary)
    return scene, primary


def test_press_outside_primary_ignored():
    scene, _ = _scene()
    drag = DragController(scene)

    assert not drag.press((150.0, 100.0))
    assert not drag.dragging
    drag.move((300.0, 300.0))
    assert scene.pending_override is None


def test_drag_keeps_grab_offset():
    """Grabbing 5 units right of center keeps the center 5 units left of the pointer."""
    scene, primary = _scene()
    drag = DragController(scene)

    assert drag.press((105.0, 100.0))
    drag.move((200.0, 150.0))
    assert np.allclose(scene.pending_override, [195.0, 150.0])

    scene.step()
    # override, then one Euler step with v = (1, 0)
    assert np.allclose(primary.position, [196.0, 150.0])


def test_release_ends_drag():
    scene, _ = _scene()
    drag = DragController(scene)
    drag.press((100.0, 100.0))
    drag.release()

    assert not drag.dragging
    drag.move((400.0, 400.0))
    assert scene.pending_override is None
