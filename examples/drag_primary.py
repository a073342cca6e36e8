# examples/drag_primary.py
import logging

from orbit_burst import Scene, DragController

logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

scene = Scene(width=1024, height=768, seed=3)
scene.populate()
drag = DragController(scene)

# Grab the primary where it is and pull it to the upper-left corner over 60 ticks.
start = scene.primary.position.copy()
target = (200.0, 150.0)
drag.press(tuple(start))
for k in range(1, 61):
    t = k / 60
    drag.move((start[0] + t * (target[0] - start[0]), start[1] + t * (target[1] - start[1])))
    scene.step()
drag.release()

print("primary:", scene.primary.id, "at", scene.primary.position)
for view in scene.snapshot()[:5]:
    print(view)
