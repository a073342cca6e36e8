# examples/minimal_burst.py
import logging

from orbit_burst import Scene
from orbit_burst.renderer import DebugRenderer
from orbit_burst.core import total_mass, kinetic_energy

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

scene = Scene(width=1024, height=768, seed=1)
scene.populate()
renderer = DebugRenderer()

while scene.tick < 1200:
    scene.step()
    if scene.tick % 300 == 0:
        renderer.render_scene(scene)

print("explosions:", scene.explosions)
print("bodies:", len(scene.bodies), "total mass:", total_mass(scene.bodies))
print("kinetic energy:", kinetic_energy(scene.bodies))
