"""
Microbenchmark: time per step vs number of bodies.
Run:
  python benchmarks/bench_steps.py
"""
import math
import time

import numpy as np

from orbit_burst.scene import Scene
from orbit_burst.types import Body
from orbit_burst.profiler import Profiler


def run(n: int, steps: int = 300):
    prof = Profiler()
    scene = Scene(width=4000, height=4000, seed=12345, profiler=prof)

    rng = np.random.default_rng(12345)
    scene.add_body(Body(position=(2000.0, 2000.0), velocity=(3.0, 2.0), radius=20.0, mass=50.0))

    # satellites on distinct rings so they do not merge right away
    for k in range(n - 1):
        r = 100.0 + 15.0 * k
        angle = 2 * math.pi * k / max(1, n - 1)
        scene.add_body(Body(
            position=(2000.0 + r * math.cos(angle), 2000.0 + r * math.sin(angle)),
            velocity=tuple(float(v) for v in rng.integers(-5, 5, size=2)),
            radius=5.0,
            mass=1.0,
            orbit_radius=r,
            orbit_angle=angle,
        ))

    # warmup
    for _ in range(30):
        scene.step()

    t0 = time.perf_counter()
    for _ in range(steps):
        scene.step()
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()


if __name__ == "__main__":
    for n in [10, 50, 100]:
        per_step, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["override", "integrate", "collide", "orbit", "settle"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
