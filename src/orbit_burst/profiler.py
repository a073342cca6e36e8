# MIT License (see LICENSE)
"""
Per-phase timing of simulation steps.

Scene.step() reports the phases "override", "integrate", "collide",
"orbit" and "settle" when a Profiler is attached.

Example:
    profiler = Profiler()
    scene = Scene(profiler=profiler)
    for _ in range(600):
        scene.step()
    print(profiler.stats.summary()["collide"])
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ProfileStats:
    """
    Timing samples (seconds) grouped by phase name.
    """
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Summary statistics per phase.

        Returns:
            Dict mapping phase name to a dict with keys:
            - 'n': sample count
            - 'mean_ms': average time in milliseconds
            - 'max_ms': maximum time in milliseconds
            - 'total_ms': summed time in milliseconds
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            total = sum(times)
            out[name] = {
                "n": n,
                "mean_ms": 1e3 * total / n,
                "max_ms": 1e3 * max(times),
                "total_ms": 1e3 * total,
            }
        return out


class Profiler:
    """
    Context-manager based timer for named phases.

    Usage:
        profiler = Profiler()
        with profiler.section("collide"):
            resolve_collisions(bodies)
    """

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)
