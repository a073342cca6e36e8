# MIT License (see LICENSE)
"""
Renderer adapters for drawing the scene.

The simulation core never draws. Renderers receive the read-only
Scene.snapshot() once per frame and draw each body as a filled circle.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

from ..types import BodyView

if TYPE_CHECKING:
    from ..scene import Scene


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses hook the drawing methods up to a graphics backend
    (pygame, tkinter, a web canvas, ...).

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame(scene.tick)
        for view in scene.snapshot():
            renderer.draw_body(view)
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_scene(scene)
    """

    @abstractmethod
    def begin_frame(self, tick: int) -> None:
        """
        Begin a new frame.

        Args:
            tick: Number of steps the scene has completed.
        """
        ...

    @abstractmethod
    def draw_body(self, view: BodyView) -> None:
        """Draw one body as a filled circle."""
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_scene(self, scene: "Scene") -> None:
        """Render every body of the scene's current snapshot."""
        self.begin_frame(scene.tick)
        for view in scene.snapshot():
            self.draw_body(view)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer for development and testing.

    Output:
        === Frame tick=42 ===
        [3] r=10.00 @ (1012.00, 634.00) rgb=(12, 200, 87)
        [7] r=14.14 @ (760.53, 384.00) rgb=(255, 0, 0)
    """

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def begin_frame(self, tick: int) -> None:
        self.output.write(f"=== Frame tick={tick} ===\n")

    def draw_body(self, view: BodyView) -> None:
        x, y = view.position
        self.output.write(
            f"[{view.id}] r={view.radius:.2f} @ ({x:.2f}, {y:.2f}) rgb={view.color}\n"
        )

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarks and headless runs."""

    def begin_frame(self, tick: int) -> None:
        pass

    def draw_body(self, view: BodyView) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records every frame it is given.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            scene.step()
            renderer.render_scene(scene)

        for frame in renderer.frames:
            print(frame["tick"], len(frame["bodies"]))
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, tick: int) -> None:
        self._current_frame = {"tick": tick, "bodies": []}

    def draw_body(self, view: BodyView) -> None:
        if self._current_frame is None:
            return
        self._current_frame["bodies"].append(view)

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
