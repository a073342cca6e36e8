# MIT License (see LICENSE)
"""
Pointer drag handling for the primary body.

The host maps its mouse events onto press/move/release. A press inside the
primary starts a drag and remembers the grab offset between the pointer and
the primary's center; every move then queues a position override on the
scene, applied at the start of the next step. Presses anywhere else are
ignored.
"""
from __future__ import annotations
import logging

import numpy as np

from .scene import Scene
from .util import f64

logger = logging.getLogger(__name__)


class DragController:
    """
    Turns pointer gestures into primary position overrides.

    Example:
        drag = DragController(scene)
        drag.press((x, y))       # mouse down
        drag.move((x2, y2))      # mouse move
        scene.step()             # primary now centered at (x2, y2) + offset
        drag.release()           # mouse up
    """

    def __init__(self, scene: Scene) -> None:
        self.scene = scene
        self._offset: np.ndarray | None = None

    @property
    def dragging(self) -> bool:
        return self._offset is not None

    def press(self, point: tuple[float, float]) -> bool:
        """
        Start a drag if the point lies inside the primary.

        Returns:
            True if a drag started.
        """
        primary = self.scene.primary
        if not primary.contains(point):
            return False
        self._offset = primary.position - f64(point)
        logger.debug("drag started on body %d", primary.id)
        return True

    def move(self, point: tuple[float, float]) -> None:
        """Queue the primary at the pointer plus the grab offset."""
        if self._offset is None:
            return
        self.scene.request_primary_position(f64(point) + self._offset)

    def release(self) -> None:
        if self._offset is not None:
            logger.debug("drag released")
        self._offset = None
