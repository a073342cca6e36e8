# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text output for debugging.
    - NullRenderer: No-op renderer for performance testing.
    - BufferedRenderer: Records frames for playback or inspection.

The simulation core has no rendering dependency; these adapters only read
Scene.snapshot().

Typical usage:
    from orbit_burst.renderer import DebugRenderer

    renderer = DebugRenderer()
    renderer.render_scene(scene)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
]
