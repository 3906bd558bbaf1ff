# wren/graphics/frame.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

import numpy as np

from wren.graphics.utils.uniforms import pack_vertices
from wren.types import Color3, Matrix4, Vertices


class PrimitiveMode(str, Enum):
    """How a vertex sequence is assembled into triangles."""

    TRIANGLES = "triangles"
    TRIANGLE_FAN = "triangle_fan"


@dataclass(frozen=True, slots=True)
class DrawItem:
    """
    One flat-colored primitive, ready to upload and draw.

    ``vertices`` is regenerated every frame and owned by this item only.
    """

    mode: PrimitiveMode
    vertices: Vertices  # shape (N, 2), float64
    color: Color3
    model: Matrix4  # world transform (4,4)

    @property
    def vertex_count(self) -> int:
        return int(len(self.vertices))

    def triangles(self) -> np.ndarray:
        """Expand into independent triangles, shape (T, 3, 2)."""
        verts = np.asarray(self.vertices, dtype=np.float64).reshape(-1, 2)

        if self.mode is PrimitiveMode.TRIANGLE_FAN:
            if len(verts) < 3:
                return np.zeros((0, 3, 2), dtype=np.float64)
            count = len(verts) - 2
            tris = np.empty((count, 3, 2), dtype=np.float64)
            tris[:, 0] = verts[0]
            tris[:, 1] = verts[1:-1]
            tris[:, 2] = verts[2:]
            return tris

        # A trailing partial triangle is dropped, as the GPU would.
        usable = (len(verts) // 3) * 3
        return verts[:usable].reshape(-1, 3, 2)

    def vertex_bytes(self) -> bytes:
        return pack_vertices(self.vertices)


@dataclass(frozen=True, slots=True)
class RenderFrameInput:
    """Everything needed to paint one frame. Draw order is paint order."""

    frame_index: int
    draws: Sequence[DrawItem]
    clear_color: Color3 = (1.0, 1.0, 1.0)
