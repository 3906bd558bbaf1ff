# wren/graphics/export/image.py
"""
Headless PNG snapshots of a frame, painted with Pillow.

Clip space [-1, 1] x [-1, 1] is stretched over the whole image with +y up,
the same mapping a full-canvas viewport gives.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw

from wren.graphics.frame import RenderFrameInput
from wren.graphics.settings import ExportSettings
from wren.math import transform_points
from wren.types import Color3

_LOG = logging.getLogger("wren.export")


def _rgb255(color: Color3) -> tuple[int, int, int]:
    r, g, b = (min(1.0, max(0.0, float(c))) for c in color)
    return (round(r * 255), round(g * 255), round(b * 255))


def clip_to_pixels(points: np.ndarray, width: int, height: int) -> np.ndarray:
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    out = np.empty_like(pts)
    out[:, 0] = (pts[:, 0] + 1.0) * 0.5 * width
    out[:, 1] = (1.0 - pts[:, 1]) * 0.5 * height
    return out


def render_frame(frame: RenderFrameInput, settings: ExportSettings) -> Image.Image:
    width = settings.resolution.width
    height = settings.resolution.height

    image = Image.new("RGB", (width, height), _rgb255(frame.clear_color))
    canvas = ImageDraw.Draw(image)

    for item in frame.draws:
        tris = item.triangles()
        if len(tris) == 0:
            continue

        world = transform_points(tris.reshape(-1, 2), item.model)
        pixels = clip_to_pixels(world, width, height).reshape(-1, 3, 2)
        fill = _rgb255(item.color)

        for tri in pixels:
            canvas.polygon([tuple(p) for p in tri.tolist()], fill=fill)

    return image


def export_frame(
    frame: RenderFrameInput, path: str | Path, settings: ExportSettings
) -> Path:
    """Paint ``frame`` and save it as PNG at ``path``."""
    _path = Path(path)
    if _path.suffix.lower() != ".png":
        raise ValueError(f"Unsupported image format: {_path.suffix!r}")

    _path.parent.mkdir(parents=True, exist_ok=True)
    render_frame(frame, settings).save(_path, format="PNG")

    _LOG.debug(
        "wrote frame %d (%d draws) to %s",
        frame.frame_index,
        len(frame.draws),
        _path,
    )
    return _path
