# wren/graphics/utils/geometry.py
import math
from numbers import Integral

import numpy as np

from wren.math import rotate_points
from wren.types import Scalar, Vertices


# Tolerance when snapping a sweep to whole steps.
_GRID_EPS = 1e-9


class InvalidParameter(ValueError):
    """Raised when a shape generator receives an unusable segment count."""


def _check_segments(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidParameter(
            f"segment count must be an int, not {type(n).__name__}"
        )
    if n <= 0:
        raise InvalidParameter(f"segment count must be positive, got {n}")
    return int(n)


def rectangle(
    x: Scalar, y: Scalar, width: Scalar, height: Scalar
) -> Vertices:
    """
    Two triangles sharing the (x, y) -> (x + width, y + height) diagonal.
    Triangle list, 6 vertices.
    """
    x1, x2 = x, x + width
    y1, y2 = y, y + height
    return np.array(
        [
            [x1, y1],
            [x2, y1],
            [x1, y2],
            [x1, y2],
            [x2, y1],
            [x2, y2],
        ],
        dtype=np.float64,
    )


def circle(n: int, radius: Scalar, cx: Scalar, cy: Scalar) -> Vertices:
    """
    Filled disc as a triangle list of ``n`` slices (3n vertices).

    Slice ``i`` is (center, p(i), p(i + 1)) with p(k) at angle k * 2pi / n.
    The center is repeated per slice so the result can be drawn without an
    index buffer.
    """
    n = _check_segments(n)

    k = np.arange(n + 1, dtype=np.float64)
    angles = k * (2.0 * math.pi) / n
    rim = np.stack(
        [cx + radius * np.cos(angles), cy + radius * np.sin(angles)], axis=1
    )

    out = np.empty((n, 3, 2), dtype=np.float64)
    out[:, 0] = (cx, cy)
    out[:, 1] = rim[:-1]
    out[:, 2] = rim[1:]
    return out.reshape(-1, 2)


def semicircle_arc(
    n: int,
    radius: Scalar,
    cx: Scalar,
    cy: Scalar,
    start: Scalar,
    end: Scalar,
    rotation: Scalar = 0.0,
) -> Vertices:
    """
    Triangle fan covering the arc from ``start * pi`` to ``end * pi``.

    Parameters
    ----------
    n : int
        Segments per full turn; rim points are spaced ``2pi / n`` apart.
    start, end : float
        Sweep bounds as multiples of pi. Rim points start at ``start * pi``
        and step by ``2pi / n``; when the sweep is not a whole number of
        steps the exact ``end * pi`` point closes the arc.
    rotation : float
        Extra rotation in radians about the center, applied to the rim.

    Returns
    -------
    (N + 1, 2) array: the center followed by the N rim points.
    """
    n = _check_segments(n)

    step = 2.0 * math.pi / n
    start_angle = start * math.pi
    end_angle = end * math.pi

    steps = (end - start) * n / 2.0
    whole = math.floor(steps + _GRID_EPS)
    angles = start_angle + np.arange(whole + 1, dtype=np.float64) * step
    if steps - whole > _GRID_EPS:
        angles = np.append(angles, end_angle)
    rim = np.stack(
        [cx + radius * np.cos(angles), cy + radius * np.sin(angles)], axis=1
    )
    rim = rotate_points(rim, rotation, pivot=(cx, cy))

    return np.concatenate(
        [np.array([[cx, cy]], dtype=np.float64), rim], axis=0
    )


# Named sweeps used by the scenes.
UPPER_SWEEP = (0.5, 1.5)  # 90 -> 270 deg
LOWER_SWEEP = (1.5, 2.5)  # 270 -> 450 deg
TOP_SWEEP = (0.0, 1.0)  # 0 -> 180 deg


def upper_semicircle(
    n: int, radius: Scalar, cx: Scalar, cy: Scalar
) -> Vertices:
    return semicircle_arc(n, radius, cx, cy, *UPPER_SWEEP)


def lower_semicircle(
    n: int, radius: Scalar, cx: Scalar, cy: Scalar
) -> Vertices:
    return semicircle_arc(n, radius, cx, cy, *LOWER_SWEEP)


def top_semicircle(
    n: int, radius: Scalar, cx: Scalar, cy: Scalar, rotation: Scalar = 0.0
) -> Vertices:
    return semicircle_arc(n, radius, cx, cy, *TOP_SWEEP, rotation=rotation)


def trapezoid(
    cx: Scalar,
    cy: Scalar,
    top_width: Scalar,
    bottom_width: Scalar,
    height: Scalar,
    rotation: Scalar,
) -> Vertices:
    """
    Trapezoid with its bottom edge centered on (cx, cy), rotated about
    that point. Triangle list, 6 vertices.
    """
    half_bottom = bottom_width / 2.0
    half_top = top_width / 2.0

    corners = np.array(
        [
            [cx - half_bottom, cy],  # bottom left
            [cx + half_bottom, cy],  # bottom right
            [cx - half_top, cy + height],  # top left
            [cx + half_top, cy + height],  # top right
        ],
        dtype=np.float64,
    )
    bl, br, tl, tr = rotate_points(corners, rotation, pivot=(cx, cy))

    return np.array([bl, br, tl, tl, br, tr], dtype=np.float64)
