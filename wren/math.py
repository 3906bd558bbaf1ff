# wren/math.py
"""
4x4 transform matrices and small 2D helpers.

Matrices are row-major ``(4, 4)`` float64 arrays that are never written
after construction. Points are treated as row vectors, so a 2D point maps
as ``[x, y, 0, 1] @ m``. This is what a vertex shader computing
``matrix * position`` sees when the row-major array is uploaded without
transposition.
"""

import math
from typing import Sequence

import numpy as np

from wren.types import Matrix4, Scalar, Vertices


def deg_to_rad(d: Scalar) -> Scalar:
    return d * math.pi / 180.0


def rad_to_deg(r: Scalar) -> Scalar:
    return r * 180.0 / math.pi


def _freeze(mat: np.ndarray) -> Matrix4:
    mat.setflags(write=False)
    return mat


# -- Constructors --
def identity() -> Matrix4:
    return _freeze(np.eye(4, dtype=np.float64))


def translation(tx: Scalar, ty: Scalar, tz: Scalar) -> Matrix4:
    mat = np.eye(4, dtype=np.float64)
    # Translation lives in the bottom row (row-vector convention).
    mat[3, 0] = tx
    mat[3, 1] = ty
    mat[3, 2] = tz
    return _freeze(mat)


def x_rotation(angle: Scalar) -> Matrix4:
    c = math.cos(angle)
    s = math.sin(angle)
    return _freeze(
        np.array(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, c, s, 0.0],
                [0.0, -s, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )
    )


def y_rotation(angle: Scalar) -> Matrix4:
    c = math.cos(angle)
    s = math.sin(angle)
    return _freeze(
        np.array(
            [
                [c, 0.0, -s, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [s, 0.0, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )
    )


def z_rotation(angle: Scalar) -> Matrix4:
    """
    Rotation about Z by ``angle`` radians.

    Rows are ``[c, s], [-s, c]``: the transpose of the textbook matrix,
    which is counter-clockwise for row vectors. Keep it paired with
    ``multiply``; flipping the sign here reverses every scene's spin.
    """
    c = math.cos(angle)
    s = math.sin(angle)
    return _freeze(
        np.array(
            [
                [c, s, 0.0, 0.0],
                [-s, c, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )
    )


def scaling(sx: Scalar, sy: Scalar, sz: Scalar) -> Matrix4:
    # Zero or negative factors are allowed (singular / mirrored).
    return _freeze(np.diag([sx, sy, sz, 1.0]).astype(np.float64))


# -- Composition --
def multiply(a: Matrix4, b: Matrix4) -> Matrix4:
    """
    Returns ``b @ a``.

    With row-vector points ``p @ (b @ a)``, so ``b`` acts on the point
    before the accumulated ``a``. Operand order matters: swapping it turns
    translate-then-rotate into rotate-then-translate.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    return _freeze(b @ a)


def translate(m: Matrix4, tx: Scalar, ty: Scalar, tz: Scalar) -> Matrix4:
    return multiply(m, translation(tx, ty, tz))


def x_rotate(m: Matrix4, angle: Scalar) -> Matrix4:
    return multiply(m, x_rotation(angle))


def y_rotate(m: Matrix4, angle: Scalar) -> Matrix4:
    return multiply(m, y_rotation(angle))


def z_rotate(m: Matrix4, angle: Scalar) -> Matrix4:
    return multiply(m, z_rotation(angle))


def scale(m: Matrix4, sx: Scalar, sy: Scalar, sz: Scalar) -> Matrix4:
    return multiply(m, scaling(sx, sy, sz))


# -- Point helpers --
def rotate_points(
    points: Vertices,
    angle: Scalar,
    pivot: Sequence[Scalar] = (0.0, 0.0),
) -> Vertices:
    """
    Rotate (N, 2) points counter-clockwise about ``pivot``.
    x' = x*cos - y*sin, y' = x*sin + y*cos
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    if angle == 0.0:
        return pts.copy()

    c = math.cos(angle)
    s = math.sin(angle)
    px, py = float(pivot[0]), float(pivot[1])

    dx = pts[:, 0] - px
    dy = pts[:, 1] - py
    out = np.empty_like(pts)
    out[:, 0] = dx * c - dy * s + px
    out[:, 1] = dx * s + dy * c + py
    return out


def transform_points(points: Vertices, m: Matrix4) -> Vertices:
    """Apply a 4x4 matrix to (N, 2) points lying in the z = 0 plane."""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    n = len(pts)

    homo = np.zeros((n, 4), dtype=np.float64)
    homo[:, :2] = pts
    homo[:, 3] = 1.0

    # No perspective divide: every matrix built here keeps w = 1.
    out = homo @ np.asarray(m, dtype=np.float64)
    return out[:, :2]
