# wren/graphics/utils/uniforms.py
import struct

import numpy as np

from wren.types import Color3, Matrix4, Vertices

# Upload layout:
# Position attribute = 2 x float32 per vertex, tightly packed
# Color uniform = vec3 (3 x float32)
# Matrix uniform = mat4, 16 x float32 in row-major array order


def pack_vec3(x: float, y: float, z: float) -> bytes:
    return struct.pack("3f", x, y, z)


def pack_color(color: Color3) -> bytes:
    r, g, b = color
    return pack_vec3(r, g, b)


def pack_vertices(vertices: Vertices) -> bytes:
    """
    Packs (N, 2) vertices as interleaved x, y float32 values.
    Precision drops to float32 here and nowhere earlier.
    """
    verts = np.asarray(vertices, dtype=np.float64)
    if verts.ndim != 2 or verts.shape[1] != 2:
        raise ValueError(f"Vertices must have shape (N, 2), got {verts.shape}")
    return verts.astype("f4").tobytes()


def pack_mat4(mat: Matrix4) -> bytes:
    """
    Packs a 4x4 matrix (casts to float32).
    Bytes follow the row-major array order, which is what a shader expects
    when the uniform is uploaded with transpose=False.
    """
    mat = np.asarray(mat)
    if mat.shape != (4, 4):
        raise ValueError("Matrix must be 4x4")
    return mat.astype("f4").tobytes()

