# wren/graphics/utils/__init__.py
from wren.graphics.utils.geometry import (
    InvalidParameter,
    circle,
    lower_semicircle,
    rectangle,
    semicircle_arc,
    top_semicircle,
    trapezoid,
    upper_semicircle,
)
from wren.graphics.utils.uniforms import (
    pack_color,
    pack_mat4,
    pack_vertices,
)

__all__ = [
    "InvalidParameter",
    "rectangle",
    "circle",
    "semicircle_arc",
    "upper_semicircle",
    "lower_semicircle",
    "top_semicircle",
    "trapezoid",
    "pack_color",
    "pack_vertices",
    "pack_mat4",
]
