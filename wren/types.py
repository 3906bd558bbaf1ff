# wren/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, TypeAlias

import numpy as np
from numpy.typing import NDArray

Scalar: TypeAlias = float

Color3 = Tuple[float, float, float]  # r, g, b in [0, 1]

# Row-major 4x4, float64, read-only.
Matrix4: TypeAlias = NDArray[np.float64]

# (N, 2) array of x, y pairs.
Vertices: TypeAlias = NDArray[np.float64]


@dataclass(frozen=True, slots=True)
class Vector2:
    x: Scalar
    y: Scalar

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y

    def __len__(self) -> int:
        return 2
