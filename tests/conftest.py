import math

import pytest

from wren.graphics.frame import DrawItem
from wren.graphics.settings import ExportSettings, ResolutionSettings
from wren.math import identity, scale, translate, z_rotate
from wren.scenes.animation import AnimationState


@pytest.fixture
def composite_matrix():
    """A non-trivial matrix mixing translation, rotation and scaling."""
    m = translate(identity(), 0.3, -0.2, 0.5)
    m = z_rotate(m, math.pi / 7)
    return scale(m, 2.0, 0.5, 1.0)


@pytest.fixture
def state():
    return AnimationState()


@pytest.fixture
def make_item():
    """Build a DrawItem, defaulting the model to identity."""

    def _make(mode, vertices, color, model=None):
        if model is None:
            model = identity()
        return DrawItem(mode=mode, vertices=vertices, color=color, model=model)

    return _make


@pytest.fixture
def small_export(tmp_path):
    return ExportSettings(
        resolution=ResolutionSettings(width=64, height=64),
        output_dir=tmp_path,
    )
