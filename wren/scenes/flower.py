# wren/scenes/flower.py
from __future__ import annotations

import math

from wren.graphics.frame import DrawItem, PrimitiveMode, RenderFrameInput
from wren.graphics.utils.geometry import circle, top_semicircle, trapezoid
from wren.math import deg_to_rad, identity, z_rotate
from wren.scenes.animation import AnimationState, MotionSettings
from wren.scenes.base import SceneDefinition
from wren.types import Color3, Matrix4, Vector2

SEGMENTS = 100
ARC_SEGMENTS = 2 * SEGMENTS

STEM: Color3 = (0.0, 0.8, 0.0)
PETAL: Color3 = (0.9, 0.8, 0.0)
CENTER: Color3 = (0.75, 0.5, 0.0)

# (anchor, rotation) per petal, counter-clockwise from north.
# Anchors are hand-placed, so they are not exactly symmetric.
PETAL_BASES = (
    (Vector2(0.0, 0.12), 0.0),
    (Vector2(-0.1, 0.09), math.pi / 4),
    (Vector2(-0.12, 0.0), math.pi / 2),
    (Vector2(-0.1, -0.11), 3 * math.pi / 4),
    (Vector2(0.0, -0.14), math.pi),
    (Vector2(0.1, -0.11), 5 * math.pi / 4),
    (Vector2(0.12, 0.0), 3 * math.pi / 2),
    (Vector2(0.1, 0.11), 7 * math.pi / 4),
)

PETAL_TIPS = (
    (Vector2(0.0, 0.6), 0.0),
    (Vector2(-0.45, 0.44), math.pi / 4),
    (Vector2(-0.61, 0.0), math.pi / 2),
    (Vector2(-0.45, -0.46), 3 * math.pi / 4),
    (Vector2(0.0, -0.627), math.pi),
    (Vector2(0.45, -0.46), 5 * math.pi / 4),
    (Vector2(0.61, 0.0), 3 * math.pi / 2),
    (Vector2(0.45, 0.46), 7 * math.pi / 4),
)

FLOWER_MOTION = MotionSettings(theta_step=2.0, bounce_y=True)


def petal_model_matrix(state: AnimationState) -> Matrix4:
    return z_rotate(identity(), deg_to_rad(state.theta))


def build_flower_draws(petal_model: Matrix4) -> list[DrawItem]:
    tris = PrimitiveMode.TRIANGLES
    fan = PrimitiveMode.TRIANGLE_FAN

    # The stem stays still; everything else spins with the petals.
    draws = [
        DrawItem(tris, trapezoid(-0.3, -1.1, 0.07, 0.07, 1.0, -0.25), STEM, identity()),
    ]

    for anchor, angle in PETAL_BASES:
        cx, cy = anchor
        draws.append(
            DrawItem(tris, trapezoid(cx, cy, 0.4, 0.1, 0.5, angle), PETAL, petal_model)
        )

    for anchor, angle in PETAL_TIPS:
        cx, cy = anchor
        draws.append(
            DrawItem(
                fan,
                top_semicircle(ARC_SEGMENTS, 0.2, cx, cy, rotation=angle),
                PETAL,
                petal_model,
            )
        )

    draws.append(DrawItem(tris, circle(SEGMENTS, 0.2, 0.0, 0.0), CENTER, petal_model))
    return draws


def build_flower_frame(state: AnimationState, frame_index: int) -> RenderFrameInput:
    return RenderFrameInput(
        frame_index=frame_index,
        draws=build_flower_draws(petal_model_matrix(state)),
    )


FLOWER_SCENE = SceneDefinition(
    name="flower",
    motion=FLOWER_MOTION,
    build_frame=build_flower_frame,
)
