# wren/scenes/car.py
from __future__ import annotations

from wren.graphics.frame import DrawItem, PrimitiveMode, RenderFrameInput
from wren.graphics.utils.geometry import (
    circle,
    lower_semicircle,
    rectangle,
    top_semicircle,
    upper_semicircle,
)
from wren.math import identity, translate
from wren.scenes.animation import AnimationState, MotionSettings
from wren.scenes.base import SceneDefinition
from wren.types import Color3, Matrix4, Vector2

SEGMENTS = 50
# Arcs get twice the density so each half turn keeps SEGMENTS slices.
ARC_SEGMENTS = 2 * SEGMENTS

BODY: Color3 = (0.17, 0.356, 0.530)
GLASS: Color3 = (0.57, 0.56, 0.830)
CHROME: Color3 = (0.75, 0.75, 0.75)
TRIM: Color3 = (0.7, 0.556, 0.530)
HEADLIGHT: Color3 = (0.9, 0.9, 0.9)
TAILLIGHT: Color3 = (0.9, 0.2, 0.2)
TIRE: Color3 = (0.1, 0.1, 0.1)
HUB: Color3 = (0.5, 0.5, 0.5)

WHEELS = (Vector2(-0.35, -0.5), Vector2(0.35, -0.5))

CAR_MOTION = MotionSettings(theta_step=1.0, bounce_y=False)


def car_model_matrix(state: AnimationState) -> Matrix4:
    return translate(identity(), state.tx, state.ty, 0.0)


def build_car_draws(model: Matrix4) -> list[DrawItem]:
    """Car parts back to front, all sharing one world matrix."""
    tris = PrimitiveMode.TRIANGLES
    fan = PrimitiveMode.TRIANGLE_FAN

    draws = [
        # roof, then the window glass inset into it
        DrawItem(fan, top_semicircle(ARC_SEGMENTS, 0.5, 0.0, -0.1), BODY, model),
        DrawItem(fan, top_semicircle(ARC_SEGMENTS, 0.4, 0.0, -0.1), GLASS, model),
        # window divider
        DrawItem(tris, rectangle(-0.05, -0.55, 0.06, 0.85), BODY, model),
        DrawItem(tris, rectangle(-0.5, -0.55, 1.0, 0.5), BODY, model),
        # door handle
        DrawItem(tris, rectangle(-0.15, -0.2, 0.1, 0.04), CHROME, model),
        # nose and front bumper
        DrawItem(fan, upper_semicircle(ARC_SEGMENTS, 0.25, -0.48, -0.30), BODY, model),
        DrawItem(fan, upper_semicircle(ARC_SEGMENTS, 0.05, -0.69, -0.50), TRIM, model),
        # rear bumper and tail
        DrawItem(fan, lower_semicircle(ARC_SEGMENTS, 0.05, 0.69, -0.50), TRIM, model),
        DrawItem(fan, lower_semicircle(ARC_SEGMENTS, 0.25, 0.48, -0.30), BODY, model),
        # skirt
        DrawItem(tris, rectangle(-0.7, -0.55, 1.4, 0.1), TRIM, model),
        DrawItem(tris, circle(SEGMENTS, 0.07, -0.65, -0.3), HEADLIGHT, model),
        DrawItem(
            fan, lower_semicircle(ARC_SEGMENTS, 0.07, 0.65, -0.3), TAILLIGHT, model
        ),
    ]

    for radius, color in ((0.2, TIRE), (0.1, HUB)):
        for wheel in WHEELS:
            cx, cy = wheel
            draws.append(DrawItem(tris, circle(SEGMENTS, radius, cx, cy), color, model))

    return draws


def build_car_frame(state: AnimationState, frame_index: int) -> RenderFrameInput:
    return RenderFrameInput(
        frame_index=frame_index,
        draws=build_car_draws(car_model_matrix(state)),
    )


CAR_SCENE = SceneDefinition(
    name="car",
    motion=CAR_MOTION,
    build_frame=build_car_frame,
)
