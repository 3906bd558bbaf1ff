# wren/scenes/__init__.py
from wren.scenes.animation import AnimationState, MotionSettings, step
from wren.scenes.base import SceneDefinition, simulate
from wren.scenes.car import CAR_SCENE
from wren.scenes.flower import FLOWER_SCENE

SCENES: dict[str, SceneDefinition] = {
    CAR_SCENE.name: CAR_SCENE,
    FLOWER_SCENE.name: FLOWER_SCENE,
}

__all__ = [
    "AnimationState",
    "MotionSettings",
    "SceneDefinition",
    "SCENES",
    "simulate",
    "step",
]
