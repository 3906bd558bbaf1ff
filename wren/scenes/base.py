# wren/scenes/base.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator

from wren.graphics.frame import RenderFrameInput
from wren.scenes.animation import AnimationState, MotionSettings, step

FrameBuilder = Callable[[AnimationState, int], RenderFrameInput]


@dataclass(frozen=True, slots=True)
class SceneDefinition:
    """A named scene: how it moves and how a state turns into draws."""

    name: str
    motion: MotionSettings
    build_frame: FrameBuilder
    initial_state: AnimationState = field(default_factory=AnimationState)


def simulate(
    scene: SceneDefinition, frames: int
) -> Iterator[tuple[AnimationState, RenderFrameInput]]:
    """
    Yields ``frames`` (state, frame) pairs.
    Each frame steps first and then draws, so frame 0 already shows one
    step of motion.
    """
    if frames < 0:
        raise ValueError(f"frames must be >= 0, got {frames}")

    state = scene.initial_state
    for frame_index in range(frames):
        state = step(state, scene.motion)
        yield state, scene.build_frame(state, frame_index)
