# wren/scenes/animation.py
from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class AnimationState:
    """Per-frame animation values. ``theta`` is in degrees."""

    theta: float = 0.0
    tx: float = 0.0
    ty: float = 0.0
    tx_step: float = 0.01
    ty_step: float = 0.02


@dataclass(frozen=True, slots=True)
class MotionSettings:
    theta_step: float = 1.0
    bounce_limit: float = 1.0
    # False: the y step flips every frame instead of at the limit.
    bounce_y: bool = True


def _bounce(pos: float, step_: float, limit: float) -> tuple[float, float]:
    if pos > limit or pos < -limit:
        step_ = -step_
    return pos + step_, step_


def step(state: AnimationState, motion: MotionSettings) -> AnimationState:
    """Advance one frame. Limits are checked before moving."""
    tx, tx_step = _bounce(state.tx, state.tx_step, motion.bounce_limit)

    if motion.bounce_y:
        ty, ty_step = _bounce(state.ty, state.ty_step, motion.bounce_limit)
    else:
        ty_step = -state.ty_step
        ty = state.ty + ty_step

    return replace(
        state,
        theta=state.theta + motion.theta_step,
        tx=tx,
        ty=ty,
        tx_step=tx_step,
        ty_step=ty_step,
    )
