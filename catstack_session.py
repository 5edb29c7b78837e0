"""
Session state and the per-frame physics step.

`advance` is the only place the falling sprite moves. It is called by the
driver once per frame while a session is active and reports whether the
current sprite landed during that frame.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from catstack_config import CONFIG
from catstack_layout import Dims
from catstack_sprite import FallingSprite, StackedSprite
from catstack_stack import landing_score, settle

logger = logging.getLogger(__name__)


@dataclass
class SessionState:
    current: FallingSprite
    active: bool = False
    time_remaining: int = 0
    score: int = 0
    stack: List[StackedSprite] = field(default_factory=list)
    camera_offset: float = 0.0
    last_time: Optional[float] = None
    landings: int = 0


def sanitize_dt(dt: float, max_dt: float) -> float:
    """Elapsed seconds safe to integrate with.

    Non-finite or negative values become 0 (skip the frame). Long pauses,
    e.g. a dragged or minimised window, are clamped to `max_dt` so a sprite
    never moves more than one clamped step in a frame.
    """
    if not math.isfinite(dt) or dt < 0:
        logger.debug("discarding bad frame dt=%r", dt)
        return 0.0
    if dt > max_dt:
        logger.debug("clamping frame dt=%.3fs to %.3fs", dt, max_dt)
        return max_dt
    return dt


def spawn_current(state: SessionState, dims: Dims, image: int) -> FallingSprite:
    return FallingSprite.spawn(dims.spawn_x, dims.spawn_y - state.camera_offset, image)


def advance(state: SessionState, dt: float, dims: Dims,
            pick: Callable[[], int], cfg=CONFIG) -> Optional[StackedSprite]:
    """Move the current sprite by `dt` seconds; return the landed snapshot, if any."""
    cur = state.current
    if not cur.falling:
        cur.x += cfg["HORIZONTAL_SPEED"] * dt
        if cur.x > dims.width:
            cur.x = float(-dims.sprite)
        cur.y = dims.spawn_y - state.camera_offset
        return None

    cur.y += cfg["FALL_SPEED"] * dt
    if not settle(state.stack, cur, dims):
        return None

    landed = StackedSprite.snapshot(cur)
    state.stack.append(landed)
    state.score = landing_score(state.score, landed.y, dims)
    state.landings += 1
    # replaced, not reused: the new sprite waits, so this landing can't repeat
    state.current = spawn_current(state, dims, pick())
    logger.debug("landed at (%.1f, %.1f); stack=%d score=%d",
                 landed.x, landed.y, len(state.stack), state.score)
    return landed
