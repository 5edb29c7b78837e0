"""
The simulation/render driver.

`Game` owns the one SessionState and is its only writer. The host calls
three entry points, always from the same thread:

  • trigger(now_ms)  on each press of the trigger key
  • tick()           once per second while the countdown is armed
  • frame(now_ms)    once per display refresh, forever

Everything else (readouts, the end-of-round message, the countdown timer)
is a collaborator passed in by the host.
"""
from __future__ import annotations

import logging
from typing import Callable, Sequence

from catstack_camera import follow, target_offset
from catstack_config import CONFIG
from catstack_layout import Dims
from catstack_render import draw_scene
from catstack_session import SessionState, advance, sanitize_dt, spawn_current
from catstack_sprite import FallingSprite
from catstack_stack import stack_top

logger = logging.getLogger(__name__)


class Countdown:
    """One-second timer collaborator; the host decides how ticks arrive.

    This base is the null countdown: arm and disarm do nothing, and ticks only
    happen when the caller invokes `Game.tick` itself. Headless drivers and
    tests use it directly; the desktop build passes `main.PygameCountdown`.
    """

    def arm(self) -> None:
        pass

    def disarm(self) -> None:
        pass


def _ignore(_value: int) -> None:
    pass


class Game:
    def __init__(self, dims: Dims, pick: Callable[[], int], countdown: Countdown,
                 images: Sequence = (), prompt_font=None,
                 on_time: Callable[[int], None] = _ignore,
                 on_score: Callable[[int], None] = _ignore,
                 on_round_over: Callable[[int], None] = _ignore,
                 cfg=CONFIG):
        self.dims = dims
        self.pick = pick
        self.countdown = countdown
        self.images = images
        self.prompt_font = prompt_font
        self.on_time = on_time
        self.on_score = on_score
        self.on_round_over = on_round_over
        self.cfg = cfg
        self.state = SessionState(current=FallingSprite.spawn(dims.spawn_x, dims.spawn_y, pick()),
                                  time_remaining=cfg["GAME_DURATION"])
        self.on_time(self.state.time_remaining)
        self.on_score(self.state.score)

    @property
    def active(self) -> bool:
        return self.state.active

    # ---------- Lifecycle ----------
    def start(self, now_ms: float):
        st = self.state
        st.active = True
        st.time_remaining = self.cfg["GAME_DURATION"]
        st.score = 0
        st.stack = []
        st.landings = 0
        st.camera_offset = 0.0
        st.last_time = now_ms
        st.current = spawn_current(st, self.dims, self.pick())
        self.countdown.arm()
        self.on_time(st.time_remaining)
        self.on_score(st.score)
        logger.info("session started: %ds on the clock", st.time_remaining)

    def trigger(self, now_ms: float):
        st = self.state
        if not st.active:
            self.start(now_ms)
        elif not st.current.falling:
            st.current.falling = True

    def tick(self):
        st = self.state
        if not st.active or st.time_remaining <= 0:
            return
        st.time_remaining -= 1
        self.on_time(st.time_remaining)
        if st.time_remaining == 0:
            self.countdown.disarm()
            st.active = False
            logger.info("round over: score=%d landings=%d", st.score, st.landings)
            self.on_round_over(st.score)

    # ---------- Per-frame ----------
    def update(self, now_ms: float):
        st = self.state
        if st.last_time is None:
            st.last_time = now_ms
        dt = sanitize_dt((now_ms - st.last_time) / 1000.0, self.cfg["MAX_FRAME_DT"])
        st.last_time = now_ms

        target = target_offset(stack_top(st.stack, self.dims), self.dims)
        st.camera_offset = follow(st.camera_offset, target, self.cfg["FOLLOW_RATE"],
                                  dt, self.cfg["REFERENCE_FPS"])

        if st.active:
            prev = st.score
            if advance(st, dt, self.dims, self.pick, self.cfg) is not None and st.score != prev:
                self.on_score(st.score)

    def frame(self, now_ms: float, canvas=None):
        self.update(now_ms)
        if canvas is not None:
            draw_scene(canvas, self.state, self.dims, self.images, self.prompt_font)

