from __future__ import annotations

import math

import pytest

from catstack_session import SessionState, advance, sanitize_dt
from catstack_sprite import FallingSprite, StackedSprite


def _state(x: float = 0.0, y: float = 50.0, falling: bool = False) -> SessionState:
    return SessionState(current=FallingSprite(x, y, 0, falling), active=True, time_remaining=60)


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), -float("inf"), -0.5])
def test_sanitize_dt_drops_bad_values(bad: float) -> None:
    assert sanitize_dt(bad, 0.1) == 0.0


def test_sanitize_dt_clamps_long_pauses() -> None:
    assert sanitize_dt(12.0, 0.1) == 0.1
    assert sanitize_dt(0.016, 0.1) == 0.016


@pytest.mark.parametrize("x", [790.0, 795.5, 799.0])
def test_wrap_resets_to_minus_sprite_size(dims, pick, x: float) -> None:
    st = _state(x=x)
    advance(st, 0.1, dims, pick)
    assert st.current.x == -dims.sprite


def test_no_wrap_inside_viewport(dims, pick) -> None:
    st = _state(x=700.0)
    advance(st, 0.1, dims, pick)
    assert st.current.x == pytest.approx(718.0)


def test_waiting_sprite_tracks_camera(dims, pick) -> None:
    st = _state(y=123.0)
    st.camera_offset = 40.0
    advance(st, 0.01, dims, pick)
    assert st.current.y == dims.spawn_y - 40.0


def test_ground_clamp_lands_on_ground_line(dims, pick) -> None:
    st = _state(y=440.0, falling=True)
    landed = advance(st, 0.1, dims, pick)
    assert landed is not None
    assert landed.y + dims.sprite == dims.ground_y
    assert st.stack == [landed]


def test_falling_moves_down_without_contact(dims, pick) -> None:
    st = _state(y=100.0, falling=True)
    assert advance(st, 0.1, dims, pick) is None
    assert st.current.y == pytest.approx(130.0)
    assert st.stack == []


def test_landing_is_exactly_once(dims, pick) -> None:
    st = _state(y=440.0, falling=True)
    first = st.current
    landings = [advance(st, 0.1, dims, pick) for _ in range(10)]
    assert sum(1 for l in landings if l is not None) == 1
    assert len(st.stack) == 1
    assert st.landings == 1
    assert st.current is not first
    assert not st.current.falling


def test_respawn_accounts_for_camera(dims, pick) -> None:
    st = _state(y=440.0, falling=True)
    st.camera_offset = 25.0
    advance(st, 0.1, dims, pick)
    assert (st.current.x, st.current.y) == (dims.spawn_x, dims.spawn_y - 25.0)


def test_score_is_monotonic_over_landings(dims, pick) -> None:
    st = _state()
    scores = []
    # tower at x=0, then a lone sprite on the ground at x=500
    for x, y in [(0, 440), (0, 340), (0, 240), (500, 440), (0, 140)]:
        st.current = FallingSprite(float(x), float(y), 0, True)
        assert advance(st, 0.1, dims, pick) is not None
        scores.append(st.score)
    assert scores == sorted(scores)
    assert scores == [0, 1, 2, 2, 3]
    assert math.isclose(st.stack[-1].y, 150.0)


def test_stack_landing_uses_first_match(dims, pick) -> None:
    st = _state(x=20.0, y=250.0, falling=True)
    st.stack = [StackedSprite(0, 350, 0), StackedSprite(50, 300, 1)]
    landed = advance(st, 0.0333, dims, pick)
    assert landed is not None
    assert landed.y == 250.0
