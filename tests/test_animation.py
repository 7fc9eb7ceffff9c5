from pathlib import Path

import pytest

from oyfight.animation import (
    FRAME_DELAY_MS,
    FRAMES_PER_ATTACK,
    ActionState,
    SpriteAnimator,
    frame_paths,
)


def test_frame_paths_names():
    rest, attacks = frame_paths("naruto", "imgs")
    assert rest == Path("imgs") / "naruto_sel.jpeg"
    assert attacks[0][0] == Path("imgs") / "naruto_coup1_0.jpeg"
    assert attacks[2][2] == Path("imgs") / "naruto_coup3_2.jpeg"


def test_frame_paths_shape():
    _, attacks = frame_paths("shoto")
    assert len(attacks) == 3
    assert all(len(frames) == FRAMES_PER_ATTACK for frames in attacks)
    names = {p.name for frames in attacks for p in frames}
    assert len(names) == 3 * FRAMES_PER_ATTACK


def test_new_animator_is_finished_and_at_rest():
    anim = SpriteAnimator()
    assert anim.finished()
    assert anim.current_frame() is None


@pytest.mark.parametrize("attack", [1, 2, 3])
def test_start_sets_state(attack):
    anim = SpriteAnimator()
    anim.start(attack, now=1000)
    assert anim.state == ActionState(attack)
    assert anim.current_frame() == (attack - 1, 0)
    assert not anim.finished()


@pytest.mark.parametrize("attack", [0, 4, -1])
def test_start_rejects_unknown_attack(attack):
    with pytest.raises(ValueError):
        SpriteAnimator().start(attack, now=0)


def test_frame_does_not_advance_at_exact_delay():
    anim = SpriteAnimator()
    anim.start(2, now=0)
    anim.update(FRAME_DELAY_MS)
    assert anim.current_frame() == (1, 0)
    anim.update(FRAME_DELAY_MS + 1)
    assert anim.current_frame() == (1, 1)


def test_full_cycle_returns_to_rest():
    anim = SpriteAnimator()
    anim.start(3, now=0)
    now = 0
    seen = []
    while not anim.finished():
        now += FRAME_DELAY_MS + 1
        anim.update(now)
        seen.append(anim.current_frame())
    assert seen[-1] is None
    assert seen[:-1] == [(2, frame) for frame in range(1, FRAMES_PER_ATTACK)]
    assert anim.state is ActionState.REST


def test_update_at_rest_does_nothing():
    anim = SpriteAnimator(last_change=5)
    anim.update(10_000)
    assert anim.last_change == 5
    assert anim.finished()


def test_start_without_time_keeps_previous_timer():
    anim = SpriteAnimator(last_change=500)
    anim.start(1)
    assert anim.last_change == 500
    anim.update(500 + FRAME_DELAY_MS + 1)
    assert anim.current_frame() == (0, 1)