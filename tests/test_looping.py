import pytest

from oyfight.animation import FRAME_DELAY_MS, FRAMES_PER_ATTACK, ActionState, SpriteAnimator
from oyfight.looping import LOOP_DURATION_MS, LoopingAnimator, animator_for


def test_default_duration_is_one_second():
    anim = LoopingAnimator(attack=1, started=0)
    assert not anim.finished(1000)
    assert anim.finished(1001)
    assert LOOP_DURATION_MS == 1000


def test_starts_on_first_frame_of_its_attack():
    anim = LoopingAnimator(attack=2, started=500)
    assert anim.current_frame() == (1, 0)
    assert anim.state is ActionState.ATTACK_2


def test_frame_does_not_advance_at_exact_delay():
    anim = LoopingAnimator(attack=1, started=0)
    anim.update(FRAME_DELAY_MS)
    assert anim.frame_index == 0


def test_frame_advances_after_delay():
    anim = LoopingAnimator(attack=1, started=0)
    anim.update(FRAME_DELAY_MS + 1)
    assert anim.frame_index == 1
    assert anim.last_change == FRAME_DELAY_MS + 1


def test_frames_wrap_around():
    anim = LoopingAnimator(attack=1, started=0, duration=10_000)
    now = 0
    for _ in range(FRAMES_PER_ATTACK):
        now += FRAME_DELAY_MS + 1
        anim.update(now)
    assert anim.frame_index == 0
    assert anim.current_frame() == (0, 0)


def test_frame_index_always_in_range():
    anim = LoopingAnimator(attack=2, started=0, duration=100_000)
    for now in range(0, 20_000, 37):
        anim.update(now)
        assert 0 <= anim.frame_index < FRAMES_PER_ATTACK


def test_finishes_after_duration():
    anim = LoopingAnimator(attack=1, started=100)
    assert not anim.finished(100 + LOOP_DURATION_MS)
    assert anim.finished(100 + LOOP_DURATION_MS + 1)


def test_no_frame_change_once_finished():
    anim = LoopingAnimator(attack=1, started=0)
    anim.update(LOOP_DURATION_MS + 1)
    assert anim.frame_index == 0


def test_invalid_attack_rejected():
    with pytest.raises(ValueError):
        LoopingAnimator(attack=4, started=0)


def test_zoro_first_attacks_loop():
    for attack in (1, 2):
        anim = animator_for("zoro", attack, 250)
        assert isinstance(anim, LoopingAnimator)
        assert anim.started == 250
        assert anim.current_frame() == (attack - 1, 0)


def test_character_name_case_insensitive():
    anim = animator_for("ZORO", 2, 7)
    assert anim.current_frame() == (1, 0)
    assert anim.started == 7
    assert not anim.finished(7 + LOOP_DURATION_MS)
    assert anim.finished(7 + LOOP_DURATION_MS + 1)


def test_zoro_third_attack_plays_once():
    anim = animator_for("zoro", 3, 0)
    assert isinstance(anim, SpriteAnimator)
    assert anim.state is ActionState.ATTACK_3


def test_other_characters_play_once_from_now():
    anim = animator_for("sonic", 3, 400)
    assert isinstance(anim, SpriteAnimator)
    assert anim.current_frame() == (2, 0)
    assert anim.last_change == 400
    anim.update(400 + FRAME_DELAY_MS)
    assert anim.frame_index == 0


def test_play_once_animator_returns_to_rest():
    anim = animator_for("naruto", 1, 0)
    now = 0
    for _ in range(FRAMES_PER_ATTACK):
        now += FRAME_DELAY_MS + 1
        anim.update(now)
    assert anim.finished()
    assert anim.current_frame() is None


@pytest.mark.parametrize("attack", [0, 4, -1])
def test_animator_for_rejects_bad_attack(attack):
    with pytest.raises(ValueError):
        animator_for("sonic", attack, 0)


def test_animator_for_rejects_empty_name():
    with pytest.raises(ValueError):
        animator_for("  ", 1, 0)