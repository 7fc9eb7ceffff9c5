import pytest

from oyfight.animation import SpriteAnimator
from oyfight.looping import LoopingAnimator
from oyfight.viewer import main, play, run_animation, window_title


def _clock(times):
    return iter(times).__next__


def _recorder(stop_after=None):
    seen = []

    def render(frame):
        seen.append(frame)
        return stop_after is None or len(seen) < stop_after

    return seen, render


def test_default_title_for_shoto_and_sonic():
    assert window_title("shoto", 2) == "Animations d'Attaques"
    assert window_title("sonic", 1) == "Animations d'Attaques"


def test_specific_titles():
    assert window_title("NARUTO", 3) == "Animations Naruto"
    assert window_title("zoro", 1) == "Animation Attaque 1"


def test_title_rejects_unknown_attack():
    with pytest.raises(ValueError):
        window_title("sonic", 4)


def test_sprite_animation_plays_once_then_rests():
    animator = SpriteAnimator(last_change=0)
    animator.start(2, 0)
    seen, render = _recorder()
    count = run_animation(animator, _clock([0, 100, 201, 300, 402, 603]), render)
    assert count == len(seen) == 6
    assert seen[-1] is None
    assert all(frame is not None for frame in seen[:-1])
    assert {frame[0] for frame in seen[:-1]} == {1}
    assert animator.finished()


def test_sprite_frames_never_go_backwards():
    animator = SpriteAnimator(last_change=0)
    animator.start(1, 0)
    seen, render = _recorder()
    count = run_animation(animator, _clock(range(0, 2000, 50)), render)
    assert count == len(seen)
    indices = [frame[1] for frame in seen if frame is not None]
    assert indices[0] == 0
    assert indices == sorted(indices)
    assert seen[-1] is None
    assert animator.finished()


def test_looping_animation_ends_after_duration():
    animator = LoopingAnimator(attack=1, started=0)
    times = [0, 250, 500, 1001, 1200]
    seen, render = _recorder()
    count = run_animation(animator, _clock(times), render)
    assert count == 4
    assert all(frame[0] == 0 for frame in seen)
    assert animator.finished(1001)


def test_closing_window_stops_early():
    animator = SpriteAnimator(last_change=0)
    animator.start(3, 0)
    seen, render = _recorder(stop_after=1)
    count = run_animation(animator, _clock([0, 300, 600, 900]), render)
    assert count == 1
    assert not animator.finished()


def test_play_missing_images_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        play("shoto", 2, tmp_path)


def test_play_rejects_bad_attack(tmp_path):
    with pytest.raises(ValueError):
        play("sonic", 0, tmp_path)


def test_main_reports_missing_images(tmp_path, capsys):
    assert main(["sonic", "1", "--images", str(tmp_path)]) == 1
    assert "sonic_sel.jpeg" in capsys.readouterr().err


def test_main_rejects_attack_out_of_range():
    with pytest.raises(SystemExit) as info:
        main(["shoto", "5"])
    assert info.value.code == 2