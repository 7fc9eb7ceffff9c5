"""Window that plays one attack animation of one character, then closes."""

from __future__ import annotations

import argparse
import sys
from itertools import chain
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from .animation import (
    BACKGROUND,
    FPS,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    SpriteAnimator,
    frame_paths,
)
from .looping import LoopingAnimator, animator_for

DEFAULT_TITLE = "Animations d'Attaques"

_TITLES = {
    ("naruto", 3): "Animations Naruto",
    ("sonic", 3): "Animations Sonic",
    ("zoro", 1): "Animation Attaque 1",
    ("zoro", 2): "Animation Attaque 2",
}

Frame = Optional[tuple[int, int]]
Animator = Union[SpriteAnimator, LoopingAnimator]


def _check_attack(attack: int) -> None:
    if attack not in (1, 2, 3):
        raise ValueError(f"Attaque inconnue : {attack}")


def window_title(character: str, attack: int) -> str:
    """Return the caption of the window showing ``character``'s attack."""
    _check_attack(attack)
    return _TITLES.get((character.strip().lower(), attack), DEFAULT_TITLE)


def _is_finished(animator: Animator, now: int) -> bool:
    if isinstance(animator, LoopingAnimator):
        return animator.finished(now)
    return animator.finished()


def run_animation(
    animator: Animator,
    clock: Callable[[], int],
    render: Callable[[Frame], bool],
) -> int:
    """Drive ``animator`` until it ends or ``render`` asks to stop.

    ``clock`` returns the current time in milliseconds. ``render`` receives
    the frame to draw (``(attack_slot, frame)`` or None for the rest pose)
    and returns False once the window has been closed. Each pass renders
    once, including the pass on which the animation ends. Returns the number
    of frames rendered.
    """
    rendered = 0
    while True:
        now = clock()
        animator.update(now)
        keep_going = render(animator.current_frame())
        rendered += 1
        if not keep_going or _is_finished(animator, now):
            return rendered


def play(character: str, attack: int, image_dir: Union[str, Path] = ".") -> int:
    """Open a window and play ``character``'s attack 1, 2 or 3 once.

    Images are read from ``image_dir``. Raises FileNotFoundError, before any
    window opens, when an image is missing. Returns the frames rendered.
    """
    _check_attack(attack)
    prefix = character.strip().lower()
    if not prefix:
        raise ValueError("Personnage inconnu.")
    rest_path, attack_paths = frame_paths(prefix, image_dir)
    for path in chain([rest_path], *attack_paths):
        if not path.is_file():
            raise FileNotFoundError(f"Erreur chargement image {path}")

    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(window_title(character, attack))
        size = (WINDOW_WIDTH, WINDOW_HEIGHT)

        def load(path: Path):
            try:
                image = pygame.image.load(str(path))
            except pygame.error as exc:
                raise FileNotFoundError(f"Erreur chargement image {path} : {exc}") from exc
            return pygame.transform.scale(image, size)

        rest = load(rest_path)
        frames = [[load(path) for path in paths] for paths in attack_paths]
        ticker = pygame.time.Clock()

        def render(frame: Frame) -> bool:
            closed = any(event.type == pygame.QUIT for event in pygame.event.get())
            screen.fill(BACKGROUND)
            if frame is None:
                image = rest
            else:
                slot, index = frame
                image = frames[slot][index]
            screen.blit(image, (0, 0))
            pygame.display.flip()
            ticker.tick(FPS)
            return not closed

        animator = animator_for(character, attack, pygame.time.get_ticks())
        return run_animation(animator, pygame.time.get_ticks, render)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry: play one attack animation and return an exit code."""
    parser = argparse.ArgumentParser(
        prog="oyfight-anim", description="Joue l'animation d'une attaque."
    )
    parser.add_argument("character", help="nom du personnage (naruto, shoto, ...)")
    parser.add_argument("attack", type=int, choices=(1, 2, 3), help="numéro d'attaque")
    parser.add_argument("--images", default=".", help="dossier des images")
    args = parser.parse_args(argv)
    try:
        play(args.character, args.attack, args.images)
    except (FileNotFoundError, ValueError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())