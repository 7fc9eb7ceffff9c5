"""Frame-by-frame attack animations that play once and return to rest."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Optional, Union

WINDOW_WIDTH = 600
WINDOW_HEIGHT = 600
FRAMES_PER_ATTACK = 3
ATTACK_COUNT = 3
FRAME_DELAY_MS = 200
FPS = 60
BACKGROUND = (30, 30, 30)


class ActionState(IntEnum):
    """What the sprite is currently showing."""

    REST = 0
    ATTACK_1 = 1
    ATTACK_2 = 2
    ATTACK_3 = 3


def frame_paths(
    prefix: str, image_dir: Union[str, Path] = "."
) -> tuple[Path, list[list[Path]]]:
    """Return the rest image and, per attack, the frame images of a character.

    Files are named ``<prefix>_sel.jpeg`` and ``<prefix>_coup<A>_<F>.jpeg``
    with ``A`` from 1 to 3 and ``F`` from 0 to 2.
    """
    base = Path(image_dir)
    rest = base / f"{prefix}_sel.jpeg"
    attacks = [
        [base / f"{prefix}_coup{attack}_{frame}.jpeg" for frame in range(FRAMES_PER_ATTACK)]
        for attack in range(1, ATTACK_COUNT + 1)
    ]
    return rest, attacks


@dataclass
class SpriteAnimator:
    """Steps through an attack's frames, then falls back to the rest pose.

    Times are in milliseconds; a frame advances once more than
    ``FRAME_DELAY_MS`` has passed since the previous change.
    """

    state: ActionState = ActionState.REST
    frame_index: int = 0
    last_change: int = 0

    def start(self, attack: int, now: Optional[int] = None) -> None:
        """Begin attack 1, 2 or 3; ``now`` resets the frame timer when given."""
        if attack not in (1, 2, 3):
            raise ValueError(f"Attaque inconnue : {attack}")
        self.state = ActionState(attack)
        self.frame_index = 0
        if now is not None:
            self.last_change = now

    def update(self, now: int) -> None:
        """Advance to the next frame if enough time has passed."""
        if self.state is ActionState.REST:
            return
        if now - self.last_change > FRAME_DELAY_MS:
            self.last_change = now
            self.frame_index += 1
            if self.frame_index >= FRAMES_PER_ATTACK:
                self.state = ActionState.REST
                self.frame_index = 0

    def current_frame(self) -> Optional[tuple[int, int]]:
        """Return ``(attack_slot, frame)`` to draw, or None for the rest pose.

        ``attack_slot`` is zero-based, matching the lists of ``frame_paths``.
        """
        if self.state is ActionState.REST:
            return None
        return int(self.state) - 1, self.frame_index

    def finished(self) -> bool:
        """True when the sprite is back at rest on its first frame."""
        return self.state is ActionState.REST and self.frame_index == 0