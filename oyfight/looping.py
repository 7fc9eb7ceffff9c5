"""Attack animations that loop their frames for a fixed time, and the factory
that picks the right animator for a character's attack."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from .animation import FRAME_DELAY_MS, FRAMES_PER_ATTACK, ActionState, SpriteAnimator

LOOP_DURATION_MS = 1000

# Attacks whose sprite sheets are shown on a timed loop rather than played once.
_LOOPING_ATTACKS = {("zoro", 1), ("zoro", 2)}


@dataclass
class LoopingAnimator:
    """Cycles through one attack's frames until ``duration`` has elapsed.

    Times are in milliseconds. A frame advances once more than
    ``FRAME_DELAY_MS`` has passed since the previous change, wrapping back to
    the first frame; the animation ends once more than ``duration`` has
    passed since ``started``.
    """

    attack: int
    started: int
    duration: int = LOOP_DURATION_MS
    frame_index: int = 0
    last_change: int = field(default=-1)

    def __post_init__(self) -> None:
        if self.attack not in (1, 2, 3):
            raise ValueError(f"Attaque inconnue : {self.attack}")
        if self.last_change < 0:
            self.last_change = self.started

    @property
    def state(self) -> ActionState:
        """The attack being shown."""
        return ActionState(self.attack)

    def update(self, now: int) -> None:
        """Advance to the next frame if enough time has passed."""
        if self.finished(now):
            return
        if now - self.last_change > FRAME_DELAY_MS:
            self.last_change = now
            self.frame_index = (self.frame_index + 1) % FRAMES_PER_ATTACK

    def current_frame(self) -> tuple[int, int]:
        """Return ``(attack_slot, frame)`` to draw; ``attack_slot`` is zero-based."""
        return self.attack - 1, self.frame_index

    def finished(self, now: int) -> bool:
        """True once the whole loop duration has elapsed."""
        return now - self.started > self.duration


def animator_for(
    character: str, attack: int, now: int
) -> Union[LoopingAnimator, SpriteAnimator]:
    """Return a started animator for ``character``'s attack 1, 2 or 3 at ``now``.

    Some attacks loop for a fixed time; the others play their frames once
    and return to the rest pose.
    """
    if attack not in (1, 2, 3):
        raise ValueError(f"Attaque inconnue : {attack}")
    name = character.strip().lower()
    if not name:
        raise ValueError("Personnage inconnu.")
    if (name, attack) in _LOOPING_ATTACKS:
        return LoopingAnimator(attack=attack, started=now)
    animator = SpriteAnimator(last_change=now)
    animator.start(attack, now)
    return animator