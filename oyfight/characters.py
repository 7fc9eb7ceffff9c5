"""Fighter statistics and team selection."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Sequence

TEAM_SIZE = 3


@dataclass
class Fighter:
    """A playable character with its combat statistics."""

    name: str
    pv: int
    attack1: str
    damage1: int
    attack2: str
    damage2: int
    cooldown2: int
    attack3: str
    cooldown3: int
    special: int
    attack_speed: int
    strength: int
    counter: float
    heal: int
    agility: int
    reflex: int
    dodge_speed: int
    index: int

    def is_ko(self) -> bool:
        """True once the fighter has no health left."""
        return self.pv <= 0

    def tick_cooldowns(self) -> None:
        """Bring both special-attack cooldowns one turn closer to ready."""
        if self.cooldown2 > 0:
            self.cooldown2 -= 1
        if self.cooldown3 > 0:
            self.cooldown3 -= 1


def _balanced(
    *,
    name: str,
    pv: int,
    attack1: str,
    damage1: int,
    attack2: str,
    damage2: int,
    attack3: str,
    special: int,
    attack_speed: int,
    strength: int,
    agility: int,
    reflex: int,
    heal: int,
    index: int,
) -> Fighter:
    """Build a fighter whose counter and dodge speed derive from other stats."""
    return Fighter(
        name=name,
        pv=pv,
        attack1=attack1,
        damage1=damage1,
        attack2=attack2,
        damage2=damage2,
        cooldown2=2,
        attack3=attack3,
        cooldown3=3,
        special=special,
        attack_speed=attack_speed,
        strength=strength,
        counter=float((attack_speed + strength) // 2),
        heal=heal,
        agility=agility,
        reflex=reflex,
        dodge_speed=int(agility * 0.6 + reflex * 0.4),
        index=index,
    )


def roster() -> list[Fighter]:
    """Return a fresh list of the eight selectable fighters, in menu order."""
    return [
        Fighter(
            name="ARCHER", pv=100,
            attack1="Flèche", damage1=7,
            attack2="Flèche explosive", damage2=15, cooldown2=2,
            attack3="Flèche empoisonnée", cooldown3=3, special=50,
            attack_speed=110, strength=60, counter=85.0, heal=0,
            agility=75, reflex=65, dodge_speed=71, index=0,
        ),
        Fighter(
            name="GUERRIER", pv=150,
            attack1="Coup d'épée", damage1=10,
            attack2="Coup de hache", damage2=20, cooldown2=2,
            attack3="Coup de masse", cooldown3=3, special=30,
            attack_speed=70, strength=100, counter=85.0, heal=0,
            agility=40, reflex=30, dodge_speed=36, index=1,
        ),
        Fighter(
            name="SHOTO", pv=80,
            attack1="Point de feu", damage1=40,
            attack2="Boule de glace", damage2=50, cooldown2=2,
            attack3="Super point de feu", cooldown3=3, special=60,
            attack_speed=90, strength=40, counter=65.0, heal=20,
            agility=30, reflex=70, dodge_speed=46, index=2,
        ),
        Fighter(
            name="SONIC", pv=100,
            attack1="Charge rapide", damage1=15,
            attack2="Bouclier destructeur", damage2=25, cooldown2=2,
            attack3="Spin dash", cooldown3=3, special=35,
            attack_speed=130, strength=70, counter=100.0, heal=5,
            agility=90, reflex=80, dodge_speed=86, index=3,
        ),
        _balanced(
            name="NARUTO", pv=120,
            attack1="Rasengan", damage1=28,
            attack2="Clones de l’ombre", damage2=20,
            attack3="Rasengan géant", special=50,
            attack_speed=90, strength=80, agility=85, reflex=80,
            heal=15, index=4,
        ),
        _balanced(
            name="ZORO", pv=130,
            attack1="Tranchant du démon", damage1=30,
            attack2="Tora Gari", damage2=35,
            attack3="Asura : Ichibugin", special=60,
            attack_speed=70, strength=110, agility=60, reflex=50,
            heal=5, index=5,
        ),
        _balanced(
            name="ITACHI", pv=100,
            attack1="Shuriken", damage1=18,
            attack2="Amaterasu", damage2=35,
            attack3="Tsukuyomi", special=60,
            attack_speed=95, strength=65, agility=75, reflex=95,
            heal=10, index=6,
        ),
        _balanced(
            name="AIZEN", pv=125,
            attack1="Coup de sabre", damage1=22,
            attack2="Hadō 90 : Kurohitsugi", damage2=40,
            attack3="Kyoka Suigetsu", special=70,
            attack_speed=80, strength=90, agility=70, reflex=85,
            heal=5, index=7,
        ),
    ]


def pick_team(fighters: Sequence[Fighter], indices: Iterable[int]) -> list[Fighter]:
    """Return independent copies of the three fighters chosen by index.

    Raises ValueError when the number of choices is wrong or an index is
    outside the roster.
    """
    chosen = list(indices)
    if len(chosen) != TEAM_SIZE:
        raise ValueError(f"Il faut choisir exactement {TEAM_SIZE} personnages.")
    for number in chosen:
        if not 0 <= number < len(fighters):
            raise ValueError("Erreur : numéro invalide.")
    return [replace(fighters[number]) for number in chosen]