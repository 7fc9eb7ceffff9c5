"""Turn-based combat between two teams of three fighters."""

from __future__ import annotations

import random
import subprocess
import sys
from enum import IntEnum
from typing import Callable, Optional, Sequence, Union

from .characters import Fighter
from .display import battle_board

CHARACTER_NAMES = (
    "archer",
    "guerrier",
    "shoto",
    "sonic",
    "naruto",
    "zoro",
    "itachi",
    "aizen",
)
COOLDOWN2 = 2
COOLDOWN3 = 3
HEAL = 4
_CLEAR = "\033[2J\033[H"

Animate = Callable[[int, int], object]
Output = Callable[[str], object]
Ask = Callable[[str], str]


class Defense(IntEnum):
    """The reactions a targeted fighter can choose."""

    DODGE = 1
    BLOCK = 2
    COUNTER = 3
    NOTHING = 4


class Mode(IntEnum):
    """Who plays the second team."""

    PLAYERS = 1
    BOT = 2


def launch_animation(character_index: int, attack: int) -> bool:
    """Play the animation of a character's attack in a separate process.

    Returns True when the animation ran to completion. Unknown characters or
    attacks are ignored and give False.
    """
    if not 0 <= character_index < len(CHARACTER_NAMES) or attack not in (1, 2, 3):
        return False
    print(f"Lancement de l'animation ATTAQUE_{attack}...")
    command = [
        sys.executable,
        "-m",
        "oyfight.viewer",
        CHARACTER_NAMES[character_index],
        str(attack),
    ]
    try:
        result = subprocess.run(command, check=False)
    except OSError:
        print("Erreur lors de l'exécution")
        return False
    if result.returncode == 0:
        print("Animation terminée avec succès")
        return True
    print("Erreur lors de l'exécution")
    return False


def _as_defense(defense: Union[int, Defense]) -> Optional[Defense]:
    try:
        return Defense(defense)
    except ValueError:
        return None


def resolve_defense(
    attacker: Fighter,
    target: Fighter,
    defense: Union[int, Defense],
    damage: int,
    attack: int,
    animate: Animate = launch_animation,
    out: Output = print,
) -> None:
    """Apply the target's reaction to an incoming attack.

    The attack's damage itself is taken off by the caller afterwards; a
    successful reaction gives back all or part of it beforehand.
    """
    reaction = _as_defense(defense)
    if reaction is Defense.DODGE:
        if attacker.attack_speed < target.attack_speed:
            out(f"💨 {target.name} esquive l'attaque avec grâce !")
            target.pv += damage
        else:
            out(f"❌ {target.name} rate son esquive et prend les dégâts.")
        animate(attacker.index, attack)
    elif reaction is Defense.BLOCK:
        if target.strength >= attacker.strength:
            out(
                f"🛡️ {target.name} bloque l'attaque et réduit les dégâts à "
                f"{target.strength - attacker.strength} !"
            )
            target.pv += damage * (attacker.strength // target.strength)
        else:
            out(f"{target.name} n'est pas assez fort pour bloquer l'attaque!")
        animate(attacker.index, attack)
    elif reaction is Defense.COUNTER:
        if target.counter > attacker.attack_speed:
            out(f"⚔️ {target.name} contre-attaque avec {target.attack1} !")
            target.pv += damage
            attacker.pv -= target.damage1
            animate(attacker.index, attack)
            animate(target.index, 1)
        else:
            out(f"❌ {target.name} tente de contre-attaquer, mais échoue !")
            animate(attacker.index, attack)
    elif reaction is Defense.NOTHING:
        out(f"😐 {target.name} ne fait rien et encaisse l'attaque.")
        animate(attacker.index, attack)
    else:
        out(f"❌ Choix invalide. {target.name} prend l'attaque en pleine face !")
        animate(attacker.index, attack)


class Battle:
    """A fight between two teams, turn by turn, until one side is wiped out."""

    def __init__(
        self,
        team1: Sequence[Fighter],
        team2: Sequence[Fighter],
        mode: Union[int, Mode] = Mode.BOT,
        rng: Optional[random.Random] = None,
        ask: Ask = input,
        out: Output = print,
        animate: Animate = launch_animation,
    ) -> None:
        self.team1 = list(team1)
        self.team2 = list(team2)
        self.mode = Mode(mode)
        self.rng = rng if rng is not None else random.Random()
        self.ask = ask
        self.out = out
        self.animate = animate
        self.remaining1 = sum(not fighter.is_ko() for fighter in self.team1)
        self.remaining2 = sum(not fighter.is_ko() for fighter in self.team2)

    # -- helpers ---------------------------------------------------------

    def _pick_slots(
        self, attackers: Sequence[Fighter], defenders: Sequence[Fighter]
    ) -> tuple[int, int]:
        if all(f.is_ko() for f in attackers) or all(f.is_ko() for f in defenders):
            raise ValueError("Aucun personnage disponible pour ce tour.")
        while True:
            attacker = self.rng.randrange(len(attackers))
            target = self.rng.randrange(len(defenders))
            if not attackers[attacker].is_ko() and not defenders[target].is_ko():
                return attacker, target

    def _show(self, left_marker: int, right_marker: int, attacker: Fighter) -> None:
        board = battle_board(self.team1, self.team2, self.mode, left_marker, right_marker)
        self.out(_CLEAR + board.rstrip("\n"))
        self.out("🔫 MENU D'ATTAQUE 🔫")
        self.out(f"1 -> {attacker.attack1} ({attacker.damage1} dmg)")
        self.out(f"2 -> {attacker.attack2}({attacker.cooldown2}) ({attacker.damage2} dmg)")
        self.out(f"3 -> {attacker.attack3}({attacker.cooldown3}) ({attacker.special} dmg)")
        self.out(f"4 -> Soin (+{attacker.heal} pv)")

    def _cooling(self, attacker: Fighter, attack: int) -> bool:
        return (attack == 2 and attacker.cooldown2 > 0) or (
            attack == 3 and attacker.cooldown3 > 0
        )

    def _read_attack(self, prompt: str, attacker: Fighter) -> int:
        while True:
            answer = self.ask(prompt)
            try:
                attack = int(answer.strip())
            except ValueError:
                self.out("❌ Entrée invalide. Veuillez saisir un nombre entre 1 et 4.")
                continue
            if not 1 <= attack <= 4:
                self.out("❌ Veuillez saisir un nombre entre 1 et 4.")
                continue
            if self._cooling(attacker, attack):
                name = attacker.attack2 if attack == 2 else attacker.attack3
                self.out(
                    f"❌ Vous ne pouvez pas encore utiliser {name} (rechargement en cours)."
                )
                continue
            return attack

    def _read_defense(self, target: Fighter) -> int:
        self.out(f"{target.name} doit choisir une action défensive :")
        self.out("1. Esquiver")
        self.out("2. Bloquer")
        self.out("3. Contre-attaquer")
        self.out("4. Ne rien faire")
        answer = self.ask("Votre choix : ")
        try:
            return int(answer.strip())
        except ValueError:
            return 0

    def _apply(self, attacker: Fighter, target: Fighter, attack: int, defense: int) -> None:
        if attack == 1:
            resolve_defense(attacker, target, defense, attacker.damage1, attack, self.animate, self.out)
            target.pv -= attacker.damage1
        elif attack == 2:
            resolve_defense(attacker, target, defense, attacker.damage2, attack, self.animate, self.out)
            target.pv -= attacker.damage2
            attacker.cooldown2 = COOLDOWN2
        elif attack == 3:
            resolve_defense(attacker, target, defense, attacker.special, attack, self.animate, self.out)
            target.pv -= attacker.special
            attacker.cooldown3 = COOLDOWN3
        else:
            attacker.pv += attacker.heal

    def _knock_out(self, fighter: Fighter, side: int, label: str) -> None:
        fighter.pv = 0
        if side == 1:
            self.remaining1 -= 1
            left = self.remaining1
        else:
            self.remaining2 -= 1
            left = self.remaining2
        self.out(f"💀 {fighter.name} est K.O. ! {label} a {left} personnages restants.")

    # -- turns -----------------------------------------------------------

    def player_one_turn(self) -> None:
        """Player one attacks a random opponent with a random fighter."""
        a, t = self._pick_slots(self.team1, self.team2)
        attacker, target = self.team1[a], self.team2[t]
        self._show(a, t, attacker)
        attack = self._read_attack(
            f"joueur1 ({attacker.name}) attaque joueur2 ({target.name}) avec : ", attacker
        )
        defense = 0
        if attack != HEAL:
            if self.mode is Mode.PLAYERS:
                defense = self._read_defense(target)
            else:
                defense = self.rng.randrange(4) + 1
                self.out("")
        self._apply(attacker, target, attack, defense)
        for fighter in self.team2:
            fighter.tick_cooldowns()
        if target.pv <= 0:
            self._knock_out(target, 2, "Joueur 2")
        if attacker.pv <= 0:
            self._knock_out(attacker, 1, "Joueur 1")

    def player_two_turn(self) -> None:
        """Player two attacks; player one always picks a reaction."""
        a, t = self._pick_slots(self.team2, self.team1)
        attacker, target = self.team2[a], self.team1[t]
        self._show(t, a, attacker)
        attack = self._read_attack(
            f"joueur2 ({attacker.name}) attaque joueur1 ({target.name}) avec : ", attacker
        )
        defense = self._read_defense(target)
        self._apply(attacker, target, attack, defense)
        for fighter in self.team1:
            fighter.tick_cooldowns()
        if target.pv <= 0:
            self._knock_out(target, 1, "Joueur 1")
        if attacker.pv <= 0:
            self._knock_out(attacker, 2, "Joueur 2")

    def bot_turn(self) -> None:
        """The bot picks a random ready attack; player one picks a reaction."""
        a, t = self._pick_slots(self.team2, self.team1)
        attacker, target = self.team2[a], self.team1[t]
        self._show(t, a, attacker)
        while True:
            attack = self.rng.randrange(4) + 1
            if not self._cooling(attacker, attack):
                break
        if attack == HEAL:
            self.out(f"Bot ({attacker.name}) se soigne")
        else:
            name = {1: attacker.attack1, 2: attacker.attack2, 3: attacker.attack3}[attack]
            self.out(f"Bot ({attacker.name}) attaque joueur1 ({target.name}) avec : {name}")
        defense = 0
        if attack != HEAL:
            defense = self._read_defense(target)
        self._apply(attacker, target, attack, defense)
        for fighter in self.team1:
            fighter.tick_cooldowns()
        if target.pv <= 0:
            self._knock_out(target, 1, "Joueur 1")
        if attacker.pv <= 0:
            self._knock_out(attacker, 2, "Bot")

    def _over(self) -> bool:
        return self.remaining1 <= 0 or self.remaining2 <= 0

    def run(self) -> int:
        """Play turns until one team is out; return the winning side, 1 or 2."""
        start = self.rng.randrange(11)
        opponent = self.player_two_turn if self.mode is Mode.PLAYERS else self.bot_turn
        if start % 2 == 0:
            order = (self.player_one_turn, opponent)
        else:
            order = (opponent, self.player_one_turn)
        while not self._over():
            for turn in order:
                turn()
                if self._over():
                    break
        winner = 2 if self.remaining1 <= 0 else 1
        if winner == 1:
            self.out("🎉 Joueur 1 a gagné 🏆")
        elif self.mode is Mode.PLAYERS:
            self.out("🎉 Joueur 2 a gagné 🏆")
        else:
            self.out("🎉 Le Bot a gagné 🏆")
        return winner