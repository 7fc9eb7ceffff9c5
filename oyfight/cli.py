"""Command-line game: title screen, team selection and the fight."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Optional, Sequence

from .characters import Fighter, pick_team, roster
from .combat import Battle, Mode, launch_animation
from .display import clear_screen, roster_listing, splash_art, welcome_banner


def _announce_animation(character_index: int, attack: int) -> bool:
    """Name the skipped animation instead of opening a window."""
    print(f"(animation ATTAQUE_{attack} du personnage {character_index} ignorée)")
    return False


def _intro() -> None:
    clear_screen()
    print(splash_art(), end="")
    time.sleep(1)
    print(welcome_banner(), end="")
    input()


def _choose(fighters: Sequence[Fighter]) -> Optional[list[Fighter]]:
    raw = input("Entrez les numéros des 3 personnages à choisir (0 à 7) : ")
    try:
        indices = [int(token) for token in raw.split()]
        return pick_team(fighters, indices)
    except ValueError:
        print("Erreur : numéro invalide.")
        return None


def _play(rng: random.Random, animate) -> int:
    _intro()
    fighters = roster()
    print("1 -> Joueur 2      2 -> Bot")
    try:
        choice = int(input("Adversaire : ").strip())
    except ValueError:
        choice = 0
    print(roster_listing(fighters), end="")
    if choice not in (Mode.PLAYERS, Mode.BOT):
        print("Erreur : choix invalide.")
        return 1
    print("Choix joueur 1 :")
    team1 = _choose(fighters)
    if team1 is None:
        return 1
    print("Choix joueur 2 :" if choice == Mode.PLAYERS else "Choix bot :")
    team2 = _choose(fighters)
    if team2 is None:
        return 1
    Battle(team1, team2, Mode(choice), rng, input, print, animate).run()
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game in the terminal and return an exit code."""
    parser = argparse.ArgumentParser(
        prog="oyfight", description="Jeu de combat au tour par tour."
    )
    parser.add_argument("--seed", type=int, default=None, help="graine du hasard")
    parser.add_argument(
        "--no-animation", action="store_true", help="ne pas lancer les animations"
    )
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    animate = _announce_animation if args.no_animation else launch_animation
    try:
        return _play(rng, animate)
    except (EOFError, KeyboardInterrupt):
        print()
        return 1


if __name__ == "__main__":
    sys.exit(main())