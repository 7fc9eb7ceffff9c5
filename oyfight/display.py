"""Terminal rendering: splash screen, roster listing, health bars and board."""

from __future__ import annotations

import sys
from typing import Sequence

from .characters import Fighter

BAR_WIDTH = 20
MAX_PV = 150
FIRE_LINE = "🔥" * 25

_SPLASH = """\
⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⢀⣀⣀⣀⣤⣤⣤⣄⣀⣀⣀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀
⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⢀⡤⣄⠀⠀⠀⠀⠀⠀⠀⠀⠀⢀⣠⠤⠖⣚⣩⣭⣥⣶⣶⣶⣶⣶⣶⣶⣬⣭⣙⣛⠲⢦⣄⡀⠀⠀⠀⠀⠀⠀⠀⠀
⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⣸⢰⣮⣧⡀⠀⠀⠀⠀⣀⠴⢚⣩⣴⣾⣿⣿⣿⣿⣿⣿⣿⣿⡿⢿⣛⢻⣿⣿⣿⣿⣿⣷⣮⣝⡳⢦⣄⠀⠀⠀⠀⠀
⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⡇⣿⣿⣿⣿⣦⣀⡴⢚⣵⣾⣿⣿⣿⣿⣿⢿⣟⣿⡽⣛⣭⡶⠿⢿⣿⣹⣿⣿⡿⣿⣿⣿⣿⣿⣿⣷⣜⡻⢦⡀⠀⠀
⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⣯⣿⣿⣿⣿⡿⢫⣶⣿⣿⣿⣿⡿⣿⣽⣾⣿⡿⣽⡾⠛⠉⠀⠀⣼⣟⣿⣿⣿⣿⣿⣷⣿⣿⣿⣿⣿⣿⡿⠮⠿⠷⠀
⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⢳⣹⣿⣿⢟⣼⣿⣿⣿⣿⢿⣷⣿⣿⣟⣿⡿⣿⣿⣦⣄⠀⠀⢠⣿⣽⣿⣿⣿⣿⣿⠟⠛⠉⠁⠀⠀⠀⠀⠀⠀⠀
⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⢸⡾⣛⢻⣾⣿⣿⡿⣿⣾⣿⣿⣽⣾⣿⣟⣿⣿⣻⣿⣿⣷⣀⣾⢿⣿⣿⡿⣿⣿⣿⣳⣄⡀⠀⠀⠀⠀⠀⠀⠀⠀
⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⣾⣿⣿⣇⣿⣿⣟⣿⣿⣯⣷⣿⡿⣯⣷⣿⣿⣻⣿⣷⣿⣿⣿⣿⣿⣿⡿⣿⣿⣷⣿⣿⣿⣷⣝⢦⡀⠀⠀⠀⠀⠀⠀
⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⢻⣿⠟⣿⣹⣿⢿⣻⣷⣿⣿⣽⣿⡿⣿⡿⢛⣩⣤⣦⣭⡻⣷⣿⣿⣻⣿⢿⣷⡿⣿⣾⡿⣿⣿⣷⡝⢦⡀⠀⠀⠀⠀
⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠸⣿⠀⣿⣿⣻⣿⣿⢿⣷⣿⣻⣷⡿⣣⣾⣿⠟⠛⠻⣿⣿⣿⣿⣽⣿⢿⣿⣻⣿⡿⣷⣿⣿⢿⣿⣿⣦⠳⡄⠀⠀⠀
⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⢳⠀⠸⣿⣿⣿⣾⣿⣿⣽⣿⢯⣿⠟⠋⠀⠀⠀⠀⠘⣿⣿⣾⣿⣻⣿⣿⣟⣿⣿⢿⣯⣿⣿⢿⣿⣿⣧⠹⡄⠀⠀
⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⢸⠀⠀⢹⣿⢿⣿⣿⣾⢟⣽⠟⠁⢀⡶⡀⠀⠀⠀⢰⣿⣿⣷⣿⢿⣟⣿⣿⣿⣿⣿⣿⣯⣿⣿⡿⣿⣿⣇⢳⡀⠀
⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⣀⡀⠀⠀⠈⡧⣾⡶⣿⡿⢭⣫⢵⠟⠁⠀⠀⣼⣿⡇⠀⠀⢠⣿⣿⣿⣾⣿⡿⣿⣿⣿⣿⣻⣿⣿⣿⣿⣷⣿⣿⣿⣿⡈⣇⠀
⠀⠀⠀⠀⠀⠀⠀⢀⣠⣀⠀⠀⠀⠀⢀⠞⠁⠈⢱⠀⠀⢳⡈⠻⢾⣷⠉⠒⠠⣀⠀⠀⠀⢿⣿⠀⢀⠴⠿⢿⣿⣯⣷⣿⣿⢿⣷⣿⣿⣷⡽⣿⢿⣿⣿⣽⣿⣿⡇⣿⠀
⠀⠀⠀⠀⠀⢠⠞⡁⠄⠀⠙⣆⠀⡰⠃⠀⠀⡀⡼⠀⠀⠀⠙⢤⡀⠀⠀⠀⠀⠀⠉⠀⠒⠚⠃⠈⢠⣶⠀⣼⣿⣿⣿⣿⣾⣿⣿⣽⣾⣿⣷⡝⣆⠈⠛⢿⣿⣿⣗⣸⡀
⠀⠀⠀⡠⠖⠾⡆⡀⠀⠀⠀⢸⠋⠀⠀⠀⣐⡤⠃⠀⠀⠀⠀⠀⠉⠲⢤⣀⠀⠀⠀⠀⠤⠄⠐⠒⣁⣤⣾⣿⣿⣿⣿⣷⣿⢿⣾⡿⣟⣿⣿⣿⠸⡆⠀⠀⠙⢿⣿⣷⢸⡇
⠀⢀⠞⡀⠁⠐⣷⠰⠀⠀⠀⠀⡄⠀⢀⠵⠋⠀⠀⠀⠀⠀⠀⠀⠀⠀⠀⣠⠽⢿⡶⣶⣶⣾⣿⡟⢻⣻⣿⠿⣿⣿⣿⣿⣿⣿⣿⢿⣿⣿⣿⣿⡇⢿⠀⠀⠀⠀⠹⣿⢼⡃
⠀⢘⣆⠃⠀⠀⠘⣆⠆⠀⠀⠀⣇⠔⣯⡄⠀⠀⠀⠀⠀⠀⠀⠀⣀⣴⢋⠀⠀⠀⠙⠶⣽⣿⣿⣧⣆⡴⠋⠓⡬⡛⢿⣿⣿⣿⣿⣿⣿⣾⣿⣿⣿⢸⡄⠀⠀⠀⠀⠈⠿⠀
⡔⠁⠘⣄⠀⠀⠀⠘⡌⠄⠀⠀⣸⢠⠰⠧⡀⠀⠀⠀⢀⣠⣖⡫⣵⠣⠁⠀⠀⠀⠀⠀⠀⣿⣿⣿⣿⣷⣄⠀⠈⠊⢢⡍⠻⢿⣿⣿⣷⣿⣿⣿⣿⢘⡇⠀⠀⠀⠀⠀⠀⠀
⢧⠀⠀⠈⠂⡀⠀⠀⠈⠒⣤⠾⣡⢎⠂⢠⡗⠒⠒⠋⠅⠀⣹⣴⠇⠂⠀⠀⠀⠀⠀⢀⣾⣿⣿⣿⣿⣿⣿⡏⠀⢀⢠⠃⠀⠀⠉⢿⣿⣽⣿⣿⢸⡇⠀⠀⠀⠀⠀⠀⠀
⢈⠷⣄⠀⠀⠈⠒⠤⡄⣴⣥⠶⠣⠟⢀⡞⡇⠀⠀⠀⣀⡴⠋⢹⠀⠀⠀⠀⠀⠀⢀⣾⣿⣿⣿⡿⠿⣛⡟⠀⠀⣊⡞⠀⠀⠀⠀⠀⠙⣿⣿⣿⣿⢸⡇⠀⠀⠀⠀⠀⠀⠀
⠸⡀⠀⠒⠀⠤⠤⣤⢳⣡⡏⠀⠀⢀⠾⠾⠖⠒⠚⠋⠁⠀⠀⢸⠀⠀⠀⠀⠀⣠⣿⣿⣿⣿⣻⡇⠀⠻⢦⣀⣈⣼⡳⡄⠀⠀⠀⠀⠀⠈⢿⣿⡏⣾⠁⠀⠀⠀⠀⠀⠀⠀
⠀⠉⠒⠦⠤⠤⠤⠞⠛⠶⠾⠒⠒⠉⠀⠀⠀⠀⠀⠀⠀⠀⠀⢿⣦⣀⣀⣤⣾⣿⣿⣿⢿⡟⣿⠋⢆⠀⠀⠈⠉⠉⢀⡇⠀⠀⠀⠀⠀⠀⠈⢻⣟⡟⠀⠀⠀⠀⠀⠀⠀⠀
"""

_BANNER_ROWS = (
    "\033[1;36m                         BIENVENUE DANS                                      ",
    "\033[1;34m       ██████╗ ██╗   ██╗    ███████╗██╗ ██████╗ ██╗   ██╗████████╗           ",
    "\033[1;34m      ██╔═══██╗╚██╗ ██╔╝    ██╔════╝██║██╔═══██ ██║   ██║   ██ ╔═╝           ",
    "\033[1;34m      ██║       ╚████╔╝     █████╗  ██║██║ ___  ████████║   ██ ║             ",
    "\033[1;34m      ██║   ██║  ╚██╔╝      ██╔══╝  ██║██║   ██║██║   ██║   ██ ║             ",
    "\033[1;34m      ╚██████╔╝   ██║       ██║     ██║╚██████╔╝██║   ██║   ██ ║             ",
    "\033[1;34m       ╚═════╝    ╚═╝       ╚═╝     ╚═╝ ╚═════╝ ╚═╝   ╚═╝    ╚═╝             ",
)


def clear_screen() -> None:
    """Clear the terminal and move the cursor to the top-left corner."""
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def splash_art() -> str:
    """Return the braille drawing shown on the title screen."""
    return _SPLASH


def welcome_banner() -> str:
    """Return the framed, coloured title with the prompt to press Enter."""
    edge = "═" * 77
    lines = ["\033[1;32m╔" + edge + "╗"]
    lines.extend(f"║{row}\033[1;32m║" for row in _BANNER_ROWS)
    lines.append("╚" + edge + "╝")
    lines.append("\033[1;33m")
    lines.append("                  Appuyez sur Entrée pour commencer...")
    return "\n".join(lines) + "\n\033[0m"


def health_bar(pv: int, max_pv: int = MAX_PV) -> str:
    """Return a 20-cell coloured bar for ``pv`` out of ``max_pv``."""
    bars = int(pv * BAR_WIDTH / max_pv)
    if bars > 14:
        colour = "\033[32m"
    elif bars > 7:
        colour = "\033[33m"
    else:
        colour = "\033[31m"
    cells = "".join(
        f"{colour}█" if cell < bars else "\033[0m " for cell in range(BAR_WIDTH)
    )
    return f"[{cells}\033[0m] \033[1m({pv} PV)\033[0m"


def roster_listing(fighters: Sequence[Fighter]) -> str:
    """Return the two-column character menu shown before team selection."""
    lines = ["Liste des personnages :"]
    pairs = zip(fighters[0::2], fighters[1::2])
    for number, (left, right) in enumerate(pairs):
        i = number * 2
        lines.append("%2d -> %-12s                %15d -> %-12s" % (i, left.name, i + 1, right.name))
        lines.append("| pv:   %17d   |                | pv:   %17d   |" % (left.pv, right.pv))
        for l_name, l_val, r_name, r_val in (
            (left.attack1, left.damage1, right.attack1, right.damage1),
            (left.attack2, left.damage2, right.attack2, right.damage2),
            (left.attack3, left.special, right.attack3, right.special),
        ):
            lines.append(
                "| %-20s: %3d |                | %-20s: %3d |" % (l_name, l_val, r_name, r_val)
            )
        lines.append("| soin:   %17d |                | soin:   %17d |" % (left.heal, right.heal))
        lines.append("")
    return "\n".join(lines) + "\n"


def battle_board(
    team1: Sequence[Fighter],
    team2: Sequence[Fighter],
    mode: int,
    attacker: int,
    target: int,
) -> str:
    """Return the in-game board: both teams, their markers and health bars.

    ``mode`` 1 is a two-player game, 2 a game against the bot; ``attacker``
    and ``target`` are the slots that get the impact marker on each side.
    """
    lines = [f"\033[1;44m{FIRE_LINE}\033[0m"]
    if mode in (1, 2):
        opponent = "Joueur 2:                " if mode == 1 else "Bot:"
        if mode == 1:
            lines.append("\033[1mJoueur 1:                          Joueur 2:\033[0m")
        else:
            lines.append("\033[1mJoueur 1:                         Bot:\033[0m")
        del opponent
        for slot, (left, right) in enumerate(zip(team1, team2)):
            p1 = "💥" if attacker == slot else ""
            p2 = "💥" if target == slot else ""
            d1 = "💀" if left.is_ko() else "  "
            d2 = "💀" if right.is_ko() else "  "
            lines.append(
                f"{d1}-{left.name}{p1}                         {p2}-{right.name}{d2}"
            )
            lines.append(health_bar(left.pv, MAX_PV))
            lines.append("                             " + health_bar(right.pv, MAX_PV))
        if mode == 2:
            lines.append(f"\033[1;44m{FIRE_LINE}\033[0m")
    lines.append(FIRE_LINE)
    return "\n".join(lines) + "\n"