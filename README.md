# oyfight

A turn-based fighting game played in the terminal, with its texts in
French. Two teams of three fighters take turns attacking each other until
one side has no fighter left standing. You can play against a second
person at the same keyboard or against a bot.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

```
oyfight
```

Options:

- `--seed N` – seed the random draws, so a game can be replayed;
- `--no-animation` – do not open animation windows; a line naming the
  skipped animation is printed instead.

The game opens with a title screen; press Enter to begin. Then:

1. Choose your opponent: `1` for a second player, `2` for the bot. Any
   other answer ends the game with an error.
2. The roster of eight fighters is shown with their health, their three
   attacks and their healing: ARCHER, GUERRIER, SHOTO, SONIC, NARUTO,
   ZORO, ITACHI and AIZEN.
3. Each side enters three fighter numbers (0 to 7), separated by spaces.
   A wrong number, or not exactly three, ends the game with an error.

Each turn an attacker and a target are drawn at random among the fighters
still standing, and the attacking side picks one of four moves:

- **1** – the basic attack, always available;
- **2** – a stronger attack, which then needs two turns to recharge;
- **3** – the special attack, which then needs three turns to recharge;
- **4** – heal the attacking fighter.

When attacked, the defending side chooses a reaction: dodge, block,
counter-attack or do nothing. Whether it works depends on the two
fighters' attack speed, strength and counter ratings. Against the bot,
the bot picks its own moves, and its own reactions, at random; you still
choose your reactions when the bot attacks.

The battle board shows both teams with coloured health bars; fallen
fighters are marked with a skull. Whoever still has fighters when the
other side has none wins. Pressing Ctrl-C or closing the input ends the
game with exit code 1.

## Attack animations

Unless `--no-animation` is given, each attack starts a separate process
that shows a short sprite animation in a pygame window. One animation can
also be played on its own:

```
oyfight-anim naruto 1 --images path/to/images
```

The fighter is named in lower case (`archer`, `guerrier`, `shoto`,
`sonic`, `naruto`, `zoro`, `itachi`, `aizen`) and the attack is 1, 2 or 3;
`--images` defaults to the current directory. Most attacks play their
three frames once, 200 ms apart, then return to the rest pose; ZORO's
attacks 1 and 2 loop their frames for one second instead.

A fighter's animation needs all of its images in the image directory: a
resting image `<fighter>_sel.jpeg` and three frames per attack,
`<fighter>_coup<attack>_<frame>.jpeg` (attack 1 to 3, frame 0 to 2). If
one is missing, the command prints an error naming the file and exits
with code 1; during a game the fight simply goes on. During a game the
images are looked for in the current directory.

## What it does not include

No images are shipped with the package, so animations only play where you
provide the JPEG files described above. Health bars are drawn against a
fixed maximum of 150 PV, and healing is not capped at a fighter's
starting health.

## Library use

The pieces of the game are importable on their own:

- `oyfight.characters` – `Fighter`, `roster()` and `pick_team()`;
- `oyfight.display` – `health_bar()`, `roster_listing()`,
  `battle_board()`, `splash_art()`, `welcome_banner()` and
  `clear_screen()`;
- `oyfight.combat` – `Battle` (with `run()` and the single turns
  `player_one_turn()`, `player_two_turn()` and `bot_turn()`), `Mode`,
  `Defense`, `resolve_defense()` and `launch_animation()`. `Battle`
  takes its random generator, input, output and animation functions as
  arguments, so a game can be driven without a terminal;
- `oyfight.animation` – `SpriteAnimator`, `ActionState` and
  `frame_paths()`;
- `oyfight.looping` – `LoopingAnimator` and `animator_for()`;
- `oyfight.viewer` – `play()`, `run_animation()` and `window_title()`.