import pytest

from oyfight.characters import Fighter, pick_team, roster


def test_roster_names_in_menu_order():
    names = [f.name for f in roster()]
    assert names == [
        "ARCHER", "GUERRIER", "SHOTO", "SONIC",
        "NARUTO", "ZORO", "ITACHI", "AIZEN",
    ]


def test_roster_indices_match_positions():
    for position, fighter in enumerate(roster()):
        assert fighter.index == position


def test_roster_starts_with_cooldowns_loaded():
    for fighter in roster():
        assert fighter.cooldown2 == 2
        assert fighter.cooldown3 == 3


def test_derived_stats_follow_formula():
    for fighter in roster()[4:]:
        assert fighter.counter == (fighter.attack_speed + fighter.strength) // 2
        assert fighter.dodge_speed == int(fighter.agility * 0.6 + fighter.reflex * 0.4)


def test_naruto_counter_value():
    naruto = roster()[4]
    assert naruto.counter == 85


def test_roster_returns_fresh_objects():
    first = roster()
    first[0].pv = 1
    assert roster()[0].pv != 1
    assert roster()[0].pv == 100


def test_is_ko():
    fighter = roster()[0]
    assert not fighter.is_ko()
    fighter.pv = 0
    assert fighter.is_ko()
    fighter.pv = -5
    assert fighter.is_ko()


def test_tick_cooldowns_stops_at_zero():
    fighter = roster()[1]
    for _ in range(10):
        fighter.tick_cooldowns()
    assert fighter.cooldown2 == 0
    assert fighter.cooldown3 == 0


def test_tick_cooldowns_decrements_once():
    fighter = roster()[1]
    before2, before3 = fighter.cooldown2, fighter.cooldown3
    fighter.tick_cooldowns()
    assert fighter.cooldown2 == before2 - 1
    assert fighter.cooldown3 == before3 - 1


def test_pick_team_returns_chosen_fighters():
    fighters = roster()
    team = pick_team(fighters, [7, 0, 3])
    assert [f.name for f in team] == ["AIZEN", "ARCHER", "SONIC"]


def test_pick_team_copies_are_independent():
    fighters = roster()
    team = pick_team(fighters, [2, 2, 5])
    team[0].pv = 0
    assert team[1].pv == fighters[2].pv
    assert fighters[2].pv == 80


def test_pick_team_rejects_out_of_range():
    with pytest.raises(ValueError):
        pick_team(roster(), [0, 1, 8])
    with pytest.raises(ValueError):
        pick_team(roster(), [-1, 1, 2])


def test_pick_team_requires_three():
    with pytest.raises(ValueError):
        pick_team(roster(), [0, 1])


def test_fighter_is_dataclass_with_equality():
    a = roster()[3]
    b = roster()[3]
    assert isinstance(a, Fighter)
    assert a == b