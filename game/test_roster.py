import random

import pytest

from config import GameConfig
from game.errors import AlreadyJoined, RosterFull
from game.roster import Roster
from game.turns import TurnSequencer


def seated(n, dead=()):
    roster = Roster(rng=random.Random(0))
    for i in range(n):
        roster.add(f"P{i}", f"p{i}")
    for i in dead:
        roster[i].hp = 0
    return roster


# -----------------------------
# ROSTER
# -----------------------------

def test_new_player_has_full_health_and_six_items():
    roster = seated(1)
    player = roster[0]

    assert player.hp == GameConfig.MAX_HP
    assert player.item_total == GameConfig.INITIAL_ITEM_TOTAL
    assert player.saw is False


def test_ninth_player_is_turned_away():
    roster = seated(8)
    with pytest.raises(RosterFull):
        roster.add("Late", "p8")
    assert len(roster) == 8


def test_same_connection_cannot_take_two_seats():
    roster = seated(1)
    with pytest.raises(AlreadyJoined):
        roster.add("Again", "p0")


def test_remove_unknown_is_a_no_op():
    roster = seated(2)
    assert roster.remove("ghost") is None
    assert len(roster) == 2


def test_remove_returns_former_index():
    roster = seated(3)
    assert roster.remove("p1") == 1
    assert [p.id for p in roster] == ["p0", "p2"]


def test_living_helpers():
    roster = seated(3, dead=[1])
    assert roster.living_count() == 2
    assert roster.is_living(0)
    assert not roster.is_living(1)
    assert not roster.is_living(7)
    assert [p.id for p in roster.living()] == ["p0", "p2"]


# -----------------------------
# TURNS
# -----------------------------

def test_advance_skips_eliminated_players():
    roster = seated(4, dead=[1, 2])
    turns = TurnSequencer(roster)

    assert turns.advance() == 3
    assert turns.advance() == 0


def test_advance_with_one_survivor_stays_put():
    roster = seated(3, dead=[0, 2])
    turns = TurnSequencer(roster)
    turns.turn = 1

    assert turns.advance() == 1


def test_advance_with_nobody_alive_halts():
    roster = seated(3, dead=[0, 1, 2])
    turns = TurnSequencer(roster)

    assert turns.advance() == 0
    assert turns.current() is None


def test_removal_before_turn_keeps_current_actor():
    roster = seated(4)
    turns = TurnSequencer(roster)
    turns.turn = 2

    turns.player_removed(roster.remove("p0"))

    assert turns.current().id == "p2"


def test_removal_after_turn_changes_nothing():
    roster = seated(4)
    turns = TurnSequencer(roster)
    turns.turn = 1

    turns.player_removed(roster.remove("p3"))

    assert turns.turn == 1


def test_current_actor_leaving_hands_turn_to_previous_seat():
    roster = seated(4)
    turns = TurnSequencer(roster)
    turns.turn = 1

    turns.player_removed(roster.remove("p1"))

    assert turns.turn == 0
    assert turns.current().id == "p0"


def test_current_actor_leaving_mid_table_steps_back_one():
    roster = seated(4)
    turns = TurnSequencer(roster)
    turns.turn = 2

    turns.player_removed(roster.remove("p2"))

    assert turns.turn == 1
    assert turns.current().id == "p1"


def test_first_seat_leaving_on_their_turn_clamps_at_zero():
    roster = seated(3)
    turns = TurnSequencer(roster)

    turns.player_removed(roster.remove("p0"))

    assert turns.turn == 0
    assert turns.current().id == "p1"


def test_actor_leaving_after_dead_seat_moves_forward_to_living():
    roster = seated(4, dead=[1])
    turns = TurnSequencer(roster)
    turns.turn = 2

    turns.player_removed(roster.remove("p2"))

    # p1 is dead, so ensure_living carries the pointer on to p3
    assert turns.current().id == "p3"


def test_last_seat_leaving_wraps_to_first_living():
    roster = seated(3, dead=[0])
    turns = TurnSequencer(roster)
    turns.turn = 2

    turns.player_removed(roster.remove("p2"))

    assert turns.current().id == "p1"


def test_empty_roster_resets_turn():
    roster = seated(1)
    turns = TurnSequencer(roster)

    turns.player_removed(roster.remove("p0"))

    assert turns.turn == 0
