import random

import pytest

from game.deck import ShellDeck, LIVE, BLANK
from game.errors import DeckExhausted


@pytest.mark.parametrize("seed", range(50))
def test_regenerate_always_mixes_live_and_blank(seed):
    deck = ShellDeck(rng=random.Random(seed))
    live, blank = deck.regenerate()

    assert 1 <= live <= 5
    assert blank == 6 - live
    assert len(deck.shells) == 6
    assert deck.shells.count(LIVE) == live
    assert deck.shells.count(BLANK) == blank
    assert deck.index == 0


def test_every_live_count_shows_up():
    deck = ShellDeck(rng=random.Random(0))
    seen = {deck.regenerate()[0] for _ in range(300)}
    assert seen == {1, 2, 3, 4, 5}


def test_draw_past_the_end_fails_until_regenerated():
    deck = ShellDeck(rng=random.Random(3))
    deck.regenerate()
    drawn = [deck.draw() for _ in range(6)]

    assert len(drawn) == 6
    assert deck.exhausted
    with pytest.raises(DeckExhausted):
        deck.draw()
    with pytest.raises(DeckExhausted):
        deck.draw()

    deck.regenerate()
    assert deck.draw() in (LIVE, BLANK)


def test_peek_does_not_advance():
    deck = ShellDeck()
    deck.load([BLANK, LIVE])

    assert deck.peek_next() == BLANK
    assert deck.peek_next() == BLANK
    assert deck.index == 0


def test_peek_on_empty_deck_is_none():
    deck = ShellDeck()
    assert deck.exhausted
    assert deck.peek_next() is None


def test_discard_returns_shell_and_moves_cursor():
    deck = ShellDeck()
    deck.load([LIVE, BLANK])

    assert deck.discard_next() == LIVE
    assert deck.index == 1
    assert deck.remaining == 1
    assert deck.live_remaining == 0


def test_load_rejects_unknown_shells():
    with pytest.raises(ValueError):
        ShellDeck().load([LIVE, "dud"])


def test_to_dict_hides_contents_unless_revealed():
    deck = ShellDeck()
    deck.load([LIVE, BLANK, BLANK])
    deck.draw()

    hidden = deck.to_dict()
    assert hidden == {"shellIndex": 1, "shellCount": 3, "shellsRemaining": 2}
    assert deck.to_dict(reveal=True)["shells"] == [LIVE, BLANK, BLANK]
