"""Shared fixtures for the Dutch test suite."""

import random

import pytest

from dutch.models import Card, GameState, Player, Suit


@pytest.fixture
def rng():
    """Seeded generator so deals are reproducible."""
    return random.Random(1234)


@pytest.fixture
def make_state():
    """Build a GameState from explicit hands, deck and discard pile.

    Deck and discard are given bottom-first: the last card is the top.
    """

    def _make(hands, deck=None, discard=None, current_player=0):
        players = [Player(name=f"player-{i}", hand=list(hand)) for i, hand in enumerate(hands)]
        return GameState(
            players=players,
            deck=list(deck or []),
            discard_pile=list(discard or []),
            current_player=current_player,
        )

    return _make


@pytest.fixture
def two_player_state(make_state):
    """Two full hands, a short deck and one discard."""
    return make_state(
        hands=[
            [Card(Suit.HEARTS, 5), Card(Suit.DIAMONDS, 5), Card(Suit.CLUBS, 3), Card(Suit.SPADES, 2)],
            [Card(Suit.HEARTS, 1), Card(Suit.HEARTS, 2), Card(Suit.HEARTS, 3), Card(Suit.HEARTS, 4)],
        ],
        deck=[Card(Suit.CLUBS, 9), Card(Suit.SPADES, 12), Card(Suit.DIAMONDS, 7)],
        discard=[Card(Suit.SPADES, 8)],
    )
