"""Tests for draw and exchange mechanics."""

import pytest

from dutch.engine.errors import DrawPendingError, InvalidIndexError, NoPendingDrawError
from dutch.engine.turns import (
    discard_drawn_card,
    draw_card,
    exchange_card,
    place_drawn_card,
    remove_drawn_card,
    take_card,
    validate_slot,
)
from dutch.models.card import Card
from dutch.models.enums import DrawSource, Suit


class TestDrawPrimitives:
    """Test peek-then-commit drawing."""

    def test_draw_from_deck_peeks(self, two_player_state):
        deck_before = list(two_player_state.deck)
        card = draw_card(two_player_state, from_discard=False)
        assert card == Card(Suit.DIAMONDS, 7)
        assert two_player_state.deck == deck_before
        assert two_player_state.pending_draw is None

    def test_draw_from_discard_peeks(self, two_player_state):
        assert draw_card(two_player_state, from_discard=True) == Card(Suit.SPADES, 8)
        assert len(two_player_state.discard_pile) == 1

    def test_draw_from_empty_returns_none(self, make_state):
        state = make_state(hands=[[]])
        assert draw_card(state, from_discard=False) is None
        assert draw_card(state, from_discard=True) is None

    @pytest.mark.parametrize("from_discard", [False, True])
    def test_draw_then_remove(self, two_player_state, from_discard):
        """The peeked card is the one removed, and the pile shrinks by one."""
        pile = two_player_state.discard_pile if from_discard else two_player_state.deck
        size_before = len(pile)
        card = draw_card(two_player_state, from_discard)
        top_before = pile[-1]
        remove_drawn_card(two_player_state, from_discard)
        assert len(pile) == size_before - 1
        assert card == top_before
        assert card not in pile

    def test_remove_from_empty_is_noop(self, make_state):
        state = make_state(hands=[[]])
        remove_drawn_card(state, from_discard=False)
        remove_drawn_card(state, from_discard=True)
        assert state.deck == []
        assert state.discard_pile == []


class TestExchangeCard:
    """Test exchange_card."""

    def test_returns_prior_occupant(self, two_player_state):
        new_card = Card(Suit.CLUBS, 13)
        old = exchange_card(two_player_state, 0, 2, new_card)
        assert old == Card(Suit.CLUBS, 3)
        assert two_player_state.players[0].hand[2] == new_card

    def test_other_slots_unchanged(self, two_player_state):
        before = [list(p.hand) for p in two_player_state.players]
        exchange_card(two_player_state, 1, 0, Card(Suit.SPADES, 6))
        after = [list(p.hand) for p in two_player_state.players]
        assert after[0] == before[0]
        assert after[1][1:] == before[1][1:]

    def test_exchange_into_empty_slot(self, make_state):
        state = make_state(hands=[[None, None]])
        assert exchange_card(state, 0, 1, Card(Suit.HEARTS, 4)) is None
        assert state.players[0].hand == [None, Card(Suit.HEARTS, 4)]

    def test_out_of_range_is_index_error(self, two_player_state):
        with pytest.raises(IndexError):
            exchange_card(two_player_state, 0, 9, Card(Suit.HEARTS, 4))


class TestPendingDraw:
    """Test the one-card-at-a-time turn protocol."""

    def test_take_card_holds_pending(self, two_player_state):
        card = take_card(two_player_state, from_discard=False)
        assert card == Card(Suit.DIAMONDS, 7)
        assert two_player_state.pending_draw.card == card
        assert two_player_state.pending_draw.source is DrawSource.DECK
        assert len(two_player_state.deck) == 2

    def test_second_draw_rejected(self, two_player_state):
        take_card(two_player_state, from_discard=True)
        with pytest.raises(DrawPendingError):
            take_card(two_player_state, from_discard=False)
        assert len(two_player_state.deck) == 3

    def test_take_from_empty_pile(self, make_state):
        state = make_state(hands=[[]])
        assert take_card(state, from_discard=False) is None
        assert state.pending_draw is None

    def test_discard_drawn_card(self, two_player_state):
        card = take_card(two_player_state, from_discard=False)
        assert discard_drawn_card(two_player_state) == card
        assert two_player_state.top_discard() == card
        assert two_player_state.pending_draw is None

    def test_discard_without_draw(self, two_player_state):
        with pytest.raises(NoPendingDrawError):
            discard_drawn_card(two_player_state)

    def test_place_drawn_card(self, two_player_state):
        card = take_card(two_player_state, from_discard=False)
        old = place_drawn_card(two_player_state, 0)
        assert old == Card(Suit.HEARTS, 5)
        assert two_player_state.players[0].hand[0] == card
        assert two_player_state.top_discard() == old
        assert two_player_state.pending_draw is None

    def test_place_conserves_cards(self, two_player_state):
        before = two_player_state.card_count()
        take_card(two_player_state, from_discard=True)
        assert two_player_state.card_count() == before
        place_drawn_card(two_player_state, 3)
        assert two_player_state.card_count() == before

    def test_place_bad_slot_keeps_pending(self, two_player_state):
        take_card(two_player_state, from_discard=False)
        with pytest.raises(InvalidIndexError):
            place_drawn_card(two_player_state, 4)
        assert two_player_state.pending_draw is not None

    def test_place_without_draw(self, two_player_state):
        with pytest.raises(NoPendingDrawError):
            place_drawn_card(two_player_state, 0)


class TestValidateSlot:
    def test_valid(self, two_player_state):
        validate_slot(two_player_state, 1, 3)
        validate_slot(two_player_state, 0)

    @pytest.mark.parametrize(("player_idx", "hand_idx"), [(2, 0), (-1, 0), (0, 4), (1, -1)])
    def test_invalid(self, two_player_state, player_idx, hand_idx):
        with pytest.raises(InvalidIndexError):
            validate_slot(two_player_state, player_idx, hand_idx)
