"""Tests for presentation-layer views."""

from dutch.engine.scoring import call_dutch, compute_scores
from dutch.engine.specials import GiveEffect, NoEffect, PeekEffect, Slot, SwapEffect
from dutch.engine.turns import take_card
from dutch.models.card import Card
from dutch.models.enums import Suit
from dutch.services.game_serializer import (
    serialize_card,
    serialize_effect,
    serialize_round_result,
    serialize_state,
)


class TestSerializeCard:
    def test_fields(self):
        info = serialize_card(Card(Suit.SPADES, 13))
        assert info.suit == "spades"
        assert info.value == 13
        assert info.label == "K♠"
        assert info.points == 13


class TestSerializeState:
    """Test GameStateInfo."""

    def test_full_view(self, two_player_state):
        info = serialize_state(two_player_state)
        assert info.deck_size == 3
        assert info.discard_size == 1
        assert info.discard_top.label == "8♠"
        assert info.current_player == 0
        assert info.pending_draw is None
        assert all(card is not None for player in info.players for card in player.hand)

    def test_viewer_sees_only_own_hand(self, two_player_state):
        info = serialize_state(two_player_state, viewer_idx=1)
        assert info.players[0].hand == [None, None, None, None]
        assert info.players[0].hand_size == 4
        assert [c.value for c in info.players[1].hand] == [1, 2, 3, 4]

    def test_hands_revealed_after_round(self, two_player_state):
        compute_scores(two_player_state)
        info = serialize_state(two_player_state, viewer_idx=1)
        assert info.players[0].hand[0].label == "5♥"

    def test_pending_draw(self, two_player_state):
        take_card(two_player_state, from_discard=True)
        info = serialize_state(two_player_state)
        assert info.pending_draw.source == "discard"
        assert info.pending_draw.card.label == "8♠"
        assert info.discard_top is None

    def test_model_dump_is_json_ready(self, two_player_state):
        data = serialize_state(two_player_state).model_dump()
        assert data["players"][0]["name"] == "player-0"
        assert data["players"][1]["hand"][0] == {"suit": "hearts", "value": 1, "label": "A♥", "points": 1}


class TestSerializeRoundResult:
    def test_score_updates(self, two_player_state):
        call_dutch(two_player_state, 0)
        result = compute_scores(two_player_state)
        updates = serialize_round_result(two_player_state, result)
        assert [u.score_delta for u in updates] == [25, 10]
        assert [u.total_score for u in updates] == [25, 10]
        assert [u.dutch_penalized for u in updates] == [True, False]
        assert [u.hand_total for u in updates] == [15, 10]


class TestSerializeEffect:
    def test_swap(self):
        info = serialize_effect(SwapEffect(Slot(0, 1), Slot(1, 2)))
        assert info.kind == "valet"
        assert info.data == {"first": [0, 1], "second": [1, 2]}

    def test_peek(self):
        info = serialize_effect(PeekEffect(Slot(0, 3), Card(Suit.HEARTS, 9)))
        assert info.kind == "dame"
        assert info.data["card"]["label"] == "9♥"

    def test_give_noop(self):
        info = serialize_effect(GiveEffect(target_player_idx=1))
        assert info.kind == "as"
        assert info.data == {"target_player_idx": 1, "hand_idx": None, "card": None}

    def test_no_effect(self):
        info = serialize_effect(NoEffect())
        assert info.kind == ""
        assert info.data == {}
