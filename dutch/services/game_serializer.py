"""State views for the presentation layer.

Converts the in-memory round into pydantic models the UI can render or dump
to JSON. Other players' cards can be hidden from a given viewer.
"""

from typing import Any

from pydantic import BaseModel

from dutch.engine.scoring import RoundResult, card_points
from dutch.engine.specials import Effect, GiveEffect, PeekEffect, SwapEffect
from dutch.models.card import Card
from dutch.models.game_state import GameState, PendingDraw
from dutch.models.player import Player

__all__ = [
    "CardInfo",
    "EffectInfo",
    "GameStateInfo",
    "PendingDrawInfo",
    "PlayerInfo",
    "ScoreUpdate",
    "serialize_card",
    "serialize_effect",
    "serialize_player",
    "serialize_round_result",
    "serialize_state",
]


class CardInfo(BaseModel):
    """Face-up card."""

    suit: str
    value: int
    label: str
    points: int


class PlayerInfo(BaseModel):
    """Player information for rendering.

    ``hand`` holds ``None`` for empty slots and for cards hidden from the viewer.
    """

    index: int
    name: str
    score: int
    penalty: int
    hand: list[CardInfo | None]
    hand_size: int


class PendingDrawInfo(BaseModel):
    card: CardInfo
    source: str


class GameStateInfo(BaseModel):
    """Round information response."""

    players: list[PlayerInfo]
    deck_size: int
    discard_top: CardInfo | None
    discard_size: int
    current_player: int
    round_ended: bool
    dutch_called: bool
    dutch_caller: int | None
    pending_draw: PendingDrawInfo | None


class ScoreUpdate(BaseModel):
    """Score update for a player."""

    index: int
    name: str
    hand_total: int
    score_delta: int
    total_score: int
    dutch_penalized: bool


class EffectInfo(BaseModel):
    """Special-card effect, keyed by its signal string."""

    kind: str
    data: dict[str, Any]


def serialize_card(card: Card) -> CardInfo:
    """Serialize a Card."""
    return CardInfo(suit=card.suit.value, value=card.value, label=str(card), points=card_points(card))


def serialize_player(player: Player, index: int, *, reveal: bool = True) -> PlayerInfo:
    """Serialize a Player, masking their cards when ``reveal`` is False."""
    hand = [serialize_card(card) if card is not None and reveal else None for card in player.hand]
    return PlayerInfo(
        index=index,
        name=player.name,
        score=player.score,
        penalty=player.penalty,
        hand=hand,
        hand_size=player.hand_size,
    )


def _serialize_pending(pending: PendingDraw | None) -> PendingDrawInfo | None:
    if pending is None:
        return None
    return PendingDrawInfo(card=serialize_card(pending.card), source=pending.source.value)


def serialize_state(state: GameState, viewer_idx: int | None = None) -> GameStateInfo:
    """Serialize a round.

    Args:
        state: Round to serialize
        viewer_idx: If set, only this player's hand (and every hand once the
            round has ended) is revealed

    """
    top = state.top_discard()
    return GameStateInfo(
        players=[
            serialize_player(
                player,
                index,
                reveal=viewer_idx is None or viewer_idx == index or state.round_ended,
            )
            for index, player in enumerate(state.players)
        ],
        deck_size=len(state.deck),
        discard_top=serialize_card(top) if top is not None else None,
        discard_size=len(state.discard_pile),
        current_player=state.current_player,
        round_ended=state.round_ended,
        dutch_called=state.dutch_called,
        dutch_caller=state.dutch_caller,
        pending_draw=_serialize_pending(state.pending_draw),
    )


def serialize_round_result(state: GameState, result: RoundResult) -> list[ScoreUpdate]:
    """Serialize a scoring pass into one update per player."""
    return [
        ScoreUpdate(
            index=index,
            name=player.name,
            hand_total=result.hand_totals[index],
            score_delta=result.deltas[index],
            total_score=player.score,
            dutch_penalized=result.dutch_penalized and result.dutch_caller == index,
        )
        for index, player in enumerate(state.players)
    ]


def serialize_effect(effect: Effect) -> EffectInfo:
    """Serialize a special-card effect."""
    data: dict[str, Any] = {}
    if isinstance(effect, SwapEffect):
        data = {
            "first": [effect.first.player_idx, effect.first.hand_idx],
            "second": [effect.second.player_idx, effect.second.hand_idx],
        }
    elif isinstance(effect, PeekEffect):
        data = {
            "slot": [effect.slot.player_idx, effect.slot.hand_idx],
            "card": serialize_card(effect.card).model_dump() if effect.card is not None else None,
        }
    elif isinstance(effect, GiveEffect):
        data = {
            "target_player_idx": effect.target_player_idx,
            "hand_idx": effect.hand_idx,
            "card": serialize_card(effect.card).model_dump() if effect.card is not None else None,
        }
    return EffectInfo(kind=effect.kind.value, data=data)
