"""Dutch card game rule engine."""

__version__ = "0.1.0"

from dutch.engine import (
    DutchError,
    ErrorCode,
    RoundResult,
    call_dutch,
    card_points,
    compute_scores,
    draw_card,
    exchange_card,
    is_game_over,
    play_special_card,
    remove_drawn_card,
    start_round,
)
from dutch.models import Card, EffectKind, GameState, Player, Suit, create_deck, shuffle
from dutch.session import GameSession

__all__ = [
    "Card",
    "DutchError",
    "EffectKind",
    "ErrorCode",
    "GameSession",
    "GameState",
    "Player",
    "RoundResult",
    "Suit",
    "call_dutch",
    "card_points",
    "compute_scores",
    "create_deck",
    "draw_card",
    "exchange_card",
    "is_game_over",
    "play_special_card",
    "remove_drawn_card",
    "shuffle",
    "start_round",
]
