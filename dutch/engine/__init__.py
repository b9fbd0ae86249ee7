"""Rule engine: round setup, turns, special cards and scoring."""

from dutch.engine.errors import (
    DrawPendingError,
    DutchError,
    ErrorCode,
    GameOverError,
    InvalidIndexError,
    NoPendingDrawError,
    NotEnoughCardsError,
    NotSpecialCardError,
    NotYourTurnError,
    RoundOverError,
)
from dutch.engine.round_setup import start_round
from dutch.engine.scoring import (
    RoundResult,
    call_dutch,
    card_points,
    compute_scores,
    hand_total,
    is_game_over,
    leaders,
)
from dutch.engine.specials import (
    Effect,
    GiveEffect,
    NoEffect,
    PeekEffect,
    Slot,
    SwapEffect,
    play_special_card,
    resolve_drawn_special,
)
from dutch.engine.turns import (
    discard_drawn_card,
    draw_card,
    exchange_card,
    place_drawn_card,
    remove_drawn_card,
    take_card,
    validate_slot,
)

__all__ = [
    "DrawPendingError",
    "DutchError",
    "Effect",
    "ErrorCode",
    "GameOverError",
    "GiveEffect",
    "InvalidIndexError",
    "NoEffect",
    "NoPendingDrawError",
    "NotEnoughCardsError",
    "NotSpecialCardError",
    "NotYourTurnError",
    "PeekEffect",
    "RoundOverError",
    "RoundResult",
    "Slot",
    "SwapEffect",
    "call_dutch",
    "card_points",
    "compute_scores",
    "discard_drawn_card",
    "draw_card",
    "exchange_card",
    "hand_total",
    "is_game_over",
    "leaders",
    "place_drawn_card",
    "play_special_card",
    "remove_drawn_card",
    "resolve_drawn_special",
    "start_round",
    "take_card",
    "validate_slot",
]
