"""Game domain models."""

from dutch.models.card import Card, create_deck
from dutch.models.deck import shuffle
from dutch.models.enums import Command, DrawSource, EffectKind, Suit
from dutch.models.game_state import GameState, PendingDraw
from dutch.models.player import Player

__all__ = [
    "Card",
    "Command",
    "DrawSource",
    "EffectKind",
    "GameState",
    "PendingDraw",
    "Player",
    "Suit",
    "create_deck",
    "shuffle",
]
