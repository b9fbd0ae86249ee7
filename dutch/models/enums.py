"""Enums used across the game."""

from enum import Enum


class Suit(str, Enum):
    """Card suits, in deck generation order."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    def is_red(self) -> bool:
        """Check if the suit is hearts or diamonds."""
        return self in (Suit.HEARTS, Suit.DIAMONDS)

    @property
    def symbol(self) -> str:
        """Return the suit glyph."""
        return {"hearts": "♥", "diamonds": "♦", "clubs": "♣", "spades": "♠"}[self.value]


class DrawSource(str, Enum):
    """Pile a card is drawn from."""

    DECK = "deck"
    DISCARD = "discard"

    @classmethod
    def from_flag(cls, from_discard: bool) -> "DrawSource":
        """Map the boolean draw selector to a source."""
        return cls.DISCARD if from_discard else cls.DECK


class EffectKind(str, Enum):
    """Signal returned when a special card is played."""

    VALET = "valet"  # Jack - swap two table cards
    DAME = "dame"  # Queen - peek at a card
    AS = "as"  # Ace - give a deck card to a player
    NONE = ""  # King, or a skipped effect


class Command(str, Enum):
    """Intents issued by the presentation layer."""

    DRAW = "DRAW"
    DISCARD_DRAWN = "DISCARD_DRAWN"
    EXCHANGE = "EXCHANGE"
    PLAY_SPECIAL = "PLAY_SPECIAL"
    CALL_DUTCH = "CALL_DUTCH"
    NEXT_ROUND = "NEXT_ROUND"
    SYNC_STATE = "SYNC_STATE"
