"""Card model and deck construction."""

from dataclasses import dataclass

from dutch.constants import ACE, JACK, KING, QUEEN, SUIT_SIZE
from dutch.models.enums import Suit

_RANK_LABELS: dict[int, str] = {ACE: "A", JACK: "J", QUEEN: "Q", KING: "K"}


@dataclass(frozen=True)
class Card:
    """A playing card.

    Attributes:
        suit: One of the four French suits
        value: 1-13 (1=Ace, 11=Jack, 12=Queen, 13=King)

    """

    suit: Suit
    value: int

    def __post_init__(self) -> None:
        if not 1 <= self.value <= SUIT_SIZE:
            raise ValueError(f"Card value must be 1-{SUIT_SIZE}, got {self.value}")

    def is_ace(self) -> bool:
        """Check if card is an Ace."""
        return self.value == ACE

    def is_jack(self) -> bool:
        """Check if card is a Jack (valet)."""
        return self.value == JACK

    def is_queen(self) -> bool:
        """Check if card is a Queen (dame)."""
        return self.value == QUEEN

    def is_king(self) -> bool:
        """Check if card is a King (roi)."""
        return self.value == KING

    def is_special(self) -> bool:
        """Check if card has a play-time or score-time effect."""
        return self.is_ace() or self.is_jack() or self.is_queen() or self.is_king()

    def is_red(self) -> bool:
        return self.suit.is_red()

    def __str__(self) -> str:
        """Return a short label such as ``A♥`` or ``10♠``."""
        return f"{_RANK_LABELS.get(self.value, str(self.value))}{self.suit.symbol}"


def create_deck() -> list[Card]:
    """Return the ordered 52-card deck, suit-major, values ascending."""
    return [Card(suit, value) for suit in Suit for value in range(1, SUIT_SIZE + 1)]
