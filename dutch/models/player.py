"""Player model."""

from dataclasses import dataclass, field

from dutch.constants import DEFAULT_HAND_SIZE
from dutch.models.card import Card


@dataclass
class Player:
    """Represents a player at the table.

    Attributes:
        name: Display label
        hand: Fixed-length row of card slots, ``None`` until dealt
        score: Cumulative score across rounds
        penalty: Pending points added at the next scoring pass

    """

    name: str
    hand: list[Card | None] = field(default_factory=lambda: [None] * DEFAULT_HAND_SIZE)
    score: int = 0
    penalty: int = 0

    @classmethod
    def with_empty_hand(cls, name: str, hand_size: int, score: int = 0) -> "Player":
        """Create a player holding ``hand_size`` empty slots."""
        return cls(name=name, hand=[None] * hand_size, score=score)

    @property
    def hand_size(self) -> int:
        return len(self.hand)

    def cards(self) -> list[Card]:
        """Get the cards currently in hand, skipping empty slots."""
        return [card for card in self.hand if card is not None]

    def first_empty_slot(self) -> int | None:
        """Get the index of the first empty slot, scanning in order."""
        for index, card in enumerate(self.hand):
            if card is None:
                return index
        return None

    def is_hand_full(self) -> bool:
        """Check if every slot holds a card."""
        return self.first_empty_slot() is None

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.name} - Score: {self.score}"
