"""Game state aggregate for a single round."""

from dataclasses import dataclass, field

from dutch.models.card import Card
from dutch.models.enums import DrawSource
from dutch.models.player import Player


@dataclass(frozen=True)
class PendingDraw:
    """The card a player has drawn but not yet placed."""

    card: Card
    source: DrawSource


@dataclass
class GameState:
    """Represents one round of Dutch.

    Created by ``start_round``, mutated in place by the turn and special-card
    engines, finalized by scoring. A new round builds a new instance.

    Attributes:
        players: Players in turn order
        deck: Draw pile, the last element is the next card drawn
        discard_pile: Discard pile, the last element is the visible card
        current_player: Index of the player whose turn it is
        round_ended: Set once the round has been scored
        dutch_called: Whether a player has called Dutch
        dutch_caller: Index of the player who called Dutch
        pending_draw: Card drawn this turn and not yet placed

    """

    players: list[Player]
    deck: list[Card] = field(default_factory=list)
    discard_pile: list[Card] = field(default_factory=list)
    current_player: int = 0
    round_ended: bool = False
    dutch_called: bool = False
    dutch_caller: int | None = None
    pending_draw: PendingDraw | None = None

    def current(self) -> Player:
        """Get the player whose turn it is."""
        return self.players[self.current_player]

    def top_discard(self) -> Card | None:
        """Get the visible discard card without removing it."""
        return self.discard_pile[-1] if self.discard_pile else None

    def has_player(self, player_idx: int) -> bool:
        return 0 <= player_idx < len(self.players)

    def advance_turn(self) -> int:
        """Pass the turn to the next player and return their index."""
        self.current_player = (self.current_player + 1) % len(self.players)
        return self.current_player

    def all_cards(self) -> list[Card]:
        """Get every card in play: deck, discard, hands and the pending draw."""
        cards = [*self.deck, *self.discard_pile]
        for player in self.players:
            cards.extend(player.cards())
        if self.pending_draw is not None:
            cards.append(self.pending_draw.card)
        return cards

    def card_count(self) -> int:
        return len(self.all_cards())

    def __str__(self) -> str:
        """Return string representation."""
        return (
            f"Round: {len(self.players)} players, deck {len(self.deck)}, "
            f"discard {len(self.discard_pile)}, turn {self.current_player}"
        )
