"""Draw and exchange mechanics.

Drawing is observe-then-commit: ``draw_card`` peeks, ``remove_drawn_card``
pops. The pending-draw helpers below build a turn out of those primitives
and keep the one drawn card on the state itself.
"""

import logging

from dutch.engine.errors import DrawPendingError, InvalidIndexError, NoPendingDrawError
from dutch.models.card import Card
from dutch.models.enums import DrawSource
from dutch.models.game_state import GameState, PendingDraw

logger = logging.getLogger(__name__)


def _pile(state: GameState, from_discard: bool) -> list[Card]:
    return state.discard_pile if from_discard else state.deck


def draw_card(state: GameState, from_discard: bool) -> Card | None:
    """Peek at the top card of the deck or discard pile.

    Returns:
        The top card, or None if the pile is empty

    """
    pile = _pile(state, from_discard)
    return pile[-1] if pile else None


def remove_drawn_card(state: GameState, from_discard: bool) -> None:
    """Pop the top card of the chosen pile. Does nothing on an empty pile."""
    pile = _pile(state, from_discard)
    if pile:
        pile.pop()


def exchange_card(state: GameState, player_idx: int, hand_idx: int, new_card: Card) -> Card | None:
    """Put ``new_card`` into a hand slot and return the card it replaces.

    The caller discards the returned card. Indices must be valid.
    """
    hand = state.players[player_idx].hand
    old_card = hand[hand_idx]
    hand[hand_idx] = new_card
    return old_card


def validate_slot(state: GameState, player_idx: int, hand_idx: int | None = None) -> None:
    """Raise InvalidIndexError unless the player (and slot) exist."""
    if not state.has_player(player_idx):
        raise InvalidIndexError(f"No player at index {player_idx}")
    if hand_idx is not None and not 0 <= hand_idx < state.players[player_idx].hand_size:
        raise InvalidIndexError(f"No slot {hand_idx} in hand of player {player_idx}")


def take_card(state: GameState, from_discard: bool) -> Card | None:
    """Draw a card and hold it as the pending draw.

    Returns:
        The drawn card, or None if the pile is empty (nothing changes)

    Raises:
        DrawPendingError: If a drawn card has not been placed yet

    """
    if state.pending_draw is not None:
        raise DrawPendingError(f"{state.pending_draw.card} must be placed before drawing again")

    card = draw_card(state, from_discard)
    if card is None:
        return None

    remove_drawn_card(state, from_discard)
    state.pending_draw = PendingDraw(card=card, source=DrawSource.from_flag(from_discard))
    logger.debug("Player %d drew %s from %s", state.current_player, card, state.pending_draw.source.value)
    return card


def _clear_pending(state: GameState) -> Card:
    if state.pending_draw is None:
        raise NoPendingDrawError("No card has been drawn")
    card = state.pending_draw.card
    state.pending_draw = None
    return card


def discard_drawn_card(state: GameState) -> Card:
    """Move the pending card onto the discard pile and return it."""
    card = _clear_pending(state)
    state.discard_pile.append(card)
    return card


def place_drawn_card(state: GameState, hand_idx: int) -> Card | None:
    """Exchange the pending card into the current player's hand.

    The displaced card, if any, goes onto the discard pile.

    Returns:
        The displaced card

    """
    validate_slot(state, state.current_player, hand_idx)
    card = _clear_pending(state)
    old_card = exchange_card(state, state.current_player, hand_idx, card)
    if old_card is not None:
        state.discard_pile.append(old_card)
    logger.debug("Player %d placed %s in slot %d, discarded %s", state.current_player, card, hand_idx, old_card)
    return old_card
