"""Special-card effects (Ace, Jack, Queen, King).

Each effect is a small value object tagged with an ``EffectKind`` so callers
can match on the variant instead of comparing strings. ``effect.kind.value``
gives the plain signal (``"valet"``, ``"dame"``, ``"as"`` or ``""``).
"""

import logging
from dataclasses import dataclass
from typing import ClassVar

from dutch.constants import ACE, JACK, QUEEN
from dutch.engine.errors import NotSpecialCardError
from dutch.engine.turns import discard_drawn_card, validate_slot
from dutch.models.card import Card
from dutch.models.enums import EffectKind
from dutch.models.game_state import GameState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Slot:
    """A position on the table."""

    player_idx: int
    hand_idx: int


@dataclass(frozen=True)
class NoEffect:
    """King, or an effect skipped for lack of targets."""

    kind: ClassVar[EffectKind] = EffectKind.NONE


@dataclass(frozen=True)
class SwapEffect:
    """Jack: two table cards traded places."""

    first: Slot
    second: Slot
    kind: ClassVar[EffectKind] = EffectKind.VALET


@dataclass(frozen=True)
class PeekEffect:
    """Queen: the acting player may look at ``card``; nothing moved."""

    slot: Slot
    card: Card | None
    kind: ClassVar[EffectKind] = EffectKind.DAME


@dataclass(frozen=True)
class GiveEffect:
    """Ace: the top deck card went to a player's first empty slot.

    ``hand_idx`` and ``card`` are None when the hand was full or the deck empty.
    """

    target_player_idx: int
    hand_idx: int | None = None
    card: Card | None = None
    kind: ClassVar[EffectKind] = EffectKind.AS


Effect = NoEffect | SwapEffect | PeekEffect | GiveEffect


def _swap(state: GameState, first: Slot, second: Slot) -> SwapEffect:
    first_hand = state.players[first.player_idx].hand
    second_hand = state.players[second.player_idx].hand
    first_hand[first.hand_idx], second_hand[second.hand_idx] = (
        second_hand[second.hand_idx],
        first_hand[first.hand_idx],
    )
    return SwapEffect(first=first, second=second)


def _give(state: GameState, target_player_idx: int) -> GiveEffect:
    target = state.players[target_player_idx]
    slot = target.first_empty_slot()
    if slot is None or not state.deck:
        return GiveEffect(target_player_idx=target_player_idx)
    card = state.deck.pop()
    target.hand[slot] = card
    return GiveEffect(target_player_idx=target_player_idx, hand_idx=slot, card=card)


def play_special_card(  # noqa: PLR0913
    state: GameState,
    player_idx: int,
    hand_idx: int,
    card: Card,
    target_player_idx: int | None = None,
    target_hand_idx: int | None = None,
) -> Effect:
    """Apply the effect tied to ``card``'s rank.

    Args:
        state: Round to mutate
        player_idx: Acting player
        hand_idx: Slot of the acting player the effect refers to
        card: The special card being played
        target_player_idx: Other player (Jack, Ace)
        target_hand_idx: Other player's slot (Jack)

    Returns:
        The effect that was applied. Jack without both targets, Ace without a
        target player, King and non-special ranks all give ``NoEffect``.

    """
    if card.value == JACK and target_player_idx is not None and target_hand_idx is not None:
        effect: Effect = _swap(
            state, Slot(player_idx, hand_idx), Slot(target_player_idx, target_hand_idx)
        )
    elif card.value == QUEEN:
        effect = PeekEffect(
            slot=Slot(player_idx, hand_idx), card=state.players[player_idx].hand[hand_idx]
        )
    elif card.value == ACE and target_player_idx is not None:
        effect = _give(state, target_player_idx)
    else:
        # King scores at the end of the round; nothing happens here
        effect = NoEffect()

    logger.debug("Player %d played %s: %r", player_idx, card, effect)
    return effect


def resolve_drawn_special(
    state: GameState,
    hand_idx: int,
    target_player_idx: int | None = None,
    target_hand_idx: int | None = None,
) -> Effect:
    """Play the pending drawn card as a special for the current player.

    The drawn card is discarded afterwards.

    Raises:
        NoPendingDrawError: If nothing has been drawn
        NotSpecialCardError: If the drawn card is not an Ace, Jack, Queen or King
        InvalidIndexError: If a slot or target does not exist

    """
    pending = state.pending_draw
    if pending is not None and not pending.card.is_special():
        raise NotSpecialCardError(f"{pending.card} has no special effect")

    validate_slot(state, state.current_player, hand_idx)
    if target_player_idx is not None:
        validate_slot(state, target_player_idx, target_hand_idx)

    card = discard_drawn_card(state)
    return play_special_card(
        state, state.current_player, hand_idx, card, target_player_idx, target_hand_idx
    )
