"""End-of-round scoring and game-over detection."""

import logging
from dataclasses import dataclass, field

from dutch.config import settings
from dutch.constants import ACE, BLACK_KING_POINTS, JACK, KING, QUEEN, QUEEN_POINTS, RED_KING_POINTS
from dutch.engine.errors import InvalidIndexError
from dutch.models.card import Card
from dutch.models.game_state import GameState
from dutch.models.player import Player

logger = logging.getLogger(__name__)


@dataclass
class RoundResult:
    """Outcome of one scoring pass.

    Attributes:
        hand_totals: Hand-only total per player
        deltas: Points added to each player's score this pass
        dutch_caller: Index of the player who called Dutch, if any
        dutch_penalized: Whether the caller took the wrong-call penalty

    """

    hand_totals: list[int] = field(default_factory=list)
    deltas: list[int] = field(default_factory=list)
    dutch_caller: int | None = None
    dutch_penalized: bool = False


def card_points(card: Card) -> int:
    """Point value of a card.

    Ace 1, Jack 11, Queen 10, red King 0, black King 13, other ranks face value.
    """
    if card.value == ACE:
        return 1
    if card.value == JACK:
        return 11
    if card.value == QUEEN:
        return QUEEN_POINTS
    if card.value == KING:
        return RED_KING_POINTS if card.is_red() else BLACK_KING_POINTS
    return card.value


def hand_total(player: Player) -> int:
    """Sum of card points in a player's hand, ignoring score and penalty."""
    return sum(card_points(card) for card in player.cards())


def call_dutch(state: GameState, player_idx: int) -> None:
    """Record a Dutch call. Scoring is triggered separately by the caller."""
    state.dutch_called = True
    state.dutch_caller = player_idx
    logger.debug("Player %d called Dutch", player_idx)


def compute_scores(state: GameState, dutch_penalty: int | None = None) -> RoundResult:
    """Score the round into each player's cumulative total.

    Every player adds their hand total and pending penalty to their score,
    then the penalty is cleared. If Dutch was called and the caller's hand
    total is strictly above the lowest hand total, the caller also takes the
    Dutch penalty.

    Args:
        state: Round to score
        dutch_penalty: Wrong-call penalty, defaults to ``settings.dutch_penalty``

    Returns:
        Per-player totals and deltas for display

    Raises:
        InvalidIndexError: If the recorded Dutch caller is not a player

    """
    if state.dutch_called and state.dutch_caller is not None and not state.has_player(state.dutch_caller):
        raise InvalidIndexError(f"Dutch caller {state.dutch_caller} is not a player")

    penalty_points = dutch_penalty if dutch_penalty is not None else settings.dutch_penalty
    result = RoundResult()

    for player in state.players:
        total = hand_total(player)
        delta = total + player.penalty
        player.score += delta
        player.penalty = 0
        result.hand_totals.append(total)
        result.deltas.append(delta)

    if state.dutch_called and state.dutch_caller is not None:
        # Totals are recomputed from the hands as they stand now
        totals = [hand_total(player) for player in state.players]
        caller_total = totals[state.dutch_caller]
        result.dutch_caller = state.dutch_caller
        if caller_total > min(totals):
            state.players[state.dutch_caller].score += penalty_points
            result.deltas[state.dutch_caller] += penalty_points
            result.dutch_penalized = True

    state.round_ended = True
    logger.info(
        "Round scored: totals=%s deltas=%s dutch_caller=%s penalized=%s",
        result.hand_totals,
        result.deltas,
        result.dutch_caller,
        result.dutch_penalized,
    )
    return result


def is_game_over(state: GameState, threshold: int | None = None) -> bool:
    """Check if any player's score has reached the game-over threshold."""
    limit = threshold if threshold is not None else settings.game_over_score
    return any(player.score >= limit for player in state.players)


def leaders(state: GameState) -> list[Player]:
    """Get the players with the lowest cumulative score."""
    if not state.players:
        return []
    best = min(player.score for player in state.players)
    return [player for player in state.players if player.score == best]
