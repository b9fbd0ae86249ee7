"""Round setup: shuffle, deal and seed the discard pile."""

import logging
import random
from collections.abc import Sequence

from dutch.config import settings
from dutch.constants import DECK_SIZE, DISCARD_SEED_COUNT
from dutch.engine.errors import DutchError, ErrorCode, NotEnoughCardsError
from dutch.models.card import create_deck
from dutch.models.deck import shuffle
from dutch.models.game_state import GameState
from dutch.models.player import Player

logger = logging.getLogger(__name__)


def start_round(
    player_names: Sequence[str],
    *,
    hand_size: int | None = None,
    rng: random.Random | None = None,
    scores: Sequence[int] | None = None,
) -> GameState:
    """Deal a new round.

    Slot ``i`` is dealt to every player before slot ``i + 1``, each card
    popped from the back of the shuffled deck. One more card seeds the
    discard pile.

    Args:
        player_names: Players in turn order
        hand_size: Slots per player, defaults to ``settings.hand_size``
        rng: Optional random generator for a reproducible shuffle
        scores: Cumulative scores carried over from previous rounds

    Returns:
        Fresh GameState with player 0 to play

    Raises:
        DutchError: If no player names are given
        NotEnoughCardsError: If the deck cannot cover every hand plus the seed

    """
    if not player_names:
        raise DutchError("At least one player is required", ErrorCode.INVALID_PLAYERS)
    if scores is not None and len(scores) != len(player_names):
        raise DutchError("One score per player is required", ErrorCode.INVALID_PLAYERS)

    size = hand_size if hand_size is not None else settings.hand_size
    needed = len(player_names) * size + DISCARD_SEED_COUNT
    if needed > DECK_SIZE:
        raise NotEnoughCardsError(
            f"{len(player_names)} players x {size} cards needs {needed} cards, deck has {DECK_SIZE}"
        )

    deck = shuffle(create_deck(), rng)
    players = [
        Player.with_empty_hand(name, size, score=scores[i] if scores is not None else 0)
        for i, name in enumerate(player_names)
    ]

    for slot in range(size):
        for player in players:
            player.hand[slot] = deck.pop()

    discard_pile = [deck.pop() for _ in range(DISCARD_SEED_COUNT)]

    logger.debug(
        "Dealt %d cards to %d players, discard seeded with %s, %d left in deck",
        size,
        len(players),
        discard_pile[-1],
        len(deck),
    )

    return GameState(players=players, deck=deck, discard_pile=discard_pile)
