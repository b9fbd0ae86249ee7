"""Game session: turn orchestration across rounds.

The session is what a presentation layer talks to. It owns the current
round's ``GameState``, checks who may act, and turns each intent into calls
on the rule engine.
"""

import random
from collections.abc import Callable, Sequence
from typing import Any

from dutch.config import Settings
from dutch.config import settings as default_settings
from dutch.engine.errors import (
    DrawPendingError,
    DutchError,
    ErrorCode,
    GameOverError,
    NotYourTurnError,
    RoundOverError,
)
from dutch.engine.round_setup import start_round
from dutch.engine.scoring import RoundResult, call_dutch, compute_scores, is_game_over, leaders
from dutch.engine.specials import Effect, resolve_drawn_special
from dutch.engine.turns import discard_drawn_card, place_drawn_card, take_card, validate_slot
from dutch.models.card import Card
from dutch.models.enums import Command
from dutch.models.game_state import GameState
from dutch.models.player import Player
from dutch.services.game_serializer import (
    GameStateInfo,
    serialize_effect,
    serialize_round_result,
    serialize_state,
)
from dutch.services.log_service import LogService


class GameSession:
    """A game of Dutch played over successive rounds.

    Attributes:
        player_names: Players in seating order
        state: Current round, None until ``start`` is called
        round_number: Rounds dealt so far
        last_result: Scoring of the most recent finished round

    """

    def __init__(
        self,
        player_names: Sequence[str] | None = None,
        *,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize a session. No cards are dealt until ``start``."""
        self.settings = settings or default_settings
        if player_names is None:
            player_names = self.settings.default_player_names
        self.player_names = list(player_names)
        self.rng = rng
        self.state: GameState | None = None
        self.round_number = 0
        self.last_result: RoundResult | None = None
        self.log_service = LogService()

    # ------------------------------------------------------------------
    # Rounds
    # ------------------------------------------------------------------

    def start(self) -> GameState:
        """Deal the first round, with every score at zero."""
        self.round_number = 0
        self.last_result = None
        return self._deal(scores=None)

    def next_round(self) -> GameState:
        """Deal a new round, carrying cumulative scores over.

        Raises:
            DutchError: If the current round has not been scored yet
            GameOverError: If a player has already reached the game-over score

        """
        state = self._require_state()
        if not state.round_ended:
            raise DutchError("Current round is still in progress", ErrorCode.ROUND_NOT_OVER)
        if self.is_game_over():
            raise GameOverError("Game is over")
        return self._deal(scores=[player.score for player in state.players])

    def _deal(self, scores: list[int] | None) -> GameState:
        self.state = start_round(
            self.player_names,
            hand_size=self.settings.hand_size,
            rng=self.rng,
            scores=scores,
        )
        self.round_number += 1
        self.log_service.info(
            {
                "event": "round_started",
                "round": self.round_number,
                "players": ",".join(self.player_names),
                "discard": str(self.state.top_discard()),
            }
        )
        return self.state

    # ------------------------------------------------------------------
    # Turn intents
    # ------------------------------------------------------------------

    def draw(self, player_idx: int, from_discard: bool = False) -> Card | None:
        """Draw from the deck or the discard pile.

        Returns:
            The drawn card, or None if the pile is empty

        """
        state = self._require_turn(player_idx)
        return take_card(state, from_discard)

    def discard_drawn(self, player_idx: int) -> Card:
        """Throw the drawn card onto the discard pile and end the turn."""
        state = self._require_turn(player_idx)
        card = discard_drawn_card(state)
        state.advance_turn()
        return card

    def exchange(self, player_idx: int, hand_idx: int) -> Card | None:
        """Swap the drawn card into one of the player's own slots and end the turn.

        Returns:
            The card that was replaced, now on the discard pile

        """
        state = self._require_turn(player_idx)
        old_card = place_drawn_card(state, hand_idx)
        state.advance_turn()
        return old_card

    def play_special(
        self,
        player_idx: int,
        hand_idx: int,
        target_player_idx: int | None = None,
        target_hand_idx: int | None = None,
    ) -> Effect:
        """Use the drawn special card, discard it and end the turn."""
        state = self._require_turn(player_idx)
        effect = resolve_drawn_special(state, hand_idx, target_player_idx, target_hand_idx)
        state.advance_turn()
        return effect

    def call_dutch(self, player_idx: int) -> RoundResult:
        """Call Dutch and score the round immediately.

        Raises:
            DrawPendingError: If the player still holds a drawn card

        """
        state = self._require_turn(player_idx)
        if state.pending_draw is not None:
            raise DrawPendingError("Place the drawn card before calling Dutch")

        call_dutch(state, player_idx)
        result = compute_scores(state, dutch_penalty=self.settings.dutch_penalty)
        self.last_result = result
        self.log_service.info(
            {
                "event": "dutch_called",
                "round": self.round_number,
                "caller": state.players[player_idx].name,
                "penalized": result.dutch_penalized,
                "scores": ",".join(str(p.score) for p in state.players),
            }
        )
        if self.is_game_over():
            self.log_service.info(
                {"event": "game_over", "winners": ",".join(p.name for p in self.winners())}
            )
        return result

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_game_over(self) -> bool:
        if self.state is None:
            return False
        return is_game_over(self.state, self.settings.game_over_score)

    def winners(self) -> list[Player]:
        """Get the lowest-scoring players once the game is over."""
        if self.state is None or not self.is_game_over():
            return []
        return leaders(self.state)

    def snapshot(self, viewer_idx: int | None = None) -> GameStateInfo:
        """Get a renderable view of the current round."""
        return serialize_state(self._require_state(), viewer_idx)

    # ------------------------------------------------------------------
    # Command dispatch
    # ------------------------------------------------------------------

    def handle_command(
        self, command: Command | str, player_idx: int, content: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Route a UI intent to the matching action.

        Args:
            command: Command type
            player_idx: Player issuing the command
            content: Command payload

        Returns:
            JSON-ready response payload

        Raises:
            DutchError: If the command is unknown or breaks the turn protocol

        """
        handlers: dict[Command, Callable[[int, dict[str, Any]], dict[str, Any]]] = {
            Command.DRAW: self._handle_draw,
            Command.DISCARD_DRAWN: self._handle_discard_drawn,
            Command.EXCHANGE: self._handle_exchange,
            Command.PLAY_SPECIAL: self._handle_play_special,
            Command.CALL_DUTCH: self._handle_call_dutch,
            Command.NEXT_ROUND: self._handle_next_round,
            Command.SYNC_STATE: self._handle_sync_state,
        }
        try:
            handler = handlers[Command(command)]
        except ValueError as e:
            self.log_service.warning({"event": "unknown_command", "command": command})
            raise DutchError(f"Unknown command: {command}", ErrorCode.UNKNOWN_COMMAND) from e
        return handler(player_idx, content or {})

    def _handle_draw(self, player_idx: int, content: dict[str, Any]) -> dict[str, Any]:
        card = self.draw(player_idx, _optional_bool(content, "from_discard"))
        return {"drawn": card is not None, "state": self.snapshot(player_idx).model_dump()}

    def _handle_discard_drawn(self, player_idx: int, _content: dict[str, Any]) -> dict[str, Any]:
        self.discard_drawn(player_idx)
        return {"state": self.snapshot(player_idx).model_dump()}

    def _handle_exchange(self, player_idx: int, content: dict[str, Any]) -> dict[str, Any]:
        self.exchange(player_idx, _require_int(content, "hand_idx"))
        return {"state": self.snapshot(player_idx).model_dump()}

    def _handle_play_special(self, player_idx: int, content: dict[str, Any]) -> dict[str, Any]:
        effect = self.play_special(
            player_idx,
            _require_int(content, "hand_idx"),
            _optional_int(content, "target_player_idx"),
            _optional_int(content, "target_hand_idx"),
        )
        return {
            "effect": serialize_effect(effect).model_dump(),
            "state": self.snapshot(player_idx).model_dump(),
        }

    def _handle_call_dutch(self, player_idx: int, _content: dict[str, Any]) -> dict[str, Any]:
        result = self.call_dutch(player_idx)
        state = self._require_state()
        return {
            "scores": [update.model_dump() for update in serialize_round_result(state, result)],
            "game_over": self.is_game_over(),
            "state": self.snapshot(player_idx).model_dump(),
        }

    def _handle_next_round(self, player_idx: int, _content: dict[str, Any]) -> dict[str, Any]:
        validate_slot(self._require_state(), player_idx)
        self.next_round()
        return {"round": self.round_number, "state": self.snapshot(player_idx).model_dump()}

    def _handle_sync_state(self, player_idx: int, _content: dict[str, Any]) -> dict[str, Any]:
        return {"state": self.snapshot(player_idx).model_dump()}

    # ------------------------------------------------------------------
    # Guards
    # ------------------------------------------------------------------

    def _require_state(self) -> GameState:
        if self.state is None:
            raise DutchError("No round has been dealt", ErrorCode.NO_ACTIVE_ROUND)
        return self.state

    def _require_turn(self, player_idx: int) -> GameState:
        state = self._require_state()
        validate_slot(state, player_idx)
        if state.round_ended:
            raise RoundOverError("Round is over")
        if player_idx != state.current_player:
            raise NotYourTurnError(f"It is {state.current().name}'s turn, not player {player_idx}'s")
        return state


def _require_int(content: dict[str, Any], key: str) -> int:
    value = content.get(key)
    if not isinstance(value, int):
        raise DutchError(f"Missing integer '{key}'", ErrorCode.MISSING_ARGUMENT)
    return value


def _optional_int(content: dict[str, Any], key: str) -> int | None:
    value = content.get(key)
    if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
        raise DutchError(f"'{key}' must be an integer", ErrorCode.MISSING_ARGUMENT)
    return value


def _optional_bool(content: dict[str, Any], key: str) -> bool:
    value = content.get(key, False)
    if not isinstance(value, bool):
        raise DutchError(f"'{key}' must be a boolean", ErrorCode.MISSING_ARGUMENT)
    return value
