"""Errors raised when the turn protocol is broken.

Low-level primitives resolve edge cases to no-ops or ``None``; these errors
come from the protocol helpers and the session layer. Each carries an
``ErrorCode`` the presentation layer can translate.
"""

from enum import StrEnum


class ErrorCode(StrEnum):
    """Error codes for i18n translation on the frontend."""

    RULE_VIOLATION = "error.ruleViolation"

    # Setup errors
    INVALID_PLAYERS = "error.invalidPlayers"
    NOT_ENOUGH_CARDS = "error.notEnoughCards"

    # Turn errors
    NOT_YOUR_TURN = "error.notYourTurn"
    DRAW_PENDING = "error.drawPending"
    NO_PENDING_DRAW = "error.noPendingDraw"
    ROUND_OVER = "error.roundOver"
    ROUND_NOT_OVER = "error.roundNotOver"
    NO_ACTIVE_ROUND = "error.noActiveRound"
    GAME_OVER = "error.gameOver"

    # Card errors
    INVALID_INDEX = "error.invalidIndex"
    NOT_SPECIAL_CARD = "error.notSpecialCard"

    # Command errors
    UNKNOWN_COMMAND = "error.unknownCommand"
    MISSING_ARGUMENT = "error.missingArgument"


class DutchError(Exception):
    """Base error for rule violations."""

    code: ErrorCode = ErrorCode.RULE_VIOLATION

    def __init__(self, message: str, code: ErrorCode | None = None) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code


class NotEnoughCardsError(DutchError):
    code = ErrorCode.NOT_ENOUGH_CARDS


class NotYourTurnError(DutchError):
    code = ErrorCode.NOT_YOUR_TURN


class DrawPendingError(DutchError):
    """Raised when drawing while a drawn card is still unplaced."""

    code = ErrorCode.DRAW_PENDING


class NoPendingDrawError(DutchError):
    code = ErrorCode.NO_PENDING_DRAW


class RoundOverError(DutchError):
    code = ErrorCode.ROUND_OVER


class GameOverError(DutchError):
    code = ErrorCode.GAME_OVER


class InvalidIndexError(DutchError):
    code = ErrorCode.INVALID_INDEX


class NotSpecialCardError(DutchError):
    code = ErrorCode.NOT_SPECIAL_CARD
