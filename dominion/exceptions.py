"""Exception hierarchy shared by the game, the lobby and the network layers."""

from __future__ import annotations

__all__ = [
    "DominionError",
    "LoggerError",
    "GameStateError",
    "PlayerCountMismatch",
    "InsufficientFunds",
    "CardNotAvailable",
    "WrongCardCount",
    "OutOfActions",
    "NotYourTurn",
    "OutOfPhase",
    "InvalidCardAccess",
    "InvalidCardType",
    "InvalidRequest",
    "SevereError",
    "UnreachableCode",
    "UnrecoverableError",
]


class DominionError(Exception):
    """Base class of every error raised by this package.

    Each subclass carries a default message that is used when none is given.
    """

    default_message = ""

    def __init__(self, message: str | None = None) -> None:
        self.message = self.default_message if message is None else message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class LoggerError(DominionError):
    """Raised when the logger is misused or cannot write its output."""

    default_message = "Exception in the Logger"


class GameStateError(DominionError):
    """Raised when a move does not fit the current state of the game."""

    default_message = "GameStateError"


class PlayerCountMismatch(GameStateError):
    default_message = "Wrong number of players."


class InsufficientFunds(GameStateError):
    default_message = "You don not have enough funds."


class CardNotAvailable(GameStateError):
    default_message = "Chosen card is not available."


class WrongCardCount(GameStateError):
    default_message = "Received wrong number of cards."


class OutOfActions(GameStateError):
    default_message = "You do not have enough actions."


class NotYourTurn(GameStateError):
    default_message = "It's not your turn."


class OutOfPhase(GameStateError):
    default_message = ""


class InvalidCardAccess(GameStateError):
    default_message = ""


class InvalidCardType(GameStateError):
    default_message = ""


class InvalidRequest(GameStateError):
    default_message = ""


class SevereError(DominionError):
    """Raised for conditions the program cannot sensibly continue from."""

    default_message = "Severe Error!"


class UnreachableCode(SevereError):
    default_message = "This should NEVER happen!"


class UnrecoverableError(SevereError):
    default_message = "This is not recoverable, shutting down!"