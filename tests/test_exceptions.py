import pytest

from dominion.exceptions import (
    CardNotAvailable,
    DominionError,
    GameStateError,
    InsufficientFunds,
    InvalidCardAccess,
    InvalidCardType,
    InvalidRequest,
    LoggerError,
    NotYourTurn,
    OutOfActions,
    OutOfPhase,
    PlayerCountMismatch,
    SevereError,
    UnreachableCode,
    UnrecoverableError,
    WrongCardCount,
)


@pytest.mark.parametrize(
    "cls, message",
    [
        (LoggerError, "Exception in the Logger"),
        (GameStateError, "GameStateError"),
        (PlayerCountMismatch, "Wrong number of players."),
        (InsufficientFunds, "You don not have enough funds."),
        (CardNotAvailable, "Chosen card is not available."),
        (WrongCardCount, "Received wrong number of cards."),
        (OutOfActions, "You do not have enough actions."),
        (NotYourTurn, "It's not your turn."),
        (SevereError, "Severe Error!"),
        (UnreachableCode, "This should NEVER happen!"),
        (UnrecoverableError, "This is not recoverable, shutting down!"),
    ],
)
def test_default_messages(cls, message):
    error = cls()
    assert str(error) == message
    assert error.message == message


@pytest.mark.parametrize("cls", [OutOfPhase, InvalidCardAccess, InvalidCardType, InvalidRequest])
def test_empty_default_messages(cls):
    assert str(cls()) == ""


def test_custom_message_overrides_default():
    error = NotYourTurn("wait for player two")
    assert str(error) == "wait for player two"
    assert error.args == ("wait for player two",)


@pytest.mark.parametrize(
    "cls",
    [
        PlayerCountMismatch,
        InsufficientFunds,
        CardNotAvailable,
        WrongCardCount,
        OutOfActions,
        NotYourTurn,
        OutOfPhase,
        InvalidCardAccess,
        InvalidCardType,
        InvalidRequest,
    ],
)
def test_game_state_errors_are_caught_by_base(cls):
    error = cls("boom")
    with pytest.raises(GameStateError) as excinfo:
        raise error
    assert excinfo.value is error
    assert excinfo.value.message == "boom"


@pytest.mark.parametrize(
    "cls, message",
    [
        (UnreachableCode, "This should NEVER happen!"),
        (UnrecoverableError, "This is not recoverable, shutting down!"),
    ],
)
def test_severe_errors_hierarchy(cls, message):
    error = cls()
    assert error.message == message
    assert str(error) == message
    assert isinstance(error, SevereError)
    assert not isinstance(error, GameStateError)
    with pytest.raises(SevereError) as excinfo:
        raise error
    assert excinfo.value is error
    assert excinfo.value.message == message


def test_severe_error_custom_message():
    error = UnreachableCode("bad state")
    assert error.message == "bad state"
    assert str(error) == "bad state"
    assert isinstance(error, DominionError)


def test_logger_error_is_not_game_state_error():
    error = LoggerError("cannot open")
    assert isinstance(error, DominionError)
    assert not isinstance(error, GameStateError)
    assert error.message == "cannot open"